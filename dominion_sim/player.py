"""Interactive command shell for playing a game against people or bots."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from typing import TextIO

from .cards import MAX_PLAYERS, UNUSED, card_name
from .effects import play_card
from .game import GameError, GameState
from .interface import (
    add_card_to_hand,
    execute_bot_turn,
    format_deck,
    format_discard,
    format_hand,
    format_played,
    format_scores,
    format_status,
    format_supply,
    help_text,
)
from .playdom import KINGDOM

_USAGE = "Usage: player [integer random number seed]\n"
_COMMAND_WIDTH = 4
_MAX_ARGS = 4
_INT_PREFIX = re.compile(r"[+-]?\d+")


def _matches(command: str, name: str) -> bool:
    """Compare at most the first four characters, terminator included."""
    if len(name) >= _COMMAND_WIDTH:
        return command[:_COMMAND_WIDTH] == name[:_COMMAND_WIDTH]
    return command == name


def _parse(line: str) -> tuple[str, list[int]]:
    """Split a line into its command and up to four leading integer arguments."""
    tokens = line.split()
    if not tokens:
        return "", [UNUSED] * _MAX_ARGS
    args: list[int] = []
    for token in tokens[1 : 1 + _MAX_ARGS]:
        match = _INT_PREFIX.match(token)
        if match is None:
            break
        args.append(int(match.group()))
        if match.end() != len(token):
            break
    args.extend([UNUSED] * (_MAX_ARGS - len(args)))
    return tokens[0], args


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


class Shell:
    """A command interpreter driving one game.

    A two-player game is set up at once; the ``init`` command starts a new
    game with a chosen number of players and bots.
    """

    def __init__(self, seed: int, out: TextIO | None = None) -> None:
        self.seed = seed
        self.out = sys.stdout if out is None else out
        self.state = GameState.initialize(2, KINGDOM, seed)
        self.is_bot = [False] * MAX_PLAYERS
        self.game_started = False
        self.turn_number = 0

    def _write(self, text: str) -> None:
        self.out.write(text)

    def _finish_if_over(self) -> bool:
        """Report the final result once a started game is over."""
        state = self.state
        if not (self.game_started and state.is_game_over()):
            return False
        self._write(format_scores(state))
        winners = state.winners()
        self._write(f"After {self.turn_number} turns, the winner(s) are:\n")
        for player in winners:
            if player < state.num_players:
                self._write(f"Player {player}\n")
        for player in range(state.num_players):
            self._write(format_hand(state, player))
            self._write(format_played(state, player))
            self._write(format_discard(state, player))
            self._write(format_deck(state, player))
        return True

    def execute(self, line: str) -> bool:
        """Carry out one command line; return False when the session ends."""
        command, (arg0, arg1, arg2, arg3) = _parse(line)
        state = self.state
        current = state.whose_turn

        if _matches(command, "add"):
            try:
                add_card_to_hand(state, current, arg0)
            except GameError:
                pass
            self._write(f"Player {current} adds {card_name(arg0)} to their hand\n\n")
        elif _matches(command, "buy"):
            name = card_name(arg0)
            try:
                state.buy_card(arg0)
            except GameError:
                self._write(f"Player {current} cannot buy card {arg0}, {name}\n\n")
            else:
                self._write(f"Player {current} buys card {arg0}, {name}\n\n")
        elif _matches(command, "end"):
            if self.game_started:
                if current == state.num_players - 1:
                    self.turn_number += 1
                state.end_turn()
                self._write(
                    f"Player {state.whose_turn}'s turn number {self.turn_number}\n\n"
                )
        elif _matches(command, "exit"):
            return False
        elif _matches(command, "help"):
            self._write(help_text())
        elif _matches(command, "init"):
            for player in range(arg0 - arg1, arg0):
                if 0 <= player < MAX_PLAYERS:
                    self.is_bot[player] = True
            try:
                new_state = GameState.initialize(arg0, KINGDOM, self.seed)
            except GameError:
                self._write("\n")
            else:
                self.state = new_state
                self._write("\n")
                self.game_started = True
                self._write(
                    f"Player {new_state.whose_turn}'s turn number "
                    f"{self.turn_number}\n\n"
                )
        elif _matches(command, "num"):
            self._write(f"There are {state.num_hand_cards()} cards in your hand.\n")
        elif _matches(command, "play"):
            try:
                card = state.hand_card(arg0)
            except GameError:
                card = UNUSED
            try:
                play_card(state, arg0, arg1, arg2, arg3)
            except GameError:
                self._write(f"Player {current} cannot play card {arg0}\n\n")
            else:
                self._write(f"Player {current} plays {card_name(card)}\n\n")
        elif _matches(command, "resi"):
            state.end_turn()
            self._write(format_scores(state))
            return False
        elif _matches(command, "show"):
            if self.game_started:
                self._write(format_hand(state, current))
                self._write(format_played(state, current))
        elif _matches(command, "stat"):
            if self.game_started:
                self._write(format_status(state))
        elif _matches(command, "supp"):
            self._write(format_supply(state))
        elif _matches(command, "whos"):
            self._write(f"Player {state.whose_turn}'s turn\n")
        return True

    def run(self, lines: Iterable[str]) -> None:
        """Read commands until the game ends, a command quits or input runs out."""
        source = iter(lines)
        while True:
            if self._finish_if_over():
                return
            current = self.state.whose_turn
            if self.is_bot[current]:
                self.turn_number = execute_bot_turn(
                    self.state, current, self.turn_number, self.out
                )
                continue
            self._write("$ ")
            line = next(source, None)
            if line is None:
                return
            if not self.execute(line):
                return


def main(argv: list[str] | None = None) -> int:
    """Start an interactive session with the seed given as the only argument."""
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1 or _leading_int(args[0]) <= 0:
        sys.stdout.write(_USAGE)
        return 0
    shell = Shell(_leading_int(args[0]))
    sys.stdout.write('Please enter a command or "help" for commands\n')
    shell.run(sys.stdin)
    return 0


if __name__ == "__main__":
    sys.exit(main())