"""A scripted two-player game: a Smithy strategy against an Adventurer one."""

from __future__ import annotations

import re
import sys
from contextlib import suppress
from typing import TextIO

from .cards import Card
from .effects import play_card
from .game import GameError, GameState

KINGDOM = (
    Card.ADVENTURER,
    Card.GARDENS,
    Card.EMBARGO,
    Card.VILLAGE,
    Card.MINION,
    Card.MINE,
    Card.CUTPURSE,
    Card.SEA_HAG,
    Card.TRIBUTE,
    Card.SMITHY,
)

_MONEY = {Card.COPPER: 1, Card.SILVER: 2, Card.GOLD: 3}


def _try(action, *args) -> None:
    with suppress(GameError):
        action(*args)


def _play_treasures(state: GameState) -> int:
    """Try to play every treasure in hand and return the money they are worth."""
    money = 0
    i = 0
    while i < state.num_hand_cards():
        card = state.hand_card(i)
        if card in _MONEY:
            _try(play_card, state, i)
            money += _MONEY[card]
        i += 1
    return money


def play_game(seed: int, out: TextIO | None = None) -> tuple[int, int]:
    """Play the scripted game to its end and return both players' scores."""
    out = sys.stdout if out is None else out
    out.write("Starting game.\n")
    state = GameState.initialize(2, KINGDOM, seed)

    num_smithies = 0
    num_adventurers = 0

    while not state.is_game_over():
        money = 0
        smithy_pos = -1
        adventurer_pos = -1
        for i, card in enumerate(state.hand[state.whose_turn]):
            if card in _MONEY:
                money += _MONEY[card]
            elif card == Card.SMITHY:
                smithy_pos = i
            elif card == Card.ADVENTURER:
                adventurer_pos = i

        if state.whose_turn == 0:
            if smithy_pos != -1:
                out.write(f"0: smithy played from position {smithy_pos}\n")
                _try(play_card, state, smithy_pos)
                out.write("smithy played.\n")
                money = _play_treasures(state)

            if money >= 8:
                out.write("0: bought province\n")
                _try(state.buy_card, Card.PROVINCE)
            elif money >= 6:
                out.write("0: bought gold\n")
                _try(state.buy_card, Card.GOLD)
            elif money >= 4 and num_smithies < 2:
                out.write("0: bought smithy\n")
                _try(state.buy_card, Card.SMITHY)
                num_smithies += 1
            elif money >= 3:
                out.write("0: bought silver\n")
                _try(state.buy_card, Card.SILVER)

            out.write("0: end turn\n")
            state.end_turn()
        else:
            if adventurer_pos != -1:
                out.write(f"1: adventurer played from position {adventurer_pos}\n")
                _try(play_card, state, adventurer_pos)
                money = _play_treasures(state)

            if money >= 8:
                out.write("1: bought province\n")
                _try(state.buy_card, Card.PROVINCE)
            elif money >= 6 and num_adventurers < 2:
                out.write("1: bought adventurer\n")
                _try(state.buy_card, Card.ADVENTURER)
                num_adventurers += 1
            elif money >= 6:
                out.write("1: bought gold\n")
                _try(state.buy_card, Card.GOLD)
            elif money >= 3:
                out.write("1: bought silver\n")
                _try(state.buy_card, Card.SILVER)
            out.write("1: endTurn\n")
            state.end_turn()

    scores = (state.score_for(0), state.score_for(1))
    out.write("Finished game.\n")
    out.write(f"Player 0: {scores[0]}\nPlayer 1: {scores[1]}\n")
    return scores


def _leading_int(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Run the scripted game with the seed given as the first argument."""
    args = sys.argv[1:] if argv is None else argv
    if not args:
        print("Usage: playdom [integer random number seed]", file=sys.stderr)
        return 2
    play_game(_leading_int(args[0]))
    return 0


if __name__ == "__main__":
    sys.exit(main())