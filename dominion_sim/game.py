"""Game state and the core rules: setup, drawing, buying, turns and scoring."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import IntEnum

from .cards import (
    COPPER_VALUE,
    GOLD_VALUE,
    HANDSIZE,
    MAX_PLAYERS,
    NUM_K_CARDS,
    NUM_TOTAL_K_CARDS,
    SILVER_VALUE,
    UNUSED,
    Card,
    Phase,
    get_cost,
)
from .rngs import RandomStreams

_TREASURE_VALUES = {
    Card.COPPER: COPPER_VALUE,
    Card.SILVER: SILVER_VALUE,
    Card.GOLD: GOLD_VALUE,
}

_VICTORY_POINTS = {
    Card.CURSE: -1,
    Card.ESTATE: 1,
    Card.DUCHY: 3,
    Card.PROVINCE: 6,
    Card.GREAT_HALL: 1,
}

_INVALID_SCORE = -9999
_GAME_OVER_PILES = 25


class GameError(Exception):
    """Raised when a game action is not allowed."""


class Destination(IntEnum):
    """Where a gained card goes."""

    DISCARD = 0
    DECK = 1
    HAND = 2


def _player_piles() -> list[list[int]]:
    return [[] for _ in range(MAX_PLAYERS)]


@dataclass
class GameState:
    """Complete state of one game.

    Each player's hand, deck and discard pile are lists; the top of the deck
    is the end of its list.
    """

    num_players: int = 0
    supply: list[int] = field(default_factory=lambda: [0] * NUM_TOTAL_K_CARDS)
    embargo_tokens: list[int] = field(
        default_factory=lambda: [0] * NUM_TOTAL_K_CARDS
    )
    outpost_played: int = 0
    outpost_turn: int = 0
    whose_turn: int = 0
    phase: int = Phase.ACTION
    num_actions: int = 0
    coins: int = 0
    num_buys: int = 0
    hand: list[list[int]] = field(default_factory=_player_piles)
    deck: list[list[int]] = field(default_factory=_player_piles)
    discard: list[list[int]] = field(default_factory=_player_piles)
    played_cards: list[int] = field(default_factory=list)
    rng: RandomStreams = field(default_factory=RandomStreams, repr=False)

    @classmethod
    def initialize(cls, num_players: int, kingdom: Iterable[int], seed: int) -> GameState:
        """Set up a new game with the given kingdom cards and random seed."""
        state = cls()
        state.rng.select_stream(1)
        state.rng.put_seed(seed)

        if not 2 <= num_players <= MAX_PLAYERS:
            raise GameError(f"invalid number of players: {num_players}")
        kingdom = list(kingdom)
        if len(set(kingdom)) != len(kingdom):
            raise GameError("kingdom cards must all be different")
        state.num_players = num_players

        supply = state.supply
        supply[Card.CURSE] = {2: 10, 3: 20}.get(num_players, 30)
        victory = 8 if num_players == 2 else 12
        for card in (Card.ESTATE, Card.DUCHY, Card.PROVINCE):
            supply[card] = victory
        supply[Card.COPPER] = 60 - 7 * num_players
        supply[Card.SILVER] = 40
        supply[Card.GOLD] = 30

        for card in range(Card.ADVENTURER, Card.TREASURE_MAP + 1):
            if card not in kingdom:
                supply[card] = UNUSED
            elif card in (Card.GREAT_HALL, Card.GARDENS):
                supply[card] = victory
            else:
                supply[card] = 10

        for player in range(num_players):
            state.deck[player] = [int(Card.ESTATE)] * 3 + [int(Card.COPPER)] * 7
        for player in range(num_players):
            state.shuffle(player)
        for player in range(num_players):
            state.hand[player] = []
            state.discard[player] = []

        state.embargo_tokens = [0] * NUM_TOTAL_K_CARDS
        state.outpost_played = 0
        state.phase = Phase.ACTION
        state.num_actions = 1
        state.num_buys = 1
        state.played_cards = []
        state.whose_turn = 0
        for _ in range(HANDSIZE):
            state.draw_card(state.whose_turn)
        state.update_coins(state.whose_turn, 0)
        return state

    def shuffle(self, player: int) -> None:
        """Shuffle a player's deck deterministically from the game's generator."""
        deck = self.deck[player]
        if not deck:
            raise GameError(f"player {player} has no cards to shuffle")
        deck.sort()
        shuffled = []
        while deck:
            shuffled.append(deck.pop(int(self.rng.random() * len(deck))))
        self.deck[player] = shuffled

    def draw_card(self, player: int) -> int | None:
        """Move the top deck card to the hand and return it.

        An empty deck is first refilled from the shuffled discard pile.
        Returns None when there is nothing left to draw.
        """
        if not self.deck[player]:
            self.deck[player] = self.discard[player]
            self.discard[player] = []
            if not self.deck[player]:
                return None
            self.shuffle(player)
        card = self.deck[player].pop()
        self.hand[player].append(card)
        return card

    def buy_card(self, card: int) -> None:
        """Buy a card from the supply for the current player."""
        if self.num_buys < 1:
            raise GameError("no buys left")
        if self.supply_count(card) < 1:
            raise GameError(f"no cards of type {card} left")
        if self.coins < get_cost(card):
            raise GameError(f"not enough coins: {self.coins}")
        self.phase = Phase.BUY
        self.gain_card(card, self.whose_turn, Destination.DISCARD)
        self.coins -= get_cost(card)
        self.num_buys -= 1

    def num_hand_cards(self) -> int:
        """Number of cards in the current player's hand."""
        return len(self.hand[self.whose_turn])

    def hand_card(self, hand_pos: int) -> int:
        """The card at a position in the current player's hand."""
        hand = self.hand[self.whose_turn]
        if not 0 <= hand_pos < len(hand):
            raise GameError(f"no card at hand position {hand_pos}")
        return hand[hand_pos]

    def supply_count(self, card: int) -> int:
        """Cards of a type left in the supply; -1 when not in this game."""
        if not 0 <= card < len(self.supply):
            raise GameError(f"unknown card {card}")
        return self.supply[card]

    def full_deck_count(self, player: int, card: int) -> int:
        """Copies of a card across a player's deck, hand and discard pile."""
        return (
            self.deck[player].count(card)
            + self.hand[player].count(card)
            + self.discard[player].count(card)
        )

    def end_turn(self) -> None:
        """Discard the current hand, pass the turn and draw the next hand."""
        current = self.whose_turn
        self.discard[current].extend(self.hand[current])
        self.hand[current] = []

        self.whose_turn = current + 1 if current < self.num_players - 1 else 0
        self.outpost_played = 0
        self.phase = Phase.ACTION
        self.num_actions = 1
        self.coins = 0
        self.num_buys = 1
        self.played_cards = []
        self.hand[self.whose_turn] = []
        for _ in range(HANDSIZE):
            self.draw_card(self.whose_turn)
        self.update_coins(self.whose_turn, 0)

    def is_game_over(self) -> bool:
        """True when Provinces or any three of the first 25 piles are gone."""
        if self.supply[Card.PROVINCE] == 0:
            return True
        empty = sum(1 for count in self.supply[:_GAME_OVER_PILES] if count == 0)
        return empty >= 3

    def _card_points(self, player: int, card: int) -> int:
        if card == Card.GARDENS:
            return self.full_deck_count(player, Card.CURSE) // 10
        return _VICTORY_POINTS.get(card, 0)

    def score_for(self, player: int) -> int:
        """Victory points held by a player."""
        discard_count = len(self.discard[player])
        counted = (
            self.hand[player]
            + self.discard[player]
            + self.deck[player][:discard_count]
        )
        return sum(self._card_points(player, card) for card in counted)

    def winners(self) -> list[int]:
        """Indices of the winning players; ties favour those with fewer turns."""
        scores = [
            self.score_for(i) if i < self.num_players else _INVALID_SCORE
            for i in range(MAX_PLAYERS)
        ]
        high = max(scores)
        scores = [
            score + 1 if score == high and i > self.whose_turn else score
            for i, score in enumerate(scores)
        ]
        high = max(scores)
        return [i for i, score in enumerate(scores) if score == high]

    def discard_card(self, hand_pos: int, player: int, trash: bool) -> None:
        """Remove a card from a hand, onto the played pile unless trashed.

        The last card in the hand fills the freed position.
        """
        hand = self.hand[player]
        if hand_pos < 0 or not hand:
            raise GameError(f"cannot discard hand position {hand_pos}")
        card = hand[hand_pos] if hand_pos < len(hand) else UNUSED
        if not trash:
            self.played_cards.append(card)
        last = hand.pop()
        if hand_pos < len(hand):
            hand[hand_pos] = last

    def gain_card(self, card: int, player: int, destination: int) -> None:
        """Take a card from the supply into a player's deck, hand or discard."""
        if self.supply_count(card) < 1:
            raise GameError(f"no cards of type {card} to gain")
        if destination == Destination.DECK:
            self.deck[player].append(card)
        elif destination == Destination.HAND:
            self.hand[player].append(card)
        else:
            self.discard[player].append(card)
        self.supply[card] -= 1

    def update_coins(self, player: int, bonus: int) -> None:
        """Set coins to the treasure in a player's hand plus a bonus."""
        self.coins = (
            sum(_TREASURE_VALUES.get(card, 0) for card in self.hand[player]) + bonus
        )


def kingdom_cards(*args: int) -> list[int]:
    """Collect the ten kingdom cards for a game."""
    if len(args) != NUM_K_CARDS:
        raise GameError(f"expected {NUM_K_CARDS} kingdom cards, got {len(args)}")
    return list(args)