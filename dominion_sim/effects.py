"""Action card effects and playing a card from the current player's hand."""

from __future__ import annotations

from collections.abc import Callable
from contextlib import suppress
from typing import NamedTuple

from .cards import UNUSED, Card, Phase, get_cost, is_treasure, is_victory
from .game import Destination, GameError, GameState

_ACTION_CARDS = range(Card.ADVENTURER, Card.TREASURE_MAP + 1)


class _Play(NamedTuple):
    player: int
    next_player: int
    choice1: int
    choice2: int
    choice3: int
    hand_pos: int


def _hand_at(state: GameState, player: int, pos: int) -> int:
    hand = state.hand[player]
    if not 0 <= pos < len(hand):
        raise GameError(f"no card at hand position {pos}")
    return hand[pos]


def _slot(hand: list[int], pos: int) -> int:
    return hand[pos] if 0 <= pos < len(hand) else UNUSED


def _gain_if_available(
    state: GameState, card: int, player: int, destination: Destination
) -> bool:
    try:
        state.gain_card(card, player, destination)
    except GameError:
        return False
    return True


def play_card(
    state: GameState,
    hand_pos: int,
    choice1: int = UNUSED,
    choice2: int = UNUSED,
    choice3: int = UNUSED,
) -> None:
    """Play the action card at ``hand_pos`` from the current player's hand."""
    if state.phase != Phase.ACTION:
        raise GameError("cards can only be played in the action phase")
    if state.num_actions < 1:
        raise GameError("no actions left")
    card = state.hand_card(hand_pos)
    if card not in _ACTION_CARDS:
        raise GameError(f"card {card} is not an action card")
    card_effect(state, card, choice1, choice2, choice3, hand_pos)
    state.num_actions -= 1
    state.update_coins(state.whose_turn, 0)


def card_effect(
    state: GameState,
    card: int,
    choice1: int,
    choice2: int,
    choice3: int,
    hand_pos: int,
) -> None:
    """Apply the effect of ``card`` for the current player."""
    player = state.whose_turn
    next_player = player + 1 if player < state.num_players - 1 else 0
    handler = _EFFECTS.get(card)
    if handler is None:
        raise GameError(f"card {card} has no effect to play")
    handler(state, _Play(player, next_player, choice1, choice2, choice3, hand_pos))


def baron_effect(state: GameState, discard_estate: int, player: int) -> None:
    """+1 buy; discard an Estate from hand, or else gain one."""
    state.num_buys += 1
    if discard_estate and Card.ESTATE in state.hand[player]:
        # The Estate's card number is what selects the hand position here.
        state.discard_card(int(Card.ESTATE), player, False)
        return
    if not _gain_if_available(state, Card.ESTATE, player, Destination.DISCARD):
        print("Sorry, no more estate cards!")


def minion_effect(state: GameState, choice: int, player: int, hand_pos: int) -> None:
    """+1 action; with choice 2 every big hand is discarded and redrawn."""
    state.num_actions += 1
    state.discard_card(hand_pos, player, False)
    if choice != 2:
        return
    while state.hand[player]:
        state.discard_card(hand_pos, player, False)
    for _ in range(4):
        state.draw_card(player)
    for other in range(state.num_players):
        if other == player or len(state.hand[other]) <= 4:
            continue
        while state.hand[other]:
            state.discard_card(hand_pos, other, False)
        for drawer in range(4):
            state.draw_card(drawer)


def ambassador_check(
    state: GameState,
    card_choice: int,
    return_to_supply: int,
    player: int,
    hand_pos: int,
) -> None:
    """Raise GameError when the Ambassador choices are not allowed."""
    if card_choice == hand_pos:
        raise GameError("the revealed card cannot be the Ambassador itself")
    if not 0 <= return_to_supply <= 2:
        raise GameError(f"cannot return {return_to_supply} cards to the supply")
    matches = sum(1 for card in state.hand[player] if card == card_choice)
    if matches < return_to_supply:
        raise GameError("not enough matching cards in hand")


def ambassador_effect(
    state: GameState,
    card_choice: int,
    return_to_supply: int,
    player: int,
    hand_pos: int,
) -> None:
    """Reveal a card, return copies to the supply; every other player gains one."""
    ambassador_check(state, card_choice, return_to_supply, player, hand_pos)
    revealed = _hand_at(state, player, card_choice)
    print(f"Player {player} reveals card number: {revealed}")

    state.supply_count(revealed)
    state.supply[revealed] += return_to_supply
    for other in range(state.num_players):
        if other != player:
            _gain_if_available(state, revealed, other, Destination.DISCARD)

    state.discard_card(hand_pos, player, False)

    hand = state.hand[player]
    for _ in range(return_to_supply):
        i = 0
        while i < len(hand):
            if hand[i] == _slot(hand, card_choice):
                state.discard_card(i, player, True)
            i += 1


def tribute_effect(state: GameState, player: int, next_player: int) -> list[int]:
    """Reveal the next player's top two cards and reward each distinct one.

    Returns the revealed cards; a duplicate or a missing card is UNUSED.
    """
    if not state.deck[next_player]:
        state.deck[next_player] = state.discard[next_player]
        state.discard[next_player] = []
        if state.deck[next_player]:
            state.shuffle(next_player)
    deck = state.deck[next_player]
    revealed = [deck.pop() if deck else UNUSED for _ in range(2)]

    if revealed[0] == revealed[1]:
        state.played_cards.append(revealed[1])
        revealed[1] = UNUSED

    for card in revealed:
        if is_treasure(card):
            state.coins += 2
        elif is_victory(card):
            state.draw_card(player)
            state.draw_card(player)
        else:
            state.num_actions += 2
    return revealed


def mine_effect(
    state: GameState,
    player: int,
    trash_pos: int,
    upgrade_card: int,
    hand_pos: int,
) -> None:
    """Trash a treasure from hand and gain a better card into the hand."""
    trashed = _hand_at(state, player, trash_pos)
    if not Card.COPPER <= trashed <= Card.GOLD:
        raise GameError("only a treasure can be trashed")
    if upgrade_card > Card.COPPER:
        raise GameError(f"cannot gain card {upgrade_card}")
    if get_cost(trashed) + 3 > get_cost(upgrade_card):
        raise GameError("the gained card is too cheap")

    _gain_if_available(state, upgrade_card, player, Destination.HAND)
    state.discard_card(hand_pos, player, False)

    hand = state.hand[player]
    match = next((i for i, card in enumerate(hand) if card == trash_pos), None)
    if match is not None:
        state.discard_card(match, player, True)


def _adventurer(state: GameState, p: _Play) -> None:
    drawn_treasure = 0
    set_aside: list[int] = []
    while drawn_treasure < 2:
        card = state.draw_card(p.player)
        if card is None:
            break
        if is_treasure(card):
            drawn_treasure += 1
        else:
            set_aside.append(state.hand[p.player].pop())
    state.discard[p.player].extend(reversed(set_aside))


def _council_room(state: GameState, p: _Play) -> None:
    for _ in range(4):
        state.draw_card(p.player)
    state.num_buys += 1
    for other in range(state.num_players):
        if other != p.player:
            state.draw_card(other)
    state.discard_card(p.hand_pos, p.player, False)


def _feast(state: GameState, p: _Play) -> None:
    saved = state.hand[p.player]
    state.hand[p.player] = [UNUSED] * len(saved)
    try:
        state.update_coins(p.player, 5)
        if state.supply_count(p.choice1) <= 0:
            raise GameError("None of that card left, sorry!")
        if state.coins < get_cost(p.choice1):
            raise GameError("That card is too expensive!")
        state.gain_card(p.choice1, p.player, Destination.DISCARD)
    finally:
        state.hand[p.player] = saved


def _gardens(state: GameState, p: _Play) -> None:
    raise GameError("Gardens cannot be played")


def _mine(state: GameState, p: _Play) -> None:
    with suppress(GameError):
        mine_effect(state, p.player, p.choice1, p.choice2, p.hand_pos)


def _remodel(state: GameState, p: _Play) -> None:
    trashed = _hand_at(state, p.player, p.choice1)
    if get_cost(trashed) + 2 > get_cost(p.choice2):
        raise GameError("the gained card costs too much")
    _gain_if_available(state, p.choice2, p.player, Destination.DISCARD)
    state.discard_card(p.hand_pos, p.player, False)
    hand = state.hand[p.player]
    if trashed in hand:
        state.discard_card(hand.index(trashed), p.player, False)


def _smithy(state: GameState, p: _Play) -> None:
    for _ in range(3):
        state.draw_card(p.player)
    state.discard_card(p.hand_pos, p.player, False)


def _village(state: GameState, p: _Play) -> None:
    state.draw_card(p.player)
    state.num_actions += 2
    state.discard_card(p.hand_pos, p.player, False)


def _baron(state: GameState, p: _Play) -> None:
    baron_effect(state, p.choice1, p.player)


def _great_hall(state: GameState, p: _Play) -> None:
    state.draw_card(p.player)
    state.num_actions += 1
    state.discard_card(p.hand_pos, p.player, False)


def _minion(state: GameState, p: _Play) -> None:
    minion_effect(state, p.choice1, p.player, p.hand_pos)


def _steward(state: GameState, p: _Play) -> None:
    if p.choice1 == 1:
        state.draw_card(p.player)
        state.draw_card(p.player)
    elif p.choice1 == 2:
        state.coins += 2
    else:
        state.discard_card(p.choice2, p.player, True)
        state.discard_card(p.choice3, p.player, True)
    state.discard_card(p.hand_pos, p.player, False)


def _tribute(state: GameState, p: _Play) -> None:
    tribute_effect(state, p.player, p.next_player)


def _ambassador(state: GameState, p: _Play) -> None:
    with suppress(GameError):
        ambassador_effect(state, p.choice1, p.choice2, p.player, p.hand_pos)


def _cutpurse(state: GameState, p: _Play) -> None:
    state.update_coins(p.player, 2)
    for other in range(state.num_players):
        if other == p.player:
            continue
        hand = state.hand[other]
        if Card.COPPER in hand:
            state.discard_card(hand.index(Card.COPPER), other, False)
    state.discard_card(p.hand_pos, p.player, False)


def _embargo(state: GameState, p: _Play) -> None:
    state.coins += 2
    if state.supply_count(p.choice1) == UNUSED:
        raise GameError(f"card {p.choice1} is not in this game")
    state.embargo_tokens[p.choice1] += 1
    state.discard_card(p.hand_pos, p.player, True)


def _outpost(state: GameState, p: _Play) -> None:
    state.outpost_played += 1
    state.discard_card(p.hand_pos, p.player, False)


def _salvager(state: GameState, p: _Play) -> None:
    state.num_buys += 1
    if p.choice1:
        state.coins += get_cost(state.hand_card(p.choice1))
        state.discard_card(p.choice1, p.player, True)
    state.discard_card(p.hand_pos, p.player, False)


def _sea_hag(state: GameState, p: _Play) -> None:
    for other in range(state.num_players):
        if other == p.player:
            continue
        deck = state.deck[other]
        if deck:
            state.discard[other].append(deck.pop())
        deck.append(int(Card.CURSE))


def _treasure_map(state: GameState, p: _Play) -> None:
    hand = state.hand[p.player]
    index = next(
        (
            i
            for i, card in enumerate(hand)
            if card == Card.TREASURE_MAP and i != p.hand_pos
        ),
        None,
    )
    if index is None:
        raise GameError("no second Treasure Map in hand")
    state.discard_card(p.hand_pos, p.player, True)
    state.discard_card(index, p.player, True)
    for _ in range(4):
        _gain_if_available(state, Card.GOLD, p.player, Destination.DECK)


_EFFECTS: dict[int, Callable[[GameState, _Play], None]] = {
    Card.ADVENTURER: _adventurer,
    Card.COUNCIL_ROOM: _council_room,
    Card.FEAST: _feast,
    Card.GARDENS: _gardens,
    Card.MINE: _mine,
    Card.REMODEL: _remodel,
    Card.SMITHY: _smithy,
    Card.VILLAGE: _village,
    Card.BARON: _baron,
    Card.GREAT_HALL: _great_hall,
    Card.MINION: _minion,
    Card.STEWARD: _steward,
    Card.TRIBUTE: _tribute,
    Card.AMBASSADOR: _ambassador,
    Card.CUTPURSE: _cutpurse,
    Card.EMBARGO: _embargo,
    Card.OUTPOST: _outpost,
    Card.SALVAGER: _salvager,
    Card.SEA_HAG: _sea_hag,
    Card.TREASURE_MAP: _treasure_map,
}