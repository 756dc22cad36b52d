import io

import pytest

from dominion_sim.cards import (
    COPPER_VALUE,
    GOLD_VALUE,
    NUM_K_CARDS,
    NUM_TOTAL_K_CARDS,
    SILVER_VALUE,
    Card,
    card_name,
)
from dominion_sim.game import GameError, GameState
from dominion_sim.interface import (
    add_card_to_hand,
    count_hand_coins,
    execute_bot_turn,
    format_deck,
    format_discard,
    format_hand,
    format_played,
    format_scores,
    format_status,
    format_supply,
    help_text,
    select_kingdom_cards,
)

KINGDOM = [
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
]


@pytest.fixture
def game():
    return GameState.initialize(2, KINGDOM, 1)


def test_empty_hand_has_no_header():
    state = GameState()
    assert format_hand(state, 1) == "Player 1's hand:\n\n"


def test_hand_listing():
    state = GameState()
    state.hand[0] = [int(Card.COPPER), int(Card.GREAT_HALL)]
    lines = format_hand(state, 0).splitlines()
    assert lines[1] == "#  Card"
    assert lines[2].split() == ["0", "Copper"]
    assert lines[3].split() == ["1", "Great", "Hall"]
    assert len(lines) == 5


def test_deck_and_discard_listings(game):
    deck_lines = format_deck(game, 0).splitlines()
    assert len(deck_lines) == 2 + len(game.deck[0]) + 1
    game.discard[0] = [int(Card.ESTATE)]
    discard_lines = format_discard(game, 0).splitlines()
    assert discard_lines[0] == "Player 0's discard: "
    assert discard_lines[2].endswith(" ")
    assert card_name(Card.ESTATE) in discard_lines[2]


def test_played_listing_uses_played_pile():
    state = GameState()
    state.played_cards = [int(Card.SMITHY)]
    lines = format_played(state, 0).splitlines()
    assert lines[0] == "Player 0's played cards: "
    assert lines[2].split() == ["0", "Smithy"]


def test_supply_lists_only_cards_in_game(game):
    text = format_supply(game)
    lines = text.splitlines()
    assert lines[0] == "#   Card          Cost   Copies"
    listed = lines[1:-1]
    assert len(listed) == 7 + NUM_K_CARDS
    assert any("Adventurer" in line for line in listed)
    assert not any("Feast" in line for line in listed)


def test_status(game):
    lines = format_status(game).splitlines()
    assert lines[0] == "Player 0:"
    assert lines[1] == "Action phase"
    assert lines[2] == f"{game.num_actions} actions"
    assert lines[3] == f"{game.coins} coins"


def test_scores(game):
    lines = format_scores(game).splitlines()
    assert len(lines) == game.num_players
    for player, line in enumerate(lines):
        assert line == f"Player {player} has a score of {game.score_for(player)}"


def test_help_text_lists_commands():
    text = help_text()
    assert text.startswith("Commands are:")
    for command in ("add", "buy", "end", "init", "num", "play", "resign",
                    "show", "stat", "supp", "whos", "exit"):
        assert f"  {command}" in text


def test_add_card_to_hand():
    state = GameState()
    add_card_to_hand(state, 0, Card.SMITHY)
    assert state.hand[0] == [Card.SMITHY]
    with pytest.raises(GameError):
        add_card_to_hand(state, 0, Card.GOLD)
    with pytest.raises(GameError):
        add_card_to_hand(state, 0, NUM_TOTAL_K_CARDS)
    assert len(state.hand[0]) == 1


def test_select_kingdom_cards():
    cards = select_kingdom_cards(5)
    assert len(cards) == NUM_K_CARDS
    assert len(set(cards)) == NUM_K_CARDS
    assert all(Card.ADVENTURER <= c < NUM_TOTAL_K_CARDS for c in cards)
    assert select_kingdom_cards(5) == cards


def test_count_hand_coins():
    state = GameState()
    state.hand[1] = [int(Card.COPPER), int(Card.SILVER), int(Card.GOLD),
                     int(Card.ESTATE)]
    assert count_hand_coins(state, 1) == COPPER_VALUE + SILVER_VALUE + GOLD_VALUE


def test_bot_turn_passes_turn(game):
    out = io.StringIO()
    turn = execute_bot_turn(game, 0, 0, out)
    assert turn == 0
    assert game.whose_turn == 1
    assert "Executing Bot Player 0 Turn Number 0" in out.getvalue()
    turn = execute_bot_turn(game, 1, turn, out)
    assert turn == 1
    assert game.whose_turn == 0


def test_bot_buys_province(game):
    game.hand[0] = [int(Card.GOLD)] * 3
    game.update_coins(0, 0)
    before = game.supply[Card.PROVINCE]
    out = io.StringIO()
    execute_bot_turn(game, 0, 0, out)
    assert game.supply[Card.PROVINCE] == before - 1
    assert Card.PROVINCE in game.discard[0]
    assert "Player 0 buys card Province" in out.getvalue()