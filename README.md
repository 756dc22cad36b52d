# dominion-sim

A simulation of the Dominion deck-building card game, written in plain Python with no third-party dependencies.

## Modules

- `dominion_sim.rngs`: `RandomStreams` is a multi-stream Lehmer random number generator with 256 streams. It provides `random`, `put_seed`, `get_seed`, `plant_seeds`, `select_stream` and `self_check`. Each game owns its own generator, so two games started from the same seed shuffle in exactly the same way.
- `dominion_sim.cards`: the `Card` and `Phase` enumerations and the game constants. Also `get_cost` (returns -1 for an unknown card), `card_cost` (returns 1000 for an unknown card), `card_name`, `phase_name`, `is_treasure` and `is_victory`.
- `dominion_sim.game`: `GameState`, built with `GameState.initialize(num_players, kingdom, seed)`. It handles the supply, decks, hands and discard piles, and provides `draw_card`, `buy_card`, `gain_card`, `discard_card`, `end_turn`, `is_game_over`, `score_for` and `winners`. The module also defines `kingdom_cards`, which takes exactly ten cards, and `Destination`, which says where a gained card goes: discard pile, deck or hand.
- `dominion_sim.effects`: `play_card(state, hand_pos, choice1, choice2, choice3)` plays an action card from the current player's hand. `card_effect` applies the effect of a card. Some cards also have their own functions: `baron_effect`, `minion_effect`, `ambassador_check`, `ambassador_effect`, `tribute_effect` and `mine_effect`.
- `dominion_sim.interface`: text views of a game (`format_hand`, `format_deck`, `format_played`, `format_discard`, `format_supply`, `format_status`, `format_scores`, `help_text`). It also has `add_card_to_hand`, `select_kingdom_cards(seed)`, `count_hand_coins` and `execute_bot_turn`. The bot buys Province, Duchy, Gold or Silver depending on the coins in its hand.
- `dominion_sim.playdom`: `play_game(seed, out)` plays a scripted two-player game, Smithy strategy against Adventurer strategy, and returns both scores.
- `dominion_sim.player`: `Shell` is the interactive command interpreter. `Shell.execute(line)` runs one command and `Shell.run(lines)` runs commands from any iterable of lines.
- `dominion_sim.rt`: `find_target(seed, target)` draws from stream 1 until a draw scaled to `[0, 10**9)` equals the target, and returns the number of draws it took.

An action that is not allowed raises `GameError`. Examples are buying with too few coins, playing outside the action phase, or starting a game with an invalid number of players or with duplicate kingdom cards.

## Installation

```
pip install .
```

## Commands

Start an interactive game with a positive integer seed:

```
dominion-play 42
```

A two-player game is set up straight away. Commands are read at the `$` prompt, and `help` lists them: `add`, `buy`, `end`, `init`, `num`, `play`, `resign`, `show`, `stat`, `supp`, `whos` and `exit`. `init N B` starts a new game for `N` players. The last `B` of them are played by the bot. When a started game ends, the shell prints the scores and the winners.

Run the scripted two-player game and print the moves and final scores:

```
dominion-auto 42
```

Search stream 1 for a value. The command prints `Found the bug!` when the value turns up:

```
dominion-rt 42 123456789
```

## Library use

```python
from dominion_sim.cards import Card
from dominion_sim.game import GameState, kingdom_cards
from dominion_sim.effects import play_card

kingdom = kingdom_cards(
    Card.ADVENTURER, Card.GARDENS, Card.EMBARGO, Card.VILLAGE, Card.MINION,
    Card.MINE, Card.CUTPURSE, Card.SEA_HAG, Card.TRIBUTE, Card.SMITHY,
)
state = GameState.initialize(2, kingdom, 1)
print(state.num_hand_cards(), state.coins)
state.end_turn()
print(state.winners())
```

## What it does not do

Games exist only in memory, so nothing can be saved or loaded. Play happens in one terminal session or through the library; there is no network or graphical play.

## Tests

```
pip install .[test]
pytest
```