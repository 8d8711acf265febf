# supertrunfo

Super Trunfo card games played in the terminal. The prompts are in Portuguese.

## Installation

```
pip install .
```

## The games

### Duel

```
supertrunfo-duelo
```

You get the card "Dragão" and play it against "Fênix". Pick an attribute:

- 1 for Força
- 2 for Velocidade
- 3 for Inteligência

The higher value wins, and equal values are a draw. Any other choice, or no
input at all, prints "Escolha inválida." and ends the command with exit
status 1.

### Countries

```
supertrunfo-paises [--seed N]
```

You play a full game against the computer with a shuffled deck of six
countries. You and the computer each get three cards. Pass `--seed` to get a
repeatable shuffle.

On each turn, whoever holds the turn picks one attribute to compare:

- 1 for População (population)
- 2 for Área (area)
- 3 for IDH (human development index)

Input that is not a number, or a number outside 1 to 3, is asked for again.
If the input ends, the command stops with exit status 1.

The computer picks by scaling the values on its own card (population in
millions, area in hundreds of thousands of km², IDH times 100) and choosing
the largest.

The round's winner takes both cards, plus any cards waiting on the draw pile,
and plays first in the next round. After a draw both cards go to the draw
pile and the same side plays again. The game ends when one side has no cards
left.

## Using it as a library

```python
import random

from supertrunfo.countries import Attribute, Game, shuffle_deck, standard_deck

deck = shuffle_deck(standard_deck(), random.Random(42))
game = Game(deck)  # first half to the player, the rest to the computer

while not game.is_over():
    if game.player_turn:
        result = game.play_round(Attribute.AREA)
    else:
        result = game.play_round()  # the computer chooses
    print(result.attribute.label, result.winner, result.pot_taken)
    print(game.scoreboard())
print(game.winner())
```

`Game()` with no deck deals a freshly shuffled standard deck; it also takes an
optional `rng`. `play_round` needs an attribute on the player's turn and
refuses one on the computer's turn (`ValueError`); it raises `RuntimeError`
once the game is over.

Other helpers in `supertrunfo.countries`:

- `deal(deck)` splits a deck into the player's and the computer's hands.
- `computer_choice(card)` returns the attribute the computer would pick.
- `compare(player_card, computer_card, attribute)` returns a `RoundWinner`.
- `parse_attribute(text)` reads a menu number and raises `ValueError` for
  anything else.
- `CountryCard.value(attribute)` and `CountryCard.describe(owner)`.

The single card duel is in `supertrunfo.duel`. Use
`duel(player, opponent, choice)` with two `Card` values and a choice from 1
to 3. It returns an `Outcome` (`WIN`, `LOSE` or `DRAW`) and raises
`ValueError` for any other choice.

## Running the tests

```
pip install .[test]
pytest
```