"""A single Super Trunfo duel between two fixed creature cards."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from enum import Enum

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class Card:
    """A creature card with three numeric attributes."""

    name: str
    strength: int
    speed: int
    intelligence: int

    def describe(self) -> str:
        """Return the card's attributes, one per line."""
        return "\n".join(
            [
                f"Nome: {self.name}",
                f"Força: {self.strength}",
                f"Velocidade: {self.speed}",
                f"Inteligência: {self.intelligence}",
            ]
        )


class Outcome(Enum):
    """Result of a duel from the player's point of view."""

    WIN = "Você venceu!"
    LOSE = "Você perdeu!"
    DRAW = "Empate!"


DRAGON = Card("Dragão", 90, 70, 60)
PHOENIX = Card("Fênix", 85, 75, 80)


def attribute_value(card: Card, choice: int) -> int:
    """Return the attribute selected by menu number 1, 2 or 3."""
    if choice == 1:
        return card.strength
    if choice == 2:
        return card.speed
    if choice == 3:
        return card.intelligence
    raise ValueError(f"invalid attribute choice: {choice}")


def duel(player: Card, opponent: Card, choice: int) -> Outcome:
    """Compare both cards on the chosen attribute."""
    mine = attribute_value(player, choice)
    theirs = attribute_value(opponent, choice)
    if mine > theirs:
        return Outcome.WIN
    if mine < theirs:
        return Outcome.LOSE
    return Outcome.DRAW


def _read_choice(prompt: str) -> int | None:
    try:
        line = input(prompt)
    except EOFError:
        return None
    match = _LEADING_INT.match(line)
    return int(match.group(1)) if match else None


def main(argv: list[str] | None = None) -> int:
    """Run one interactive duel; return the process exit status."""
    player, opponent = DRAGON, PHOENIX

    print("Sua carta:")
    print(player.describe())

    print("\nEscolha o atributo para competir:")
    print("1 - Força\n2 - Velocidade\n3 - Inteligência")
    choice = _read_choice("Digite o número: ")

    try:
        outcome = duel(player, opponent, choice if choice is not None else 0)
    except ValueError:
        print("Escolha inválida.")
        return 1

    print("\nCarta do oponente:")
    print(opponent.describe())

    print("\nResultado:")
    print(outcome.value)
    return 0


if __name__ == "__main__":
    sys.exit(main())