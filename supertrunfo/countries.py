"""Super Trunfo with country cards: a full game against the computer."""

from __future__ import annotations

import argparse
import random
import re
import sys
from collections import deque
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import Iterable, Sequence

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


class Attribute(IntEnum):
    """Attributes a round can be played on, numbered as in the menu."""

    POPULATION = 1
    AREA = 2
    HDI = 3

    @property
    def label(self) -> str:
        return {
            Attribute.POPULATION: "População",
            Attribute.AREA: "Área",
            Attribute.HDI: "IDH",
        }[self]

    def format(self, value: float) -> str:
        """Render a value of this attribute the way the game prints it."""
        if self is Attribute.POPULATION:
            return str(int(value))
        if self is Attribute.AREA:
            return f"{value:.2f}"
        return f"{value:.3f}"


@dataclass(frozen=True)
class CountryCard:
    """A country card: population, area in km² and human development index."""

    name: str
    population: int
    area: float
    hdi: float

    def value(self, attribute: Attribute) -> float:
        """Return the card's value for the given attribute."""
        attribute = Attribute(attribute)
        if attribute is Attribute.POPULATION:
            return self.population
        if attribute is Attribute.AREA:
            return self.area
        return self.hdi

    def describe(self, owner: str) -> str:
        """Return the card as shown to the table, labelled with its owner."""
        return "\n".join(
            [
                f"Carta de {owner}: {self.name}",
                f"1. População: {self.population}",
                f"2. Área (km²): {self.area:.2f}",
                f"3. IDH: {self.hdi:.3f}",
            ]
        )


class RoundWinner(Enum):
    PLAYER = "player"
    COMPUTER = "computer"
    DRAW = "draw"


@dataclass(frozen=True)
class RoundResult:
    """What happened in one round."""

    attribute: Attribute
    player_card: CountryCard
    computer_card: CountryCard
    winner: RoundWinner
    pot_taken: int = 0


def standard_deck() -> list[CountryCard]:
    """Return the six country cards in their original order."""
    return [
        CountryCard("Brasil", 213993437, 8515767.0, 0.754),
        CountryCard("Argentina", 45376763, 2780400.0, 0.842),
        CountryCard("Canada", 38005238, 9984670.0, 0.936),
        CountryCard("Japao", 125800000, 377975.0, 0.925),
        CountryCard("Alemanha", 83200000, 357022.0, 0.942),
        CountryCard("India", 1393400000, 3287590.0, 0.633),
    ]


def shuffle_deck(
    deck: Iterable[CountryCard], rng: random.Random | None = None
) -> list[CountryCard]:
    """Return a shuffled copy of the deck."""
    shuffled = list(deck)
    (rng or random.Random()).shuffle(shuffled)
    return shuffled


def deal(
    deck: Sequence[CountryCard],
) -> tuple[list[CountryCard], list[CountryCard]]:
    """Split the deck: first half to the player, the rest to the computer."""
    half = len(deck) // 2
    return list(deck[:half]), list(deck[half:])


def computer_choice(card: CountryCard) -> Attribute:
    """Pick the attribute whose roughly normalised value is largest."""
    population = card.population / 1_000_000.0
    area = card.area / 100_000.0
    hdi = card.hdi * 100.0
    if population >= area and population >= hdi:
        return Attribute.POPULATION
    if area >= population and area >= hdi:
        return Attribute.AREA
    return Attribute.HDI


def compare(
    player_card: CountryCard, computer_card: CountryCard, attribute: Attribute
) -> RoundWinner:
    """Decide who wins on the given attribute; higher values win."""
    mine = player_card.value(attribute)
    theirs = computer_card.value(attribute)
    if mine > theirs:
        return RoundWinner.PLAYER
    if theirs > mine:
        return RoundWinner.COMPUTER
    return RoundWinner.DRAW


def parse_attribute(text: str) -> Attribute:
    """Read a menu number from a line of input.

    Raises ValueError for text that does not start with a number or for a
    number outside the menu.
    """
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError("Entrada não numérica. Tente novamente.")
    number = int(match.group(1))
    try:
        return Attribute(number)
    except ValueError:
        raise ValueError("Escolha inválida. Tente novamente.") from None


class Game:
    """State of a game between the player and the computer."""

    def __init__(
        self,
        deck: Sequence[CountryCard] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        """Deal the given deck as is, or a freshly shuffled standard deck."""
        if deck is None:
            deck = shuffle_deck(standard_deck(), rng)
        player, computer = deal(deck)
        self.player: deque[CountryCard] = deque(player)
        self.computer: deque[CountryCard] = deque(computer)
        self.tie_pile: list[CountryCard] = []
        self.player_turn = True
        self.round_number = 1

    def play_round(self, attribute: Attribute | None = None) -> RoundResult:
        """Play the top cards against each other.

        On the player's turn the attribute must be given; on the computer's
        turn it must be omitted and the computer chooses.
        """
        if self.is_over():
            raise RuntimeError("the game is already over")
        player_card = self.player[0]
        computer_card = self.computer[0]

        if self.player_turn:
            if attribute is None:
                raise ValueError("the player must choose an attribute")
            chosen = Attribute(attribute)
        else:
            if attribute is not None:
                raise ValueError("the computer chooses on its own turn")
            chosen = computer_choice(computer_card)

        winner = compare(player_card, computer_card, chosen)
        self.player.popleft()
        self.computer.popleft()

        pot_taken = 0
        if winner is RoundWinner.DRAW:
            self.tie_pile.extend([player_card, computer_card])
        else:
            hand = self.player if winner is RoundWinner.PLAYER else self.computer
            hand.extend([player_card, computer_card])
            pot_taken = len(self.tie_pile)
            hand.extend(self.tie_pile)
            self.tie_pile.clear()
            self.player_turn = winner is RoundWinner.PLAYER

        self.round_number += 1
        return RoundResult(chosen, player_card, computer_card, winner, pot_taken)

    def is_over(self) -> bool:
        return not self.player or not self.computer

    def winner(self) -> RoundWinner | None:
        """Return the game's winner, or None while it is still running."""
        if not self.is_over():
            return None
        return RoundWinner.PLAYER if self.player else RoundWinner.COMPUTER

    def scoreboard(self) -> str:
        return (
            f"PLACAR: Jogador {len(self.player)} cartas | "
            f"Computador {len(self.computer)} cartas"
        )


def _ask_attribute() -> Attribute | None:
    prompt = "Escolha o atributo para comparar (1-População, 2-Área, 3-IDH): "
    while True:
        try:
            line = input(prompt)
        except EOFError:
            print("\nErro ao ler entrada.")
            return None
        try:
            return parse_attribute(line)
        except ValueError as exc:
            print(exc)


def _report(game: Game, result: RoundResult) -> None:
    attribute = result.attribute
    p, c = result.player_card, result.computer_card
    print("\n--- Comparando Cartas ---")
    print(f"Atributo escolhido: {attribute.label}")
    print(
        f"{p.name}: {attribute.format(p.value(attribute))} vs "
        f"{c.name}: {attribute.format(c.value(attribute))}"
    )
    if result.winner is RoundWinner.PLAYER:
        print("Você ganhou a rodada!")
        if result.pot_taken:
            print(f"Você também levou {result.pot_taken} carta(s) do monte de empate!")
    elif result.winner is RoundWinner.COMPUTER:
        print("O Computador ganhou a rodada!")
        if result.pot_taken:
            print(
                f"O computador também levou {result.pot_taken} carta(s) "
                "do monte de empate!"
            )
    else:
        print(
            f"Empate! As cartas ({p.name} e {c.name}) vão para o monte de empate."
        )


def main(argv: list[str] | None = None) -> int:
    """Play an interactive game; return the process exit status."""
    parser = argparse.ArgumentParser(description="Super Trunfo de Países")
    parser.add_argument("--seed", type=int, default=None, help="shuffle seed")
    args = parser.parse_args(argv)

    print("--- Bem-vindo ao Super Trunfo de Países! ---\n")
    deck = standard_deck()
    print(f"Baralho inicializado com {len(deck)} cartas.")
    deck = shuffle_deck(deck, random.Random(args.seed))
    print("Cartas embaralhadas!")
    game = Game(deck)
    print(
        f"Cartas distribuídas: {len(game.player)} para você e "
        f"{len(game.computer)} para o computador.\n"
    )

    while not game.is_over():
        print(f"\n--- Rodada {game.round_number} ---")
        print(game.scoreboard())
        player_card, computer_card = game.player[0], game.computer[0]
        if game.player_turn:
            print("Sua vez de jogar!")
            print()
            print(player_card.describe("Jogador"))
            attribute = _ask_attribute()
            if attribute is None:
                return 1
            result = game.play_round(attribute)
            print()
            print(computer_card.describe("Computador (Oponente)"))
        else:
            print("Vez do Computador!")
            print()
            print(computer_card.describe("Computador"))
            result = game.play_round()
            print(f"Computador escolheu: {result.attribute.label}")
            print()
            print(player_card.describe("Jogador (Oponente)"))
        _report(game, result)

    print("\n--- FIM DE JOGO ---")
    print(game.scoreboard())
    if game.winner() is RoundWinner.PLAYER:
        print("Parabéns! Você venceu o jogo!")
    else:
        print("Que pena! O computador venceu desta vez.")
    return 0


if __name__ == "__main__":
    sys.exit(main())