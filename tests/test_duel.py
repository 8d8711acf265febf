import io

import pytest

from supertrunfo.duel import (
    DRAGON,
    PHOENIX,
    Card,
    Outcome,
    attribute_value,
    duel,
    main,
)


def test_describe_lists_every_attribute():
    text = DRAGON.describe()
    assert text.splitlines() == [
        "Nome: Dragão",
        "Força: 90",
        "Velocidade: 70",
        "Inteligência: 60",
    ]


@pytest.mark.parametrize(
    "choice, expected",
    [(1, 90), (2, 70), (3, 60)],
)
def test_attribute_value_selects_by_menu_number(choice, expected):
    assert attribute_value(DRAGON, choice) == expected


@pytest.mark.parametrize("choice", [0, 4, -1])
def test_attribute_value_rejects_unknown_choice(choice):
    with pytest.raises(ValueError):
        attribute_value(DRAGON, choice)


@pytest.mark.parametrize(
    "choice, outcome",
    [(1, Outcome.WIN), (2, Outcome.LOSE), (3, Outcome.LOSE)],
)
def test_duel_dragon_against_phoenix(choice, outcome):
    assert duel(DRAGON, PHOENIX, choice) is outcome


def test_duel_is_symmetric():
    assert duel(PHOENIX, DRAGON, 1) is Outcome.LOSE
    assert duel(PHOENIX, DRAGON, 2) is Outcome.WIN


def test_duel_equal_values_is_draw():
    twin = Card("Gêmeo", DRAGON.strength, 1, 1)
    assert duel(DRAGON, twin, 1) is Outcome.DRAW


def test_duel_invalid_choice_raises():
    with pytest.raises(ValueError):
        duel(DRAGON, PHOENIX, 5)


def test_main_winning_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Você venceu!" in out
    assert "Nome: Fênix" in out


def test_main_losing_choice(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\n"))
    assert main([]) == 0
    assert "Você perdeu!" in capsys.readouterr().out


def test_main_invalid_number(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n"))
    assert main([]) == 1
    out = capsys.readouterr().out
    assert "Escolha inválida." in out
    assert "Carta do oponente" not in out


def test_main_non_numeric_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n"))
    assert main([]) == 1
    assert "Escolha inválida." in capsys.readouterr().out