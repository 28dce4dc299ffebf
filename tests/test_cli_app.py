from __future__ import annotations

from typing import Iterator

from delve.core.rng import RNG
from delve.data.stores import InMemoryStore
from delve.presentation.cli import app
from delve.services.controllers import SessionController


def _feed(monkeypatch, answers: list[str]) -> None:
    replies: Iterator[str] = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(replies))


def test_path_menu_selects_first_node(monkeypatch) -> None:
    controller = SessionController.load(InMemoryStore(), RNG(11))
    _feed(monkeypatch, ["1"])

    outcome = app._play_turn(controller)

    assert outcome == "continue"
    assert controller.state.current_layer == 0


def test_path_menu_quit_option(monkeypatch) -> None:
    controller = SessionController.load(InMemoryStore(), RNG(11))
    quit_index = len(controller.state.selectable_nodes()) + 2
    _feed(monkeypatch, ["abc", "99", str(quit_index)])

    assert app._play_turn(controller) == "quit"
    assert controller.state.current_layer == -1


def test_prompt_seed_blank_means_random(monkeypatch) -> None:
    _feed(monkeypatch, ["x", ""])

    assert app._prompt_seed() is None
