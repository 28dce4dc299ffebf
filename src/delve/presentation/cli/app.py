"""Console-driven UI loop for Delve."""
from __future__ import annotations

import logging
from typing import Literal

from delve.core.rng import RNG
from delve.data.stores import JsonFileStore
from delve.domain.state import SessionState
from delve.presentation.cli import config
from delve.presentation.cli.render import (
    format_item,
    format_options,
    render_heading,
    render_lines,
    render_state,
)
from delve.services.controllers import SessionController

TurnOutcome = Literal["continue", "quit"]


def main() -> None:
    """Start the interactive CLI session."""
    if config.debug_enabled():
        logging.basicConfig(level=logging.DEBUG)
    store = JsonFileStore(config.get_save_path())
    controller = SessionController.load(store, RNG(_prompt_seed()))
    print("=== Delve ===")
    while _play_turn(controller) == "continue":
        pass
    print("Goodbye!")


def _prompt_seed() -> int | None:
    while True:
        raw_value = input("Enter seed (blank for random): ").strip()
        if not raw_value:
            return None
        try:
            return int(raw_value)
        except ValueError:
            print("Invalid seed. Please enter a valid integer.")


def _play_turn(controller: SessionController) -> TurnOutcome:
    state = controller.state
    render_state(state, show_map=state.phase == "map_choice")
    if state.phase == "game_over":
        return _game_over_menu(controller)
    if state.phase == "level_up_choice":
        return _reward_menu(controller, state)
    if state.phase == "combat":
        return _combat_menu(controller)
    return _path_menu(controller, state)


def _path_menu(controller: SessionController, state: SessionState) -> TurnOutcome:
    choices = list(state.selectable_nodes())
    labels = [f"{node.type.label} ({node.id})" for node in choices]
    labels += ["Restart", "Quit"]
    render_heading(f"Choose a path to layer {state.current_layer + 1}")
    render_lines(format_options(labels))
    index = _prompt_choice(len(labels))
    if index < len(choices):
        controller.select_node(choices[index])
        return "continue"
    if index == len(choices):
        controller.restart_game()
        return "continue"
    return "quit"


def _combat_menu(controller: SessionController) -> TurnOutcome:
    render_heading("Battle")
    render_lines(format_options(["Attack", "Quit"]))
    if _prompt_choice(2) == 0:
        controller.attack()
        return "continue"
    return "quit"


def _reward_menu(controller: SessionController, state: SessionState) -> TurnOutcome:
    options = list(state.level_up_options)
    render_heading("Choose a reward")
    render_lines(format_options([format_item(item) for item in options]))
    controller.select_level_up_option(options[_prompt_choice(len(options))])
    return "continue"


def _game_over_menu(controller: SessionController) -> TurnOutcome:
    render_heading("Game Over")
    render_lines(format_options(["Restart", "Quit"]))
    if _prompt_choice(2) == 0:
        controller.restart_game()
        return "continue"
    return "quit"


def _prompt_choice(choice_count: int) -> int:
    while True:
        raw = input("Select an option: ").strip()
        try:
            index = int(raw) - 1
        except ValueError:
            print("Please enter a number.")
            continue
        if 0 <= index < choice_count:
            return index
        print(f"Please enter a value between 1 and {choice_count}.")
