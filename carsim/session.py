from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import numpy as np

from .actions import Action
from .logic import SimulationLogic
from .status import Status, is_game_over


LOW_GAS = 5
LOW_ENERGY = 5
HIGH_HUNGER = 10

PLAYABLE_ACTIONS = [a for a in Action if a not in (Action.INVALID, Action.EXIT)]


@dataclass
class TurnResult:
    action: Action
    status: Status
    blocked: bool = False   # movement refused on an empty tank
    charged: bool = False   # decrease_status_values was applied


def play_turn(logic: SimulationLogic, action, status: Status) -> TurnResult:
    """
    One full turn as the runners play it: dispatch the action, then charge
    the turn's cost. EXIT, invalid input and blocked moves cost nothing.
    """
    action = Action(action)
    if action in (Action.EXIT, Action.INVALID):
        return TurnResult(action, status)

    if action.is_movement and status.gas == 0:
        status = logic.perform_action(action, status)
        return TurnResult(action, status, blocked=True)

    status = logic.perform_action(action, status)
    status = logic.decrease_status_values(action, status)
    return TurnResult(action, status, charged=True)


def status_warnings(status: Status) -> list[str]:
    warnings = []
    if status.gas == 0:
        warnings.append("The tank is empty, refuel before driving.")
    elif status.gas <= LOW_GAS:
        warnings.append("Gas is running low.")
    if status.energy == 0:
        warnings.append("The driver is exhausted.")
    elif status.energy <= LOW_ENERGY:
        warnings.append("The driver is getting tired.")
    if status.hunger >= HIGH_HUNGER:
        warnings.append("The driver is starving.")
    return warnings


def random_driver(rng: np.random.Generator) -> Action:
    """Uniformly random playable action (never EXIT)."""
    return PLAYABLE_ACTIONS[rng.integers(0, len(PLAYABLE_ACTIONS))]


@dataclass
class MetricsRecorder:
    rows: list[tuple[int, str, int, int, int, str]]

    @classmethod
    def empty(cls):
        return cls(rows=[])

    def record(self, turn: int, action: Optional[Action], status: Status):
        name = "START" if action is None else action.name
        self.rows.append(
            (turn, name, status.energy, status.gas, status.hunger, status.heading.name)
        )

    def save_csv(self, path: Path):
        lines = ["turn,action,energy,gas,hunger,heading"]
        lines += [f"{t},{a},{e},{g},{h},{d}" for t, a, e, g, h, d in self.rows]
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def run_session(logic: SimulationLogic, status: Status, rng: np.random.Generator, max_turns: int):
    """
    Let the random driver play until the game is over or max_turns is hit.
    Returns (final status, recorder, turns played, blocked moves); the
    recorder starts with the initial status as turn 0.
    """
    rec = MetricsRecorder.empty()
    rec.record(0, None, status)
    blocked = 0
    turn = 0
    while turn < max_turns and not is_game_over(status):
        turn += 1
        result = play_turn(logic, random_driver(rng), status)
        status = result.status
        blocked += result.blocked
        rec.record(turn, result.action, status)
    return status, rec, turn, blocked
