from typing import Optional

import numpy as np
from loguru import logger

from .actions import MOVEMENT_BY_ACTION, Action
from .directions import DirectionContext, DirectionStrategyResolver, resolve_strategy
from .status import MAX_ENERGY, MAX_GAS, MAX_HUNGER, Status


HUNGER_PER_TURN = 2
MIN_DRAIN = 1
MAX_DRAIN = 5


class SimulationLogic:
    """
    Applies player actions to a Status.

    The four direction strategies are resolved once, here, and reused for
    every move. The rng only needs an ``integers(low, high)`` method, so a
    seeded ``np.random.Generator`` or a test double both work.
    """

    def __init__(
        self,
        direction_context: DirectionContext,
        strategy_resolver: DirectionStrategyResolver = resolve_strategy,
        rng: Optional[np.random.Generator] = None,
    ):
        self.direction_context = direction_context
        self.rng = rng if rng is not None else np.random.default_rng()
        self.strategies = {
            action: strategy_resolver(movement)
            for action, movement in MOVEMENT_BY_ACTION.items()
        }

    def perform_action(self, action, status: Status) -> Status:
        action = Action(action)

        # an empty tank blocks every kind of movement
        if action.is_movement and status.gas == 0:
            logger.debug(f"{action.name} blocked: out of gas")
            return status

        if action.is_movement:
            strategy = self.strategies[action]
            logger.debug(f"{action.name} -> {type(strategy).__name__}")
            self.direction_context.set_strategy(strategy)
            return self.direction_context.execute_strategy(status)

        if action == Action.REST:
            status.energy = MAX_ENERGY
        elif action == Action.REFUEL:
            status.gas = MAX_GAS
        elif action == Action.EAT:
            status.hunger = 0
        # EXIT and INVALID leave the status alone
        return status

    def decrease_status_values(self, action, status: Status) -> Status:
        """
        Charge the cost of one turn: 1-5 energy, 1-5 gas unless resting,
        and 2 hunger unless eating.

        Only the floors of energy/gas and the ceiling of hunger are
        clamped here; the other bounds are reset by REST/REFUEL/EAT.
        """
        action = Action(action)

        energy_decrease = int(self.rng.integers(MIN_DRAIN, MAX_DRAIN + 1))
        status.energy -= energy_decrease

        gas_decrease = 0
        if action != Action.REST:
            gas_decrease = int(self.rng.integers(MIN_DRAIN, MAX_DRAIN + 1))
            status.gas -= gas_decrease

        if action != Action.EAT:
            status.hunger += HUNGER_PER_TURN

        status.energy = max(status.energy, 0)
        status.gas = max(status.gas, 0)
        status.hunger = min(status.hunger, MAX_HUNGER)

        logger.debug(
            f"{action.name}: energy -{energy_decrease}, gas -{gas_decrease} -> {status}"
        )
        return status
