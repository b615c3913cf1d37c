from typing import Callable, Optional, Protocol

from loguru import logger

from .errors import NoStrategyError
from .status import MovementAction, Status


class DirectionStrategy(Protocol):
    def execute(self, status: Status) -> Status:
        ...


DirectionStrategyResolver = Callable[[MovementAction], DirectionStrategy]


class DirectionContext:
    """Holds the strategy picked for the current move and runs it."""

    def __init__(self, strategy: Optional[DirectionStrategy] = None):
        self._strategy = strategy

    @property
    def strategy(self) -> Optional[DirectionStrategy]:
        return self._strategy

    def set_strategy(self, strategy: DirectionStrategy):
        self._strategy = strategy

    def execute_strategy(self, status: Status) -> Status:
        if self._strategy is None:
            raise NoStrategyError("execute_strategy() called before set_strategy()")
        return self._strategy.execute(status)


# ------------------------------------------------------------
# Strategy implementations
# ------------------------------------------------------------

class TurnLeftStrategy:
    def execute(self, status: Status) -> Status:
        status.heading = status.heading.rotated(-1)
        status.last_movement = MovementAction.LEFT
        return status


class TurnRightStrategy:
    def execute(self, status: Status) -> Status:
        status.heading = status.heading.rotated(1)
        status.last_movement = MovementAction.RIGHT
        return status


class DriveForwardStrategy:
    def execute(self, status: Status) -> Status:
        status.last_movement = MovementAction.FORWARD
        return status


class ReverseStrategy:
    """Backs up; the car keeps facing the same way."""

    def execute(self, status: Status) -> Status:
        status.last_movement = MovementAction.BACKWARD
        return status


# ------------------------------------------------------------
# Strategy registry
# ------------------------------------------------------------

STRATEGY_REGISTRY = {
    MovementAction.LEFT: TurnLeftStrategy,
    MovementAction.RIGHT: TurnRightStrategy,
    MovementAction.FORWARD: DriveForwardStrategy,
    MovementAction.BACKWARD: ReverseStrategy,
}


def resolve_strategy(movement: MovementAction) -> DirectionStrategy:
    cls = STRATEGY_REGISTRY.get(movement)
    if cls is None:
        raise ValueError(f"Unknown movement action: {movement}")
    logger.debug(f"resolved {movement.name} -> {cls.__name__}")
    return cls()
