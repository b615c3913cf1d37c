from enum import IntEnum

from .status import MovementAction


class Action(IntEnum):
    """
    Player commands, numbered the way the console menu shows them.

    Any code outside the menu coerces to INVALID instead of raising,
    so Action(99) is Action.INVALID.
    """
    INVALID = 0
    TURN_LEFT = 1
    TURN_RIGHT = 2
    DRIVE_FORWARD = 3
    REVERSE = 4
    REST = 5
    REFUEL = 6
    EXIT = 7
    EAT = 8

    @classmethod
    def _missing_(cls, value):
        return cls.INVALID

    @classmethod
    def parse(cls, raw) -> "Action":
        """Convert raw console input ("3", " 5 ", 8) to an Action."""
        try:
            return cls(int(str(raw).strip()))
        except ValueError:
            return cls.INVALID

    @property
    def is_movement(self) -> bool:
        return self in MOVEMENT_BY_ACTION


MOVEMENT_BY_ACTION = {
    Action.TURN_LEFT: MovementAction.LEFT,
    Action.TURN_RIGHT: MovementAction.RIGHT,
    Action.DRIVE_FORWARD: MovementAction.FORWARD,
    Action.REVERSE: MovementAction.BACKWARD,
}

MENU = {
    Action.TURN_LEFT: "Turn left",
    Action.TURN_RIGHT: "Turn right",
    Action.DRIVE_FORWARD: "Drive forward",
    Action.REVERSE: "Reverse",
    Action.REST: "Rest",
    Action.REFUEL: "Refuel",
    Action.EXIT: "Exit",
    Action.EAT: "Eat",
}
