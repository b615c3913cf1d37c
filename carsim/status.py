from dataclasses import dataclass
from enum import Enum
from typing import Optional


MAX_ENERGY = 20
MAX_GAS = 20
MAX_HUNGER = 16   # game over once hunger reaches this


class CardinalDirection(Enum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def rotated(self, steps: int) -> "CardinalDirection":
        """Positive steps turn clockwise, negative counter-clockwise."""
        return CardinalDirection((self.value + steps) % 4)


class MovementAction(Enum):
    LEFT = "left"
    RIGHT = "right"
    FORWARD = "forward"
    BACKWARD = "backward"


@dataclass
class Status:
    energy: int = MAX_ENERGY
    gas: int = MAX_GAS
    hunger: int = 0
    heading: CardinalDirection = CardinalDirection.NORTH
    last_movement: Optional[MovementAction] = None


def is_game_over(status: Status) -> bool:
    return status.hunger >= MAX_HUNGER
