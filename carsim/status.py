"""
Vehicle status model for the car simulator.

The status is an immutable snapshot threaded turn by turn:
- CardinalDirection: the vehicle's facing (cyclic, clockwise order)
- MovementAction: the four actions handled by direction strategies
- Action: the numeric selector a driver picks each turn
- Status: facing + energy + gas + last movement
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum, IntEnum
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from .config import SimulationConfig


# =============================================================================
# DIRECTIONS AND ACTIONS
# =============================================================================

class CardinalDirection(Enum):
    """Vehicle facing. Declaration order is clockwise."""
    NORTH = "north"
    EAST = "east"
    SOUTH = "south"
    WEST = "west"

    def rotated(self, steps: int) -> CardinalDirection:
        """
        Rotate by a number of quarter turns.

        Positive steps rotate clockwise, negative counter-clockwise.
        Wraps every 4 steps.
        """
        members = list(CardinalDirection)
        return members[(members.index(self) + steps) % len(members)]

    @property
    def opposite(self) -> CardinalDirection:
        return self.rotated(2)

    @classmethod
    def parse(cls, value: str) -> CardinalDirection:
        """Parse a direction name such as "north" or "N" (case-insensitive)."""
        key = value.strip().lower()
        for direction in cls:
            if key in (direction.value, direction.value[0]):
                return direction
        raise ValueError(f"Unknown cardinal direction: {value!r}")


class MovementAction(Enum):
    """Actions that change the facing through a direction strategy."""
    LEFT = "left"
    RIGHT = "right"
    FORWARD = "forward"
    BACKWARD = "backward"


class Action(IntEnum):
    """Turn selector as entered by the driver."""
    TURN_LEFT = 1
    TURN_RIGHT = 2
    DRIVE_FORWARD = 3
    REVERSE = 4
    REST = 5
    REFUEL = 6
    NO_ACTION = 7  # Stay put without simulating a turn

    @property
    def movement(self) -> Optional[MovementAction]:
        """The movement action for 1-4, None for everything else."""
        return _MOVEMENT_BY_ACTION.get(self)

    @property
    def label(self) -> str:
        return self.name.replace("_", " ").lower()

    @classmethod
    def coerce(cls, value: int) -> Optional[Action]:
        """Return the Action for an int, or None when it is not one."""
        try:
            return cls(value)
        except ValueError:
            return None


_MOVEMENT_BY_ACTION = {
    Action.TURN_LEFT: MovementAction.LEFT,
    Action.TURN_RIGHT: MovementAction.RIGHT,
    Action.DRIVE_FORWARD: MovementAction.FORWARD,
    Action.REVERSE: MovementAction.BACKWARD,
}


# =============================================================================
# STATUS
# =============================================================================

@dataclass(frozen=True)
class Status:
    """
    Snapshot of a single vehicle between turns.

    Attributes:
        cardinal_direction: Current facing.
        energy_value: Driver stamina, never negative.
        gas_value: Fuel, never negative.
        last_movement_action: Movement applied most recently, if any.
    """
    cardinal_direction: CardinalDirection = CardinalDirection.NORTH
    energy_value: int = 0
    gas_value: int = 0
    last_movement_action: Optional[MovementAction] = None

    def __post_init__(self) -> None:
        """Validate the snapshot."""
        if not isinstance(self.cardinal_direction, CardinalDirection):
            raise ValueError(f"Invalid cardinal direction: {self.cardinal_direction!r}")
        for name in ("energy_value", "gas_value"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise ValueError(f"{name} must be an integer (got {value!r})")
        if self.energy_value < 0:
            raise ValueError(f"Energy cannot be negative (got {self.energy_value})")
        if self.gas_value < 0:
            raise ValueError(f"Gas cannot be negative (got {self.gas_value})")

    def with_direction(
        self,
        direction: CardinalDirection,
        movement: Optional[MovementAction] = None,
    ) -> Status:
        """Copy with a new facing (and last movement, when given)."""
        if movement is None:
            return replace(self, cardinal_direction=direction)
        return replace(self, cardinal_direction=direction, last_movement_action=movement)

    def with_energy(self, energy: int) -> Status:
        return replace(self, energy_value=energy)

    def with_gas(self, gas: int) -> Status:
        return replace(self, gas_value=gas)

    def to_dict(self) -> dict:
        """Plain-data view used by session summaries."""
        return {
            "cardinal_direction": self.cardinal_direction.value,
            "energy_value": self.energy_value,
            "gas_value": self.gas_value,
            "last_movement_action": (
                self.last_movement_action.value if self.last_movement_action else None
            ),
        }


def initial_status(config: Optional[SimulationConfig] = None) -> Status:
    """Status at the start of a session: full tank, rested driver."""
    if config is None:
        from .config import SimulationConfig
        config = SimulationConfig()
    return Status(
        cardinal_direction=config.initial_direction,
        energy_value=config.max_energy,
        gas_value=config.max_gas,
    )
