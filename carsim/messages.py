"""
Human-readable status messages for a turn.

Describes what the last action did and how the driver and the car are
holding up, with a colour per level for front ends that want one.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .config import SimulationConfig
from .status import Action, Status


class StatusLevel(Enum):
    """How much of a resource is left, relative to its maximum."""
    GOOD = "green"
    LOW = "orange"
    CRITICAL = "red"
    EMPTY = "grey"

    @property
    def colour(self) -> str:
        return self.value


# Fractions of the maximum at or above which a level applies
GOOD_THRESHOLD = 0.5
LOW_THRESHOLD = 0.25


def level_for(value: int, maximum: int) -> StatusLevel:
    """Classify a resource value against its maximum."""
    if value <= 0:
        return StatusLevel.EMPTY
    fraction = value / maximum
    if fraction >= GOOD_THRESHOLD:
        return StatusLevel.GOOD
    if fraction >= LOW_THRESHOLD:
        return StatusLevel.LOW
    return StatusLevel.CRITICAL


@dataclass
class StatusMessageService:
    """Builds the messages shown after each turn."""
    config: Optional[SimulationConfig] = None

    def __post_init__(self) -> None:
        if self.config is None:
            self.config = SimulationConfig()

    def driver_status_level(self, energy: int) -> StatusLevel:
        return level_for(energy, self.config.max_energy)

    def car_status_level(self, gas: int) -> StatusLevel:
        return level_for(gas, self.config.max_gas)

    def current_action_message(
        self,
        action: int,
        previous: Status,
        current: Status,
        driver_name: str,
    ) -> str:
        """Describe the action just taken."""
        selected = Action.coerce(action)
        facing = current.cardinal_direction.value.capitalize()

        if selected in (Action.TURN_LEFT, Action.TURN_RIGHT):
            side = "left" if selected == Action.TURN_LEFT else "right"
            return f"{driver_name} turned {side} and is now heading {facing}."
        elif selected == Action.DRIVE_FORWARD:
            return f"{driver_name} drove forward, still heading {facing}."
        elif selected == Action.REVERSE:
            return f"{driver_name} reversed and is now facing {facing}."
        elif selected == Action.REST:
            return (
                f"{driver_name} took a rest. Energy restored from "
                f"{previous.energy_value} to {current.energy_value}."
            )
        elif selected == Action.REFUEL:
            return (
                f"{driver_name} refuelled the car. Gas filled from "
                f"{previous.gas_value} to {current.gas_value}."
            )
        else:
            return f"{driver_name} is waiting for the next instruction."

    def driver_status_message(self, energy: int, driver_name: str) -> str:
        """Describe the driver's fatigue."""
        level = self.driver_status_level(energy)
        if level == StatusLevel.GOOD:
            return f"{driver_name} is alert ({energy}/{self.config.max_energy})."
        elif level == StatusLevel.LOW:
            return f"{driver_name} is getting tired ({energy}/{self.config.max_energy}). Consider a rest."
        elif level == StatusLevel.CRITICAL:
            return f"{driver_name} is exhausted ({energy}/{self.config.max_energy}). Rest now!"
        else:
            return f"{driver_name} has fallen asleep at the wheel."

    def car_status_message(self, gas: int) -> str:
        """Describe the fuel level."""
        level = self.car_status_level(gas)
        if level == StatusLevel.GOOD:
            return f"Fuel level is fine ({gas}/{self.config.max_gas})."
        elif level == StatusLevel.LOW:
            return f"Fuel is running low ({gas}/{self.config.max_gas})."
        elif level == StatusLevel.CRITICAL:
            return f"Fuel almost empty ({gas}/{self.config.max_gas}). Refuel now!"
        else:
            return "The tank is empty. The car has stopped."
