"""
Turn orchestration for a single simulated vehicle.

A SimulationSession owns the current Status and runs the per-turn sequence:
1. decay resources for the chosen action
2. perform the action on the decayed status
3. record messages and check whether the drive is over

The session stops when energy or gas reaches zero. Selecting
Action.NO_ACTION (or any unknown selector) leaves the session untouched.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from .config import SimulationConfig
from .driver import Driver
from .errors import SessionOverError
from .logic import SimulationLogicService
from .messages import StatusMessageService
from .status import Action, Status, initial_status

logger = logging.getLogger(__name__)


class SessionOutcome(Enum):
    """Why a session is (or is not) still running."""
    RUNNING = "running"
    OUT_OF_ENERGY = "out_of_energy"
    OUT_OF_GAS = "out_of_gas"


@dataclass
class TurnRecord:
    """One simulated turn."""
    turn: int
    action: Action
    before: Status
    after: Status
    action_message: str
    driver_message: str
    car_message: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "turn": self.turn,
            "action": self.action.label,
            "before": self.before.to_dict(),
            "after": self.after.to_dict(),
            "action_message": self.action_message,
            "driver_message": self.driver_message,
            "car_message": self.car_message,
        }


@dataclass
class SimulationSession:
    """
    State of one drive.

    Attributes:
        driver: Driver profile used in messages.
        config: Simulation configuration. Taken from service when one is
            injected.
        service: Turn logic. Built from config when omitted.
        messages: Message builder. Built from config when omitted.
        status: Current status.
        history: Turns taken so far.
        outcome: RUNNING until a resource runs out.
    """
    driver: Driver
    config: SimulationConfig = field(default_factory=SimulationConfig)
    service: Optional[SimulationLogicService] = None
    messages: Optional[StatusMessageService] = None
    status: Optional[Status] = None
    history: List[TurnRecord] = field(default_factory=list)
    outcome: SessionOutcome = SessionOutcome.RUNNING

    def __post_init__(self) -> None:
        if self.service is None:
            self.service = SimulationLogicService(config=self.config)
        elif isinstance(getattr(self.service, "config", None), SimulationConfig):
            # The injected service decides the ceilings
            self.config = self.service.config
        if self.messages is None:
            self.messages = StatusMessageService(self.config)
        if self.status is None:
            self.status = initial_status(self.config)

    @property
    def is_running(self) -> bool:
        return self.outcome == SessionOutcome.RUNNING

    @property
    def turns_taken(self) -> int:
        return len(self.history)

    def take_turn(self, action: int) -> Optional[TurnRecord]:
        """
        Simulate one turn.

        Args:
            action: Action selector. NO_ACTION and unknown values do nothing.

        Returns:
            The recorded turn, or None when no turn was simulated.

        Raises:
            SessionOverError: If the session has already ended.
        """
        if not self.is_running:
            raise SessionOverError(f"Session is over ({self.outcome.value})")

        selected = Action.coerce(action)
        if selected is None or selected == Action.NO_ACTION:
            logger.debug("No turn simulated for selector %r", action)
            return None

        before = self.status
        decayed = self.service.decrease_status_values(selected, before)
        after = self.service.perform_action(selected, decayed)
        self.status = after

        name = self.driver.first
        record = TurnRecord(
            turn=self.turns_taken + 1,
            action=selected,
            before=before,
            after=after,
            action_message=self.messages.current_action_message(selected, decayed, after, name),
            driver_message=self.messages.driver_status_message(after.energy_value, name),
            car_message=self.messages.car_status_message(after.gas_value),
        )
        self.history.append(record)
        logger.info(
            "Turn %d: %s -> facing %s, energy %d, gas %d",
            record.turn,
            selected.label,
            after.cardinal_direction.value,
            after.energy_value,
            after.gas_value,
        )

        self._check_outcome()
        return record

    def _check_outcome(self) -> None:
        """Stop the session once the driver or the car is spent."""
        if self.status.energy_value <= 0:
            self.outcome = SessionOutcome.OUT_OF_ENERGY
        elif self.status.gas_value <= 0:
            self.outcome = SessionOutcome.OUT_OF_GAS
        else:
            return
        logger.info("Session over after %d turns: %s", self.turns_taken, self.outcome.value)

    def reset(self) -> None:
        """Start over with a fresh status and empty history."""
        self.status = initial_status(self.config)
        self.history = []
        self.outcome = SessionOutcome.RUNNING

    def summary(self) -> Dict[str, Any]:
        """Plain-data summary of the session."""
        return {
            "driver": self.driver.full_name,
            "outcome": self.outcome.value,
            "turns": self.turns_taken,
            "status": self.status.to_dict(),
            "config": self.config.to_dict(),
            "history": [record.to_dict() for record in self.history],
        }
