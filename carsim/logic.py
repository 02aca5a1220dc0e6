"""
Turn logic for the car simulator.

SimulationLogicService exposes the two per-turn operations:

1. perform_action: movement (via DirectionEngine), rest, refuel, or no-op
2. decrease_status_values: resource decay with a floor of zero; resting
   burns energy but no gas

Neither operation mutates its input status. The caller decides
the order; the bundled session decays first, then performs the action.
"""

from __future__ import annotations

import logging
import random
from typing import Optional

from .config import SimulationConfig
from .direction import DirectionEngine
from .status import Action, Status

logger = logging.getLogger(__name__)


class SimulationLogicService:
    """
    Maps (action, status) to the next status.

    Attributes:
        engine: Direction engine handling the four movement actions.
        config: Resource ceilings and decay amounts.
    """

    def __init__(
        self,
        engine: Optional[DirectionEngine] = None,
        config: Optional[SimulationConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.engine = engine if engine is not None else DirectionEngine()
        self.config = config if config is not None else SimulationConfig()
        self._rng = rng if rng is not None else random.Random(self.config.seed)

    def perform_action(self, action: int, status: Status) -> Status:
        """
        Apply the driver's chosen action.

        Args:
            action: Action selector (1-6). Any other value is a no-op.
            status: Status before the action.

        Returns:
            The resulting status. For unknown selectors (including
            Action.NO_ACTION) the input status itself is returned.
        """
        selected = Action.coerce(action)
        if selected is None:
            logger.debug("Ignoring unknown action %r", action)
            return status

        movement = selected.movement
        if movement is not None:
            return self.engine.apply(movement, status)

        if selected == Action.REST:
            return status.with_energy(self.config.max_energy)
        if selected == Action.REFUEL:
            return status.with_gas(self.config.max_gas)

        return status

    def decrease_status_values(self, action: int, status: Status) -> Status:
        """
        Apply one turn of resource decay.

        Energy always decays; gas decays unless the driver is resting.
        Neither value drops below zero.
        """
        decay = self.turn_decay()
        energy = max(0, status.energy_value - decay)

        if action == Action.REST:
            gas = status.gas_value
        else:
            gas = max(0, status.gas_value - decay)

        return status.with_energy(energy).with_gas(gas)

    def turn_decay(self) -> int:
        """Decay amount for one turn (fixed unless configured as a range)."""
        if not self.config.has_random_decay:
            return self.config.decay_per_turn
        return self._rng.randint(self.config.min_decay_per_turn, self.config.decay_per_turn)
