"""
Simulation configuration.

Resource ceilings and decay amounts are configuration rather than literals.
Values can come from keyword arguments, a dict/JSON file, or the environment
(a local .env file is honoured).
"""

import json
import os
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from .errors import ConfigError
from .status import CardinalDirection


# =============================================================================
# CONSTANTS
# =============================================================================

MAX_ENERGY = 20
MAX_GAS = 20
DECAY_PER_TURN = 5

ENV_PREFIX = "CARSIM_"


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass
class SimulationConfig:
    """
    Tunable numbers for a simulation.

    Attributes:
        max_energy: Energy restored by resting (and the starting energy).
        max_gas: Gas restored by refuelling (and the starting gas).
        decay_per_turn: Upper bound of the per-turn resource decay.
        min_decay_per_turn: Lower bound of the per-turn decay. Defaults to
            decay_per_turn, which makes decay a fixed amount.
        initial_direction: Facing at the start of a session.
        seed: Seed for the decay random generator (only used when the decay
            is a range).
    """
    max_energy: int = MAX_ENERGY
    max_gas: int = MAX_GAS
    decay_per_turn: int = DECAY_PER_TURN
    min_decay_per_turn: Optional[int] = None
    initial_direction: CardinalDirection = CardinalDirection.NORTH
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate configuration."""
        if self.min_decay_per_turn is None:
            self.min_decay_per_turn = self.decay_per_turn
        if isinstance(self.initial_direction, str):
            try:
                self.initial_direction = CardinalDirection.parse(self.initial_direction)
            except ValueError as e:
                raise ConfigError(str(e)) from e
        if not isinstance(self.initial_direction, CardinalDirection):
            raise ConfigError(f"Invalid initial_direction: {self.initial_direction!r}")

        for name in ("max_energy", "max_gas", "decay_per_turn", "min_decay_per_turn"):
            if not _is_int(getattr(self, name)):
                raise ConfigError(f"{name} must be an integer, got {getattr(self, name)!r}")
        if self.seed is not None and not _is_int(self.seed):
            raise ConfigError(f"seed must be an integer or None, got {self.seed!r}")

        if self.max_energy <= 0:
            raise ConfigError("max_energy must be positive")
        if self.max_gas <= 0:
            raise ConfigError("max_gas must be positive")
        if self.decay_per_turn < 0 or self.min_decay_per_turn < 0:
            raise ConfigError("Decay per turn cannot be negative")
        if self.min_decay_per_turn > self.decay_per_turn:
            raise ConfigError(
                f"min_decay_per_turn ({self.min_decay_per_turn}) exceeds "
                f"decay_per_turn ({self.decay_per_turn})"
            )

    @property
    def has_random_decay(self) -> bool:
        return self.min_decay_per_turn < self.decay_per_turn

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SimulationConfig':
        """Create configuration from a dictionary. Unknown keys are rejected."""
        if not isinstance(data, dict):
            raise ConfigError(f"Config must be a JSON object, got {type(data).__name__}")
        known = set(cls.__dataclass_fields__)
        unknown = set(data) - known
        if unknown:
            raise ConfigError(f"Unknown config keys: {', '.join(sorted(unknown))}")
        return cls(**data)

    @classmethod
    def from_json(cls, path: str) -> 'SimulationConfig':
        """Load configuration from JSON file."""
        config_path = Path(path)
        if not config_path.exists():
            raise FileNotFoundError(f"Simulation config not found: {path}")

        with open(config_path) as f:
            data = json.load(f)

        return cls.from_dict(data)

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None) -> 'SimulationConfig':
        """
        Build configuration from CARSIM_* environment variables.

        Missing variables fall back to the defaults.
        """
        load_dotenv(dotenv_path)

        data: Dict[str, Any] = {}
        for name in ("max_energy", "max_gas", "decay_per_turn", "min_decay_per_turn", "seed"):
            raw = os.getenv(ENV_PREFIX + name.upper())
            if raw is None or raw == "":
                continue
            try:
                data[name] = int(raw)
            except ValueError as e:
                raise ConfigError(f"{ENV_PREFIX}{name.upper()} must be an integer, got {raw!r}") from e

        direction = os.getenv(ENV_PREFIX + "INITIAL_DIRECTION")
        if direction:
            data["initial_direction"] = direction

        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["initial_direction"] = self.initial_direction.value
        return data
