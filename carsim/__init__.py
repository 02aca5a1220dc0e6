"""Turn-based car simulator: facing, driver energy and fuel."""

from .config import (
    DECAY_PER_TURN,
    MAX_ENERGY,
    MAX_GAS,
    SimulationConfig,
)

from .direction import (
    # Strategies
    DirectionStrategy,
    turn_left,
    turn_right,
    drive_forward,
    reverse,
    # Resolution
    DEFAULT_STRATEGIES,
    StrategyResolver,
    default_resolver,
    resolver_from_mapping,
    DirectionEngine,
)

from .driver import Driver, create_driver, load_driver

from .errors import (
    CarSimError,
    ConfigError,
    InvalidDriverDataError,
    SessionOverError,
    UnresolvedStrategyError,
)

from .logic import SimulationLogicService

from .messages import StatusLevel, StatusMessageService

from .session import SessionOutcome, SimulationSession, TurnRecord

from .status import (
    Action,
    CardinalDirection,
    MovementAction,
    Status,
    initial_status,
)

__all__ = [
    # Config
    "DECAY_PER_TURN",
    "MAX_ENERGY",
    "MAX_GAS",
    "SimulationConfig",
    # Direction - strategies
    "DirectionStrategy",
    "turn_left",
    "turn_right",
    "drive_forward",
    "reverse",
    # Direction - resolution
    "DEFAULT_STRATEGIES",
    "StrategyResolver",
    "default_resolver",
    "resolver_from_mapping",
    "DirectionEngine",
    # Driver
    "Driver",
    "create_driver",
    "load_driver",
    # Errors
    "CarSimError",
    "ConfigError",
    "InvalidDriverDataError",
    "SessionOverError",
    "UnresolvedStrategyError",
    # Logic
    "SimulationLogicService",
    # Messages
    "StatusLevel",
    "StatusMessageService",
    # Session
    "SessionOutcome",
    "SimulationSession",
    "TurnRecord",
    # Status
    "Action",
    "CardinalDirection",
    "MovementAction",
    "Status",
    "initial_status",
]
