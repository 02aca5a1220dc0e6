"""Exceptions raised by the car simulator."""


class CarSimError(Exception):
    """Base class for car simulator errors."""


class UnresolvedStrategyError(CarSimError):
    """No direction strategy is wired for the requested movement action."""

    def __init__(self, action: object, reason: str = "no strategy registered"):
        self.action = action
        super().__init__(f"Cannot resolve direction strategy for {action!r}: {reason}")


class ConfigError(CarSimError, ValueError):
    """Invalid simulation configuration."""


class InvalidDriverDataError(CarSimError, ValueError):
    """Driver payload is missing required fields."""


class SessionOverError(CarSimError):
    """A turn was requested on a session that has already ended."""
