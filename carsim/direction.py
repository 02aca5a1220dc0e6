"""
Direction strategies and the engine that dispatches them.

Each strategy is a pure function over Status that rotates the facing within
the cyclic group {North, East, South, West}. The engine receives a resolver
(MovementAction -> strategy) at construction and picks the strategy afresh on
every call, so one engine can serve any number of sessions.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping, Optional

from .errors import UnresolvedStrategyError
from .status import MovementAction, Status

logger = logging.getLogger(__name__)

DirectionStrategy = Callable[[Status], Status]
StrategyResolver = Callable[[MovementAction], Optional[DirectionStrategy]]


# =============================================================================
# STRATEGIES
# =============================================================================

def turn_left(status: Status) -> Status:
    """Quarter turn counter-clockwise (North -> West)."""
    return status.with_direction(status.cardinal_direction.rotated(-1))


def turn_right(status: Status) -> Status:
    """Quarter turn clockwise (North -> East)."""
    return status.with_direction(status.cardinal_direction.rotated(1))


def drive_forward(status: Status) -> Status:
    """Keep the current facing, whatever the previous movement was."""
    return status


def reverse(status: Status) -> Status:
    """Half turn (North <-> South, East <-> West)."""
    return status.with_direction(status.cardinal_direction.opposite)


DEFAULT_STRATEGIES: Mapping[MovementAction, DirectionStrategy] = {
    MovementAction.LEFT: turn_left,
    MovementAction.RIGHT: turn_right,
    MovementAction.FORWARD: drive_forward,
    MovementAction.BACKWARD: reverse,
}


def default_resolver(action: MovementAction) -> DirectionStrategy:
    """Look up the built-in strategy for a movement action."""
    return DEFAULT_STRATEGIES[action]


def resolver_from_mapping(strategies: Mapping[MovementAction, DirectionStrategy]) -> StrategyResolver:
    """Wrap a mapping (e.g. with instrumented stand-ins) as a resolver."""
    table = dict(strategies)
    return table.get


# =============================================================================
# ENGINE
# =============================================================================

class DirectionEngine:
    """
    Applies movement actions to a status through a pluggable resolver.

    The engine keeps no per-call state: the resolved strategy is local to
    apply(), so concurrent use from independent sessions is safe.
    """

    def __init__(self, resolver: StrategyResolver = default_resolver):
        self._resolver = resolver

    def resolve(self, action: MovementAction) -> DirectionStrategy:
        """
        Find the strategy serving an action.

        Raises:
            UnresolvedStrategyError: If the action is not a MovementAction or
                the resolver has nothing for it.
        """
        if not isinstance(action, MovementAction):
            raise UnresolvedStrategyError(action, "not a movement action")

        try:
            strategy = self._resolver(action)
        except LookupError as e:
            raise UnresolvedStrategyError(action) from e

        if strategy is None:
            raise UnresolvedStrategyError(action)
        return strategy

    def apply(self, action: MovementAction, status: Status) -> Status:
        """
        Execute the strategy for an action.

        Args:
            action: Movement to apply.
            status: Status before the movement.

        Returns:
            New status with the rotated facing and last_movement_action set
            to the action just applied.
        """
        strategy = self.resolve(action)
        result = strategy(status)
        logger.debug(
            "%s: %s -> %s",
            action.value,
            status.cardinal_direction.value,
            result.cardinal_direction.value,
        )
        return result.with_direction(result.cardinal_direction, movement=action)
