"""
Tests for the status model.

Tests cover:
- Cardinal direction rotation and parsing
- Action selectors and their movement mapping
- Status validation and copy helpers
- Initial status from configuration
"""

import dataclasses

import pytest

from carsim.config import SimulationConfig
from carsim.status import (
    Action,
    CardinalDirection,
    MovementAction,
    Status,
    initial_status,
)


class TestCardinalDirection:
    """Tests for CardinalDirection rotation."""

    @pytest.mark.parametrize("steps,expected", [
        (1, CardinalDirection.EAST),
        (2, CardinalDirection.SOUTH),
        (3, CardinalDirection.WEST),
        (4, CardinalDirection.NORTH),
        (-1, CardinalDirection.WEST),
        (-5, CardinalDirection.WEST),
        (9, CardinalDirection.EAST),
    ])
    def test_rotated_from_north(self, steps, expected):
        """Test rotation wraps around every four steps."""
        assert CardinalDirection.NORTH.rotated(steps) == expected

    def test_opposite(self):
        """Test opposite direction pairs."""
        assert CardinalDirection.NORTH.opposite == CardinalDirection.SOUTH
        assert CardinalDirection.EAST.opposite == CardinalDirection.WEST
        assert CardinalDirection.SOUTH.opposite == CardinalDirection.NORTH
        assert CardinalDirection.WEST.opposite == CardinalDirection.EAST

    @pytest.mark.parametrize("text,expected", [
        ("north", CardinalDirection.NORTH),
        ("EAST", CardinalDirection.EAST),
        (" s ", CardinalDirection.SOUTH),
        ("W", CardinalDirection.WEST),
    ])
    def test_parse(self, text, expected):
        """Test parsing full names and initials."""
        assert CardinalDirection.parse(text) == expected

    def test_parse_rejects_unknown(self):
        """Test parsing an unknown direction raises."""
        with pytest.raises(ValueError):
            CardinalDirection.parse("north-east")


class TestAction:
    """Tests for Action selectors."""

    def test_numeric_values(self):
        """Test selector numbers match the driver menu."""
        assert Action.TURN_LEFT == 1
        assert Action.TURN_RIGHT == 2
        assert Action.DRIVE_FORWARD == 3
        assert Action.REVERSE == 4
        assert Action.REST == 5
        assert Action.REFUEL == 6
        assert Action.NO_ACTION == 7

    def test_movement_mapping(self):
        """Test selectors 1-4 map to movement actions."""
        assert Action.TURN_LEFT.movement == MovementAction.LEFT
        assert Action.TURN_RIGHT.movement == MovementAction.RIGHT
        assert Action.DRIVE_FORWARD.movement == MovementAction.FORWARD
        assert Action.REVERSE.movement == MovementAction.BACKWARD

    @pytest.mark.parametrize("action", [Action.REST, Action.REFUEL, Action.NO_ACTION])
    def test_non_movement_actions_have_no_movement(self, action):
        """Test rest, refuel and no-op have no movement."""
        assert action.movement is None

    def test_coerce(self):
        """Test coercing ints to actions."""
        assert Action.coerce(3) is Action.DRIVE_FORWARD
        assert Action.coerce(0) is None
        assert Action.coerce(42) is None

    def test_label(self):
        """Test human-readable label."""
        assert Action.DRIVE_FORWARD.label == "drive forward"


class TestStatus:
    """Tests for the Status value type."""

    def test_defaults(self):
        """Test default status values."""
        status = Status()
        assert status.cardinal_direction == CardinalDirection.NORTH
        assert status.energy_value == 0
        assert status.gas_value == 0
        assert status.last_movement_action is None

    def test_is_frozen(self):
        """Test status cannot be mutated in place."""
        status = Status(energy_value=10, gas_value=10)
        with pytest.raises(dataclasses.FrozenInstanceError):
            status.energy_value = 5

    @pytest.mark.parametrize("energy,gas", [(-1, 0), (0, -1), (-12, -12)])
    def test_negative_resources_rejected(self, energy, gas):
        """Test negative energy or gas is rejected."""
        with pytest.raises(ValueError):
            Status(energy_value=energy, gas_value=gas)

    @pytest.mark.parametrize("energy,gas", [
        (7.5, 10),
        (10, 7.5),
        (10.0, 10),
        ("10", 10),
        (True, 10),
        (10, None),
    ])
    def test_non_integer_resources_rejected(self, energy, gas):
        """Test energy and gas must be plain integers."""
        with pytest.raises(ValueError, match="must be an integer"):
            Status(energy_value=energy, gas_value=gas)

    def test_invalid_direction_rejected(self):
        """Test a non-enum direction is rejected."""
        with pytest.raises(ValueError):
            Status(cardinal_direction="north")

    def test_with_helpers_return_new_values(self):
        """Test copy helpers leave the original untouched."""
        status = Status(CardinalDirection.EAST, 10, 10, MovementAction.LEFT)

        assert status.with_energy(3) == Status(CardinalDirection.EAST, 3, 10, MovementAction.LEFT)
        assert status.with_gas(4) == Status(CardinalDirection.EAST, 10, 4, MovementAction.LEFT)
        assert status.with_direction(CardinalDirection.SOUTH).last_movement_action == MovementAction.LEFT
        assert status.with_direction(
            CardinalDirection.SOUTH, movement=MovementAction.BACKWARD
        ).last_movement_action == MovementAction.BACKWARD
        # Original untouched
        assert status == Status(CardinalDirection.EAST, 10, 10, MovementAction.LEFT)

    def test_with_energy_rejects_float(self):
        """Test copy helpers validate like the constructor."""
        with pytest.raises(ValueError):
            Status(energy_value=10, gas_value=10).with_energy(7.5)

    def test_to_dict(self):
        """Test plain-data view."""
        status = Status(CardinalDirection.WEST, 7, 8, MovementAction.RIGHT)
        assert status.to_dict() == {
            "cardinal_direction": "west",
            "energy_value": 7,
            "gas_value": 8,
            "last_movement_action": "right",
        }


class TestInitialStatus:
    """Tests for initial_status."""

    def test_default_config(self):
        """Test session starts north with full resources."""
        status = initial_status()
        assert status == Status(CardinalDirection.NORTH, 20, 20, None)

    def test_custom_config(self):
        """Test starting values follow the configuration."""
        config = SimulationConfig(max_energy=30, max_gas=40, initial_direction=CardinalDirection.WEST)
        status = initial_status(config)
        assert status.cardinal_direction == CardinalDirection.WEST
        assert status.energy_value == 30
        assert status.gas_value == 40
