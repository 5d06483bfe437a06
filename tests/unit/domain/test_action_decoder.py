"""Unit tests for ActionDecoder service."""

import pytest
from domain.entities import EpisodeState
from domain.services import NUM_ACTIONS, ActionDecoder
from domain.value_objects import (
    ApplianceCommand,
    BatteryMode,
    HvacLevel,
    JointAction,
    SimulationConfig,
)


@pytest.fixture
def decoder():
    """Create a decoder with the default configuration."""
    return ActionDecoder(SimulationConfig())


@pytest.fixture
def create_state():
    """Factory function to create test states."""

    def _create(appliance_remaining_minutes: int = 0) -> EpisodeState:
        return EpisodeState(
            indoor_temp=22.0,
            battery_soc=0.5,
            appliance_remaining_minutes=appliance_remaining_minutes,
            time_step=1,
            outside_temp_profile=(7.0,),
            price_profile=(0.08,),
        )

    return _create


class TestDecode:
    """Tests for decoding joint action indices."""

    def test_action_zero(self):
        """Test that action 0 is OFF / DISCHARGE / NOOP."""
        assert ActionDecoder.decode(0) == JointAction(
            HvacLevel.OFF, BatteryMode.DISCHARGE, ApplianceCommand.NOOP
        )

    def test_action_seventeen(self):
        """Test that action 17 is COMFORT / CHARGE / START."""
        assert ActionDecoder.decode(17) == JointAction(
            HvacLevel.COMFORT, BatteryMode.CHARGE, ApplianceCommand.START
        )

    def test_radix_decomposition(self):
        """Test a mid-range index."""
        joint = ActionDecoder.decode(9)
        assert joint.hvac_level == HvacLevel.ECO
        assert joint.battery_mode == BatteryMode.HOLD
        assert joint.appliance_command == ApplianceCommand.START

    def test_encode_inverts_decode(self):
        """Test that every index survives a decode/encode cycle."""
        for a in range(NUM_ACTIONS):
            joint = ActionDecoder.decode(a)
            assert ActionDecoder.encode(
                joint.hvac_level, joint.battery_mode, joint.appliance_command
            ) == a
            assert joint.index == a

    @pytest.mark.parametrize("action", [-1, 18, 100])
    def test_out_of_range_action_raises_error(self, action):
        """Test that indices outside [0, 17] are rejected, not clamped."""
        with pytest.raises(ValueError, match="action must be between 0 and 17"):
            ActionDecoder.decode(action)

    @pytest.mark.parametrize(
        "action", [2.5, True, "3", "x", None, [3], float("inf"), float("nan")]
    )
    def test_non_integer_action_raises_error(self, action):
        """Test that non-integer actions are rejected."""
        with pytest.raises(ValueError, match="action must be an integer"):
            ActionDecoder.decode(action)


class TestResolve:
    """Tests for resolving actions against the episode state."""

    def test_hvac_power_levels(self, decoder, create_state):
        """Test that HVAC levels map to their configured power."""
        state = create_state()
        assert decoder.resolve(0, state).hvac_power_kw == 0.0
        assert decoder.resolve(6, state).hvac_power_kw == 2.0
        assert decoder.resolve(12, state).hvac_power_kw == 5.0

    def test_battery_commands(self, decoder, create_state):
        """Test that battery modes map to signed power."""
        state = create_state()
        assert decoder.resolve(0, state).battery_command_kw == -3.0
        assert decoder.resolve(2, state).battery_command_kw == 0.0
        assert decoder.resolve(4, state).battery_command_kw == 3.0

    def test_start_when_idle_starts_job(self, decoder, create_state):
        """Test that START begins a job when none is running."""
        command = decoder.resolve(1, create_state(appliance_remaining_minutes=0))
        assert command.appliance_start is True

    def test_start_while_running_is_noop(self, decoder, create_state):
        """Test that START does not restart a running job."""
        command = decoder.resolve(1, create_state(appliance_remaining_minutes=12))
        assert command.appliance_start is False

    def test_noop_never_starts_job(self, decoder, create_state):
        """Test that NOOP leaves the appliance idle."""
        assert decoder.resolve(0, create_state()).appliance_start is False
