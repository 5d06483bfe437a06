"""Unit tests for RuleBasedPolicy."""

import pytest
from domain.services import ActionDecoder, RuleBasedPolicy
from domain.value_objects import (
    ApplianceCommand,
    BatteryMode,
    HvacLevel,
    Observation,
    SimulationConfig,
)


@pytest.fixture
def create_observation():
    """Factory function to create test observations."""

    def _create(appliance_remaining_minutes: float = 0.0) -> Observation:
        return Observation(
            indoor_temp=22.0,
            outside_temp=10.0,
            battery_soc=0.5,
            time_sin=0.0,
            time_cos=1.0,
            price=0.08,
            appliance_remaining_minutes=appliance_remaining_minutes,
        )

    return _create


class TestRuleBasedPolicy:
    """Tests for RuleBasedPolicy."""

    def test_night_schedule_starts_appliance(self, create_observation):
        """Test ECO, CHARGE and START at midnight."""
        policy = RuleBasedPolicy()
        joint = ActionDecoder.decode(policy.select_action(create_observation(), 0))
        assert joint.hvac_level == HvacLevel.ECO
        assert joint.battery_mode == BatteryMode.CHARGE
        assert joint.appliance_command == ApplianceCommand.START

    def test_night_schedule_with_running_job(self, create_observation):
        """Test that no START is issued while a job runs."""
        policy = RuleBasedPolicy()
        action = policy.select_action(create_observation(appliance_remaining_minutes=30), 10)
        assert action == 10

    def test_morning_comfort(self, create_observation):
        """Test COMFORT and HOLD at 07:00."""
        policy = RuleBasedPolicy()
        assert policy.select_action(create_observation(), 7 * 60) == 14

    def test_evening_peak_discharge(self, create_observation):
        """Test COMFORT and DISCHARGE during the peak band."""
        policy = RuleBasedPolicy()
        assert policy.select_action(create_observation(), 17 * 60) == 12

    def test_late_evening_eco(self, create_observation):
        """Test ECO and HOLD after 22:00."""
        policy = RuleBasedPolicy()
        assert policy.select_action(create_observation(), 22 * 60) == 8

    def test_no_appliance_start_after_6h(self, create_observation):
        """Test that the appliance window closes at 06:00."""
        policy = RuleBasedPolicy()
        assert policy.select_action(create_observation(), 6 * 60) == 8

    def test_hour_follows_step_duration(self, create_observation):
        """Test that the schedule uses the configured step duration."""
        policy = RuleBasedPolicy(SimulationConfig(step_seconds=3600, episode_length_steps=24))
        assert policy.select_action(create_observation(), 17) == 12

    def test_name(self):
        """Test the policy name used in evaluations."""
        assert RuleBasedPolicy().name == "baseline"
