"""Unit tests for SimulationConfig and RewardConfig value objects."""

from dataclasses import FrozenInstanceError

import pytest
from domain.value_objects import RewardConfig, SimulationConfig


class TestRewardConfig:
    """Tests for RewardConfig value object."""

    def test_default_config(self):
        """Test creating config with default values."""
        config = RewardConfig()
        assert config.alpha_comfort == 6.0
        assert config.beta_peak == 4.0
        assert config.gamma_batt == 0.05
        assert config.comfort_deadband_celsius == 0.5
        assert config.peak_threshold_kw == 6.0

    def test_config_is_frozen(self):
        """Test that RewardConfig is immutable."""
        config = RewardConfig()
        with pytest.raises(FrozenInstanceError):
            config.alpha_comfort = 1.0

    def test_negative_alpha_comfort_raises_error(self):
        """Test that negative alpha_comfort raises ValueError."""
        with pytest.raises(ValueError, match="alpha_comfort must be non-negative"):
            RewardConfig(alpha_comfort=-1.0)

    def test_negative_beta_peak_raises_error(self):
        """Test that negative beta_peak raises ValueError."""
        with pytest.raises(ValueError, match="beta_peak must be non-negative"):
            RewardConfig(beta_peak=-1.0)

    def test_negative_gamma_batt_raises_error(self):
        """Test that negative gamma_batt raises ValueError."""
        with pytest.raises(ValueError, match="gamma_batt must be non-negative"):
            RewardConfig(gamma_batt=-0.1)

    def test_negative_deadband_raises_error(self):
        """Test that a negative comfort deadband raises ValueError."""
        with pytest.raises(ValueError, match="comfort_deadband_celsius must be non-negative"):
            RewardConfig(comfort_deadband_celsius=-0.5)

    def test_zero_deadband_is_allowed(self):
        """Test that the deadband can be disabled."""
        assert RewardConfig(comfort_deadband_celsius=0.0).comfort_deadband_celsius == 0.0


class TestSimulationConfig:
    """Tests for SimulationConfig value object."""

    def test_default_config(self):
        """Test creating config with default values."""
        config = SimulationConfig()
        assert config.step_seconds == 60.0
        assert config.episode_length_steps == 1440
        assert config.outside_temp_base == 15.0
        assert config.outside_temp_amplitude == 8.0
        assert config.preferred_temp == 22.0
        assert config.hvac_power_levels_kw == (0.0, 2.0, 5.0)
        assert config.battery_max_power_kw == 3.0
        assert config.battery_capacity_kwh == 10.0
        assert config.appliance_power_kw == 1.5
        assert config.appliance_job_duration_minutes == 60
        assert config.price_offpeak == 0.08
        assert config.price_mid == 0.15
        assert config.price_peak == 0.30
        assert config.base_load_kw == 0.6
        assert config.reward == RewardConfig()

    def test_derived_step_durations(self):
        """Test step duration helpers."""
        config = SimulationConfig(step_seconds=900)
        assert config.step_hours == pytest.approx(0.25)
        assert config.step_minutes == pytest.approx(15.0)

    def test_hvac_levels_are_normalized_to_tuple(self):
        """Test that a list of HVAC levels is stored as a tuple of floats."""
        config = SimulationConfig(hvac_power_levels_kw=[0, 1, 3])
        assert config.hvac_power_levels_kw == (0.0, 1.0, 3.0)

    def test_config_is_frozen(self):
        """Test that SimulationConfig is immutable."""
        config = SimulationConfig()
        with pytest.raises(FrozenInstanceError):
            config.step_seconds = 30

    def test_zero_step_seconds_raises_error(self):
        """Test that a zero step duration raises ValueError."""
        with pytest.raises(ValueError, match="step_seconds must be positive"):
            SimulationConfig(step_seconds=0)

    def test_zero_episode_length_raises_error(self):
        """Test that an empty episode raises ValueError."""
        with pytest.raises(ValueError, match="episode_length_steps must be at least 1"):
            SimulationConfig(episode_length_steps=0)

    def test_wrong_number_of_hvac_levels_raises_error(self):
        """Test that the HVAC table must have three levels."""
        with pytest.raises(ValueError, match="exactly 3 entries"):
            SimulationConfig(hvac_power_levels_kw=(0.0, 2.0))

    def test_negative_hvac_level_raises_error(self):
        """Test that negative HVAC power raises ValueError."""
        with pytest.raises(ValueError, match="hvac_power_levels_kw must be non-negative"):
            SimulationConfig(hvac_power_levels_kw=(0.0, -2.0, 5.0))

    def test_zero_battery_capacity_raises_error(self):
        """Test that a zero battery capacity raises ValueError."""
        with pytest.raises(ValueError, match="battery_capacity_kwh must be positive"):
            SimulationConfig(battery_capacity_kwh=0.0)

    def test_negative_battery_power_raises_error(self):
        """Test that negative battery power raises ValueError."""
        with pytest.raises(ValueError, match="battery_max_power_kw must be non-negative"):
            SimulationConfig(battery_max_power_kw=-3.0)

    def test_zero_thermal_resistance_raises_error(self):
        """Test that a zero thermal resistance raises ValueError."""
        with pytest.raises(ValueError, match="thermal_resistance cannot be zero"):
            SimulationConfig(thermal_resistance=0.0)

    def test_negative_price_raises_error(self):
        """Test that a negative tariff raises ValueError."""
        with pytest.raises(ValueError, match="price_peak must be non-negative"):
            SimulationConfig(price_peak=-0.3)

    def test_negative_job_duration_raises_error(self):
        """Test that a negative appliance job duration raises ValueError."""
        with pytest.raises(ValueError, match="appliance_job_duration_minutes must be non-negative"):
            SimulationConfig(appliance_job_duration_minutes=-1)
