"""Simulation configuration value object.

Immutable set of tunables for the home energy environment. Every value
is fixed for the lifetime of an environment instance.
"""

from dataclasses import dataclass, field

from .reward_config import RewardConfig


@dataclass(frozen=True)
class SimulationConfig:
    """Configuration of the simulated home.

    Constants are illustrative tuning values, not calibrated physics.

    Attributes:
        step_seconds: Duration of one step in seconds (Ts).
        episode_length_steps: Number of steps in an episode (N).
        outside_temp_base: Mean of the diurnal outside temperature in °C.
        outside_temp_amplitude: Amplitude of the diurnal outside temperature in °C.
        preferred_temp: Indoor temperature setpoint in °C.
        hvac_power_levels_kw: Electrical power of the OFF, ECO and COMFORT levels.
        battery_max_power_kw: Charge/discharge power magnitude.
        battery_capacity_kwh: Usable battery capacity.
        appliance_power_kw: Draw of the flexible appliance while running.
        appliance_job_duration_minutes: Length of one appliance job.
        price_offpeak: Tariff for 00:00-06:00 in $/kWh.
        price_mid: Tariff for 06:00-16:00 and 20:00-24:00 in $/kWh.
        price_peak: Tariff for 16:00-20:00 in $/kWh.
        thermal_capacitance: Lumped thermal capacitance (C).
        thermal_resistance: Envelope thermal resistance (R).
        hvac_gain: Proportional HVAC gain per kW.
        base_load_kw: Non-controllable household load.
        reward: Reward weights and thresholds.
    """

    step_seconds: float = 60.0
    episode_length_steps: int = 24 * 60

    # Thermal
    outside_temp_base: float = 15.0
    outside_temp_amplitude: float = 8.0
    preferred_temp: float = 22.0
    hvac_power_levels_kw: tuple[float, float, float] = (0.0, 2.0, 5.0)
    thermal_capacitance: float = 1.0
    thermal_resistance: float = 3.0
    hvac_gain: float = 0.2

    # Battery
    battery_max_power_kw: float = 3.0
    battery_capacity_kwh: float = 10.0

    # Flexible appliance
    appliance_power_kw: float = 1.5
    appliance_job_duration_minutes: int = 60

    # Loads and tariff
    base_load_kw: float = 0.6
    price_offpeak: float = 0.08
    price_mid: float = 0.15
    price_peak: float = 0.30

    reward: RewardConfig = field(default_factory=RewardConfig)

    def __post_init__(self) -> None:
        """Validate simulation configuration values."""
        if self.step_seconds <= 0:
            raise ValueError(f"step_seconds must be positive, got {self.step_seconds}")
        if self.episode_length_steps < 1:
            raise ValueError(
                f"episode_length_steps must be at least 1, got {self.episode_length_steps}"
            )

        levels = tuple(float(level) for level in self.hvac_power_levels_kw)
        if len(levels) != 3:
            raise ValueError(
                f"hvac_power_levels_kw must have exactly 3 entries, got {len(levels)}"
            )
        if any(level < 0 for level in levels):
            raise ValueError(f"hvac_power_levels_kw must be non-negative, got {levels}")
        object.__setattr__(self, "hvac_power_levels_kw", levels)

        if self.thermal_capacitance == 0:
            raise ValueError("thermal_capacitance cannot be zero")
        if self.thermal_resistance == 0:
            raise ValueError("thermal_resistance cannot be zero")

        if self.battery_max_power_kw < 0:
            raise ValueError(
                f"battery_max_power_kw must be non-negative, got {self.battery_max_power_kw}"
            )
        if self.battery_capacity_kwh <= 0:
            raise ValueError(
                f"battery_capacity_kwh must be positive, got {self.battery_capacity_kwh}"
            )

        if self.appliance_power_kw < 0:
            raise ValueError(
                f"appliance_power_kw must be non-negative, got {self.appliance_power_kw}"
            )
        if self.appliance_job_duration_minutes < 0:
            raise ValueError(
                f"appliance_job_duration_minutes must be non-negative, "
                f"got {self.appliance_job_duration_minutes}"
            )

        if self.base_load_kw < 0:
            raise ValueError(f"base_load_kw must be non-negative, got {self.base_load_kw}")
        for name in ("price_offpeak", "price_mid", "price_peak"):
            value = getattr(self, name)
            if value < 0:
                raise ValueError(f"{name} must be non-negative, got {value}")

    @property
    def step_hours(self) -> float:
        """Step duration in hours."""
        return self.step_seconds / 3600

    @property
    def step_minutes(self) -> float:
        """Step duration in minutes, the time scale of the thermal model."""
        return self.step_seconds / 60
