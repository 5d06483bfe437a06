"""Home energy control value objects and types.

Immutable data structures exchanged by the transition engine.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from domain.entities import EpisodeState


class HvacLevel(int, Enum):
    """HVAC operating levels, valued by their index in the joint action.

    Attributes:
        OFF: HVAC off
        ECO: Reduced power
        COMFORT: Full power
    """

    OFF = 0
    ECO = 1
    COMFORT = 2


class BatteryMode(int, Enum):
    """Battery operating modes, valued by their index in the joint action.

    Attributes:
        DISCHARGE: Supply the house at maximum power
        HOLD: Idle
        CHARGE: Draw from the grid at maximum power
    """

    DISCHARGE = 0
    HOLD = 1
    CHARGE = 2


class ApplianceCommand(int, Enum):
    """Flexible appliance commands, valued by their index in the joint action.

    Attributes:
        NOOP: Leave the appliance as it is
        START: Start a job if none is running
    """

    NOOP = 0
    START = 1


@dataclass(frozen=True)
class JointAction:
    """The three sub-commands packed into one discrete action.

    Attributes:
        hvac_level: HVAC operating level
        battery_mode: Battery operating mode
        appliance_command: Flexible appliance command
    """

    hvac_level: HvacLevel
    battery_mode: BatteryMode
    appliance_command: ApplianceCommand

    @property
    def index(self) -> int:
        """Encoded joint action index in [0, 17]."""
        return int(self.hvac_level) * 6 + int(self.battery_mode) * 2 + int(self.appliance_command)


@dataclass(frozen=True)
class ControlCommand:
    """A joint action resolved against the current episode state.

    Attributes:
        hvac_power_kw: Electrical HVAC power for this step
        battery_command_kw: Signed battery power (positive charges)
        appliance_start: Whether a new appliance job starts this step
    """

    hvac_power_kw: float
    battery_command_kw: float
    appliance_start: bool

    def __post_init__(self) -> None:
        """Validate command values."""
        if self.hvac_power_kw < 0:
            raise ValueError(f"hvac_power_kw must be non-negative, got {self.hvac_power_kw}")


@dataclass(frozen=True)
class ExogenousProfiles:
    """Per-episode exogenous time series, one entry per step.

    Attributes:
        outside_temp: Outside temperature in °C
        price: Electricity price in $/kWh
    """

    outside_temp: tuple[float, ...]
    price: tuple[float, ...]

    def __post_init__(self) -> None:
        """Validate profile lengths."""
        if not self.outside_temp:
            raise ValueError("outside_temp profile cannot be empty")
        if len(self.outside_temp) != len(self.price):
            raise ValueError(
                f"profiles must have the same length, got {len(self.outside_temp)} "
                f"and {len(self.price)}"
            )

    def __len__(self) -> int:
        return len(self.outside_temp)


@dataclass(frozen=True)
class Observation:
    """Externally visible observation of the home.

    Attributes:
        indoor_temp: Indoor temperature in °C
        outside_temp: Outside temperature in °C
        battery_soc: Battery state of charge (0-1)
        time_sin: Sine of the time of day
        time_cos: Cosine of the time of day
        price: Current electricity price in $/kWh
        appliance_remaining_minutes: Minutes left on the appliance job
    """

    indoor_temp: float
    outside_temp: float
    battery_soc: float
    time_sin: float
    time_cos: float
    price: float
    appliance_remaining_minutes: float

    def __post_init__(self) -> None:
        """Validate observation values."""
        if not 0.0 <= self.battery_soc <= 1.0:
            raise ValueError(f"battery_soc must be between 0 and 1, got {self.battery_soc}")
        if self.appliance_remaining_minutes < 0:
            raise ValueError(
                f"appliance_remaining_minutes must be non-negative, "
                f"got {self.appliance_remaining_minutes}"
            )

    def as_tuple(self) -> tuple[float, ...]:
        """Return the observation vector in its fixed order."""
        return (
            self.indoor_temp,
            self.outside_temp,
            self.battery_soc,
            self.time_sin,
            self.time_cos,
            self.price,
            self.appliance_remaining_minutes,
        )


@dataclass(frozen=True)
class RewardBreakdown:
    """The four cost terms of one transition.

    Attributes:
        energy_cost: Grid energy times price (negative on net export)
        comfort_cost: Weighted temperature deviation beyond the deadband
        peak_cost: Weighted grid draw above the peak threshold
        battery_cycle_cost: Weighted battery throughput
    """

    energy_cost: float
    comfort_cost: float
    peak_cost: float
    battery_cycle_cost: float

    @property
    def total_cost(self) -> float:
        return self.energy_cost + self.comfort_cost + self.peak_cost + self.battery_cycle_cost

    @property
    def reward(self) -> float:
        return -self.total_cost


@dataclass(frozen=True)
class DynamicsResult:
    """Physical outcome of one step.

    Attributes:
        indoor_temp: Next indoor temperature in °C
        battery_soc: Next battery state of charge
        appliance_remaining_minutes: Next appliance countdown
        appliance_power_kw: Appliance draw during the step
        grid_power_kw: Realized grid draw during the step
    """

    indoor_temp: float
    battery_soc: float
    appliance_remaining_minutes: int
    appliance_power_kw: float
    grid_power_kw: float


@dataclass(frozen=True)
class StepOutcome:
    """Result of advancing an episode by one step.

    Attributes:
        state: Episode state after the step
        observation: Observation of the new state
        reward: Scalar reward of the transition
        done: Whether the episode has ended
        info: Diagnostic values of the transition
    """

    state: EpisodeState
    observation: Observation
    reward: float
    done: bool
    info: dict[str, Any] = field(default_factory=dict)
