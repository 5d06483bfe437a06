"""Episode State entity.

Domain entity holding everything the transition engine reads and updates
during one episode.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class EpisodeState:
    """State of one episode of the simulated home.

    A state is never modified in place; each step produces a new record.
    The exogenous profiles are generated at reset and shared by every
    state of the episode.

    Attributes:
        indoor_temp: Indoor temperature in °C
        battery_soc: Battery state of charge (0-1)
        appliance_remaining_minutes: Minutes left on the running appliance job
        time_step: 1-based step counter, terminal once above the episode length
        outside_temp_profile: Outside temperature per step in °C
        price_profile: Electricity price per step in $/kWh
        last_grid_power: Most recent realized grid draw in kW
    """

    indoor_temp: float
    battery_soc: float
    appliance_remaining_minutes: int
    time_step: int
    outside_temp_profile: tuple[float, ...]
    price_profile: tuple[float, ...]
    last_grid_power: float = 0.0

    def __post_init__(self) -> None:
        """Validate state invariants."""
        if not math.isfinite(self.indoor_temp):
            raise ValueError(f"indoor_temp must be finite, got {self.indoor_temp}")
        if not 0.0 <= self.battery_soc <= 1.0:
            raise ValueError(f"battery_soc must be between 0 and 1, got {self.battery_soc}")
        if self.appliance_remaining_minutes < 0:
            raise ValueError(
                f"appliance_remaining_minutes must be non-negative, "
                f"got {self.appliance_remaining_minutes}"
            )
        if self.time_step < 1:
            raise ValueError(f"time_step must be at least 1, got {self.time_step}")
        if not self.outside_temp_profile:
            raise ValueError("outside_temp_profile cannot be empty")
        if len(self.outside_temp_profile) != len(self.price_profile):
            raise ValueError(
                f"profiles must have the same length, got {len(self.outside_temp_profile)} "
                f"and {len(self.price_profile)}"
            )

    @property
    def episode_length(self) -> int:
        """Number of steps in the episode."""
        return len(self.outside_temp_profile)

    @property
    def is_terminal(self) -> bool:
        """Whether every step of the episode has been taken."""
        return self.time_step > self.episode_length

    def profile_index(self) -> int:
        """Return the 0-based profile position of the current step.

        The step is clamped into [1, N] so a terminal state reuses the
        final profile entry.
        """
        return min(max(1, self.time_step), self.episode_length) - 1

    @property
    def outside_temp(self) -> float:
        """Outside temperature at the current step."""
        return self.outside_temp_profile[self.profile_index()]

    @property
    def price(self) -> float:
        """Electricity price at the current step."""
        return self.price_profile[self.profile_index()]
