"""Observation encoder service."""

import math

from domain.entities import EpisodeState
from domain.value_objects import Observation

# The time-of-day features assume one-minute steps regardless of step_seconds.
MINUTES_PER_HOUR = 60


class ObservationEncoder:
    """Project an episode state onto the externally visible observation."""

    def encode(self, state: EpisodeState) -> Observation:
        """Build a fresh observation for a state.

        Profile lookups clamp the step into the episode, so a terminal
        state reports the final profile entry.

        Args:
            state: Episode state to observe

        Returns:
            The observation of the state
        """
        t_hours = (state.time_step - 1) / MINUTES_PER_HOUR
        return Observation(
            indoor_temp=state.indoor_temp,
            outside_temp=state.outside_temp,
            battery_soc=state.battery_soc,
            time_sin=math.sin(2 * math.pi * t_hours / 24),
            time_cos=math.cos(2 * math.pi * t_hours / 24),
            price=state.price,
            appliance_remaining_minutes=float(state.appliance_remaining_minutes),
        )
