"""Exogenous profile generator.

Builds the outside temperature and time-of-use price series of an episode.
"""

import logging
import math

from domain.value_objects import ExogenousProfiles, SimulationConfig

logger = logging.getLogger(__name__)


class ProfileGenerator:
    """Generate the fixed per-episode exogenous time series.

    The output depends on configuration only:
    - Outside temperature: diurnal sinusoid, coldest at the start of the day, warmest at noon
    - Price: time-of-use tariff with off-peak, mid and peak bands
    """

    def __init__(self, config: SimulationConfig) -> None:
        """Initialize the profile generator.

        Args:
            config: Simulation configuration
        """
        self._config = config

    def generate(self) -> ExogenousProfiles:
        """Generate the profiles for one episode.

        Returns:
            Outside temperature and price for each step of the episode
        """
        outside_temp: list[float] = []
        price: list[float] = []

        for i in range(self._config.episode_length_steps):
            t_hours = i * self._config.step_seconds / 3600
            outside_temp.append(self.outside_temperature(t_hours))
            price.append(self.tariff_price(t_hours % 24))

        profiles = ExogenousProfiles(outside_temp=tuple(outside_temp), price=tuple(price))
        logger.debug(
            "Generated profiles for %d steps: outside %.2f..%.2f°C",
            len(profiles),
            min(outside_temp),
            max(outside_temp),
        )

        return profiles

    def outside_temperature(self, t_hours: float) -> float:
        """Outside temperature at a time into the episode.

        Args:
            t_hours: Hours since the start of the episode

        Returns:
            Outside temperature in °C
        """
        return self._config.outside_temp_base + self._config.outside_temp_amplitude * math.sin(
            (2 * math.pi / 24) * (t_hours - 6)
        )

    def tariff_price(self, hour: float) -> float:
        """Time-of-use price for an hour of the day.

        Args:
            hour: Hour of the day in [0, 24)

        Returns:
            Price in $/kWh
        """
        if 0 <= hour < 6:
            return self._config.price_offpeak
        if 6 <= hour < 16:
            return self._config.price_mid
        if 16 <= hour < 20:
            return self._config.price_peak
        return self._config.price_mid
