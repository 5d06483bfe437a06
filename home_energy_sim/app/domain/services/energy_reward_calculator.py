"""Energy reward calculator service.

Domain service for calculating rewards in the home energy environment.
"""

import logging

from domain.entities import EpisodeState
from domain.interfaces.reward_calculator import IRewardCalculator
from domain.value_objects import DynamicsResult, RewardBreakdown, SimulationConfig

logger = logging.getLogger(__name__)


class EnergyRewardCalculator(IRewardCalculator):
    """Calculate rewards for home energy control actions.

    The reward is the negated sum of four costs:
    - Energy cost: Grid energy times the current price (negative on net export)
    - Comfort cost: Temperature deviation beyond the comfort deadband
    - Peak cost: Grid draw above the peak threshold
    - Battery cycle cost: Battery throughput as a proxy for wear
    """

    def __init__(self, config: SimulationConfig | None = None) -> None:
        """Initialize the reward calculator.

        Args:
            config: Simulation configuration. If None, uses default values.
        """
        self._config = config or SimulationConfig()
        reward = self._config.reward
        logger.info(
            "Initialized EnergyRewardCalculator: alpha_comfort=%s, beta_peak=%s, "
            "gamma_batt=%s, deadband=%.2f°C, peak_threshold=%.2fkW",
            reward.alpha_comfort,
            reward.beta_peak,
            reward.gamma_batt,
            reward.comfort_deadband_celsius,
            reward.peak_threshold_kw,
        )

    def calculate_breakdown(
        self,
        previous_state: EpisodeState,
        dynamics: DynamicsResult,
        price: float,
    ) -> RewardBreakdown:
        """Calculate the individual cost terms of a transition.

        Args:
            previous_state: The episode state before the step
            dynamics: Physical outcome of the step
            price: Electricity price applied to the step in $/kWh

        Returns:
            The cost terms of the transition
        """
        breakdown = RewardBreakdown(
            energy_cost=self._calculate_energy_cost(dynamics.grid_power_kw, price),
            comfort_cost=self._calculate_comfort_cost(dynamics.indoor_temp),
            peak_cost=self._calculate_peak_cost(dynamics.grid_power_kw),
            battery_cycle_cost=self._calculate_battery_cycle_cost(
                previous_state.battery_soc, dynamics.battery_soc
            ),
        )

        logger.debug(
            "Reward terms: energy=%.4f, comfort=%.4f, peak=%.4f, battery=%.4f -> reward=%.4f",
            breakdown.energy_cost,
            breakdown.comfort_cost,
            breakdown.peak_cost,
            breakdown.battery_cycle_cost,
            breakdown.reward,
        )
        return breakdown

    def _calculate_energy_cost(self, grid_power_kw: float, price: float) -> float:
        """Price the grid energy of one step.

        Net export is credited at the same tariff.
        """
        energy_kwh = grid_power_kw * self._config.step_hours
        return energy_kwh * price

    def _calculate_comfort_cost(self, indoor_temp: float) -> float:
        """Penalize deviation from the preferred temperature beyond the deadband."""
        temp_dev = abs(indoor_temp - self._config.preferred_temp)
        comfort_pen = max(0.0, temp_dev - self._config.reward.comfort_deadband_celsius)
        return self._config.reward.alpha_comfort * comfort_pen

    def _calculate_peak_cost(self, grid_power_kw: float) -> float:
        """Penalize grid draw above the peak threshold."""
        return self._config.reward.beta_peak * max(
            0.0, grid_power_kw - self._config.reward.peak_threshold_kw
        )

    def _calculate_battery_cycle_cost(self, soc_old: float, soc_new: float) -> float:
        """Penalize battery throughput regardless of direction."""
        return (
            self._config.reward.gamma_batt
            * abs(soc_new - soc_old)
            * self._config.battery_capacity_kwh
        )
