"""Reward calculator interface.

Contract for calculating rewards in the home energy environment.
"""

from abc import ABC, abstractmethod

from domain.entities import EpisodeState
from domain.value_objects import DynamicsResult, RewardBreakdown


class IRewardCalculator(ABC):
    """Contract for reward calculation.

    This interface defines how a transition is turned into a reward.
    Rewards should guide the agent to:
    - Buy energy when it is cheap
    - Keep the indoor temperature near the preferred temperature
    - Avoid large instantaneous grid draws
    - Avoid needless battery cycling

    Implementations must be pure: the same transition always yields the
    same reward.
    """

    @abstractmethod
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
        pass

    def calculate_reward(
        self,
        previous_state: EpisodeState,
        dynamics: DynamicsResult,
        price: float,
    ) -> float:
        """Calculate the scalar reward of a transition.

        Args:
            previous_state: The episode state before the step
            dynamics: Physical outcome of the step
            price: Electricity price applied to the step in $/kWh

        Returns:
            Reward value (negated total cost)
        """
        return self.calculate_breakdown(previous_state, dynamics, price).reward
