"""Domain interfaces for the home energy simulator.

Interfaces define contracts between the domain and infrastructure layers.
The domain depends on these abstractions, not on concrete implementations.
"""

from .control_policy import IControlPolicy
from .reward_calculator import IRewardCalculator

__all__ = [
    "IControlPolicy",
    "IRewardCalculator",
]
