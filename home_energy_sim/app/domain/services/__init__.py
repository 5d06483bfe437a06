"""Domain services for the home energy simulator.

Services contain pure business logic and operate on value objects.
"""

from .action_decoder import NUM_ACTIONS, ActionDecoder
from .energy_reward_calculator import EnergyRewardCalculator
from .home_dynamics_model import HomeDynamicsModel
from .home_energy_simulator import HomeEnergySimulator, RandomSource
from .observation_encoder import ObservationEncoder
from .profile_generator import ProfileGenerator
from .rule_based_policy import RuleBasedPolicy

__all__ = [
    "NUM_ACTIONS",
    "ActionDecoder",
    "EnergyRewardCalculator",
    "HomeDynamicsModel",
    "HomeEnergySimulator",
    "ObservationEncoder",
    "ProfileGenerator",
    "RandomSource",
    "RuleBasedPolicy",
]
