"""Value objects for the home energy domain.

Value objects are immutable data carriers that represent domain concepts.
They have no identity and are compared by their attributes.
"""

from .energy_types import (
    ApplianceCommand,
    BatteryMode,
    ControlCommand,
    DynamicsResult,
    ExogenousProfiles,
    HvacLevel,
    JointAction,
    Observation,
    RewardBreakdown,
    StepOutcome,
)
from .evaluation import EpisodeTrace, EvaluationResult
from .reward_config import RewardConfig
from .simulation_config import SimulationConfig

__all__ = [
    "ApplianceCommand",
    "BatteryMode",
    "ControlCommand",
    "DynamicsResult",
    "EpisodeTrace",
    "EvaluationResult",
    "ExogenousProfiles",
    "HvacLevel",
    "JointAction",
    "Observation",
    "RewardBreakdown",
    "RewardConfig",
    "SimulationConfig",
    "StepOutcome",
]
