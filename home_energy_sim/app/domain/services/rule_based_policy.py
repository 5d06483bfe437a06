"""Rule-based baseline policy.

Time-of-day schedule used as a reference controller for evaluation.
"""

from domain.interfaces import IControlPolicy
from domain.value_objects import (
    ApplianceCommand,
    BatteryMode,
    HvacLevel,
    JointAction,
    Observation,
    SimulationConfig,
)


class RuleBasedPolicy(IControlPolicy):
    """Fixed schedule over the hour of the day.

    Business rules:
    - HVAC: COMFORT between 07:00 and 22:00, ECO otherwise
    - Battery: CHARGE before 06:00, DISCHARGE between 16:00 and 20:00, HOLD otherwise
    - Appliance: START before 06:00 when no job is running
    """

    def __init__(self, config: SimulationConfig | None = None) -> None:
        self._config = config or SimulationConfig()

    @property
    def name(self) -> str:
        return "baseline"

    def select_action(self, observation: Observation, steps_taken: int) -> int:
        """Select the scheduled joint action.

        Args:
            observation: Current observation
            steps_taken: Number of steps already taken in the episode

        Returns:
            Joint action index in [0, 17]
        """
        hour = (steps_taken * self._config.step_hours) % 24

        if 7 <= hour < 22:
            hvac_level = HvacLevel.COMFORT
        else:
            hvac_level = HvacLevel.ECO

        if 0 <= hour < 6:
            battery_mode = BatteryMode.CHARGE
        elif 16 <= hour < 20:
            battery_mode = BatteryMode.DISCHARGE
        else:
            battery_mode = BatteryMode.HOLD

        if observation.appliance_remaining_minutes <= 0 and 0 <= hour < 6:
            appliance_command = ApplianceCommand.START
        else:
            appliance_command = ApplianceCommand.NOOP

        return JointAction(hvac_level, battery_mode, appliance_command).index
