"""Joint action decoder service.

Domain service translating discrete joint actions into control commands.
"""

import logging

from domain.entities import EpisodeState
from domain.value_objects import (
    ApplianceCommand,
    BatteryMode,
    ControlCommand,
    HvacLevel,
    JointAction,
    SimulationConfig,
)

logger = logging.getLogger(__name__)

NUM_ACTIONS = 18


class ActionDecoder:
    """Service for decoding joint action indices.

    The index packs three sub-decisions with a fixed radix:
    index = hvac_index * 6 + battery_index * 2 + appliance_index
    """

    def __init__(self, config: SimulationConfig) -> None:
        """Initialize the action decoder.

        Args:
            config: Simulation configuration providing power levels
        """
        self._config = config

    @staticmethod
    def decode(action: int) -> JointAction:
        """Split a joint action index into its sub-commands.

        Args:
            action: Joint action index in [0, 17]

        Returns:
            The decoded joint action

        Raises:
            ValueError: If the index is not an integer in [0, 17]
        """
        if isinstance(action, bool):
            raise ValueError(f"action must be an integer, got {action!r}")
        try:
            a = int(action)
        except (TypeError, ValueError, OverflowError) as e:
            raise ValueError(f"action must be an integer, got {action!r}") from e
        if a != action:
            raise ValueError(f"action must be an integer, got {action!r}")
        if not 0 <= a < NUM_ACTIONS:
            raise ValueError(f"action must be between 0 and {NUM_ACTIONS - 1}, got {a}")

        hvac_index = a // 6
        rem = a % 6
        return JointAction(
            hvac_level=HvacLevel(hvac_index),
            battery_mode=BatteryMode(rem // 2),
            appliance_command=ApplianceCommand(rem % 2),
        )

    @staticmethod
    def encode(hvac_index: int, battery_index: int, appliance_index: int) -> int:
        """Pack sub-command indices into a joint action index.

        Args:
            hvac_index: HVAC level index in [0, 2]
            battery_index: Battery mode index in [0, 2]
            appliance_index: Appliance command index in [0, 1]

        Returns:
            Joint action index in [0, 17]
        """
        return JointAction(
            hvac_level=HvacLevel(hvac_index),
            battery_mode=BatteryMode(battery_index),
            appliance_command=ApplianceCommand(appliance_index),
        ).index

    def resolve(self, action: int, state: EpisodeState) -> ControlCommand:
        """Decode an action and resolve it against the current state.

        A START only begins a new job when no job is running; otherwise
        it is a no-op and the running job is left untouched.

        Args:
            action: Joint action index in [0, 17]
            state: Current episode state

        Returns:
            Control command for this step
        """
        joint = self.decode(action)

        hvac_power_kw = self._config.hvac_power_levels_kw[joint.hvac_level]
        if joint.battery_mode == BatteryMode.DISCHARGE:
            battery_command_kw = -self._config.battery_max_power_kw
        elif joint.battery_mode == BatteryMode.HOLD:
            battery_command_kw = 0.0
        else:
            battery_command_kw = self._config.battery_max_power_kw

        appliance_start = (
            joint.appliance_command == ApplianceCommand.START
            and state.appliance_remaining_minutes <= 0
        )

        logger.debug(
            "Decoded action %d: hvac=%s battery=%s appliance=%s (start=%s)",
            joint.index,
            joint.hvac_level.name,
            joint.battery_mode.name,
            joint.appliance_command.name,
            appliance_start,
        )

        return ControlCommand(
            hvac_power_kw=hvac_power_kw,
            battery_command_kw=battery_command_kw,
            appliance_start=appliance_start,
        )
