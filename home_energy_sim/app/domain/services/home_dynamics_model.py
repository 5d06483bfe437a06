"""Home dynamics model service.

Domain service advancing the physical state of the home by one step.
"""

import logging

from domain.entities import EpisodeState
from domain.value_objects import ControlCommand, DynamicsResult, SimulationConfig

logger = logging.getLogger(__name__)


class HomeDynamicsModel:
    """Advance indoor temperature, battery and appliance by one step.

    The model combines:
    - A first-order lumped thermal model where the HVAC drives the indoor
      temperature towards the preferred temperature in proportion to its power
    - A battery integrating the commanded power, with silent SOC clamping
    - A flexible appliance counting its job down one minute per step
    - A grid balance in which discharge offsets load and charge adds load
    """

    def __init__(self, config: SimulationConfig) -> None:
        """Initialize the dynamics model.

        Args:
            config: Simulation configuration
        """
        self._config = config

    def advance(
        self,
        state: EpisodeState,
        command: ControlCommand,
        outside_temp: float,
    ) -> DynamicsResult:
        """Compute the physical outcome of one step.

        Args:
            state: Episode state before the step
            command: Control command resolved for this step
            outside_temp: Outside temperature at this step in °C

        Returns:
            Next physical state and realized grid power
        """
        indoor_next = self.next_indoor_temp(state.indoor_temp, outside_temp, command.hvac_power_kw)
        soc_next = self.next_battery_soc(state.battery_soc, command.battery_command_kw)

        remaining = state.appliance_remaining_minutes
        if command.appliance_start:
            remaining = self._config.appliance_job_duration_minutes
        remaining_next, appliance_power_kw = self.run_appliance(remaining)

        grid_power_kw = self.grid_power(
            command.hvac_power_kw, appliance_power_kw, command.battery_command_kw
        )

        logger.debug(
            "Dynamics: T %.3f->%.3f°C, SOC %.4f->%.4f, appliance %d->%d min, grid %.2f kW",
            state.indoor_temp,
            indoor_next,
            state.battery_soc,
            soc_next,
            state.appliance_remaining_minutes,
            remaining_next,
            grid_power_kw,
        )

        return DynamicsResult(
            indoor_temp=indoor_next,
            battery_soc=soc_next,
            appliance_remaining_minutes=remaining_next,
            appliance_power_kw=appliance_power_kw,
            grid_power_kw=grid_power_kw,
        )

    def next_indoor_temp(self, indoor_temp: float, outside_temp: float, hvac_power_kw: float) -> float:
        """Integrate the thermal model over one step.

        The HVAC effect scales with the gap to the preferred temperature,
        not with a fixed capacity.

        Args:
            indoor_temp: Current indoor temperature in °C
            outside_temp: Outside temperature in °C
            hvac_power_kw: HVAC electrical power in kW

        Returns:
            Indoor temperature after the step in °C
        """
        heat_loss = -(indoor_temp - outside_temp) / self._config.thermal_resistance
        hvac_effect = (self._config.preferred_temp - indoor_temp) * (
            hvac_power_kw * self._config.hvac_gain
        )
        delta = (heat_loss + hvac_effect) / self._config.thermal_capacitance * self._config.step_minutes
        return indoor_temp + delta

    def next_battery_soc(self, soc: float, battery_command_kw: float) -> float:
        """Integrate the battery over one step.

        Energy commanded beyond the [0, 1] SOC range is discarded.

        Args:
            soc: Current state of charge
            battery_command_kw: Signed battery power (positive charges)

        Returns:
            State of charge after the step, clamped to [0, 1]
        """
        energy_change_kwh = battery_command_kw * self._config.step_hours
        soc_next = soc + energy_change_kwh / self._config.battery_capacity_kwh
        return max(0.0, min(1.0, soc_next))

    def run_appliance(self, remaining_minutes: int) -> tuple[int, float]:
        """Run the appliance for one step.

        A job started this step draws power and counts down in the same step.

        Args:
            remaining_minutes: Job minutes left, including any job started this step

        Returns:
            Tuple of (minutes left after the step, appliance power in kW)
        """
        if remaining_minutes > 0:
            return max(0, remaining_minutes - 1), self._config.appliance_power_kw
        return 0, 0.0

    def grid_power(
        self,
        hvac_power_kw: float,
        appliance_power_kw: float,
        battery_command_kw: float,
    ) -> float:
        """Compute the realized grid draw of a step.

        Discharge is subtracted from the load and charge is added to it,
        as two separate terms.

        Args:
            hvac_power_kw: HVAC electrical power in kW
            appliance_power_kw: Appliance draw in kW
            battery_command_kw: Signed battery power (positive charges)

        Returns:
            Grid power in kW (negative means net export)
        """
        building_power = self._config.base_load_kw + hvac_power_kw
        grid_power = building_power + appliance_power_kw - max(0.0, -battery_command_kw)
        if battery_command_kw > 0:
            grid_power = grid_power + battery_command_kw
        return grid_power
