"""Home energy simulator service.

Domain service implementing the reset/step transition engine of the
home energy environment.
"""

import logging
import random
from dataclasses import replace
from typing import Callable

from domain.entities import EpisodeState
from domain.interfaces import IRewardCalculator
from domain.value_objects import Observation, SimulationConfig, StepOutcome

from .action_decoder import ActionDecoder
from .energy_reward_calculator import EnergyRewardCalculator
from .home_dynamics_model import HomeDynamicsModel
from .observation_encoder import ObservationEncoder
from .profile_generator import ProfileGenerator

logger = logging.getLogger(__name__)

# Uniform draw in [0, 1), e.g. random.Random().random or numpy Generator.random
RandomSource = Callable[[], float]


class HomeEnergySimulator:
    """Transition engine of the simulated home.

    The simulator holds configuration and collaborators only. Episode
    state is passed in and returned, never kept on the instance, so one
    simulator can drive any number of independent episodes.

    Control flow of a step:
    1. Decode the action against the current state
    2. Advance the physical state and compute the grid draw
    3. Price the transition
    4. Observe the new state and check for termination
    """

    def __init__(
        self,
        config: SimulationConfig | None = None,
        reward_calculator: IRewardCalculator | None = None,
    ) -> None:
        """Initialize the simulator.

        Args:
            config: Simulation configuration. If None, uses default values.
            reward_calculator: Reward calculator. If None, uses EnergyRewardCalculator.
        """
        self._config = config or SimulationConfig()
        self._profile_generator = ProfileGenerator(self._config)
        self._decoder = ActionDecoder(self._config)
        self._dynamics = HomeDynamicsModel(self._config)
        self._reward_calculator = reward_calculator or EnergyRewardCalculator(self._config)
        self._encoder = ObservationEncoder()

        logger.info(
            "Initialized HomeEnergySimulator: Ts=%ss, episode_length=%d steps",
            self._config.step_seconds,
            self._config.episode_length_steps,
        )

    @property
    def config(self) -> SimulationConfig:
        return self._config

    def reset(self, random_source: RandomSource | None = None) -> tuple[EpisodeState, Observation]:
        """Start a new episode.

        Profiles are regenerated and the initial indoor temperature and
        SOC are drawn uniformly around the preferred temperature (±0.5°C)
        and half charge (±0.05), in that order.

        Args:
            random_source: Uniform [0, 1) source for the two initial draws.
                If None, an unseeded random.Random is used.

        Returns:
            Tuple of (initial state, initial observation)
        """
        draw = random_source or random.Random().random
        indoor_temp = self._config.preferred_temp + (draw() - 0.5) * 1.0
        battery_soc = 0.5 + (draw() - 0.5) * 0.1

        state = self.initial_state(indoor_temp, battery_soc)

        logger.info(
            "Episode reset: indoor_temp=%.3f°C, soc=%.4f",
            state.indoor_temp,
            state.battery_soc,
        )
        return state, self.observe(state)

    def initial_state(self, indoor_temp: float, battery_soc: float) -> EpisodeState:
        """Build the first state of an episode from explicit initial values.

        Args:
            indoor_temp: Initial indoor temperature in °C
            battery_soc: Initial state of charge (0-1)

        Returns:
            Episode state at step 1 with freshly generated profiles
        """
        profiles = self._profile_generator.generate()
        return EpisodeState(
            indoor_temp=indoor_temp,
            battery_soc=battery_soc,
            appliance_remaining_minutes=0,
            time_step=1,
            outside_temp_profile=profiles.outside_temp,
            price_profile=profiles.price,
            last_grid_power=0.0,
        )

    def step(self, state: EpisodeState, action: int) -> StepOutcome:
        """Advance an episode by one step.

        Args:
            state: Current episode state
            action: Joint action index in [0, 17]

        Returns:
            The new state, its observation, the reward and the done flag

        Raises:
            ValueError: If the action index is invalid
            RuntimeError: If the episode has already terminated
        """
        if state.is_terminal:
            raise RuntimeError("Episode already terminated. Call reset() first.")

        command = self._decoder.resolve(action, state)
        dynamics = self._dynamics.advance(state, command, state.outside_temp)
        price = state.price
        breakdown = self._reward_calculator.calculate_breakdown(state, dynamics, price)
        reward = breakdown.reward

        next_state = replace(
            state,
            indoor_temp=dynamics.indoor_temp,
            battery_soc=dynamics.battery_soc,
            appliance_remaining_minutes=dynamics.appliance_remaining_minutes,
            time_step=state.time_step + 1,
            last_grid_power=dynamics.grid_power_kw,
        )
        done = next_state.is_terminal

        info = {
            "time_step": state.time_step,
            "grid_power_kw": dynamics.grid_power_kw,
            "appliance_power_kw": dynamics.appliance_power_kw,
            "price": price,
            "energy_cost": breakdown.energy_cost,
            "comfort_cost": breakdown.comfort_cost,
            "peak_cost": breakdown.peak_cost,
            "battery_cycle_cost": breakdown.battery_cycle_cost,
        }

        logger.debug(
            "Step %d: action=%d, reward=%.4f, done=%s",
            state.time_step,
            action,
            reward,
            done,
        )
        if done:
            logger.info("Episode finished after %d steps", state.time_step)

        return StepOutcome(
            state=next_state,
            observation=self.observe(next_state),
            reward=reward,
            done=done,
            info=info,
        )

    def observe(self, state: EpisodeState) -> Observation:
        """Encode the observation of a state."""
        return self._encoder.encode(state)
