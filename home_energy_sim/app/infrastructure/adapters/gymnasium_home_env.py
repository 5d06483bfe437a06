"""Gymnasium environment for home energy control.

Custom Gymnasium environment that wraps the home energy transition engine
as an RL environment.
"""

import logging
from typing import Any

import gymnasium as gym
import numpy as np
from domain.entities import EpisodeState
from domain.services import NUM_ACTIONS, HomeEnergySimulator
from domain.value_objects import Observation, SimulationConfig
from gymnasium import spaces

_LOGGER = logging.getLogger(__name__)

# Observation bounds for temperatures in °C
MIN_TEMP = -50.0
MAX_TEMP = 60.0


class HomeEnergyEnvironment(gym.Env):
    """Gymnasium environment for home energy control.

    This environment exposes the home energy simulator as a standard RL
    environment that can be used with any Gymnasium-compatible agent.
    The environment owns exactly one episode state at a time.

    The observation space is the 7-element vector of Observation.
    The action space is discrete with 18 joint actions
    (3 HVAC levels x 3 battery modes x 2 appliance commands).
    """

    metadata = {"render_modes": []}

    def __init__(self, config: SimulationConfig | None = None) -> None:
        """Initialize the home energy environment.

        Args:
            config: Simulation configuration. If None, uses default values.
        """
        super().__init__()

        self._simulator = HomeEnergySimulator(config)
        self._state: EpisodeState | None = None
        self._episode_rewards: list[float] = []

        cfg = self._simulator.config
        max_price = max(cfg.price_offpeak, cfg.price_mid, cfg.price_peak)

        self.observation_space = spaces.Box(
            low=np.array(
                [
                    MIN_TEMP,  # indoor_temp
                    MIN_TEMP,  # outside_temp
                    0.0,  # battery_soc
                    -1.0,  # time_sin
                    -1.0,  # time_cos
                    0.0,  # price
                    0.0,  # appliance_remaining_minutes
                ],
                dtype=np.float32,
            ),
            high=np.array(
                [
                    MAX_TEMP,  # indoor_temp
                    MAX_TEMP,  # outside_temp
                    1.0,  # battery_soc
                    1.0,  # time_sin
                    1.0,  # time_cos
                    max_price,  # price
                    float(cfg.appliance_job_duration_minutes),  # appliance_remaining_minutes
                ],
                dtype=np.float32,
            ),
            dtype=np.float32,
        )
        self.action_space = spaces.Discrete(NUM_ACTIONS)

        _LOGGER.info(
            "Initialized HomeEnergyEnvironment with %d-step episodes",
            cfg.episode_length_steps,
        )
        _LOGGER.debug("Observation space: %s", self.observation_space)
        _LOGGER.debug("Action space: %s", self.action_space)

    @property
    def state(self) -> EpisodeState | None:
        """Current episode state, None before the first reset."""
        return self._state

    def reset(
        self, seed: int | None = None, options: dict[str, Any] | None = None
    ) -> tuple[np.ndarray, dict[str, Any]]:
        """Reset the environment to start a new episode.

        Args:
            seed: Random seed for reproducibility
            options: Additional options (unused)

        Returns:
            Tuple of (initial observation, info dict)
        """
        super().reset(seed=seed)

        self._state, observation = self._simulator.reset(self.np_random.random)
        self._episode_rewards = []

        _LOGGER.debug("Environment reset at time step %d", self._state.time_step)

        return self._observation_to_array(observation), {}

    def step(self, action: int) -> tuple[np.ndarray, float, bool, bool, dict[str, Any]]:
        """Execute one step in the environment.

        Args:
            action: Joint action index in [0, 17]

        Returns:
            Tuple of (observation, reward, terminated, truncated, info)
        """
        if self._state is None or self._state.is_terminal:
            raise RuntimeError("Episode already terminated. Call reset() first.")

        outcome = self._simulator.step(self._state, action)
        self._state = outcome.state
        self._episode_rewards.append(outcome.reward)

        terminated = outcome.done
        truncated = False  # Episodes always run to their fixed length

        info = dict(outcome.info)
        info["episode_reward"] = sum(self._episode_rewards) if terminated else None
        info["episode_length"] = len(self._episode_rewards)

        return (
            self._observation_to_array(outcome.observation),
            float(outcome.reward),
            terminated,
            truncated,
            info,
        )

    def _observation_to_array(self, obs: Observation) -> np.ndarray:
        """Convert an Observation to a numpy array for the environment.

        Args:
            obs: Observation to convert

        Returns:
            Numpy array representation of the observation
        """
        return np.array(obs.as_tuple(), dtype=np.float32)
