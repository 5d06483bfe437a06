"""Simulation Application Service.

Main application service that coordinates the domain transition engine
for interactive episodes and policy evaluation use cases.
"""

import logging
import random
import uuid
from datetime import datetime

from domain.entities import EpisodeState
from domain.interfaces import IControlPolicy
from domain.services import HomeEnergySimulator, RandomSource, RuleBasedPolicy
from domain.value_objects import (
    EpisodeTrace,
    EvaluationResult,
    Observation,
    SimulationConfig,
    StepOutcome,
)

_LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_ACTIVE_EPISODES = 100


class SimulationApplicationService:
    """Application service for home energy simulation.

    This service is the main entry point for external agents. It keeps
    the state of every running episode by id and runs evaluation
    rollouts of control policies.
    """

    def __init__(
        self,
        simulator: HomeEnergySimulator | None = None,
        max_active_episodes: int = DEFAULT_MAX_ACTIVE_EPISODES,
    ) -> None:
        """Initialize the simulation application service.

        Args:
            simulator: Transition engine. If None, uses the default configuration.
            max_active_episodes: Maximum number of episodes kept in the registry
        """
        if max_active_episodes < 1:
            raise ValueError(f"max_active_episodes must be at least 1, got {max_active_episodes}")
        self._simulator = simulator or HomeEnergySimulator()
        self._max_active_episodes = max_active_episodes
        self._episodes: dict[str, EpisodeState] = {}

    @property
    def config(self) -> SimulationConfig:
        return self._simulator.config

    def start_episode(self, seed: int | None = None) -> tuple[str, Observation]:
        """Reset a new episode and register it.

        When the registry is full, finished episodes are dropped first.

        Args:
            seed: Optional seed for the initial state draws

        Returns:
            Tuple of (episode id, initial observation)

        Raises:
            RuntimeError: If the registry is full of unfinished episodes
        """
        if len(self._episodes) >= self._max_active_episodes:
            self._evict_finished_episodes()
        if len(self._episodes) >= self._max_active_episodes:
            raise RuntimeError(
                f"Too many active episodes ({self._max_active_episodes}). "
                "Delete an episode first."
            )

        state, observation = self._simulator.reset(random.Random(seed).random)
        episode_id = uuid.uuid4().hex
        self._episodes[episode_id] = state

        _LOGGER.info("Started episode %s (seed=%s)", episode_id, seed)
        return episode_id, observation

    def step_episode(self, episode_id: str, action: int) -> StepOutcome:
        """Advance a registered episode by one step.

        Args:
            episode_id: Episode identifier returned by start_episode
            action: Joint action index in [0, 17]

        Returns:
            Outcome of the step

        Raises:
            KeyError: If the episode is unknown
            ValueError: If the action index is invalid
            RuntimeError: If the episode has already terminated
        """
        state = self._episodes[episode_id]
        outcome = self._simulator.step(state, action)
        self._episodes[episode_id] = outcome.state
        return outcome

    def end_episode(self, episode_id: str) -> None:
        """Forget a registered episode.

        Raises:
            KeyError: If the episode is unknown
        """
        del self._episodes[episode_id]
        _LOGGER.info("Ended episode %s", episode_id)

    def _evict_finished_episodes(self) -> None:
        finished = [episode_id for episode_id, state in self._episodes.items() if state.is_terminal]
        for episode_id in finished:
            del self._episodes[episode_id]
        if finished:
            _LOGGER.info("Evicted %d finished episodes", len(finished))

    def get_status(self) -> dict:
        """Get the current status of the simulation service.

        Returns:
            Dictionary with status information
        """
        return {
            "active_episodes": len(self._episodes),
            "max_active_episodes": self._max_active_episodes,
            "finished_episodes": sum(1 for s in self._episodes.values() if s.is_terminal),
            "episode_length_steps": self.config.episode_length_steps,
            "step_seconds": self.config.step_seconds,
            "timestamp": datetime.now().isoformat(),
        }

    def run_episode(
        self,
        policy: IControlPolicy,
        random_source: RandomSource | None = None,
    ) -> EpisodeTrace:
        """Run a policy through one full episode.

        Args:
            policy: Policy choosing the actions
            random_source: Uniform source for the initial state draws

        Returns:
            Trace of the episode with its cost and comfort summary
        """
        state, observation = self._simulator.reset(random_source)
        preferred_temp = self.config.preferred_temp

        indoor_temp: list[float] = []
        outside_temp: list[float] = []
        battery_soc: list[float] = []
        price: list[float] = []
        grid_power: list[float] = []
        energy_cost: list[float] = []
        appliance_on: list[bool] = []
        actions: list[int] = []

        total_cost = 0.0
        comfort_sum = 0.0
        steps = 0
        done = False

        while not done:
            action = policy.select_action(observation, steps)
            outcome = self._simulator.step(state, action)

            indoor_temp.append(observation.indoor_temp)
            outside_temp.append(observation.outside_temp)
            battery_soc.append(observation.battery_soc)
            price.append(observation.price)
            grid_power.append(outcome.info["grid_power_kw"])
            energy_cost.append(outcome.info["energy_cost"])
            appliance_on.append(outcome.info["appliance_power_kw"] > 0)
            actions.append(action)

            total_cost -= outcome.reward
            comfort_sum += abs(observation.indoor_temp - preferred_temp)

            state = outcome.state
            observation = outcome.observation
            done = outcome.done
            steps += 1

        return EpisodeTrace(
            policy_name=policy.name,
            total_cost=total_cost,
            avg_comfort_deviation=comfort_sum / max(1, steps),
            indoor_temp=tuple(indoor_temp),
            outside_temp=tuple(outside_temp),
            battery_soc=tuple(battery_soc),
            price=tuple(price),
            grid_power_kw=tuple(grid_power),
            energy_cost=tuple(energy_cost),
            appliance_on=tuple(appliance_on),
            actions=tuple(actions),
        )

    def evaluate_policy(
        self,
        policy: IControlPolicy,
        num_episodes: int = 1,
        seed: int | None = None,
    ) -> EvaluationResult:
        """Evaluate a policy over several episodes.

        Args:
            policy: Policy to evaluate
            num_episodes: Number of episodes to run
            seed: Optional seed for the initial state draws of all episodes

        Returns:
            Per-episode traces and their mean cost and comfort
        """
        if num_episodes < 1:
            raise ValueError(f"num_episodes must be at least 1, got {num_episodes}")

        rng = random.Random(seed)
        episodes = []
        for episode in range(num_episodes):
            trace = self.run_episode(policy, rng.random)
            _LOGGER.info(
                "Evaluation %s episode %d/%d: cost=%.3f comfort=%.3f",
                policy.name,
                episode + 1,
                num_episodes,
                trace.total_cost,
                trace.avg_comfort_deviation,
            )
            episodes.append(trace)

        result = EvaluationResult(policy_name=policy.name, episodes=tuple(episodes))
        _LOGGER.info(
            "Evaluation %s summary: mean cost=%.3f, mean comfort=%.3f",
            policy.name,
            result.mean_cost,
            result.mean_comfort_deviation,
        )
        return result

    def evaluate_baseline(self, num_episodes: int = 1, seed: int | None = None) -> EvaluationResult:
        """Evaluate the rule-based baseline policy."""
        return self.evaluate_policy(RuleBasedPolicy(self.config), num_episodes, seed)
