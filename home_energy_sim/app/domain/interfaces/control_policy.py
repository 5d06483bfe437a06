"""Control policy interface.

Contract for anything that picks joint actions from observations.
"""

from abc import ABC, abstractmethod

from domain.value_objects import Observation


class IControlPolicy(ABC):
    """Contract for action selection in the home energy environment.

    A policy sees only the observation and the number of steps already
    taken in the episode, never the internal dynamics.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Human-readable policy name used in evaluation results."""
        pass

    @abstractmethod
    def select_action(self, observation: Observation, steps_taken: int) -> int:
        """Select a joint action index given an observation.

        Args:
            observation: Current observation
            steps_taken: Number of steps already taken in the episode

        Returns:
            Joint action index in [0, 17]
        """
        pass
