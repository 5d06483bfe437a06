"""Domain entities for the home energy simulator.

Entities are records with identity that encapsulate business rules and behavior.
"""

from .episode_state import EpisodeState

__all__ = ["EpisodeState"]
