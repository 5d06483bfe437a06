"""Infrastructure adapters for the home energy simulator.

These adapters expose the domain transition engine through external
libraries like Gymnasium.
"""

from .gymnasium_home_env import HomeEnergyEnvironment

__all__ = [
    "HomeEnergyEnvironment",
]
