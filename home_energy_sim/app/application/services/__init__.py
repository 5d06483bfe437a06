"""Application services for the home energy simulator.

These services orchestrate domain logic to fulfill use cases.
"""

from .simulation_application_service import SimulationApplicationService

__all__ = [
    "SimulationApplicationService",
]
