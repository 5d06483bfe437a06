"""Pytest fixtures for integration tests.

This module provides fixtures for testing the Flask API against a
simulation service running short episodes.
"""

from typing import Any, Generator
from unittest.mock import patch

import pytest

from application.services import SimulationApplicationService
from domain.services import HomeEnergySimulator
from domain.value_objects import SimulationConfig

SHORT_EPISODE_STEPS = 5
MAX_ACTIVE_EPISODES = 4


@pytest.fixture
def simulation_service() -> SimulationApplicationService:
    """Create a SimulationApplicationService with short episodes."""
    config = SimulationConfig(episode_length_steps=SHORT_EPISODE_STEPS)
    return SimulationApplicationService(
        HomeEnergySimulator(config),
        max_active_episodes=MAX_ACTIVE_EPISODES,
    )


@pytest.fixture
def flask_app(simulation_service: SimulationApplicationService) -> Generator[Any, None, None]:
    """Create a Flask test app with a patched simulation service.

    This fixture patches the global simulation_service in the server module.
    """
    import infrastructure.api.server as server_module

    with patch.object(server_module, "simulation_service", simulation_service):
        app = server_module.app
        app.config["TESTING"] = True
        yield app


@pytest.fixture
def client(flask_app: Any) -> Any:
    """Create a Flask test client."""
    return flask_app.test_client()


@pytest.fixture
def episode_id(client: Any) -> str:
    """Start an episode and return its id."""
    response = client.post("/api/v1/episodes", json={"seed": 7})
    return response.get_json()["episode_id"]
