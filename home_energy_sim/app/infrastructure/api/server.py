"""Flask HTTP API Server.

HTTP API for external agents and evaluation harnesses.
Provides endpoints for driving episodes and evaluating the baseline policy.
"""

import logging
import os
import sys
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import Any

from flask import Flask, Response, jsonify, request

# Add app directory to Python path
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from application.services import SimulationApplicationService
from domain.services import HomeEnergySimulator
from domain.value_objects import EpisodeTrace, Observation, SimulationConfig

# Configure logging
log_level = os.getenv("LOG_LEVEL", "info").upper()
logging.basicConfig(
    level=getattr(logging, log_level, logging.INFO),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
_LOGGER = logging.getLogger(__name__)

MAX_EVALUATION_EPISODES = 20
MAX_ACTIVE_EPISODES = int(os.getenv("SIM_MAX_ACTIVE_EPISODES", "100"))

# Create Flask app
app = Flask(__name__)

# Initialize services
config = SimulationConfig(
    step_seconds=float(os.getenv("SIM_STEP_SECONDS", "60")),
    episode_length_steps=int(os.getenv("SIM_EPISODE_LENGTH_STEPS", str(24 * 60))),
)
simulation_service = SimulationApplicationService(
    HomeEnergySimulator(config),
    max_active_episodes=MAX_ACTIVE_EPISODES,
)


def _observation_to_json(observation: Observation) -> dict[str, Any]:
    return {
        "vector": list(observation.as_tuple()),
        **asdict(observation),
    }


def _trace_to_json(trace: EpisodeTrace) -> dict[str, Any]:
    data = asdict(trace)
    for key, value in data.items():
        if isinstance(value, tuple):
            data[key] = list(value)
    return data


@app.route("/health", methods=["GET"])
def health_check() -> Response:
    """Health check endpoint."""
    return jsonify({
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
    })


@app.route("/api/v1/status", methods=["GET"])
def get_status() -> Response:
    """Get simulation service status."""
    try:
        return jsonify(simulation_service.get_status())
    except Exception as e:
        _LOGGER.exception("Error getting status")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/config", methods=["GET"])
def get_config() -> Response:
    """Get the simulation configuration."""
    data = asdict(simulation_service.config)
    data["hvac_power_levels_kw"] = list(data["hvac_power_levels_kw"])
    return jsonify(data)


@app.route("/api/v1/episodes", methods=["POST"])
def start_episode() -> Response:
    """Reset a new episode.

    Request body (optional):
    {
        "seed": int (optional) - seed for the initial state draws
    }
    """
    try:
        data = request.get_json(silent=True) or {}
        seed = data.get("seed")
        if seed is not None:
            seed = int(seed)

        episode_id, observation = simulation_service.start_episode(seed)

        return jsonify({
            "episode_id": episode_id,
            "observation": _observation_to_json(observation),
        }), 201

    except (TypeError, ValueError) as e:
        _LOGGER.warning("Invalid episode request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except RuntimeError as e:
        _LOGGER.warning("Episode rejected: %s", e)
        return jsonify({"error": str(e)}), 429
    except Exception as e:
        _LOGGER.exception("Error starting episode")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/episodes/<episode_id>/step", methods=["POST"])
def step_episode(episode_id: str) -> Response:
    """Advance an episode by one step.

    Request body:
    {
        "action": int - joint action index in [0, 17]
    }
    """
    try:
        data = request.get_json(silent=True)
        if not data or "action" not in data:
            return jsonify({"error": "No action provided"}), 400

        outcome = simulation_service.step_episode(episode_id, data["action"])

        return jsonify({
            "episode_id": episode_id,
            "observation": _observation_to_json(outcome.observation),
            "reward": outcome.reward,
            "done": outcome.done,
            "info": outcome.info,
        })

    except KeyError:
        return jsonify({"error": f"Episode not found: {episode_id}"}), 404
    except (TypeError, ValueError) as e:
        _LOGGER.warning("Invalid action for episode %s: %s", episode_id, e)
        return jsonify({"error": f"Invalid action: {e}"}), 400
    except RuntimeError as e:
        return jsonify({"error": str(e)}), 409
    except Exception as e:
        _LOGGER.exception("Error stepping episode")
        return jsonify({"error": str(e)}), 500


@app.route("/api/v1/episodes/<episode_id>", methods=["DELETE"])
def end_episode(episode_id: str) -> Response:
    """Forget an episode."""
    try:
        simulation_service.end_episode(episode_id)
        return jsonify({"success": True, "deleted_episode_id": episode_id})
    except KeyError:
        return jsonify({"error": f"Episode not found: {episode_id}"}), 404


@app.route("/api/v1/evaluate/baseline", methods=["POST"])
def evaluate_baseline() -> Response:
    """Evaluate the rule-based baseline policy.

    Request body (optional):
    {
        "num_episodes": int (default: 1),
        "seed": int (optional),
        "include_traces": bool (default: false)
    }
    """
    try:
        data = request.get_json(silent=True) or {}
        num_episodes = int(data.get("num_episodes", 1))
        seed = data.get("seed")
        if seed is not None:
            seed = int(seed)

        if num_episodes < 1:
            return jsonify({"error": "num_episodes must be at least 1"}), 400
        if num_episodes > MAX_EVALUATION_EPISODES:
            return jsonify({
                "error": f"num_episodes must be at most {MAX_EVALUATION_EPISODES}"
            }), 400

        result = simulation_service.evaluate_baseline(num_episodes, seed)

        response = {
            "policy_name": result.policy_name,
            "episode_costs": list(result.episode_costs),
            "episode_comfort": list(result.episode_comfort),
            "mean_cost": result.mean_cost,
            "mean_comfort_deviation": result.mean_comfort_deviation,
        }
        if data.get("include_traces", False):
            response["episodes"] = [_trace_to_json(trace) for trace in result.episodes]

        return jsonify(response)

    except (TypeError, ValueError) as e:
        _LOGGER.warning("Invalid evaluation request: %s", e)
        return jsonify({"error": f"Invalid data: {e}"}), 400
    except Exception as e:
        _LOGGER.exception("Error evaluating baseline")
        return jsonify({"error": str(e)}), 500


def main() -> None:
    """Main entry point for the server."""
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "5000"))

    _LOGGER.info("Starting home energy simulator API server on %s:%d", host, port)
    _LOGGER.info(
        "Episodes: %d steps of %ss",
        config.episode_length_steps,
        config.step_seconds,
    )

    app.run(host=host, port=port, debug=False)


if __name__ == "__main__":
    main()
