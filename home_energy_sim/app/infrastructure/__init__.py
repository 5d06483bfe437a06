"""Infrastructure layer for the home energy simulator.

This package contains adapters exposing the domain to external systems
(Gymnasium agents, HTTP API).
"""
