"""Domain layer for the home energy simulator.

This package contains the state-transition engine of a single-home
energy system (HVAC, battery, flexible appliance), following
Domain-Driven Design (DDD) principles.

The domain layer is pure Python with no external dependencies on
Flask, Gymnasium, or any infrastructure concerns.
"""
