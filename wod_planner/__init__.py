"""Deterministic WOD planner: ranks a movement library and assembles a session."""

__version__ = "0.1.0"
