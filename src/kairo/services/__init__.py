"""Service module exports."""

from . import analytics, assistant, demo_seed, habits, planner

__all__ = [
    "analytics",
    "assistant",
    "demo_seed",
    "habits",
    "planner",
]
