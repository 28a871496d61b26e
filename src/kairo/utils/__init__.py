"""Shared helpers."""

from .ids import generate_id

__all__ = ["generate_id"]
