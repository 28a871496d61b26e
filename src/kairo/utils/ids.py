"""Client-side identifier generation."""

from __future__ import annotations

import uuid


def generate_id() -> str:
    """Return a new opaque entity id."""

    return uuid.uuid4().hex
