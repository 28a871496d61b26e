"""Annotated field types shared by the domain models.

Values arriving at the model boundary are ISO-8601 strings; these types parse
them with the calendar helpers so that day truncation follows one rule
everywhere.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Annotated, Any

from pydantic import BeforeValidator

from ..utils.datetime_utils import parse_datetime, to_day


def _coerce_timestamp(value: Any) -> Any:
    if isinstance(value, (date, str)):
        value = parse_datetime(value)
    # Naive values are read as UTC so every stored timestamp is comparable.
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _coerce_day(value: Any) -> Any:
    if isinstance(value, (date, str)):
        return to_day(value)
    return value


Timestamp = Annotated[datetime, BeforeValidator(_coerce_timestamp)]
Day = Annotated[date, BeforeValidator(_coerce_day)]

__all__ = ["Day", "Timestamp"]
