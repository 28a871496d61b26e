"""Key/value table holding serialized store slices."""

from __future__ import annotations

from datetime import datetime
from typing import ClassVar

from sqlalchemy import Column, Text
from sqlmodel import Field, SQLModel

from ..utils.datetime_utils import utc_now


class PersistedSlice(SQLModel, table=True):
    """One row per store slice; ``payload`` is the slice's JSON document."""

    __tablename__: ClassVar[str] = "persisted_slice"

    key: str = Field(primary_key=True, max_length=64)
    payload: str = Field(sa_column=Column(Text, nullable=False))
    updated_at: datetime = Field(default_factory=utc_now, nullable=False)
