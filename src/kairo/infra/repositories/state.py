"""SQLModel repository persisting store slices as JSON documents."""

from __future__ import annotations

from typing import Optional, TypeVar

from sqlmodel import SQLModel, select

from ...logging_config import get_logger
from ...models.persisted import PersistedSlice
from ...store.state import SLICE_TYPES, RootState
from ...utils.datetime_utils import utc_now
from ..database import SessionFactory

logger = get_logger(__name__)

M = TypeVar("M", bound=SQLModel)


class SQLModelStateRepository:
    """Key/value persistence for store slices."""

    def __init__(self, session_factory: SessionFactory):
        self.session_factory = session_factory

    def keys(self) -> list[str]:
        with self.session_factory() as session:
            return list(session.exec(select(PersistedSlice.key).order_by(PersistedSlice.key)).all())

    def load(self, key: str, model: type[M]) -> Optional[M]:
        """Return the stored slice for ``key`` validated as ``model``, or None."""

        with self.session_factory() as session:
            row = session.get(PersistedSlice, key)
            if row is None:
                return None
            payload = row.payload
        return model.model_validate_json(payload)

    def save(self, key: str, state: SQLModel) -> None:
        payload = state.model_dump_json()
        with self.session_factory() as session:
            row = session.get(PersistedSlice, key)
            if row is None:
                row = PersistedSlice(key=key, payload=payload)
            else:
                row.payload = payload
                row.updated_at = utc_now()
            session.add(row)
        logger.debug("Persisted slice %s", key, extra={"bytes": len(payload)})

    def delete(self, key: str) -> None:
        with self.session_factory() as session:
            row = session.get(PersistedSlice, key)
            if row is not None:
                session.delete(row)

    def load_root(self) -> RootState:
        """Rebuild a ``RootState`` from every stored slice; missing slices start empty."""

        slices = {}
        for key, model in SLICE_TYPES.items():
            loaded = self.load(key, model)
            if loaded is not None:
                slices[key] = loaded
        return RootState(**slices)

    def save_root(self, state: RootState) -> None:
        for key in SLICE_TYPES:
            self.save(key, getattr(state, key))


__all__ = ["SQLModelStateRepository"]
