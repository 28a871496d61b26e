"""Single-threaded state container applying pure reducers to named slices."""

from __future__ import annotations

from typing import Any, Callable, Optional, TypeVar

from sqlmodel import SQLModel

from ..logging_config import get_logger
from .state import SLICE_TYPES, RootState

logger = get_logger(__name__)

S = TypeVar("S", bound=SQLModel)
Listener = Callable[[str, SQLModel], None]


class Store:
    """Holds the current ``RootState`` and notifies listeners about slice changes.

    Reducers run synchronously on the calling thread; a reducer that returns
    its input unchanged is treated as a no-op and triggers no notification.
    """

    def __init__(self, state: Optional[RootState] = None):
        self._state = state or RootState()
        self._listeners: list[Listener] = []

    @property
    def state(self) -> RootState:
        return self._state

    def get_slice(self, name: str) -> SQLModel:
        self._check_slice(name)
        return getattr(self._state, name)

    def dispatch(self, slice_name: str, reducer: Callable[..., S], *args: Any, **kwargs: Any) -> S:
        """Apply ``reducer(slice, *args, **kwargs)`` and store the returned slice."""

        self._check_slice(slice_name)
        current = getattr(self._state, slice_name)
        updated = reducer(current, *args, **kwargs)
        if updated is current:
            logger.debug("Reducer %s left %s unchanged", reducer.__name__, slice_name)
            return updated

        self._state = self._state.model_copy(update={slice_name: updated})
        logger.debug("Reducer %s updated %s", reducer.__name__, slice_name)
        for listener in list(self._listeners):
            listener(slice_name, updated)
        return updated

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register ``listener``; the returned callable unregisters it."""

        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def replace_state(self, state: RootState) -> None:
        """Swap in a hydrated state without notifying listeners."""

        self._state = state

    @staticmethod
    def _check_slice(name: str) -> None:
        if name not in SLICE_TYPES:
            raise ValueError(f"Unknown store slice: {name!r}")
