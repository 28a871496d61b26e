"""Application context for dependency injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel

from .config import BaseConfig
from .infra.database import SessionFactory, bootstrap_database
from .infra.repositories import SQLModelStateRepository
from .logging_config import get_logger
from .services.analytics import AnalyticsState, calculate_analytics
from .services.assistant import AssistantService
from .store import Store
from .utils.datetime_utils import DateLike

logger = get_logger(__name__)


@dataclass
class AppContext:
    """Centralized application context with services and state."""

    config: BaseConfig
    engine: Engine
    session_factory: SessionFactory
    state_repo: SQLModelStateRepository
    store: Store
    assistant: AssistantService

    def analytics(self, *, as_of: DateLike | None = None) -> AnalyticsState:
        """Recompute analytics from the current store snapshot."""

        state = self.store.state
        return calculate_analytics(
            state.tasks.tasks,
            state.habits.habits,
            state.planner.time_blocks,
            state.planner.weekly_goals,
            as_of=as_of,
        )

    def persist_slice(self, slice_name: str, slice_state: SQLModel) -> None:
        self.state_repo.save(slice_name, slice_state)


def create_app_context(config: Optional[BaseConfig] = None) -> AppContext:
    """Bootstrap the database, hydrate the store and persist every later change."""

    if config is None:
        config = BaseConfig()

    engine, session_factory = bootstrap_database(config)
    state_repo = SQLModelStateRepository(session_factory)
    store = Store(state_repo.load_root())

    ctx = AppContext(
        config=config,
        engine=engine,
        session_factory=session_factory,
        state_repo=state_repo,
        store=store,
        assistant=AssistantService(delay=config.ASSISTANT_DELAY),
    )
    store.subscribe(ctx.persist_slice)
    logger.info("Store hydrated", extra={"slices": state_repo.keys()})
    return ctx
