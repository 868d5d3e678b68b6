"""Service Context — every runtime collaborator, constructed explicitly and injected.

Invariants:
    - No module-level singletons: tests build their own ServiceContext
    - repository is always a SessionRepository (cached wrapper when the cache is enabled)
    - db is None when session_store == "memory"

Design Decisions:
    - build_context() is the single wiring point used by the FastAPI lifespan
"""

import logging
from dataclasses import dataclass, field

from deliberate.config import Settings
from deliberate.core.repository_protocols import SessionRepository
from deliberate.infrastructure.audit_log import AuditLog
from deliberate.infrastructure.cache import TTLCache
from deliberate.infrastructure.cached_session_repository import CachedSessionRepository
from deliberate.infrastructure.database import DatabaseSessionManager
from deliberate.infrastructure.housekeeping import Housekeeper
from deliberate.infrastructure.memory_session_repository import InMemorySessionRepository
from deliberate.infrastructure.rate_limiter import RateLimiter, RateLimitPolicy
from deliberate.infrastructure.sql_session_repository import SqlSessionRepository

logger = logging.getLogger(__name__)


@dataclass
class ServiceContext:
    repository: SessionRepository
    rate_limiter: RateLimiter = field(default_factory=RateLimiter)
    audit_log: AuditLog = field(default_factory=AuditLog)
    cache: TTLCache | None = None
    db: DatabaseSessionManager | None = None
    housekeeper: Housekeeper | None = None

    async def close(self) -> None:
        if self.housekeeper is not None:
            await self.housekeeper.stop()
        if self.db is not None:
            await self.db.dispose()


def policy_from_settings(settings: Settings) -> RateLimitPolicy:
    return RateLimitPolicy(
        global_max=settings.rate_limit_global_max,
        global_window_seconds=settings.rate_limit_global_window_seconds,
        session_max=settings.rate_limit_session_max,
        session_window_seconds=settings.rate_limit_session_window_seconds,
        analysis_max=settings.rate_limit_analysis_max,
        analysis_window_seconds=settings.rate_limit_analysis_window_seconds,
    )


async def build_context(settings: Settings) -> ServiceContext:
    """Wire repository, cache, limiter, audit log and housekeeping from settings."""
    db = None
    if settings.session_store == "sql":
        db = DatabaseSessionManager(
            settings.database_url,
            pool_size=settings.database_pool_size,
            max_overflow=settings.database_max_overflow,
        )
        if settings.database_create_tables:
            await db.create_all()
        inner: SessionRepository = SqlSessionRepository(db)
    else:
        inner = InMemorySessionRepository()

    cache = TTLCache(settings.cache_max_size, settings.cache_ttl_seconds)
    context = ServiceContext(
        repository=CachedSessionRepository(inner, cache),
        rate_limiter=RateLimiter(policy_from_settings(settings)),
        audit_log=AuditLog(settings.audit_max_entries),
        cache=cache,
        db=db,
        housekeeper=Housekeeper(cache, settings.housekeeping_interval_seconds),
    )
    logger.info(f"Service context ready (store={settings.session_store})")
    return context
