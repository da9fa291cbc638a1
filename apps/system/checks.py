"""
Smoke checks against state owned by the host framework and the ORM.

Each check returns a CheckResult and never raises for an absent application
or an unreachable connection.
"""

import time
from typing import Optional
from core.application import get_application
from core.config import settings
from core.database.manager import DatabaseManager, get_connection
from .schemas import CheckResult


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


def check_application_present() -> CheckResult:
    """Succeeds when the application singleton has been created."""
    start = time.perf_counter()
    app = get_application()
    if app is None:
        return CheckResult(
            name="application",
            ok=False,
            detail="Application not present",
            duration_ms=_elapsed_ms(start),
        )
    return CheckResult(
        name="application",
        ok=True,
        detail=f"{app.title} v{app.version}",
        duration_ms=_elapsed_ms(start),
    )


async def check_connection_active(timeout: Optional[float] = None) -> CheckResult:
    """Succeeds when the primary database connection is open and answers a ping."""
    start = time.perf_counter()
    connection = get_connection()
    active = await connection.is_active(settings.HEALTH_CHECK_TIMEOUT if timeout is None else timeout)
    return CheckResult(
        name="database",
        ok=active,
        detail=connection.engine.dialect.name if active else "Connection not active",
        duration_ms=_elapsed_ms(start),
    )


async def check_cache_active(timeout: Optional[float] = None) -> Optional[CheckResult]:
    """Same as the connection check for Redis; None when the cache is disabled."""
    cache = DatabaseManager.get_instance().redis
    if cache is None:
        return None
    start = time.perf_counter()
    active = await cache.is_active(settings.HEALTH_CHECK_TIMEOUT if timeout is None else timeout)
    return CheckResult(
        name="cache",
        ok=active,
        detail=None if active else "Cache not active",
        duration_ms=_elapsed_ms(start),
    )
