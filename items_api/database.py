"""
Items API — Startup Database Probe
===================================

What:  One-shot reachability check against the configured database.
How:   Builds an async SQLAlchemy engine from the MYSQL_* settings, opens a
       single connection, runs SELECT 1, then disposes the engine whatever
       the outcome. The whole attempt is bounded by DB_PROBE_TIMEOUT.
Who:   Awaited once by the application lifespan (main.py).
When:  Startup only. Items are never persisted; no pool outlives the probe.

Outcome handling:
    MYSQL_HOST unset      → SKIPPED   (nothing logged beyond DEBUG)
    SELECT 1 succeeded    → CONNECTED (INFO)
    error or timeout      → FAILED    (WARNING, never raised)

The server serves requests regardless of the outcome.
"""

import asyncio
import enum
import logging
from typing import Optional

from sqlalchemy import text
from sqlalchemy.engine import URL
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from items_api.config import Settings

logger = logging.getLogger(__name__)


class ProbeStatus(str, enum.Enum):
    SKIPPED = "skipped"
    CONNECTED = "connected"
    FAILED = "failed"


def build_database_url(settings: Settings) -> Optional[URL]:
    """
    Assemble the connection URL from the MYSQL_* settings.

    Returns None when no host is configured. Empty user, password and
    database values are left out of the URL.
    """
    if not settings.database_probe_enabled:
        return None
    return URL.create(
        drivername=settings.db_driver,
        username=settings.mysql_user or None,
        password=settings.mysql_password or None,
        host=settings.mysql_host,
        port=settings.mysql_port,
        database=settings.mysql_database or None,
    )


async def _connect_once(url: URL) -> None:
    # NullPool: the connection is closed on release instead of being pooled
    engine = create_async_engine(url, poolclass=NullPool)
    try:
        async with engine.connect() as conn:
            await conn.execute(text("SELECT 1"))
    finally:
        await engine.dispose()


async def probe_database(settings: Settings) -> ProbeStatus:
    """
    Check database reachability once and report the outcome.

    Never raises: connection errors, driver import errors and timeouts are
    logged at WARNING and reported as ProbeStatus.FAILED.
    """
    url = build_database_url(settings)
    if url is None:
        logger.debug("MYSQL_HOST not set; skipping database probe")
        return ProbeStatus.SKIPPED

    safe_url = url.render_as_string(hide_password=True)
    try:
        await asyncio.wait_for(_connect_once(url), timeout=settings.db_probe_timeout)
    except asyncio.TimeoutError:
        logger.warning(
            "Could not connect to MySQL at %s: timed out after %.1fs",
            safe_url,
            settings.db_probe_timeout,
        )
        return ProbeStatus.FAILED
    except Exception as e:
        logger.warning("Could not connect to MySQL at %s: %s", safe_url, str(e))
        return ProbeStatus.FAILED

    logger.info("Connected to MySQL at %s", safe_url)
    return ProbeStatus.CONNECTED
