import psycopg
from psycopg_pool import AsyncConnectionPool

from pgquery.config.settings import Settings
from pgquery.config.logging_config import logger


def create_pool(settings: Settings) -> AsyncConnectionPool:
    """Build the shared connection pool from the configured database target.

    The pool is created closed; the application lifespan opens it on startup
    and closes it on shutdown. Connections run in autocommit mode so each ad
    hoc statement takes effect on its own.
    """
    logger.debug(
        f"Creating connection pool for {settings.db_host}:{settings.db_port}/{settings.db_name}"
    )
    return AsyncConnectionPool(
        settings.conninfo(),
        kwargs={"autocommit": True},
        open=False,
    )


def error_message(exc: BaseException) -> str:
    """Engine message for a database error, or the exception text otherwise"""
    if isinstance(exc, psycopg.Error):
        primary = exc.diag.message_primary
        if primary:
            return primary
    return str(exc) or exc.__class__.__name__
