import asyncio
import logging
from urllib.parse import urlparse, parse_qsl, urlencode, urlunparse
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool
from burnscale.core.config import settings

logger = logging.getLogger(__name__)

# libpq options asyncpg refuses
UNSUPPORTED_PARAMS = ("server_settings", "passfile", "channel_binding", "gssencmode")

RETRYABLE_NETWORK_ERRORS = (
    "Network is unreachable",
    "Connection refused",
    "No address associated with hostname",
    "Temporary failure in name resolution",
    "timeout",
)


def normalize_database_url(url: str) -> str:
    """
    Rewrite a Supabase/libpq style URL into one the asyncpg dialect accepts.
    """
    parsed = urlparse(url)
    scheme = parsed.scheme
    if scheme in ("postgres", "postgresql"):
        scheme = "postgresql+asyncpg"

    params = []
    for key, value in parse_qsl(parsed.query, keep_blank_values=True):
        if key in UNSUPPORTED_PARAMS:
            logger.info("Removed unsupported parameter: %s", key)
            continue
        if key == "connect_timeout":
            logger.info("Replaced connect_timeout=%s with command_timeout=%s", value, value)
            key = "command_timeout"
        elif key == "sslmode":
            key = "ssl"
        params.append((key, value))

    return urlunparse((scheme, parsed.netloc, parsed.path, parsed.params, urlencode(params), parsed.fragment))


_db_url = normalize_database_url(str(settings.DATABASE_URL))

engine = create_async_engine(
    _db_url,
    poolclass=NullPool,
    pool_pre_ping=True,
    echo=False,
)

SessionLocal = async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)

async def get_db():
    """
    Dependency that provides a database session, retrying transient network failures.
    """
    max_retries = 3
    retry_delay = 1  # seconds

    for attempt in range(max_retries):
        session = SessionLocal()
        try:
            await session.execute(text("SET search_path TO app, public"))
            break
        except OSError as e:
            await session.close()
            if not any(err in str(e) for err in RETRYABLE_NETWORK_ERRORS):
                logger.error("Database connection failed with non-retryable OSError: %s", e)
                raise
            if attempt < max_retries - 1:
                logger.warning("Network/connection issue, attempt %s/%s. Retrying in %ss... Error: %s", attempt + 1, max_retries, retry_delay, e)
                await asyncio.sleep(retry_delay)
                retry_delay *= 2
                continue
            logger.error("Database connection failed after %s attempts: %s", max_retries, e)
            raise OSError(
                f"Database connection failed after {max_retries} attempts. "
                f"Check DATABASE_URL and network connectivity. Last error: {e}"
            ) from e
        except BaseException:
            await session.close()
            raise

    try:
        yield session
    finally:
        await session.close()
