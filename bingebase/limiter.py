from slowapi import Limiter
from slowapi.util import get_remote_address

from .config import settings, TMDB_RATE_LIMIT_PERIOD_SECONDS

# Limit applied to routes that fan out to TMDB. The numbers are read from
# config but the limiter stays disabled unless RATE_LIMIT_ENABLED is set.
UPSTREAM_LIMIT = f"{settings.TMDB_RATE_LIMIT}/{TMDB_RATE_LIMIT_PERIOD_SECONDS} seconds"

limiter = Limiter(
    key_func=get_remote_address,
    storage_uri="memory://",
    enabled=settings.RATE_LIMIT_ENABLED,
)
