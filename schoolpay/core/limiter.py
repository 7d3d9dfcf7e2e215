"""Rate limiting for the /api routes.

Each app gets its own SlowAPI Limiter (moving-window strategy, in-memory
storage) so counters are never shared between app instances. The limit is
enforced by the enforce_rate_limit dependency on the /api router, which runs
inside CORS and the exception handlers.
"""

from functools import lru_cache

from fastapi import Request
from limits import RateLimitItem, parse
from slowapi import Limiter
from slowapi.util import get_remote_address

from schoolpay.core.config import Settings
from schoolpay.domain.exceptions import RateLimitException

# One window per client address, shared by every route.
RATE_LIMIT_SCOPE = "api"


@lru_cache(maxsize=8)
def _limit_item(limit: str) -> RateLimitItem:
    return parse(limit)


def create_limiter() -> Limiter:
    """Return a moving-window limiter keyed by client address."""
    return Limiter(key_func=get_remote_address, strategy="moving-window")


async def enforce_rate_limit(request: Request) -> None:
    """Count the request against its client's window.

    Raises:
        RateLimitException: The client went over settings.rate_limit; it stays
            blocked until enough of its earlier requests leave the window.
    """
    settings: Settings = request.app.state.settings
    limiter: Limiter = request.app.state.limiter
    item = _limit_item(settings.rate_limit)
    if not limiter.limiter.hit(item, RATE_LIMIT_SCOPE, get_remote_address(request)):
        raise RateLimitException(settings.rate_limit_message)
