import logging

from starlette.requests import Request

from slowapi import Limiter

from clientip.config import settings
from clientip.resolver import client_address, client_public_address, remote_address

logger = logging.getLogger(__name__)


def _get_client_ip(request: Request) -> str:
    """Derive the rate limit key from the resolved client address.

    With RATE_LIMIT_KEY=public (the default) the key is the right-most public
    address, falling back to the socket host. Private X-Forwarded-For entries
    never become the key. Requests with no resolvable address share the
    "unknown" bucket.
    """
    if settings.rate_limit_key == "client":
        ip = client_address(request)
    else:
        ip = client_public_address(request) or remote_address(request)
    if ip:
        return ip
    logger.warning("Could not resolve a client address, using 'unknown' bucket")
    return "unknown"


# Uses in-memory storage by default. Rate limits reset on deploy/restart
# and are per-instance. If scaling to multiple backend instances, set
# RATE_LIMIT_STORAGE_URI to redis://...
limiter = Limiter(
    key_func=_get_client_ip, storage_uri=settings.rate_limit_storage_uri
)
