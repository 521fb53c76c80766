import logging

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from clientip.resolver import client_address, client_public_address

logger = logging.getLogger(__name__)


class ClientAddressMiddleware(BaseHTTPMiddleware):
    """Resolve client addresses once per request and store them on request.state."""

    async def dispatch(self, request: Request, call_next):
        request.state.client_address = client_address(request)
        request.state.client_public_address = client_public_address(request)
        logger.debug(
            "%s %s from client=%r public=%r",
            request.method,
            request.url.path,
            request.state.client_address,
            request.state.client_public_address,
        )
        return await call_next(request)
