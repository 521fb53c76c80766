from fastapi import Request

from clientip.resolver import client_address, client_public_address


async def get_client_address(request: Request) -> str:
    """Address stored by ClientAddressMiddleware, resolved here if it did not run."""
    ip = getattr(request.state, "client_address", None)
    if ip is None:
        ip = client_address(request)
    return ip


async def get_client_public_address(request: Request) -> str:
    """Public client address, or "" when only local addresses were seen."""
    ip = getattr(request.state, "client_public_address", None)
    if ip is None:
        ip = client_public_address(request)
    return ip
