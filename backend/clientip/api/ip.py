from fastapi import APIRouter, Depends, Request

from clientip.config import settings
from clientip.dependencies import get_client_address, get_client_public_address
from clientip.ip import is_local_address, is_public_address
from clientip.rate_limit import limiter
from clientip.resolver import forwarded_for, remote_address
from clientip.schemas.ip import ClassifyResponse, ClientAddressResponse

router = APIRouter(prefix="/ip", tags=["ip"])


@router.get("", response_model=ClientAddressResponse)
@limiter.limit(lambda: settings.rate_limit_default)
async def whoami(
    request: Request,
    client: str = Depends(get_client_address),
    public: str = Depends(get_client_public_address),
):
    return ClientAddressResponse(
        client_address=client,
        client_public_address=public,
        remote_address=remote_address(request),
        forwarded_for=forwarded_for(request),
        is_local=is_local_address(client),
    )


@router.get("/classify/{address}", response_model=ClassifyResponse)
async def classify(address: str):
    return ClassifyResponse(
        address=address,
        is_local=is_local_address(address),
        is_public=is_public_address(address),
    )
