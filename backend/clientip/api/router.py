from fastapi import APIRouter

from clientip.api.ip import router as ip_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(ip_router)
