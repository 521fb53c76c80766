import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from clientip.api.router import api_router
from clientip.config import settings
from clientip.middleware import ClientAddressMiddleware
from clientip.rate_limit import limiter

logging.getLogger("clientip").setLevel(settings.log_level)

app = FastAPI(title="clientip")

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(ClientAddressMiddleware)

# Configure CORS for development
if settings.env == "development":
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

app.include_router(api_router)


@app.get("/health")
async def health():
    return {"status": "ok"}
