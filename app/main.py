# app/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.middleware.trustedhost import TrustedHostMiddleware

from app.api.routes import reading_routes, root_routes
from app.core.config import settings
from app.core.security import limiter
from app.core.startup import startup_event

logging.basicConfig(level=settings.LOG_LEVEL)

app = FastAPI(title=settings.API_TITLE, version=settings.API_VERSION)

app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins(),
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
    allow_headers=["*"],
)

app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.trusted_hosts())

@app.middleware("http")
async def add_api_version_header(request: Request, call_next):
    response = await call_next(request)
    response.headers["X-API-Version"] = settings.API_VERSION
    return response

app.include_router(root_routes.router)
app.include_router(reading_routes.router, prefix="/api/readings", tags=["Readings"])

@app.on_event("startup")
async def app_startup():
    await startup_event(app)
