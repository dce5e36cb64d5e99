import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from starlette.middleware.sessions import SessionMiddleware

from . import models  # noqa: F401
from .config import (
    ALLOWED_ORIGINS,
    LOGIN_RATE_LIMIT_ENABLED,
    SECRET_KEY,
    SESSION_COOKIE_NAME,
    SESSION_HTTPS_ONLY,
    SESSION_MAX_AGE,
)
from .database import Base, engine
from .domain.assistant.router import router as assistant_router
from .domain.bookings.router import router as bookings_router
from .domain.clients.router import router as clients_router
from .domain.supplies.router import router as supplies_router
from .rate_limiter import get_redis_client
from .security_headers import SecurityHeadersMiddleware

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")
logger = logging.getLogger(__name__)

for noisy in ("httpx", "httpcore", "openai"):
    logging.getLogger(noisy).setLevel(logging.WARNING)

SECURITY_HEADERS_ENABLED = os.getenv("SECURITY_HEADERS_ENABLED", "true").lower() == "true"


def create_tables():
    try:
        Base.metadata.create_all(bind=engine, checkfirst=True)
    except SQLAlchemyError as e:
        # Workers booting together race on CREATE TABLE; the loser sees these
        if "already exists" not in str(e) and "duplicate key" not in str(e):
            raise
        logger.info("🗄️ Tables already created by another worker")
    else:
        logger.info("🗄️ Database tables ready")


def probe_rate_limit_store():
    if not LOGIN_RATE_LIMIT_ENABLED:
        logger.warning("⚠️ Login rate limiting is OFF, PINs can be brute-forced")
        return
    try:
        get_redis_client()
    except Exception as e:
        logger.warning(f"⚠️ Redis unavailable, logins get 503 until it is back: {e}")


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 CleanSync API starting")
    create_tables()
    probe_rate_limit_store()
    yield
    logger.info("👋 CleanSync API stopped")


app = FastAPI(title="CleanSync API", version="1.0.0", lifespan=lifespan)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Missing or malformed fields are client errors: 400, not FastAPI's 422"""
    logger.warning(f"⚠️ Rejected {request.method} {request.url.path}: {exc.errors()}")
    errors = [
        {"loc": list(error.get("loc", [])), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    return JSONResponse(status_code=400, content={"detail": errors})


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.exception(f"{request.method} {request.url.path} - Unhandled error: {exc}")
    return JSONResponse(status_code=500, content={"detail": "Internal server error"})


if SECURITY_HEADERS_ENABLED:
    app.add_middleware(SecurityHeadersMiddleware, exclude_paths=["/health", "/docs", "/openapi.json"])
else:
    logger.warning("⚠️ Security headers are OFF")

app.add_middleware(
    SessionMiddleware,
    secret_key=SECRET_KEY,
    session_cookie=SESSION_COOKIE_NAME,
    max_age=SESSION_MAX_AGE,
    same_site="lax",
    https_only=SESSION_HTTPS_ONLY,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=True,  # session cookie
    allow_methods=["GET", "POST", "PATCH", "OPTIONS"],
    allow_headers=["Content-Type"],
)

for router in (clients_router, bookings_router, supplies_router, assistant_router):
    app.include_router(router)


@app.get("/")
def root():
    return {"message": "CleanSync API is running"}


@app.get("/health")
def health():
    return {"status": "healthy"}
