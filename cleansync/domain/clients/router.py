"""Client router - PIN login, logout and the logged-in client's record"""

import logging

from fastapi import APIRouter, Depends, Request
from sqlalchemy.orm import Session

from ...auth import get_current_client, login_client, logout_client
from ...config import LOGIN_RATE_LIMIT, LOGIN_RATE_WINDOW_SECONDS
from ...database import get_db
from ...models import Client
from ...rate_limiter import create_rate_limiter
from .schemas import ClientResponse, LoginRequest, SuccessResponse
from .service import ClientService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["Clients"])

login_rate_limit = create_rate_limiter(
    limit=LOGIN_RATE_LIMIT, window_seconds=LOGIN_RATE_WINDOW_SECONDS, key_prefix="login"
)


def get_client_service(db: Session = Depends(get_db)) -> ClientService:
    """Dependency injection for ClientService"""
    return ClientService(db)


@router.post("/auth/login", response_model=SuccessResponse)
async def login(
    data: LoginRequest,
    request: Request,
    service: ClientService = Depends(get_client_service),
    _: None = Depends(login_rate_limit),
):
    """Exchange a 4-digit PIN for a session cookie"""
    client = service.authenticate(data.pin)
    login_client(request, client)
    return SuccessResponse()


@router.post("/auth/logout", response_model=SuccessResponse)
async def logout(request: Request):
    """Tear down the session. Safe to call when not logged in."""
    logout_client(request)
    return SuccessResponse()


@router.get("/client", response_model=ClientResponse)
async def get_client(current_client: Client = Depends(get_current_client)):
    return current_client
