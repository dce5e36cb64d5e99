import logging

from fastapi import Depends, HTTPException, Request
from sqlalchemy.orm import Session

from .database import get_db
from .domain.clients.repository import ClientRepository
from .models import Client

logger = logging.getLogger(__name__)

SESSION_CLIENT_KEY = "client_id"


def login_client(request: Request, client: Client) -> None:
    """Bind the authenticated client to the caller's session"""
    request.session.clear()
    request.session[SESSION_CLIENT_KEY] = client.id


def logout_client(request: Request) -> None:
    request.session.clear()


async def get_current_client(request: Request, db: Session = Depends(get_db)) -> Client:
    """Get the logged-in client from the session cookie"""
    client_id = request.session.get(SESSION_CLIENT_KEY)

    if client_id is None:
        logger.debug(f"🔒 Unauthenticated request to {request.url.path}")
        raise HTTPException(status_code=401, detail="Unauthorized")

    client = ClientRepository.get_client_by_id(db, client_id)
    if not client:
        # Client was removed while the session was still alive
        logger.warning(f"⚠️ Session references missing client {client_id}, clearing session")
        request.session.clear()
        raise HTTPException(status_code=401, detail="Unauthorized")

    return client
