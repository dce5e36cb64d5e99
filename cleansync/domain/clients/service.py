"""Client service - PIN authentication and client lookup"""

import logging

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Client
from ...shared.validators import validate_email, validate_pin
from .repository import ClientRepository

logger = logging.getLogger(__name__)


class ClientService:
    """Service layer for client business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = ClientRepository()

    def authenticate(self, pin: str) -> Client:
        """Resolve a PIN to its client or raise 401"""
        try:
            pin = validate_pin(pin)
        except ValueError:
            # A malformed PIN is just another PIN that matches nobody
            logger.warning("🚫 Login failed: malformed PIN")
            raise HTTPException(status_code=401, detail="Invalid PIN") from None

        client = self.repo.get_client_by_pin(self.db, pin)
        if not client:
            logger.warning("🚫 Login failed: unknown PIN")
            raise HTTPException(status_code=401, detail="Invalid PIN")

        logger.info(f"✅ Client {client.id} logged in")
        return client

    def create_client(self, name: str, pin: str, email: str) -> Client:
        """Create a client for the seed script; raises ValueError on bad input"""
        pin = validate_pin(pin)
        email = validate_email(email)
        if not name or not name.strip():
            raise ValueError("Name is required")
        if not email:
            raise ValueError("Email is required")

        if self.repo.get_client_by_pin(self.db, pin):
            raise ValueError("PIN already assigned to another client")

        client = self.repo.create_client(self.db, name=name.strip(), pin=pin, email=email)
        logger.info(f"🆕 Created client {client.id} ({client.email})")
        return client
