"""Client repository - Database operations for clients"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Client


class ClientRepository:
    """Repository for client database operations"""

    @staticmethod
    def get_client_by_pin(db: Session, pin: str) -> Optional[Client]:
        return db.query(Client).filter(Client.pin == pin).first()

    @staticmethod
    def get_client_by_id(db: Session, client_id: int) -> Optional[Client]:
        return db.query(Client).filter(Client.id == client_id).first()

    @staticmethod
    def create_client(db: Session, **client_data) -> Client:
        """Create a new client (seed script only; the API never creates clients)"""
        client = Client(**client_data)
        db.add(client)
        db.commit()
        db.refresh(client)
        return client
