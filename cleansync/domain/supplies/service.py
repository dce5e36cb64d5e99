"""Supply service - Business logic for the supply checklist"""

import logging
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Client, Interaction, Supply
from .repository import SupplyRepository
from .schemas import SupplyCreate, SupplyUpdate

logger = logging.getLogger(__name__)


class SupplyService:
    """Service layer for supply business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = SupplyRepository()

    def get_supplies(self, client: Client, status: Optional[str] = None) -> list[Supply]:
        return self.repo.get_supplies(self.db, client.id, status)

    def add_supply(self, data: SupplyCreate, client: Client) -> Supply:
        supply = self.repo.create_supply(self.db, client.id, data.item)
        logger.info(f"🧴 Supply {supply.id} added for client {client.id}")
        return supply

    def update_supply(self, supply_id: int, data: SupplyUpdate, client: Client) -> Supply:
        supply = self.repo.get_supply_by_id(self.db, supply_id, client.id)
        if not supply:
            raise HTTPException(status_code=404, detail="Supply not found")

        return self.repo.update_status(self.db, supply, data.status)

    def log_interaction(self, client: Client, interaction_type: str, details: str) -> Interaction:
        """Record an assistant-driven request so staff can act on it"""
        interaction = self.repo.create_interaction(self.db, client.id, interaction_type, details)
        logger.info(f"📝 Logged {interaction_type} interaction {interaction.id} for client {client.id}")
        return interaction
