"""Supply repository - Database operations for the supply checklist"""

from typing import Optional

from sqlalchemy.orm import Session

from ...models import Interaction, Supply


class SupplyRepository:
    """Repository for supply and interaction database operations"""

    @staticmethod
    def get_supplies(db: Session, client_id: int, status: Optional[str] = None) -> list[Supply]:
        query = db.query(Supply).filter(Supply.client_id == client_id)

        if status:
            query = query.filter(Supply.status == status)

        return query.order_by(Supply.id.asc()).all()

    @staticmethod
    def get_supply_by_id(db: Session, supply_id: int, client_id: int) -> Optional[Supply]:
        return (
            db.query(Supply)
            .filter(Supply.id == supply_id, Supply.client_id == client_id)
            .first()
        )

    @staticmethod
    def create_supply(db: Session, client_id: int, item: str) -> Supply:
        supply = Supply(client_id=client_id, item=item, status="needed")
        db.add(supply)
        db.commit()
        db.refresh(supply)
        return supply

    @staticmethod
    def update_status(db: Session, supply: Supply, status: str) -> Supply:
        supply.status = status
        db.commit()
        db.refresh(supply)
        return supply

    @staticmethod
    def create_interaction(
        db: Session,
        client_id: int,
        interaction_type: str,
        details: Optional[str] = None,
        booking_id: Optional[int] = None,
    ) -> Interaction:
        interaction = Interaction(
            client_id=client_id,
            interaction_type=interaction_type,
            details=details,
            booking_id=booking_id,
        )
        db.add(interaction)
        db.commit()
        db.refresh(interaction)
        return interaction
