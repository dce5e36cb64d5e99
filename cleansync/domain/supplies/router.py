"""Supply router - FastAPI endpoints for the supply checklist"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ...auth import get_current_client
from ...database import get_db
from ...models import Client
from .schemas import SupplyCreate, SupplyResponse, SupplyUpdate
from .service import SupplyService

router = APIRouter(prefix="/api/supplies", tags=["Supplies"])


def get_supply_service(db: Session = Depends(get_db)) -> SupplyService:
    """Dependency injection for SupplyService"""
    return SupplyService(db)


@router.get("", response_model=list[SupplyResponse])
async def get_supplies(
    current_client: Client = Depends(get_current_client),
    service: SupplyService = Depends(get_supply_service),
):
    return service.get_supplies(current_client)


@router.post("", response_model=SupplyResponse)
async def add_supply(
    data: SupplyCreate,
    current_client: Client = Depends(get_current_client),
    service: SupplyService = Depends(get_supply_service),
):
    """Add an item to the checklist (status needed)"""
    return service.add_supply(data, current_client)


@router.patch("/{supply_id}", response_model=SupplyResponse)
async def update_supply(
    supply_id: int,
    data: SupplyUpdate,
    current_client: Client = Depends(get_current_client),
    service: SupplyService = Depends(get_supply_service),
):
    """Toggle an item between needed and completed"""
    return service.update_supply(supply_id, data, current_client)
