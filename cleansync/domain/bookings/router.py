"""Booking router - FastAPI endpoints for booking operations"""

import logging

from fastapi import APIRouter, BackgroundTasks, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from ...auth import get_current_client
from ...database import get_db
from ...models import Client
from ...services.webhook_service import notify_booking_created
from ...shared.validators import parse_iso_date
from .schemas import BookingCreate, BookingResponse, BookingUpdate, SlotSuggestionResponse
from .service import BookingService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/bookings", tags=["Bookings"])


def get_booking_service(db: Session = Depends(get_db)) -> BookingService:
    """Dependency injection for BookingService"""
    return BookingService(db)


@router.get("", response_model=list[BookingResponse])
async def get_bookings(
    current_client: Client = Depends(get_current_client),
    service: BookingService = Depends(get_booking_service),
):
    """Get the caller's bookings, earliest first"""
    return service.get_bookings(current_client)


@router.get("/availability", response_model=SlotSuggestionResponse)
async def get_availability(
    date: str = Query(..., description="Requested day, YYYY-MM-DD"),
    current_client: Client = Depends(get_current_client),
    service: BookingService = Depends(get_booking_service),
):
    """Preview the slot a booking request for `date` would get"""
    try:
        requested = parse_iso_date(date)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    return SlotSuggestionResponse(date=requested, suggested_time=service.suggest_time(requested))


@router.post("", response_model=BookingResponse)
async def create_booking(
    data: BookingCreate,
    background_tasks: BackgroundTasks,
    current_client: Client = Depends(get_current_client),
    service: BookingService = Depends(get_booking_service),
):
    """Book the first open slot on the requested day (status pending)"""
    booking = service.create_booking(data, current_client)
    response = BookingResponse.model_validate(booking)

    # Runs after the response is sent; failures are logged, never surfaced
    background_tasks.add_task(
        notify_booking_created,
        booking=response.model_dump(mode="json"),
        client={"id": current_client.id, "name": current_client.name, "email": current_client.email},
    )
    return response


@router.patch("/{booking_id}", response_model=BookingResponse)
async def update_booking(
    booking_id: int,
    data: BookingUpdate,
    current_client: Client = Depends(get_current_client),
    service: BookingService = Depends(get_booking_service),
):
    """Change status (confirm, cancel, complete) or notes of one of the caller's bookings"""
    return service.update_booking(booking_id, data, current_client)
