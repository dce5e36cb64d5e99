"""Booking service - Business logic for booking operations"""

import logging
from datetime import date, datetime, time
from typing import Optional

from fastapi import HTTPException
from sqlalchemy.orm import Session

from ...models import Booking, Client
from .repository import BookingRepository
from .schemas import BookingCreate, BookingUpdate
from .slots import day_bounds, suggest_slot

logger = logging.getLogger(__name__)


class BookingService:
    """Service layer for booking business logic"""

    def __init__(self, db: Session):
        self.db = db
        self.repo = BookingRepository()

    def get_bookings(self, client: Client) -> list[Booking]:
        return self.repo.get_bookings(self.db, client.id)

    def get_booking(self, booking_id: int, client: Client) -> Booking:
        booking = self.repo.get_booking_by_id(self.db, booking_id, client.id)
        if not booking:
            raise HTTPException(status_code=404, detail="Booking not found")
        return booking

    def get_upcoming_bookings(self, client: Client, today: Optional[date] = None) -> list[Booking]:
        """Bookings from the start of today on, cancelled ones excluded"""
        since = datetime.combine(today or date.today(), time.min)
        return self.repo.get_upcoming_bookings(self.db, client.id, since)

    def suggest_time(self, requested: date) -> datetime:
        """First open slot on the requested day across the whole crew calendar"""
        start, end = day_bounds(requested)
        existing = [b.scheduled_at for b in self.repo.get_active_bookings_between(self.db, start, end)]
        suggested = suggest_slot(requested, existing)

        if suggested.date() != requested:
            logger.info(f"📅 {requested} is fully booked ({len(existing)} bookings), rolling over to {suggested}")
        return suggested

    def create_booking(self, data: BookingCreate, client: Client) -> Booking:
        """Create a pending booking at the suggested slot for the requested day"""
        scheduled_at = self.suggest_time(data.date)

        booking = self.repo.create_booking(
            self.db,
            client.id,
            scheduled_at=scheduled_at,
            status="pending",
            notes=data.notes,
        )
        logger.info(f"✅ Booking {booking.id} created for client {client.id} at {scheduled_at}")
        return booking

    def update_booking(self, booking_id: int, data: BookingUpdate, client: Client) -> Booking:
        booking = self.get_booking(booking_id, client)

        updates = {}
        if data.status is not None:
            updates["status"] = data.status
        if data.notes is not None:
            updates["notes"] = data.notes

        if not updates:
            raise HTTPException(status_code=400, detail="Nothing to update")

        previous_status = booking.status
        booking = self.repo.update_booking(self.db, booking, **updates)
        if booking.status != previous_status:
            logger.info(f"🔄 Booking {booking.id}: {previous_status} -> {booking.status}")
        return booking
