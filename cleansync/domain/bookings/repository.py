"""Booking repository - Database operations for bookings"""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from ...models import Booking


class BookingRepository:
    """Repository for booking database operations"""

    @staticmethod
    def get_bookings(db: Session, client_id: int) -> list[Booking]:
        """Get all bookings for a client, earliest first"""
        return (
            db.query(Booking)
            .filter(Booking.client_id == client_id)
            .order_by(Booking.scheduled_at.asc(), Booking.id.asc())
            .all()
        )

    @staticmethod
    def get_booking_by_id(db: Session, booking_id: int, client_id: int) -> Optional[Booking]:
        return (
            db.query(Booking)
            .filter(Booking.id == booking_id, Booking.client_id == client_id)
            .first()
        )

    @staticmethod
    def get_active_bookings_between(db: Session, start: datetime, end: datetime) -> list[Booking]:
        """Non-cancelled bookings of every client starting in [start, end)"""
        return (
            db.query(Booking)
            .filter(
                Booking.scheduled_at >= start,
                Booking.scheduled_at < end,
                Booking.status != "cancelled",
            )
            .order_by(Booking.scheduled_at.asc())
            .all()
        )

    @staticmethod
    def get_upcoming_bookings(db: Session, client_id: int, since: datetime) -> list[Booking]:
        """Non-cancelled bookings of a client from `since` on, earliest first"""
        return (
            db.query(Booking)
            .filter(
                Booking.client_id == client_id,
                Booking.scheduled_at >= since,
                Booking.status != "cancelled",
            )
            .order_by(Booking.scheduled_at.asc(), Booking.id.asc())
            .all()
        )

    @staticmethod
    def create_booking(db: Session, client_id: int, **booking_data) -> Booking:
        booking = Booking(client_id=client_id, **booking_data)
        db.add(booking)
        db.commit()
        db.refresh(booking)
        return booking

    @staticmethod
    def update_booking(db: Session, booking: Booking, **updates) -> Booking:
        """Update a booking with provided fields"""
        for key, value in updates.items():
            if value is not None and hasattr(booking, key):
                setattr(booking, key, value)

        db.commit()
        db.refresh(booking)
        return booking
