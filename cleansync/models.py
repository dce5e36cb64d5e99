from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func

from .database import Base


class Client(Base):
    __tablename__ = "clients"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    pin = Column(String(4), unique=True, index=True, nullable=False)  # 4-digit login PIN
    email = Column(String(255), nullable=False)
    stripe_customer_id = Column(String(255), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    bookings = relationship("Booking", back_populates="client")
    supplies = relationship("Supply", back_populates="client")
    interactions = relationship("Interaction", back_populates="client")


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    scheduled_at = Column(DateTime, nullable=False, index=True)  # Start of the 2-hour slot
    status = Column(String(20), default="pending", nullable=False)  # pending, confirmed, cancelled, completed
    is_recurring = Column(Boolean, default=False, nullable=False)
    notes = Column(Text, nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now(), onupdate=func.now())

    client = relationship("Client", back_populates="bookings")


class Supply(Base):
    __tablename__ = "supplies"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    item = Column(String(255), nullable=False)
    status = Column(String(20), default="needed", nullable=False)  # needed, completed
    created_at = Column(DateTime, server_default=func.now())

    client = relationship("Client", back_populates="supplies")


class Interaction(Base):
    """Audit trail of assistant-driven requests (e.g. supply requests from chat)"""

    __tablename__ = "interactions"

    id = Column(Integer, primary_key=True, index=True)
    client_id = Column(Integer, ForeignKey("clients.id"), nullable=False, index=True)
    interaction_type = Column(String(50), nullable=False)  # supply_request, supply_shortage
    details = Column(Text, nullable=True)
    booking_id = Column(Integer, ForeignKey("bookings.id"), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    client = relationship("Client", back_populates="interactions")
    booking = relationship("Booking")
