"""Booking model definitions."""

from uuid import uuid4

from sqlalchemy import Boolean, Column, DateTime, Integer, String
from booking_api.database import Base


def generate_booking_id() -> str:
    return str(uuid4())


class Booking(Base):
    """Represents a scheduled appointment between a patient and a doctor."""
    __tablename__ = "bookings"

    id = Column(String(36), primary_key=True, default=generate_booking_id)
    patient_id = Column(Integer, nullable=False, index=True)
    doctor_id = Column(Integer, nullable=False, index=True)
    start_time = Column(DateTime, nullable=False)  # naive UTC
    end_time = Column(DateTime, nullable=False)  # naive UTC
    cancelled = Column(Boolean, nullable=False, default=False)
