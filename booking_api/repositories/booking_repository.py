"""Data access for bookings.

The service and validator only talk to the store through this class, so the
booking rules stay independent of the SQL dialect behind ``DATABASE_URL``.
"""

from sqlalchemy import exists, select
from sqlalchemy.orm import Session

from booking_api.models.booking import Booking
from booking_api.models.patient import Patient


class BookingRepository:
    def __init__(self, db: Session):
        self.db = db

    def find_by_id(self, booking_id: str) -> Booking | None:
        return self.db.get(Booking, booking_id)

    def find_by_predicate(self, *criteria, order_by=None) -> list[Booking]:
        query = self.db.query(Booking).filter(*criteria)
        if order_by is not None:
            query = query.order_by(order_by)
        return query.all()

    def first_by_predicate(self, *criteria, order_by=None) -> Booking | None:
        query = self.db.query(Booking).filter(*criteria)
        if order_by is not None:
            query = query.order_by(order_by)
        return query.first()

    def exists(self, *criteria) -> bool:
        return bool(self.db.scalar(select(exists().where(*criteria))))

    def patient_registered(self, patient_id: int) -> bool:
        return bool(self.db.scalar(select(exists().where(Patient.id == patient_id))))

    def insert(self, booking: Booking) -> Booking:
        self.db.add(booking)
        self.db.commit()
        self.db.refresh(booking)
        return booking

    def update(self, booking: Booking) -> Booking:
        self.db.commit()
        self.db.refresh(booking)
        return booking

    def rollback(self) -> None:
        self.db.rollback()
