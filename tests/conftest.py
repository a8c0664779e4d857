import os
from datetime import datetime

import pytest
from sqlalchemy import StaticPool, create_engine
from sqlalchemy.orm import sessionmaker

os.environ.setdefault('DATABASE_URL', 'sqlite:///:memory:')

from booking_api.database import Base  # noqa: E402
from booking_api.models.booking import Booking, generate_booking_id  # noqa: E402
from booking_api.models.patient import Patient  # noqa: E402


@pytest.fixture
def booking_db():
    engine = create_engine(
        'sqlite:///:memory:',
        connect_args={'check_same_thread': False},
        poolclass=StaticPool,
    )
    testing_session_local = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    Base.metadata.create_all(bind=engine, tables=[Booking.__table__, Patient.__table__])

    db = testing_session_local()
    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine, tables=[Booking.__table__, Patient.__table__])
        engine.dispose()


@pytest.fixture
def make_booking(booking_db):
    def _make_booking(
        *,
        patient_id: int = 100,
        doctor_id: int = 1,
        start_time: datetime,
        end_time: datetime,
        cancelled: bool = False,
    ) -> Booking:
        booking = Booking(
            id=generate_booking_id(),
            patient_id=patient_id,
            doctor_id=doctor_id,
            start_time=start_time,
            end_time=end_time,
            cancelled=cancelled,
        )
        booking_db.add(booking)
        booking_db.commit()
        booking_db.refresh(booking)
        return booking

    return _make_booking
