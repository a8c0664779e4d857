from datetime import datetime, timedelta

from booking_api.models.booking import Booking, generate_booking_id
from booking_api.models.patient import Patient
from booking_api.repositories.booking_repository import BookingRepository

START = datetime(2026, 1, 6, 9, 0)


def test_insert_persists_booking_and_find_by_id_returns_it(booking_db) -> None:
    repository = BookingRepository(booking_db)
    booking = Booking(
        id=generate_booking_id(),
        patient_id=100,
        doctor_id=1,
        start_time=START,
        end_time=START + timedelta(hours=1),
        cancelled=False,
    )

    repository.insert(booking)

    found = repository.find_by_id(booking.id)
    assert found is not None
    assert found.patient_id == 100
    assert found.cancelled is False


def test_find_by_id_returns_none_for_unknown_id(booking_db) -> None:
    assert BookingRepository(booking_db).find_by_id(generate_booking_id()) is None


def test_find_by_predicate_filters_and_orders(booking_db, make_booking) -> None:
    later = make_booking(patient_id=100, start_time=START + timedelta(days=1), end_time=START + timedelta(days=1, hours=1))
    earlier = make_booking(patient_id=100, start_time=START, end_time=START + timedelta(hours=1))
    make_booking(patient_id=200, start_time=START, end_time=START + timedelta(hours=1))

    bookings = BookingRepository(booking_db).find_by_predicate(
        Booking.patient_id == 100,
        order_by=Booking.start_time.asc(),
    )

    assert [booking.id for booking in bookings] == [earlier.id, later.id]


def test_exists_reports_matching_rows(booking_db, make_booking) -> None:
    make_booking(patient_id=100, doctor_id=3, start_time=START, end_time=START + timedelta(hours=1))
    repository = BookingRepository(booking_db)

    assert repository.exists(Booking.doctor_id == 3) is True
    assert repository.exists(Booking.doctor_id == 4) is False


def test_update_persists_cancelled_flag(booking_db, make_booking) -> None:
    booking = make_booking(start_time=START, end_time=START + timedelta(hours=1))
    repository = BookingRepository(booking_db)

    booking.cancelled = True
    repository.update(booking)

    booking_db.expire_all()
    assert repository.find_by_id(booking.id).cancelled is True


def test_patient_registered_checks_patients_table(booking_db) -> None:
    booking_db.add(Patient(id=7, first_name='Grace', last_name='Hopper', email='grace@example.com'))
    booking_db.commit()
    repository = BookingRepository(booking_db)

    assert repository.patient_registered(7) is True
    assert repository.patient_registered(8) is False
