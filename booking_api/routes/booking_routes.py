from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from booking_api.core.exceptions import BookingNotFoundError, BookingStoreError, BookingValidationError
from booking_api.database import ensure_booking_schema, get_db
from booking_api.models.booking import Booking
from booking_api.repositories.booking_repository import BookingRepository
from booking_api.schemas.booking import (
    AddBookingRequest,
    BookingResponse,
    CancelBookingRequest,
    NextBookingResponse,
)
from booking_api.services.booking_service import BookingService

router = APIRouter(tags=['booking'])


def ensure_database_ready() -> None:
    try:
        ensure_booking_schema()
    except SQLAlchemyError as exc:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=BookingStoreError().message,
        ) from exc


def get_booking_service(db: Session) -> BookingService:
    return BookingService(BookingRepository(db))


def to_booking_response(booking: Booking) -> BookingResponse:
    return BookingResponse(
        id=booking.id,
        patient_id=booking.patient_id,
        doctor_id=booking.doctor_id,
        start_time=booking.start_time,
        end_time=booking.end_time,
        cancelled=bool(booking.cancelled),
    )


@router.get('/patient/{patient_id}/next', response_model=NextBookingResponse)
def get_patient_next_booking(patient_id: int, db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        booking = get_booking_service(db).get_patient_next_booking(patient_id)
    except BookingNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message) from exc
    except BookingStoreError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.message) from exc

    return NextBookingResponse(
        id=booking.id,
        doctor_id=booking.doctor_id,
        start_time=booking.start_time,
        end_time=booking.end_time,
    )


@router.post('', response_model=BookingResponse)
def add_booking(data: AddBookingRequest, db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        booking = get_booking_service(db).add_booking(data)
    except BookingValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc
    except BookingStoreError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.message) from exc

    return to_booking_response(booking)


@router.delete('', response_model=BookingResponse)
def cancel_booking(data: CancelBookingRequest, db: Session = Depends(get_db)):
    ensure_database_ready()

    try:
        booking = get_booking_service(db).cancel_booking(data)
    except BookingValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=exc.message) from exc
    except BookingNotFoundError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.message) from exc
    except BookingStoreError as exc:
        raise HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail=exc.message) from exc

    return to_booking_response(booking)
