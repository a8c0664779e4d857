"""Booking service.

Validates a request against the current store, then applies it:

1. ``add_booking`` inserts a new, uncancelled booking.
2. ``cancel_booking`` flags an existing booking as cancelled (rows are never deleted).
3. ``get_patient_next_booking`` returns the patient's earliest upcoming booking.

Only the first validation error is surfaced, as a ``BookingValidationError``.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from sqlalchemy.exc import SQLAlchemyError

from booking_api.core.exceptions import BookingNotFoundError, BookingStoreError, BookingValidationError
from booking_api.models.booking import Booking, generate_booking_id
from booking_api.repositories.booking_repository import BookingRepository
from booking_api.schemas.booking import AddBookingRequest, CancelBookingRequest
from booking_api.services.booking_validation import (
    ValidationResult,
    validate_add_request,
    validate_cancel_request,
)
from booking_api.utils.time import utc_now

logger = logging.getLogger(__name__)

AddValidator = Callable[[BookingRepository, AddBookingRequest], ValidationResult]
CancelValidator = Callable[[BookingRepository, CancelBookingRequest], ValidationResult]


class BookingService:
    def __init__(
        self,
        repository: BookingRepository,
        add_validator: AddValidator = validate_add_request,
        cancel_validator: CancelValidator = validate_cancel_request,
    ):
        self.repository = repository
        self.add_validator = add_validator
        self.cancel_validator = cancel_validator

    def add_booking(self, request: AddBookingRequest) -> Booking:
        result = self._validate(self.add_validator, request)
        self._raise_if_failed(result)

        booking = Booking(
            id=generate_booking_id(),
            patient_id=request.patient_id,
            doctor_id=request.doctor_id,
            start_time=request.start_time,
            end_time=request.end_time,
            cancelled=False,
        )

        try:
            self.repository.insert(booking)
        except SQLAlchemyError as exc:
            self.repository.rollback()
            logger.error('Failed to store booking for patient %s: %s', request.patient_id, exc)
            raise BookingStoreError() from exc

        logger.info('Created booking %s for patient %s with doctor %s', booking.id, booking.patient_id, booking.doctor_id)
        return booking

    def cancel_booking(self, request: CancelBookingRequest) -> Booking:
        result = self._validate(self.cancel_validator, request)
        self._raise_if_failed(result)

        booking_id = str(request.booking_id)
        try:
            booking = self.repository.find_by_id(booking_id)
            if booking is None:
                raise BookingNotFoundError('Booking not found.')

            booking.cancelled = True
            self.repository.update(booking)
        except SQLAlchemyError as exc:
            self.repository.rollback()
            logger.error('Failed to cancel booking %s: %s', booking_id, exc)
            raise BookingStoreError() from exc

        logger.info('Cancelled booking %s', booking_id)
        return booking

    def get_patient_next_booking(self, patient_id: int, *, now: datetime | None = None) -> Booking:
        current_time = now or utc_now()

        try:
            booking = self.repository.first_by_predicate(
                Booking.patient_id == patient_id,
                Booking.start_time > current_time,
                Booking.cancelled.is_(False),
                order_by=Booking.start_time.asc(),
            )
        except SQLAlchemyError as exc:
            logger.error('Failed to look up next booking for patient %s: %s', patient_id, exc)
            raise BookingStoreError() from exc

        if booking is None:
            raise BookingNotFoundError('No upcoming booking found for patient.')

        return booking

    def _validate(self, validator, request) -> ValidationResult:
        try:
            return validator(self.repository, request)
        except SQLAlchemyError as exc:
            logger.error('Booking validation could not read the store: %s', exc)
            raise BookingStoreError() from exc

    @staticmethod
    def _raise_if_failed(result: ValidationResult) -> None:
        if result.passed:
            return
        message = result.errors[0] if result.errors else 'Booking request failed validation.'
        logger.info('Booking request rejected: %s', message)
        raise BookingValidationError(message)
