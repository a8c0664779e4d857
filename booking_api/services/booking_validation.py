"""Business-rule validation for booking requests.

Each request type is validated by an ordered list of ``(violated, message)``
steps. Steps run in order and evaluation stops at the first violation, so a
failed result carries exactly one error.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from datetime import datetime

from booking_api.core import config
from booking_api.models.booking import Booking
from booking_api.repositories.booking_repository import BookingRepository
from booking_api.schemas.booking import AddBookingRequest, CancelBookingRequest
from booking_api.utils.time import utc_now

PATIENT_NOT_FOUND_MESSAGE = 'Specified patient does not exist'
START_TIME_IN_PAST_MESSAGE = 'Specified booking start time is in the past'
DOCTOR_ALREADY_BOOKED_MESSAGE = 'Doctor already booked between specified start and end times'

ValidationStep = tuple[Callable[[], bool], str]


@dataclass(frozen=True)
class ValidationResult:
    passed: bool
    errors: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def success(cls) -> 'ValidationResult':
        return cls(passed=True)

    @classmethod
    def failure(cls, *errors: str) -> 'ValidationResult':
        return cls(passed=False, errors=tuple(errors))


def run_validation_steps(steps: Iterable[ValidationStep]) -> ValidationResult:
    for violated, message in steps:
        if violated():
            return ValidationResult.failure(message)
    return ValidationResult.success()


def patient_is_unknown(repository: BookingRepository, patient_id: int, mode: str) -> bool:
    if mode == config.PATIENT_CHECK_REGISTRY:
        return not repository.patient_registered(patient_id)
    # Observed behaviour: a patient only "exists" once a booking references them.
    return not repository.exists(Booking.patient_id == patient_id)


def doctor_already_booked(repository: BookingRepository, request: AddBookingRequest) -> bool:
    # Only catches existing bookings contained in the requested window, not partial overlaps.
    return repository.exists(
        Booking.doctor_id == request.doctor_id,
        Booking.start_time >= request.start_time,
        Booking.end_time <= request.end_time,
    )


def validate_add_request(
    repository: BookingRepository,
    request: AddBookingRequest,
    *,
    now: datetime | None = None,
    patient_check_mode: str | None = None,
) -> ValidationResult:
    current_time = now or utc_now()
    mode = patient_check_mode or config.PATIENT_CHECK_MODE

    return run_validation_steps([
        (lambda: patient_is_unknown(repository, request.patient_id, mode), PATIENT_NOT_FOUND_MESSAGE),
        (lambda: request.start_time < current_time, START_TIME_IN_PAST_MESSAGE),
        (lambda: doctor_already_booked(repository, request), DOCTOR_ALREADY_BOOKED_MESSAGE),
    ])


def validate_cancel_request(repository: BookingRepository, request: CancelBookingRequest) -> ValidationResult:
    # No cancellation rules yet; unknown ids are reported by the service as not found.
    del repository, request
    return run_validation_steps([])
