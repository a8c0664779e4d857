"""Request and response contracts for the booking API.

JSON payloads use camelCase keys (``patientId``, ``startTime``...); the
snake_case field names are accepted as well. Response timestamps are
sent as UTC with an explicit offset.
"""

from datetime import datetime, timezone
from uuid import UUID

from pydantic import BaseModel, Field, field_serializer, field_validator

from booking_api.utils.time import to_naive_utc


class AddBookingRequest(BaseModel):
    patient_id: int = Field(alias='patientId')
    doctor_id: int = Field(alias='doctorId')
    start_time: datetime = Field(alias='startTime')
    end_time: datetime = Field(alias='endTime')

    class Config:
        populate_by_name = True

    @field_validator('start_time', 'end_time')
    @classmethod
    def normalize_to_utc(cls, value: datetime) -> datetime:
        return to_naive_utc(value)


class CancelBookingRequest(BaseModel):
    booking_id: UUID = Field(alias='bookingId')

    class Config:
        populate_by_name = True


class BookingResponse(BaseModel):
    id: str
    patient_id: int = Field(alias='patientId')
    doctor_id: int = Field(alias='doctorId')
    start_time: datetime = Field(alias='startTime')
    end_time: datetime = Field(alias='endTime')
    cancelled: bool

    class Config:
        from_attributes = True
        populate_by_name = True

    @field_serializer('start_time', 'end_time', when_used='json')
    def serialize_as_utc(self, value: datetime) -> datetime:
        return value.replace(tzinfo=timezone.utc)


class NextBookingResponse(BaseModel):
    id: str
    doctor_id: int = Field(alias='doctorId')
    start_time: datetime = Field(alias='startTime')
    end_time: datetime = Field(alias='endTime')

    class Config:
        from_attributes = True
        populate_by_name = True

    @field_serializer('start_time', 'end_time', when_used='json')
    def serialize_as_utc(self, value: datetime) -> datetime:
        return value.replace(tzinfo=timezone.utc)
