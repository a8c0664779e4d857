"""Booking error types."""


class BookingError(Exception):
    """Base exception for booking failures."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BookingValidationError(BookingError, ValueError):
    """Raised when a request fails a booking business rule."""


class BookingNotFoundError(BookingError, LookupError):
    """Raised when no booking matches a lookup."""


class BookingStoreError(BookingError):
    """Raised when the underlying database fails."""

    def __init__(self, message: str = 'Database unavailable. Verify DATABASE_URL and database credentials.'):
        super().__init__(message)
