import os

from dotenv import load_dotenv


load_dotenv()


def _get_bool(value: str | None, default: bool = False) -> bool:
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _get_list(value: str | None, default: list[str]) -> list[str]:
    if value is None:
        return default
    return [item.strip() for item in value.split(",") if item.strip()]


PATIENT_CHECK_PRIOR_BOOKING = "prior_booking"
PATIENT_CHECK_REGISTRY = "registry"
PATIENT_CHECK_MODES = {PATIENT_CHECK_PRIOR_BOOKING, PATIENT_CHECK_REGISTRY}

APP_ENV = os.getenv("APP_ENV", "development")

DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./bookings.db")
DATABASE_ECHO = _get_bool(os.getenv("DATABASE_ECHO"), default=False)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

CORS_ALLOWED_ORIGINS = _get_list(os.getenv("CORS_ALLOWED_ORIGINS"), default=["http://localhost:4200"])

# prior_booking: a patient "exists" once any booking references them.
# registry: a patient exists when the patients table has a row for them.
PATIENT_CHECK_MODE = os.getenv("PATIENT_CHECK_MODE", PATIENT_CHECK_PRIOR_BOOKING).strip().lower()


def validate_runtime_config() -> None:
    if PATIENT_CHECK_MODE not in PATIENT_CHECK_MODES:
        raise RuntimeError(
            f"PATIENT_CHECK_MODE must be one of {sorted(PATIENT_CHECK_MODES)}, got {PATIENT_CHECK_MODE!r}."
        )
    if APP_ENV.lower() == "production" and DATABASE_URL.startswith("sqlite"):
        raise RuntimeError("DATABASE_URL must point at a server database in production.")
