import logging

import pytest

from booking_api.core import config
from booking_api.core.exceptions import BookingNotFoundError, BookingStoreError, BookingValidationError
from booking_api.core.logging import setup_logging


@pytest.mark.parametrize(
    ('value', 'expected'),
    [(None, False), ('1', True), (' TRUE ', True), ('on', True), ('no', False)],
)
def test_get_bool_parses_common_flags(value, expected) -> None:
    assert config._get_bool(value) is expected


def test_get_list_splits_and_strips() -> None:
    assert config._get_list(' http://a.test , ,http://b.test', default=[]) == ['http://a.test', 'http://b.test']
    assert config._get_list(None, default=['x']) == ['x']


def test_validate_runtime_config_rejects_unknown_patient_check_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'PATIENT_CHECK_MODE', 'sometimes')

    with pytest.raises(RuntimeError):
        config.validate_runtime_config()


def test_validate_runtime_config_rejects_sqlite_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'APP_ENV', 'production')
    monkeypatch.setattr(config, 'DATABASE_URL', 'sqlite:///./bookings.db')

    with pytest.raises(RuntimeError):
        config.validate_runtime_config()


def test_validate_runtime_config_accepts_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'APP_ENV', 'development')
    monkeypatch.setattr(config, 'PATIENT_CHECK_MODE', config.PATIENT_CHECK_REGISTRY)

    config.validate_runtime_config()


def test_setup_logging_installs_single_stdout_handler() -> None:
    setup_logging('debug')

    root_logger = logging.getLogger()
    assert root_logger.level == logging.DEBUG
    assert len(root_logger.handlers) == 1

    setup_logging('info')


def test_booking_errors_expose_message_and_builtin_bases() -> None:
    assert isinstance(BookingValidationError('bad'), ValueError)
    assert isinstance(BookingNotFoundError('missing'), LookupError)
    assert BookingStoreError().message.startswith('Database unavailable')
