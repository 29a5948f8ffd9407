import pytest

from cvmattest.telemetry import (
    get_telemetry_reporting,
    reset_telemetry_reporting,
    set_telemetry_reporting,
)


class _Recorder:
    def __init__(self, name):
        self.name = name


@pytest.fixture(autouse=True)
def _clean_reporter():
    reset_telemetry_reporting()
    yield
    reset_telemetry_reporting()


def test_nothing_registered_initially():
    assert get_telemetry_reporting() is None


def test_set_registers_reporter():
    reporter = _Recorder("first")
    set_telemetry_reporting(reporter)
    assert get_telemetry_reporting() is reporter


def test_second_registration_is_ignored():
    first = _Recorder("first")
    second = _Recorder("second")
    set_telemetry_reporting(first)
    set_telemetry_reporting(second)
    assert get_telemetry_reporting() is first


def test_reset_allows_new_registration():
    set_telemetry_reporting(_Recorder("first"))
    reset_telemetry_reporting()
    assert get_telemetry_reporting() is None
    replacement = _Recorder("second")
    set_telemetry_reporting(replacement)
    assert get_telemetry_reporting() is replacement