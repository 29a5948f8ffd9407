import os
import re
import time
import uuid
from datetime import datetime

from cvmattest.utils import current_utc_time, get_pid, new_uuid, time_since_epoch_millis


def test_uuid_is_canonical_and_random():
    first = new_uuid()
    second = new_uuid()
    assert str(uuid.UUID(first)) == first
    assert len(first) == 36
    assert first != second


def test_uuid_is_version_four():
    assert uuid.UUID(new_uuid()).version == 4


def test_current_time_format():
    stamp = current_utc_time()
    assert re.fullmatch(r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}Z", stamp)
    parsed = datetime.strptime(stamp, "%Y-%m-%dT%H:%M:%SZ")
    assert abs(parsed.year - datetime.now().year) <= 1


def test_millis_is_close_to_wall_clock():
    before = int(time.time() * 1000)
    value = time_since_epoch_millis()
    after = int(time.time() * 1000)
    assert before - 1 <= value <= after + 1


def test_millis_is_monotonic_enough():
    first = time_since_epoch_millis()
    second = time_since_epoch_millis()
    assert second >= first


def test_pid_matches_process():
    assert get_pid() == os.getpid()