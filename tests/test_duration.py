from dataclasses import replace

import pytest

from wavcore.duration import duration_exact, duration_seconds, frame_count
from wavcore.errors import DivisionByZeroError
from wavcore.header import Header


def test_duration_whole_seconds():
    h = replace(Header(), data_size=88200, byte_per_sec=44100)
    assert duration_seconds(h) == 2


def test_duration_floors():
    h = Header.pcm16(2, 44100, 44100 * 3 + 100)
    assert duration_seconds(h) == 3
    assert duration_exact(h) == pytest.approx(3 + 100 / 44100)


def test_zero_byte_rate():
    h = replace(Header(), data_size=100, byte_per_sec=0)
    with pytest.raises(DivisionByZeroError):
        duration_seconds(h)
    with pytest.raises(ZeroDivisionError):
        duration_exact(h)


def test_frame_count():
    assert frame_count(Header.pcm16(3, 8000, 17)) == 17
    with pytest.raises(DivisionByZeroError):
        frame_count(replace(Header(), byte_per_chunk=0))
