import numpy as np
import pytest

from wavcore.buffer import SampleBuffer, ensure_samples
from wavcore.errors import EmptyBufferError, FormatError


def test_buffer_copies_its_input():
    src = np.array([1, 2, 3], dtype=np.int16)
    buf = SampleBuffer(src)
    src[0] = 99
    assert buf.samples.tolist() == [1, 2, 3]
    assert buf.samples.dtype == np.dtype("<i2")


def test_from_bytes_little_endian():
    buf = SampleBuffer.from_bytes(b"\x01\x00\xff\xff\x00\x80")
    assert buf.samples.tolist() == [1, -1, -32768]
    assert buf.nbytes == 6
    assert buf.tobytes() == b"\x01\x00\xff\xff\x00\x80"


def test_from_bytes_odd_length():
    with pytest.raises(FormatError):
        SampleBuffer.from_bytes(b"\x01\x00\x02")


def test_frames_view():
    buf = SampleBuffer([1, 2, 3, 4, 5])
    assert buf.frames(2).tolist() == [[1, 2], [3, 4]]


def test_release_drops_samples():
    buf = SampleBuffer([1, 2])
    assert buf
    buf.release()
    assert buf.released
    assert not buf
    assert len(buf) == 0
    assert buf.nbytes == 0
    with pytest.raises(EmptyBufferError):
        buf.samples


def test_context_manager_releases_on_exit():
    with SampleBuffer([1, 2, 3]) as buf:
        assert len(buf) == 3
    assert buf.released


def test_context_manager_releases_on_error():
    with pytest.raises(RuntimeError):
        with SampleBuffer([1]) as buf:
            raise RuntimeError("boom")
    assert buf.released


@pytest.mark.parametrize("buf", [None, SampleBuffer()])
def test_ensure_samples_rejects_empty(buf):
    with pytest.raises(EmptyBufferError):
        ensure_samples(buf)
