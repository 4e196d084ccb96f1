# wavcore/duration.py
from wavcore.errors import DivisionByZeroError
from wavcore.header import Header


def duration_seconds(header: Header) -> int:
    """Whole seconds of playback: data_size // byte_per_sec."""
    if header.byte_per_sec == 0:
        raise DivisionByZeroError("cannot compute duration: byte rate is 0")
    return header.data_size // header.byte_per_sec


def duration_exact(header: Header) -> float:
    if header.byte_per_sec == 0:
        raise DivisionByZeroError("cannot compute duration: byte rate is 0")
    return header.data_size / header.byte_per_sec


def frame_count(header: Header) -> int:
    if header.byte_per_chunk == 0:
        raise DivisionByZeroError("cannot count frames: block align is 0")
    return header.data_size // header.byte_per_chunk
