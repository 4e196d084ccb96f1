# wavio/audio_io.py
import logging
from contextlib import contextmanager

from wavcore.buffer import SampleBuffer
from wavcore.errors import (AllocationError, EmptyBufferError, FormatError,
                            WavError, WavIOError, WriteError)
from wavcore.header import HEADER_SIZE, Header

log = logging.getLogger(__name__)


def _check_header(header: Header, where: str) -> None:
    # order: magic, codec, layout
    try:
        header.validate(check_file_size=False)
    except FormatError as e:
        raise type(e)(f"{where}: {e}") from e
    if header.data_size % 2:
        raise FormatError(f"{where}: odd data size {header.data_size}")
    if header.file_size != header.expected_file_size():
        log.warning("%s: RIFF size %d does not match data size %d", where,
                    header.file_size, header.data_size)


def _read_stream(f, where: str) -> tuple[Header, SampleBuffer]:
    raw = f.read(HEADER_SIZE)
    if len(raw) < HEADER_SIZE:
        raise FormatError(f"{where}: cannot read wav header ({len(raw)} of {HEADER_SIZE} bytes)")
    header = Header.unpack(raw)
    _check_header(header, where)

    try:
        payload = f.read(header.data_size)
    except MemoryError as e:
        raise AllocationError(f"{where}: cannot allocate {header.data_size} bytes for samples") from e
    if len(payload) < header.data_size:
        raise FormatError(f"{where}: cannot read data ({len(payload)} of {header.data_size} bytes)")
    return header, SampleBuffer.from_bytes(payload)


def decode_wav(data: bytes) -> tuple[Header, SampleBuffer]:
    """In-memory read_wav."""
    if len(data) < HEADER_SIZE:
        raise FormatError(f"decode_wav: cannot read wav header ({len(data)} of {HEADER_SIZE} bytes)")
    header = Header.unpack(data)
    _check_header(header, "decode_wav")
    end = HEADER_SIZE + header.data_size
    if len(data) < end:
        raise FormatError(f"decode_wav: cannot read data ({len(data) - HEADER_SIZE} of {header.data_size} bytes)")
    return header, SampleBuffer.from_bytes(data[HEADER_SIZE:end])


@contextmanager
def _opened(path: str, mode: str, where: str, close_error: type):
    """
    Open ``path``, yield the handle and always close it. A close failure is
    raised as ``close_error`` unless another error is already on its way out,
    in which case that error wins and the close failure is only logged.
    """
    try:
        f = open(path, mode)
    except OSError as e:
        raise WavIOError(f"{where}: cannot open file: {e.strerror or e}") from e
    try:
        yield f
    except BaseException:
        try:
            f.close()
        except OSError as e:
            log.warning("%s: cannot close file: %s", where, e.strerror or e)
        raise
    try:
        f.close()
    except OSError as e:
        raise close_error(f"{where}: cannot close file: {e.strerror or e}") from e


def read_wav(path: str) -> tuple[Header, SampleBuffer]:
    """
    Load a canonical 16-bit PCM wav file.

    Returns a fresh (header, buffer) pair owned by the caller. The header is
    checked before any sample memory is allocated.
    """
    where = f"read_wav({path})"
    with _opened(path, "rb", where, WavIOError) as f:
        try:
            header, buffer = _read_stream(f, where)
        except WavError:
            raise
        except OSError as e:
            raise WavIOError(f"{where}: cannot read file: {e.strerror or e}") from e
    log.debug("%s: %d ch, %d Hz, %d bytes", where, header.nb_channels,
              header.sample_rate, header.data_size)
    return header, buffer


def _payload(header: Header, buffer: SampleBuffer, where: str) -> bytes:
    if buffer is None or not buffer:
        raise EmptyBufferError(f"{where}: data buffer empty")
    data = buffer.tobytes()
    if len(data) < header.data_size:
        raise WriteError(f"{where}: buffer holds {len(data)} bytes, header declares {header.data_size}")
    return data[: header.data_size]


def encode_wav(header: Header, buffer: SampleBuffer) -> bytes:
    """In-memory write_wav."""
    return header.pack() + _payload(header, buffer, "encode_wav")


def write_wav(path: str, header: Header, buffer: SampleBuffer) -> None:
    """
    Write ``header`` verbatim followed by exactly ``header.data_size`` bytes of
    ``buffer``. Nothing is created when the buffer is empty.
    """
    where = f"write_wav({path})"
    data = _payload(header, buffer, where)
    try:
        head = header.pack()
    except FormatError as e:
        raise WriteError(f"{where}: {e}") from e
    with _opened(path, "wb", where, WriteError) as f:
        for part, what in ((head, "wav header"), (data, "data")):
            try:
                n = f.write(part)
            except OSError as e:
                raise WriteError(f"{where}: cannot write {what}: {e.strerror or e}") from e
            if n != len(part):
                raise WriteError(f"{where}: short write of {what} ({n} of {len(part)} bytes)")
    log.debug("%s: wrote %d bytes", where, len(head) + len(data))
