# wavcore/header.py
import struct
from dataclasses import dataclass

from wavcore.config import settings
from wavcore.errors import FormatError, NotWavError, UnsupportedCodecError

RIFF_ID = b"RIFF"
WAVE_ID = b"WAVE"
FMT_ID = b"fmt "
DATA_ID = b"data"
PCM_FORMAT = 1
FMT_CHUNK_SIZE = 16
HEADER_SIZE = 44

# Layout: (field, byte offset, struct code). All integers little-endian.
_LAYOUT = (
    ("file_type_id",    0,  "4s"),
    ("file_size",       4,  "I"),
    ("file_format_id",  8,  "4s"),
    ("format_chunk_id", 12, "4s"),
    ("fmt_chunk_size",  16, "I"),
    ("audio_format",    20, "H"),
    ("nb_channels",     22, "H"),
    ("sample_rate",     24, "I"),
    ("byte_per_sec",    28, "I"),
    ("byte_per_chunk",  32, "H"),
    ("bits_per_sample", 34, "H"),
    ("data_chunk_id",   36, "4s"),
    ("data_size",       40, "I"),
)


@dataclass(frozen=True)
class Header:
    """
    The 44-byte canonical WAV header (RIFF / fmt / data, nothing else).

    Field names follow the on-disk order; see _LAYOUT for offsets.
    Instances are immutable, derive new ones with dataclasses.replace().
    """
    file_type_id: bytes = RIFF_ID
    file_size: int = 36
    file_format_id: bytes = WAVE_ID
    format_chunk_id: bytes = FMT_ID
    fmt_chunk_size: int = FMT_CHUNK_SIZE
    audio_format: int = PCM_FORMAT
    nb_channels: int = 1
    sample_rate: int = 44100
    byte_per_sec: int = 88200
    byte_per_chunk: int = 2
    bits_per_sample: int = 16
    data_chunk_id: bytes = DATA_ID
    data_size: int = 0

    @classmethod
    def unpack(cls, raw: bytes) -> "Header":
        """Decode the first 44 bytes of ``raw``. No validation is done here."""
        if len(raw) < HEADER_SIZE:
            raise FormatError(f"header needs {HEADER_SIZE} bytes, got {len(raw)}")
        values = {}
        for name, offset, code in _LAYOUT:
            values[name] = struct.unpack_from("<" + code, raw, offset)[0]
        return cls(**values)

    def pack(self) -> bytes:
        buf = bytearray(HEADER_SIZE)
        for name, offset, code in _LAYOUT:
            if code == "4s" and len(getattr(self, name)) != 4:
                raise FormatError(f"chunk id {name}={getattr(self, name)!r} must be exactly 4 bytes")
            try:
                struct.pack_into("<" + code, buf, offset, getattr(self, name))
            except struct.error as e:
                raise FormatError(f"header field {name}={getattr(self, name)!r} does not fit: {e}") from e
        return bytes(buf)

    @classmethod
    def pcm16(cls, nb_channels: int, sample_rate: int, n_frames: int = 0) -> "Header":
        """Fresh header for ``n_frames`` frames of 16-bit interleaved PCM."""
        block = nb_channels * 2
        data_size = n_frames * block
        return cls(
            file_size=data_size + HEADER_SIZE - 8,
            nb_channels=nb_channels,
            sample_rate=sample_rate,
            byte_per_sec=sample_rate * block,
            byte_per_chunk=block,
            bits_per_sample=16,
            data_size=data_size,
        )

    @property
    def sample_width(self) -> int:
        return self.bits_per_sample // 8

    def expected_file_size(self) -> int:
        return self.data_size + HEADER_SIZE - 8

    def check_magic(self) -> None:
        if self.file_type_id != RIFF_ID or self.file_format_id != WAVE_ID:
            raise NotWavError(
                f"missing RIFF/WAVE magic (got {self.file_type_id!r}/{self.file_format_id!r})")

    def check_codec(self) -> None:
        if self.audio_format != PCM_FORMAT:
            raise UnsupportedCodecError(f"only PCM (format 1) supported, got format {self.audio_format}")
        if self.bits_per_sample != settings.bits_per_sample:
            raise UnsupportedCodecError(
                f"only {settings.bits_per_sample}-bit samples supported, got {self.bits_per_sample}")

    def validate(self, *, check_file_size: bool = True) -> None:
        """
        Raise if any header invariant is broken.

        NotWavError for bad magic, UnsupportedCodecError for non-PCM16,
        FormatError for everything else (chunk ids, channel count,
        block align, byte rate and, unless disabled, RIFF size).
        """
        self.check_magic()
        self.check_codec()
        if self.format_chunk_id != FMT_ID:
            raise FormatError(f"expected 'fmt ' chunk at offset 12, got {self.format_chunk_id!r}")
        if self.data_chunk_id != DATA_ID:
            raise FormatError(f"expected 'data' chunk at offset 36, got {self.data_chunk_id!r}")
        if not 1 <= self.nb_channels <= settings.max_channels:
            raise FormatError(f"channel count must be 1..{settings.max_channels}, got {self.nb_channels}")
        block = self.nb_channels * self.sample_width
        if self.byte_per_chunk != block:
            raise FormatError(f"block align {self.byte_per_chunk} != {block} for {self.nb_channels} channel(s)")
        if self.byte_per_sec != self.sample_rate * block:
            raise FormatError(f"byte rate {self.byte_per_sec} != {self.sample_rate} * {block}")
        if check_file_size and self.file_size != self.expected_file_size():
            raise FormatError(f"RIFF size {self.file_size} != {self.expected_file_size()}")
