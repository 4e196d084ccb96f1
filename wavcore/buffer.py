# wavcore/buffer.py
import numpy as np

from wavcore.errors import AllocationError, EmptyBufferError, FormatError

SAMPLE_DTYPE = np.dtype("<i2")


class SampleBuffer:
    """
    Owned, contiguous run of signed 16-bit little-endian samples.

    The interleaving stride is not stored here, it comes from the header the
    buffer is paired with. A buffer is single-owner: release() drops the
    array and any later access raises EmptyBufferError. Use as a context
    manager to release on scope exit.
    """

    def __init__(self, samples=()):
        try:
            self._samples = np.array(samples, dtype=SAMPLE_DTYPE, copy=True).reshape(-1)
        except MemoryError as e:
            raise AllocationError("cannot allocate sample buffer") from e

    @classmethod
    def from_bytes(cls, raw: bytes) -> "SampleBuffer":
        if len(raw) % SAMPLE_DTYPE.itemsize:
            raise FormatError(f"sample data must be a whole number of 16-bit samples, got {len(raw)} bytes")
        return cls(np.frombuffer(raw, dtype=SAMPLE_DTYPE))

    @property
    def released(self) -> bool:
        return self._samples is None

    @property
    def samples(self) -> np.ndarray:
        if self._samples is None:
            raise EmptyBufferError("sample buffer already released")
        return self._samples

    @property
    def nbytes(self) -> int:
        return 0 if self._samples is None else int(self._samples.nbytes)

    def tobytes(self) -> bytes:
        return self.samples.tobytes()

    def frames(self, nb_channels: int) -> np.ndarray:
        """View as (frames, nb_channels); a trailing partial frame is dropped."""
        a = self.samples
        n = a.size // nb_channels
        return a[: n * nb_channels].reshape(-1, nb_channels)

    def release(self) -> None:
        self._samples = None

    def __len__(self):
        return 0 if self._samples is None else int(self._samples.size)

    def __bool__(self):
        return len(self) > 0

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.release()
        return False

    def __repr__(self):
        if self._samples is None:
            return "SampleBuffer(<released>)"
        return f"SampleBuffer({self._samples.size} samples)"


def ensure_samples(buffer, what: str = "sample buffer") -> np.ndarray:
    """Return the buffer's array, or raise EmptyBufferError if there is none."""
    if buffer is None or not buffer:
        raise EmptyBufferError(f"{what} is empty")
    return buffer.samples
