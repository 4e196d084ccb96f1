# wavcore/errors.py
# Every failure the library can report. Each class also derives from the
# closest builtin so callers catching OSError / ValueError keep working.


class WavError(Exception):
    """Base class for all wav library errors."""


class WavIOError(WavError, OSError):
    """File could not be opened or closed."""


class FormatError(WavError, ValueError):
    """Short or malformed data, or a header breaking one of its invariants."""


class NotWavError(FormatError):
    """RIFF / WAVE magic missing."""


class UnsupportedCodecError(FormatError):
    """Anything other than 16-bit integer PCM."""


class EmptyBufferError(WavError, ValueError):
    """Operation on an absent, released or zero-length sample buffer."""


class InvalidChannelError(WavError, IndexError):
    """Channel index outside the header's declared channel count."""


class AllocationError(WavError, MemoryError):
    """Sample buffer could not be allocated."""


class DivisionByZeroError(WavError, ZeroDivisionError):
    """Header rate field is zero."""


class WriteError(WavError, OSError):
    """Short write, or flush/close failure while writing."""
