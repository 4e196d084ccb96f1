import numpy as np
import pytest

from wavcore.buffer import SampleBuffer
from wavcore.header import Header


def make_pair(nb_channels: int, n_frames: int, sample_rate: int = 8000):
    """Interleaved buffer where channel c of frame i holds i * 10 + c (negated on odd frames)."""
    i = np.arange(n_frames, dtype=np.int32)[:, None]
    c = np.arange(nb_channels, dtype=np.int32)[None, :]
    sign = np.where(i % 2, -1, 1)
    samples = (sign * (i * 10 + c)).astype(np.int16).reshape(-1)
    return Header.pcm16(nb_channels, sample_rate, n_frames), SampleBuffer(samples)


@pytest.fixture
def stereo():
    return make_pair(2, 100)


@pytest.fixture
def surround():
    return make_pair(6, 50, sample_rate=48000)


@pytest.fixture
def stereo_file(tmp_path, stereo):
    from wavio.audio_io import encode_wav
    header, buffer = stereo
    path = tmp_path / "stereo.wav"
    path.write_bytes(encode_wav(header, buffer))
    return path


@pytest.fixture
def pair_factory():
    return make_pair
