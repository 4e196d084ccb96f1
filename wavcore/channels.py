# wavcore/channels.py
import logging
from dataclasses import replace

from wavcore.buffer import SampleBuffer, ensure_samples
from wavcore.errors import FormatError, InvalidChannelError
from wavcore.header import HEADER_SIZE, Header

log = logging.getLogger(__name__)

# Speaker position of each channel, per channel count.
CHANNEL_LAYOUTS = {
    1: ("mono",),
    2: ("left", "right"),
    3: ("left", "right", "center"),
    4: ("front left", "front right", "rear left", "rear right"),
    5: ("left", "center", "right", "left surround", "right surround"),
    6: ("center left", "left", "center", "center right", "right", "surround"),
}


def channel_name(nb_channels: int, channel: int) -> str:
    layout = CHANNEL_LAYOUTS.get(nb_channels)
    if layout is None or not 0 <= channel < len(layout):
        raise InvalidChannelError(f"no channel {channel} in a {nb_channels}-channel layout")
    return layout[channel]


def _mono_header(src: Header, count: int) -> Header:
    width = src.bits_per_sample // 8
    data_size = count * width
    return replace(
        src,
        nb_channels=1,
        byte_per_chunk=width,
        byte_per_sec=src.sample_rate * width,
        data_size=data_size,
        file_size=data_size + HEADER_SIZE - 8,
    )


def extract_channel(src_header: Header, src_buffer: SampleBuffer,
                    channel: int, max_count: int = -1) -> tuple[Header, SampleBuffer]:
    """
    Deinterleave one channel into a new mono (header, buffer) pair.

    At most ``max_count`` frames are copied; a negative value, or one larger
    than the frames available, takes every frame. 0 gives an empty buffer.
    The source pair is left untouched.
    """
    src = ensure_samples(src_buffer, "source sample buffer")
    nch = src_header.nb_channels
    if not 0 <= channel < nch:
        raise InvalidChannelError(f"channel {channel} out of range for {nch}-channel audio")
    if src_header.byte_per_chunk == 0:
        raise FormatError("source header has a zero block align")

    available = src_header.data_size // src_header.byte_per_chunk
    count = available if (max_count < 0 or max_count > available) else max_count
    if count * nch > src.size:
        raise FormatError(f"header describes {available} frames but buffer holds only {src.size // nch}")

    dst_header = _mono_header(src_header, count)
    # strided gather: frame i of the channel sits at i * nch + channel
    dst_buffer = SampleBuffer(src[channel: count * nch: nch])
    log.debug("extracted channel %d/%d: %d of %d frames", channel, nch, count, available)
    return dst_header, dst_buffer


def split_channels(header: Header, buffer: SampleBuffer) -> list[tuple[Header, SampleBuffer]]:
    """Every channel as its own mono pair, in channel order."""
    return [extract_channel(header, buffer, ch) for ch in range(header.nb_channels)]
