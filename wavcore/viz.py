# wavcore/viz.py
import numpy as np
from PIL import Image, ImageDraw

from wavcore.buffer import SampleBuffer, ensure_samples
from wavcore.channels import channel_name
from wavcore.duration import duration_exact
from wavcore.header import Header

FULL_SCALE = 32768
MIN_STRIP_HEIGHT = 24
MIN_WIDTH = 32
FOOTER_HEIGHT = 28

STRIP_COLORS = [
    (0, 200, 255),
    (0, 220, 130),
    (255, 160, 0),
    (220, 90, 220),
    (240, 230, 80),
    (255, 90, 90),
]


def peak_envelope(a: np.ndarray, columns: int) -> tuple[np.ndarray, np.ndarray]:
    """
    Min and max sample of each of ``columns`` equal slices of ``a``.
    Columns past the end of a short signal are empty and come back as 0.
    """
    lo = np.zeros(columns, dtype=np.int32)
    hi = np.zeros(columns, dtype=np.int32)
    if a.size == 0:
        return lo, hi
    edges = np.linspace(0, a.size, columns + 1).astype(np.int64)
    a32 = a.astype(np.int32)
    for i in range(columns):
        seg = a32[edges[i]:edges[i + 1]]
        if seg.size:
            lo[i] = seg.min()
            hi[i] = seg.max()
    return lo, hi


def _draw_strip(draw: ImageDraw.ImageDraw, a: np.ndarray, box, color) -> None:
    x0, y0, x1, y1 = box
    draw.rectangle([x0, y0, x1, y1], fill=(18, 18, 18), outline=(70, 70, 70))
    mid = (y0 + y1) // 2
    half = max(1, (y1 - y0) // 2 - 2)
    draw.line([x0, mid, x1, mid], fill=(65, 65, 65))

    lo, hi = peak_envelope(a, x1 - x0 - 1)
    # scaled to int16 full scale, not to the strip peak
    for i, (vmin, vmax) in enumerate(zip(lo, hi)):
        if vmin == 0 and vmax == 0:
            continue
        x = x0 + 1 + i
        top = mid - int(vmax * half / FULL_SCALE)
        bottom = mid - int(vmin * half / FULL_SCALE)
        draw.line([x, top, x, bottom], fill=color)


def render_channels_panel(header: Header, buffer: SampleBuffer,
                          width: int = 900, height: int | None = None,
                          strip_height: int = 120) -> Image.Image:
    """
    One peak-envelope strip per channel, top to bottom in channel order,
    labelled with the speaker position. Footer: rate, frames, duration.

    Raises ValueError when the requested size leaves a strip shorter than
    MIN_STRIP_HEIGHT or a panel narrower than MIN_WIDTH.
    """
    ensure_samples(buffer)
    nch = header.nb_channels
    frames = buffer.frames(nch)
    if height is None:
        height = strip_height * nch + FOOTER_HEIGHT
    row_h = (height - FOOTER_HEIGHT) // nch
    if row_h < MIN_STRIP_HEIGHT or width < MIN_WIDTH:
        raise ValueError(
            f"panel {width}x{height} too small for {nch} channel strip(s) "
            f"(need width >= {MIN_WIDTH}, strip height >= {MIN_STRIP_HEIGHT})")

    img = Image.new("RGB", (width, height), (12, 12, 12))
    draw = ImageDraw.Draw(img)
    for ch in range(nch):
        y = ch * row_h
        color = STRIP_COLORS[ch % len(STRIP_COLORS)]
        _draw_strip(draw, frames[:, ch], (4, y + 2, width - 5, y + row_h - 2), color)
        draw.text((10, y + 5), f"{ch}: {channel_name(nch, ch)}", fill=(230, 230, 230))

    info = f"{header.sample_rate} Hz | {frames.shape[0]:,} frames"
    if header.byte_per_sec:
        info += f" | {duration_exact(header):.2f} s"
    draw.text((10, height - 20), info, fill=(230, 230, 230))
    return img
