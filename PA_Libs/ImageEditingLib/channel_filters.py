"""
Per-pixel channel filters.

Each factory returns a ChannelFilter: a callable that takes a PixelBuffer,
rewrites its R, G and B samples in place and returns the same buffer.
Alpha samples are never modified.

Float results are rounded half-to-even and clipped to [0, 255] before they
are stored, which is how an 8-bit clamped array store behaves.

Example:
    >>> buffer = PixelBuffer.from_samples([100, 150, 200, 255])
    >>> brightness_filter(10)(buffer).data.tolist()
    [110, 160, 210, 255]
"""

from typing import Any

import numpy as np

from PA_Libs.constants import (
    CHANNEL_MAX,
    CHANNEL_MIN,
    CONTRAST_FACTOR_BASE,
    CONTRAST_MAX,
    CONTRAST_MIDPOINT,
    CONTRAST_MIN,
    SEPIA_WEIGHTS,
)
from PA_Libs.ImageEditingLib.image_models import ChannelFilter, PixelBuffer


def clamp_channels(values: Any) -> np.ndarray:
    """Round to the nearest integer and clip to the 8-bit channel range."""
    return np.clip(np.rint(values), CHANNEL_MIN, CHANNEL_MAX).astype(np.uint8)


def contrast_factor(amount: float) -> float:
    """
    Derive the contrast multiplier for an amount in [-100, 100].

    Raises:
        ValueError: If amount is outside [-100, 100]
    """
    if not (CONTRAST_MIN <= amount <= CONTRAST_MAX):
        raise ValueError(f"contrast must be {CONTRAST_MIN}..{CONTRAST_MAX}, got {amount}")
    base = CONTRAST_FACTOR_BASE
    return (base * (amount + 255)) / (255 * (base - amount))


def _named(func: ChannelFilter, name: str) -> ChannelFilter:
    func.filter_name = name
    return func


def brightness_filter(amount: int) -> ChannelFilter:
    """
    Add a constant offset to every color sample.

    Args:
        amount: Offset added to R, G and B (typically -100 to 100)

    Returns:
        ChannelFilter applying the offset with clamping
    """
    offset = int(amount)

    def apply(buffer: PixelBuffer) -> PixelBuffer:
        rgb = buffer.rgb()
        rgb[...] = clamp_channels(rgb.astype(np.int16) + offset)
        return buffer

    return _named(apply, f"brightness({offset})")


def contrast_filter(amount: int) -> ChannelFilter:
    """
    Stretch or compress color samples around mid-gray (128).

    Args:
        amount: Contrast amount (-100 to 100); 0 leaves samples unchanged

    Returns:
        ChannelFilter applying factor * (sample - 128) + 128 with clamping

    Raises:
        ValueError: If amount is outside [-100, 100]
    """
    factor = contrast_factor(amount)

    def apply(buffer: PixelBuffer) -> PixelBuffer:
        rgb = buffer.rgb()
        rgb[...] = clamp_channels(factor * (rgb.astype(np.float64) - CONTRAST_MIDPOINT) + CONTRAST_MIDPOINT)
        return buffer

    return _named(apply, f"contrast({amount})")


def sepia_filter() -> ChannelFilter:
    """Weighted channel blend producing a warm brown tone."""

    def apply(buffer: PixelBuffer) -> PixelBuffer:
        rgb = buffer.rgb()
        # All three outputs are computed from the same source read
        source = rgb.astype(np.float64)
        red, green, blue = source[:, 0], source[:, 1], source[:, 2]
        # Summed red, green, blue in that order, as the scalar weighted sum
        blended = np.stack(
            [red * w_red + green * w_green + blue * w_blue for w_red, w_green, w_blue in SEPIA_WEIGHTS],
            axis=1,
        )
        rgb[...] = clamp_channels(blended)
        return buffer

    return _named(apply, "sepia")


def negative_filter() -> ChannelFilter:
    """Invert each color sample (255 - sample)."""

    def apply(buffer: PixelBuffer) -> PixelBuffer:
        rgb = buffer.rgb()
        rgb[...] = CHANNEL_MAX - rgb
        return buffer

    return _named(apply, "negative")


def grayscale_filter() -> ChannelFilter:
    """Replace R, G and B with their unweighted mean."""

    def apply(buffer: PixelBuffer) -> PixelBuffer:
        rgb = buffer.rgb()
        average = clamp_channels(rgb.sum(axis=1, dtype=np.int32) / 3.0)
        rgb[...] = average[:, np.newaxis]
        return buffer

    return _named(apply, "grayscale")


def identity_filter() -> ChannelFilter:
    """Leave the buffer unchanged."""

    def apply(buffer: PixelBuffer) -> PixelBuffer:
        return buffer

    return _named(apply, "identity")
