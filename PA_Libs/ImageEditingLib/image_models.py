"""
Image editing data models for Photo Adjust.

This module defines core data structures used throughout the adjustment
pipeline.

Classes:
    PixelBuffer: Flat RGBA sample buffer with its image dimensions
    AdjustmentParameters: Immutable brightness/contrast/effect snapshot

Type Aliases:
    ChannelFilter: A callable that transforms a PixelBuffer in place
"""

from dataclasses import asdict, dataclass, field, replace
from typing import Any, Callable, Dict

import numpy as np
from PIL import Image

from PA_Libs.constants import (
    BRIGHTNESS_MAX,
    BRIGHTNESS_MIN,
    CHANNELS_PER_PIXEL,
    COLOR_EFFECT_ALIASES,
    COLOR_EFFECT_GRAYSCALE,
    COLOR_EFFECT_NEGATIVE,
    COLOR_EFFECT_NONE,
    COLOR_EFFECT_SEPIA,
    CONTRAST_MAX,
    CONTRAST_MIN,
    DEFAULT_BRIGHTNESS,
    DEFAULT_COLOR_EFFECT,
    DEFAULT_CONTRAST,
    FIELD_BRIGHTNESS,
    FIELD_CONTRAST,
    WORKING_IMAGE_MODE,
)
from PA_Libs.errors import ValidationError

RECOGNIZED_COLOR_EFFECTS = (
    COLOR_EFFECT_NONE,
    COLOR_EFFECT_SEPIA,
    COLOR_EFFECT_NEGATIVE,
    COLOR_EFFECT_GRAYSCALE,
)


@dataclass
class PixelBuffer:
    """RGBA pixel data stored as a flat array of 8-bit samples.

    Attributes:
        width: Image width in pixels
        height: Image height in pixels
        data: 1-D uint8 array of length width * height * 4 (R, G, B, A order)
    """

    width: int
    height: int
    data: np.ndarray = field(repr=False)

    def __post_init__(self):
        """Validate dimensions and coerce data to a flat uint8 array."""
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Dimensions must be >= 0, got {self.width}x{self.height}")

        data = np.asarray(self.data)
        if data.dtype != np.uint8:
            if data.size and (data.min() < 0 or data.max() > 255):
                raise ValueError("Pixel samples must lie in [0, 255]")
            data = data.astype(np.uint8)
        self.data = data.reshape(-1)

        if self.data.size % CHANNELS_PER_PIXEL != 0:
            raise ValueError(
                f"Buffer length must be a multiple of {CHANNELS_PER_PIXEL}, got {self.data.size}"
            )
        expected = self.width * self.height * CHANNELS_PER_PIXEL
        if self.data.size != expected:
            raise ValueError(
                f"Buffer length {self.data.size} does not match {self.width}x{self.height} RGBA"
            )

    def __len__(self) -> int:
        return int(self.data.size)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PixelBuffer):
            return NotImplemented
        return (
            self.width == other.width
            and self.height == other.height
            and np.array_equal(self.data, other.data)
        )

    def copy(self) -> "PixelBuffer":
        """Return an independent copy that shares no memory with this buffer."""
        return PixelBuffer(self.width, self.height, self.data.copy())

    def pixels(self) -> np.ndarray:
        """Return a (pixel_count, 4) view onto the samples."""
        return self.data.reshape(-1, CHANNELS_PER_PIXEL)

    def rgb(self) -> np.ndarray:
        """Return a writable view onto the R, G and B samples of every pixel."""
        return self.pixels()[:, :3]

    def alpha(self) -> np.ndarray:
        """Return a view onto the alpha samples."""
        return self.pixels()[:, 3]

    def to_bytes(self) -> bytes:
        return self.data.tobytes()

    @classmethod
    def from_samples(cls, samples: Any, width: int = 0, height: int = 1) -> "PixelBuffer":
        """
        Build a buffer from a flat sequence of samples.

        With width left at 0 the samples are treated as a single row.
        """
        data = np.asarray(samples)
        if width <= 0:
            width = data.size // CHANNELS_PER_PIXEL
            height = 1 if width else 0
        return cls(width, height, data)

    @classmethod
    def from_image(cls, image: Any) -> "PixelBuffer":
        """
        Build a buffer from a PIL Image.

        Args:
            image: A PIL Image in any mode; converted to RGBA

        Returns:
            PixelBuffer holding a copy of the image samples
        """
        if image.mode != WORKING_IMAGE_MODE:
            image = image.convert(WORKING_IMAGE_MODE)
        width, height = image.size
        data = np.frombuffer(image.tobytes(), dtype=np.uint8).copy()
        return cls(width, height, data)

    def to_image(self) -> Any:
        """Return a new RGBA PIL Image holding a copy of this buffer."""
        return Image.frombytes(WORKING_IMAGE_MODE, (self.width, self.height), self.to_bytes())


ChannelFilter = Callable[[PixelBuffer], PixelBuffer]


def normalize_color_effect(value: Any) -> str:
    """
    Map a selector value or display label to a recognized effect name.

    Args:
        value: Effect name, display label ("Black and White"), or None

    Returns:
        One of RECOGNIZED_COLOR_EFFECTS

    Raises:
        ValidationError: If the value names no known effect
    """
    if value is None:
        return COLOR_EFFECT_NONE
    if not isinstance(value, str):
        raise ValidationError(f"color_effect must be a string, got {type(value).__name__}")

    key = value.strip().lower()
    key = COLOR_EFFECT_ALIASES.get(key, key)
    if key not in RECOGNIZED_COLOR_EFFECTS:
        raise ValidationError(
            f"Unsupported color_effect: {value!r}. "
            f"Expected one of: {', '.join(RECOGNIZED_COLOR_EFFECTS)}"
        )
    return key


def _validate_amount(name: str, value: Any, minimum: int, maximum: int) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
        raise ValidationError(f"{name} must be an integer, got {value!r}")
    if not (minimum <= value <= maximum):
        raise ValidationError(f"{name} must be {minimum}..{maximum}, got {value}")
    return int(value)


@dataclass(frozen=True)
class AdjustmentParameters:
    """Snapshot of the user's adjustment settings.

    Attributes:
        brightness: Additive brightness offset (-100 to 100)
        contrast: Contrast amount (-100 to 100)
        color_effect: 'none', 'sepia', 'negative' or 'grayscale'
    """

    brightness: int = DEFAULT_BRIGHTNESS
    contrast: int = DEFAULT_CONTRAST
    color_effect: str = DEFAULT_COLOR_EFFECT

    def validate(self) -> "AdjustmentParameters":
        """
        Check every field and return a normalized copy.

        Raises:
            ValidationError: If any field is outside its recognized range
        """
        return AdjustmentParameters(
            brightness=_validate_amount(FIELD_BRIGHTNESS, self.brightness, BRIGHTNESS_MIN, BRIGHTNESS_MAX),
            contrast=_validate_amount(FIELD_CONTRAST, self.contrast, CONTRAST_MIN, CONTRAST_MAX),
            color_effect=normalize_color_effect(self.color_effect),
        )

    def with_field(self, field_name: str, value: Any) -> "AdjustmentParameters":
        """
        Return a validated copy with one field replaced.

        Raises:
            ValidationError: If the field is unknown or the value is rejected
        """
        if field_name not in self.__dataclass_fields__:
            raise ValidationError(f"Unknown adjustment field: {field_name!r}")
        return replace(self, **{field_name: value}).validate()

    def is_default(self) -> bool:
        return self == AdjustmentParameters()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "AdjustmentParameters":
        """Create a validated instance from a dictionary, ignoring unknown keys."""
        normalized = {k: v for k, v in data.items() if k in cls.__dataclass_fields__}
        return cls(**normalized).validate()
