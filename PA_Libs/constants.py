"""
Constants and configuration values for Photo Adjust.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Adjustment ranges
BRIGHTNESS_MIN = -100
BRIGHTNESS_MAX = 100
CONTRAST_MIN = -100
CONTRAST_MAX = 100
DEFAULT_BRIGHTNESS = 0
DEFAULT_CONTRAST = 0

# Channel math
CHANNEL_MIN = 0
CHANNEL_MAX = 255
CHANNELS_PER_PIXEL = 4
CONTRAST_MIDPOINT = 128
CONTRAST_FACTOR_BASE = 259

# Sepia weights, one row per output channel (R, G, B)
SEPIA_WEIGHTS = (
    (0.393, 0.769, 0.189),
    (0.349, 0.686, 0.168),
    (0.272, 0.534, 0.131),
)

# Color effect names
COLOR_EFFECT_NONE = "none"
COLOR_EFFECT_SEPIA = "sepia"
COLOR_EFFECT_NEGATIVE = "negative"
COLOR_EFFECT_GRAYSCALE = "grayscale"
DEFAULT_COLOR_EFFECT = COLOR_EFFECT_NONE

# Display labels offered by the effect selector
COLOR_EFFECT_LABELS = {
    COLOR_EFFECT_SEPIA: "Sepia",
    COLOR_EFFECT_NEGATIVE: "Negative",
    COLOR_EFFECT_GRAYSCALE: "Black and White",
}

# Alternate spellings and labels accepted by the effect selector
COLOR_EFFECT_ALIASES = {
    "sephia": COLOR_EFFECT_SEPIA,
    "black and white": COLOR_EFFECT_GRAYSCALE,
    "": COLOR_EFFECT_NONE,
}

# Parameter field names
FIELD_BRIGHTNESS = "brightness"
FIELD_CONTRAST = "contrast"
FIELD_COLOR_EFFECT = "color_effect"

# Export
EXPORT_FILE_NAME = "adjusted-image.png"
EXPORT_FORMAT = "PNG"
WORKING_IMAGE_MODE = "RGBA"

# Decode bounds
MAX_IMAGE_PIXELS = 40_000_000

# Supported file formats
SUPPORTED_IMAGE_FORMATS = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".webp"}
IMAGE_FILE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp)"

# UI constants
DEFAULT_WINDOW_WIDTH = 1200
DEFAULT_WINDOW_HEIGHT = 760
PREVIEW_MIN_SIZE = 520
