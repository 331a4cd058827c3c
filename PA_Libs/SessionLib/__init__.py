"""
SessionLib - Adjustment session management

This module handles the lifecycle of a single adjusted image:
decoding uploads, applying and resetting adjustments, and exporting PNGs.
"""

from PA_Libs.SessionLib.image_io import (
    decode_image,
    encode_png,
    read_image_file,
    save_export,
    is_supported_format,
    get_supported_image_formats,
)
from PA_Libs.SessionLib.adjustment_session import AdjustmentSession

__all__ = [
    "decode_image",
    "encode_png",
    "read_image_file",
    "save_export",
    "is_supported_format",
    "get_supported_image_formats",
    "AdjustmentSession",
]
