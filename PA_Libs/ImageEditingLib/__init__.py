"""
ImageEditingLib - Core image adjustment functionality

This module provides pixel buffer models, per-pixel channel filters,
the color effect registry and filter chain composition for the
Photo Adjust project.
"""

from PA_Libs.ImageEditingLib.image_models import (
    AdjustmentParameters,
    ChannelFilter,
    PixelBuffer,
    normalize_color_effect,
)
from PA_Libs.ImageEditingLib.channel_filters import (
    brightness_filter,
    contrast_filter,
    sepia_filter,
    negative_filter,
    grayscale_filter,
    identity_filter,
)
from PA_Libs.ImageEditingLib.effect_registry import (
    ColorEffectRegistry,
    get_default_registry,
)
from PA_Libs.ImageEditingLib.filter_chain import (
    build_filter_chain,
    run_filter_chain,
    apply_adjustments,
)

__all__ = [
    "AdjustmentParameters",
    "ChannelFilter",
    "PixelBuffer",
    "normalize_color_effect",
    "brightness_filter",
    "contrast_filter",
    "sepia_filter",
    "negative_filter",
    "grayscale_filter",
    "identity_filter",
    "ColorEffectRegistry",
    "get_default_registry",
    "build_filter_chain",
    "run_filter_chain",
    "apply_adjustments",
]
