"""
Filter Chain construction and execution.

A filter chain is always three stages in fixed order: brightness, contrast,
then the color effect. Contrast is computed around mid-gray, so brightness
is folded in first; the color effect remaps channels last.

Every stage processes the whole buffer, including zero-amount stages.
"""

from typing import List, Optional
import logging

from PA_Libs.ImageEditingLib.channel_filters import brightness_filter, contrast_filter
from PA_Libs.ImageEditingLib.effect_registry import ColorEffectRegistry, get_default_registry
from PA_Libs.ImageEditingLib.image_models import AdjustmentParameters, ChannelFilter, PixelBuffer

logger = logging.getLogger(__name__)


def build_filter_chain(
    parameters: AdjustmentParameters,
    registry: Optional[ColorEffectRegistry] = None,
) -> List[ChannelFilter]:
    """
    Build the ordered stages for a parameter snapshot.

    Args:
        parameters: Adjustment settings to capture
        registry: Color effect registry (default: global registry)

    Returns:
        [brightness, contrast, color_effect] filters

    Raises:
        ValueError: If contrast is outside [-100, 100]
    """
    effects = registry if registry is not None else get_default_registry()

    return [
        brightness_filter(parameters.brightness),
        contrast_filter(parameters.contrast),
        effects.create_filter(parameters.color_effect),
    ]


def run_filter_chain(buffer: PixelBuffer, chain: List[ChannelFilter]) -> PixelBuffer:
    """
    Apply each stage in order to the same buffer.

    Args:
        buffer: Buffer to transform in place
        chain: Stages from build_filter_chain()

    Returns:
        The transformed buffer
    """
    for stage in chain:
        buffer = stage(buffer)
    logger.debug(
        f"Ran filter chain [{', '.join(getattr(s, 'filter_name', repr(s)) for s in chain)}] "
        f"over {buffer.width}x{buffer.height} buffer"
    )
    return buffer


def apply_adjustments(
    source: PixelBuffer,
    parameters: AdjustmentParameters,
    registry: Optional[ColorEffectRegistry] = None,
) -> PixelBuffer:
    """
    Run a fresh chain for parameters over a copy of source.

    The source buffer is never modified.
    """
    chain = build_filter_chain(parameters, registry)
    return run_filter_chain(source.copy(), chain)
