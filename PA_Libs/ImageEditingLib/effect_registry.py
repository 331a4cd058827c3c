"""
Color Effect Registry.

This module provides a centralized registry for color-effect filter
factories. It enables registration, lookup, and labelling of the effects
offered by the effect selector.

Classes:
    ColorEffectRegistry: Registry for color-effect factories

Functions:
    get_default_registry: Get the global default registry (singleton)
    register_default_effects: Register all built-in color effects
"""

from typing import Any, Callable, Dict, List, Optional
import logging

from PA_Libs.constants import (
    COLOR_EFFECT_GRAYSCALE,
    COLOR_EFFECT_LABELS,
    COLOR_EFFECT_NEGATIVE,
    COLOR_EFFECT_NONE,
    COLOR_EFFECT_SEPIA,
)
from PA_Libs.ImageEditingLib.image_models import ChannelFilter

logger = logging.getLogger(__name__)

# Type alias for effect factory function
EffectFactory = Callable[[], ChannelFilter]


class ColorEffectRegistry:
    """
    Registry for color-effect filter factories.

    Example:
        >>> registry = ColorEffectRegistry()
        >>> registry.register("sepia", sepia_filter, label="Sepia")
        >>> effect = registry.create_filter("sepia")
        >>> effect(buffer)
    """

    def __init__(self):
        """Initialize an empty registry."""
        self._factories: Dict[str, EffectFactory] = {}
        self._labels: Dict[str, str] = {}

    def register(self, effect_name: str, factory: EffectFactory, label: str = "") -> None:
        """
        Register a color effect.

        Args:
            effect_name: Unique identifier for the effect (e.g., "sepia")
            factory: Callable returning a ChannelFilter
            label: Human-readable name shown by the effect selector

        Raises:
            ValueError: If effect_name is empty or factory is not callable
            RuntimeError: If effect_name is already registered
        """
        effect_name = str(effect_name).strip().lower()

        if not effect_name:
            raise ValueError("effect_name cannot be empty")

        if not callable(factory):
            raise ValueError(f"factory must be callable, got {type(factory)}")

        if effect_name in self._factories:
            raise RuntimeError(f"Color effect '{effect_name}' is already registered")

        self._factories[effect_name] = factory
        self._labels[effect_name] = str(label) if label else effect_name.title()

        logger.debug(f"Registered color effect: {effect_name}")

    def has_effect(self, effect_name: Any) -> bool:
        return str(effect_name).strip().lower() in self._factories

    def get_factory(self, effect_name: str) -> EffectFactory:
        """
        Get the factory for an effect.

        Raises:
            KeyError: If effect_name is not registered
        """
        effect_name = str(effect_name).strip().lower()

        if effect_name not in self._factories:
            available = ", ".join(self.list_effects())
            raise KeyError(
                f"No color effect registered as '{effect_name}'. "
                f"Available effects: {available}"
            )

        return self._factories[effect_name]

    def create_filter(self, effect_name: Optional[str]) -> ChannelFilter:
        """
        Build the ChannelFilter for an effect name.

        Unknown names fall back to the 'none' effect so that a stale
        selector value never aborts an apply.

        Raises:
            KeyError: If neither effect_name nor the 'none' effect is registered
        """
        if effect_name is not None and self.has_effect(effect_name):
            return self.get_factory(effect_name)()

        if effect_name not in (None, "", COLOR_EFFECT_NONE):
            logger.warning(f"Unknown color effect '{effect_name}', using '{COLOR_EFFECT_NONE}'")

        return self.get_factory(COLOR_EFFECT_NONE)()

    def list_effects(self) -> List[str]:
        """Sorted list of registered effect names."""
        return sorted(self._factories.keys())

    def get_label(self, effect_name: str) -> str:
        """
        Get the display label for an effect.

        Raises:
            KeyError: If effect_name is not registered
        """
        effect_name = str(effect_name).strip().lower()

        if effect_name not in self._labels:
            raise KeyError(f"No label for color effect: {effect_name}")

        return self._labels[effect_name]

    def selectable_effects(self) -> Dict[str, str]:
        """Map effect name -> label for every effect except 'none', in registration order."""
        return {
            name: label
            for name, label in self._labels.items()
            if name != COLOR_EFFECT_NONE
        }


# Global singleton registry
_default_registry: Optional[ColorEffectRegistry] = None


def get_default_registry() -> ColorEffectRegistry:
    """
    Get the global default registry (singleton).

    Creates the registry on first call and registers default effects.
    """
    global _default_registry

    if _default_registry is None:
        _default_registry = ColorEffectRegistry()
        register_default_effects(_default_registry)

    return _default_registry


def register_default_effects(registry: ColorEffectRegistry) -> None:
    """
    Register the built-in effects: none, sepia, negative and grayscale.

    Args:
        registry: The registry to register effects with
    """
    from PA_Libs.ImageEditingLib.channel_filters import (
        grayscale_filter,
        identity_filter,
        negative_filter,
        sepia_filter,
    )

    registry.register(COLOR_EFFECT_NONE, identity_filter, label="None")
    registry.register(COLOR_EFFECT_SEPIA, sepia_filter, label=COLOR_EFFECT_LABELS[COLOR_EFFECT_SEPIA])
    registry.register(COLOR_EFFECT_NEGATIVE, negative_filter, label=COLOR_EFFECT_LABELS[COLOR_EFFECT_NEGATIVE])
    registry.register(COLOR_EFFECT_GRAYSCALE, grayscale_filter, label=COLOR_EFFECT_LABELS[COLOR_EFFECT_GRAYSCALE])

    logger.info("Registered default color effects")
