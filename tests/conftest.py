"""
Pytest configuration and shared fixtures for Photo Adjust tests.

This module provides shared test fixtures and configuration
used across multiple test modules.
"""

import numpy as np
import pytest

from PA_Libs.ImageEditingLib.image_models import PixelBuffer


@pytest.fixture
def sample_rgba_colors():
    """
    Provide a list of sample RGBA color tuples for testing.

    Returns:
        List of (R, G, B, A) tuples with common test colors
    """
    return [
        (255, 0, 0, 255),    # Red
        (0, 255, 0, 255),    # Green
        (0, 0, 255, 255),    # Blue
        (255, 255, 255, 255),  # White
        (0, 0, 0, 255),      # Black
        (128, 128, 128, 128),  # Half-transparent gray
    ]


@pytest.fixture
def sample_buffer(sample_rgba_colors):
    """A 3x2 PixelBuffer built from sample_rgba_colors."""
    samples = [channel for color in sample_rgba_colors for channel in color]
    return PixelBuffer(3, 2, np.array(samples, dtype=np.uint8))


@pytest.fixture
def random_buffer():
    """A 64x32 PixelBuffer of seeded random samples, alpha included."""
    rng = np.random.default_rng(1234)
    return PixelBuffer(64, 32, rng.integers(0, 256, size=64 * 32 * 4, dtype=np.uint8))
