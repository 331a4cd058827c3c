"""
PA_Libs - Photo Adjust Library Modules

This package contains core functionality for the Photo Adjust project,
organized into specialized sub-packages:

- ImageEditingLib: Pixel buffers, channel filters, effect registry and filter chains
- SessionLib: Adjustment session state, image decoding and export
"""

__version__ = "0.1.0"
