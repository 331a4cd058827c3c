"""
Error types raised by Photo Adjust.

Every error derives from AdjustmentError and from the builtin exception
used for the same situation elsewhere in the code base, so callers may
catch either.

Classes:
    AdjustmentError: Base class for all session-level failures
    DecodeError: Input bytes are not a supported raster image
    ValidationError: A parameter is outside its recognized range
    NoImageError: An operation needs a loaded image
    NoResultError: Export was requested before any result exists
    EncodeError: Output bytes could not be produced
"""


class AdjustmentError(Exception):
    """Base class for recoverable adjustment session errors."""


class DecodeError(AdjustmentError, OSError):
    """Raised when uploaded bytes cannot be decoded into a pixel buffer."""


class ValidationError(AdjustmentError, ValueError):
    """Raised when an adjustment parameter is rejected."""


class NoImageError(AdjustmentError, RuntimeError):
    """Raised when apply/reset is attempted with no image loaded."""


class NoResultError(AdjustmentError, RuntimeError):
    """Raised when export is attempted with no result buffer."""


class EncodeError(AdjustmentError, OSError):
    """Raised when a pixel buffer cannot be encoded for export."""
