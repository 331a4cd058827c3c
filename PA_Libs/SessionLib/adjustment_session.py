"""
Adjustment session state and policy.

An AdjustmentSession owns one loaded image, the in-progress adjustment
parameters, and the most recently applied result. Every apply re-derives
its result from the pristine original, so results never depend on earlier
applies.

Classes:
    AdjustmentSession: Load, adjust, reset and export a single image
"""

from pathlib import Path
from typing import Any, Optional
import asyncio
import logging
import threading

from PA_Libs.errors import NoImageError, NoResultError
from PA_Libs.ImageEditingLib.effect_registry import ColorEffectRegistry, get_default_registry
from PA_Libs.ImageEditingLib.filter_chain import apply_adjustments
from PA_Libs.ImageEditingLib.image_models import AdjustmentParameters, PixelBuffer
from PA_Libs.SessionLib import image_io

logger = logging.getLogger(__name__)


class AdjustmentSession:
    """
    Holds one image and its adjustment state.

    Buffers handed out by this class are copies; the session's own buffers
    can only be changed through its methods.

    Example:
        >>> session = AdjustmentSession()
        >>> session.load_image(Path("photo.jpg").read_bytes())
        >>> session.set_parameter("brightness", 20)
        >>> session.set_parameter("color_effect", "Sepia")
        >>> session.apply()
        >>> png_bytes = session.export()
    """

    def __init__(self, registry: Optional[ColorEffectRegistry] = None) -> None:
        self._registry = registry if registry is not None else get_default_registry()
        self._lock = threading.Lock()

        self._original: Optional[PixelBuffer] = None
        self._result: Optional[PixelBuffer] = None
        self._parameters = AdjustmentParameters()
        self._last_applied = AdjustmentParameters()
        self._dirty = False

    # ------------------------------------------------------------------
    # State accessors
    # ------------------------------------------------------------------

    @property
    def effect_registry(self) -> ColorEffectRegistry:
        return self._registry

    @property
    def has_image(self) -> bool:
        return self._original is not None

    @property
    def is_dirty(self) -> bool:
        """True once an apply changed the settings since the last load or reset."""
        return self._dirty

    @property
    def can_export(self) -> bool:
        """Whether the Download action should be offered."""
        return self.has_image and self._result is not None and self._dirty

    @property
    def parameters(self) -> AdjustmentParameters:
        """The in-progress (not necessarily applied) parameters."""
        return self._parameters

    @property
    def last_applied_parameters(self) -> AdjustmentParameters:
        return self._last_applied

    @property
    def original_buffer(self) -> Optional[PixelBuffer]:
        return self._original.copy() if self._original is not None else None

    @property
    def last_result_buffer(self) -> Optional[PixelBuffer]:
        return self._result.copy() if self._result is not None else None

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def load_image(self, raw_bytes: bytes) -> PixelBuffer:
        """
        Decode raw file bytes and make them the session's image.

        Parameters return to their defaults and the adjusted flag clears.

        Args:
            raw_bytes: Complete contents of an image file

        Returns:
            Copy of the decoded original buffer

        Raises:
            DecodeError: If the bytes are not a supported image; the
                         previously loaded image is kept
        """
        buffer = image_io.decode_image(raw_bytes)
        return self._commit_image(buffer)

    def load_image_file(self, file_path: Path) -> PixelBuffer:
        """
        Read an image file from disk and load it.

        Raises:
            FileNotFoundError: If the file does not exist
            DecodeError: If the file is not a supported image
        """
        return self.load_image(image_io.read_image_file(Path(file_path)))

    async def load_image_async(self, raw_bytes: bytes) -> PixelBuffer:
        """
        Decode in a worker thread, then load.

        Session state is only updated after decoding finishes, so
        cancelling the await leaves the session untouched.
        """
        loop = asyncio.get_running_loop()
        buffer = await loop.run_in_executor(None, image_io.decode_image, raw_bytes)
        return self._commit_image(buffer)

    def _commit_image(self, buffer: PixelBuffer) -> PixelBuffer:
        with self._lock:
            self._original = buffer
            self._result = buffer.copy()
            self._parameters = AdjustmentParameters()
            self._last_applied = AdjustmentParameters()
            self._dirty = False
        logger.debug(f"Loaded {buffer.width}x{buffer.height} image into session")
        return buffer.copy()

    # ------------------------------------------------------------------
    # Parameters
    # ------------------------------------------------------------------

    def set_parameter(self, field_name: str, value: Any) -> AdjustmentParameters:
        """
        Update one field of the in-progress parameters.

        Args:
            field_name: 'brightness', 'contrast' or 'color_effect'
            value: New value; effect display labels such as
                   "Black and White" are accepted

        Returns:
            The updated in-progress parameters

        Raises:
            ValidationError: If the field is unknown or the value is out of
                             range; the parameters are left unchanged
        """
        updated = self._parameters.with_field(field_name, value)
        self._parameters = updated
        logger.debug(f"Set {field_name} = {getattr(updated, field_name)!r}")
        return updated

    def set_parameters(self, parameters: AdjustmentParameters) -> AdjustmentParameters:
        """
        Replace all in-progress parameters at once.

        Raises:
            ValidationError: If any field is rejected
        """
        self._parameters = parameters.validate()
        return self._parameters

    # ------------------------------------------------------------------
    # Apply / reset
    # ------------------------------------------------------------------

    def apply(self) -> PixelBuffer:
        """
        Run the filter chain for the current parameters over the original.

        Returns:
            Copy of the new result buffer

        Raises:
            NoImageError: If no image is loaded
        """
        with self._lock:
            if self._original is None:
                raise NoImageError("No image loaded")

            snapshot = self._parameters
            result = apply_adjustments(self._original, snapshot, self._registry)

            self._result = result
            if snapshot != self._last_applied:
                self._dirty = True
                self._last_applied = snapshot
                logger.info(f"Applied adjustments {snapshot.to_dict()}")
            else:
                logger.debug("Re-applied unchanged adjustments")

            return result.copy()

    def reset(self) -> PixelBuffer:
        """
        Restore default parameters and the original image.

        Returns:
            Copy of the restored result buffer

        Raises:
            NoImageError: If no image is loaded
        """
        with self._lock:
            if self._original is None:
                raise NoImageError("No image loaded")

            self._parameters = AdjustmentParameters()
            self._last_applied = AdjustmentParameters()
            self._result = self._original.copy()
            self._dirty = False
            logger.info("Reset adjustments")
            return self._result.copy()

    # ------------------------------------------------------------------
    # Export
    # ------------------------------------------------------------------

    def _result_for_export(self) -> PixelBuffer:
        with self._lock:
            if self._result is None:
                raise NoResultError("Nothing to export: no image has been loaded and adjusted")
            return self._result.copy()

    def export(self) -> bytes:
        """
        Encode the current result as PNG bytes.

        Raises:
            NoResultError: If there is no result buffer
            EncodeError: If encoding fails; session state is kept
        """
        return image_io.encode_png(self._result_for_export())

    async def export_async(self) -> bytes:
        """Encode the current result in a worker thread."""
        buffer = self._result_for_export()
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, image_io.encode_png, buffer)

    def save_export(self, output_dir: Path) -> Path:
        """
        Export and write the result as adjusted-image.png in output_dir.

        Raises:
            NoResultError: If there is no result buffer
            OSError: If output_dir is missing or not a directory
        """
        return image_io.save_export(self.export(), Path(output_dir))
