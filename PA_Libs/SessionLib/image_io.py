"""
Image decoding and encoding for Photo Adjust.

Converts uploaded file bytes into PixelBuffers and PixelBuffers back into
PNG bytes. Filter math never touches Pillow; only this module does.

Functions:
    decode_image: Decode raw file bytes into a PixelBuffer
    read_image_file: Read and decode an image file from disk
    encode_png: Encode a PixelBuffer as PNG bytes
    save_export: Write export bytes to the standard download filename
    is_supported_format: Check a path's extension against supported formats
"""

from io import BytesIO
from pathlib import Path
from typing import List
import logging

from PIL import Image, UnidentifiedImageError

from PA_Libs.constants import (
    EXPORT_FILE_NAME,
    EXPORT_FORMAT,
    MAX_IMAGE_PIXELS,
    SUPPORTED_IMAGE_FORMATS,
)
from PA_Libs.errors import DecodeError, EncodeError
from PA_Libs.ImageEditingLib.image_models import PixelBuffer

logger = logging.getLogger(__name__)


def get_supported_image_formats() -> List[str]:
    """Sorted list of file extensions offered by the file dialog."""
    return sorted(SUPPORTED_IMAGE_FORMATS)


def is_supported_format(file_path: Path) -> bool:
    """True if the file extension is a supported raster format."""
    return Path(file_path).suffix.lower() in SUPPORTED_IMAGE_FORMATS


def decode_image(raw_bytes: bytes, max_pixels: int = MAX_IMAGE_PIXELS) -> PixelBuffer:
    """
    Decode raw file bytes into an RGBA PixelBuffer.

    Animated formats contribute their first frame only.

    Args:
        raw_bytes: Complete contents of an image file
        max_pixels: Largest accepted width * height

    Returns:
        PixelBuffer with the decoded samples

    Raises:
        DecodeError: If the bytes are empty, not a supported raster format,
                     or the image exceeds max_pixels
    """
    if not raw_bytes:
        raise DecodeError("No image data provided")

    try:
        with Image.open(BytesIO(raw_bytes)) as img:
            # Header only; pixels are decoded by load()
            width, height = img.size
            if width * height > max_pixels:
                raise DecodeError(
                    f"Image is {width}x{height}, larger than the {max_pixels} pixel limit"
                )
            img.load()
            buffer = PixelBuffer.from_image(img)
    except DecodeError:
        raise
    except (UnidentifiedImageError, Image.DecompressionBombError) as e:
        raise DecodeError(f"Unsupported or oversized image data: {e}") from e
    except (OSError, ValueError, SyntaxError, EOFError) as e:
        raise DecodeError(f"Failed to decode image: {e}") from e

    logger.info(f"Decoded {buffer.width}x{buffer.height} image ({len(raw_bytes)} bytes)")
    return buffer


def read_image_file(file_path: Path) -> bytes:
    """
    Read an image file from disk.

    Raises:
        FileNotFoundError: If the file does not exist
        DecodeError: If the path is not a file or has an unsupported extension
    """
    file_path = Path(file_path)

    if not file_path.exists():
        raise FileNotFoundError(f"Image file not found: {file_path}")

    if not file_path.is_file():
        raise DecodeError(f"Path is not a file: {file_path}")

    if not is_supported_format(file_path):
        raise DecodeError(f"Unsupported image format: {file_path.suffix}")

    return file_path.read_bytes()


def encode_png(buffer: PixelBuffer) -> bytes:
    """
    Encode a PixelBuffer as PNG bytes.

    Raises:
        EncodeError: If the buffer cannot be encoded
    """
    if buffer.width == 0 or buffer.height == 0:
        raise EncodeError("Cannot encode an empty image")

    output = BytesIO()
    try:
        buffer.to_image().save(output, format=EXPORT_FORMAT)
    except (OSError, ValueError) as e:
        raise EncodeError(f"Failed to encode image as {EXPORT_FORMAT}: {e}") from e

    return output.getvalue()


def save_export(data: bytes, output_dir: Path) -> Path:
    """
    Write encoded export bytes as adjusted-image.png.

    Args:
        data: PNG bytes from encode_png()
        output_dir: Directory path where the file should be saved

    Returns:
        Path of the written file

    Raises:
        OSError: If directory cannot be accessed or the file cannot be written
    """
    output_dir = Path(output_dir)

    if not output_dir.exists():
        raise OSError(f"Output directory does not exist: {output_dir}")

    if not output_dir.is_dir():
        raise OSError(f"Output path is not a directory: {output_dir}")

    save_path = output_dir / EXPORT_FILE_NAME
    save_path.write_bytes(data)
    logger.info(f"Saved export to {save_path}")
    return save_path
