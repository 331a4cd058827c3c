"""
Tests for image decoding and encoding.

Tests cover:
- Decoding PNG and JPEG bytes into RGBA buffers
- Rejecting empty, corrupt and oversized input
- PNG encoding
- Reading image files and saving exports
"""

import concurrent.futures
import tempfile
import unittest
from io import BytesIO
from pathlib import Path
from unittest.mock import patch

import numpy as np
from PIL import Image

from PA_Libs.errors import DecodeError, EncodeError
from PA_Libs.ImageEditingLib.image_models import PixelBuffer
from PA_Libs.SessionLib.image_io import (
    decode_image,
    encode_png,
    get_supported_image_formats,
    is_supported_format,
    read_image_file,
    save_export,
)


def image_bytes(image, fmt):
    output = BytesIO()
    image.save(output, format=fmt)
    return output.getvalue()


class TestDecodeImage(unittest.TestCase):
    """Test decode_image."""

    def test_decodes_png_rgba(self):
        image = Image.new("RGBA", (3, 2), color=(1, 2, 3, 4))

        buffer = decode_image(image_bytes(image, "PNG"))

        self.assertEqual((buffer.width, buffer.height), (3, 2))
        self.assertEqual(buffer.data[:4].tolist(), [1, 2, 3, 4])

    def test_decodes_rgb_with_opaque_alpha(self):
        image = Image.new("RGB", (2, 2), color=(200, 100, 50))

        buffer = decode_image(image_bytes(image, "BMP"))

        self.assertEqual(buffer.pixels().tolist(), [[200, 100, 50, 255]] * 4)

    def test_decodes_jpeg(self):
        image = Image.new("RGB", (8, 8), color=(90, 90, 90))

        buffer = decode_image(image_bytes(image, "JPEG"))

        self.assertEqual(len(buffer), 8 * 8 * 4)
        self.assertTrue(np.all(buffer.alpha() == 255))

    def test_empty_bytes_raise_decode_error(self):
        with self.assertRaises(DecodeError):
            decode_image(b"")

    def test_garbage_raises_decode_error(self):
        with self.assertRaises(DecodeError):
            decode_image(b"definitely not an image")

    def test_truncated_png_raises_decode_error(self):
        noise = np.random.default_rng(5).integers(0, 256, size=(64, 64, 3), dtype=np.uint8)
        data = image_bytes(Image.fromarray(noise, "RGB"), "PNG")

        with self.assertRaises(DecodeError):
            decode_image(data[: len(data) // 2])

    def test_oversized_image_raises_decode_error(self):
        data = image_bytes(Image.new("RGB", (10, 10)), "PNG")

        with self.assertRaises(DecodeError):
            decode_image(data, max_pixels=99)

    def test_decompression_bomb_raises_decode_error(self):
        data = image_bytes(Image.new("RGB", (10, 10)), "PNG")

        with patch.object(Image, "MAX_IMAGE_PIXELS", 10):
            with self.assertRaises(DecodeError):
                decode_image(data)

    def test_concurrent_decodes_apply_their_own_limits(self):
        """Decodes running in worker threads do not affect each other."""
        data = image_bytes(Image.new("RGB", (10, 10), color=(1, 2, 3)), "PNG")
        limits = [99, 100] * 16

        def outcome(limit):
            try:
                return decode_image(data, max_pixels=limit).width
            except DecodeError:
                return None

        with concurrent.futures.ThreadPoolExecutor(max_workers=8) as executor:
            outcomes = list(executor.map(outcome, limits))

        self.assertEqual(outcomes, [None, 10] * 16)

    def test_decode_error_is_os_error(self):
        with self.assertRaises(OSError):
            decode_image(b"\x00\x01")


class TestEncodePng(unittest.TestCase):
    """Test encode_png."""

    def test_round_trip_through_png(self):
        rng = np.random.default_rng(3)
        buffer = PixelBuffer(5, 4, rng.integers(0, 256, size=5 * 4 * 4, dtype=np.uint8))

        data = encode_png(buffer)

        self.assertTrue(data.startswith(b"\x89PNG"))
        self.assertEqual(decode_image(data), buffer)

    def test_empty_buffer_raises_encode_error(self):
        with self.assertRaises(EncodeError):
            encode_png(PixelBuffer(0, 0, np.zeros(0, dtype=np.uint8)))


class TestFiles(unittest.TestCase):
    """Test reading image files and saving exports."""

    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.temp_path = Path(self.temp_dir.name)

    def tearDown(self):
        self.temp_dir.cleanup()

    def test_supported_formats(self):
        self.assertIn(".png", get_supported_image_formats())
        self.assertTrue(is_supported_format(Path("photo.JPG")))
        self.assertFalse(is_supported_format(Path("clip.mp4")))

    def test_read_image_file(self):
        path = self.temp_path / "input.png"
        Image.new("RGB", (2, 2), color="blue").save(path)

        self.assertEqual(read_image_file(path), path.read_bytes())

    def test_read_missing_file_raises(self):
        with self.assertRaises(FileNotFoundError):
            read_image_file(self.temp_path / "missing.png")

    def test_read_directory_raises_decode_error(self):
        folder = self.temp_path / "folder.png"
        folder.mkdir()

        with self.assertRaises(DecodeError):
            read_image_file(folder)

    def test_read_unsupported_extension_raises_decode_error(self):
        path = self.temp_path / "notes.txt"
        path.write_text("hello")

        with self.assertRaises(DecodeError):
            read_image_file(path)

    def test_save_export_uses_download_name(self):
        saved = save_export(b"png-bytes", self.temp_path)

        self.assertEqual(saved.name, "adjusted-image.png")
        self.assertEqual(saved.read_bytes(), b"png-bytes")

    def test_save_export_missing_directory_raises(self):
        with self.assertRaises(OSError):
            save_export(b"x", self.temp_path / "nope")

    def test_save_export_file_path_raises(self):
        path = self.temp_path / "file"
        path.write_bytes(b"")

        with self.assertRaises(OSError):
            save_export(b"x", path)


if __name__ == "__main__":
    unittest.main()
