"""
Source Image Tests
"""

import os
import tempfile
import unittest

import numpy as np
from PIL import Image

from ascii_canvas.errors import InvalidDimensions, MalformedBuffer
from ascii_canvas.image import SourceImage, as_source_image


class TestSourceImage(unittest.TestCase):

    def test_from_rgba(self):
        data = [10, 20, 30, 255, 40, 50, 60, 128]
        source = SourceImage.from_rgba(data, width=2, height=1)

        self.assertEqual(source.size, (2, 1))
        self.assertEqual(source.pixel(0, 0), (10, 20, 30, 255))
        self.assertEqual(source.pixel(1, 0), (40, 50, 60, 128))

    def test_from_rgba_wrong_length(self):
        with self.assertRaises(MalformedBuffer):
            SourceImage.from_rgba([0] * 7, width=2, height=1)

    def test_empty(self):
        with self.assertRaises(InvalidDimensions):
            SourceImage.from_rgba([], width=0, height=0)
        with self.assertRaises(InvalidDimensions):
            SourceImage(np.zeros((0, 5, 4), dtype=np.uint8))

    def test_read_only(self):
        source = SourceImage(np.zeros((2, 2, 4), dtype=np.uint8))
        self.assertFalse(source.pixels.flags.writeable)
        with self.assertRaises(ValueError):
            source.pixels[0, 0, 0] = 1

    def test_caller_array_copied(self):
        array = np.zeros((2, 2, 4), dtype=np.uint8)
        source = SourceImage(array)
        array[0, 0, 0] = 99
        self.assertEqual(source.pixel(0, 0)[0], 0)

    def test_from_pil_converts_mode(self):
        img = Image.new("RGB", (3, 2), color=(255, 0, 0))
        source = SourceImage.from_pil(img)
        self.assertEqual(source.size, (3, 2))
        self.assertEqual(source.pixel(2, 1), (255, 0, 0, 255))

        gray = SourceImage.from_pil(Image.new("L", (1, 1), color=77))
        self.assertEqual(gray.pixel(0, 0), (77, 77, 77, 255))

    def test_from_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = os.path.join(tmp, "square.png")
            Image.new("RGBA", (4, 5), color=(1, 2, 3, 4)).save(path)

            source = as_source_image(path)
            self.assertEqual(source.size, (4, 5))
            self.assertEqual(source.pixel(3, 4), (1, 2, 3, 4))

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            SourceImage.from_path("/nonexistent/image.png")

    def test_as_source_image(self):
        source = SourceImage(np.zeros((1, 1, 4), dtype=np.uint8))
        self.assertIs(as_source_image(source), source)
        self.assertEqual(as_source_image(np.zeros((3, 2), dtype=np.uint8)).size, (2, 3))
        self.assertEqual(as_source_image(np.zeros((3, 2, 3), dtype=np.uint8)).size, (2, 3))
        with self.assertRaises(TypeError):
            as_source_image(42)

    def test_to_pil(self):
        source = SourceImage(np.full((2, 3, 4), 9, dtype=np.uint8))
        img = source.to_pil()
        self.assertEqual(img.mode, "RGBA")
        self.assertEqual(img.size, (3, 2))


if __name__ == "__main__":
    unittest.main()
