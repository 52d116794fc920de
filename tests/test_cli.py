"""
Command-Line Host Tests
"""

import importlib.util
import io
import os
import tempfile
import unittest
from contextlib import redirect_stderr, redirect_stdout
from unittest.mock import patch

from PIL import Image

CLI_PATH = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "scripts", "cli.py")


def load_cli():
    spec = importlib.util.spec_from_file_location("ascii_cli", CLI_PATH)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def run_cli(*argv):
    cli = load_cli()
    out, err = io.StringIO(), io.StringIO()
    with patch("sys.argv", ["cli.py", *argv]), redirect_stdout(out), redirect_stderr(err):
        code = cli.main()
    return code, out.getvalue(), err.getvalue()


class TestCLI(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.image_path = os.path.join(self.tmp.name, "white.png")
        Image.new("RGB", (4, 2), color=(255, 255, 255)).save(self.image_path)

    def tearDown(self):
        self.tmp.cleanup()

    def test_convert_and_save(self):
        output = os.path.join(self.tmp.name, "out", "art.txt")
        code, out, _ = run_cli(
            self.image_path, "--mode", "pixel-perfect", "--ramp", "1", "--output", output
        )

        self.assertEqual(code, 0)
        self.assertIn("Chars: 8", out)
        with open(output, encoding="utf-8") as f:
            self.assertEqual(f.read(), "....\n....\n")

    def test_missing_image(self):
        code, _, err = run_cli()
        self.assertEqual(code, 1)
        self.assertIn("No image loaded", err)

    def test_oversized_width_is_reported(self):
        code, out, err = run_cli(self.image_path, "--mode", "manual", "--width", str(2 ** 31))
        self.assertEqual(code, 1)
        self.assertIn("exceed", err)
        self.assertEqual(out, "")

    def test_preview(self):
        code, out, _ = run_cli("--ramp", "2", "--negative", "--preview")
        self.assertEqual(code, 0)
        self.assertEqual(out, "# .  \n")

    def test_list_ramps(self):
        code, out, _ = run_cli("--list-ramps")
        self.assertEqual(code, 0)
        self.assertIn("blocks-alternate", out)


if __name__ == "__main__":
    unittest.main()
