"""
Ramp Table Tests
"""

import unittest

from ascii_canvas.errors import UnknownRamp
from ascii_canvas.ramps import (
    RAMP_8,
    RAMPS,
    RampConfig,
    effective_ramp,
    get_ramp,
    list_ramps,
    preview_ramp,
)


class TestRamps(unittest.TestCase):

    def test_named_presets(self):
        expected = [
            "1", "2", "4", "8", "16",
            "letters", "numbers", "dots", "blocks", "blocks-alternate", "custom",
        ]
        self.assertEqual(list_ramps(), expected)

    def test_ramp_sizes(self):
        sizes = {key: len(RAMPS[key]) for key in ("1", "2", "4", "8", "16")}
        self.assertEqual(sizes, {"1": 2, "2": 3, "4": 5, "8": 8, "16": 16})

    def test_emptiest_glyph_first(self):
        for key, glyphs in RAMPS.items():
            with self.subTest(ramp=key):
                self.assertEqual(glyphs[0], " ")

    def test_preview(self):
        self.assertEqual(preview_ramp("8"), "  . : - = + * #")
        self.assertEqual(preview_ramp("8", negative=True), "# * + = - : .  ")
        self.assertEqual(preview_ramp("blocks"), "  ░ ▒ ▓ █")

    def test_negative_is_mirror(self):
        for key, glyphs in RAMPS.items():
            with self.subTest(ramp=key):
                self.assertEqual(effective_ramp(key, negative=True), tuple(reversed(glyphs)))

    def test_tables_unchanged_after_negative(self):
        before = {key: tuple(glyphs) for key, glyphs in RAMPS.items()}
        for key in RAMPS:
            effective_ramp(key, negative=True)
            get_ramp(key, negative=True).effective
        self.assertEqual(RAMPS, before)
        self.assertEqual(RAMPS["8"], RAMP_8)

    def test_preview_matches_render_order(self):
        ramp = get_ramp("numbers", negative=True)
        self.assertEqual(ramp.preview(), preview_ramp("numbers", negative=True))
        self.assertEqual(ramp.effective, effective_ramp("numbers", negative=True))

    def test_unknown_ramp(self):
        with self.assertRaises(UnknownRamp) as ctx:
            get_ramp("nope")
        self.assertIn("Unknown ramp: nope", str(ctx.exception))
        self.assertIsInstance(ctx.exception, KeyError)

    def test_numeric_key(self):
        self.assertEqual(get_ramp(16).key, "16")

    def test_custom_glyphs(self):
        ramp = RampConfig.from_glyphs("ab", negative=True)
        self.assertEqual(ramp.glyphs, ("a", "b"))
        self.assertEqual(ramp.effective, ("b", "a"))
        self.assertEqual(len(ramp), 2)
        self.assertIsNone(ramp.key)


if __name__ == "__main__":
    unittest.main()
