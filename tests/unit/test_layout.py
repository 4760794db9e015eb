import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "backend"))

from banner.layout import (
    BASE_FONT_SIZE,
    MIN_FONT_SIZE,
    CONTENT_WIDTH,
    AVAILABLE_HEIGHT,
    estimate_width,
    fit_font_size,
    fit_banner,
    layout_vertical,
    line_centers,
    round_half_up,
    segment_width,
)
from banner.segments import parse_header
from banner.types import HeaderSegment, VerticalLayout, TEXT, EMOJI


class WidthTests(unittest.TestCase):
    def test_space_is_narrower_than_characters(self):
        self.assertLess(estimate_width(parse_header(" "), 100), estimate_width(parse_header("a"), 100))

    def test_emoji_reserves_image_slot(self):
        self.assertAlmostEqual(segment_width(HeaderSegment(type=EMOJI, value="🚀"), 100), 134)

    def test_positioned_mode_adds_gaps(self):
        segments = [HeaderSegment(type=TEXT, value="a"), HeaderSegment(type=EMOJI, value="🚀")]
        self.assertAlmostEqual(estimate_width(segments, 100), 199)
        self.assertAlmostEqual(estimate_width(segments, 100, positioned=True), 203)


class FitFontSizeTests(unittest.TestCase):
    def test_short_text_keeps_base_size(self):
        self.assertEqual(fit_font_size(parse_header("Hi"), BASE_FONT_SIZE), BASE_FONT_SIZE)

    def test_scales_down_with_safety_margin(self):
        # 10 chars * 0.65 + 1 space * 0.25 = 6.75em = 1296px at 192
        self.assertEqual(fit_font_size(parse_header("Hello World"), BASE_FONT_SIZE), 145)

    def test_minimum_floor(self):
        self.assertEqual(fit_font_size(parse_header("W" * 500), BASE_FONT_SIZE), MIN_FONT_SIZE)

    def test_idempotent(self):
        for text in ("Hi", "Hello World", "🚀 A much longer launch announcement 🔥", "W" * 500):
            segments = parse_header(text)
            for positioned in (False, True):
                first = fit_font_size(segments, BASE_FONT_SIZE, positioned)
                self.assertEqual(fit_font_size(segments, first, positioned), first, text)

    def test_bounds(self):
        for text in ("", "x", "Hello World", "a" * 40, "🚀" * 30):
            for base in (24, 60, 100, 192):
                size = fit_font_size(parse_header(text), base)
                self.assertGreaterEqual(size, MIN_FONT_SIZE)
                self.assertLessEqual(size, base)

    def test_fitted_text_fits(self):
        segments = parse_header("Building the future, one commit at a time")
        size = fit_font_size(segments, BASE_FONT_SIZE)
        self.assertLessEqual(estimate_width(segments, size), CONTENT_WIDTH)


class VerticalLayoutTests(unittest.TestCase):
    def test_single_line(self):
        self.assertEqual(layout_vertical(145), VerticalLayout(header_size=145))

    def test_pair_that_fits_is_unchanged(self):
        self.assertEqual(layout_vertical(100, 40), VerticalLayout(100, 40, 40))

    def test_pair_is_scaled_to_available_height(self):
        layout = layout_vertical(192, 77)
        self.assertEqual(layout, VerticalLayout(113, 45, 45))
        self.assertLessEqual(layout.header_size + layout.gap + layout.subheader_size, AVAILABLE_HEIGHT)

    def test_fit_banner_with_subheader(self):
        layout = fit_banner(parse_header("Hi"), parse_header("Sub"))
        self.assertEqual(layout, VerticalLayout(113, 45, 45))

    def test_line_centers(self):
        header_y, sub_y = line_centers(VerticalLayout(100, 40, 40))
        self.assertEqual(header_y, 62 + 50)
        self.assertEqual(sub_y, 62 + 100 + 40 + 20)
        self.assertEqual(line_centers(VerticalLayout(145)), (152, None))


class RoundingTests(unittest.TestCase):
    def test_half_up(self):
        self.assertEqual(round_half_up(2.5), 3)
        self.assertEqual(round_half_up(1.5), 2)
        self.assertEqual(round_half_up(1.49), 1)


if __name__ == "__main__":
    unittest.main()
