import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "backend"))

from banner.backgrounds import BACKGROUNDS, DEFAULT_BG
from banner_service.config import Config
from banner_service.models.requests import BannerQuery
from banner_service.services.options import build_banner_options


class BuildOptionsTests(unittest.TestCase):
    def test_defaults(self):
        options = build_banner_options(BannerQuery())
        self.assertEqual(options.header, "Hello World")
        self.assertIsNone(options.subheader)
        self.assertIs(options.background, BACKGROUNDS[DEFAULT_BG])
        self.assertEqual(options.text_color, "#ffffff")
        self.assertEqual(options.font_family, Config.DEFAULT_FONT_FAMILY)
        self.assertFalse(options.show_watermark)
        self.assertEqual(options.watermark_position, "bottom-right")

    def test_invalid_values_fall_back(self):
        options = build_banner_options(BannerQuery(bg="nope", color="red", subheadercolor="#fff", watermark="center"))
        self.assertIs(options.background, BACKGROUNDS[DEFAULT_BG])
        self.assertEqual(options.text_color, "#ffffff")
        self.assertIsNone(options.subheader_color)
        self.assertEqual(options.watermark_position, "bottom-right")

    def test_valid_values(self):
        options = build_banner_options(BannerQuery(
            header="<b>My</b> Repo",
            subheader="Tagline",
            bg="solid-claude",
            color="ff0000",
            subheadercolor="00ff00",
            support="true",
            watermark="TOP-LEFT",
        ))
        self.assertEqual(options.header, "My Repo")
        self.assertEqual(options.subheader, "Tagline")
        self.assertEqual(options.background.id, "solid-claude")
        self.assertEqual(options.text_color, "#ff0000")
        self.assertEqual(options.subheader_color, "#00ff00")
        self.assertTrue(options.show_watermark)
        self.assertEqual(options.watermark_position, "top-left")

    def test_preset_text_color_used_without_color(self):
        options = build_banner_options(BannerQuery(bg="solid-lightgray"))
        self.assertEqual(options.text_color, "#1f2937")

    def test_font_names(self):
        options = build_banner_options(BannerQuery(headerfont="Space+Grotesk", subheaderfont="Inter<script>"))
        self.assertEqual(options.header_font, "Space Grotesk")
        self.assertEqual(options.subheader_font, "Interscript")
        self.assertIsNone(build_banner_options(BannerQuery(headerfont=";;")).header_font)

    def test_subheader_limit(self):
        options = build_banner_options(BannerQuery(subheader="x" * 150))
        self.assertEqual(len(options.subheader), 100)


if __name__ == "__main__":
    unittest.main()
