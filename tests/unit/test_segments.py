import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "backend"))

from banner.segments import parse_header, parse_emoji_in_text, emoji_to_codepoint, has_icons
from banner.types import TEXT, EMOJI, ICON


def _types(segments):
    return [s.type for s in segments]


class ParseHeaderTests(unittest.TestCase):
    def test_plain_text_is_single_segment(self):
        segments = parse_header("Hello World")
        self.assertEqual(len(segments), 1)
        self.assertEqual(segments[0].type, TEXT)
        self.assertEqual(segments[0].value, "Hello World")

    def test_empty_input(self):
        self.assertEqual(parse_header(""), [])

    def test_emoji_then_text(self):
        segments = parse_header("🚀 Launch")
        self.assertEqual(_types(segments), [EMOJI, TEXT])
        self.assertEqual(segments[0].value, "🚀")
        self.assertEqual(segments[1].value, " Launch")

    def test_zwj_sequence_is_one_emoji(self):
        for emoji in ("👨‍💻", "👨‍👩‍👧‍👦", "🏳️‍🌈"):
            segments = parse_header(f"a{emoji}b")
            self.assertEqual(_types(segments), [TEXT, EMOJI, TEXT], emoji)
            self.assertEqual(segments[1].value, emoji)

    def test_variation_selector_emoji(self):
        segments = parse_header("I ❤️ Python")
        self.assertEqual(_types(segments), [TEXT, EMOJI, TEXT])
        self.assertEqual(segments[1].value, "❤️")

    def test_bare_emoji_property_chars_stay_text(self):
        # '#' and digits have the Emoji property but no emoji presentation
        segments = parse_header("Version 2 #1")
        self.assertEqual(_types(segments), [TEXT])

    def test_flag_and_skin_tone_stay_whole(self):
        self.assertEqual(_types(parse_header("🇵🇭")), [EMOJI])
        segments = parse_header("👍🏽 ok")
        self.assertEqual(segments[0].value, "👍🏽")
        self.assertEqual(_types(segments), [EMOJI, TEXT])

    def test_icons_with_and_without_theme(self):
        segments = parse_header("Built with ![python] and ![react](dark)")
        self.assertEqual(_types(segments), [TEXT, ICON, TEXT, ICON])
        self.assertEqual(segments[1].value, "python")
        self.assertEqual(segments[1].theme, "auto")
        self.assertEqual(segments[3].value, "react")
        self.assertEqual(segments[3].theme, "dark")
        self.assertTrue(has_icons(segments))

    def test_icons_and_emoji_keep_order(self):
        segments = parse_header("🔥![github](light)🚀 go")
        self.assertEqual(_types(segments), [EMOJI, ICON, EMOJI, TEXT])
        self.assertEqual(segments[1].theme, "light")

    def test_uppercase_icon_markup_is_text(self):
        segments = parse_header("![GitHub]")
        self.assertEqual(_types(segments), [TEXT])

    def test_segments_reconstruct_input(self):
        samples = [
            "Hello World",
            "  spaced  out  ",
            "🚀 Launch 🔥🔥",
            "![github]![react](auto) x ![vue](unknown)",
            "mix 👨‍💻 of ![docker](dark) things ❤️!",
            "!![x]]",
        ]
        for text in samples:
            segments = parse_header(text)
            self.assertEqual("".join(s.raw for s in segments), text)

    def test_adjacent_emoji_are_separate(self):
        self.assertEqual(_types(parse_emoji_in_text("🔥🚀")), [EMOJI, EMOJI])


class CodepointTests(unittest.TestCase):
    def test_single(self):
        self.assertEqual(emoji_to_codepoint("🚀"), "1f680")

    def test_variation_selector_removed(self):
        self.assertEqual(emoji_to_codepoint("❤️"), "2764")

    def test_zwj_sequence(self):
        self.assertEqual(emoji_to_codepoint("👨‍💻"), "1f468-200d-1f4bb")


if __name__ == "__main__":
    unittest.main()
