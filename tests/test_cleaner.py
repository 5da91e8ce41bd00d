"""
Tests for stripping ranges out of scripts.
"""
import unittest

from x2colon.core import clean_script


class TestCleanScript(unittest.TestCase):
    def test_spaces_on_both_sides(self):
        self.assertEqual(clean_script("Start (0:00-0:10) end"), "Start end")

    def test_words_are_not_fused(self):
        self.assertEqual(clean_script("pre(0:00-0:10)post"), "pre post")

    def test_no_ranges_is_verbatim(self):
        text = "Nothing here (really)  +  keep\n"
        self.assertEqual(clean_script(text), text)

    def test_malformed_is_verbatim(self):
        text = "Start (0:00-0:10) then (1:00-2:zz) end"
        self.assertEqual(clean_script(text), text)

    def test_invalid_numbers_are_still_removed(self):
        self.assertEqual(clean_script("Bad (0:00-0:99) range"), "Bad range")

    def test_edges(self):
        self.assertEqual(clean_script("(0:00-0:10) Intro"), "Intro")
        self.assertEqual(clean_script("Intro (0:00-0:10)"), "Intro")
        self.assertEqual(clean_script("Intro (0:00-0:10)."), "Intro.")
        self.assertEqual(clean_script("(0:00-0:10)"), "")

    def test_chain_removed_as_one(self):
        self.assertEqual(
            clean_script("Scene one (0:00-0:10) + (0:20-0:25) done"),
            "Scene one done",
        )
        self.assertEqual(
            clean_script("A (0:00-0:01)\n+ (0:02-0:03) + (0:04-0:05) B"),
            "A B",
        )

    def test_multiline_script(self):
        text = "Line one (0:00-0:10)\nLine two (0:10-0:20)\n"
        self.assertEqual(clean_script(text), "Line one\nLine two\n")

    def test_adjacent_ranges(self):
        self.assertEqual(clean_script("a(0:00-0:01)(0:02-0:03)b"), "a b")
        self.assertEqual(clean_script("a (0:00-0:01) (0:02-0:03) b"), "a b")
        self.assertEqual(clean_script("a (0:00-0:01)(0:02-0:03) b"), "a b")
        self.assertEqual(clean_script("word (0:00-0:01)(0:02-0:03) next"), "word next")
        self.assertEqual(clean_script("a(0:00-0:01) (0:02-0:03)b"), "a b")
        self.assertEqual(clean_script("a(0:00-0:01) (0:02-0:03) b"), "a b")
        self.assertEqual(clean_script("x (0:00-0:01)(0:02-0:03)(0:04-0:05) y"), "x y")

    def test_only_one_space_swallowed_per_side(self):
        self.assertEqual(clean_script("Chapter 1 (0:00-0:10)  end"), "Chapter 1 end")

    def test_stranded_connector(self):
        self.assertEqual(clean_script("(0:00-0:10) + note"), "note")

    def test_rest_is_untouched(self):
        self.assertEqual(
            clean_script("Keep (this) and (0:00-0:05) that, ok?"),
            "Keep (this) and that, ok?",
        )

    def test_long_unclosed_paren_is_verbatim(self):
        text = "(" + "0:0-" * 2000
        self.assertEqual(clean_script(text), text)

    def test_idempotent(self):
        texts = [
            "Start (0:00-0:10) end",
            "pre(0:00-0:10)post",
            "Line one (0:00-0:10)\nLine two (0:10-0:20)\n",
            "Scene (1:00:00–1:00:10) + (1:00:20—1:00:30) over",
        ]
        for text in texts:
            with self.subTest(text=text):
                once = clean_script(text)
                self.assertEqual(clean_script(once), once)


if __name__ == "__main__":
    unittest.main()
