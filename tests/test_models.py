import dataclasses
import unittest

from ytchapters.models import Chapter


class TestChapter(unittest.TestCase):
    def test_chapter_initialization(self):
        chap = Chapter(start=125, title="Chapter Two")
        self.assertEqual(chap.start, 125)
        self.assertEqual(chap.title, "Chapter Two")
        self.assertEqual(chap.start_time, "00:02:05")

    def test_chapter_is_immutable(self):
        chap = Chapter(start=0, title="Intro")
        with self.assertRaises(dataclasses.FrozenInstanceError):
            chap.start = 10

    def test_to_dict(self):
        chap = Chapter(start=3723, title="Finale")
        self.assertEqual(
            chap.to_dict(),
            {"title": "Finale", "start_time": "01:02:03", "seconds": 3723}
        )

    def test_chapter_repr(self):
        chap = Chapter(start=90, title="Middle")
        self.assertIn("00:01:30", repr(chap))
        self.assertIn("'Middle'", repr(chap))


if __name__ == "__main__":
    unittest.main()
