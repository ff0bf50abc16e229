import io
import sys
import unittest
from unittest.mock import MagicMock, mock_open, patch

from ytchapters.main import main
from ytchapters.models import Chapter

DESCRIPTION = "Today we build a parser.\n\n0:00 Intro\n1:30 Setup\n10:00 Outro\n"


def make_args(**overrides):
    args = dict(
        description="desc.txt",
        html=False,
        find=None,
        min_score=70,
        review=False,
        save=False,
        verbose=False
    )
    args.update(overrides)
    return MagicMock(**args)


class TestMainIntegration(unittest.TestCase):

    @patch('ytchapters.main.setup_logging')
    @patch('ytchapters.main.argparse.ArgumentParser.parse_args')
    @patch('ytchapters.main.os.path.exists', return_value=True)
    @patch('ytchapters.main.open', new_callable=mock_open, read_data=DESCRIPTION, create=True)
    @patch('ytchapters.main.save_results')
    @patch('ytchapters.main.get_video_metadata')
    @patch('builtins.print')
    def test_main_parse_and_save(self, mock_print, mock_metadata, mock_save, mock_file,
                                 mock_exists, mock_args, mock_logging):
        mock_args.return_value = make_args(save=True)
        mock_metadata.return_value = ("Channel", "Title", "abc123")

        main()

        mock_file.assert_called_with("desc.txt", "r", encoding="utf-8")
        chapters = mock_save.call_args[0][0]
        self.assertEqual(chapters, [
            Chapter(0, "Intro"), Chapter(90, "Setup"), Chapter(600, "Outro")
        ])
        mock_save.assert_called_with(chapters, "Channel", "Title", "abc123")

        printed = [c.args[0] for c in mock_print.call_args_list]
        self.assertIn("00:01:30  Setup", printed)

    @patch('ytchapters.main.setup_logging')
    @patch('ytchapters.main.argparse.ArgumentParser.parse_args')
    @patch('builtins.print')
    def test_main_reads_stdin_html(self, mock_print, mock_args, mock_logging):
        mock_args.return_value = make_args(description="-", html=True)

        with patch.object(sys, "stdin", io.StringIO("[00:00] Start<br>[02:00] End")):
            main()

        printed = [c.args[0] for c in mock_print.call_args_list]
        self.assertEqual(printed, ["00:00:00  Start", "00:02:00  End"])

    @patch('ytchapters.main.setup_logging')
    @patch('ytchapters.main.argparse.ArgumentParser.parse_args')
    @patch('ytchapters.main.os.path.exists', return_value=False)
    def test_main_missing_file(self, mock_exists, mock_args, mock_logging):
        mock_args.return_value = make_args(description="missing.txt")

        with self.assertRaises(SystemExit) as cm:
            main()
        self.assertEqual(cm.exception.code, 1)

    @patch('ytchapters.main.setup_logging')
    @patch('ytchapters.main.argparse.ArgumentParser.parse_args')
    @patch('ytchapters.main.read_description', return_value="No chapters in this one.")
    def test_main_no_chapters(self, mock_read, mock_args, mock_logging):
        mock_args.return_value = make_args(description="-")

        with self.assertRaises(SystemExit) as cm:
            main()
        self.assertEqual(cm.exception.code, 1)

    @patch('ytchapters.main.setup_logging')
    @patch('ytchapters.main.argparse.ArgumentParser.parse_args')
    @patch('ytchapters.main.read_description', return_value=DESCRIPTION)
    @patch('ytchapters.main.find_chapter')
    @patch('builtins.print')
    def test_main_find(self, mock_print, mock_find, mock_read, mock_args, mock_logging):
        mock_args.return_value = make_args(description="-", find="setup", min_score=50)
        mock_find.return_value = Chapter(90, "Setup")

        main()

        chapters, query = mock_find.call_args[0]
        self.assertEqual(len(chapters), 3)
        self.assertEqual(query, "setup")
        self.assertEqual(mock_find.call_args[1], {"min_score": 50})

    @patch('ytchapters.main.setup_logging')
    @patch('ytchapters.main.argparse.ArgumentParser.parse_args')
    @patch('ytchapters.main.read_description', return_value=DESCRIPTION)
    @patch('ytchapters.main.verify_chapters', return_value=[])
    @patch('ytchapters.main.save_results')
    def test_main_review_drops_all(self, mock_save, mock_verify, mock_read, mock_args, mock_logging):
        mock_args.return_value = make_args(description="-", review=True, save=True)

        with self.assertRaises(SystemExit) as cm:
            main()
        self.assertEqual(cm.exception.code, 0)
        mock_save.assert_not_called()


if __name__ == "__main__":
    unittest.main()
