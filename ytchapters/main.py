import argparse
import os
import sys

from .html_cleaner import html_to_text
from .output_manager import save_results
from .parser import detect_format, parse_chapters
from .search import find_chapter
from .user_interaction import get_video_metadata, verify_chapters
from .utils import get_logger, setup_logging

logger = get_logger("Main")


def read_description(path) -> str:
    """Reads the description from a file, or stdin for '-' / no path."""
    if not path or path == "-":
        return sys.stdin.read()
    with open(path, "r", encoding="utf-8") as f:
        return f.read()


def print_chapters(chapters):
    for chap in chapters:
        print(f"{chap.start_time}  {chap.title}")


def main():
    parser = argparse.ArgumentParser(description="Video Description Chapter Extractor")
    parser.add_argument("description", nargs="?", default="-",
                        help="Path to a text file with the video description ('-' for stdin)")
    parser.add_argument("--html", action="store_true", help="Treat the description as HTML")
    parser.add_argument("--find", metavar="QUERY", help="Look up a chapter by (fuzzy) title")
    parser.add_argument("--min-score", type=int, default=70, help="Minimum fuzzy score for --find")
    parser.add_argument("--review", action="store_true", help="Review and drop chapters before saving")
    parser.add_argument("--save", action="store_true", help="Save chapters to repo/ as JSON and Markdown")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable verbose logging")

    args = parser.parse_args()

    log_level = "DEBUG" if args.verbose else "INFO"
    setup_logging(log_level)

    if args.description != "-" and not os.path.exists(args.description):
        logger.error(f"Description file not found: {args.description}")
        sys.exit(1)

    # --- Phase 1: Parsing ---
    description = read_description(args.description)
    if args.html:
        description = html_to_text(description)

    chapters = parse_chapters(description)

    if not chapters:
        logger.error("No chapters found in description.")
        sys.exit(1)

    logger.info(f"Found {len(chapters)} chapters ('{detect_format(description)}' format).")

    # --- Phase 2: Review ---
    if args.review:
        chapters = verify_chapters(chapters)
        if not chapters:
            logger.warning("All chapters were dropped! Exiting.")
            sys.exit(0)

    print_chapters(chapters)

    # --- Phase 3: Lookup ---
    if args.find:
        match = find_chapter(chapters, args.find, min_score=args.min_score)
        if match:
            logger.info(f"'{args.find}' -> {match.start_time} {match.title}")
        else:
            logger.warning(f"No chapter title matches '{args.find}'.")

    # --- Phase 4: Output ---
    if args.save:
        channel, title, video_id = get_video_metadata()
        save_results(chapters, channel, title, video_id)


if __name__ == "__main__":
    main()
