import re
from typing import Callable, List, Optional, Tuple

from .models import Chapter, ChapterFormat
from .timestamps import parse_flexible_timestamp, skip_empty_lines
from .utils import get_logger

logger = get_logger(__name__)

ChapterParser = Callable[[str], List[Chapter]]


def make_chapter_parser(chapter_format: ChapterFormat) -> ChapterParser:
    """
    Builds a parser for one description format.

    The parser looks for the first line matching `start_rx`, then accepts every
    following line that matches `line_rx` as a chapter. Lines that don't match
    are skipped, they don't end the list.
    """
    # Group 0 is the whole match, so the declared capture indices move up by one.
    # Values are re-read by parse_flexible_timestamp; the indices only describe
    # where the timestamp and title sit in line_rx.
    timestamp_group = chapter_format.timestamp_index + 1
    title_group = chapter_format.title_index + 1

    def parse(description: str) -> List[Chapter]:
        chapters: List[Chapter] = []
        lines = skip_empty_lines(description)

        # Find where the chapter list begins
        first = next(
            (i for i, line in enumerate(lines) if chapter_format.start_rx.search(line)),
            None
        )
        if first is None:
            return chapters

        for line in lines[first:]:
            match = chapter_format.line_rx.search(line)
            if not match:
                continue

            start, title = parse_flexible_timestamp(line)
            chapters.append(Chapter(start=start, title=title.strip()))

            # hours, minutes, seconds
            parts = match.group(timestamp_group, timestamp_group + 1, timestamp_group + 2)
            logger.debug(
                f"[{chapter_format.name}] {':'.join(p for p in parts if p)} "
                f"'{match.group(title_group)}' -> {start}s"
            )

        return chapters

    parse.__name__ = f"parse_{chapter_format.name}"
    return parse


def _same_rx_format(name: str, pattern: str, timestamp_index: int, title_index: int) -> ChapterFormat:
    """Formats where one pattern both starts the list and matches each line."""
    rx = re.compile(pattern, re.MULTILINE)
    return ChapterFormat(name, rx, rx, timestamp_index, title_index)


# Tried in this order, most constrained first.
FORMATS: Tuple[ChapterFormat, ...] = (
    # $timestamp $title
    ChapterFormat(
        "lawful",
        re.compile(r"^0?0:00", re.MULTILINE),
        re.compile(r"^(?:([0-9]+):)?([0-9]+):([0-9]+)\s+(.*?)$"),
        0, 3
    ),
    # [$timestamp] $title
    ChapterFormat(
        "brackets",
        re.compile(r"^\[(?:0?0:00|00:00)\]"),
        re.compile(r"^\[(?:([0-9]+):)?([0-9]+):([0-9]+)\]\s+(.*?)$"),
        0, 3
    ),
    # ($timestamp) $title
    ChapterFormat(
        "parens",
        re.compile(r"^\(0?0:00\)", re.MULTILINE),
        re.compile(r"^\((?:([0-9]+):)?([0-9]+):([0-9]+)\)\s+(.*?)$"),
        0, 3
    ),
    # ($track_id.) $title $timestamp
    _same_rx_format("postfix", r"^(?:[0-9]+\.\s+)?(.*?)\s+(?:([0-9]+):)?([0-9]+):([0-9]+)$", 1, 0),
    # ($track_id.) $title ($timestamp)
    _same_rx_format("postfix_paren", r"^(?:[0-9]+\.\s+)?(.*?)\s+\(\s*(?:([0-9]+):)?([0-9]+):([0-9]+)\s*\)$", 1, 0),
    # ($track_id.) $timestamp $title
    _same_rx_format("prefix", r"^(?:[0-9]+\.\s+)?(?:([0-9]+):)?([0-9]+):([0-9]+)\s+(.*)$", 0, 3),
)

PARSERS: Tuple[Tuple[str, ChapterParser], ...] = tuple(
    (fmt.name, make_chapter_parser(fmt)) for fmt in FORMATS
)


def _run_cascade(description: str) -> Tuple[Optional[str], List[Chapter]]:
    """Returns the name of the first format that yields chapters, and those chapters."""
    for name, parser in PARSERS:
        chapters = parser(description)
        if chapters:
            logger.debug(f"Description matched '{name}' format ({len(chapters)} chapters).")
            return name, chapters

    logger.debug("No chapter format matched the description.")
    return None, []


def parse_chapters(description: str) -> List[Chapter]:
    """
    Parses the chapter list out of a video description.
    Returns an empty list if no known format applies.
    """
    _, chapters = _run_cascade(description)
    return chapters


def detect_format(description: str) -> Optional[str]:
    """Name of the format parse_chapters would use, or None."""
    name, _ = _run_cascade(description)
    return name
