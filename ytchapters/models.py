import re
from dataclasses import dataclass

from .utils import seconds_to_hms


@dataclass(frozen=True)
class Chapter:
    """
    A single chapter marker recovered from a video description.
    Immutable once created; the parser hands ownership to the caller.
    """
    start: int      # Start time (seconds from the beginning of the video)
    title: str      # Title text with the timestamp and any track number removed

    @property
    def start_time(self) -> str:
        return seconds_to_hms(self.start)

    def to_dict(self) -> dict:
        """Export record used by the JSON / Markdown outputs."""
        return {
            "title": self.title,
            "start_time": self.start_time,
            "seconds": self.start
        }

    def __repr__(self):
        return f"<Chapter {self.start_time} '{self.title}'>"


@dataclass(frozen=True)
class ChapterFormat:
    """
    One description convention for writing chapters.

    start_rx finds the line where the chapter list begins, line_rx decides
    whether a line is a chapter entry. The capture indices point at the
    timestamp and title groups of line_rx (0-based).
    """
    name: str
    start_rx: re.Pattern
    line_rx: re.Pattern
    timestamp_index: int
    title_index: int
