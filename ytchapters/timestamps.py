import re
from typing import List, Tuple

# [H:]MM:SS inside square brackets, inside parentheses, or bare.
# Hours are optional in every shape. Digits are ASCII only.
TIMESTAMP_RX = re.compile(
    r"(?:\[\s*(?:([0-9]+):)?([0-9]+):([0-9]+)\s*\]"
    r"|\(\s*(?:([0-9]+):)?([0-9]+):([0-9]+)\s*\)"
    r"|(?:([0-9]+):)?([0-9]+):([0-9]+))"
)

# Track number such as "3. " left in front of the title
ORDINAL_RX = re.compile(r"^[0-9]+\.\s*")


def skip_empty_lines(description: str) -> List[str]:
    """
    Splits the description on newlines and drops the blank lines.
    Kept lines are returned in their original order, minus a CRLF's trailing "\\r".
    """
    lines = (line[:-1] if line.endswith("\r") else line for line in description.split("\n"))
    return [line for line in lines if line.strip()]


def parse_flexible_timestamp(line: str) -> Tuple[int, str]:
    """
    Finds the first timestamp in a line (`HH:MM:SS`, `[HH:MM:SS]` or `(HH:MM:SS)`).
    Returns (seconds, title) where title is the line with the timestamp and
    any leading track number removed.

    A line without a timestamp is returned as an untimed title: (0, line).
    """
    match = TIMESTAMP_RX.search(line)
    if not match:
        return 0, line

    # Only one of the three alternatives participates in a match;
    # missing hours fall back to 0.
    g = match.groups()
    hours = int(g[0] or g[3] or g[6] or "0")
    minutes = int(g[1] or g[4] or g[7] or "0")
    seconds = int(g[2] or g[5] or g[8] or "0")

    # No range check: "1:99" is 159 seconds
    timestamp = hours * 3600 + minutes * 60 + seconds

    title = TIMESTAMP_RX.sub("", line, count=1)
    title = ORDINAL_RX.sub("", title).strip()

    return timestamp, title
