import json
import pathlib
from typing import List

from .models import Chapter
from .utils import get_logger

logger = get_logger("OutputManager")


def get_output_dir(channel, title, video_id):
    """
    Returns the Path object for the video's output directory.
    Format: repo/{Channel}/{Title} [{VideoID}]
    """
    base_repo = pathlib.Path("repo")
    channel_dir = base_repo / channel
    video_dir_name = f"{title} [{video_id}]"
    return channel_dir / video_dir_name


def build_output_data(chapters: List[Chapter]) -> List[dict]:
    return [chap.to_dict() for chap in chapters]


def escape_cell(value) -> str:
    """Escapes pipes so a title can't split its table row."""
    return str(value).replace("|", "\\|")


def write_markdown(md_path: pathlib.Path, output_data: List[dict], header_lines: List[str]):
    """Writes the header lines followed by the chapter table."""
    with open(md_path, "w", encoding="utf-8") as f:
        f.writelines(header_lines)
        f.write("| Chapter | Start Time | Seconds |\n")
        f.write("| :--- | :--- | :--- |\n")
        for item in output_data:
            f.write(f"| {escape_cell(item['title'])} | {item['start_time']} | {item['seconds']} |\n")


def save_results(chapters: List[Chapter], channel, title, video_id) -> pathlib.Path:
    """
    Saves the chapters to JSON and Markdown files.
    Returns the output directory.
    """
    output_data = build_output_data(chapters)

    output_dir = get_output_dir(channel, title, video_id)
    output_dir.mkdir(parents=True, exist_ok=True)

    # 1. JSON
    json_path = output_dir / "chapter_timestamps.json"
    with open(json_path, "w", encoding="utf-8") as f:
        json.dump(output_data, f, indent=4)

    # 2. Markdown Table
    md_path = output_dir / "chapter_timestamps.md"
    header_lines = [
        "# Chapter Timestamps\n",
        f"**Video:** {title}\n",
        f"**Channel:** {channel}\n",
        f"**Video ID:** {video_id}\n\n",
    ]
    write_markdown(md_path, output_data, header_lines)

    logger.info(f"Saved {len(output_data)} chapters.")
    logger.info(f"Results saved to:\n  - {json_path}\n  - {md_path}")
    return output_dir
