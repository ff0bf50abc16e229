from typing import List, Set

from .models import Chapter
from .utils import get_logger, sanitize

logger = get_logger("UserInteraction")


def parse_id_selection(user_input: str) -> Set[int]:
    """
    Parses "1, 2, 5-8" into {1, 2, 5, 6, 7, 8}.
    Raises ValueError on anything that isn't a number or a range.
    """
    ids = set()
    parts = [p.strip() for p in user_input.split(",") if p.strip()]

    for part in parts:
        if "-" in part:
            start_str, end_str = part.split("-", 1)
            start, end = int(start_str.strip()), int(end_str.strip())
            if start > end:
                start, end = end, start
            ids.update(range(start, end + 1))
        else:
            ids.add(int(part))

    return ids


def verify_chapters(chapters: List[Chapter]) -> List[Chapter]:
    """
    Displays the parsed chapters and asks the user which IDs to drop.
    IDs are 1-based positions in the list.
    """
    print("\n" + "=" * 60)
    print(f"FOUND {len(chapters)} CHAPTERS")
    print("=" * 60)
    print(f"{'ID':<5} | {'START':<10} | {'TITLE':<40}")
    print("-" * 60)

    for i, chap in enumerate(chapters, start=1):
        print(f"{i:<5} | {chap.start_time:<10} | {chap.title[:40]:<40}")

    print("-" * 60)
    print("\nReview the list above.")
    print("Enter the IDs of chapters to DROP.")
    print("Supports comma-separated numbers and ranges (e.g., '1, 2, 5-8').")
    print("Press ENTER to keep all.")

    user_input = input("> ").strip()

    if not user_input:
        logger.info("No chapters dropped.")
        return chapters

    try:
        drop_ids = parse_id_selection(user_input)
    except ValueError:
        logger.error("Invalid input. Please enter numbers or ranges (e.g. '1-5') only.")
        return verify_chapters(chapters)  # Recursive retry

    kept = [chap for i, chap in enumerate(chapters, start=1) if i not in drop_ids]
    logger.info(f"Dropped {len(chapters) - len(kept)} chapters based on user input.")
    return kept


def get_video_metadata(default_title: str = "Unknown Title") -> tuple[str, str, str]:
    """
    Interactive prompt for the channel, title and ID used to name the output folder.
    """
    default_title = sanitize(default_title) or "Unknown Title"

    print("\n" + "=" * 60)
    print("METADATA CONFIGURATION")
    print("=" * 60)

    channel_input = input("Channel [Unknown Channel]: ").strip()
    final_channel = sanitize(channel_input) if channel_input else "Unknown Channel"

    title_input = input(f"Video Title [{default_title}]: ").strip()
    final_title = sanitize(title_input) if title_input else default_title

    video_id = ""
    while not video_id:
        video_id = input("Video ID (required): ").strip()
        if not video_id:
            print("Video ID is required. Please check the video URL.")

    final_video_id = sanitize(video_id)
    print("-" * 60 + "\n")

    return final_channel, final_title, final_video_id
