from typing import List, Optional, Tuple

from thefuzz import fuzz

from .models import Chapter
from .utils import get_logger

logger = get_logger(__name__)


def score_title(query: str, title: str) -> float:
    """
    Start-biased similarity between a search query and a chapter title.

    70% partial ratio (query found anywhere in the title) plus
    30% ratio against the title prefix of the same length.
    """
    query = query.lower().strip()
    title = title.lower().strip()
    if not query or not title:
        return 0.0

    p_ratio = fuzz.partial_ratio(query, title)
    s_ratio = fuzz.ratio(query, title[:len(query)])
    return (0.7 * p_ratio) + (0.3 * s_ratio)


def rank_chapters(chapters: List[Chapter], query: str) -> List[Tuple[float, Chapter]]:
    """Returns (score, chapter) pairs, best match first."""
    scored = [(score_title(query, chap.title), chap) for chap in chapters]
    # sorted() is stable, so ties keep description order
    return sorted(scored, key=lambda pair: pair[0], reverse=True)


def find_chapter(chapters: List[Chapter], query: str, min_score: float = 70) -> Optional[Chapter]:
    """
    Finds the chapter whose title best matches `query`.
    Returns None if nothing scores at least `min_score`.
    """
    ranked = rank_chapters(chapters, query)
    if not ranked:
        return None

    best_score, best = ranked[0]
    logger.debug(f"Best match for '{query}': '{best.title}' (Score: {best_score:.2f})")

    if best_score < min_score:
        return None
    return best
