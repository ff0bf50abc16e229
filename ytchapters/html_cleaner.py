from bs4 import BeautifulSoup

from .utils import get_logger

logger = get_logger(__name__)

# Elements that start a new line when rendered
BLOCK_TAGS = ['p', 'div', 'li', 'h1', 'h2', 'h3', 'h4', 'h5', 'h6', 'tr']


def html_to_text(html: str) -> str:
    """
    Converts an HTML video description into plain text, one line per
    <br> or block element, so it can be handed to parse_chapters.
    Timestamp links (<a href="...&t=90">1:30</a>) keep their visible text.
    """
    if not html:
        return ""

    soup = BeautifulSoup(html, 'html.parser')

    for br in soup.find_all('br'):
        br.replace_with("\n")

    for block in soup.find_all(BLOCK_TAGS):
        block.insert_before("\n")
        block.insert_after("\n")

    text = soup.get_text()
    logger.debug(f"Converted {len(html)} chars of HTML into {len(text.splitlines())} lines.")
    return text
