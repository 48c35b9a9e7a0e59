import logging
import re
from typing import Iterable, List

import markdown

from folio.errors import RenderError
from folio.schemas.blog import Heading

logger = logging.getLogger(__name__)

MARKDOWN_EXTENSIONS = ["extra", "codehilite"]
MARKDOWN_EXTENSION_CONFIGS = {
    "codehilite": {
        # Untagged fences render as plain text instead of a guessed language
        "guess_lang": False,
        "css_class": "highlight",
    }
}

HEADING_PREFIX = re.compile(r"^###*\s")


def render_html(body: str) -> str:
    """
    Convert a markdown body to HTML, highlighting fenced code blocks with
    Pygments according to their language tag.
    """
    md = markdown.Markdown(
        extensions=MARKDOWN_EXTENSIONS,
        extension_configs=MARKDOWN_EXTENSION_CONFIGS,
        output_format="html",
    )
    try:
        return md.convert(body)
    except Exception as e:
        logger.error(f"Markdown conversion failed: {e}")
        raise RenderError(f"Failed to render markdown: {e}") from e


def render_many(bodies: Iterable[str]) -> List[str]:
    """Render independent bodies; results line up with the input order."""
    return [render_html(body) for body in bodies]


def extract_headings(body: str) -> List[Heading]:
    """
    Table of contents from the raw markdown. Inline markup in the heading text
    is left as written.
    """
    headings = []
    for line in body.split("\n"):
        if not HEADING_PREFIX.match(line):
            continue
        headings.append(
            Heading(
                text=HEADING_PREFIX.sub("", line, count=1).rstrip("\r"),
                level=3 if line.startswith("###") else 2,
            )
        )
    return headings
