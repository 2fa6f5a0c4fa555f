"""Line-based H2/H3 heading extraction from Markdown/MDX bodies."""

import re
from typing import List

from ..models import Heading

FENCE = "```"

_NON_ALNUM = re.compile(r"[\W_]+")
_LINE_BREAK = re.compile(r"\r?\n")


def extract_headings(body: str) -> List[Heading]:
    """
    Extract H2 and H3 headings in document order.

    Lines inside ``` fences are ignored, even when they look like headings.
    """
    headings = []
    in_fence = False

    for raw_line in _LINE_BREAK.split(body):
        line = raw_line.strip()

        if line.startswith(FENCE):
            in_fence = not in_fence
            continue
        if in_fence:
            continue

        if line.startswith("### "):
            headings.append(Heading(depth=3, text=line[4:].strip()))
        elif line.startswith("## "):
            headings.append(Heading(depth=2, text=line[3:].strip()))

    return headings


def normalize_heading(text: str) -> str:
    """Lowercase, punctuation to spaces, whitespace collapsed."""
    return " ".join(_NON_ALNUM.sub(" ", text.lower()).split())
