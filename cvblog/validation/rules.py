"""IA rules for core SEO articles."""

from typing import Callable, NamedTuple, Tuple

from ..taxonomy import LAYOUT_PRESETS

LAYOUT_VERSION = "blog-post-v1"

CORE_ARTICLE_TYPES: Tuple[str, ...] = ("pillar", "tactical", "faq")

ALLOWED_LAYOUT_PRESETS: Tuple[str, ...] = LAYOUT_PRESETS


class RequiredSection(NamedTuple):
    """Required H2 section, matched against normalised heading text."""

    key: str
    label: str
    matches: Callable[[str], bool]


def _matches_diy(text: str) -> bool:
    return "diy" in text or ("do it yourself" in text and "expert" in text)


# Order matters: sections must appear in this sequence.
REQUIRED_H2_SEQUENCE: Tuple[RequiredSection, ...] = (
    RequiredSection("context", "Context", lambda t: "context" in t),
    RequiredSection("framework", "Framework", lambda t: "framework" in t),
    RequiredSection("steps", "Steps", lambda t: "step" in t),
    RequiredSection("mistakes", "Mistakes", lambda t: "mistake" in t),
    RequiredSection("examples", "Examples", lambda t: "example" in t),
    RequiredSection("checklist", "Implementation Checklist", lambda t: "checklist" in t),
    RequiredSection("diy-vs-expert", "DIY vs Expert", _matches_diy),
)
