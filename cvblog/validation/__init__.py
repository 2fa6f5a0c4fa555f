"""Structural IA validation of blog articles."""

from .headings import extract_headings, normalize_heading
from .report import PREFIX, format_issue, print_report
from .rules import ALLOWED_LAYOUT_PRESETS, CORE_ARTICLE_TYPES, LAYOUT_VERSION, REQUIRED_H2_SEQUENCE
from .validator import should_validate, validate_article, validate_corpus

__all__ = [
    "ALLOWED_LAYOUT_PRESETS",
    "PREFIX",
    "CORE_ARTICLE_TYPES",
    "LAYOUT_VERSION",
    "REQUIRED_H2_SEQUENCE",
    "extract_headings",
    "format_issue",
    "normalize_heading",
    "print_report",
    "should_validate",
    "validate_article",
    "validate_corpus",
]
