"""
IA validation for blog articles.

Only core SEO articles on the current layout are checked: ``layoutVersion``
must be ``blog-post-v1`` and ``articleType`` one of pillar, tactical or faq.
Structural defects (missing or misordered H2 sections, unknown layout preset)
are errors; editorial gaps in frontmatter are warnings.
"""

from typing import Any, Dict, Iterable, List, Optional

from ..models import ArticleRecord, Heading, Issue, Severity, ValidationReport
from .headings import extract_headings, normalize_heading
from .rules import ALLOWED_LAYOUT_PRESETS, CORE_ARTICLE_TYPES, LAYOUT_VERSION, REQUIRED_H2_SEQUENCE


def _lower(value: Optional[str]) -> str:
    return (value or "").strip().lower()


def should_validate(article: ArticleRecord) -> bool:
    """Whether an article is in IA validation scope."""
    if _lower(article.layout_version) != LAYOUT_VERSION:
        return False
    return _lower(article.article_type) in CORE_ARTICLE_TYPES


def _has_items(value: Any) -> bool:
    return isinstance(value, (list, tuple, dict)) and len(value) > 0


def _file_label(article: ArticleRecord) -> str:
    return article.source_path or article.id


def check_layout_preset(article: ArticleRecord, file: str) -> List[Issue]:
    preset = (article.layout_preset or "").strip()
    if not preset or preset in ALLOWED_LAYOUT_PRESETS:
        return []
    return [
        Issue(
            file=file,
            severity=Severity.ERROR,
            code="invalid-layout-preset",
            message=(
                f'Invalid layoutPreset "{preset}". '
                f"Allowed values: {', '.join(ALLOWED_LAYOUT_PRESETS)}."
            ),
        )
    ]


def find_required_sections(headings: List[Heading]) -> Dict[str, int]:
    """Position among H2 headings of the first match for each required section."""
    normalised_h2 = [normalize_heading(h.text) for h in headings if h.depth == 2]

    found = {}
    for section in REQUIRED_H2_SEQUENCE:
        for index, text in enumerate(normalised_h2):
            if section.matches(text):
                found[section.key] = index
                break
    return found


def check_sections(headings: List[Heading], file: str) -> List[Issue]:
    """Presence and order of the required H2 sequence."""
    issues = []
    found = find_required_sections(headings)

    for section in REQUIRED_H2_SEQUENCE:
        if section.key not in found:
            issues.append(
                Issue(
                    file=file,
                    severity=Severity.ERROR,
                    code="missing-section",
                    message=f'Missing required H2 section "{section.label}".',
                )
            )

    # Only sections that were found take part in the order check
    present = [s for s in REQUIRED_H2_SEQUENCE if s.key in found]
    for prev, curr in zip(present, present[1:]):
        if found[prev.key] > found[curr.key]:
            issues.append(
                Issue(
                    file=file,
                    severity=Severity.ERROR,
                    code="section-out-of-order",
                    message=f'Section "{curr.label}" appears before "{prev.label}" in the H2 sequence.',
                )
            )

    return issues


def check_steps_subheadings(headings: List[Heading], file: str) -> List[Issue]:
    """Soft check: the Steps section should be broken into H3 sub-sections."""
    steps_h2_index = find_required_sections(headings).get("steps")
    if steps_h2_index is None:
        return []

    h2_seen = -1
    start = None
    for position, heading in enumerate(headings):
        if heading.depth == 2:
            h2_seen += 1
            if h2_seen == steps_h2_index:
                start = position
                break

    for heading in headings[start + 1:]:
        if heading.depth == 2:
            break
        if heading.depth == 3:
            return []

    return [
        Issue(
            file=file,
            severity=Severity.WARNING,
            code="steps-missing-subheadings",
            message=(
                'Steps section should contain H3 sub-sections (e.g. "Step 1", "Step 2", etc.) '
                "but none were found."
            ),
        )
    ]


def check_frontmatter(article: ArticleRecord, file: str) -> List[Issue]:
    """keyTakeaways and checklist expectations per article type."""
    issues = []
    article_type = _lower(article.article_type)
    has_key_takeaways = _has_items(article.key_takeaways)

    if article_type in ("pillar", "tactical") and not has_key_takeaways:
        issues.append(
            Issue(
                file=file,
                severity=Severity.WARNING,
                code="missing-key-takeaways",
                message=(
                    "keyTakeaways is required for pillar and tactical articles "
                    "but is missing or empty in frontmatter."
                ),
            )
        )

    if article_type == "faq" and not has_key_takeaways:
        issues.append(
            Issue(
                file=file,
                severity=Severity.WARNING,
                code="missing-key-takeaways",
                message=(
                    "keyTakeaways is strongly recommended for FAQ articles "
                    "but is missing or empty in frontmatter."
                ),
            )
        )

    if article_type in ("pillar", "tactical") and not _has_items(article.checklist):
        issues.append(
            Issue(
                file=file,
                severity=Severity.WARNING,
                code="missing-checklist",
                message=(
                    "Implementation checklist is expected for pillar and tactical articles "
                    "but `checklist` is missing in frontmatter."
                ),
            )
        )

    return issues


def validate_article(article: ArticleRecord) -> List[Issue]:
    """All IA issues for one article; out-of-scope articles yield none."""
    if not should_validate(article):
        return []

    file = _file_label(article)
    headings = extract_headings(article.body)

    issues = check_layout_preset(article, file)
    issues.extend(check_sections(headings, file))
    issues.extend(check_steps_subheadings(headings, file))
    issues.extend(check_frontmatter(article, file))
    return issues


def validate_corpus(articles: Iterable[ArticleRecord]) -> ValidationReport:
    """Validate every article, drafts included. Never stops at the first failure."""
    report = ValidationReport()
    for article in articles:
        if not should_validate(article):
            report.files_skipped += 1
            continue
        report.files_checked += 1
        report.issues.extend(validate_article(article))
    return report
