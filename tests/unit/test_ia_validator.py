"""Unit tests for the IA validator."""

import textwrap

import pytest

from cvblog.models import Heading, Severity
from cvblog.validation import (
    extract_headings,
    normalize_heading,
    should_validate,
    validate_article,
    validate_corpus,
)


def core_article(article_factory, body, **fields):
    fields.setdefault("layout_version", "blog-post-v1")
    fields.setdefault("article_type", "pillar")
    fields.setdefault("key_takeaways", ["One"])
    fields.setdefault("checklist", {"items": ["a"]})
    fields.setdefault("source_path", "cv-strategy/post.mdx")
    return article_factory("cv-strategy/post", body=body, **fields)


@pytest.mark.unit
def test_extract_headings_skips_fenced_code():
    body = textwrap.dedent(
        """\
        ## Context
        ```md
        ## Not a heading
        ### Also not
        ```
          ### Step 1
        # Title is ignored
        ####  Too deep
        ##No space
        """
    )

    assert extract_headings(body) == [
        Heading(depth=2, text="Context"),
        Heading(depth=3, text="Step 1"),
    ]


@pytest.mark.unit
def test_extract_headings_splits_only_on_newlines():
    """Form feeds and Unicode line separators stay inside one line."""
    body = "## Context\x0c## Framework\r\n## Steps\u2028### Step 1\n## Examples\n"

    assert extract_headings(body) == [
        Heading(depth=2, text="Context\x0c## Framework"),
        Heading(depth=2, text="Steps\u2028### Step 1"),
        Heading(depth=2, text="Examples"),
    ]


@pytest.mark.unit
def test_normalize_heading():
    assert normalize_heading("  Step-by-Step   Process! ") == "step by step process"
    assert normalize_heading("DIY_vs_Expert") == "diy vs expert"


@pytest.mark.unit
@pytest.mark.parametrize(
    "layout_version,article_type,expected",
    [
        ("blog-post-v1", "pillar", True),
        (" Blog-Post-V1 ", "FAQ", True),
        ("blog-post-v1", "tactical", True),
        ("blog-post-v1", "news", False),
        ("blog-post-v0", "pillar", False),
        (None, "pillar", False),
        ("blog-post-v1", None, False),
    ],
)
def test_should_validate(article_factory, layout_version, article_type, expected):
    article = article_factory("cv-strategy/post", layout_version=layout_version, article_type=article_type)

    assert should_validate(article) is expected


@pytest.mark.unit
def test_full_ia_body_passes(article_factory, full_ia_body):
    assert validate_article(core_article(article_factory, full_ia_body)) == []


@pytest.mark.unit
def test_out_of_scope_article_yields_nothing(article_factory):
    article = article_factory("cv-strategy/post", body="no headings", layout_version="blog-post-v1")

    assert validate_article(article) == []


@pytest.mark.unit
def test_missing_sections_reported_in_sequence_order(article_factory):
    body = "## Context\n## Examples\n"

    issues = validate_article(core_article(article_factory, body))
    missing = [i.message for i in issues if i.code == "missing-section"]

    assert missing == [
        'Missing required H2 section "Framework".',
        'Missing required H2 section "Steps".',
        'Missing required H2 section "Mistakes".',
        'Missing required H2 section "Implementation Checklist".',
        'Missing required H2 section "DIY vs Expert".',
    ]
    assert all(i.severity == Severity.ERROR for i in issues if i.code == "missing-section")


@pytest.mark.unit
def test_steps_before_framework_single_order_error(article_factory):
    body = textwrap.dedent(
        """\
        ## Context
        ## Steps
        ### Step 1
        ## Framework
        ## Mistakes
        ## Examples
        ## Implementation Checklist
        ## DIY vs Expert
        """
    )

    issues = validate_article(core_article(article_factory, body))

    assert [i.code for i in issues] == ["section-out-of-order"]
    assert issues[0].message == 'Section "Steps" appears before "Framework" in the H2 sequence.'


@pytest.mark.unit
def test_missing_mistakes_not_in_order_check(article_factory, full_ia_body):
    body = full_ia_body.replace("## Common mistakes\n", "")

    issues = validate_article(core_article(article_factory, body))

    assert [i.message for i in issues] == ['Missing required H2 section "Mistakes".']


@pytest.mark.unit
def test_out_of_order_sections(article_factory):
    """Swapped Context/Framework gives exactly one ordering error."""
    body = textwrap.dedent(
        """\
        ## The Framework
        ## Context
        ## Steps
        ### Step 1
        ## Mistakes
        ## Examples
        ## Checklist
        ## Do it yourself or hire an expert
        """
    )

    issues = validate_article(core_article(article_factory, body))

    assert [i.code for i in issues] == ["section-out-of-order"]
    assert issues[0].message == 'Section "Framework" appears before "Context" in the H2 sequence.'


@pytest.mark.unit
def test_headings_in_code_fence_do_not_count(article_factory, full_ia_body):
    body = full_ia_body.replace("## Examples", "```\n## Examples\n```")

    issues = validate_article(core_article(article_factory, body))

    assert [i.message for i in issues] == ['Missing required H2 section "Examples".']


@pytest.mark.unit
def test_invalid_layout_preset(article_factory, full_ia_body):
    article = core_article(article_factory, full_ia_body, layout_preset="fancyLayout")

    issues = validate_article(article)

    assert len(issues) == 1
    assert issues[0].code == "invalid-layout-preset"
    assert issues[0].is_error
    assert issues[0].message.startswith('Invalid layoutPreset "fancyLayout". Allowed values: ')


@pytest.mark.unit
def test_known_layout_preset_accepted(article_factory, full_ia_body):
    article = core_article(article_factory, full_ia_body, layout_preset="conversionArticle")

    assert validate_article(article) == []


@pytest.mark.unit
def test_steps_without_subheadings_warns(article_factory, full_ia_body):
    body = full_ia_body.replace("### Step 1: Audit\n", "").replace("### Step 2: Rewrite\n", "")

    issues = validate_article(core_article(article_factory, body))

    assert [i.code for i in issues] == ["steps-missing-subheadings"]
    assert issues[0].severity == Severity.WARNING


@pytest.mark.unit
def test_h3_after_next_section_does_not_satisfy_steps(article_factory):
    body = textwrap.dedent(
        """\
        ## Context
        ## Framework
        ## Steps
        ## Mistakes
        ### Mistake 1
        ## Examples
        ## Checklist
        ## DIY vs Expert
        """
    )

    issues = validate_article(core_article(article_factory, body))

    assert [i.code for i in issues] == ["steps-missing-subheadings"]


@pytest.mark.unit
def test_pillar_without_takeaways_or_checklist(article_factory, full_ia_body):
    article = core_article(article_factory, full_ia_body, key_takeaways=[], checklist=None)

    issues = validate_article(article)

    assert [i.code for i in issues] == ["missing-key-takeaways", "missing-checklist"]
    assert "pillar and tactical" in issues[0].message
    assert all(i.severity == Severity.WARNING for i in issues)


@pytest.mark.unit
def test_faq_takeaways_recommended_checklist_optional(article_factory, full_ia_body):
    article = core_article(article_factory, full_ia_body, article_type="faq", key_takeaways=None, checklist=None)

    issues = validate_article(article)

    assert [i.code for i in issues] == ["missing-key-takeaways"]
    assert "strongly recommended for FAQ articles" in issues[0].message


@pytest.mark.unit
def test_empty_checklist_counts_as_missing(article_factory, full_ia_body):
    article = core_article(article_factory, full_ia_body, article_type="tactical", checklist={})

    assert [i.code for i in validate_article(article)] == ["missing-checklist"]


@pytest.mark.unit
def test_file_label_falls_back_to_id(article_factory):
    article = core_article(article_factory, "## Context\n", source_path=None)

    assert {i.file for i in validate_article(article)} == {"cv-strategy/post"}


@pytest.mark.unit
def test_validate_corpus_aggregates(article_factory, full_ia_body):
    """Every in-scope article is checked, drafts included; others are skipped."""
    articles = [
        core_article(article_factory, full_ia_body),
        article_factory(
            "cv-strategy/draft",
            body="## Context\n",
            draft=True,
            layout_version="blog-post-v1",
            article_type="tactical",
            key_takeaways=["x"],
            checklist=["y"],
        ),
        article_factory("linkedin/legacy", body="anything"),
    ]

    report = validate_corpus(articles)

    assert report.files_checked == 2
    assert report.files_skipped == 1
    assert report.has_errors
    assert not report.passed
    assert len(report.errors) == 6
    assert report.warnings == []
    assert {i.file for i in report.issues} == {"cv-strategy/draft"}


@pytest.mark.unit
def test_warnings_only_report_passes(article_factory, full_ia_body):
    report = validate_corpus([core_article(article_factory, full_ia_body, key_takeaways=None)])

    assert not report.has_errors
    assert report.passed
    assert len(report.warnings) == 1
