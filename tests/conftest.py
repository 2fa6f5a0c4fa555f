"""Shared fixtures for cvblog tests."""

import textwrap
from pathlib import Path

import pytest

from cvblog.models import ArticleRecord

FULL_IA_BODY = textwrap.dedent(
    """
    Intro paragraph.

    ## Context
    Why this matters.

    ## The Framework
    How to think about it.

    ## Step-by-step process
    ### Step 1: Audit
    ### Step 2: Rewrite

    ## Common mistakes
    Things to avoid.

    ## Examples
    Before and after.

    ## Implementation checklist
    - Item

    ## DIY vs Expert
    When to get help.
    """
)


def make_article(article_id: str, **fields) -> ArticleRecord:
    """ArticleRecord with the category taken from the id prefix unless given."""
    if "category" not in fields and "/" in article_id:
        fields["category"] = article_id.split("/")[0]
    return ArticleRecord(id=article_id, **fields)


@pytest.fixture
def article_factory():
    return make_article


@pytest.fixture
def full_ia_body() -> str:
    return FULL_IA_BODY


@pytest.fixture
def content_dir(tmp_path: Path) -> Path:
    """Small content tree with a valid pillar post, a broken one, and a draft."""
    root = tmp_path / "src" / "content" / "blog"
    (root / "cv-strategy").mkdir(parents=True)
    (root / "linkedin").mkdir(parents=True)

    (root / "cv-strategy" / "ats-proof-cv.mdx").write_text(
        textwrap.dedent(
            """\
            ---
            title: ATS-proof CV guide
            description: How to write a CV that passes applicant tracking systems in Kenya.
            category: cv-strategy
            tags: [cv, ats]
            date: 2025-02-01
            layoutVersion: blog-post-v1
            articleType: pillar
            layoutPreset: conversionArticle
            keyTakeaways:
              - Use standard headings
            checklist:
              items:
                - Check fonts
            ---
            """
        )
        + FULL_IA_BODY,
        encoding="utf-8",
    )

    (root / "cv-strategy" / "cv-length.mdx").write_text(
        textwrap.dedent(
            """\
            ---
            title: How long should a CV be?
            description: Page length guidance for Kenyan CVs across career stages.
            tags: [cv, length]
            date: 2025-01-15
            layoutVersion: blog-post-v1
            articleType: tactical
            layoutPreset: fancyLayout
            ---
            ## Context
            ## Steps
            ## Framework
            """
        ),
        encoding="utf-8",
    )

    (root / "linkedin" / "headline-formulas.md").write_text(
        textwrap.dedent(
            """\
            ---
            title: LinkedIn headline formulas
            description: Headline patterns that recruiters actually search for on LinkedIn.
            category: linkedin
            tags: [linkedin, cv]
            date: 2025-03-10
            ---
            Body text.
            """
        ),
        encoding="utf-8",
    )

    (root / "linkedin" / "draft-post.md").write_text(
        textwrap.dedent(
            """\
            ---
            title: Unfinished draft
            category: linkedin
            tags: [cv]
            draft: true
            date: 2025-04-01
            ---
            Draft body.
            """
        ),
        encoding="utf-8",
    )

    return root
