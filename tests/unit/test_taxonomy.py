"""Unit tests for slugs, URLs and the category table."""

import pytest

from cvblog.taxonomy import (
    CATEGORY_SLUGS,
    CategoryTable,
    normalize_base_path,
    post_slug_from_id,
    post_url,
    to_slug,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value,expected",
    [
        ("CV Strategy", "cv-strategy"),
        ("  Kenya  Market!! ", "kenya-market"),
        ("Café Résumé", "cafe-resume"),
        ("---", "uncategorized"),
        ("", "uncategorized"),
        (None, "uncategorized"),
    ],
)
def test_to_slug(value, expected):
    assert to_slug(value) == expected


@pytest.mark.unit
def test_post_slug_from_id():
    assert post_slug_from_id("cv-strategy/ats-proof-cv") == "ats-proof-cv"
    assert post_slug_from_id("nested/deep/post/") == "post"
    with pytest.raises(ValueError):
        post_slug_from_id("")


@pytest.mark.unit
def test_normalize_base_path():
    assert normalize_base_path("/blog/") == "/blog"
    assert normalize_base_path("blog") == "/blog"
    assert normalize_base_path("/") == ""


@pytest.mark.unit
def test_post_url():
    assert post_url("cv-strategy/ats-proof-cv", "cv-strategy") == "/blog/cv-strategy/ats-proof-cv/"
    assert post_url("misc/post", "Career Growth") == "/blog/career-growth/post/"
    assert post_url("post", None) == "/blog/uncategorized/post/"
    assert post_url("linkedin/post", "linkedin", "/") == "/linkedin/post/"


@pytest.mark.unit
def test_category_table_lookup():
    table = CategoryTable()

    assert len(table) == 5
    assert table.slugs == list(CATEGORY_SLUGS)
    assert "linkedin" in table
    assert "unknown" not in table
    assert table.get("kenya-market").default_preset == "analysisArticle"
    assert table.get("unknown") is None


@pytest.mark.unit
def test_category_titles_and_descriptions():
    table = CategoryTable()

    assert table.pretty_title("linkedin") == "LinkedIn & Professional Branding"
    assert table.pretty_title("side-hustles") == "Side Hustles"
    assert table.build_title("side-hustles") == "Side Hustles · Blog Category"
    assert table.build_description("side-hustles") == "Articles and insights in the Side Hustles category."
    assert table.build_description("cv-strategy").startswith("Clear, practical frameworks")


@pytest.mark.unit
def test_related_categories():
    table = CategoryTable()

    assert [c.slug for c in table.related("linkedin")] == ["cv-strategy", "career-growth", "kenya-market"]
    assert len(table.related("unknown", limit=10)) == 5
    assert table.related("linkedin", limit=0) == []


@pytest.mark.unit
def test_resolve_preset_and_funnel_stage():
    table = CategoryTable()

    assert table.resolve_preset("career-growth") == "editorialArticle"
    assert table.resolve_preset("career-growth", "shortInsight") == "shortInsight"
    assert table.resolve_preset("unknown") == "conversionArticle"
    assert table.resolve_funnel_stage("kenya-market") == "TOFU"
    assert table.resolve_funnel_stage("unknown") == "MOFU"


@pytest.mark.unit
def test_table_base_path_normalised():
    assert CategoryTable(base_path="articles/").base_path == "/articles"
