"""Unit tests for ArticleRecord coercion."""

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from cvblog.models import ArticleRecord, ManualRelatedPost
from cvblog.models.base import to_iso
from cvblog.models.article import EPOCH, coerce_datetime


@pytest.mark.unit
@pytest.mark.parametrize(
    "value",
    ["2025-02-01", "2025-02-01T00:00:00Z", date(2025, 2, 1), datetime(2025, 2, 1)],
)
def test_dates_coerced_to_utc(value):
    parsed = coerce_datetime(value)

    assert parsed is not None
    assert parsed.utcoffset().total_seconds() == 0
    assert (parsed.year, parsed.month, parsed.day) == (2025, 2, 1)


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, "", "not a date", True, [2025]])
def test_bad_dates_become_none(value):
    assert coerce_datetime(value) is None


@pytest.mark.unit
def test_missing_date_sorts_as_epoch():
    article = ArticleRecord(id="cv-strategy/post", published_at="garbage")

    assert article.published_at is None
    assert article.sort_date == EPOCH


@pytest.mark.unit
def test_to_iso_uses_z_suffix():
    assert to_iso(datetime(2025, 2, 1, 8, 30, tzinfo=timezone.utc)) == "2025-02-01T08:30:00Z"
    assert to_iso(datetime(2025, 2, 1)) == "2025-02-01T00:00:00Z"


@pytest.mark.unit
def test_tags_cleaned():
    assert ArticleRecord(id="a", tags=[" cv ", "", 3, "ats"]).tags == frozenset({"cv", "ats"})
    assert ArticleRecord(id="a", tags="cv").tags == frozenset({"cv"})
    assert ArticleRecord(id="a", tags=None).tags == frozenset()


@pytest.mark.unit
def test_optional_strings_and_takeaways():
    article = ArticleRecord(
        id="cv-strategy/post",
        category=" cv-strategy ",
        layout_version="  ",
        article_type=" pillar ",
        key_takeaways="not a list",
    )

    assert article.category == "cv-strategy"
    assert article.layout_version is None
    assert article.article_type == "pillar"
    assert article.key_takeaways is None
    assert article.base_name == "post"


@pytest.mark.unit
def test_empty_id_rejected():
    with pytest.raises(ValidationError):
        ArticleRecord(id="")


@pytest.mark.unit
def test_records_are_frozen():
    article = ArticleRecord(id="a")

    with pytest.raises(ValidationError):
        article.title = "changed"


@pytest.mark.unit
def test_manual_related_ignores_wrong_types():
    entry = ManualRelatedPost(title=5, href="/blog/x/", reading_time_minutes=4.7)

    assert entry.title is None
    assert entry.href == "/blog/x/"
    assert entry.reading_time_minutes == 4


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw,expected",
    [("CV Strategy", "cv-strategy"), ("../../escaped", "escaped"), ("  ", ""), (None, "")],
)
def test_category_stored_as_slug(raw, expected):
    assert ArticleRecord(id="post", category=raw).category == expected
