"""Unit tests for build stage bookkeeping."""

import pytest

from cvblog.pipeline import BuildStage


@pytest.mark.unit
def test_unstarted_stage():
    stage = BuildStage("load", "Loading articles")

    assert not stage.ran
    assert not stage.success
    assert stage.duration == 0.0
    assert stage.stats == {}


@pytest.mark.unit
def test_finish_records_stats():
    stage = BuildStage("paginate", "Paginating category listings")
    stage.start()
    stage.finish(categories=5, pages=7)

    assert stage.ran
    assert stage.success
    assert stage.duration >= 0.0
    assert stage.stats == {"categories": 5, "pages": 7}


@pytest.mark.unit
def test_fail_keeps_reason():
    stage = BuildStage("export", "Writing blog data files")
    stage.start()
    stage.fail("disk full")

    assert stage.ran
    assert not stage.success
    assert stage.error == "disk full"
    assert stage.stats == {}
