"""Tests for summary and render option models."""

import pytest
from pydantic import ValidationError

from boostsec.playwright_report_summary.models.render_options import RenderOptions
from boostsec.playwright_report_summary.models.summary import (
    ReportSummary,
    SpecSummary,
)


def test_spec_summary_minimal() -> None:
    """SpecSummary defaults source location to zero."""
    spec = SpecSummary(
        passed=True,
        failed=False,
        flaky=False,
        skipped=False,
        title="chromium → a.spec.ts → works",
        path=("chromium", "a.spec.ts", "works"),
    )
    assert spec.line == 0
    assert spec.column == 0


def test_spec_summary_is_frozen() -> None:
    """SpecSummary cannot be mutated after construction."""
    spec = SpecSummary(
        passed=True, failed=False, flaky=False, skipped=False, title="t", path=("t",)
    )
    with pytest.raises(ValidationError):
        spec.failed = True  # type: ignore[misc]


def test_report_summary_defaults() -> None:
    """ReportSummary only requires a version."""
    summary = ReportSummary(version="1.40.0")
    assert summary.duration == 0
    assert summary.workers == 1
    assert summary.shards == 0
    assert summary.specs == ()
    assert summary.failed == ()


def test_report_summary_is_frozen() -> None:
    """ReportSummary cannot be mutated after construction."""
    summary = ReportSummary(version="1.40.0")
    with pytest.raises(ValidationError):
        summary.version = "2.0"  # type: ignore[misc]


def test_report_summary_json_roundtrip() -> None:
    """ReportSummary serializes to JSON with tuples as lists."""
    summary = ReportSummary(version="1.40.0", files=("a.spec.ts",))
    restored = ReportSummary.model_validate_json(summary.model_dump_json())
    assert restored == summary


def test_render_options_defaults() -> None:
    """RenderOptions defaults to an untitled octicons rendering."""
    options = RenderOptions()
    assert options.commit is None
    assert options.message is None
    assert options.title == ""
    assert options.report_url is None
    assert options.icon_style == "octicons"


def test_render_options_invalid_icon_style() -> None:
    """RenderOptions rejects unknown icon styles."""
    with pytest.raises(ValidationError) as exc_info:
        RenderOptions(icon_style="sprites")  # type: ignore[arg-type]
    assert "icon_style" in str(exc_info.value)
