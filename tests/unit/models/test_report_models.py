"""Tests for raw report models."""

import pytest
from pydantic import ValidationError

from boostsec.playwright_report_summary.models.report import Report, ReportSuite


def test_report_parses_camel_case_fields() -> None:
    """Report reads camelCase keys of the runner output."""
    report = Report.model_validate(
        {
            "config": {
                "version": "1.40.0",
                "metadata": {"totalTime": 1234.5, "actualWorkers": 3},
                "shard": {"total": 2, "current": 1},
                "projects": [{"id": "webkit", "name": "webkit"}],
            },
            "suites": [
                {
                    "title": "a.spec.ts",
                    "specs": [
                        {
                            "title": "works",
                            "ok": True,
                            "tests": [{"status": "expected", "projectName": "webkit"}],
                        }
                    ],
                }
            ],
        }
    )

    assert report.config.metadata.total_time == 1234.5
    assert report.config.metadata.actual_workers == 3
    assert report.config.shard is not None
    assert report.config.shard.total == 2
    assert report.config.projects[0].name == "webkit"
    assert report.suites[0].specs[0].tests[0].project_name == "webkit"


def test_report_optional_fields_default() -> None:
    """Report fills in defaults for fields missing from the runner output."""
    report = Report.model_validate({"config": {}, "suites": [{}]})

    assert report.config.version == ""
    assert report.config.workers is None
    assert report.config.shard is None
    assert report.config.metadata.total_time is None
    assert report.suites[0] == ReportSuite()


def test_report_nested_suites() -> None:
    """ReportSuite nests child suites recursively."""
    suite = ReportSuite.model_validate(
        {"title": "a", "suites": [{"title": "b", "suites": [{"title": "c"}]}]}
    )
    assert suite.suites[0].suites[0].title == "c"


def test_report_requires_config_and_suites() -> None:
    """Report requires config and suites sections."""
    with pytest.raises(ValidationError) as exc_info:
        Report.model_validate({})
    errors = str(exc_info.value)
    assert "config" in errors
    assert "suites" in errors
