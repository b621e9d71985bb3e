"""Reduce a raw Playwright JSON report to a normalized summary."""

import json
import logging
from collections.abc import Sequence
from typing import Literal

from pydantic import ValidationError

from boostsec.playwright_report_summary.errors import (
    MissingTestExecutionError,
    ParseError,
)
from boostsec.playwright_report_summary.models.report import (
    Report,
    ReportConfig,
    ReportSpec,
    ReportSuite,
)
from boostsec.playwright_report_summary.models.summary import (
    ReportSummary,
    SpecSummary,
)

logger = logging.getLogger(__name__)

ClassifyBy = Literal["first", "last"]

TITLE_SEPARATOR = " → "


def _decode(data: str | bytes) -> str:
    if not isinstance(data, bytes):
        return data
    try:
        return data.decode("utf-8")
    except UnicodeDecodeError as e:
        text = data.decode("utf-8", errors="replace")
        logger.debug("Invalid report file")
        logger.debug(text)
        raise ParseError(f"Invalid report file: {e}", data=text) from e


def load_report(data: str | bytes) -> Report:
    """Parse raw report data and check its minimal shape.

    Args:
        data: JSON text of the report

    Returns:
        Parsed report

    Raises:
        ParseError: If the data is not JSON, lacks a config or suites
            section, or the consumed fields have the wrong types

    """
    text = _decode(data)

    try:
        raw = json.loads(text)
    except json.JSONDecodeError as e:
        logger.debug("Invalid report file")
        logger.debug(text)
        raise ParseError(f"Invalid report file: {e}", data=text) from e

    if not isinstance(raw, dict) or "config" not in raw or "suites" not in raw:
        logger.debug("Invalid report file")
        logger.debug(text)
        raise ParseError(
            "Invalid report file: expected an object with config and suites",
            data=text,
        )

    try:
        return Report.model_validate(raw)
    except ValidationError as e:
        logger.debug("Invalid report file")
        logger.debug(text)
        raise ParseError(f"Invalid report file: {e}", data=text) from e


def _resolve_duration(config: ReportConfig) -> int | float:
    total_time = config.metadata.total_time
    return total_time if total_time is not None else 0


def _resolve_workers(config: ReportConfig) -> int:
    if config.metadata.actual_workers is not None:
        return config.metadata.actual_workers
    if config.workers is not None:
        return config.workers
    return 1


def _resolve_shards(config: ReportConfig) -> int:
    if config.shard is None or config.shard.total is None:
        return 0
    return config.shard.total


def summarize_spec(
    spec: ReportSpec,
    parents: Sequence[ReportSuite] = (),
    classify_by: ClassifyBy = "first",
) -> SpecSummary:
    """Classify a spec and build its breadcrumb title.

    Only one test execution decides the classification: the first one by
    default, or the last one with ``classify_by="last"``. The flags are
    computed independently, so contradictory data (``ok`` false with a
    "skipped" status) can set more than one of them.

    Raises:
        MissingTestExecutionError: If the spec has no test executions

    """
    if not spec.tests:
        raise MissingTestExecutionError(spec.title)

    test = spec.tests[-1] if classify_by == "last" else spec.tests[0]
    status = test.status

    segments = [test.project_name, *(parent.title for parent in parents), spec.title]
    path = tuple(segment for segment in segments if segment)

    flaky = status == "flaky"
    skipped = status == "skipped"
    failed = not spec.ok or status == "unexpected"
    passed = spec.ok and not skipped and not failed and not flaky

    return SpecSummary(
        passed=passed,
        failed=failed,
        flaky=flaky,
        skipped=skipped,
        title=TITLE_SEPARATOR.join(path),
        path=path,
        line=spec.line,
        column=spec.column,
    )


def _suite_names(file: ReportSuite) -> list[str]:
    if file.suites:
        return [f"{file.title} > {suite.title}" for suite in file.suites]
    return [file.title]


def _file_specs(file: ReportSuite, classify_by: ClassifyBy) -> list[SpecSummary]:
    # Walks the file and its direct child suites only; deeper suites are not visited.
    specs = [summarize_spec(spec, [file], classify_by) for spec in file.specs]
    for suite in file.suites:
        specs.extend(
            summarize_spec(spec, [file, suite], classify_by) for spec in suite.specs
        )
    return specs


def summarize_report(report: Report, classify_by: ClassifyBy = "first") -> ReportSummary:
    """Build a normalized summary from a parsed report."""
    config = report.config

    specs: list[SpecSummary] = []
    suites: list[str] = []
    for file in report.suites:
        suites.extend(_suite_names(file))
        specs.extend(_file_specs(file, classify_by))

    summary = ReportSummary(
        version=config.version,
        duration=_resolve_duration(config),
        workers=_resolve_workers(config),
        shards=_resolve_shards(config),
        projects=tuple(project.name for project in config.projects),
        files=tuple(file.title for file in report.suites),
        suites=tuple(suites),
        specs=tuple(specs),
        failed=tuple(spec for spec in specs if spec.failed),
        passed=tuple(spec for spec in specs if spec.passed),
        flaky=tuple(spec for spec in specs if spec.flaky),
        skipped=tuple(spec for spec in specs if spec.skipped),
    )
    logger.debug(
        f"Summarized {len(summary.specs)} specs: {len(summary.failed)} failed, "
        f"{len(summary.passed)} passed, {len(summary.flaky)} flaky, "
        f"{len(summary.skipped)} skipped"
    )
    return summary


def parse_report(data: str | bytes, classify_by: ClassifyBy = "first") -> ReportSummary:
    """Parse raw report data into a normalized summary.

    Args:
        data: JSON text of the report
        classify_by: Which test execution of each spec decides its status

    Returns:
        Normalized report summary

    Raises:
        ParseError: If the data is not a valid report
        MissingTestExecutionError: If a spec has no test executions

    """
    return summarize_report(load_report(data), classify_by)
