"""Data models for raw reports, summaries and render options."""

from boostsec.playwright_report_summary.models.render_options import RenderOptions
from boostsec.playwright_report_summary.models.report import (
    Report,
    ReportConfig,
    ReportSpec,
    ReportSuite,
    ReportTest,
)
from boostsec.playwright_report_summary.models.summary import (
    ReportSummary,
    SpecSummary,
)

__all__ = [
    "RenderOptions",
    "Report",
    "ReportConfig",
    "ReportSpec",
    "ReportSuite",
    "ReportSummary",
    "ReportTest",
    "SpecSummary",
]
