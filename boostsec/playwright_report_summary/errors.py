"""Errors raised while summarizing a test report."""


class ReportSummaryError(Exception):
    """Base class for report summary errors."""


class ParseError(ReportSummaryError, ValueError):
    """Raw report data is not a valid report."""

    def __init__(self, message: str, data: str | None = None) -> None:
        """Initialize with the offending payload kept for diagnostics."""
        super().__init__(message)
        self.data = data


class MissingTestExecutionError(ReportSummaryError, RuntimeError):
    """A spec in the report has no test executions."""

    def __init__(self, spec_title: str) -> None:
        """Initialize with the title of the spec missing executions."""
        super().__init__(f"Spec has no test executions: {spec_title!r}")
        self.spec_title = spec_title
