"""Render a report summary as a markdown comment."""

from boostsec.playwright_report_summary.formatting import (
    format_duration,
    n,
    upper_case_first,
)
from boostsec.playwright_report_summary.icons import IconStyle, icon_for
from boostsec.playwright_report_summary.models.render_options import RenderOptions
from boostsec.playwright_report_summary.models.summary import (
    ReportSummary,
    SpecSummary,
)

LINE_BREAK = "  \n"
LISTED_STATUSES = ("failed", "flaky", "skipped")


def _render_counts(summary: ReportSummary, icon_style: IconStyle) -> str:
    failed, passed = len(summary.failed), len(summary.passed)
    flaky, skipped = len(summary.flaky), len(summary.skipped)
    fragments = [
        f"{icon_for('failed', icon_style)}  **{failed} failed**" if failed else "",
        f"{icon_for('passed', icon_style)}  **{passed} passed**  " if passed else "",
        f"{icon_for('flaky', icon_style)}  **{flaky} flaky**  " if flaky else "",
        f"{icon_for('skipped', icon_style)}  **{skipped} skipped**" if skipped else "",
    ]
    return LINE_BREAK.join(fragment for fragment in fragments if fragment)


def _render_stats(summary: ReportSummary, options: RenderOptions) -> str:
    style = options.icon_style
    commit = options.commit
    tests, suites = len(summary.specs), len(summary.suites)

    stats = [
        f"{icon_for('report', style)}  [Open report ↗︎]({options.report_url})"
        if options.report_url
        else "",
        f"{icon_for('stats', style)}  {tests} {n('test', tests)} "
        f"across {suites} {n('suite', suites)}",
        f"{icon_for('duration', style)}  {format_duration(summary.duration)}",
        f"{icon_for('commit', style)}  {options.message} ({commit[:7]})"
        if commit and options.message
        else "",
        f"{icon_for('commit', style)}  {commit[:7]}"
        if commit and not options.message
        else "",
    ]
    return LINE_BREAK.join(stat for stat in stats if stat)


def _render_details(status: str, specs: tuple[SpecSummary, ...]) -> str:
    opening = "<details open>" if status == "failed" else "<details>"
    items = "\n".join(f"<li>{spec.title}</li>" for spec in specs)
    return "\n".join(
        [
            opening,
            f"<summary><strong>{upper_case_first(status)} tests</strong></summary>",
            f"<ul>{items}</ul>",
            "</details>",
        ]
    )


def render_report_summary(
    summary: ReportSummary, options: RenderOptions | None = None
) -> str:
    """Render a normalized summary as a markdown document.

    Args:
        summary: Summary returned by parse_report
        options: Title, commit, report link and icon style

    Returns:
        Markdown paragraphs separated by blank lines

    """
    options = options or RenderOptions()

    details = [
        _render_details(status, getattr(summary, status))
        for status in LISTED_STATUSES
        if getattr(summary, status)
    ]

    paragraphs = [
        f"### {options.title}",
        _render_counts(summary, options.icon_style),
        "#### Details",
        _render_stats(summary, options),
        "\n".join(details),
    ]
    return "\n\n".join(p.strip() for p in paragraphs if p.strip())
