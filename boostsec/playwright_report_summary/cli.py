"""CLI entry point for the Playwright report summary."""

import logging
import sys
from pathlib import Path

import typer

from boostsec.playwright_report_summary.errors import ReportSummaryError
from boostsec.playwright_report_summary.icons import ICONS
from boostsec.playwright_report_summary.models.render_options import RenderOptions
from boostsec.playwright_report_summary.renderer import render_report_summary
from boostsec.playwright_report_summary.summarizer import parse_report

logger = logging.getLogger(__name__)

app = typer.Typer()

CLASSIFY_MODES = ("first", "last")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
        force=True,  # Force reconfiguration even if already set up
    )


def _validate_choice(value: str, choices: tuple[str, ...], option: str) -> str:
    if value not in choices:
        raise typer.BadParameter(
            f"Unknown {option}: {value}. Must be one of: {', '.join(choices)}"
        )
    return value


def append_step_summary(step_summary: Path, markdown: str) -> None:
    """Append markdown to the GitHub Actions job summary file."""
    with step_summary.open("a", encoding="utf-8") as f:
        f.write(markdown)
        f.write("\n")


@app.command()
def main(  # noqa: PLR0913
    report_file: Path = typer.Option(..., help="Path to the JSON test report"),  # noqa: B008
    title: str = typer.Option("", help="Title of the summary"),
    commit: str | None = typer.Option(None, help="Commit SHA of the test run"),
    message: str | None = typer.Option(None, help="Commit message"),
    report_url: str | None = typer.Option(None, help="Link to the full report"),
    icon_style: str = typer.Option(
        "octicons", help=f"Icon style ({', '.join(ICONS)})"
    ),
    classify_by: str = typer.Option(
        "first", help="Test execution deciding a spec status (first, last)"
    ),
    output: Path | None = typer.Option(None, help="Write markdown to this file"),  # noqa: B008
    step_summary: Path | None = typer.Option(  # noqa: B008
        None,
        envvar="GITHUB_STEP_SUMMARY",
        help="Append markdown to the GitHub Actions job summary",
    ),
    json_output: bool = typer.Option(
        False, "--json", help="Print the summary as JSON instead of markdown"
    ),
    fail_on_failure: bool = typer.Option(
        False, help="Exit with an error when the report has failed tests"
    ),
    verbose: bool = typer.Option(False, help="Enable debug logging"),
) -> None:
    """Summarize a Playwright JSON report as markdown."""
    _configure_logging(verbose)
    _validate_choice(icon_style, tuple(ICONS), "icon style")
    _validate_choice(classify_by, CLASSIFY_MODES, "classify mode")

    logger.info(f"Report file: {report_file}")

    try:
        data = report_file.read_bytes()
    except OSError as e:
        logger.error(f"Failed to read report file: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    try:
        summary = parse_report(data, classify_by=classify_by)  # type: ignore[arg-type]
    except ReportSummaryError as e:
        logger.error(f"Failed to parse report: {e}")
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    logger.info(
        f"Parsed {len(summary.specs)} tests across {len(summary.suites)} suites"
    )

    if json_output:
        typer.echo(summary.model_dump_json(indent=2))
    else:
        options = RenderOptions(
            commit=commit,
            message=message,
            title=title,
            report_url=report_url,
            icon_style=icon_style,  # type: ignore[arg-type]
        )
        markdown = render_report_summary(summary, options)

        if output:
            output.write_text(markdown + "\n", encoding="utf-8")
            logger.info(f"Summary written to {output}")
        else:
            typer.echo(markdown)

        if step_summary:
            append_step_summary(step_summary, markdown)
            logger.info(f"Summary appended to {step_summary}")

    if fail_on_failure and summary.failed:
        logger.error(f"Tests failed: {len(summary.failed)}/{len(summary.specs)}")
        raise typer.Exit(code=1)


if __name__ == "__main__":  # pragma: no cover
    app()
