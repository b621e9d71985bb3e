"""Models for the raw Playwright JSON report.

Only the fields needed to build a summary are declared; everything else in
the report is ignored.
"""

from pydantic import BaseModel, ConfigDict, Field


class ReportModel(BaseModel):
    """Base for report models, accepting both camelCase and snake_case keys."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ReportMetadata(ReportModel):
    """Run metadata recorded by the test runner."""

    total_time: int | float | None = Field(
        default=None, alias="totalTime", description="Total run time in ms"
    )
    actual_workers: int | None = Field(
        default=None, alias="actualWorkers", description="Workers actually used"
    )


class ReportShard(ReportModel):
    """Shard information of a sharded run."""

    total: int | None = Field(default=None, description="Total number of shards")


class ReportProject(ReportModel):
    """Project declared in the runner configuration."""

    name: str = Field(default="", description="Project name")


class ReportConfig(ReportModel):
    """Run-level configuration block."""

    version: str = Field(default="", description="Test runner version")
    metadata: ReportMetadata = Field(default_factory=ReportMetadata)
    workers: int | None = Field(default=None, description="Configured workers")
    shard: ReportShard | None = Field(default=None, description="Shard settings")
    projects: list[ReportProject] = Field(default_factory=list)


class ReportTest(ReportModel):
    """One execution of a spec under a project."""

    status: str = Field(default="", description="Final status of the execution")
    project_name: str = Field(default="", alias="projectName")


class ReportSpec(ReportModel):
    """A single test declaration."""

    title: str = Field(default="", description="Spec title")
    ok: bool = Field(default=False, description="Whether the spec succeeded")
    line: int = Field(default=0, description="Source line")
    column: int = Field(default=0, description="Source column")
    tests: list[ReportTest] = Field(default_factory=list)


class ReportSuite(ReportModel):
    """A file or describe block containing specs and child suites."""

    title: str = Field(default="", description="Suite title")
    specs: list[ReportSpec] = Field(default_factory=list)
    suites: list["ReportSuite"] = Field(default_factory=list)


class Report(ReportModel):
    """Top-level Playwright JSON report."""

    config: ReportConfig = Field(..., description="Run configuration")
    suites: list[ReportSuite] = Field(..., description="One suite per test file")
