"""Normalized summary models produced from a test report."""

from pydantic import BaseModel, ConfigDict, Field


class SpecSummary(BaseModel):
    """Classification and display data of a single spec."""

    model_config = ConfigDict(frozen=True)

    passed: bool = Field(..., description="Spec passed")
    failed: bool = Field(..., description="Spec failed or was unexpected")
    flaky: bool = Field(..., description="Spec passed only after retries")
    skipped: bool = Field(..., description="Spec was skipped")
    title: str = Field(..., description="Breadcrumb title")
    path: tuple[str, ...] = Field(..., description="Breadcrumb segments")
    line: int = Field(default=0, description="Source line")
    column: int = Field(default=0, description="Source column")


class ReportSummary(BaseModel):
    """Counts, durations and classified specs of a test run."""

    model_config = ConfigDict(frozen=True)

    version: str = Field(..., description="Test runner version")
    duration: int | float = Field(default=0, description="Total run time in ms")
    workers: int = Field(default=1, description="Number of workers")
    shards: int = Field(default=0, description="Number of shards")
    projects: tuple[str, ...] = Field(default=(), description="Project names")
    files: tuple[str, ...] = Field(default=(), description="Test file titles")
    suites: tuple[str, ...] = Field(default=(), description="Suite display names")
    specs: tuple[SpecSummary, ...] = Field(default=(), description="All specs")
    failed: tuple[SpecSummary, ...] = Field(default=())
    passed: tuple[SpecSummary, ...] = Field(default=())
    flaky: tuple[SpecSummary, ...] = Field(default=())
    skipped: tuple[SpecSummary, ...] = Field(default=())
