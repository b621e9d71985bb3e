"""Options controlling how a report summary is rendered."""

from pydantic import BaseModel, ConfigDict, Field

from boostsec.playwright_report_summary.icons import IconStyle


class RenderOptions(BaseModel):
    """Render options supplied by the caller."""

    model_config = ConfigDict(frozen=True)

    commit: str | None = Field(default=None, description="Commit SHA")
    message: str | None = Field(default=None, description="Commit message")
    title: str = Field(default="", description="Document title")
    report_url: str | None = Field(default=None, description="Link to full report")
    icon_style: IconStyle = Field(default="octicons", description="Icon style key")
