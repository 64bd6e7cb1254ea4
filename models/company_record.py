from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FounderRecord(BaseModel):
    """One founder block from a company page, in document order."""

    name: str
    description: str = ""

    model_config = ConfigDict(extra="ignore", frozen=True)


class CompanyRecord(BaseModel):
    """Extraction output for one company page; JSON keys are the camelCase aliases."""

    name: str = ""
    team_size: int = Field(default=0, ge=0, alias="teamSize")
    job_count: int = Field(default=0, ge=0, alias="jobCount")
    founders: list[FounderRecord] = Field(default_factory=list)
    # Kept for output compatibility; never populated by extraction.
    launch_post_title: str = Field(default="", alias="launchPostTitle")
    launch_post_url: str = Field(default="", alias="launchPostUrl")

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    def to_json_dict(self) -> dict:
        return self.model_dump(by_alias=True)
