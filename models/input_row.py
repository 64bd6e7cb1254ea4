from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class InputRow(BaseModel):
    """A validated (company name, YC URL) pair from the input CSV."""

    name: str
    url: str

    model_config = ConfigDict(frozen=True)

    @field_validator("name", "url")
    @classmethod
    def _non_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value
