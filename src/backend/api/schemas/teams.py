from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class EloSeries(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    team_name: str = Field(alias="teamName")
    data: list[dict] = Field(default_factory=list)
