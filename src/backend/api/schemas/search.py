from __future__ import annotations

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class GlobalSearchResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    type: Literal["team", "player"]
    label: str
    sub_label: str = Field(alias="subLabel")
    url: str
    icon: Literal["shield", "user"]
