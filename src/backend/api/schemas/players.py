from __future__ import annotations

from pydantic import BaseModel, Field

StatValue = int | float | str | None


class StatItem(BaseModel):
    value: StatValue = None
    percentile: StatValue = None


class PlayerProfile(BaseModel):
    player_id: str
    name: str | None = None
    position: str
    stats: dict[str, StatItem] = Field(default_factory=dict)


class PlayerSearchResult(BaseModel):
    id: str
    player: str
    position: list[str] = Field(default_factory=list)


class TrendingPlayer(BaseModel):
    id: str
    player: str
    url: str | None = None
    position: str


class PlayerComparison(BaseModel):
    players: list[PlayerProfile]
    missing: list[str] = Field(default_factory=list)
    radar: list[dict] = Field(default_factory=list)
