from __future__ import annotations

from sqlalchemy import Column, Date, DateTime, Float, ForeignKey, Integer, MetaData, String, Table

metadata = MetaData()

STATS_META_COLUMNS = ("id", "player_id", "name", "position", "Metric", "created_at")

OUTFIELD_STAT_COLUMNS = (
    "non_penalty_goals",
    "npxg",
    "shots_total",
    "assists",
    "xag",
    "npxg_plus_xag",
    "shot_creating_actions",
    "passes_attempted",
    "pass_completion_pct",
    "progressive_passes",
    "progressive_carries",
    "successful_take_ons",
    "touches_att_pen",
    "progressive_passes_rec",
    "tackles",
    "interceptions",
    "blocks",
    "clearances",
    "aerials_won",
)

GK_STAT_COLUMNS = (
    "psxg_minus_ga",
    "goals_against",
    "save_pct",
    "psxg_per_sot",
    "save_pct_penalty",
    "clean_sheet_pct",
    "touches",
    "launch_pct",
    "goal_kicks",
    "avg_length_goal_kicks",
    "crosses_stopped_pct",
    "def_actions_outside_pen_area",
    "avg_distance_def_actions",
)


def _stats_table(name: str, stat_columns: tuple[str, ...]) -> Table:
    return Table(
        name,
        metadata,
        Column("id", Integer, primary_key=True, autoincrement=True),
        Column("player_id", String, ForeignKey("player_scouting.id"), nullable=False, index=True),
        Column("name", String),
        Column("position", String),
        Column("Metric", String, nullable=False),
        *[Column(column, Float) for column in stat_columns],
        Column("created_at", DateTime),
    )


league_team = Table(
    "league_team",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("league", String, nullable=False),
    Column("team", String, nullable=False),
)

team_alias = Table(
    "team_alias",
    metadata,
    Column("fbref_team", String, primary_key=True),
    Column("club_elo_team", String),
)

elo = Table(
    "elo",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("team", String, nullable=False, index=True),
    Column("country", String),
    Column("level", Integer),
    Column("elo", Float),
    Column("from", Date, nullable=False),
    Column("to", Date),
)

player_scouting = Table(
    "player_scouting",
    metadata,
    Column("id", String, primary_key=True),
    Column("player", String, nullable=False),
    Column("url", String),
)

stats_outfield = _stats_table("stats_outfield", OUTFIELD_STAT_COLUMNS)
stats_gk = _stats_table("stats_gk", GK_STAT_COLUMNS)

trending = Table(
    "trending",
    metadata,
    Column("id", String, ForeignKey("player_scouting.id"), primary_key=True),
    Column("player", String, nullable=False),
    Column("url", String),
)
