"""soccer stats schema

Revision ID: 0001_soccer_schema
Revises:
Create Date: 2026-10-19
"""

import sqlalchemy as sa
from alembic import op

from src.backend.db.models import GK_STAT_COLUMNS, OUTFIELD_STAT_COLUMNS

revision = "0001_soccer_schema"
down_revision = None
branch_labels = None
depends_on = None


def _create_stats_table(name: str, stat_columns: tuple[str, ...]) -> None:
    op.create_table(
        name,
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("player_id", sa.String, sa.ForeignKey("player_scouting.id"), nullable=False),
        sa.Column("name", sa.String),
        sa.Column("position", sa.String),
        sa.Column("Metric", sa.String, nullable=False),
        *[sa.Column(column, sa.Float) for column in stat_columns],
        sa.Column("created_at", sa.DateTime),
    )
    op.create_index(f"ix_{name}_player_id", name, ["player_id"])


def upgrade() -> None:
    op.create_table(
        "league_team",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("league", sa.String, nullable=False),
        sa.Column("team", sa.String, nullable=False),
    )
    op.create_table(
        "team_alias",
        sa.Column("fbref_team", sa.String, primary_key=True),
        sa.Column("club_elo_team", sa.String),
    )
    op.create_table(
        "elo",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("team", sa.String, nullable=False),
        sa.Column("country", sa.String),
        sa.Column("level", sa.Integer),
        sa.Column("elo", sa.Float),
        sa.Column("from", sa.Date, nullable=False),
        sa.Column("to", sa.Date),
    )
    op.create_index("ix_elo_team", "elo", ["team"])
    op.create_table(
        "player_scouting",
        sa.Column("id", sa.String, primary_key=True),
        sa.Column("player", sa.String, nullable=False),
        sa.Column("url", sa.String),
    )
    _create_stats_table("stats_outfield", OUTFIELD_STAT_COLUMNS)
    _create_stats_table("stats_gk", GK_STAT_COLUMNS)
    op.create_table(
        "trending",
        sa.Column("id", sa.String, sa.ForeignKey("player_scouting.id"), primary_key=True),
        sa.Column("player", sa.String, nullable=False),
        sa.Column("url", sa.String),
    )


def downgrade() -> None:
    op.drop_table("trending")
    op.drop_table("stats_gk")
    op.drop_table("stats_outfield")
    op.drop_table("player_scouting")
    op.drop_index("ix_elo_team", table_name="elo")
    op.drop_table("elo")
    op.drop_table("team_alias")
    op.drop_table("league_team")
