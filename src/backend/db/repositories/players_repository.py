from __future__ import annotations

from sqlalchemy import text
from sqlalchemy.engine import Connection

GOALKEEPER_POSITION = "GK"


def stats_table_for(position: str) -> str:
    return "stats_gk" if position == GOALKEEPER_POSITION else "stats_outfield"


def fetch_stat_rows(connection: Connection, *, player_id: str, position: str) -> list[dict]:
    table = stats_table_for(position)
    sql = f"SELECT * FROM {table} WHERE player_id = :player_id"
    params: dict[str, object] = {"player_id": player_id}
    if table != "stats_gk":
        sql += " AND position = :position"
        params["position"] = position
    sql += " ORDER BY id ASC"

    rows = connection.execute(text(sql), params).mappings().all()
    return [dict(row) for row in rows]


def search_outfield_players(connection: Connection, *, query: str, limit: int) -> list[dict]:
    query = (query or "").strip()
    if not query:
        return []

    rows = connection.execute(
        text(
            """
            SELECT ps.id, ps.player
            FROM player_scouting ps
            WHERE LOWER(ps.player) LIKE LOWER(:wild)
              AND EXISTS (SELECT 1 FROM stats_outfield so WHERE so.player_id = ps.id)
            ORDER BY ps.player ASC, ps.id ASC
            LIMIT :limit
            """
        ),
        {"wild": f"%{query}%", "limit": limit},
    ).mappings().all()

    items = [{"id": row["id"], "player": row["player"], "position": []} for row in rows]
    if not items:
        return items

    placeholders = []
    params: dict[str, object] = {}
    for index, item in enumerate(items):
        name = f"pid_{index}"
        placeholders.append(f":{name}")
        params[name] = item["id"]

    position_rows = connection.execute(
        text(
            f"""
            SELECT player_id, position
            FROM stats_outfield
            WHERE player_id IN ({','.join(placeholders)})
            ORDER BY id ASC
            """
        ),
        params,
    ).mappings().all()

    positions: dict[str, list[str]] = {str(item["id"]): [] for item in items}
    for row in position_rows:
        bucket = positions.setdefault(str(row["player_id"]), [])
        if row["position"] and row["position"] not in bucket:
            bucket.append(row["position"])

    for item in items:
        item["position"] = positions.get(str(item["id"]), [])
    return items


def fetch_trending(connection: Connection) -> list[dict]:
    rows = connection.execute(
        text(
            """
            SELECT
              t.id, t.player, t.url,
              (SELECT g.position FROM stats_gk g WHERE g.player_id = ps.id ORDER BY g.id LIMIT 1) AS gk_position,
              (SELECT o.position FROM stats_outfield o WHERE o.player_id = ps.id ORDER BY o.id LIMIT 1) AS outfield_position
            FROM trending t
            LEFT JOIN player_scouting ps ON ps.id = t.id
            """
        )
    ).mappings().all()
    return [dict(row) for row in rows]
