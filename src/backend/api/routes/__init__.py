from .health import router as health_router
from .players import router as players_router
from .search import router as search_router
from .teams import router as teams_router
from .trending import router as trending_router

__all__ = [
    "health_router",
    "players_router",
    "search_router",
    "teams_router",
    "trending_router",
]
