"""Register all route modules on the FastAPI app."""

from fastapi import FastAPI

from .root import router as root_router
from .leaderboards import router as leaderboards_router
from .chart import router as chart_router
from .players import router as players_router
from .stats import router as stats_router


def register_routes(app: FastAPI) -> None:
    """Attach all API routers to the app."""
    app.include_router(root_router)
    app.include_router(leaderboards_router, prefix="/api", tags=["leaderboards"])
    app.include_router(chart_router, prefix="/api", tags=["chart"])
    app.include_router(players_router, prefix="/api/players", tags=["players"])
    app.include_router(stats_router, prefix="/api", tags=["stats"])
