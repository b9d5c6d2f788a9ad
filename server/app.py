"""
Wordle Leaderboard API: FastAPI app factory.

Use: uvicorn server.app:app
Or:  from server import app
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .config import get_config
from .routes import register_routes
from .routes.root import API_NAME, API_VERSION
from .services import ScoreStoreError
from .state import get_state
from .utils import utc_now

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def create_app() -> FastAPI:
    """Build FastAPI app with CORS, routes, and startup."""
    config = get_config()
    _configure_logging(config.log_level)

    app = FastAPI(
        title=API_NAME,
        description="Bayesian, recency-adjusted Wordle leaderboards and rating charts",
        version=API_VERSION,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_routes(app)

    @app.on_event("startup")
    def warm_snapshot():
        state = get_state()
        ok, errors = state.config.validate()
        for error in errors:
            logger.warning("[startup] Config: %s", error)
        try:
            cached = state.cache.get(utc_now())
        except ScoreStoreError as e:
            logger.warning("[startup] Initial snapshot fetch failed: %s", e)
            return
        logger.info(
            "[startup] Snapshot loaded: %d players, global mean %.3f (config ok=%s)",
            len(cached.snapshot.player_names),
            cached.snapshot.global_mean,
            ok,
        )

    return app


app = create_app()
