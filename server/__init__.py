"""
Wordle Leaderboard API Server

Usage: uvicorn server:app --reload --port 8000
"""

from .app import app
from .config import ServerConfig, get_config, reload_config
from .services import (
    FirestoreScoreStore,
    InMemoryScoreStore,
    JsonScoreStore,
    SnapshotCache,
)

__all__ = [
    "app",
    "ServerConfig",
    "get_config",
    "reload_config",
    "FirestoreScoreStore",
    "InMemoryScoreStore",
    "JsonScoreStore",
    "SnapshotCache",
]
