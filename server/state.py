"""Application state: rating config, score store, and snapshot cache."""

import json
import logging
from pathlib import Path
from typing import Optional

from google.auth.exceptions import GoogleAuthError
from pydantic import ValidationError

from ratings import DEFAULT_CONFIG, RatingConfig

from .config import ServerConfig, get_config
from .services import (
    FirestoreScoreStore,
    InMemoryScoreStore,
    JsonScoreStore,
    ScoreStore,
    SnapshotCache,
)

logger = logging.getLogger(__name__)


class AppState:
    """Global application state."""

    def __init__(self, config: ServerConfig, store: Optional[ScoreStore] = None):
        self.config = config
        self.rating_config = self._load_rating_config(config)

        # Score store: explicit store, else from DATA_SOURCE, else empty in-memory
        self.store = store if store is not None else self._create_store(config)
        logger.info("[startup] Score store: %s", self.store_name)

        self.cache = SnapshotCache(
            self.store,
            ttl_seconds=config.snapshot_ttl_seconds,
            config=self.rating_config,
        )

    @property
    def store_name(self) -> str:
        return type(self.store).__name__

    def _load_rating_config(self, config: ServerConfig) -> RatingConfig:
        """RatingConfig from RATING_CONFIG_PATH, or defaults when unset or unreadable."""
        if config.rating_config_path is None:
            return DEFAULT_CONFIG
        path = Path(config.rating_config_path)
        try:
            with open(path) as f:
                rating_config = RatingConfig.from_dict(json.load(f))
        except (OSError, json.JSONDecodeError, ValidationError) as e:
            logger.warning("[startup] Rating config %s not usable (%s); using defaults", path, e)
            return DEFAULT_CONFIG
        logger.info("[startup] Rating config: %s", path)
        return rating_config

    def _create_store(self, config: ServerConfig) -> ScoreStore:
        """Create score store from config (JSON or Firestore); empty in-memory when neither works."""
        if config.data_source == "firebase":
            cred_path = config.firebase_credentials_path
            if cred_path is not None and not Path(cred_path).is_file():
                logger.warning(
                    "[startup] Firestore score store skipped: credentials path not found or not a file: %s",
                    cred_path,
                )
            else:
                try:
                    return FirestoreScoreStore(
                        project_id=config.firebase_project_id,
                        credentials_path=cred_path,
                        collection=config.scores_collection,
                    )
                except (ValueError, OSError, GoogleAuthError) as e:
                    logger.warning("[startup] Firestore score store init failed: %s", e)
        elif config.data_source == "json":
            if config.scores_json_path is None:
                logger.warning("[startup] DATA_SOURCE=json but SCORES_JSON_PATH is not set")
            else:
                try:
                    return JsonScoreStore(config.scores_json_path)
                except FileNotFoundError as e:
                    logger.warning("[startup] JSON score store skipped: %s", e)
        logger.info("[startup] No score store configured; serving an empty snapshot")
        return InMemoryScoreStore()


_state: Optional[AppState] = None


def get_state() -> AppState:
    global _state
    if _state is None:
        config = get_config()
        _state = AppState(config)
    return _state


def set_state(state: Optional[AppState]) -> None:
    """Install a prebuilt state (tests), or None to rebuild from config on next access."""
    global _state
    _state = state
