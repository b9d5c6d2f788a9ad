"""
Server Configuration

Loads configuration from environment variables and provides defaults.
Supports loading from .env file using python-dotenv.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

# Single .env at the project root
root_env = Path(__file__).resolve().parent.parent / ".env"
if root_env.exists():
    load_dotenv(root_env)

DATA_SOURCES = ("json", "firebase")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class ServerConfig:
    """Server configuration."""

    # Server settings
    host: str = "0.0.0.0"
    port: int = 8000
    log_level: str = "INFO"

    # Data source: "json" | "firebase" | None (empty in-memory store)
    data_source: Optional[str] = None
    # When data_source=json: path to a JSON array of score documents
    scores_json_path: Optional[Path] = None
    # When data_source=firebase: service account JSON, optional project id, collection name
    firebase_credentials_path: Optional[Path] = None
    firebase_project_id: Optional[str] = None
    scores_collection: str = "scores"

    # Seconds a fetched snapshot is served before the store is read again
    snapshot_ttl_seconds: float = 300.0

    # Optional JSON file for RatingConfig.from_dict
    rating_config_path: Optional[Path] = None

    @classmethod
    def from_env(cls) -> "ServerConfig":
        """Load configuration from environment variables."""
        base_dir = Path(__file__).parent.parent
        data_source = os.getenv("DATA_SOURCE", "").strip().lower() or None
        if data_source and data_source not in DATA_SOURCES:
            data_source = None

        def _path_env(key: str, default: Optional[Path] = None) -> Optional[Path]:
            v = os.getenv(key)
            if not v:
                return default
            p = Path(v)
            return p if p.is_absolute() else (base_dir / p).resolve()

        return cls(
            host=os.getenv("HOST", "0.0.0.0"),
            port=int(os.getenv("PORT", "8000")),
            log_level=os.getenv("LOG_LEVEL", "INFO").strip().upper() or "INFO",
            data_source=data_source,
            scores_json_path=_path_env("SCORES_JSON_PATH"),
            firebase_credentials_path=_path_env("FIREBASE_CREDENTIALS_PATH") or _path_env("GOOGLE_APPLICATION_CREDENTIALS"),
            firebase_project_id=os.getenv("FIREBASE_PROJECT_ID") or None,
            scores_collection=os.getenv("SCORES_COLLECTION", "scores").strip() or "scores",
            snapshot_ttl_seconds=float(os.getenv("SNAPSHOT_TTL_SECONDS", "300")),
            rating_config_path=_path_env("RATING_CONFIG_PATH"),
        )

    def validate(self) -> tuple[bool, list[str]]:
        """
        Validate the configuration.

        Returns:
            (is_valid, list_of_errors)
        """
        errors = []

        if self.data_source == "json":
            if self.scores_json_path is None:
                errors.append("DATA_SOURCE=json requires SCORES_JSON_PATH")
            elif not self.scores_json_path.is_file():
                errors.append(f"Scores JSON not found: {self.scores_json_path}")

        if self.data_source == "firebase" and self.firebase_credentials_path is not None:
            if not self.firebase_credentials_path.is_file():
                errors.append(f"Firebase credentials file not found: {self.firebase_credentials_path}")

        if self.rating_config_path is not None and not self.rating_config_path.is_file():
            errors.append(f"Rating config not found: {self.rating_config_path}")

        if self.snapshot_ttl_seconds < 0:
            errors.append(f"SNAPSHOT_TTL_SECONDS must not be negative, got {self.snapshot_ttl_seconds}")

        if self.log_level not in LOG_LEVELS:
            errors.append(f"Unknown LOG_LEVEL: {self.log_level}")

        return len(errors) == 0, errors


# Global config instance
_config: Optional[ServerConfig] = None


def get_config() -> ServerConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _config = ServerConfig.from_env()
    return _config


def reload_config() -> ServerConfig:
    """Reload configuration from environment."""
    global _config
    _config = None
    return get_config()
