"""
Score Store abstraction.

Supplies the raw score documents the rating engine runs on. One bulk read per
refresh; the engine never talks to storage itself. Implementations: in-memory
(tests, empty fallback), JSON file (local), Firestore (production). Swap via
DATA_SOURCE.
"""

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Protocol, Union


class ScoreStoreError(Exception):
    """A store could not be read. Routes turn this into HTTP 503."""


class ScoreStore(Protocol):
    """Protocol for reading every stored score document."""

    def fetch_scores(self) -> List[Dict[str, Any]]:
        """
        Return all score documents as plain dicts.
        Documents are passed to the engine as is; malformed ones are excluded there.
        Raises ScoreStoreError when the backing storage cannot be read.
        """
        ...


class InMemoryScoreStore:
    """
    Score store over a list held in memory.
    Used by tests and as the fallback when no configured store can be built.
    """

    def __init__(self, records: Optional[Iterable[Dict[str, Any]]] = None):
        self._records: List[Dict[str, Any]] = [dict(r) for r in (records or [])]

    def fetch_scores(self) -> List[Dict[str, Any]]:
        return [dict(r) for r in self._records]

    def add(self, record: Dict[str, Any]) -> None:
        self._records.append(dict(record))


class JsonScoreStore:
    """
    Score store backed by a JSON file.
    Used when DATA_SOURCE=json; the path comes from SCORES_JSON_PATH.
    Accepts a top-level array, or an object with a "scores" array.
    The file is re-read on every fetch so edits show up on the next refresh.
    """

    def __init__(self, path: Union[Path, str]):
        self._path = Path(path)
        if not self._path.exists():
            raise FileNotFoundError(f"Scores JSON not found: {self._path}")

    @property
    def path(self) -> Path:
        return self._path

    def fetch_scores(self) -> List[Dict[str, Any]]:
        try:
            with open(self._path) as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ScoreStoreError(f"Could not read {self._path}: {e}") from e
        scores = data.get("scores", []) if isinstance(data, dict) else data
        if not isinstance(scores, list):
            raise ScoreStoreError(f"Expected a list of scores in {self._path}")
        return [s for s in scores if isinstance(s, dict)]
