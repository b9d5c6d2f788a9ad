"""Backing logic: score stores and the snapshot cache."""

from .firestore_score_store import FirestoreScoreStore
from .score_store import InMemoryScoreStore, JsonScoreStore, ScoreStore, ScoreStoreError
from .snapshot_cache import CachedSnapshot, SnapshotCache

__all__ = [
    "FirestoreScoreStore",
    "InMemoryScoreStore",
    "JsonScoreStore",
    "ScoreStore",
    "ScoreStoreError",
    "CachedSnapshot",
    "SnapshotCache",
]
