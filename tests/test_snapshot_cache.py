"""Snapshot cache and score store tests (no network, injected clock)."""

import json
from datetime import datetime, timedelta, timezone

import pytest

from server.services import (
    InMemoryScoreStore,
    JsonScoreStore,
    ScoreStoreError,
    SnapshotCache,
)

from conftest import MONDAY, score

T0 = datetime(2025, 7, 14, 0, 0, tzinfo=timezone.utc)


class CountingStore(InMemoryScoreStore):
    def __init__(self, records=None):
        super().__init__(records)
        self.reads = 0

    def fetch_scores(self):
        self.reads += 1
        return super().fetch_scores()


class FailingStore:
    def fetch_scores(self):
        raise ScoreStoreError("offline")


class TestSnapshotCache:

    def test_first_get_fetches(self):
        store = CountingStore([score("Ann", 3, MONDAY)])
        cache = SnapshotCache(store, ttl_seconds=60)
        cached = cache.get(T0)
        assert store.reads == 1
        assert cached.fetched_at == T0
        assert len(cached.snapshot.records) == 1

    def test_serves_cached_within_ttl(self):
        store = CountingStore()
        cache = SnapshotCache(store, ttl_seconds=60)
        cache.get(T0)
        cache.get(T0 + timedelta(seconds=59))
        assert store.reads == 1

    def test_refetches_when_expired(self):
        store = CountingStore()
        cache = SnapshotCache(store, ttl_seconds=60)
        cache.get(T0)
        store.add(score("Ann", 3, MONDAY))
        cached = cache.get(T0 + timedelta(seconds=60))
        assert store.reads == 2
        assert cached.snapshot.player_names == ["Ann"]

    def test_force_refresh(self):
        store = CountingStore()
        cache = SnapshotCache(store, ttl_seconds=60)
        cache.get(T0)
        cache.get(T0, force_refresh=True)
        assert store.reads == 2

    def test_invalidate(self):
        store = CountingStore()
        cache = SnapshotCache(store, ttl_seconds=60)
        cache.get(T0)
        cache.invalidate()
        assert cache.cached is None
        cache.get(T0)
        assert store.reads == 2

    def test_store_errors_propagate(self):
        cache = SnapshotCache(FailingStore(), ttl_seconds=60)
        with pytest.raises(ScoreStoreError):
            cache.get(T0)
        assert cache.cached is None

    def test_age(self):
        cache = SnapshotCache(CountingStore(), ttl_seconds=60)
        cached = cache.get(T0)
        assert cached.age_seconds(T0 + timedelta(seconds=30)) == pytest.approx(30)


class TestJsonScoreStore:

    def test_reads_array(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text(json.dumps([score("Ann", 3, MONDAY), "junk"]))
        assert [r["name"] for r in JsonScoreStore(path).fetch_scores()] == ["Ann"]

    def test_reads_wrapped_object(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text(json.dumps({"scores": [score("Ann", 3, MONDAY)]}))
        assert len(JsonScoreStore(path).fetch_scores()) == 1

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            JsonScoreStore(tmp_path / "missing.json")

    def test_corrupt_file(self, tmp_path):
        path = tmp_path / "scores.json"
        path.write_text("{not json")
        with pytest.raises(ScoreStoreError):
            JsonScoreStore(path).fetch_scores()
