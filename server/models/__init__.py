"""Pydantic response models for the API."""

from .common import CacheInfo, SnapshotStats

__all__ = [
    "CacheInfo",
    "SnapshotStats",
]
