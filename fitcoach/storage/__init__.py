"""Workout persistence.

Usage:
    from fitcoach.storage import JsonFileKeyValueStore, WorkoutStore

    store = WorkoutStore(JsonFileKeyValueStore("~/.fitcoach/workouts.json"))
    workouts = await store.list_all()
"""

from .backends import CorruptStoreError, InMemoryKeyValueStore, JsonFileKeyValueStore, KeyValueStore
from .workouts import SAVED_WORKOUTS_KEY, WorkoutStore, sample_workouts

__all__ = [
    "CorruptStoreError",
    "InMemoryKeyValueStore",
    "JsonFileKeyValueStore",
    "KeyValueStore",
    "SAVED_WORKOUTS_KEY",
    "WorkoutStore",
    "sample_workouts",
]
