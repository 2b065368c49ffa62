"""Tests for the workout store and its backends."""

import asyncio
import json
import os
from unittest.mock import patch

import pytest

from fitcoach.schemas.workout import Workout
from fitcoach.storage import (
    SAVED_WORKOUTS_KEY,
    CorruptStoreError,
    InMemoryKeyValueStore,
    JsonFileKeyValueStore,
    WorkoutStore,
)

FIXED_NOW = 1_700_000_000_000


@pytest.fixture
def backend():
    return InMemoryKeyValueStore()


@pytest.fixture
def store(backend):
    return WorkoutStore(backend, clock=lambda: FIXED_NOW)


def _workout(workout_id: str, name: str = "Leg Day") -> Workout:
    return Workout(
        id=workout_id,
        name=name,
        description="Squats and lunges",
        duration=30,
        exercises=["Squats", "Lunges"],
        targetMuscleGroups=["Legs"],
        caloriesEstimate=250,
        dateGenerated=FIXED_NOW,
    )


class TestWorkoutStore:
    def test_empty_store(self, store):
        assert asyncio.run(store.list_all()) == []

    def test_save_prepends(self, store):
        first, second = _workout("a"), _workout("b")
        asyncio.run(store.save(first))
        asyncio.run(store.save(second))

        assert [w.id for w in asyncio.run(store.list_all())] == ["b", "a"]

    def test_save_returns_same_workout(self, store):
        workout = _workout("a")
        assert asyncio.run(store.save(workout)) is workout

    def test_save_requires_id(self, store):
        with pytest.raises(ValueError, match="id must be set"):
            asyncio.run(store.save(_workout("")))

    def test_delete(self, store):
        asyncio.run(store.save(_workout("a")))
        asyncio.run(store.save(_workout("b")))
        asyncio.run(store.delete("a"))

        assert [w.id for w in asyncio.run(store.list_all())] == ["b"]

    def test_delete_missing_is_noop(self, store, backend):
        asyncio.run(store.save(_workout("a")))
        before = backend.read(SAVED_WORKOUTS_KEY)

        asyncio.run(store.delete("missing"))

        assert backend.read(SAVED_WORKOUTS_KEY) == before
        assert [w.id for w in asyncio.run(store.list_all())] == ["a"]

    def test_delete_removes_first_duplicate_only(self, store):
        asyncio.run(store.save(_workout("a", name="Older")))
        asyncio.run(store.save(_workout("a", name="Newer")))
        asyncio.run(store.delete("a"))

        assert [w.name for w in asyncio.run(store.list_all())] == ["Older"]

    def test_get(self, store):
        asyncio.run(store.save(_workout("a")))
        assert asyncio.run(store.get("a")).name == "Leg Day"
        assert asyncio.run(store.get("nope")) is None

    def test_round_trip_preserves_fields(self, store):
        workout = _workout("a").model_copy(update={"completionCount": 4, "lastCompleted": 123})
        asyncio.run(store.save(workout))

        assert asyncio.run(store.list_all()) == [workout]

    def test_save_from_text(self, store):
        saved = asyncio.run(store.save_from_text("Strength Training\n• Deadlifts\n45 minutes"))

        assert saved.name == "Strength Training"
        assert saved.exercises == ["Deadlifts"]
        assert saved.duration == 45
        assert saved.dateGenerated == FIXED_NOW
        assert asyncio.run(store.list_all())[0].id == saved.id


class TestStoredDocument:
    @pytest.mark.parametrize("document", ["not json", "{}", '[{"id": "x"}]', "[1, 2]"])
    def test_corrupt_document_yields_samples(self, document):
        store = WorkoutStore(InMemoryKeyValueStore({SAVED_WORKOUTS_KEY: document}), clock=lambda: FIXED_NOW)
        workouts = asyncio.run(store.list_all())

        assert [w.id for w in workouts] == ["sample_1", "sample_2", "sample_3"]
        assert workouts[0].lastCompleted == FIXED_NOW - 86_400_000

    def test_corrupt_document_replaced_on_save(self):
        backend = InMemoryKeyValueStore({SAVED_WORKOUTS_KEY: "not json"})
        store = WorkoutStore(backend)
        asyncio.run(store.save(_workout("a")))

        assert [w.id for w in asyncio.run(store.list_all())] == ["a"]

    def test_unknown_fields_ignored(self):
        record = _workout("a").model_dump()
        record["favourite"] = True
        backend = InMemoryKeyValueStore({SAVED_WORKOUTS_KEY: json.dumps([record])})

        workouts = asyncio.run(WorkoutStore(backend).list_all())
        assert workouts == [_workout("a")]

    def test_missing_optional_fields_defaulted(self):
        record = _workout("a").model_dump()
        for key in ("difficulty", "completionCount", "lastCompleted"):
            del record[key]
        backend = InMemoryKeyValueStore({SAVED_WORKOUTS_KEY: json.dumps([record])})

        workout = asyncio.run(WorkoutStore(backend).list_all())[0]
        assert workout.difficulty == "Intermediate"
        assert workout.completionCount == 0
        assert workout.lastCompleted is None

    def test_document_uses_wire_field_names(self, store, backend):
        asyncio.run(store.save(_workout("a")))
        record = json.loads(backend.read(SAVED_WORKOUTS_KEY))[0]

        assert set(record) == {
            "id",
            "name",
            "description",
            "duration",
            "difficulty",
            "exercises",
            "targetMuscleGroups",
            "caloriesEstimate",
            "dateGenerated",
            "completionCount",
            "lastCompleted",
        }


class TestJsonFileKeyValueStore:
    def test_missing_file(self, tmp_path):
        assert JsonFileKeyValueStore(tmp_path / "store.json").read("k") is None

    def test_write_then_read(self, tmp_path):
        path = tmp_path / "nested" / "store.json"
        backend = JsonFileKeyValueStore(path)
        backend.write("k", "v")
        backend.write("other", "w")

        assert backend.read("k") == "v"
        assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v", "other": "w"}
        assert list(path.parent.iterdir()) == [path]

    @pytest.mark.parametrize(
        "content",
        ["{broken", '{"saved_workouts": [{"id": "x"}]}', "[1, 2]"],
    )
    def test_undecodable_file_lists_samples(self, tmp_path, content):
        path = tmp_path / "store.json"
        path.write_text(content, encoding="utf-8")
        store = WorkoutStore(JsonFileKeyValueStore(path), clock=lambda: FIXED_NOW)

        assert [w.id for w in asyncio.run(store.list_all())] == ["sample_1", "sample_2", "sample_3"]

        asyncio.run(store.save(_workout("a")))
        assert [w.id for w in asyncio.run(store.list_all())] == ["a"]

    def test_undecodable_file_raises_on_read(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{broken", encoding="utf-8")

        with pytest.raises(CorruptStoreError):
            JsonFileKeyValueStore(path).read("k")

    def test_non_string_value_raises(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text('{"k": [1, 2]}', encoding="utf-8")
        backend = JsonFileKeyValueStore(path)

        assert backend.read("other") is None
        with pytest.raises(CorruptStoreError, match="not a string"):
            backend.read("k")

    def test_unreadable_file_replaced_on_write(self, tmp_path):
        path = tmp_path / "store.json"
        path.write_text("{broken", encoding="utf-8")
        backend = JsonFileKeyValueStore(path)

        backend.write("k", "v")
        assert backend.read("k") == "v"

    def test_failed_open_closes_temp_file(self, tmp_path):
        backend = JsonFileKeyValueStore(tmp_path / "store.json")

        with patch("fitcoach.storage.backends.os.fdopen", side_effect=OSError("no handles")), patch(
            "fitcoach.storage.backends.os.close", wraps=os.close
        ) as close:
            with pytest.raises(OSError, match="no handles"):
                backend.write("k", "v")

        close.assert_called_once()
        assert list(tmp_path.iterdir()) == []

    def test_store_persists_across_instances(self, tmp_path):
        path = tmp_path / "workouts.json"
        asyncio.run(WorkoutStore(JsonFileKeyValueStore(path)).save(_workout("a")))

        workouts = asyncio.run(WorkoutStore(JsonFileKeyValueStore(path)).list_all())
        assert [w.id for w in workouts] == ["a"]
