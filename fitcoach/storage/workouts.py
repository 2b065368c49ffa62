"""Persisted list of saved workouts, newest first.

The list lives as one JSON array under a single key. Every mutation reads the
whole document, changes it in memory and writes the whole document back.
There is no locking; a single writer is assumed.
"""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Callable

from pydantic import TypeAdapter

from fitcoach.parsing.extraction import extract_workout
from fitcoach.schemas.workout import Workout, now_ms

from .backends import KeyValueStore

logger = logging.getLogger(__name__)

SAVED_WORKOUTS_KEY = "saved_workouts"

_DAY_MS = 86_400_000
_workout_list = TypeAdapter(list[Workout])


def sample_workouts(now: int) -> list[Workout]:
    """Shown in place of a stored document that cannot be decoded."""
    return [
        Workout(
            id="sample_1",
            name="Morning Energy Boost",
            description="Wake up your body with this energizing routine",
            duration=20,
            difficulty="Beginner",
            exercises=["Jumping Jacks", "Push-ups", "Squats", "Plank"],
            targetMuscleGroups=["Full Body", "Cardio"],
            caloriesEstimate=150,
            dateGenerated=now,
            completionCount=5,
            lastCompleted=now - _DAY_MS,
        ),
        Workout(
            id="sample_2",
            name="Strength Builder Pro",
            description="Build serious strength with compound movements",
            duration=45,
            difficulty="Advanced",
            exercises=["Deadlifts", "Squats", "Bench Press", "Pull-ups", "Overhead Press"],
            targetMuscleGroups=["Chest", "Back", "Legs", "Arms"],
            caloriesEstimate=400,
            dateGenerated=now,
            completionCount=3,
            lastCompleted=now - 2 * _DAY_MS,
        ),
        Workout(
            id="sample_3",
            name="Cardio Blast HIIT",
            description="High-intensity cardio for maximum burn",
            duration=25,
            difficulty="Intermediate",
            exercises=["Burpees", "Mountain Climbers", "High Knees", "Jump Squats", "Sprint Intervals"],
            targetMuscleGroups=["Cardio", "Legs", "Core"],
            caloriesEstimate=300,
            dateGenerated=now,
            completionCount=8,
            lastCompleted=now - 3 * _DAY_MS,
        ),
    ]


def encode_workouts(workouts: list[Workout]) -> str:
    return json.dumps([w.model_dump() for w in workouts], ensure_ascii=False)


def decode_workouts(document: str) -> list[Workout]:
    """Parse a stored document. Raises ``ValueError`` if it is not a valid list."""
    return _workout_list.validate_json(document)


class WorkoutStore:
    def __init__(
        self,
        backend: KeyValueStore,
        key: str = SAVED_WORKOUTS_KEY,
        clock: Callable[[], int] = now_ms,
    ) -> None:
        self._backend = backend
        self._key = key
        self._clock = clock

    async def _read_document(self) -> str | None:
        return await asyncio.to_thread(self._backend.read, self._key)

    async def _load(self) -> list[Workout] | None:
        """Stored workouts, or None when nothing is stored.

        Raises ``ValueError`` when the backend holds data that cannot be
        decoded as a workout list.
        """
        document = await self._read_document()
        if document is None:
            return None
        return decode_workouts(document)

    async def _write(self, workouts: list[Workout]) -> None:
        await asyncio.to_thread(self._backend.write, self._key, encode_workouts(workouts))

    async def _current(self) -> list[Workout]:
        """Stored workouts for a read-modify-write; undecodable reads as empty."""
        try:
            workouts = await self._load()
        except ValueError:
            logger.warning("Discarding undecodable workout document on write")
            return []
        return workouts or []

    async def list_all(self) -> list[Workout]:
        try:
            workouts = await self._load()
        except ValueError as e:
            logger.error("Error loading workouts, using samples: %s", e)
            return sample_workouts(self._clock())
        if workouts is None:
            return []
        logger.info("Loaded %d saved workouts", len(workouts))
        return workouts

    async def get(self, workout_id: str) -> Workout | None:
        return next((w for w in await self.list_all() if w.id == workout_id), None)

    async def save(self, workout: Workout) -> Workout:
        """Prepend ``workout`` and return it unchanged. Its id must be set."""
        if not workout.id:
            raise ValueError("Workout id must be set before saving")
        workouts = await self._current()
        await self._write([workout, *workouts])
        logger.info("Saved workout: %s", workout.name)
        return workout

    async def save_from_text(self, text: str) -> Workout:
        logger.info("Saving workout from AI content: %s...", text[:100])
        return await self.save(extract_workout(text, clock=self._clock))

    async def delete(self, workout_id: str) -> None:
        workouts = await self._current()
        index = next((i for i, w in enumerate(workouts) if w.id == workout_id), None)
        if index is None:
            logger.info("Workout %s not found, nothing to delete", workout_id)
            return
        del workouts[index]
        await self._write(workouts)
        logger.info("Deleted workout: %s", workout_id)
