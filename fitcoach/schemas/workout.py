from __future__ import annotations

import time
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


def now_ms() -> int:
    return int(time.time() * 1000)


class FitnessLevel(str, Enum):
    BEGINNER = "Beginner"
    INTERMEDIATE = "Intermediate"
    ADVANCED = "Advanced"

    @classmethod
    def _missing_(cls, value: object) -> FitnessLevel | None:
        # Accept "beginner", "ADVANCED", " Intermediate " and so on.
        if isinstance(value, str):
            wanted = value.strip().lower()
            for member in cls:
                if member.value.lower() == wanted:
                    return member
        return None


class Workout(BaseModel):
    """A saved workout. Field names match the persisted JSON document."""

    # Stored documents may carry fields newer or older app versions wrote.
    model_config = ConfigDict(extra="ignore")

    id: str
    name: str
    description: str
    duration: int
    difficulty: str = FitnessLevel.INTERMEDIATE.value
    exercises: list[str]
    targetMuscleGroups: list[str]
    caloriesEstimate: int
    dateGenerated: int = Field(default_factory=now_ms)
    completionCount: int = 0
    lastCompleted: int | None = None


class GenerationRequest(BaseModel):
    goals: list[str]
    fitnessLevel: FitnessLevel = FitnessLevel.INTERMEDIATE
    availableTime: int = Field(default=30, gt=0)
    equipment: list[str] = []


class QuickWorkoutRequest(BaseModel):
    duration: int = Field(default=15, gt=0)
    equipment: str = "bodyweight"


class FormTipsRequest(BaseModel):
    exercise: str = Field(min_length=1)


class SaveFromTextRequest(BaseModel):
    content: str


class SaveWorkoutRequest(Workout):
    """A workout posted by a client; stored documents are not held to these bounds."""

    name: str = Field(min_length=1, max_length=60)
    description: str = Field(max_length=120)
    duration: int = Field(gt=0)
    exercises: list[str] = Field(min_length=1)
    targetMuscleGroups: list[str] = Field(min_length=1, max_length=3)
    caloriesEstimate: int = Field(gt=0)


class PrebuiltWorkoutRequest(BaseModel):
    kind: str | None = None
    # Free text to pick a kind from when ``kind`` is not given.
    text: str = ""
    fitnessLevel: FitnessLevel = FitnessLevel.INTERMEDIATE
    minutes: int | None = Field(default=None, gt=0)
