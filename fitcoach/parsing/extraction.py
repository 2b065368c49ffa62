"""Best-effort extraction of a structured workout from AI-generated prose.

Each field has its own rule (pattern, capture group, post-processing and
default) applied to the raw text independently of the others, so a miss on
one field never affects another. The only dependency is duration, which
falls back to a value inferred from the number of exercises found.

Extraction never raises: every field degrades to its default.
"""

from __future__ import annotations

import logging
import re
import uuid
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fitcoach.schemas.workout import FitnessLevel, Workout, now_ms

logger = logging.getLogger(__name__)

DEFAULT_NAME = "AI Generated Workout"
DEFAULT_DESCRIPTION = "AI-generated personalized workout plan"
DEFAULT_EXERCISES = ["Push-ups", "Squats", "Plank", "Jumping Jacks"]
DEFAULT_MUSCLE_GROUPS = ["Full Body"]

MAX_NAME_LENGTH = 60
MAX_DESCRIPTION_LENGTH = 120
MAX_EXERCISES = 10
MAX_MUSCLE_GROUPS = 3

# Lines carrying these glyphs are section headers, not descriptions.
_HEADER_GLYPHS = ("🔥", "💪")


@dataclass(frozen=True)
class FieldRule:
    """How to pull one field out of free text.

    ``find_all`` rules collect every match in document order; the others use
    the first match only. ``post`` turns the raw captures into the field
    value, returning ``None`` (or an empty list) when nothing usable was found,
    in which case ``default`` is used.
    """

    name: str
    pattern: re.Pattern[str]
    group: int = 0
    post: Callable[[list[str]], Any] = lambda matches: matches[0] if matches else None
    default: Any = None
    find_all: bool = False

    def matches(self, text: str) -> list[str]:
        if self.find_all:
            return [m.group(self.group) for m in self.pattern.finditer(text)]
        match = self.pattern.search(text)
        return [match.group(self.group)] if match else []

    def apply(self, text: str) -> Any:
        value = self.post(self.matches(text))
        if value is None or value == []:
            return self.default() if callable(self.default) else self.default
        return value


def _first_stripped(limit: int) -> Callable[[list[str]], str | None]:
    def post(matches: list[str]) -> str | None:
        if not matches:
            return None
        value = matches[0].strip()[:limit]
        return value or None

    return post


def _exercise_names(matches: list[str]) -> list[str]:
    names = [m.strip() for m in matches]
    return [n for n in names if len(n) > 3][:MAX_EXERCISES]


def _muscle_labels(matches: list[str]) -> list[str]:
    labels: list[str] = []
    for raw in matches:
        label = raw.lower().title()
        if label not in labels:
            labels.append(label)
    return labels[:MAX_MUSCLE_GROUPS]


def _positive_int(matches: list[str]) -> int | None:
    if not matches:
        return None
    try:
        value = int(matches[0])
    except ValueError:
        # Digit runs beyond the interpreter's int conversion limit.
        return None
    return value if value > 0 else None


def _capitalized(matches: list[str]) -> str | None:
    return matches[0].lower().capitalize() if matches else None


TITLE_RULE = FieldRule(
    name="name",
    pattern=re.compile(r"(?:^|\n)\s*(?:🔥|💪|🏋️|📋|Workout:\s*)?([A-Z][^.\n]{10,80})"),
    group=1,
    post=_first_stripped(MAX_NAME_LENGTH),
    default=DEFAULT_NAME,
)

EXERCISES_RULE = FieldRule(
    name="exercises",
    pattern=re.compile(r"(?:•|-|▪|[0-9]+\.)\s*([A-Za-z][^:\n]{5,50})"),
    group=1,
    post=_exercise_names,
    default=lambda: list(DEFAULT_EXERCISES),
    find_all=True,
)

MUSCLE_GROUPS_RULE = FieldRule(
    name="targetMuscleGroups",
    pattern=re.compile(
        r"(chest|back|legs|arms|shoulders|core|abs|cardio|full body|glutes|biceps|triceps)",
        re.IGNORECASE,
    ),
    group=1,
    post=_muscle_labels,
    default=lambda: list(DEFAULT_MUSCLE_GROUPS),
    find_all=True,
)

DURATION_RULE = FieldRule(
    name="duration",
    pattern=re.compile(r"(\d+)\s*(?:min|minutes?)", re.IGNORECASE),
    group=1,
    post=_positive_int,
)

DIFFICULTY_RULE = FieldRule(
    name="difficulty",
    pattern=re.compile(r"(beginner|intermediate|advanced)", re.IGNORECASE),
    group=1,
    post=_capitalized,
    default=FitnessLevel.INTERMEDIATE.value,
)


def duration_from_exercise_count(count: int) -> int:
    if count <= 4:
        return 20
    if count <= 6:
        return 30
    if count <= 8:
        return 45
    return 60


def estimate_calories(duration: int) -> int:
    """Coarse calorie estimate bucketed by duration alone."""
    if duration <= 20:
        return 150
    if duration <= 35:
        return 250
    if duration <= 50:
        return 350
    return 450


def extract_description(text: str) -> str:
    for line in text.split("\n"):
        stripped = line.strip()
        if len(stripped) > 20 and not any(g in line for g in _HEADER_GLYPHS):
            return stripped[:MAX_DESCRIPTION_LENGTH]
    return DEFAULT_DESCRIPTION


def extract_workout(text: str, clock: Callable[[], int] = now_ms) -> Workout:
    """Turn free-form workout text into a ``Workout`` with a fresh id.

    Args:
        text: Raw text, typically an AI reply. May be empty.
        clock: Returns "now" in epoch milliseconds, for ``dateGenerated``.

    Returns:
        A Workout where every field that could not be extracted holds its
        default.
    """
    text = text or ""

    found = EXERCISES_RULE.post(EXERCISES_RULE.matches(text))
    exercises = found or EXERCISES_RULE.default()
    duration = DURATION_RULE.apply(text)
    if duration is None:
        # Inferred from what was actually found, before the default list.
        duration = duration_from_exercise_count(len(found))

    workout = Workout(
        id=str(uuid.uuid4()),
        name=TITLE_RULE.apply(text),
        description=extract_description(text),
        duration=duration,
        difficulty=DIFFICULTY_RULE.apply(text),
        exercises=exercises,
        targetMuscleGroups=MUSCLE_GROUPS_RULE.apply(text),
        caloriesEstimate=estimate_calories(duration),
        dateGenerated=clock(),
    )
    logger.info(
        "Parsed workout: %s (%dmin, %s, %d exercises)",
        workout.name,
        workout.duration,
        workout.difficulty,
        len(workout.exercises),
    )
    return workout
