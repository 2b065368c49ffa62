"""Tests for workout extraction from free text."""

import pytest

from fitcoach.parsing.extraction import (
    DEFAULT_DESCRIPTION,
    DEFAULT_EXERCISES,
    DEFAULT_NAME,
    DIFFICULTY_RULE,
    DURATION_RULE,
    MUSCLE_GROUPS_RULE,
    duration_from_exercise_count,
    estimate_calories,
    extract_description,
    extract_workout,
)

AI_REPLY = """\
Full Body Power
This session builds strength across your chest, back and legs.
Duration: 40 minutes

🔥 WARM-UP (5 minutes)
• Arm circles: 30 seconds
• Jumping jacks: 1 minute

💪 MAIN WORKOUT (30 minutes)
1. Goblet squats: 3 x 12
2. Push-ups: 3 x 10
3. Bent-over rows: 3 x 12
• Mountain climbers: 30 seconds

Level: Intermediate
"""

ODD_INPUTS = [
    "",
    "   ",
    "\n\n\n",
    "x" * 5000,
    "A" * 200,
    "0 minutes of CHEST CHEST chest",
    "99999999999999999999999999999 min",
    "• a\n• b\n- c",
    "🔥🔥🔥\n💪💪",
    AI_REPLY,
    "\n".join(f"• Exercise number {i}" for i in range(40)),
]


class TestExtractWorkout:
    @pytest.mark.parametrize("text", ODD_INPUTS)
    def test_invariants_hold_for_any_text(self, text):
        workout = extract_workout(text)

        assert workout.id
        assert workout.exercises
        assert 1 <= len(workout.targetMuscleGroups) <= 3
        assert workout.duration > 0
        assert workout.caloriesEstimate > 0
        assert len(workout.name) <= 60
        assert len(workout.description) <= 120
        assert len(workout.exercises) <= 10

    def test_empty_text_uses_defaults(self):
        workout = extract_workout("")

        assert workout.name == DEFAULT_NAME
        assert workout.description == DEFAULT_DESCRIPTION
        assert workout.exercises == ["Push-ups", "Squats", "Plank", "Jumping Jacks"]
        assert workout.targetMuscleGroups == ["Full Body"]
        assert workout.duration == 20
        assert workout.difficulty == "Intermediate"
        assert workout.caloriesEstimate == 150
        assert workout.completionCount == 0
        assert workout.lastCompleted is None

    def test_bulleted_plan(self):
        text = (
            "Strength Training\n• Deadlifts\n• Squats\n• Bench Press\n"
            "Duration: 45 minutes\nLevel: advanced"
        )
        workout = extract_workout(text)

        assert workout.name == "Strength Training"
        assert workout.duration == 45
        assert workout.difficulty == "Advanced"
        assert workout.exercises[:3] == ["Deadlifts", "Squats", "Bench Press"]
        assert workout.caloriesEstimate == 350

    def test_ai_reply(self):
        workout = extract_workout(AI_REPLY)

        assert workout.name == "Full Body Power"
        assert workout.duration == 40
        assert workout.caloriesEstimate == 350
        assert workout.difficulty == "Intermediate"
        assert workout.description == "This session builds strength across your chest, back and legs."
        assert "Goblet squats" in workout.exercises
        assert "Mountain climbers" in workout.exercises
        assert workout.targetMuscleGroups == ["Full Body", "Chest", "Back"]

    def test_uses_clock_for_date(self):
        workout = extract_workout("", clock=lambda: 42)
        assert workout.dateGenerated == 42

    def test_ids_are_unique(self):
        assert extract_workout("").id != extract_workout("").id

    def test_default_exercises_not_shared(self):
        workout = extract_workout("")
        workout.exercises.append("Burpees")
        assert DEFAULT_EXERCISES == ["Push-ups", "Squats", "Plank", "Jumping Jacks"]

    def test_duration_inferred_from_exercise_count(self):
        text = "\n".join(f"• Movement {n}" for n in "ABCDEFG")
        workout = extract_workout(text)

        assert len(workout.exercises) == 7
        assert workout.duration == 45
        assert workout.caloriesEstimate == 350

    def test_short_names_dropped(self):
        workout = extract_workout("• Rows\n• Deadlifts")
        assert workout.exercises == ["Deadlifts"]


class TestFieldRules:
    def test_zero_duration_treated_as_missing(self):
        assert DURATION_RULE.apply("0 minutes") is None

    def test_duration_first_match(self):
        assert DURATION_RULE.apply("10 min warm-up then 25 minutes main") == 10

    def test_difficulty_normalised(self):
        assert DIFFICULTY_RULE.apply("for BEGINNER lifters") == "Beginner"

    def test_difficulty_default(self):
        assert DIFFICULTY_RULE.apply("no level here") == "Intermediate"

    def test_muscle_groups_deduplicated_and_capped(self):
        text = "CHEST day: chest, arms, core, glutes"
        assert MUSCLE_GROUPS_RULE.apply(text) == ["Chest", "Arms", "Core"]


class TestDerivedFields:
    @pytest.mark.parametrize(
        ("count", "expected"),
        [(0, 20), (4, 20), (5, 30), (6, 30), (7, 45), (8, 45), (9, 60), (10, 60)],
    )
    def test_duration_from_exercise_count(self, count, expected):
        assert duration_from_exercise_count(count) == expected

    @pytest.mark.parametrize(
        ("duration", "expected"),
        [(1, 150), (20, 150), (21, 250), (35, 250), (36, 350), (50, 350), (51, 450), (120, 450)],
    )
    def test_estimate_calories(self, duration, expected):
        assert estimate_calories(duration) == expected

    def test_description_skips_headers_and_short_lines(self):
        text = "Short\n🔥 WARM-UP SECTION WITH A LONG HEADER\n  A proper descriptive sentence here.  "
        assert extract_description(text) == "A proper descriptive sentence here."

    def test_description_truncated(self):
        assert extract_description("y" * 300) == "y" * 120
