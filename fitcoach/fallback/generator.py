"""Deterministic workout text used whenever the AI service is unavailable.

Everything here is a pure function of its arguments: no I/O, no randomness,
no clock. Identical inputs always produce byte-identical text.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from fitcoach.schemas.workout import FitnessLevel

logger = logging.getLogger(__name__)

_B, _I, _A = FitnessLevel.BEGINNER, FitnessLevel.INTERMEDIATE, FitnessLevel.ADVANCED

REPS_BY_LEVEL: dict[FitnessLevel, dict[str, str]] = {
    _B: {
        "push-ups": "5-10",
        "squats": "10-15",
        "lunges": "8-12",
        "bridges": "10-15",
        "press": "8-12",
        "rows": "8-12",
    },
    _I: {
        "push-ups": "10-18",
        "squats": "15-25",
        "lunges": "12-18",
        "bridges": "15-20",
        "press": "12-18",
        "rows": "12-18",
    },
    _A: {
        "push-ups": "18-25",
        "squats": "25-35",
        "lunges": "18-25",
        "bridges": "20-30",
        "press": "15-25",
        "rows": "15-25",
    },
}
DEFAULT_REPS = {_B: "8-12", _I: "12-18", _A: "18-25"}

TIME_BY_LEVEL = {_B: "20-30 seconds", _I: "30-45 seconds", _A: "45-60 seconds"}
CARDIO_BURPEES = {_B: "5-8", _I: "8-12", _A: "12-15"}
WEIGHT_LOSS_BURPEES = {_B: "5-8", _I: "8-10", _A: "10-15"}
PLANK_TO_DOWNWARD_DOG = {_B: "8-10", _I: "10-12", _A: "12-15"}

ROUNDS = {_B: 2, _I: 3, _A: 4}
REST_BETWEEN_EXERCISES = {_B: "60-90", _I: "45-60", _A: "30-45"}
REST_BETWEEN_ROUNDS = {_B: "2-3", _I: "1.5-2", _A: "1-1.5"}

WARMUP = (
    "Arm circles: 30 seconds",
    "Leg swings: 30 seconds each leg",
    "Jumping jacks: 1 minute",
    "Dynamic stretching: 2 minutes",
)

COOLDOWN = (
    "Forward fold stretch: 30 seconds",
    "Quad stretch: 30 seconds each leg",
    "Shoulder stretch: 30 seconds each arm",
    "Deep breathing: 2 minutes",
)

# (goal keyword, tip); first keyword found in any goal wins.
GOAL_TIPS = (
    ("strength", "Focus on progressive overload - gradually increase weight or reps"),
    ("weight", "Maintain a slight calorie deficit and combine with cardio"),
    ("endurance", "Gradually increase workout duration and intensity"),
    ("muscle", "Eat adequate protein and allow proper rest between sessions"),
)
DEFAULT_GOAL_TIP = "Consistency is key - aim for 3-4 workouts per week"

WARMUP_MINUTES = 5
COOLDOWN_MINUTES = 5
MIN_MAIN_MINUTES = 5


def coerce_level(level: FitnessLevel | str) -> FitnessLevel:
    """Map any level value onto the enum, defaulting to Intermediate."""
    try:
        return FitnessLevel(level)
    except ValueError:
        logger.warning("Unknown fitness level %r, using Intermediate", level)
        return FitnessLevel.INTERMEDIATE


def reps_for(level: FitnessLevel, category: str) -> str:
    return REPS_BY_LEVEL[level].get(category, DEFAULT_REPS[level])


def _mentions(values: Sequence[str], *keywords: str) -> bool:
    return any(k in v.lower() for v in values for k in keywords)


def strength_exercises(level: FitnessLevel, equipment: Sequence[str]) -> list[str]:
    if _mentions(equipment, "dumbbell", "barbell"):
        return [
            f"Dumbbell squats: {reps_for(level, 'squats')}",
            f"Dumbbell chest press: {reps_for(level, 'press')}",
            f"Dumbbell rows: {reps_for(level, 'rows')}",
            f"Dumbbell overhead press: {reps_for(level, 'press')}",
        ]
    if _mentions(equipment, "band"):
        return [
            f"Band squats: {reps_for(level, 'squats')}",
            f"Band chest press: {reps_for(level, 'press')}",
            f"Band rows: {reps_for(level, 'rows')}",
            f"Band shoulder press: {reps_for(level, 'press')}",
        ]
    return [
        f"Push-ups: {reps_for(level, 'push-ups')}",
        f"Squats: {reps_for(level, 'squats')}",
        f"Pike push-ups: {reps_for(level, 'push-ups')}",
        f"Single-leg glute bridges: {reps_for(level, 'bridges')} per leg",
    ]


def cardio_exercises(level: FitnessLevel) -> list[str]:
    return [
        f"Burpees: {CARDIO_BURPEES[level]}",
        f"Mountain climbers: {TIME_BY_LEVEL[level]}",
        f"Jump squats: {reps_for(level, 'squats')}",
        f"High knees: {TIME_BY_LEVEL[level]}",
    ]


def weight_loss_exercises(level: FitnessLevel) -> list[str]:
    return [
        f"Burpees: {WEIGHT_LOSS_BURPEES[level]}",
        f"Squat to calf raise: {reps_for(level, 'squats')}",
        f"Push-up to T: {reps_for(level, 'push-ups')}",
        f"Plank to downward dog: {PLANK_TO_DOWNWARD_DOG[level]}",
    ]


def general_fitness_exercises(level: FitnessLevel) -> list[str]:
    return [
        f"Push-ups: {reps_for(level, 'push-ups')}",
        f"Squats: {reps_for(level, 'squats')}",
        f"Plank: {TIME_BY_LEVEL[level]}",
        f"Lunges: {reps_for(level, 'lunges')} per leg",
    ]


def select_exercises(
    goals: Sequence[str], level: FitnessLevel, equipment: Sequence[str]
) -> list[str]:
    """Pick the exercise block for the goals; the first matching rule wins."""
    if _mentions(goals, "strength") and equipment:
        return strength_exercises(level, equipment)
    if _mentions(goals, "cardio", "endurance"):
        return cardio_exercises(level)
    if _mentions(goals, "weight", "fat"):
        return weight_loss_exercises(level)
    return general_fitness_exercises(level)


def goal_specific_tip(goals: Sequence[str]) -> str:
    for keyword, tip in GOAL_TIPS:
        if _mentions(goals, keyword):
            return tip
    return DEFAULT_GOAL_TIP


def _bullets(items: Sequence[str]) -> str:
    return "\n".join(f"• {item}" for item in items)


def generate_fallback(
    goals: Sequence[str],
    level: FitnessLevel | str,
    minutes: int,
    equipment: Sequence[str] = (),
) -> str:
    """Build a complete workout plan as display text.

    Args:
        goals: Free-form goal strings, e.g. ``["Build strength"]``.
        level: Fitness level; unknown values are treated as Intermediate.
        minutes: Total session length including warm-up and cool-down.
        equipment: Available equipment names; empty means bodyweight only.

    Returns:
        Multi-section text: profile, warm-up, main workout, cool-down, tips.
    """
    level = coerce_level(level)
    main_minutes = max(minutes - WARMUP_MINUTES - COOLDOWN_MINUTES, MIN_MAIN_MINUTES)
    exercises = select_exercises(goals, level, equipment)
    equipment_text = ", ".join(equipment) if equipment else "Bodyweight only"

    sections = [
        "🏋️‍♀️ FitSoul Personalized Workout",
        "\n".join(
            [
                "🎯 YOUR PROFILE:",
                f"• Goals: {', '.join(goals)}",
                f"• Level: {level.value}",
                f"• Duration: {minutes} minutes",
                f"• Equipment: {equipment_text}",
            ]
        ),
        f"🔥 WARM-UP ({WARMUP_MINUTES} minutes)\n{_bullets(WARMUP)}",
        "\n".join(
            [
                f"💪 MAIN WORKOUT ({main_minutes} minutes)",
                f"Complete {ROUNDS[level]} rounds:",
                "",
                _bullets(exercises),
                "",
                f"Rest: {REST_BETWEEN_EXERCISES[level]} seconds between exercises",
                f"Rest: {REST_BETWEEN_ROUNDS[level]} minutes between rounds",
            ]
        ),
        f"🧘‍♀️ COOL-DOWN ({COOLDOWN_MINUTES} minutes)\n{_bullets(COOLDOWN)}",
        "💡 EXPERT TIPS:\n"
        + _bullets(
            [
                "Focus on controlled movements and proper form",
                "Breathe consistently - exhale on exertion",
                "Stay hydrated throughout your workout",
                goal_specific_tip(goals),
                "Track your reps and sets for progression",
            ]
        ),
        "🌟 You've got this! Every rep counts toward your goals!",
    ]
    return "\n\n".join(sections)


def generate_quick_workout_fallback(duration: int, equipment: str = "bodyweight") -> str:
    return f"""\
🔥 Quick {duration}-Minute FitSoul Workout

⚡ High-Energy Circuit (Complete 2-3 rounds):

💪 Round 1: Power Moves
• Jumping Jacks: 30 seconds
• Push-ups: 15 reps (modify as needed)
• Bodyweight Squats: 20 reps
• Plank Hold: 30 seconds
• Rest: 30 seconds

🏃 Round 2: Cardio Blast
• High Knees: 30 seconds
• Burpees: 8-10 reps
• Mountain Climbers: 30 seconds
• Lunges: 10 per leg
• Rest: 30 seconds

🎯 Finisher (if time allows):
• Wall Sit: 45 seconds
• Calf Raises: 20 reps

💡 Quick Tips:
• Stay hydrated during your workout
• Focus on form over speed
• Take breaks when needed
• You've got this!

Equipment Used: {equipment}
Total Time: Approximately {duration} minutes"""


# keyword -> (display name, setup, execution, mistakes, pro tips)
FORM_GUIDES: dict[str, tuple[str, tuple[str, ...], tuple[str, ...], tuple[str, ...], tuple[str, ...]]] = {
    "push-up": (
        "Push-ups",
        (
            "Start in plank position, hands slightly wider than shoulders",
            "Keep body in straight line from head to heels",
            "Engage core and glutes throughout movement",
        ),
        (
            "Lower chest toward ground with control (2-3 seconds)",
            "Push up explosively while maintaining form (1 second)",
            "Keep elbows at 45-degree angle to body",
            "Full range of motion - chest touches ground",
        ),
        (
            "Sagging hips or piking up",
            "Flaring elbows out too wide",
            "Partial range of motion",
        ),
        (
            "Squeeze shoulder blades at bottom",
            "Breathe in going down, out going up",
            "Modify on knees if needed",
        ),
    ),
    "squat": (
        "Squats",
        (
            "Feet shoulder-width apart, toes slightly turned out",
            "Chest up, shoulders back, core braced",
            "Weight evenly distributed across feet",
        ),
        (
            "Initiate by pushing hips back (like sitting in chair)",
            "Lower until thighs parallel to ground",
            "Drive through heels to return to standing",
            "Keep knees tracking over toes",
        ),
        (
            "Knees caving inward",
            "Rising on toes/heels coming up",
            "Rounding back or looking down",
        ),
        (
            "Keep weight in heels and mid-foot",
            "Pretend you're sitting back into a chair",
            "Go as deep as mobility allows with good form",
        ),
    ),
    "plank": (
        "Plank",
        (
            "Forearms on ground, elbows directly under shoulders",
            "Legs extended, balancing on toes",
            "Body forms straight line from head to heels",
        ),
        (
            "Engage core by pulling belly button to spine",
            "Squeeze glutes and keep legs straight",
            "Maintain neutral spine - don't look up or down",
            "Breathe normally throughout hold",
        ),
        (
            "Sagging hips below straight line",
            "Piking hips up too high",
            "Holding breath",
        ),
        (
            "Focus on quality over duration",
            "Start with shorter holds (15-30 seconds)",
            "Imagine balancing a glass of water on your back",
        ),
    ),
    "lunge": (
        "Lunges",
        (
            "Stand tall with feet hip-width apart",
            "Hands on hips or at sides",
            "Engage core for stability",
        ),
        (
            "Step forward with one leg (large step)",
            "Lower hips until both knees at 90 degrees",
            "Front thigh parallel to ground, back knee nearly touches floor",
            "Push through front heel to return to start",
        ),
        (
            "Step too short or too long",
            "Leaning forward over front leg",
            "Pushing off back foot instead of front",
        ),
        (
            "Keep most weight on front leg",
            "Step straight down, not forward on return",
            "Control the descent for maximum benefit",
        ),
    ),
}

GENERIC_FORM_SECTIONS = (
    (
        "✅ FUNDAMENTAL PRINCIPLES:",
        (
            "Maintain proper posture and alignment",
            "Control the movement in both directions",
            "Engage your core throughout",
            "Use full range of motion when possible",
        ),
    ),
    (
        "🎯 BREATHING PATTERN:",
        (
            "Exhale during the exertion phase",
            "Inhale during the lowering/easier phase",
            "Never hold your breath during exercise",
        ),
    ),
    (
        "⚠️ SAFETY REMINDERS:",
        (
            "Quality always trumps quantity",
            "Stop if you feel sharp pain",
            "Warm up before and stretch after",
        ),
    ),
    (
        "💡 PROGRESSION TIPS:",
        (
            "Master bodyweight before adding resistance",
            "Gradually increase difficulty over time",
            "Focus on consistency rather than perfection",
        ),
    ),
)


def generate_form_tips_fallback(exercise: str) -> str:
    """Form guide for common movements, or general principles otherwise."""
    lowered = exercise.lower()
    for keyword, (title, setup, execution, mistakes, tips) in FORM_GUIDES.items():
        if keyword in lowered:
            sections = (
                ("✅ SETUP:", setup),
                ("🎯 EXECUTION:", execution),
                ("⚠️ COMMON MISTAKES:", mistakes),
                ("💡 PRO TIPS:", tips),
            )
            break
    else:
        title, sections = exercise, GENERIC_FORM_SECTIONS

    body = "\n\n".join(f"{header}\n{_bullets(items)}" for header, items in sections)
    return f"🏋️ Perfect Form: {title}\n\n{body}"
