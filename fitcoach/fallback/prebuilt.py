"""Prebuilt workout collection: fixed session templates picked by kind.

Each template is data. Items that change with fitness level carry one dose per
level, and most templates also have one block whose drills are swapped out
entirely per level. Rendering is a pure function of kind, level and minutes.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, NamedTuple, Union

from fitcoach.schemas.workout import FitnessLevel

from .generator import MIN_MAIN_MINUTES, _bullets, coerce_level

logger = logging.getLogger(__name__)

_LEVEL_ORDER = (FitnessLevel.BEGINNER, FitnessLevel.INTERMEDIATE, FitnessLevel.ADVANCED)


class PerLevel(NamedTuple):
    beginner: Any
    intermediate: Any
    advanced: Any

    def pick(self, level: FitnessLevel) -> Any:
        return self[_LEVEL_ORDER.index(level)]


# Either a fixed line, or a line with a "{}" slot and its per-level doses.
Item = Union[str, tuple[str, PerLevel]]


@dataclass(frozen=True)
class Section:
    heading: str = ""
    subheading: str = ""
    drills: PerLevel | None = None
    items: tuple[Item, ...] = ()

    def render(self, level: FitnessLevel, main_minutes: int) -> str:
        lines = [h.format(main_minutes=main_minutes) for h in (self.heading, self.subheading) if h]
        entries = list(self.drills.pick(level)) if self.drills else []
        for item in self.items:
            if isinstance(item, str):
                entries.append(item)
            else:
                text, doses = item
                entries.append(text.format(doses.pick(level)))
        if entries:
            lines.append(_bullets(entries))
        return "\n".join(lines)


@dataclass(frozen=True)
class PrebuiltTemplate:
    title: str
    minutes: int
    sections: tuple[Section, ...]
    tips_heading: str
    tips: tuple[str, ...]
    footer: str
    # Warm-up plus cool-down minutes. Set only for templates whose length
    # follows the requested minutes; the rest always run ``minutes``.
    overhead: int | None = None

    def render(self, level: FitnessLevel, minutes: int | None = None) -> str:
        if self.overhead is None or minutes is None:
            minutes = self.minutes
        main_minutes = max(minutes - (self.overhead or 0), MIN_MAIN_MINUTES)
        parts = [f"{self.title} ({minutes} minutes)"]
        parts.extend(s.render(level, main_minutes) for s in self.sections)
        parts.append(f"💡 {self.tips_heading}:\n{_bullets(self.tips)}")
        parts.append(self.footer)
        return "\n\n".join(parts)


PUSH = PrebuiltTemplate(
    title="💪 PUSH DAY POWERHOUSE",
    minutes=35,
    sections=(
        Section(
            heading="🔥 ACTIVATION WARM-UP (5 minutes)",
            items=(
                "Arm circles: 30 seconds each direction",
                "Shoulder dislocations (with towel): 15 reps",
                "Push-up position holds: 30 seconds",
                "Scapular wall slides: 15 reps",
                "Light push-ups: 10 reps",
            ),
        ),
        Section(
            heading="💪 PUSH STRENGTH CIRCUIT (25 minutes)",
            subheading="Round 1: Chest Focus (4 sets, 90s rest):",
            drills=PerLevel(
                (
                    "Wall push-ups: 10-12 reps",
                    "Incline push-ups (stairs/chair): 8-10 reps",
                    "Knee push-ups: 6-8 reps",
                    "Push-up hold: 15-20 seconds",
                ),
                (
                    "Standard push-ups: 12-15 reps",
                    "Diamond push-ups: 8-10 reps",
                    "Archer push-ups: 5 each side",
                    "Push-up to T: 6 each side",
                ),
                (
                    "One-arm push-ups progression: 3-5 each side",
                    "Handstand push-ups: 5-8 reps",
                    "Explosive push-ups: 8-10 reps",
                    "Hindu push-ups: 10-12 reps",
                ),
            ),
        ),
        Section(
            subheading="Round 2: Shoulder Power (3 sets, 60s rest):",
            items=(
                ("Pike push-ups: {} reps", PerLevel("6-8", "8-12", "12-15")),
                ("Lateral raises (water bottles): {} reps", PerLevel("12-15", "15-20", "20-25")),
                ("Front raises: {} reps", PerLevel("10-12", "12-15", "15-18")),
                ("Overhead press (bottles): {} reps", PerLevel("8-10", "10-12", "12-15")),
            ),
        ),
        Section(
            subheading="Round 3: Tricep Finisher (3 sets, 45s rest):",
            items=(
                ("Tricep dips (chair): {} reps", PerLevel("8-12", "12-15", "15-20")),
                ("Close-grip push-ups: {} reps", PerLevel("5-8", "8-12", "12-15")),
                ("Tricep extensions (bottle): {} reps", PerLevel("12-15", "15-18", "18-22")),
            ),
        ),
        Section(
            heading="🧘‍♀️ RECOVERY STRETCH (5 minutes)",
            items=(
                "Chest doorway stretch: 45 seconds",
                "Cross-body shoulder stretch: 30 seconds each",
                "Tricep overhead stretch: 30 seconds each",
                "Cobra stretch: 45 seconds",
                "Child's pose: 60 seconds",
            ),
        ),
    ),
    tips_heading="PUSH DAY TIPS",
    tips=(
        "Focus on controlled eccentric (lowering) phase",
        "Keep core tight throughout all movements",
        "Progressive overload: add reps or difficulty weekly",
        "Perfect form beats high reps every time",
    ),
    footer="Target: Chest, shoulders, triceps development 💪",
)

PULL = PrebuiltTemplate(
    title="🎯 PULL DAY DOMINATION",
    minutes=35,
    sections=(
        Section(
            heading="🔥 DYNAMIC WARM-UP (5 minutes)",
            items=(
                "Band pull-aparts (or arm swings): 20 reps",
                "Shoulder blade squeezes: 15 reps",
                "Cat-cow stretches: 10 reps",
                "Dead hangs (if possible): 20-30 seconds",
                "Reverse fly motions: 15 reps",
            ),
        ),
        Section(
            heading="🎯 PULL STRENGTH SEQUENCE (25 minutes)",
            subheading="Phase 1: Back Foundation (4 sets, 90s rest):",
            drills=PerLevel(
                (
                    "Inverted rows (table/bar): 6-10 reps",
                    "Reverse snow angels: 12-15 reps",
                    "Superman holds: 20-30 seconds",
                    "Wall slides: 12-15 reps",
                ),
                (
                    "Pull-ups/chin-ups: 5-8 reps (assisted if needed)",
                    "Single-arm rows (bottle): 10-12 each",
                    "Reverse flies: 12-15 reps",
                    "Superman + Y raises: 10-12 reps",
                ),
                (
                    "Wide-grip pull-ups: 8-12 reps",
                    "Archer pull-ups: 4-6 each side",
                    "Single-arm rows (heavy): 12-15 each",
                    "L-sits/tuck holds: 20-30 seconds",
                ),
            ),
        ),
        Section(
            subheading="Phase 2: Posterior Chain (3 sets, 60s rest):",
            items=(
                ("Face pulls (band/towel): {} reps", PerLevel("15-20", "20-25", "25-30")),
                ("Rear delt flies: {} reps", PerLevel("12-15", "15-18", "18-22")),
                ("Prone Y-T-W: {} reps", PerLevel("8 each", "10 each", "12 each")),
                ("Reverse planks: {}", PerLevel("20-30s", "30-45s", "45-60s")),
            ),
        ),
        Section(
            subheading="Phase 3: Bicep Focus (3 sets, 45s rest):",
            items=(
                ("Bicep curls (bottles): {} reps", PerLevel("12-15", "15-18", "18-22")),
                ("Hammer curls: {} reps", PerLevel("10-12", "12-15", "15-18")),
                ("Isometric holds: {}", PerLevel("15-20s", "20-30s", "30-40s")),
            ),
        ),
        Section(
            heading="🧘‍♀️ MOBILITY COOLDOWN (5 minutes)",
            items=(
                "Lat stretches: 45 seconds each side",
                "Upper trap stretch: 30 seconds each side",
                "Thoracic spine twists: 10 each side",
                "Doorway chest stretch: 60 seconds",
                "Seated forward fold: 60 seconds",
            ),
        ),
    ),
    tips_heading="PULL DAY MASTERY",
    tips=(
        "Squeeze shoulder blades at top of each rep",
        "Control the negative portion of movements",
        "Focus on lat engagement, not just arm pulling",
        "Build to full pull-ups progressively",
    ),
    footer="Target: Back, lats, rear delts, biceps 🎯",
)

LEGS = PrebuiltTemplate(
    title="🦵 LEG DAY ANNIHILATION",
    minutes=40,
    sections=(
        Section(
            heading="🔥 LOWER BODY ACTIVATION (6 minutes)",
            items=(
                "Leg swings: 15 each direction",
                "Hip circles: 10 each direction",
                "Bodyweight squats: 15 reps",
                "Reverse lunges: 10 each leg",
                "Calf raises: 20 reps",
                "Glute bridges: 15 reps",
            ),
        ),
        Section(
            heading="🦵 QUAD DOMINANT PHASE (12 minutes)",
            subheading="Squat Complex (4 sets, 2 min rest):",
            drills=PerLevel(
                (
                    "Assisted squats (chair support): 12-15 reps",
                    "Wall sits: 30-45 seconds",
                    "Step-ups (low step): 10 each leg",
                    "Squat pulses: 15-20 reps",
                ),
                (
                    "Bodyweight squats: 15-20 reps",
                    "Jump squats: 12-15 reps",
                    "Bulgarian split squats: 10 each leg",
                    "Single-leg box step-ups: 12 each leg",
                ),
                (
                    "Pistol squat progression: 5-8 each leg",
                    "Jump squats with 180° turn: 10-12 reps",
                    "Shrimp squats: 3-5 each leg",
                    "Single-leg squats: 8-10 each leg",
                ),
            ),
        ),
        Section(
            heading="🍑 GLUTE & HAMSTRING PHASE (12 minutes)",
            subheading="Hip Hinge Complex (4 sets, 90s rest):",
            items=(
                ("Single-leg deadlifts: {} each leg", PerLevel("8-10", "10-12", "12-15")),
                ("Glute bridges: {} reps", PerLevel("15-20", "20-25", "25-30")),
                ("Reverse lunges: {} each leg", PerLevel("10-12", "12-15", "15-18")),
                ("Lateral lunges: {} each leg", PerLevel("8-10", "10-12", "12-15")),
            ),
        ),
        Section(
            heading="⚡ EXPLOSIVE FINISHER (5 minutes)",
            subheading="Plyometric Blast (3 rounds, 60s rest):",
            items=(
                ("Jump lunges: {} reps", PerLevel("16 total", "20 total", "24 total")),
                ("Broad jumps: {} reps", PerLevel("5-8", "8-10", "10-12")),
                ("Lateral bounds: {} reps", PerLevel("10 total", "12 total", "16 total")),
            ),
        ),
        Section(
            heading="🧘‍♀️ LOWER BODY RECOVERY (5 minutes)",
            items=(
                "Quad stretch: 45 seconds each leg",
                "Hamstring stretch: 45 seconds each leg",
                "Hip flexor stretch: 45 seconds each leg",
                "Figure-4 stretch: 45 seconds each leg",
                "Pigeon pose: 60 seconds each side",
            ),
        ),
    ),
    tips_heading="LEG DAY EXCELLENCE",
    tips=(
        "Full range of motion on all movements",
        "Control the eccentric (lowering) phase",
        "Drive through heels on squats/deadlifts",
        "Keep knees tracking over toes",
        "Progressive overload weekly",
    ),
    footer="Target: Quadriceps, glutes, hamstrings, calves 🦵",
)

CORE = PrebuiltTemplate(
    title="🔥 CORE CRUSHER CIRCUIT",
    minutes=30,
    sections=(
        Section(
            heading="🌅 CORE ACTIVATION (4 minutes)",
            items=(
                "Dead bugs: 10 each side",
                "Bird dogs: 10 each side",
                "Cat-cow stretches: 10 reps",
                "Pelvic tilts: 15 reps",
                "Knee-to-chest: 10 each leg",
            ),
        ),
        Section(
            heading="🎯 ANTERIOR CORE PHASE (8 minutes)",
            subheading="Plank Progression (4 sets, 45s rest):",
            drills=PerLevel(
                (
                    "Modified plank (knees): 20-30 seconds",
                    "Wall plank: 30-45 seconds",
                    "Dead bug holds: 15 seconds each side",
                    "Glute bridge hold: 30 seconds",
                ),
                (
                    "Standard plank: 45-60 seconds",
                    "Plank up-downs: 10-12 reps",
                    "Single-arm plank: 20 seconds each",
                    "Plank jacks: 15-20 reps",
                ),
                (
                    "Plank to push-up: 12-15 reps",
                    "Single-arm single-leg plank: 15s each",
                    "Plank with leg lifts: 20 total",
                    "RKC plank: 30-45 seconds",
                ),
            ),
        ),
        Section(
            heading="🌪️ ROTATIONAL POWER (8 minutes)",
            subheading="Anti-Rotation Circuit (3 sets, 60s rest):",
            items=(
                ("Russian twists: {} total", PerLevel("20-30", "30-40", "40-50")),
                ("Bicycle crunches: {} total", PerLevel("20-30", "30-40", "40-50")),
                ("Side planks: {} each", PerLevel("15-20s", "20-30s", "30-45s")),
                ("Wood chops (bottle): {} each side", PerLevel("12-15", "15-18", "18-22")),
            ),
        ),
        Section(
            heading="⚡ DYNAMIC CORE BLAST (6 minutes)",
            subheading="High-Intensity Circuit (3 rounds, 30s rest):",
            items=(
                ("Mountain climbers: {}", PerLevel("30 seconds", "40 seconds", "50 seconds")),
                ("Leg raises: {} reps", PerLevel("8-12", "12-15", "15-20")),
                ("Flutter kicks: {}", PerLevel("20 total", "30 total", "40 total")),
                ("V-ups: {} reps", PerLevel("8-10", "10-15", "15-20")),
            ),
        ),
        Section(
            heading="🧘‍♀️ CORE RELEASE (4 minutes)",
            items=(
                "Child's pose: 60 seconds",
                "Cobra stretch: 45 seconds",
                "Knee rocks: 30 seconds",
                "Spinal twists: 30 seconds each side",
                "Happy baby pose: 45 seconds",
            ),
        ),
    ),
    tips_heading="CORE MASTERY TIPS",
    tips=(
        "Breathe consistently - don't hold breath",
        "Quality over quantity - perfect form first",
        "Engage deep core muscles, not just abs",
        "Progress holds before adding reps",
        "Core strength supports all other movements",
    ),
    footer="Target: Rectus abdominis, obliques, transverse abdominis, deep core 🔥",
)

HIIT = PrebuiltTemplate(
    title="⚡ HIGH-INTENSITY INTERVAL TRAINING",
    minutes=25,
    sections=(
        Section(
            heading="🔥 HIIT PREP (4 minutes)",
            items=(
                "Marching in place: 60 seconds",
                "Arm circles: 30 seconds each direction",
                "Leg swings: 15 each leg",
                "Light jumping jacks: 60 seconds",
                "Bodyweight squats: 15 reps",
            ),
        ),
        Section(
            heading="⚡ HIIT PHASE 1: POWER (8 minutes)",
            subheading="Tabata Protocol (4 rounds, 20s work / 10s rest):",
            drills=PerLevel(
                (
                    "Round 1: Modified jumping jacks",
                    "Round 2: Step-ups (low step)",
                    "Round 3: Modified burpees (no jump)",
                    "Round 4: High knees (moderate pace)",
                    "Rest 2 minutes between phases",
                ),
                (
                    "Round 1: Jumping jacks",
                    "Round 2: Burpees",
                    "Round 3: Jump squats",
                    "Round 4: Mountain climbers",
                    "Rest 90 seconds between phases",
                ),
                (
                    "Round 1: Burpee box jumps",
                    "Round 2: Jump squat to tuck jump",
                    "Round 3: Burpee broad jumps",
                    "Round 4: Sprint in place",
                    "Rest 60 seconds between phases",
                ),
            ),
        ),
        Section(
            heading="🏃 HIIT PHASE 2: ENDURANCE (8 minutes)",
            subheading="EMOM (every minute on the minute), repeat this 4-minute cycle twice:",
            items=(
                (
                    "Minute 1: {}",
                    PerLevel("10 squats + 5 push-ups", "15 squats + 8 push-ups", "20 squats + 12 push-ups"),
                ),
                (
                    "Minute 2: {}",
                    PerLevel(
                        "20 high knees + 10 lunges", "30 high knees + 12 lunges", "40 high knees + 16 lunges"
                    ),
                ),
                (
                    "Minute 3: {}",
                    PerLevel(
                        "15 jumping jacks + plank 15s",
                        "25 jumping jacks + plank 30s",
                        "35 jumping jacks + plank 45s",
                    ),
                ),
                ("Minute 4: {}", PerLevel("8 burpees (modified)", "12 burpees", "15 burpees")),
            ),
        ),
        Section(
            heading="🧘‍♀️ ACTIVE RECOVERY (5 minutes)",
            items=(
                "Walking in place: 90 seconds",
                "Gentle arm swings: 45 seconds",
                "Hip circles: 30 seconds each direction",
                "Calf stretch: 30 seconds each leg",
                "Deep breathing: 90 seconds",
            ),
        ),
    ),
    tips_heading="HIIT OPTIMIZATION",
    tips=(
        "Push maximum effort during work periods",
        "Use rest periods for complete recovery",
        "Modify exercises to maintain intensity",
        "Stay hydrated throughout",
        "Track improvements weekly",
    ),
    footer="Benefits: Maximum calorie burn, improved VO2 max, time-efficient ⚡",
)

YOGA = PrebuiltTemplate(
    title="🧘‍♀️ MINDFUL YOGA FLOW",
    minutes=35,
    sections=(
        Section(
            heading="🌅 CENTERING & BREATH (5 minutes)",
            items=(
                "Comfortable seated position: 2 minutes",
                "Deep belly breathing: 2 minutes",
                "Gentle neck rolls: 5 each direction",
                "Shoulder shrugs: 10 reps",
            ),
        ),
        Section(
            heading="🌊 WARM-UP FLOW (8 minutes)",
            subheading="Sun Salutation Prep:",
            drills=PerLevel(
                (
                    "Mountain Pose: 1 minute",
                    "Forward fold (bent knees): 1 minute",
                    "Half lift: 30 seconds",
                    "Low lunge (each leg): 1 minute each",
                    "Downward dog (knees down): 1 minute",
                    "Child's pose: 2 minutes",
                ),
                (
                    "Mountain Pose to Forward Fold: 2 minutes",
                    "Low lunge to High lunge: 1 minute each leg",
                    "Warrior I flow: 1 minute each side",
                    "Downward dog: 2 minutes",
                    "Child's pose: 1 minute",
                ),
                (
                    "Full Sun Salutation A: 3 rounds",
                    "Sun Salutation B with Warriors: 2 rounds",
                    "Advanced arm balances prep: 2 minutes",
                ),
            ),
        ),
        Section(
            heading="🔥 STRENGTH & FLOW (15 minutes)",
            subheading="Standing Sequence:",
            items=(
                ("Warrior II: {} each side", PerLevel("1 min", "90s", "2 min")),
                ("Extended side angle: {} each", PerLevel("45s", "60s", "90s")),
                ("Triangle pose: {} each", PerLevel("45s", "60s", "90s")),
                ("Revolved triangle: {} each", PerLevel("30s", "45s", "60s")),
            ),
        ),
        Section(
            subheading="Floor Sequence:",
            items=(
                ("Cat-cow flows: {} reps", PerLevel("10", "15", "20")),
                ("Low lunge twists: {} each", PerLevel("30s", "45s", "60s")),
                ("Pigeon prep: {} each side", PerLevel("1 min", "90s", "2 min")),
                ("Bridge pose: {}", PerLevel("45s", "60s", "90s")),
            ),
        ),
        Section(
            heading="🧘‍♀️ DEEP STRETCH & RESTORE (7 minutes)",
            items=(
                "Seated forward fold: 2 minutes",
                "Seated spinal twist: 1 minute each side",
                "Legs up the wall: 2 minutes",
                "Happy baby: 1 minute",
                "Final savasana: As long as desired",
            ),
        ),
    ),
    tips_heading="YOGA WISDOM",
    tips=(
        "Listen to your body's limits",
        "Breath guides the movement",
        "Modifications are always available",
        "Focus inward, not on others",
        "Progress is measured in peace, not poses",
    ),
    footer="Benefits: Flexibility, balance, mindfulness, stress relief 🧘‍♀️",
)

PILATES = PrebuiltTemplate(
    title="🎯 PILATES PRECISION",
    minutes=30,
    sections=(
        Section(
            heading="🌅 PILATES WARM-UP (5 minutes)",
            items=(
                "Hundred prep breathing: 2 minutes",
                "Pelvic tilts: 15 reps",
                "Spine articulation: 10 roll downs",
                "Shoulder blade isolation: 15 reps",
                "Hip circles: 10 each direction",
            ),
        ),
        Section(
            heading="💪 CORE FOUNDATION (10 minutes)",
            subheading="Classical Series:",
            drills=PerLevel(
                (
                    "Modified Hundred: 50 pumps",
                    "Single leg stretches: 10 each leg",
                    "Double leg stretch prep: 10 reps",
                    "Spine stretch forward: 10 reps",
                    "Rolling like a ball prep: 10 reps",
                ),
                (
                    "The Hundred: 100 pumps",
                    "Single leg stretches: 10 each leg",
                    "Double leg stretches: 10 reps",
                    "Single straight leg: 10 each leg",
                    "Criss-cross: 10 each side",
                ),
                (
                    "The Hundred: 100 pumps",
                    "Roll up: 10 reps",
                    "Single leg circles: 5 each direction/leg",
                    "Rolling like a ball: 10 reps",
                    "Series of 5: Complete sequence",
                ),
            ),
        ),
        Section(
            heading="🏃 STRENGTH & STABILITY (10 minutes)",
            subheading="Full Body Integration:",
            items=(
                ("Plank series: {}", PerLevel("3 x 20s", "3 x 45s", "3 x 60s")),
                ("Side planks: {}", PerLevel("20s each", "30s each", "45s each")),
                ("Swimming: {}", PerLevel("10 reps", "15 reps", "20 reps")),
                ("Leg pull front: {}", PerLevel("5 reps", "8 reps", "10 reps")),
                ("Teaser prep: {}", PerLevel("8 reps", "10 reps", "12 reps")),
            ),
        ),
        Section(
            heading="🧘‍♀️ STRETCH & RELEASE (5 minutes)",
            items=(
                "Spine twist: 5 each side",
                "Saw: 5 each side",
                "Hip flexor stretch: 45 seconds each",
                "Chest expansion: 1 minute",
                "Child's pose: 2 minutes",
            ),
        ),
    ),
    tips_heading="PILATES PRINCIPLES",
    tips=(
        "Quality over quantity always",
        "Engage deep core throughout",
        "Precise, controlled movements",
        "Mind-body connection essential",
        "Breath coordinates with movement",
    ),
    footer="Target: Deep core, posture, body awareness 🎯",
)

UPPER = PrebuiltTemplate(
    title="💪 UPPER BODY SCULPT",
    minutes=35,
    sections=(
        Section(
            heading="🔥 UPPER BODY PREP (5 minutes)",
            items=(
                "Arm circles: 20 each direction",
                "Shoulder shrugs: 15 reps",
                "Cross-body stretches: 30s each arm",
                "Wall push-ups: 10 reps",
                "Band pull-aparts: 20 reps (or arm swings)",
            ),
        ),
        Section(
            heading="💪 PUSH COMPLEX (10 minutes)",
            subheading="Circuit A (3 rounds, 90s rest):",
            drills=PerLevel(
                (
                    "Wall push-ups: 12-15 reps",
                    "Incline push-ups: 8-10 reps",
                    "Tricep dips (chair): 8-10 reps",
                    "Overhead press (bottles): 10-12 reps",
                ),
                (
                    "Standard push-ups: 12-15 reps",
                    "Diamond push-ups: 8-10 reps",
                    "Pike push-ups: 8-10 reps",
                    "Tricep dips: 12-15 reps",
                ),
                (
                    "One-arm push-up progression: 5 each",
                    "Handstand push-ups: 5-8 reps",
                    "Archer push-ups: 6 each side",
                    "Hindu push-ups: 10 reps",
                ),
            ),
        ),
        Section(
            heading="🎯 PULL COMPLEX (10 minutes)",
            subheading="Circuit B (3 rounds, 90s rest):",
            items=(
                ("Inverted rows: {} reps", PerLevel("8-10", "10-12", "12-15")),
                ("Reverse flies: {} reps", PerLevel("12-15", "15-18", "18-20")),
                ("Bicep curls (bottles): {} reps", PerLevel("12-15", "15-18", "18-22")),
                ("Face pulls: {} reps", PerLevel("15-18", "18-22", "22-25")),
            ),
        ),
        Section(
            heading="⚡ UPPER BODY FINISHER (5 minutes)",
            subheading="Burnout Round (2 sets, 60s rest):",
            items=(
                ("Max push-ups: {}", PerLevel("AMRAP 30s", "AMRAP 45s", "AMRAP 60s")),
                ("Plank hold: {}", PerLevel("30s", "45s", "60s")),
                "Arm circles: 20 each direction",
            ),
        ),
        Section(
            heading="🧘‍♀️ UPPER BODY STRETCH (5 minutes)",
            items=(
                "Doorway chest stretch: 60 seconds",
                "Overhead tricep stretch: 30s each",
                "Cross-body shoulder: 30s each",
                "Neck side stretches: 30s each",
                "Eagle arms: 45 seconds",
            ),
        ),
    ),
    tips_heading="UPPER BODY EXCELLENCE",
    tips=(
        "Full range of motion on all exercises",
        "Control the negative (lowering) phase",
        "Maintain proper shoulder positioning",
        "Progressive overload weekly",
        "Balance push/pull movements",
    ),
    footer="Target: Chest, back, shoulders, arms 💪",
)

LOWER = PrebuiltTemplate(
    title="🦵 LOWER BODY TRANSFORMATION",
    minutes=35,
    sections=(
        Section(
            heading="🔥 LOWER BODY MOBILITY (6 minutes)",
            items=(
                "Hip circles: 10 each direction",
                "Leg swings: 15 each direction",
                "Walking lunges: 10 each leg",
                "Calf raises: 20 reps",
                "Glute activation: 15 bridges",
                "Ankle circles: 10 each direction",
            ),
        ),
        Section(
            heading="🏋️ GLUTE & HAMSTRING FOCUS (12 minutes)",
            subheading="Posterior Chain Circuit (3 rounds, 2 min rest):",
            drills=PerLevel(
                (
                    "Glute bridges: 15-20 reps",
                    "Single-leg deadlift (assisted): 8 each leg",
                    "Wall sits: 30-45 seconds",
                    "Clamshells: 15 each side",
                ),
                (
                    "Single-leg glute bridges: 12 each leg",
                    "Single-leg deadlifts: 10 each leg",
                    "Bulgarian split squats: 10 each leg",
                    "Lateral lunges: 12 each leg",
                ),
                (
                    "Single-leg hip thrusts: 15 each leg",
                    "Single-leg RDL (weighted): 12 each leg",
                    "Curtsy to reverse lunge: 10 each leg",
                    "Single-leg wall sits: 30s each leg",
                ),
            ),
        ),
        Section(
            heading="💥 QUAD DOMINANT PHASE (12 minutes)",
            subheading="Squat Complex (3 rounds, 90s rest):",
            items=(
                ("Bodyweight squats: {} reps", PerLevel("15-20", "20-25", "25-30")),
                ("Jump squats: {} reps", PerLevel("8-10", "10-15", "15-20")),
                ("Pulse squats: {} reps", PerLevel("15", "20", "25")),
                ("Single-leg squats: {} leg", PerLevel("5 assisted", "5-8 each", "8-12 each")),
            ),
        ),
        Section(
            heading="⚡ PLYOMETRIC BLAST (5 minutes)",
            subheading="Power Circuit (3 rounds, 45s rest):",
            items=(
                ("Broad jumps: {} reps", PerLevel("5-8", "8-10", "10-12")),
                ("Lateral bounds: {}", PerLevel("10 total", "12 total", "16 total")),
                ("Jump lunges: {}", PerLevel("12 total", "16 total", "20 total")),
            ),
        ),
        Section(
            heading="🧘‍♀️ LOWER BODY RELEASE (5 minutes)",
            items=(
                "Quad stretch: 45 seconds each leg",
                "Hamstring stretch: 45 seconds each leg",
                "Hip flexor stretch: 45 seconds each leg",
                "Figure-4 stretch: 45 seconds each leg",
                "Child's pose: 60 seconds",
            ),
        ),
    ),
    tips_heading="LOWER BODY MASTERY",
    tips=(
        "Activate glutes before squatting",
        "Keep knees tracking over toes",
        "Full depth on all movements",
        "Control eccentric phase",
        "Progressive overload essential",
    ),
    footer="Target: Glutes, quads, hamstrings, calves 🦵",
)

FUNCTIONAL = PrebuiltTemplate(
    title="🏃‍♂️ FUNCTIONAL FITNESS",
    minutes=30,
    sections=(
        Section(
            heading="🔥 MOVEMENT PREP (5 minutes)",
            items=(
                "Arm circles: 15 each direction",
                "Leg swings: 12 each direction",
                "Hip circles: 10 each direction",
                "Torso twists: 15 each side",
                "Light bouncing: 45 seconds",
            ),
        ),
        Section(
            heading="💪 FUNCTIONAL PATTERNS (20 minutes)",
            subheading="Circuit 1: Push/Pull/Squat (3 rounds, 90s rest):",
            drills=PerLevel(
                (
                    "Push-ups (modified): 8-10 reps",
                    "Inverted rows (table): 8-10 reps",
                    "Squats: 12-15 reps",
                    "Plank: 30 seconds",
                ),
                (
                    "Push-ups: 12-15 reps",
                    "Pull-ups/chin-ups: 5-8 reps",
                    "Jump squats: 12-15 reps",
                    "Mountain climbers: 30 seconds",
                ),
                (
                    "One-arm push-ups: 5 each arm",
                    "Wide-grip pull-ups: 8-10 reps",
                    "Pistol squats: 5 each leg",
                    "Burpees: 10 reps",
                ),
            ),
        ),
        Section(
            subheading="Circuit 2: Hinge/Lunge/Carry (3 rounds, 90s rest):",
            items=(
                ("Single-leg deadlift: {}", PerLevel("8 each leg", "10 each leg", "12 each leg")),
                ("Walking lunges: {}", PerLevel("16 total", "20 total", "24 total")),
                ("Farmer's walk (bottles): {}", PerLevel("30 seconds", "45 seconds", "60 seconds")),
                ("Bear crawl: {}", PerLevel("20 seconds", "30 seconds", "45 seconds")),
            ),
        ),
        Section(
            subheading="Circuit 3: Rotation/Gait (2 rounds, 60s rest):",
            items=(
                ("Wood chops: {}", PerLevel("12 each side", "15 each side", "18 each side")),
                ("Crab walk: {}", PerLevel("10 steps each way", "15 steps each way", "20 steps each way")),
                ("Lateral shuffles: {}", PerLevel("20 seconds", "30 seconds", "40 seconds")),
            ),
        ),
        Section(
            heading="🧘‍♀️ MOBILITY FLOW (5 minutes)",
            items=(
                "Hip flexor stretch: 45 seconds each leg",
                "Thoracic spine rotation: 30 seconds each side",
                "Calf stretch: 30 seconds each leg",
                "Shoulder crossover: 30 seconds each arm",
                "Deep breathing: 90 seconds",
            ),
        ),
    ),
    tips_heading="FUNCTIONAL TRAINING",
    tips=(
        "Movement quality over quantity",
        "Train patterns, not just muscles",
        "Multi-planar movement essential",
        "Real-world strength and mobility",
        "Injury prevention through movement",
    ),
    footer="Benefits: Real-world strength, movement quality, injury prevention 🏃‍♂️",
)

FULL_BODY = PrebuiltTemplate(
    title="🎯 COMPLETE FULL-BODY TRAINING",
    minutes=40,
    sections=(
        Section(
            heading="🔥 TOTAL BODY WARM-UP (6 minutes)",
            items=(
                "Jumping jacks: 60 seconds",
                "Arm circles: 30 seconds each direction",
                "Leg swings: 15 each direction",
                "Hip circles: 10 each direction",
                "Bodyweight squats: 15 reps",
                "Push-up position hold: 30 seconds",
            ),
        ),
        Section(
            heading="💪 COMPOUND MOVEMENTS (28 minutes)",
            subheading="Round 1: Foundation (4 sets, 2 min rest):",
            drills=PerLevel(
                (
                    "Push-ups (modified): 8-12 reps",
                    "Bodyweight squats: 12-15 reps",
                    "Inverted rows (table): 8-10 reps",
                    "Plank hold: 30-45 seconds",
                ),
                (
                    "Push-ups: 12-15 reps",
                    "Jump squats: 12-15 reps",
                    "Pull-ups/chin-ups: 6-10 reps",
                    "Single-leg deadlifts: 8 each leg",
                ),
                (
                    "One-arm push-ups: 5 each arm",
                    "Pistol squats: 5 each leg",
                    "Muscle-ups: 3-5 reps",
                    "Single-leg RDL (weighted): 10 each leg",
                ),
            ),
        ),
        Section(
            subheading="Round 2: Power & Conditioning (3 sets, 90s rest):",
            items=(
                ("Burpees: {} reps", PerLevel("5-8", "8-12", "12-15")),
                ("Mountain climbers: {}", PerLevel("30 seconds", "45 seconds", "60 seconds")),
                ("Lunges: {}", PerLevel("16 total", "20 total", "24 total")),
                ("Russian twists: {} total", PerLevel("20", "30", "40")),
            ),
        ),
        Section(
            subheading="Round 3: Strength Endurance (3 sets, 60s rest):",
            items=(
                ("Wall sits: {}", PerLevel("30-45s", "45-60s", "60-90s")),
                ("Pike push-ups: {} reps", PerLevel("5-8", "8-12", "12-15")),
                ("Single-leg glute bridges: {}", PerLevel("10 each", "12 each", "15 each")),
                ("Dead bugs: {}", PerLevel("10 each side", "12 each side", "15 each side")),
            ),
        ),
        Section(
            heading="🧘‍♀️ TOTAL BODY STRETCH (6 minutes)",
            items=(
                "Child's pose: 90 seconds",
                "Downward dog: 60 seconds",
                "Hip flexor stretch: 45 seconds each leg",
                "Spinal twist: 30 seconds each side",
                "Deep breathing meditation: 90 seconds",
            ),
        ),
    ),
    tips_heading="FULL-BODY TRAINING",
    tips=(
        "Compound movements maximize efficiency",
        "Balance pushing and pulling patterns",
        "Include uni-lateral (single-limb) work",
        "Progressive overload for continued gains",
        "Recovery is when adaptation occurs",
    ),
    footer="Target: Complete muscular and cardiovascular development 🎯",
)

FLEXIBILITY = PrebuiltTemplate(
    title="🧘 FLEXIBILITY & MOBILITY FLOW",
    minutes=30,
    overhead=10,
    sections=(
        Section(
            heading="🌅 GENTLE WARM-UP (5 minutes)",
            items=(
                "Neck rolls: 5 each direction",
                "Shoulder shrugs: 10 reps",
                "Arm circles: 10 each direction",
                "Gentle torso twists: 10 each side",
                "Cat-cow stretches: 10 reps",
            ),
        ),
        Section(
            heading="🧘‍♀️ FLEXIBILITY SEQUENCE ({main_minutes} minutes)",
            subheading="Upper Body Flow (hold each 45-60 seconds):",
            items=(
                "Chest doorway stretch",
                "Tricep overhead stretch (each arm)",
                "Cross-body shoulder stretch (each arm)",
                "Neck side stretch (each side)",
                "Upper trap stretch (each side)",
            ),
        ),
        Section(
            subheading="Core & Spine Mobility:",
            items=(
                "Seated spinal twist: 60 seconds each side",
                "Cat-cow pose: 10 slow repetitions",
                "Child's pose: 90 seconds",
                "Cobra stretch: 45 seconds",
                "Knee-to-chest: 45 seconds each leg",
            ),
        ),
        Section(
            subheading="Lower Body Deep Stretch:",
            items=(
                "Forward fold: 90 seconds",
                "Seated figure-4 stretch: 60 seconds each leg",
                "Pigeon pose (modified): 90 seconds each side",
                "Happy baby pose: 60 seconds",
                "Butterfly stretch: 90 seconds",
            ),
        ),
        Section(
            subheading="Hip & Leg Focus:",
            items=(
                "Hip flexor stretch: 60 seconds each leg",
                "Hamstring stretch: 60 seconds each leg",
                "Calf stretch: 45 seconds each leg",
                "IT band stretch: 45 seconds each leg",
            ),
        ),
        Section(
            heading="🌙 RELAXATION (5 minutes)",
            items=(
                "Legs up the wall pose: 2 minutes",
                "Deep breathing with body scan: 3 minutes",
            ),
        ),
    ),
    tips_heading="FLEXIBILITY TIPS",
    tips=(
        "Never stretch to pain - mild tension only",
        "Breathe deeply into each stretch",
        "Hold consistent pressure, don't bounce",
        "Practice daily for best results",
        "Listen to your body's limits",
    ),
    footer="Benefits: Improved range of motion, reduced stiffness, better sleep 🌟",
)

QUICK_FULL_BODY = PrebuiltTemplate(
    title="⚡ QUICK FULL-BODY BLAST",
    minutes=15,
    overhead=6,
    sections=(
        Section(
            heading="🔥 RAPID WARM-UP (3 minutes)",
            items=(
                "Jumping jacks: 30 seconds",
                "Arm circles: 20 each direction",
                "Bodyweight squats: 15 reps",
                "Push-up position hold: 30 seconds",
            ),
        ),
        Section(
            heading="💪 FULL-BODY CIRCUIT ({main_minutes} minutes)",
            subheading="Super Circuit (repeat as many rounds as possible):",
            drills=PerLevel(
                (
                    "Modified push-ups: 30 seconds",
                    "Wall sit: 30 seconds",
                    "Knee raises: 30 seconds",
                    "Rest: 30 seconds",
                ),
                (
                    "Push-ups: 45 seconds",
                    "Squats: 45 seconds",
                    "Plank: 45 seconds",
                    "Rest: 30 seconds",
                ),
                (
                    "Burpees: 45 seconds",
                    "Jump squats: 45 seconds",
                    "Plank to push-up: 45 seconds",
                    "Rest: 15 seconds",
                ),
            ),
        ),
        Section(
            subheading="Round 2:",
            drills=PerLevel(
                (
                    "Incline push-ups: 30 seconds",
                    "Assisted squats: 30 seconds",
                    "Standing crunches: 30 seconds",
                    "Rest: 30 seconds",
                ),
                (
                    "Mountain climbers: 45 seconds",
                    "Lunges: 45 seconds",
                    "Bicycle crunches: 45 seconds",
                    "Rest: 30 seconds",
                ),
                (
                    "Mountain climber burpees: 45 seconds",
                    "Single-leg squats: 45 seconds",
                    "Russian twists: 45 seconds",
                    "Rest: 15 seconds",
                ),
            ),
        ),
        Section(
            subheading="Power Finisher (2 minutes):",
            items=(
                "Max jumping jacks: 30 seconds",
                "Rest: 30 seconds",
                "Max bodyweight squats: 30 seconds",
                "Rest: 30 seconds",
            ),
        ),
        Section(
            heading="🧘‍♀️ QUICK RECOVERY (3 minutes)",
            items=(
                "Standing forward fold: 45 seconds",
                "Chest stretch: 30 seconds",
                "Hip flexor stretch: 30 seconds each leg",
                "Deep breathing: 45 seconds",
            ),
        ),
    ),
    tips_heading="QUICK WORKOUT TIPS",
    tips=(
        "Maximize intensity in short bursts",
        "No equipment needed - use bodyweight",
        "Perfect for busy schedules",
        "Consistency beats perfection!",
    ),
    footer="Perfect for: Busy days, travel, quick energy boost ⚡",
)

DEFAULT_PREBUILT_KIND = "full-body"

PREBUILT_WORKOUTS: dict[str, PrebuiltTemplate] = {
    "push": PUSH,
    "pull": PULL,
    "legs": LEGS,
    "core": CORE,
    "hiit": HIIT,
    "yoga": YOGA,
    "pilates": PILATES,
    "upper": UPPER,
    "lower": LOWER,
    "functional": FUNCTIONAL,
    "flexibility": FLEXIBILITY,
    "quick": QUICK_FULL_BODY,
    DEFAULT_PREBUILT_KIND: FULL_BODY,
}

_KIND_ALIASES = {"abs": "core", "full body": DEFAULT_PREBUILT_KIND}

# (kind, phrases); the first kind with a phrase in the text wins.
KIND_KEYWORDS = (
    ("push", ("push day", "push workout")),
    ("pull", ("pull day", "pull workout")),
    ("legs", ("leg day", "leg workout")),
    ("core", ("core", "abs")),
    ("hiit", ("hiit", "high intensity")),
    ("yoga", ("yoga", "mindful")),
    ("pilates", ("pilates",)),
    ("upper", ("upper",)),
    ("lower", ("lower",)),
    ("functional", ("functional",)),
)


def resolve_prebuilt_kind(kind: str) -> str:
    """Normalise a kind name; unknown kinds become the full-body session."""
    name = kind.strip().lower()
    name = _KIND_ALIASES.get(name, name)
    if name not in PREBUILT_WORKOUTS:
        logger.info("Unknown prebuilt workout %r, using %s", kind, DEFAULT_PREBUILT_KIND)
        return DEFAULT_PREBUILT_KIND
    return name


def match_prebuilt_kind(text: str) -> str | None:
    """Find the prebuilt kind a free-text request asks for, if any."""
    lowered = text.lower()
    for kind, phrases in KIND_KEYWORDS:
        if any(p in lowered for p in phrases):
            return kind
    return None


def prebuilt_workout(kind: str, level: FitnessLevel | str, minutes: int | None = None) -> str:
    """Render the prebuilt session ``kind`` at ``level``.

    ``minutes`` only changes the flexibility and quick sessions; every other
    template has a fixed length.
    """
    name = resolve_prebuilt_kind(kind)
    logger.info("Prebuilt %s workout selected", name)
    return PREBUILT_WORKOUTS[name].render(coerce_level(level), minutes)
