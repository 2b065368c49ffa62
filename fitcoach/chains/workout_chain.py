"""Prompts for the remote workout generator.

Each prompt is a ``ChatPromptTemplate``; ``build_text_chain`` composes it with
a chat model and a string parser so the reply comes back as plain text.
"""

from __future__ import annotations

from collections.abc import Sequence

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_core.output_parsers import StrOutputParser
from langchain_core.prompts import ChatPromptTemplate
from langchain_core.runnables import Runnable

from fitcoach.schemas.workout import GenerationRequest

TRAINER_SYSTEM_PROMPT = """\
You are FitSoul's elite AI fitness trainer with expertise in:
- Exercise physiology and biomechanics
- Personalized workout programming
- Injury prevention and form coaching
- Motivational fitness guidance

ALWAYS provide detailed, structured workout plans with:
- Specific exercise names, sets, reps, and rest periods
- Form cues and safety tips
- Appropriate intensity for the user's fitness level
- Engaging format with emojis and clear structure
- Complete warm-up, main workout, and cool-down sections

Make every response actionable, motivational, and safe."""

WORKOUT_PLAN_TEMPLATE = """\
Create a comprehensive, personalized workout plan.

🎯 USER PROFILE:
• Fitness Goals: {goals}
• Experience Level: {level}
• Available Time: {time} minutes
• Equipment: {equipment}

📋 MANDATORY STRUCTURE (use exactly this format):

🔥 WARM-UP (5 minutes)
[List 3-4 dynamic warm-up exercises with duration]

💪 MAIN WORKOUT ({main_time} minutes)
[Create 3-4 exercises based on goals and level]
For each exercise include:
• Exercise name
• Sets x Reps (adjusted for {level} level)
• Rest period
• Quick form tip

🧘 COOL-DOWN (5 minutes)
[List 3-4 stretching/recovery exercises]

💡 PRO TIPS:
[3-4 specific tips for this workout]

IMPORTANT GUIDELINES:
- Adjust intensity for {level} level
- Focus primarily on: {goals}
- All exercises must be possible with: {equipment}
- Be specific with sets, reps, and rest times
- Include safety reminders

Generate a complete, ready-to-use workout that takes exactly {time} minutes."""

QUICK_WORKOUT_TEMPLATE = """\
Create a quick, effective {duration}-minute workout using {equipment}.

Format:
🔥 Quick {duration}-Min Workout

💪 Exercises (complete 2 rounds):
[List 4-5 exercises with reps/time]

💡 Notes:
• Total time: {duration} minutes
• Equipment: {equipment}
• Focus on full-body movement

Make it energizing and doable for anyone!"""

FORM_TIPS_TEMPLATE = """\
Provide expert form guidance for the exercise: {exercise}

Format:
🏋️ Perfect Form: {exercise}

✅ Setup:
[Starting position and setup]

🎯 Execution:
[Step-by-step movement]

⚠️ Common Mistakes:
[2-3 common errors to avoid]

💡 Pro Tips:
[Advanced technique tips]

Focus on safety, proper biomechanics, and effectiveness."""

WORKOUT_PLAN_PROMPT = ChatPromptTemplate.from_messages(
    [("system", TRAINER_SYSTEM_PROMPT), ("human", WORKOUT_PLAN_TEMPLATE)]
)
QUICK_WORKOUT_PROMPT = ChatPromptTemplate.from_messages(
    [("system", TRAINER_SYSTEM_PROMPT), ("human", QUICK_WORKOUT_TEMPLATE)]
)
FORM_TIPS_PROMPT = ChatPromptTemplate.from_messages(
    [("system", TRAINER_SYSTEM_PROMPT), ("human", FORM_TIPS_TEMPLATE)]
)
CONNECTION_TEST_PROMPT = ChatPromptTemplate.from_messages(
    [("human", "Respond with exactly: 'API Connection Successful'")]
)
HEALTH_CHECK_PROMPT = ChatPromptTemplate.from_messages(
    [("human", "Respond with exactly 'API_HEALTHY' if you can read this.")]
)

BODYWEIGHT_ONLY = "No equipment (bodyweight exercises only)"


def build_text_chain(prompt: ChatPromptTemplate, llm: BaseChatModel) -> Runnable:
    """Build an LCEL chain: prompt | llm | parser."""
    return prompt | llm | StrOutputParser()


def format_equipment(equipment: Sequence[str]) -> str:
    return ", ".join(equipment) if equipment else BODYWEIGHT_ONLY


def workout_plan_variables(request: GenerationRequest) -> dict[str, str]:
    return {
        "goals": ", ".join(request.goals),
        "level": request.fitnessLevel.value,
        "time": str(request.availableTime),
        "main_time": str(max(request.availableTime - 10, 5)),
        "equipment": format_equipment(request.equipment),
    }
