"""Two-stage generation: remote model first, deterministic fallback second.

The orchestrator owns a ``PlanStateHolder`` and is its only writer. Observers
(e.g. the SSE endpoint) subscribe to receive every transition through an
``asyncio.Queue``.

Generation requests never fail from the caller's point of view: a remote
failure is logged and replaced with fallback text. Only ``test_connection``
reports a categorised error.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any

from langchain_core.prompts import ChatPromptTemplate

from fitcoach.chains.workout_chain import (
    CONNECTION_TEST_PROMPT,
    FORM_TIPS_PROMPT,
    QUICK_WORKOUT_PROMPT,
    WORKOUT_PLAN_PROMPT,
    workout_plan_variables,
)
from fitcoach.fallback.generator import (
    generate_fallback,
    generate_form_tips_fallback,
    generate_quick_workout_fallback,
)
from fitcoach.llm.generator import RemoteGenerationError, RemoteWorkoutGenerator
from fitcoach.schemas.workout import GenerationRequest

logger = logging.getLogger(__name__)

NOT_CONFIGURED_MESSAGE = "AI service configuration error. Add an API key to enable AI generation."
CONNECTION_OK_MESSAGE = "API Connection Test Successful!"

# Checked in order; first keyword found in the lowercased reason wins.
_FAILURE_MESSAGES: tuple[tuple[tuple[str, ...], str], ...] = (
    (("authentication",), "Authentication error. Please try again later."),
    (("rate limit",), "Too many requests. Please wait a moment and try again."),
    (("network", "connection"), "Network connection issue. Please check your internet and try again."),
    (("timeout",), "Request timed out. Please try again."),
)
GENERIC_FAILURE_MESSAGE = "Unable to generate workout plan. Please try again."


class PlanStatus(str, Enum):
    IDLE = "idle"
    REQUESTING = "requesting"
    SUCCESS = "success"
    ERROR = "error"


class GenerationSource(str, Enum):
    REMOTE = "remote"
    FALLBACK = "fallback"


@dataclass(frozen=True)
class PlanState:
    status: PlanStatus
    text: str | None = None
    message: str | None = None
    source: GenerationSource | None = None

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["status"] = self.status.value
        data["source"] = self.source.value if self.source else None
        return data


IDLE = PlanState(PlanStatus.IDLE)
REQUESTING = PlanState(PlanStatus.REQUESTING)


@dataclass(frozen=True)
class GenerationOutcome:
    text: str
    source: GenerationSource


class PlanStateHolder:
    """Current plan state plus fan-out to subscribed queues."""

    def __init__(self, initial: PlanState = IDLE) -> None:
        self._value = initial
        self._subscribers: list[asyncio.Queue[PlanState]] = []

    @property
    def value(self) -> PlanState:
        return self._value

    def set(self, state: PlanState) -> None:
        self._value = state
        for queue in self._subscribers:
            queue.put_nowait(state)

    def subscribe(self) -> asyncio.Queue[PlanState]:
        queue: asyncio.Queue[PlanState] = asyncio.Queue()
        self._subscribers.append(queue)
        return queue

    def unsubscribe(self, queue: asyncio.Queue[PlanState]) -> None:
        if queue in self._subscribers:
            self._subscribers.remove(queue)


def categorize_failure(reason: str) -> str:
    """Map a remote failure reason to a user-facing message."""
    lowered = reason.lower()
    for keywords, message in _FAILURE_MESSAGES:
        if any(keyword in lowered for keyword in keywords):
            return message
    return GENERIC_FAILURE_MESSAGE


class WorkoutOrchestrator:
    def __init__(self, remote: RemoteWorkoutGenerator, state: PlanStateHolder | None = None) -> None:
        self.remote = remote
        self.state = state or PlanStateHolder()

    async def _generate_with_fallback(
        self,
        prompt: ChatPromptTemplate,
        variables: dict[str, Any],
        fallback: Callable[[], str],
        label: str,
    ) -> GenerationOutcome:
        if self.remote.is_configured():
            try:
                text = await self.remote.generate(prompt, variables)
                logger.info("Generated %s with AI", label)
                return GenerationOutcome(text, GenerationSource.REMOTE)
            except Exception as e:
                # Any failure, including ones outside RemoteGenerationError.
                logger.warning("AI %s generation failed, using fallback: %s", label, e)
        else:
            logger.info("AI not configured, using fallback %s", label)
        return GenerationOutcome(fallback(), GenerationSource.FALLBACK)

    async def _tracked(self, run: Callable[[], Awaitable[GenerationOutcome]]) -> GenerationOutcome:
        self.state.set(REQUESTING)
        outcome = await run()
        self.state.set(PlanState(PlanStatus.SUCCESS, text=outcome.text, source=outcome.source))
        return outcome

    async def generate_workout_plan(self, request: GenerationRequest) -> GenerationOutcome:
        """Produce a workout plan and publish it as the current state.

        Goes Requesting then Success. Never raises for remote failures.
        """
        logger.info(
            "Generating workout plan: goals=%s level=%s time=%d",
            request.goals,
            request.fitnessLevel.value,
            request.availableTime,
        )
        return await self._tracked(
            lambda: self._generate_with_fallback(
                WORKOUT_PLAN_PROMPT,
                workout_plan_variables(request),
                lambda: generate_fallback(
                    request.goals, request.fitnessLevel, request.availableTime, request.equipment
                ),
                "workout plan",
            )
        )

    async def generate_quick_workout(self, duration: int = 15, equipment: str = "bodyweight") -> GenerationOutcome:
        return await self._tracked(
            lambda: self._generate_with_fallback(
                QUICK_WORKOUT_PROMPT,
                {"duration": str(duration), "equipment": equipment},
                lambda: generate_quick_workout_fallback(duration, equipment),
                "quick workout",
            )
        )

    async def generate_form_tips(self, exercise: str) -> GenerationOutcome:
        # Form tips are informational and do not replace the displayed plan.
        return await self._generate_with_fallback(
            FORM_TIPS_PROMPT,
            {"exercise": exercise},
            lambda: generate_form_tips_fallback(exercise),
            "form tips",
        )

    async def test_connection(self) -> PlanState:
        """Call the remote generator once and report a categorised result."""
        self.state.set(REQUESTING)
        if not self.remote.is_configured():
            result = PlanState(PlanStatus.ERROR, message=NOT_CONFIGURED_MESSAGE)
        else:
            try:
                reply = await self.remote.generate(CONNECTION_TEST_PROMPT, {})
            except RemoteGenerationError as e:
                logger.error("API connection test failed: %s", e.reason)
                result = PlanState(PlanStatus.ERROR, message=categorize_failure(e.reason))
            else:
                result = PlanState(
                    PlanStatus.SUCCESS,
                    text=f"{CONNECTION_OK_MESSAGE}\n\n{reply}",
                    source=GenerationSource.REMOTE,
                )
        self.state.set(result)
        return result

    def reset(self) -> None:
        self.state.set(IDLE)
