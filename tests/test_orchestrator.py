"""Tests for the generation orchestrator."""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from fitcoach.agent.orchestrator import (
    CONNECTION_OK_MESSAGE,
    GENERIC_FAILURE_MESSAGE,
    NOT_CONFIGURED_MESSAGE,
    GenerationSource,
    PlanState,
    PlanStateHolder,
    PlanStatus,
    WorkoutOrchestrator,
    categorize_failure,
)
from fitcoach.chains.workout_chain import CONNECTION_TEST_PROMPT, WORKOUT_PLAN_PROMPT
from fitcoach.fallback.generator import generate_fallback, generate_form_tips_fallback
from fitcoach.llm.generator import RemoteGenerationError, RemoteWorkoutGenerator
from fitcoach.schemas.workout import GenerationRequest

REQUEST = GenerationRequest(goals=["strength"], fitnessLevel="Beginner", availableTime=30, equipment=["dumbbells"])


def _remote(configured=True, reply="🔥 AI Plan", error=None):
    remote = MagicMock(spec=RemoteWorkoutGenerator)
    remote.is_configured.return_value = configured
    remote.generate = AsyncMock(return_value=reply, side_effect=error)
    return remote


def _recorder(holder):
    seen = []
    queue = holder.subscribe()

    def drain():
        while not queue.empty():
            seen.append(queue.get_nowait())
        return seen

    return drain


class TestGenerateWorkoutPlan:
    def test_remote_success(self):
        remote = _remote()
        orchestrator = WorkoutOrchestrator(remote)

        outcome = asyncio.run(orchestrator.generate_workout_plan(REQUEST))

        assert outcome.text == "🔥 AI Plan"
        assert outcome.source is GenerationSource.REMOTE
        prompt, variables = remote.generate.await_args.args
        assert prompt is WORKOUT_PLAN_PROMPT
        assert variables["equipment"] == "dumbbells"
        assert orchestrator.state.value == PlanState(
            PlanStatus.SUCCESS, text="🔥 AI Plan", source=GenerationSource.REMOTE
        )

    def test_unconfigured_uses_fallback_without_calling_remote(self):
        remote = _remote(configured=False)
        orchestrator = WorkoutOrchestrator(remote)

        outcome = asyncio.run(orchestrator.generate_workout_plan(REQUEST))

        assert outcome.source is GenerationSource.FALLBACK
        assert outcome.text == generate_fallback(["strength"], "Beginner", 30, ["dumbbells"])
        remote.generate.assert_not_awaited()
        assert orchestrator.state.value.status is PlanStatus.SUCCESS

    @pytest.mark.parametrize("error", [RemoteGenerationError("rate limit exceeded"), RuntimeError("boom")])
    def test_remote_failure_falls_back(self, error):
        orchestrator = WorkoutOrchestrator(_remote(error=error))

        outcome = asyncio.run(orchestrator.generate_workout_plan(REQUEST))

        assert outcome.source is GenerationSource.FALLBACK
        assert "Complete 2 rounds:" in outcome.text
        assert orchestrator.state.value.status is PlanStatus.SUCCESS
        assert orchestrator.state.value.message is None

    def test_transitions(self):
        orchestrator = WorkoutOrchestrator(_remote(configured=False))
        drain = _recorder(orchestrator.state)

        asyncio.run(orchestrator.generate_workout_plan(REQUEST))

        assert [s.status for s in drain()] == [PlanStatus.REQUESTING, PlanStatus.SUCCESS]


class TestOtherGenerations:
    def test_quick_workout_fallback(self):
        orchestrator = WorkoutOrchestrator(_remote(configured=False))

        outcome = asyncio.run(orchestrator.generate_quick_workout(10, "jump rope"))

        assert outcome.source is GenerationSource.FALLBACK
        assert "Equipment Used: jump rope" in outcome.text
        assert orchestrator.state.value.text == outcome.text

    def test_quick_workout_remote_variables(self):
        remote = _remote()
        asyncio.run(WorkoutOrchestrator(remote).generate_quick_workout())

        assert remote.generate.await_args.args[1] == {"duration": "15", "equipment": "bodyweight"}

    def test_form_tips_do_not_touch_plan_state(self):
        orchestrator = WorkoutOrchestrator(_remote(error=RemoteGenerationError("timeout")))

        outcome = asyncio.run(orchestrator.generate_form_tips("squat"))

        assert outcome.text == generate_form_tips_fallback("squat")
        assert orchestrator.state.value.status is PlanStatus.IDLE


class TestConnectionTest:
    def test_unconfigured(self):
        remote = _remote(configured=False)
        state = asyncio.run(WorkoutOrchestrator(remote).test_connection())

        assert state == PlanState(PlanStatus.ERROR, message=NOT_CONFIGURED_MESSAGE)
        remote.generate.assert_not_awaited()

    def test_success(self):
        remote = _remote(reply="API Connection Successful")
        orchestrator = WorkoutOrchestrator(remote)

        state = asyncio.run(orchestrator.test_connection())

        assert state.status is PlanStatus.SUCCESS
        assert state.text == f"{CONNECTION_OK_MESSAGE}\n\nAPI Connection Successful"
        assert remote.generate.await_args.args[0] is CONNECTION_TEST_PROMPT
        assert orchestrator.state.value is state

    def test_failure_is_categorised(self):
        orchestrator = WorkoutOrchestrator(_remote(error=RemoteGenerationError("rate limit exceeded: 429")))

        state = asyncio.run(orchestrator.test_connection())

        assert state.status is PlanStatus.ERROR
        assert state.message == "Too many requests. Please wait a moment and try again."
        assert state.text is None

    def test_reset(self):
        orchestrator = WorkoutOrchestrator(_remote(configured=False))
        asyncio.run(orchestrator.test_connection())
        orchestrator.reset()

        assert orchestrator.state.value == PlanState(PlanStatus.IDLE)


class TestCategorizeFailure:
    @pytest.mark.parametrize(
        ("reason", "message"),
        [
            ("authentication failed: bad key", "Authentication error. Please try again later."),
            ("Rate Limit exceeded", "Too many requests. Please wait a moment and try again."),
            ("network connection error", "Network connection issue. Please check your internet and try again."),
            ("Connection reset by peer", "Network connection issue. Please check your internet and try again."),
            ("request TIMEOUT", "Request timed out. Please try again."),
            ("KeyError: 'choices'", GENERIC_FAILURE_MESSAGE),
            ("", GENERIC_FAILURE_MESSAGE),
        ],
    )
    def test_messages(self, reason, message):
        assert categorize_failure(reason) == message

    def test_first_keyword_wins(self):
        assert categorize_failure("authentication timeout") == "Authentication error. Please try again later."


class TestPlanStateHolder:
    def test_unsubscribed_queue_stops_receiving(self):
        holder = PlanStateHolder()
        queue = holder.subscribe()
        holder.set(PlanState(PlanStatus.REQUESTING))
        holder.unsubscribe(queue)
        holder.set(PlanState(PlanStatus.IDLE))

        assert queue.qsize() == 1
        holder.unsubscribe(queue)

    def test_to_dict(self):
        state = PlanState(PlanStatus.SUCCESS, text="plan", source=GenerationSource.FALLBACK)
        assert state.to_dict() == {"status": "success", "text": "plan", "message": None, "source": "fallback"}
