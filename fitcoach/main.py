from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import AsyncGenerator

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(name)s %(levelname)s %(message)s",
)

from dotenv import load_dotenv

load_dotenv()

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import StreamingResponse

from fitcoach.agent.orchestrator import PlanStatus, WorkoutOrchestrator
from fitcoach.config import Settings, get_settings
from fitcoach.fallback.prebuilt import (
    DEFAULT_PREBUILT_KIND,
    match_prebuilt_kind,
    prebuilt_workout,
    resolve_prebuilt_kind,
)
from fitcoach.llm.generator import RemoteWorkoutGenerator
from fitcoach.schemas.workout import (
    FormTipsRequest,
    GenerationRequest,
    PrebuiltWorkoutRequest,
    QuickWorkoutRequest,
    SaveFromTextRequest,
    SaveWorkoutRequest,
    Workout,
)
from fitcoach.storage import JsonFileKeyValueStore, WorkoutStore

logger = logging.getLogger(__name__)

_settings: Settings | None = None
_remote: RemoteWorkoutGenerator | None = None
_store: WorkoutStore | None = None
_orchestrator: WorkoutOrchestrator | None = None


def _get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings


def _get_remote() -> RemoteWorkoutGenerator:
    global _remote
    if _remote is None:
        _remote = RemoteWorkoutGenerator(_get_settings())
    return _remote


def _get_store() -> WorkoutStore:
    global _store
    if _store is None:
        _store = WorkoutStore(JsonFileKeyValueStore(_get_settings().store_path))
    return _store


def _get_orchestrator() -> WorkoutOrchestrator:
    global _orchestrator
    if _orchestrator is None:
        _orchestrator = WorkoutOrchestrator(_get_remote())
    return _orchestrator


app = FastAPI(title="FitCoach")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",
        "http://localhost:3001",
        _get_settings().frontend_url,
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _sse(data: dict) -> str:
    return f"data: {json.dumps(data)}\n\n"


# ============================================
# Generation
# ============================================


@app.get("/health")
async def health():
    return {"status": "ok", "aiConfigured": _get_remote().is_configured()}


@app.post("/generate-workout")
async def generate_workout(request: GenerationRequest):
    outcome = await _get_orchestrator().generate_workout_plan(request)
    return {"plan": outcome.text, "source": outcome.source.value}


async def _stream_plan(request: GenerationRequest) -> AsyncGenerator[str, None]:
    orchestrator = _get_orchestrator()
    queue = orchestrator.state.subscribe()
    try:
        task = asyncio.create_task(orchestrator.generate_workout_plan(request))
        while not task.done():
            try:
                state = await asyncio.wait_for(queue.get(), timeout=0.1)
                yield _sse(state.to_dict())
            except asyncio.TimeoutError:
                continue
        task.result()
        while not queue.empty():
            yield _sse(queue.get_nowait().to_dict())
    finally:
        orchestrator.state.unsubscribe(queue)


@app.post("/generate-workout/stream")
async def generate_workout_stream(request: GenerationRequest):
    """Stream plan state transitions (requesting, then success) as SSE."""
    return StreamingResponse(_stream_plan(request), media_type="text/event-stream")


@app.post("/quick-workout")
async def quick_workout(request: QuickWorkoutRequest):
    outcome = await _get_orchestrator().generate_quick_workout(request.duration, request.equipment)
    return {"plan": outcome.text, "source": outcome.source.value}


@app.post("/form-tips")
async def form_tips(request: FormTipsRequest):
    outcome = await _get_orchestrator().generate_form_tips(request.exercise)
    return {"tips": outcome.text, "source": outcome.source.value}


@app.post("/prebuilt-workout")
async def prebuilt_session(request: PrebuiltWorkoutRequest):
    """Render a prebuilt session by kind, or by keywords in ``text``."""
    if request.kind is not None:
        kind = resolve_prebuilt_kind(request.kind)
    else:
        kind = match_prebuilt_kind(request.text) or DEFAULT_PREBUILT_KIND
    plan = prebuilt_workout(kind, request.fitnessLevel, request.minutes)
    return {"plan": plan, "kind": kind}


@app.post("/test-connection")
async def test_connection():
    state = await _get_orchestrator().test_connection()
    if state.status is PlanStatus.ERROR:
        logger.warning("Connection test reported: %s", state.message)
    return state.to_dict()


# ============================================
# Saved workouts
# ============================================


@app.get("/workouts")
async def list_workouts() -> list[Workout]:
    return await _get_store().list_all()


@app.get("/workouts/{workout_id}")
async def get_workout(workout_id: str) -> Workout:
    workout = await _get_store().get(workout_id)
    if workout is None:
        raise HTTPException(status_code=404, detail=f"Workout not found: {workout_id}")
    return workout


@app.post("/workouts")
async def save_workout(workout: SaveWorkoutRequest) -> Workout:
    try:
        return await _get_store().save(workout)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@app.post("/workouts/from-text")
async def save_workout_from_text(request: SaveFromTextRequest) -> Workout:
    return await _get_store().save_from_text(request.content)


@app.delete("/workouts/{workout_id}")
async def delete_workout(workout_id: str):
    await _get_store().delete(workout_id)
    return {"deleted": workout_id}


def run() -> None:
    import uvicorn

    uvicorn.run("fitcoach.main:app", host="0.0.0.0", port=8000, reload=True)


if __name__ == "__main__":
    run()
