"""FastAPI web app exposing the scene player's playback controls."""

import asyncio
from contextlib import asynccontextmanager
from typing import Literal

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field

from scene_animator.authoring import AnalysisClient, AnalysisError
from scene_animator.constants import (
    DEFAULT_ALIGNMENT,
    DEFAULT_COLOR,
    DEFAULT_FONT_SIZE,
    DEFAULT_STEP_MS,
)
from scene_animator.player import ScenePlayer
from scene_animator.scene import (
    DEFAULT_TEMPLATE_NAME,
    AsyncioFrameScheduler,
    SceneValidationError,
    StyleOptions,
)

load_dotenv()

_player: ScenePlayer | None = None


@asynccontextmanager
async def lifespan(app: FastAPI):
    global _player
    client = AnalysisClient()
    scheduler = AsyncioFrameScheduler(asyncio.get_running_loop())
    _player = ScenePlayer(scheduler, analysis_provider=client)
    try:
        yield
    finally:
        _player.close()
        client.close()
        _player = None


app = FastAPI(title="Scene Animator", lifespan=lifespan)


class StyleBody(BaseModel):
    font_size: float = DEFAULT_FONT_SIZE
    color: str = DEFAULT_COLOR
    alignment: Literal["left", "center", "right"] = DEFAULT_ALIGNMENT


class TextSceneBody(BaseModel):
    text: str = Field(..., min_length=1)
    template: str = DEFAULT_TEMPLATE_NAME
    style: StyleBody = StyleBody()


class GenerateBody(BaseModel):
    text: str = Field(..., min_length=1)
    style: StyleBody = StyleBody()


class DesignBody(BaseModel):
    text: str = Field(..., min_length=1)


class SeekBody(BaseModel):
    elapsed_ms: float | None = None
    percent: float | None = None


class StepBody(BaseModel):
    direction: Literal[-1, 1] = 1
    step_ms: float = Field(DEFAULT_STEP_MS, gt=0)


class SpeedBody(BaseModel):
    speed: float


class SceneBody(BaseModel):
    index: int


def get_player() -> ScenePlayer:
    if _player is None:
        raise HTTPException(status_code=503, detail="Player not started")
    return _player


def player_state(player: ScenePlayer) -> dict:
    scene = player.active_scene
    return {
        "elapsed_ms": player.elapsed_ms,
        "is_playing": player.is_playing,
        "speed": player.speed,
        "active_scene_index": player.active_scene_index,
        "scene": {
            "name": scene.name,
            "template": scene.template,
            "total_duration_ms": scene.total_duration_ms,
        },
        "scenes": [s.name for s in player.model],
        "markers": [
            {"time": marker.time_ms, "color": marker.color, "label": marker.label}
            for marker in player.markers
        ],
    }


def _style(body: StyleBody) -> StyleOptions:
    return StyleOptions(font_size=body.font_size, color=body.color, alignment=body.alignment)


@app.get("/api/player")
async def get_state():
    """Current playback position, scene and timeline markers."""
    return player_state(get_player())


@app.post("/api/player/play")
async def play():
    player = get_player()
    player.play()
    return player_state(player)


@app.post("/api/player/pause")
async def pause():
    player = get_player()
    player.pause()
    return player_state(player)


@app.post("/api/player/stop")
async def stop():
    player = get_player()
    player.stop()
    return player_state(player)


@app.post("/api/player/seek")
async def seek(body: SeekBody):
    player = get_player()
    if (body.elapsed_ms is None) == (body.percent is None):
        raise HTTPException(status_code=400, detail="Provide exactly one of elapsed_ms or percent")
    if body.percent is not None:
        player.seek_percent(body.percent)
    else:
        player.seek(body.elapsed_ms)
    return player_state(player)


@app.post("/api/player/step")
async def step(body: StepBody):
    player = get_player()
    player.step(body.direction, body.step_ms)
    return player_state(player)


@app.post("/api/player/speed")
async def set_speed(body: SpeedBody):
    player = get_player()
    try:
        player.set_speed(body.speed)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return player_state(player)


@app.post("/api/player/scene")
async def select_scene(body: SceneBody):
    player = get_player()
    try:
        player.select_scene(body.index)
    except IndexError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return player_state(player)


@app.post("/api/scenes/text")
async def load_text(body: TextSceneBody):
    """Replace the active scene with one built from editor text."""
    player = get_player()
    try:
        player.load_text(body.text, body.template, _style(body.style))
    except ValueError as e:
        # SceneValidationError and unknown template names
        raise HTTPException(status_code=400, detail=str(e))
    return player_state(player)


@app.post("/api/scenes/generate")
async def generate(body: GenerateBody):
    """Analyze text with the language model and replace the active scene."""
    player = get_player()
    try:
        style = _style(body.style)
    except SceneValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))

    provider = player.analysis_provider
    if provider is None:
        raise HTTPException(status_code=503, detail="No analysis provider configured")

    # The HTTP call blocks; keep the frame loop responsive while it runs.
    try:
        analysis = await asyncio.to_thread(provider.analyze, body.text)
    except AnalysisError as e:
        raise HTTPException(status_code=502, detail=str(e))
    result = player.apply_analysis(analysis, style)
    return {"success": True, "state": player_state(player), "scene": result.scene.name}


@app.post("/api/scenes/design")
async def generate_design(body: DesignBody):
    """Let the language model lay out and time every element of the active scene."""
    player = get_player()
    provider = player.analysis_provider
    if provider is None:
        raise HTTPException(status_code=503, detail="No analysis provider configured")

    def analyze_and_design():
        analysis = provider.analyze(body.text)
        return analysis, provider.design(analysis)

    try:
        analysis, design = await asyncio.to_thread(analyze_and_design)
    except AnalysisError as e:
        raise HTTPException(status_code=502, detail=str(e))
    try:
        scene = player.apply_design(design, name=analysis.title)
    except SceneValidationError as e:
        raise HTTPException(status_code=502, detail=f"Unusable design: {e}")
    return {"success": True, "state": player_state(player), "scene": scene.name}


@app.get("/api/frame.png")
async def frame():
    """PNG of the frame currently on the drawing surface."""
    return Response(content=get_player().snapshot(), media_type="image/png")
