from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any
from uuid import uuid4

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import TypeAdapter, ValidationError

from . import config, store
from .engine.autoplay import ai_autoplay
from .engine.core import ContagionEngine
from .engine.errors import IllegalMoveError, InvalidCoordinateError
from .logging_listeners import register_listeners
from .models.api import (
    ActionLogEntry,
    ActionLogResponse,
    ApplyMoveResponse,
    CreateGameRequest,
    EvaluateResponse,
    GameView,
    LegalMovesResponse,
    MoveRequest,
    RestartGameRequest,
)
from .models.board import Cell
from .models.enums import Owner
from .models.state import Move
from .store import GameRecord

logging.getLogger("contagion").setLevel(config.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Contagion")
engine = ContagionEngine()
register_listeners()

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


async def _load(gid: str) -> GameRecord:
    rec = await store.store.get(gid)
    if not rec:
        raise HTTPException(404, "game not found")
    return rec


@asynccontextmanager
async def _locked(gid: str) -> AsyncIterator[GameRecord]:
    """Hold the game's lock across read-apply-write; 404 for unknown ids."""
    try:
        lock = store.store.lock(gid)
    except KeyError:
        raise HTTPException(404, "game not found") from None
    async with lock:
        yield await _load(gid)


@app.exception_handler(InvalidCoordinateError)
async def _invalid_coordinate(request: Request, exc: InvalidCoordinateError) -> JSONResponse:
    return JSONResponse(status_code=400, content={"detail": str(exc)})


@app.get("/health")
def health() -> dict[str, Any]:
    return {"ok": True, "storage": "memory"}


@app.get("/info")
def defaults_info():
    """Expose request schemas and examples for the presentation layer."""
    return {
        "defaults": {
            "size": config.BOARD_SIZE,
            "ai_player": config.AI_PLAYER.value if config.AI_PLAYER else None,
        },
        "models": {
            "move": {
                "schema": Move.model_json_schema(),
                "example": Move(src=(0, 0), dst=(1, 1)).model_dump(mode="json"),
            },
            "game": {"schema": GameView.model_json_schema()},
        },
        "requests": {
            "create_game": {
                "schema": CreateGameRequest.model_json_schema(),
                "example": CreateGameRequest(size=config.BOARD_SIZE, seed=7).model_dump(
                    mode="json"
                ),
            },
            "move": {"schema": MoveRequest.model_json_schema()},
        },
    }


@app.get("/games", response_model=list[GameView])
async def list_games():
    return [GameView.of(r.id, r.state) for r in await store.store.all()]


@app.post("/games", response_model=GameView)
async def create_game(req: CreateGameRequest):
    size = req.size or config.BOARD_SIZE
    try:
        state = engine.init_game(size, req.seed)
    except ValueError as e:
        raise HTTPException(400, str(e)) from e
    rec = GameRecord(id=str(uuid4()), state=state, seed=req.seed)
    await store.store.set(rec)
    logger.info("created game %s (size=%d, seed=%s)", rec.id, size, req.seed)
    return GameView.of(rec.id, rec.state)


@app.get("/games/{gid}", response_model=GameView)
async def get_game(gid: str):
    rec = await _load(gid)
    return GameView.of(rec.id, rec.state)


@app.delete("/games/{gid}", status_code=204)
async def delete_game(gid: str) -> None:
    async with _locked(gid):
        await store.store.delete(gid)
    logger.info("deleted game %s", gid)


@app.get("/games/{gid}/cells/{x}/{y}", response_model=Cell)
async def get_cell(gid: str, x: int, y: int):
    rec = await _load(gid)
    return engine.cell_at(rec.state, x, y)


@app.get("/games/{gid}/legal_moves", response_model=LegalMovesResponse)
async def list_legal_moves(gid: str, player: Owner | None = None):
    rec = await _load(gid)
    who = player or rec.state.current_player
    if not who.is_player:
        raise HTTPException(400, f"{who.value} is not a player")
    return LegalMovesResponse(player=who, moves=engine.legal_moves(rec.state, who))


@app.post("/games/{gid}/evaluate", response_model=EvaluateResponse)
async def evaluate_move(gid: str, req: MoveRequest):
    rec = await _load(gid)
    return engine.evaluate(rec.state, req.move)


@app.post("/games/{gid}/move", response_model=ApplyMoveResponse)
async def apply_move(gid: str, req: MoveRequest):
    async with _locked(gid) as rec:
        state = rec.state
        if config.AI_PLAYER is not None and state.current_player == config.AI_PLAYER:
            raise HTTPException(409, f"{state.current_player.value} is played by the AI")
        try:
            results = [engine.apply_move(state, req.move, game_id=gid)]
        except IllegalMoveError as e:
            raise HTTPException(400, e.reason) from e
        # Auto-play the AI side while it holds the turn
        if config.AI_PLAYER is not None:
            _, ai_results = ai_autoplay(
                engine, state, config.AI_PLAYER, config.AI_MAX_CHAIN, game_id=gid
            )
            results.extend(ai_results)
        await store.store.set(rec)
        return ApplyMoveResponse(applied=results, game=GameView.of(gid, state))


@app.post("/games/{gid}/ai_move", response_model=ApplyMoveResponse)
async def apply_ai_move(gid: str):
    async with _locked(gid) as rec:
        move = engine.choose_ai_move(rec.state)
        if move is None:
            raise HTTPException(409, "no move available")
        result = engine.apply_move(rec.state, move, game_id=gid)
        await store.store.set(rec)
        return ApplyMoveResponse(applied=[result], game=GameView.of(gid, rec.state))


@app.post("/games/{gid}/restart", response_model=GameView)
async def restart_game(gid: str, req: RestartGameRequest | None = None):
    async with _locked(gid) as rec:
        seed = req.seed if req else None
        fresh = GameRecord(
            id=gid, state=engine.init_game(rec.state.board.size, seed), seed=seed
        )
        store.logs.drop(gid)
        await store.store.set(fresh)
        return GameView.of(gid, fresh.state)


@app.get("/games/{gid}/log", response_model=ActionLogResponse)
async def get_action_log(gid: str, limit: int = Query(50, ge=1, le=1000)):
    await _load(gid)
    ta = TypeAdapter(ActionLogEntry)
    entries: list[ActionLogEntry] = []
    for line in store.logs.list(gid, limit):
        try:
            entries.append(ta.validate_json(line))
        except ValidationError:
            logger.warning("skipping malformed log line for game %s", gid)
    return ActionLogResponse(entries=entries)
