from __future__ import annotations

import logging
from typing import Any, Literal, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from draughts.pieces import Color

from .schemas import CreateGameRequest, MoveRequest
from .serializers import serialize_game, serialize_valid_moves
from .session import DuplicateGameError, GameEntry, GameNotFoundError, GameRegistry, IllegalMoveError
from .settings import Settings, get_settings

logger = logging.getLogger(__name__)


def _serialize_entry(entry: GameEntry) -> dict[str, Any]:
    return serialize_game(entry.id, entry.name, entry.game)


def create_app(settings: Optional[Settings] = None, registry: Optional[GameRegistry] = None) -> FastAPI:
    settings = settings or get_settings()
    app = FastAPI(title="Checkers Rules Engine", version="1.0.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type"],
        allow_credentials=False,
        max_age=86400,
    )

    games = registry or GameRegistry(king_rule=settings.king_rule)
    logger.info("Serving games with %s kings", games.king_rule.value)

    def get_registry() -> GameRegistry:
        return games

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.post("/games")
    def create_game(payload: CreateGameRequest, registry: GameRegistry = Depends(get_registry)):
        try:
            return _serialize_entry(registry.create(payload.name))
        except DuplicateGameError as exc:
            raise HTTPException(status_code=409, detail=str(exc)) from exc
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.get("/games")
    def list_games(registry: GameRegistry = Depends(get_registry)):
        return [_serialize_entry(entry) for entry in registry.list_games()]

    @app.get("/games/id/{game_id}")
    def read_game(game_id: str, registry: GameRegistry = Depends(get_registry)):
        try:
            return _serialize_entry(registry.get(game_id))
        except GameNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc

    @app.get("/games/name/{name}")
    def read_game_by_name(name: str, registry: GameRegistry = Depends(get_registry)):
        entry = registry.find_by_name(name)
        if entry is None:
            raise HTTPException(status_code=404, detail=f"Game named '{name}' not found.")
        return _serialize_entry(entry)

    @app.delete("/games/{game_id}")
    def delete_game(game_id: str, registry: GameRegistry = Depends(get_registry)):
        try:
            registry.delete(game_id)
        except GameNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return {"deleted": game_id}

    @app.post("/games/{game_id}/move")
    def play_move(game_id: str, payload: MoveRequest, registry: GameRegistry = Depends(get_registry)):
        try:
            entry = registry.make_move(game_id, payload.start.to_position(), payload.end.to_position())
        except GameNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        except IllegalMoveError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return _serialize_entry(entry)

    @app.get("/games/{game_id}/valid-moves")
    def read_valid_moves(
        game_id: str,
        color: Optional[Literal["white", "black"]] = Query(default=None),
        registry: GameRegistry = Depends(get_registry),
    ):
        try:
            moves = registry.valid_moves(game_id, Color[color.upper()] if color else None)
        except GameNotFoundError as exc:
            raise HTTPException(status_code=404, detail=str(exc)) from exc
        return serialize_valid_moves(moves)

    return app


app = create_app()
