from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from threading import Lock
from typing import Optional
from uuid import uuid4

from draughts.errors import GameError
from draughts.game import Game
from draughts.move import Move
from draughts.pieces import Color, KingRule
from draughts.position import Position
from draughts.result import Err

logger = logging.getLogger(__name__)


class GameNotFoundError(LookupError):
    def __init__(self, game_id: str) -> None:
        super().__init__(f"Game {game_id} not found.")
        self.game_id = game_id


class DuplicateGameError(ValueError):
    def __init__(self, name: str) -> None:
        super().__init__(f"A game named '{name}' already exists.")
        self.name = name


class IllegalMoveError(ValueError):
    """A move the engine rejected; ``error`` is the engine's own value."""

    def __init__(self, error: GameError) -> None:
        super().__init__(str(error))
        self.error = error


@dataclass(frozen=True, slots=True)
class GameEntry:
    id: str
    name: str
    game: Game


class GameRegistry:
    """Thread-safe store of running games keyed by id.

    Moves on one game are serialized by that game's lock; different games
    never wait on each other. Lookups read the last committed entry without
    locking.
    """

    def __init__(self, king_rule: KingRule = KingRule.FLYING) -> None:
        self.king_rule = king_rule
        self.lock = Lock()
        self._entries: dict[str, GameEntry] = {}
        self._ids_by_name: dict[str, str] = {}
        self._move_locks: dict[str, Lock] = {}

    # public API ---------------------------------------------------------

    def create(self, name: str) -> GameEntry:
        name = name.strip()
        if not name:
            raise ValueError("Game name must not be blank.")
        with self.lock:
            if name in self._ids_by_name:
                raise DuplicateGameError(name)
            entry = GameEntry(id=str(uuid4()), name=name, game=Game.initial(self.king_rule))
            self._entries[entry.id] = entry
            self._ids_by_name[name] = entry.id
            self._move_locks[entry.id] = Lock()
        logger.info("Created game %s (%s)", entry.id, name)
        return entry

    def list_games(self) -> list[GameEntry]:
        with self.lock:
            return list(self._entries.values())

    def find(self, game_id: str) -> Optional[GameEntry]:
        return self._entries.get(game_id)

    def find_by_name(self, name: str) -> Optional[GameEntry]:
        game_id = self._ids_by_name.get(name.strip())
        if game_id is None:
            return None
        return self._entries.get(game_id)

    def get(self, game_id: str) -> GameEntry:
        entry = self.find(game_id)
        if entry is None:
            raise GameNotFoundError(game_id)
        return entry

    def delete(self, game_id: str) -> GameEntry:
        with self.lock:
            entry = self._entries.pop(game_id, None)
            if entry is None:
                raise GameNotFoundError(game_id)
            self._ids_by_name.pop(entry.name, None)
            self._move_locks.pop(game_id, None)
        logger.info("Deleted game %s (%s)", game_id, entry.name)
        return entry

    def make_move(self, game_id: str, start: Position, end: Position) -> GameEntry:
        move_lock = self._move_locks.get(game_id)
        if move_lock is None:
            raise GameNotFoundError(game_id)
        with move_lock:
            entry = self.get(game_id)
            result = entry.game.propose(start, end)
            if isinstance(result, Err):
                raise IllegalMoveError(result.error)
            updated = replace(entry, game=result.value)
            with self.lock:
                if game_id not in self._entries:
                    raise GameNotFoundError(game_id)
                self._entries[game_id] = updated
        logger.debug("Game %s: %s - %s committed", game_id, start, end)
        return updated

    def valid_moves(self, game_id: str, color: Optional[Color] = None) -> dict[Position, list[Move]]:
        game = self.get(game_id).game
        return game.valid_moves_for_player(color or game.current_player)
