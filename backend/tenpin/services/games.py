"""In-memory registry of bowling games in progress."""

from __future__ import annotations

import logging
import threading
import uuid
from typing import Dict, Optional

from ..exceptions import GameNotFound, TooManyGames
from ..schemas import GameOut
from ..scoring.bowling import Game

logger = logging.getLogger(__name__)


class GameRegistry:
    """Independent games keyed by id.

    ``Game`` objects are not thread-safe on their own, so every read or write
    of a registered game happens under the registry lock.  Nothing is
    persisted; games live as long as the process.
    """

    def __init__(self, max_games: Optional[int] = None) -> None:
        self._games: Dict[str, Game] = {}
        self._lock = threading.Lock()
        self.max_games = max_games

    def __len__(self) -> int:
        with self._lock:
            return len(self._games)

    def __contains__(self, game_id: str) -> bool:
        with self._lock:
            return game_id in self._games

    def _get(self, game_id: str) -> Game:
        game = self._games.get(game_id)
        if game is None:
            raise GameNotFound(game_id)
        return game

    def create(self) -> GameOut:
        with self._lock:
            if self.max_games is not None and len(self._games) >= self.max_games:
                logger.warning(
                    "Refusing new game; %d games already active", len(self._games)
                )
                raise TooManyGames(self.max_games)
            game_id = uuid.uuid4().hex
            game = self._games[game_id] = Game()
            out = GameOut.from_game(game_id, game)
        logger.info("Created game %s", game_id)
        return out

    def get(self, game_id: str) -> GameOut:
        with self._lock:
            return GameOut.from_game(game_id, self._get(game_id))

    def roll(self, game_id: str, pins: int) -> GameOut:
        """Roll ``pins`` in the given game and return its new state.

        Errors raised by the game propagate unchanged and leave it untouched.
        """

        with self._lock:
            game = self._get(game_id)
            game.roll(pins)
            logger.debug(
                "Game %s: rolled %d (roll %d)", game_id, pins, game.rolls_accepted
            )
            return GameOut.from_game(game_id, game)

    def score(self, game_id: str) -> int:
        with self._lock:
            return self._get(game_id).score()

    def delete(self, game_id: str) -> None:
        with self._lock:
            if self._games.pop(game_id, None) is None:
                raise GameNotFound(game_id)
        logger.info("Deleted game %s", game_id)
