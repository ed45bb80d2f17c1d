"""Ten-pin bowling scoring engine.

Rolls are grouped into frames of at most two rolls (one when the frame is a
strike).  Scoring adds the whole next frame's pins as the bonus for both
strikes and spares and never looks further ahead, so there is no special
tenth-frame handling.  A game accepts a flat maximum of 20 rolls.  Both are
known simplifications of regulation bowling.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Tuple

from ..exceptions import (
    FrameComplete,
    FrameFull,
    GameOver,
    InvalidPins,
    InvalidRollSum,
)

PINS = 10
ROLLS_PER_FRAME = 2
MAX_ROLLS = 20


class Frame:
    """Up to two rolls knocked down against one rack of pins."""

    def __init__(self) -> None:
        self._rolls: List[int] = []
        self._strike = False

    @property
    def rolls(self) -> Tuple[int, ...]:
        return tuple(self._rolls)

    def add_roll(self, pins: int) -> None:
        # Order matters: the sum check wins over the full/strike checks.
        if self.rolls_sum() + pins > PINS:
            raise InvalidRollSum(self.rolls_sum(), pins)
        if len(self._rolls) == ROLLS_PER_FRAME:
            raise FrameFull()
        if self._strike:
            raise FrameComplete()

        self._strike = pins == PINS
        self._rolls.append(pins)

    def rolls_sum(self) -> int:
        return sum(self._rolls)

    def is_strike(self) -> bool:
        return self._strike

    def is_spare(self) -> bool:
        # Also true for a strike frame.
        return self.rolls_sum() == PINS

    def is_complete(self) -> bool:
        return len(self._rolls) == ROLLS_PER_FRAME or self.is_strike()

    def __repr__(self) -> str:
        return f"Frame(rolls={self._rolls!r})"


class Game:
    """A single player's game, fed one roll at a time."""

    def __init__(self) -> None:
        self._frames: List[Frame] = []
        self._rolls = 0

    @classmethod
    def from_rolls(cls, rolls: Iterable[int]) -> "Game":
        """Build a game by rolling ``rolls`` in order.

        The first roll the game refuses raises its error.
        """

        game = cls()
        for pins in rolls:
            game.roll(pins)
        return game

    @property
    def frames(self) -> Tuple[Frame, ...]:
        return tuple(self._frames)

    @property
    def rolls_accepted(self) -> int:
        return self._rolls

    def is_finished(self) -> bool:
        return self._rolls >= MAX_ROLLS

    def roll(self, pins: int) -> None:
        if pins < 0 or pins > PINS:
            raise InvalidPins(pins)
        if self._rolls > MAX_ROLLS - 1:
            raise GameOver(self._rolls)

        if not self._frames or self._frames[-1].is_complete():
            frame = Frame()
            frame.add_roll(pins)
            self._frames.append(frame)
        else:
            self._frames[-1].add_roll(pins)

        self._rolls += 1

    def frame_scores(self) -> List[int]:
        scores = []
        for index, frame in enumerate(self._frames):
            frame_score = frame.rolls_sum()
            if (frame.is_spare() or frame.is_strike()) and index + 1 < len(
                self._frames
            ):
                frame_score += self._frames[index + 1].rolls_sum()
            scores.append(frame_score)
        return scores

    def score(self) -> int:
        return sum(self.frame_scores())

    def summary(self) -> Dict:
        scores = self.frame_scores()
        running = []
        total = 0
        for s in scores:
            total += s
            running.append(total)
        return {
            "frames": [list(f.rolls) for f in self._frames],
            "scores": scores,
            "running": running,
            "total": total,
            "rolls": self._rolls,
            "finished": self.is_finished(),
        }


def init_state(config: Dict) -> Dict:
    """Initialise engine state for bowling.

    ``config`` is stored as given.  The flat roll limit and the one-frame
    bonus lookahead are not configurable.
    """

    return {"config": dict(config or {}), "game": Game()}


def apply(event: Dict, state: Dict) -> Dict:
    if event.get("type") != "ROLL":
        raise ValueError("invalid bowling event")
    pins = event.get("pins")
    if not isinstance(pins, int) or isinstance(pins, bool):
        raise ValueError("invalid bowling event")
    state["game"].roll(pins)
    return state


def summary(state: Dict) -> Dict:
    return state["game"].summary()
