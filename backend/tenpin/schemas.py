from typing import List

from pydantic import BaseModel, ConfigDict, Field

from .scoring.bowling import Frame, Game


class RollIn(BaseModel):
    # Range is checked by the game (``invalid_pins``).
    pins: int = Field(..., strict=True)

    model_config = ConfigDict(extra="forbid")


class FrameOut(BaseModel):
    rolls: List[int]
    sum: int
    strike: bool
    spare: bool
    complete: bool

    @classmethod
    def from_frame(cls, frame: Frame) -> "FrameOut":
        return cls(
            rolls=list(frame.rolls),
            sum=frame.rolls_sum(),
            strike=frame.is_strike(),
            spare=frame.is_spare(),
            complete=frame.is_complete(),
        )


class GameOut(BaseModel):
    id: str
    frames: List[FrameOut]
    scores: List[int]
    running: List[int]
    total: int
    rolls: int
    finished: bool

    @classmethod
    def from_game(cls, game_id: str, game: Game) -> "GameOut":
        summary = game.summary()
        return cls(
            id=game_id,
            frames=[FrameOut.from_frame(f) for f in game.frames],
            scores=summary["scores"],
            running=summary["running"],
            total=summary["total"],
            rolls=summary["rolls"],
            finished=summary["finished"],
        )


class ScoreOut(BaseModel):
    id: str
    total: int
