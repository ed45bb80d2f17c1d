from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        super().__init__(detail or title)
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code


class BowlingError(DomainException):
    """A roll or query the scoring engine refuses; nothing was recorded."""


class InvalidPins(BowlingError):
    def __init__(self, pins: int) -> None:
        super().__init__(
            status_code=422,
            title="Invalid pins",
            detail=f"pin count must be between 0 and 10 (got {pins})",
            code="invalid_pins",
        )
        self.pins = pins


class GameOver(BowlingError):
    def __init__(self, rolls: int) -> None:
        super().__init__(
            status_code=409,
            title="Game over",
            detail=f"no rolls allowed after {rolls} rolls",
            code="game_over",
        )


class InvalidRollSum(BowlingError):
    def __init__(self, current: int, pins: int) -> None:
        super().__init__(
            status_code=422,
            title="Invalid rolls sum",
            detail=f"frame already has {current} pins; {pins} more would exceed 10",
            code="invalid_roll_sum",
        )


class FrameFull(BowlingError):
    def __init__(self) -> None:
        super().__init__(
            status_code=409,
            title="Frame full",
            detail="no more rolls allowed in this frame",
            code="frame_full",
        )


class FrameComplete(BowlingError):
    def __init__(self) -> None:
        super().__init__(
            status_code=409,
            title="Frame complete",
            detail="frame complete due to strike",
            code="frame_complete",
        )


class GameNotFound(DomainException):
    def __init__(self, game_id: str) -> None:
        super().__init__(
            status_code=404,
            title="Game not found",
            detail=f"game '{game_id}' not found",
            code="game_not_found",
        )


class TooManyGames(DomainException):
    def __init__(self, limit: int) -> None:
        super().__init__(
            status_code=429,
            title="Too many games",
            detail=f"at most {limit} games may be active at once",
            code="too_many_games",
        )
