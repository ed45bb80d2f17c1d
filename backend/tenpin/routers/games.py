from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from ..config import MAX_ACTIVE_GAMES
from ..schemas import GameOut, RollIn, ScoreOut
from ..services import GameRegistry

router = APIRouter(prefix="/games", tags=["games"])

_registry = GameRegistry(max_games=MAX_ACTIVE_GAMES)


def get_registry() -> GameRegistry:
    return _registry


# POST /api/v0/games
@router.post("", response_model=GameOut, status_code=201)
def create_game(registry: GameRegistry = Depends(get_registry)) -> GameOut:
    return registry.create()


# GET /api/v0/games/{game_id}
@router.get("/{game_id}", response_model=GameOut)
def get_game(game_id: str, registry: GameRegistry = Depends(get_registry)) -> GameOut:
    return registry.get(game_id)


# POST /api/v0/games/{game_id}/rolls
@router.post("/{game_id}/rolls", response_model=GameOut)
def roll(
    game_id: str,
    body: RollIn,
    registry: GameRegistry = Depends(get_registry),
) -> GameOut:
    return registry.roll(game_id, body.pins)


# GET /api/v0/games/{game_id}/score
@router.get("/{game_id}/score", response_model=ScoreOut)
def get_score(
    game_id: str, registry: GameRegistry = Depends(get_registry)
) -> ScoreOut:
    return ScoreOut(id=game_id, total=registry.score(game_id))


# DELETE /api/v0/games/{game_id}
@router.delete("/{game_id}", status_code=204)
def delete_game(
    game_id: str, registry: GameRegistry = Depends(get_registry)
) -> Response:
    registry.delete(game_id)
    return Response(status_code=204)
