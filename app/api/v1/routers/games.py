from typing import List

from fastapi import APIRouter, Depends, HTTPException, status, Query, Path

from app.api.v1.dependencies import get_game_service
from app.domain.services import ConflictError
from app.domain.sorting import SortDirection
from app.features.games.schemas import GameCardOut, GameIn, GameOut
from app.features.games.services import GameService
from app.features.players.schemas import MessageOut


router = APIRouter(
    prefix="/games",
    tags=["games"],
    responses={404: {"description": "Not Found"}},
)

# -----------------------------
# Lists
# -----------------------------
@router.get(
    "",
    summary="Lister les parties (ordre du store)",
    response_model=List[GameOut],
)
async def list_games(
    svc: GameService = Depends(get_game_service),
):
    return await svc.get_all()

@router.get(
    "/sorted",
    summary="Lister les parties triées par colonne (Id, Game Time, Captain, Player2, Player3, Player4)",
    response_model=List[GameOut],
)
async def sort_games(
    column: str = Query(..., examples=["Game Time"]),
    direction: SortDirection = Query(SortDirection.ASC),
    svc: GameService = Depends(get_game_service),
):
    return await svc.sort_tables(column, direction)

@router.get(
    "/{game_id}",
    summary="Récupérer une partie",
    response_model=GameOut,
)
async def get_game(
    game_id: int = Path(..., ge=1),
    svc: GameService = Depends(get_game_service),
):
    try:
        return await svc.get(game_id)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")

@router.get(
    "/{game_id}/card",
    summary="Regénérer la carte d'une partie à partir des joueurs actuels (sans l'enregistrer)",
    response_model=GameCardOut,
)
async def preview_card(
    game_id: int = Path(..., ge=1),
    svc: GameService = Depends(get_game_service),
):
    try:
        game = await svc.get(game_id)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")
    return GameCardOut(id=game.id, game_card=await svc.generate_card(game))

# -----------------------------
# Writes
# -----------------------------
@router.post(
    "",
    summary="Réserver une partie (renvoie la carte, ou la règle de réservation violée)",
    response_model=MessageOut,
    responses={409: {"description": "Conflict"}},
)
async def create_game(
    payload: GameIn,
    svc: GameService = Depends(get_game_service),
):
    try:
        return MessageOut(message=await svc.create(payload))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

@router.put(
    "/{game_id}",
    summary="Modifier une partie (recalcule les cartes des parties liées)",
    response_model=GameCardOut,
)
async def edit_game(
    payload: GameIn,
    game_id: int = Path(..., ge=1),
    svc: GameService = Depends(get_game_service),
):
    try:
        card = await svc.edit(game_id, payload)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")
    return GameCardOut(id=game_id, game_card=card)

@router.delete(
    "/{game_id}",
    summary="Supprimer une partie",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_game(
    game_id: int = Path(..., ge=1),
    svc: GameService = Depends(get_game_service),
):
    try:
        await svc.delete(game_id)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Game not found")
