from typing import List

from fastapi import APIRouter, Depends, HTTPException, status, Query, Path

from app.api.v1.dependencies import get_player_service
from app.domain.services import ConflictError
from app.domain.sorting import SortDirection
from app.features.players.schemas import MessageOut, PlayerIn, PlayerOut
from app.features.players.services import PlayerService


router = APIRouter(
    prefix="/players",
    tags=["players"],
    responses={404: {"description": "Not Found"}},
)

# -----------------------------
# Lists
# -----------------------------
@router.get(
    "",
    summary="Lister les joueurs (ordre du store)",
    response_model=List[PlayerOut],
)
async def list_players(
    svc: PlayerService = Depends(get_player_service),
):
    return await svc.get_all()

@router.get(
    "/sorted",
    summary="Lister les joueurs triés par colonne (Id, Firstname, Surname, Email, Gender, Handicap)",
    response_model=List[PlayerOut],
)
async def sort_players(
    column: str = Query(..., examples=["Surname"]),
    direction: SortDirection = Query(SortDirection.ASC),
    svc: PlayerService = Depends(get_player_service),
):
    return await svc.sort_tables(column, direction)

@router.get(
    "/{player_id}",
    summary="Récupérer un joueur",
    response_model=PlayerOut,
)
async def get_player(
    player_id: int = Path(..., ge=1),
    svc: PlayerService = Depends(get_player_service),
):
    try:
        return await svc.get(player_id)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Player not found")

# -----------------------------
# Writes
# -----------------------------
@router.post(
    "",
    summary="Créer un joueur (le message indique le succès ou la règle violée)",
    response_model=MessageOut,
    responses={409: {"description": "Conflict"}},
)
async def create_player(
    payload: PlayerIn,
    svc: PlayerService = Depends(get_player_service),
):
    try:
        return MessageOut(message=await svc.create(payload))
    except ConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))

@router.put(
    "/{player_id}",
    summary="Modifier un joueur (recalcule les cartes de ses parties)",
    response_model=MessageOut,
)
async def edit_player(
    payload: PlayerIn,
    player_id: int = Path(..., ge=1),
    svc: PlayerService = Depends(get_player_service),
):
    try:
        return MessageOut(message=await svc.edit(player_id, payload))
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Player not found")

@router.delete(
    "/{player_id}",
    summary="Supprimer un joueur et toutes ses parties",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_player(
    player_id: int = Path(..., ge=1),
    svc: PlayerService = Depends(get_player_service),
):
    try:
        await svc.delete(player_id)
    except LookupError:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Player not found")
