from typing import List

from fastapi import APIRouter, Depends, Response
from pingpong.schemas import PlayerCreate, PlayerOut
from pingpong.services import player_service
from pingpong.store import TournamentStore, get_store

router = APIRouter(prefix="/players", tags=["players"])

@router.get("/", response_model=List[PlayerOut])
def list_players(store: TournamentStore = Depends(get_store)):
    return player_service.get_all(store)

@router.post("/", response_model=PlayerOut, status_code=201)
def create_player(body: PlayerCreate, store: TournamentStore = Depends(get_store)):
    return player_service.create(store, body.name, body.email)

@router.get("/{player_id}", response_model=PlayerOut)
def get_player(player_id: str, store: TournamentStore = Depends(get_store)):
    return player_service.get_by_id(store, player_id)

@router.delete("/{player_id}", status_code=204)
def delete_player(player_id: str, store: TournamentStore = Depends(get_store)):
    player_service.remove(store, player_id)
    return Response(status_code=204)
