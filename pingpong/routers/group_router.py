from typing import List

from fastapi import APIRouter, Depends
from pingpong.schemas import GroupAssignment, GroupOut, PlayerOut, StandingOut
from pingpong.services import group_service, standings_service
from pingpong.store import TournamentStore, get_store

router = APIRouter(prefix="/groups", tags=["groups"])

@router.get("/", response_model=List[GroupOut])
def list_groups(store: TournamentStore = Depends(get_store)):
    return group_service.get_all(store)

# Drops the current groups and draws new ones
@router.post("/random", response_model=List[GroupOut])
def create_random_groups(body: GroupAssignment, store: TournamentStore = Depends(get_store)):
    group_service.assign_random_groups(store, body.count)
    return group_service.get_all(store)

@router.get("/{group_id}/players", response_model=List[PlayerOut])
def group_players(group_id: str, store: TournamentStore = Depends(get_store)):
    return group_service.get_players(store, group_id)

@router.get("/{group_id}/standings", response_model=List[StandingOut])
def group_standings(group_id: str, store: TournamentStore = Depends(get_store)):
    return [
        {
            "player": s.player,
            "played": s.played,
            "won": s.won,
            "lost": s.lost,
            "points": s.points,
        }
        for s in standings_service.get_group_standings(store, group_id)
    ]
