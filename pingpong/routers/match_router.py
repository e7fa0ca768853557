from typing import List, Optional

from fastapi import APIRouter, Depends
from pingpong.schemas import MatchOut, ScoreIn, ScoreOut
from pingpong.services import match_service, score_service
from pingpong.store import TournamentStore, get_store

router = APIRouter(prefix="/matches", tags=["matches"])

@router.post("/generate", response_model=List[MatchOut])
def generate_matches(store: TournamentStore = Depends(get_store)):
    match_service.generate_round_robin(store)
    return [m for m in match_service.get_all(store) if not m.is_playoff]

@router.get("/", response_model=List[MatchOut])
def list_matches(store: TournamentStore = Depends(get_store)):
    return match_service.get_all(store)

@router.get("/{match_id}", response_model=MatchOut)
def get_match(match_id: str, store: TournamentStore = Depends(get_store)):
    return match_service.get_by_id(store, match_id)

@router.get("/{match_id}/score", response_model=Optional[ScoreOut])
def get_score(match_id: str, store: TournamentStore = Depends(get_store)):
    match_service.get_by_id(store, match_id)
    return score_service.get_by_match(store, match_id)

@router.post("/{match_id}/score", response_model=ScoreOut)
def update_score(match_id: str, body: ScoreIn, store: TournamentStore = Depends(get_store)):
    return score_service.record(store, match_id, body.player1_score, body.player2_score)
