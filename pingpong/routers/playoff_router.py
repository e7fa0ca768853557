from typing import List

from fastapi import APIRouter, Depends
from pingpong.schemas import BracketRound, MatchOut
from pingpong.services import match_service, schedule_service
from pingpong.store import TournamentStore, get_store

router = APIRouter(prefix="/playoffs", tags=["playoffs"])

@router.post("/generate", response_model=List[MatchOut])
def generate_playoffs(store: TournamentStore = Depends(get_store)):
    match_service.generate_playoffs(store)
    return match_service.get_playoff_matches(store)

@router.get("/", response_model=List[MatchOut])
def list_playoff_matches(store: TournamentStore = Depends(get_store)):
    return match_service.get_playoff_matches(store)

@router.get("/bracket", response_model=List[BracketRound])
def playoff_bracket(store: TournamentStore = Depends(get_store)):
    bracket = schedule_service.get_playoff_bracket(store)
    return [
        {
            "round": round_number,
            "matches": [{"match": m, "score": s} for m, s in matches],
        }
        for round_number, matches in bracket.items()
    ]
