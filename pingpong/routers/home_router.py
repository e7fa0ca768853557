from fastapi import APIRouter, Depends
from pingpong.schemas import Summary
from pingpong.store import TournamentStore, get_store

router = APIRouter()


@router.get("/", response_model=Summary)
def index(store: TournamentStore = Depends(get_store)):
    matches = store.matches()
    return {
        "players": len(store.players()),
        "groups": len(store.groups()),
        "matches": len(matches),
        "completed_matches": sum(1 for m in matches if m.completed),
        "playoff_matches": sum(1 for m in matches if m.is_playoff),
    }
