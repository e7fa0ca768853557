from pingpong.exceptions import InvalidArgument, NotFound
from pingpong.logging_config import get_logger
from pingpong.models.match import Match
from pingpong.models.player import Player
from pingpong.services.match_service import delete_matches
from pingpong.store import TournamentStore

log = get_logger(__name__)

def get_all(store: TournamentStore):
    return list(store.players())

def get_by_id(store: TournamentStore, player_id: str):
    player = store.player(player_id)
    if not player:
        log.debug("Player %s not found", player_id)
        raise NotFound(f"Player {player_id} not found")
    return player

def create(store: TournamentStore, name: str, email: str):
    name_clean = (name or "").strip()
    if not name_clean:
        raise InvalidArgument("Player name is required")

    player = Player(name=name_clean, email=(email or "").strip())
    with store.transaction() as db:
        db.add(player)
    log.info("Registered player %s (%s)", player.name, player.id)
    return player

def remove(store: TournamentStore, player_id: str):
    """Delete a player with its membership, its matches and their scores."""
    player = get_by_id(store, player_id)

    with store.transaction() as db:
        removed = delete_matches(
            db, (Match.player1_id == player_id) | (Match.player2_id == player_id)
        )
        db.delete(player)

    log.info("Removed player %s and %d match(es)", player_id, removed)
