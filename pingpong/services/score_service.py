from pingpong.exceptions import InvalidArgument
from pingpong.logging_config import get_logger
from pingpong.models.score import Score
from pingpong.services import match_service
from pingpong.store import TournamentStore

log = get_logger(__name__)

def _check_points(value, label: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"{label} must be an integer")
    if value < 0:
        raise InvalidArgument(f"{label} cannot be negative")
    return value

def resolve_winner(match, player1_score: int, player2_score: int):
    """Id of the player with more points, None on a tie."""
    if player1_score > player2_score:
        return match.player1_id
    if player2_score > player1_score:
        return match.player2_id
    return None

def get_by_match(store: TournamentStore, match_id: str):
    return store.score(match_id)

def record(store: TournamentStore, match_id: str, player1_score: int, player2_score: int):
    """Store the result of a match and mark it completed.

    Recording again replaces the previous score, so the same call twice
    leaves the same state.
    """
    _check_points(player1_score, "Player 1 score")
    _check_points(player2_score, "Player 2 score")
    match = match_service.get_by_id(store, match_id)
    winner_id = resolve_winner(match, player1_score, player2_score)

    with store.transaction() as db:
        score = db.get(Score, match_id)
        if score is None:
            score = Score(match_id=match_id)
            db.add(score)
        score.player1_score = player1_score
        score.player2_score = player2_score
        score.winner_id = winner_id
        match.completed = True

    log.info(
        "Recorded %d-%d for match %s (winner: %s)",
        player1_score, player2_score, match_id, winner_id or "tie",
    )
    return store.score(match_id)
