from dataclasses import dataclass

from pingpong.logging_config import get_logger
from pingpong.models.player import Player
from pingpong.services import group_service
from pingpong.store import TournamentStore

log = get_logger(__name__)

POINTS_WIN = 2
POINTS_TIE = 1
POINTS_LOSS = 0


@dataclass
class Standing:
    player: Player
    played: int = 0
    won: int = 0
    lost: int = 0
    points: int = 0


def get_group_standings(store: TournamentStore, group_id: str):
    """Ranked table for one group, built from its completed, scored matches.

    Ordered by points, then wins, then player id so ties always come out
    the same way. Members with nothing played are listed with zeros.
    """
    players = group_service.get_players(store, group_id)
    standings = {p.id: Standing(player=p) for p in players}

    for match in store.matches():
        if match.group_id != group_id or match.is_playoff or not match.completed:
            continue
        score = store.score(match.id)
        if not score:
            continue

        for pid in (match.player1_id, match.player2_id):
            s = standings.get(pid)
            if s is None:
                continue
            s.played += 1
            if score.winner_id == pid:
                s.won += 1
                s.points += POINTS_WIN
            elif score.winner_id is not None:
                s.lost += 1
                s.points += POINTS_LOSS
            else:
                s.points += POINTS_TIE

    ranking = sorted(standings.values(), key=lambda s: s.player.id)
    ranking.sort(key=lambda s: (s.points, s.won), reverse=True)
    log.debug("Standings for group %s: %d player(s)", group_id, len(ranking))
    return ranking
