import random
from itertools import combinations
from typing import List, Optional, Sequence, Tuple, TypeVar

from sqlalchemy import select
from sqlalchemy.orm import Session

from pingpong.exceptions import NotFound
from pingpong.logging_config import get_logger
from pingpong.models.match import Match
from pingpong.models.score import Score
from pingpong.services import group_service, standings_service
from pingpong.store import TournamentStore

log = get_logger(__name__)

PLAYOFF_QUALIFIERS_PER_GROUP = 2

T = TypeVar("T")

def unique_pairs(items: Sequence[T]) -> List[Tuple[T, T]]:
    """Every unordered pair (items[i], items[j]) with i < j, in list order."""
    return list(combinations(items, 2))

def delete_matches(db: Session, criterion) -> int:
    """Bulk delete the matches matching ``criterion`` together with their scores."""
    match_ids = select(Match.id).where(criterion)
    db.query(Score).filter(Score.match_id.in_(match_ids)).delete()
    return db.query(Match).filter(criterion).delete()

def get_all(store: TournamentStore):
    return list(store.matches())

def get_by_id(store: TournamentStore, match_id: str):
    match = store.match(match_id)
    if not match:
        log.debug("Match %s not found", match_id)
        raise NotFound(f"Match {match_id} not found")
    return match

def get_by_group(store: TournamentStore, group_id: str):
    return [m for m in store.matches() if m.group_id == group_id and not m.is_playoff]

def get_playoff_matches(store: TournamentStore):
    return [m for m in store.matches() if m.is_playoff]

def generate_round_robin(store: TournamentStore):
    """Rebuild the group stage: every member of a group plays every other once.

    Only non-playoff matches (and their scores) are replaced.
    """
    schedule = []
    for group in store.groups():
        members = group_service.get_players(store, group.id)
        for p1, p2 in unique_pairs(members):
            schedule.append((group.id, p1.id, p2.id))

    with store.transaction() as db:
        removed = delete_matches(db, Match.is_playoff.is_(False))
        matches = [
            Match(
                player1_id=p1_id,
                player2_id=p2_id,
                group_id=group_id,
                round=1,
                order=index,
                scheduled_time=None,
                completed=False,
                is_playoff=False,
            )
            for index, (group_id, p1_id, p2_id) in enumerate(schedule)
        ]
        db.add_all(matches)

    log.info(
        "Generated %d group match(es), replaced %d", len(matches), removed
    )
    return matches

def generate_playoffs(store: TournamentStore, rng: Optional[random.Random] = None):
    """Seed the first knockout round with the top two of every group.

    Qualifiers are shuffled and paired in order. With an odd number of
    qualifiers the last one is left without a match.
    """
    qualifiers = []
    for group in store.groups():
        standings = standings_service.get_group_standings(store, group.id)
        qualifiers.extend(
            s.player.id for s in standings[:PLAYOFF_QUALIFIERS_PER_GROUP]
        )

    qualifiers = group_service.shuffled(qualifiers, rng)
    if len(qualifiers) % 2:
        log.warning(
            "Odd number of playoff qualifiers (%d), player %s gets no match",
            len(qualifiers), qualifiers[-1],
        )

    with store.transaction() as db:
        removed = delete_matches(db, Match.is_playoff.is_(True))
        matches = [
            Match(
                player1_id=qualifiers[i],
                player2_id=qualifiers[i + 1],
                group_id=None,
                round=1,
                order=i // 2,
                scheduled_time=None,
                completed=False,
                is_playoff=True,
            )
            for i in range(0, len(qualifiers) - 1, 2)
        ]
        db.add_all(matches)

    log.info(
        "Generated %d playoff match(es) from %d qualifier(s), replaced %d",
        len(matches), len(qualifiers), removed,
    )
    return matches
