from contextlib import contextmanager
from typing import Dict, List, Optional

from fastapi import Depends
from sqlalchemy.exc import InterfaceError, OperationalError
from sqlalchemy.orm import Session

from pingpong.database import get_db
from pingpong.exceptions import StorageUnavailable
from pingpong.logging_config import get_logger
from pingpong.models.group import Group, PlayerGroup
from pingpong.models.match import Match
from pingpong.models.player import Player
from pingpong.models.score import Score

log = get_logger(__name__)

_STORAGE_ERRORS = (OperationalError, InterfaceError)


class TournamentStore:
    """Request-scoped access to the five tournament tables.

    Reads go through a per-store cache of whole collections. Every write
    must happen inside ``transaction()``, which commits or rolls back as a
    unit and drops the cache before returning, so the next read sees the
    new state.
    """

    def __init__(self, db: Session):
        self.db = db
        self._cache: Dict[str, list] = {}

    def _cached(self, key: str, query):
        if key not in self._cache:
            try:
                self._cache[key] = query.all()
            except _STORAGE_ERRORS as e:
                self.db.rollback()
                raise StorageUnavailable(f"Could not load {key}: {e}") from e
        return self._cache[key]

    def invalidate(self):
        self._cache.clear()
        self.db.expire_all()

    @contextmanager
    def transaction(self):
        try:
            yield self.db
            self.db.commit()
        except _STORAGE_ERRORS as e:
            self.db.rollback()
            log.error("Transaction rolled back, storage unavailable: %s", e)
            raise StorageUnavailable(str(e)) from e
        except Exception:
            self.db.rollback()
            log.debug("Transaction rolled back")
            raise
        finally:
            self.invalidate()

    # Collections

    def players(self) -> List[Player]:
        return self._cached(
            "players", self.db.query(Player).order_by(Player.created_at, Player.id)
        )

    def groups(self) -> List[Group]:
        return self._cached("groups", self.db.query(Group).order_by(Group.number))

    def memberships(self) -> List[PlayerGroup]:
        return self._cached(
            "memberships",
            self.db.query(PlayerGroup).order_by(PlayerGroup.group_id, PlayerGroup.position),
        )

    def matches(self) -> List[Match]:
        return self._cached(
            "matches",
            self.db.query(Match).order_by(Match.is_playoff, Match.round, Match.order),
        )

    def scores(self) -> List[Score]:
        return self._cached("scores", self.db.query(Score))

    # Lookups

    def player(self, player_id: str) -> Optional[Player]:
        return next((p for p in self.players() if p.id == player_id), None)

    def group(self, group_id: str) -> Optional[Group]:
        return next((g for g in self.groups() if g.id == group_id), None)

    def match(self, match_id: str) -> Optional[Match]:
        return next((m for m in self.matches() if m.id == match_id), None)

    def score(self, match_id: str) -> Optional[Score]:
        return next((s for s in self.scores() if s.match_id == match_id), None)


def get_store(db: Session = Depends(get_db)):
    return TournamentStore(db)
