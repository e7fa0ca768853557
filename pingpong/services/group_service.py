import random
from typing import List, Optional, Sequence, TypeVar

from pingpong.exceptions import InvalidArgument, NotFound
from pingpong.logging_config import get_logger
from pingpong.models.group import Group, PlayerGroup
from pingpong.store import TournamentStore

log = get_logger(__name__)

MIN_GROUPS = 1
MAX_GROUPS = 10

T = TypeVar("T")

def shuffled(items: Sequence[T], rng: Optional[random.Random] = None) -> List[T]:
    """Uniformly shuffled copy of ``items`` (Fisher-Yates)."""
    result = list(items)
    (rng or random).shuffle(result)
    return result

def get_all(store: TournamentStore):
    return list(store.groups())

def get_by_id(store: TournamentStore, group_id: str):
    group = store.group(group_id)
    if not group:
        log.debug("Group %s not found", group_id)
        raise NotFound(f"Group {group_id} not found")
    return group

def get_players(store: TournamentStore, group_id: str):
    """Members of a group in the order they were dealt into it."""
    get_by_id(store, group_id)
    members = []
    for pg in store.memberships():
        if pg.group_id != group_id:
            continue
        player = store.player(pg.player_id)
        if player:
            members.append(player)
    return members

def assign_random_groups(
    store: TournamentStore, count: int, rng: Optional[random.Random] = None
):
    """Replace every group with ``count`` new ones and deal all players into them.

    Player i of the shuffled list goes to group i mod count, so group sizes
    differ by at most one.
    """
    if isinstance(count, bool) or not isinstance(count, int):
        raise InvalidArgument("Number of groups must be an integer")
    if not MIN_GROUPS <= count <= MAX_GROUPS:
        raise InvalidArgument(
            f"Number of groups must be between {MIN_GROUPS} and {MAX_GROUPS}, got {count}"
        )

    players = shuffled(store.players(), rng)

    with store.transaction() as db:
        db.query(PlayerGroup).delete()
        db.query(Group).delete()

        groups = [Group(name=f"Group {i}", number=i) for i in range(1, count + 1)]
        db.add_all(groups)
        db.flush()

        for index, player in enumerate(players):
            db.add(PlayerGroup(
                player_id=player.id,
                group_id=groups[index % count].id,
                position=index // count,
            ))

    log.info("Assigned %d player(s) to %d group(s)", len(players), count)
    return groups
