from pingpong.models.group import Group, PlayerGroup


def seat_groups(store, *rosters):
    """Create one group per roster, members kept in the given order."""
    with store.transaction() as db:
        for number, roster in enumerate(rosters, start=1):
            group = Group(name=f"Group {number}", number=number)
            db.add(group)
            db.flush()
            for position, player in enumerate(roster):
                db.add(PlayerGroup(player_id=player.id, group_id=group.id, position=position))
    return store.groups()


def find_match(store, p1, p2):
    for m in store.matches():
        if {m.player1_id, m.player2_id} == {p1.id, p2.id} and not m.is_playoff:
            return m
    raise AssertionError(f"no match between {p1.name} and {p2.name}")
