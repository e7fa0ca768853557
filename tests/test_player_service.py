import pytest

from pingpong.exceptions import InvalidArgument, NotFound
from pingpong.models.group import PlayerGroup
from pingpong.services import group_service, match_service, player_service, score_service

from helpers import find_match, seat_groups


def test_create_and_list(store):
    player = player_service.create(store, "  Ana  ", "ana@office.test")

    assert player.name == "Ana"
    assert player.email == "ana@office.test"
    assert player.created_at is not None
    assert [p.id for p in player_service.get_all(store)] == [player.id]
    assert player_service.get_by_id(store, player.id) is player


def test_blank_name_is_rejected(store):
    with pytest.raises(InvalidArgument):
        player_service.create(store, "   ", "x@office.test")
    assert player_service.get_all(store) == []


def test_unknown_player(store):
    with pytest.raises(NotFound):
        player_service.get_by_id(store, "missing")
    with pytest.raises(NotFound):
        player_service.remove(store, "missing")


def test_removing_a_player_cascades(store, make_players, rng):
    x, a, b, c = make_players(4)
    seat_groups(store, [x, a, b], [c])
    match_service.generate_round_robin(store)
    score_service.record(store, find_match(store, x, a).id, 11, 2)
    score_service.record(store, find_match(store, a, b).id, 11, 6)
    ab_id = find_match(store, a, b).id
    x_id = x.id

    player_service.remove(store, x_id)

    assert x_id not in {p.id for p in player_service.get_all(store)}
    assert all(pg.player_id != x_id for pg in store.memberships())
    remaining = match_service.get_all(store)
    assert [m.id for m in remaining] == [ab_id]
    assert [s.match_id for s in store.scores()] == [ab_id]

    group = group_service.get_all(store)[0]
    assert [p.id for p in group_service.get_players(store, group.id)] == [a.id, b.id]


def test_removing_a_playoff_player_removes_the_playoff_match(store, make_players, rng):
    a, b = make_players(2)
    seat_groups(store, [a], [b])
    match_service.generate_playoffs(store, rng=rng)
    playoff_id = match_service.get_playoff_matches(store)[0].id
    score_service.record(store, playoff_id, 11, 4)

    player_service.remove(store, a.id)

    assert match_service.get_playoff_matches(store) == []
    assert store.scores() == []
    assert store.db.query(PlayerGroup).count() == 1
