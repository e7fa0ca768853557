import pytest

from pingpong.exceptions import NotFound
from pingpong.services import match_service, score_service, standings_service

from helpers import find_match, seat_groups


def _row(standings, player):
    return next(s for s in standings if s.player.id == player.id)


def test_no_results_lists_everyone_with_zeros(store, make_players):
    players = make_players(3)
    group = seat_groups(store, players)[0]
    match_service.generate_round_robin(store)

    standings = standings_service.get_group_standings(store, group.id)

    assert {s.player.id for s in standings} == {p.id for p in players}
    for s in standings:
        assert (s.played, s.won, s.lost, s.points) == (0, 0, 0, 0)


def test_two_wins_rank_first(store, make_players):
    x, y, z = make_players(3)
    group = seat_groups(store, [x, y, z])[0]
    match_service.generate_round_robin(store)

    xy = find_match(store, x, y)
    score_service.record(store, xy.id, 11, 4)
    xz = find_match(store, x, z)
    score_service.record(store, xz.id, 11, 9)
    yz = find_match(store, y, z)
    score_service.record(store, yz.id, 11, 6)

    standings = standings_service.get_group_standings(store, group.id)

    top = standings[0]
    assert top.player.id == x.id
    assert (top.played, top.won, top.lost, top.points) == (2, 2, 0, 4)
    assert standings[1].player.id == y.id
    assert standings[1].points == 2
    assert (standings[2].played, standings[2].lost, standings[2].points) == (2, 2, 0)


def test_tie_gives_each_player_a_point(store, make_players):
    a, b = make_players(2)
    group = seat_groups(store, [a, b])[0]
    match_service.generate_round_robin(store)

    score_service.record(store, find_match(store, a, b).id, 5, 5)

    standings = standings_service.get_group_standings(store, group.id)
    for player in (a, b):
        row = _row(standings, player)
        assert (row.played, row.won, row.lost, row.points) == (1, 0, 0, 1)


def test_wins_break_equal_points(store, make_players):
    # a: win + loss = 2 points, 1 win; b: two ties = 2 points, 0 wins
    a, b, c, d = make_players(4)
    group = seat_groups(store, [b, a, c, d])[0]
    match_service.generate_round_robin(store)

    score_service.record(store, find_match(store, a, c).id, 11, 2)
    score_service.record(store, find_match(store, a, d).id, 2, 11)
    score_service.record(store, find_match(store, b, c).id, 7, 7)
    score_service.record(store, find_match(store, b, d).id, 7, 7)

    standings = standings_service.get_group_standings(store, group.id)
    ids = [s.player.id for s in standings]
    assert ids.index(a.id) < ids.index(b.id)


def test_equal_records_are_ordered_by_player_id(store, make_players):
    players = make_players(4)
    group = seat_groups(store, list(reversed(players)))[0]
    match_service.generate_round_robin(store)

    standings = standings_service.get_group_standings(store, group.id)
    assert [s.player.id for s in standings] == sorted(p.id for p in players)


def test_uncompleted_and_playoff_matches_do_not_count(store, make_players, rng):
    a, b = make_players(2)
    group = seat_groups(store, [a, b])[0]
    match_service.generate_round_robin(store)
    match_service.generate_playoffs(store, rng=rng)

    playoff = match_service.get_playoff_matches(store)[0]
    score_service.record(store, playoff.id, 11, 0)

    standings = standings_service.get_group_standings(store, group.id)
    assert all(s.played == 0 for s in standings)


def test_unknown_group(store):
    with pytest.raises(NotFound):
        standings_service.get_group_standings(store, "missing")
