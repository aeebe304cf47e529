import pytest
from glicko2kit import (
    DRAW,
    LOSS,
    WIN,
    DuplicatePlayerError,
    NonConvergenceError,
    Glicko2Config,
    Match,
    OpponentRating,
    PlayerNotFoundError,
    Rating,
    calculate_rating,
    derive_matches,
    new_rating,
    update_rating,
    update_ratings,
)


def make_players():
    return [
        Rating(rating=1500.0, deviation=200.0, volatility=0.06),
        Rating(rating=1400.0, deviation=30.0, volatility=0.06),
        Rating(rating=1550.0, deviation=100.0, volatility=0.06),
        Rating(rating=1700.0, deviation=300.0, volatility=0.06),
    ]


def test_derive_matches():
    p1, p2, p3, p4 = make_players()
    matches = derive_matches([[p1], [p2, p3], [p4]])
    assert [match.player for match in matches] == [p1, p2, p3, p4]

    assert matches[0].opponents == [p2, p3, p4]
    assert matches[0].outcomes == [WIN, WIN, WIN]
    assert matches[1].opponents == [p1, p3, p4]
    assert matches[1].outcomes == [LOSS, DRAW, WIN]
    assert matches[2].opponents == [p1, p2, p4]
    assert matches[2].outcomes == [LOSS, DRAW, WIN]
    assert matches[3].opponents == [p1, p2, p3]
    assert matches[3].outcomes == [LOSS, LOSS, LOSS]


def test_derived_matches_are_symmetric():
    players = make_players() + [new_rating(), new_rating()]
    rankings = [[players[4]], [players[0], players[5]], [players[1]], [players[2], players[3]]]
    matches = derive_matches(rankings)
    rank_of = {id(player): rank for rank, group in enumerate(rankings) for player in group}
    outcome_of = {}
    for match in matches:
        assert len(match.opponents) == len(match.outcomes) == len(players) - 1
        for opponent, outcome in zip(match.opponents, match.outcomes):
            outcome_of[(id(match.player), id(opponent))] = outcome
    for (x, y), outcome in outcome_of.items():
        assert outcome + outcome_of[(y, x)] == 1.0
        if rank_of[x] < rank_of[y]:
            assert outcome == WIN
        elif rank_of[x] == rank_of[y]:
            assert outcome == DRAW


def test_filter_by():
    p1, p2, p3, p4 = make_players()
    matches = derive_matches([[p1], [p2, p3], [p4]], filter_by=p3)
    assert len(matches) == 1
    assert matches[0].player is p3
    assert matches[0].outcomes == [LOSS, DRAW, WIN]


def test_filter_by_uses_identity():
    p1, p2, _, _ = make_players()
    lookalike = Rating(rating=p1.rating, deviation=p1.deviation, volatility=p1.volatility)
    with pytest.raises(PlayerNotFoundError):
        derive_matches([[p1], [p2]], filter_by=lookalike)


def test_duplicate_player():
    p1, p2, _, _ = make_players()
    with pytest.raises(DuplicatePlayerError):
        derive_matches([[p1], [p2, p1]])
    with pytest.raises(DuplicatePlayerError):
        derive_matches([[p1, p1]])


def test_equal_ratings_are_not_duplicates():
    a, b = new_rating(), new_rating()
    matches = derive_matches([[a], [b]])
    assert matches[0].outcomes == [WIN]
    assert matches[1].outcomes == [LOSS]


def test_single_player_has_no_opponents():
    p1 = new_rating()
    matches = derive_matches([[p1]])
    assert matches[0].opponents == []
    assert matches[0].outcomes == []


def test_update_ratings_applies_matches_in_order():
    players = make_players()
    matches = derive_matches([[players[0]], [players[1], players[2]], [players[3]]])
    expected = make_players()
    for match in derive_matches([[expected[0]], [expected[1], expected[2]], [expected[3]]]):
        update_rating(match.player, match.opponents, match.outcomes)
    update_ratings(matches)
    assert players == expected
    assert players[0].rating > 1500.0
    assert players[3].rating < 1700.0


def test_update_ratings_with_repeated_player():
    # e.g. the derived matches of two games concatenated
    player = Rating(rating=1500.0, deviation=200.0, volatility=0.06)
    a = OpponentRating(rating=1400.0, deviation=30.0)
    b = OpponentRating(rating=1550.0, deviation=100.0)
    expected = Rating(rating=1500.0, deviation=200.0, volatility=0.06)
    update_rating(expected, [a], [WIN])
    update_rating(expected, [b], [LOSS])

    update_ratings([Match(player, [a], [WIN]), Match(player, [b], [LOSS])])
    assert player == expected
    assert player != calculate_rating(Rating(1500.0, 200.0, 0.06), [b], [LOSS])


def test_update_ratings_is_all_or_nothing():
    players = make_players()
    matches = derive_matches([[players[0]], [players[1], players[2]], [players[3]]])
    with pytest.raises(NonConvergenceError):
        update_ratings(matches, config=Glicko2Config(max_iterations=1))
    assert players == make_players()
