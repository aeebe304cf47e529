import pytest
from glicko2kit import InvalidArgumentError, OpponentRating, Rating, to_internal_scale, to_public_scale


@pytest.mark.parametrize(
    'rating',
    [
        Rating(rating=1500.0, deviation=350.0, volatility=0.06),
        Rating(rating=1464.0507, deviation=151.5165, volatility=0.05999),
        Rating(rating=-300.25, deviation=0.001, volatility=1.5),
        Rating(rating=3012.7, deviation=12.5, volatility=0.0001),
    ],
)
def test_round_trip(rating):
    result = to_public_scale(to_internal_scale(rating))
    assert result.rating == pytest.approx(rating.rating, abs=1e-9)
    assert result.deviation == pytest.approx(rating.deviation, abs=1e-9)
    assert result.volatility == rating.volatility


def test_internal_scale_example():
    internal = to_internal_scale(Rating(rating=1400.0, deviation=30.0, volatility=0.06))
    assert internal.rating == pytest.approx(-0.5756, abs=1e-4)
    assert internal.deviation == pytest.approx(0.1727, abs=1e-4)
    assert internal.volatility == 0.06


def test_default_rating_is_centered():
    internal = to_internal_scale(Rating(rating=1500.0, deviation=173.7178, volatility=0.06))
    assert internal.rating == 0.0
    assert internal.deviation == 1.0


def test_opponent_keeps_its_type_and_input_untouched():
    opponent = OpponentRating(rating=1550.0, deviation=100.0)
    internal = to_internal_scale(opponent)
    assert type(internal) is OpponentRating
    assert opponent == OpponentRating(rating=1550.0, deviation=100.0)


@pytest.mark.parametrize(
    'make',
    [
        lambda: Rating(rating=1500.0, deviation=350.0, volatility=0.0),
        lambda: Rating(rating=1500.0, deviation=0.0, volatility=0.06),
        lambda: Rating(rating=1500.0, deviation=200.0, volatility=-0.06),
        lambda: OpponentRating(rating=1500.0, deviation=-30.0),
        lambda: OpponentRating(rating=1500.0, deviation=float('nan')),
    ],
)
def test_non_positive_deviation_or_volatility(make):
    with pytest.raises(InvalidArgumentError):
        make()
