"""the rating triple and helpers to create and copy it"""
from dataclasses import dataclass
from glicko2kit.core.config import Glicko2Config, resolve_config
from glicko2kit.core.errors import InvalidArgumentError


def _check_positive(name, value):
    if not value > 0.0:
        raise InvalidArgumentError(f'{name} must be positive, got {value}')


@dataclass
class OpponentRating:
    """
    The part of a rating used when someone plays against it.

    Opponents' volatilities are not relevant in the calculations.

    Attributes:
        rating (float): point estimate of skill.
        deviation (float): one standard deviation of uncertainty around rating, > 0.
    """

    rating: float
    deviation: float

    def __post_init__(self):
        _check_positive('deviation', self.deviation)


@dataclass
class Rating(OpponentRating):
    """
    Belief about a player's skill, the subject of a rating update.

    Attributes:
        volatility (float): expected degree of fluctuation of the rating over time, > 0.
    """

    volatility: float

    def __post_init__(self):
        super().__post_init__()
        _check_positive('volatility', self.volatility)


def new_rating(config: Glicko2Config = None) -> Rating:
    """Creates a rating for a new, unrated player."""
    config = resolve_config(config)
    return Rating(
        rating=config.initial_rating,
        deviation=config.initial_deviation,
        volatility=config.initial_volatility,
    )


def copy_rating(source: Rating, target: Rating) -> Rating:
    """Copies all three values of source onto target and returns target."""
    target.rating = source.rating
    target.deviation = source.deviation
    target.volatility = source.volatility
    return target
