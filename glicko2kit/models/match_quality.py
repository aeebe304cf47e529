"""
Heuristic quality of a prospective match.

This uses the expected score of the original Glicko system with the configured initial
deviation as the scaling constant, the players' own deviations are ignored.
ref: https://github.com/McLeopold/PythonSkills/blob/master/skills/glicko.py#L186
"""
from dataclasses import dataclass
from typing import Sequence, Tuple
import numpy as np
from glicko2kit.core.config import Glicko2Config, resolve_config
from glicko2kit.core.errors import EmptyOpponentSetError
from glicko2kit.core.ratings import OpponentRating
from glicko2kit.utils.math_utils import base_10_sigmoid


@dataclass(frozen=True)
class MatchQuality:
    """
    Match qualities in [0.0, 1.0], 1.0 being the best quality (an expected draw).

    Attributes:
        qualities (tuple of float): quality against each opponent, in the order given.
        minimum (float): lowest quality.
        maximum (float): highest quality.
        mean (float): average quality.
        median (float): median quality.
        against_strongest (float): quality against the highest rated opponent only.
    """

    qualities: Tuple[float, ...]
    minimum: float
    maximum: float
    mean: float
    median: float
    against_strongest: float


def match_quality_g1(player: OpponentRating, opponent: OpponentRating, config: Glicko2Config = None) -> float:
    """quality of a single pairing from the Glicko 1 expected score"""
    config = resolve_config(config)
    expected = base_10_sigmoid((player.rating - opponent.rating) / (2.0 * config.initial_deviation))
    return (0.5 - abs(expected - 0.5)) / 0.5


def calculate_match_quality(
    player: OpponentRating,
    opponents: Sequence[OpponentRating],
    config: Glicko2Config = None,
) -> MatchQuality:
    """
    Calculates the presumed match quality for the specified player.

    Raises:
        EmptyOpponentSetError: if there are no opponents.
    """
    if len(opponents) == 0:
        raise EmptyOpponentSetError('match quality requires at least one opponent')
    config = resolve_config(config)
    qualities = np.array([match_quality_g1(player, opponent, config=config) for opponent in opponents])
    ratings = np.array([opponent.rating for opponent in opponents])
    # argmax returns the first occurrence on ties
    strongest_idx = int(np.argmax(ratings))
    return MatchQuality(
        qualities=tuple(qualities.tolist()),
        minimum=float(qualities.min()),
        maximum=float(qualities.max()),
        mean=float(qualities.mean()),
        median=float(np.median(qualities)),
        against_strongest=float(qualities[strongest_idx]),
    )
