"""conversions between the public Glicko scale and the internal Glicko-2 scale"""
import dataclasses
from glicko2kit.utils.constants import GLICKO2_CENTER, GLICKO2_SCALE


def to_internal_scale(rating):
    """
    Converts a rating to the Glicko-2 scale used inside the computation.

    mu = (r - 1500) / 173.7178, phi = RD / 173.7178, the volatility (if any) is passed through.

    Parameters:
        rating (OpponentRating | Rating): rating on the public scale, left untouched.

    Returns:
        a new object of the same type on the internal scale.
    """
    return dataclasses.replace(
        rating,
        rating=(rating.rating - GLICKO2_CENTER) / GLICKO2_SCALE,
        deviation=rating.deviation / GLICKO2_SCALE,
    )


def to_public_scale(rating):
    """
    Converts a rating from the Glicko-2 scale back to the public scale.

    r = 173.7178 * mu + 1500, RD = 173.7178 * phi, the volatility (if any) is passed through.
    """
    return dataclasses.replace(
        rating,
        rating=(GLICKO2_SCALE * rating.rating) + GLICKO2_CENTER,
        deviation=GLICKO2_SCALE * rating.deviation,
    )
