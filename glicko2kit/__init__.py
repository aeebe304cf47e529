"""
glicko2kit
==========

Glicko-2 ratings for competitors in discrete rating periods.

- Rating, OpponentRating, new_rating, copy_rating: the rating triple.
- calculate_rating, calculate_rating_did_not_compete: pure updates for one player.
- update_rating, update_rating_did_not_compete, update_ratings: the in place variants.
- derive_matches: turns the standings of a multiplayer game into pairwise matches.
- calculate_match_quality: how balanced a prospective match is.
- Glicko2Config, get_default_config, set_default_config: tau and the initial values.

References:
- paper: http://www.glicko.net/research/dpcmsv.pdf
- example: http://www.glicko.net/glicko/glicko2.pdf
"""
from glicko2kit.core.config import Glicko2Config, get_default_config, set_default_config
from glicko2kit.core.errors import (
    DuplicatePlayerError,
    EmptyOpponentSetError,
    Glicko2Error,
    InvalidArgumentError,
    NonConvergenceError,
    PlayerNotFoundError,
)
from glicko2kit.core.ratings import OpponentRating, Rating, copy_rating, new_rating
from glicko2kit.models.glicko2 import (
    calculate_rating,
    calculate_rating_did_not_compete,
    expected_score,
    solve_volatility,
    update_rating,
    update_rating_did_not_compete,
    win_probability,
)
from glicko2kit.models.match_quality import MatchQuality, calculate_match_quality
from glicko2kit.models.matches import Match, derive_matches, update_ratings
from glicko2kit.models.system import Glicko2
from glicko2kit.utils.constants import DRAW, LOSS, WIN
from glicko2kit.utils.scale import to_internal_scale, to_public_scale
