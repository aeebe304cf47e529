"""
Glicko 2
paper: http://www.glicko.net/research/dpcmsv.pdf
example: http://www.glicko.net/glicko/glicko2.pdf

"""
import logging
import math
from typing import Sequence
import numpy as np
from glicko2kit.core.config import Glicko2Config, resolve_config
from glicko2kit.core.errors import InvalidArgumentError, NonConvergenceError
from glicko2kit.core.ratings import OpponentRating, Rating, copy_rating
from glicko2kit.utils.math_utils import g_scalar, g_vector, sigmoid, sigmoid_scalar
from glicko2kit.utils.scale import to_internal_scale, to_public_scale

logger = logging.getLogger(__name__)


def volatility_objective(x, delta2, phi2, v, a, tau2):
    """the function whose root is ln(sigma'^2)"""
    ex = math.exp(x)
    phi2_v_ex = phi2 + v + ex
    num_1 = ex * (delta2 - phi2_v_ex)
    denom_1 = 2.0 * (phi2_v_ex**2.0)
    term_2 = (x - a) / tau2
    return (num_1 / denom_1) - term_2


def solve_volatility(
    phi: float,
    sigma: float,
    v: float,
    delta: float,
    tau: float,
    epsilon: float = 1e-6,
    max_iterations: int = 10_000,
) -> float:
    """
    Finds the new volatility with the Illinois variant of regula falsi (step 5 of the example).

    Parameters:
        phi (float): pre-period deviation on the Glicko-2 scale.
        sigma (float): pre-period volatility.
        v (float): estimated variance of the rating based only on game outcomes.
        delta (float): estimated improvement in rating based only on game outcomes.
        tau (float): system constant constraining the change in volatility.
        epsilon (float, optional): convergence tolerance. Defaults to 1e-6.
        max_iterations (int, optional): bound on both the bracket search and the root finding loop.

    Returns:
        float: the new volatility sigma'.

    Raises:
        NonConvergenceError: if either loop runs for more than max_iterations steps.
    """
    delta2 = delta**2.0
    phi2 = phi**2.0
    tau2 = tau**2.0
    A = a = math.log(sigma**2.0)

    def f(x):
        return volatility_objective(x, delta2, phi2, v, a, tau2)

    if delta2 > (phi2 + v):
        B = math.log(delta2 - phi2 - v)
        logger.debug('bracket from delta: B=%f', B)
    else:
        k = 1
        while f(a - (k * tau)) < 0.0:
            if k >= max_iterations:
                logger.warning('bracket search exceeded %d steps (phi=%g, sigma=%g, v=%g)', max_iterations, phi, sigma, v)
                raise NonConvergenceError(f'no bracket for the volatility found within {max_iterations} steps')
            k += 1
        B = a - (k * tau)
        logger.debug('bracket found after %d steps: B=%f', k, B)

    f_A = f(A)
    f_B = f(B)
    iterations = 0
    while math.fabs(B - A) > epsilon:
        if iterations >= max_iterations:
            logger.warning('volatility solver exceeded %d iterations (|B - A|=%g)', max_iterations, math.fabs(B - A))
            raise NonConvergenceError(f'volatility did not converge within {max_iterations} iterations')
        iterations += 1
        C = A + ((A - B) * f_A) / (f_B - f_A)
        f_C = f(C)
        if (f_C * f_B) < 0.0:
            A = B
            f_A = f_B
        else:
            f_A = f_A / 2.0
        B = C
        f_B = f_C
    logger.debug('volatility converged after %d iterations', iterations)
    return math.exp(A / 2.0)


def _check_lengths(opponents, outcomes):
    if len(opponents) != len(outcomes):
        raise InvalidArgumentError(
            f'number of opponents ({len(opponents)}) is different than number of outcomes ({len(outcomes)})'
        )


def calculate_rating(
    player: Rating,
    opponents: Sequence[OpponentRating],
    outcomes: Sequence[float],
    config: Glicko2Config = None,
) -> Rating:
    """
    Calculates a player's new rating once a rating period has concluded.

    Parameters:
        player (Rating): the rating being updated, not mutated.
        opponents (sequence of OpponentRating): everyone the player faced in the period.
        outcomes (sequence of float): the player's score against each opponent, LOSS, DRAW or WIN.
        config (Glicko2Config, optional): defaults to the process-wide default config.

    Returns:
        Rating: a new rating on the public scale.
    """
    _check_lengths(opponents, outcomes)
    config = resolve_config(config)
    if len(opponents) == 0:
        return calculate_rating_did_not_compete(player)

    player = to_internal_scale(player)
    internal_opponents = [to_internal_scale(opponent) for opponent in opponents]
    mus = np.array([opponent.rating for opponent in internal_opponents], dtype=np.float64)
    phis = np.array([opponent.deviation for opponent in internal_opponents], dtype=np.float64)
    scores = np.asarray(outcomes, dtype=np.float64)

    gs = g_vector(phis)
    probs = sigmoid(gs * (player.rating - mus))
    v = 1.0 / float(np.sum(np.square(gs) * probs * (1.0 - probs)))
    # this is kinda like a gradient
    grad = float(np.sum(gs * (scores - probs)))
    delta = v * grad

    sigma_prime = solve_volatility(
        phi=player.deviation,
        sigma=player.volatility,
        v=v,
        delta=delta,
        tau=config.tau,
        epsilon=config.epsilon,
        max_iterations=config.max_iterations,
    )
    phi_star = math.sqrt((player.deviation**2.0) + (sigma_prime**2.0))
    phi_prime = 1.0 / math.sqrt((1.0 / (phi_star**2.0)) + (1.0 / v))
    mu_prime = player.rating + ((phi_prime**2.0) * grad)

    return to_public_scale(Rating(rating=mu_prime, deviation=phi_prime, volatility=sigma_prime))


def calculate_rating_did_not_compete(player: Rating) -> Rating:
    """
    Calculates the new rating of a player who did not compete in the rating period.

    Only step 6 applies: rating and volatility stay the same, the deviation increases.
    The increase is sqrt(phi^2 + sigma^2) - phi on the Glicko-2 scale, so when the volatility
    is many orders of magnitude below the deviation (e.g. 1e-10 against 350) it is lost to
    floating point rounding and the deviation comes back unchanged.
    """
    internal = to_internal_scale(player)
    internal.deviation = math.sqrt((internal.deviation**2.0) + (internal.volatility**2.0))
    return to_public_scale(internal)


def update_rating(
    player: Rating,
    opponents: Sequence[OpponentRating],
    outcomes: Sequence[float],
    config: Glicko2Config = None,
) -> None:
    """updates a player's rating in place, player is untouched if the calculation fails"""
    copy_rating(calculate_rating(player, opponents, outcomes, config=config), player)


def update_rating_did_not_compete(player: Rating) -> None:
    """updates the rating of a player who did not compete in place"""
    copy_rating(calculate_rating_did_not_compete(player), player)


def expected_score(player: OpponentRating, opponent: OpponentRating) -> float:
    """expected score E of player against opponent, weighted by the opponent's deviation"""
    player = to_internal_scale(player)
    opponent = to_internal_scale(opponent)
    return sigmoid_scalar(g_scalar(opponent.deviation) * (player.rating - opponent.rating))


def win_probability(player: OpponentRating, opponent: OpponentRating) -> float:
    """symmetric head to head probability which uses the deviations of both sides"""
    player = to_internal_scale(player)
    opponent = to_internal_scale(opponent)
    combined_g = g_scalar(math.sqrt((player.deviation**2.0) + (opponent.deviation**2.0)))
    return sigmoid_scalar(combined_g * (player.rating - opponent.rating))
