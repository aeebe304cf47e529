"""a Glicko 2 rating system bound to a single config"""
from typing import Sequence
from glicko2kit.core.config import Glicko2Config
from glicko2kit.core.ratings import OpponentRating, Rating, new_rating
from glicko2kit.models import glicko2
from glicko2kit.models.match_quality import MatchQuality, calculate_match_quality
from glicko2kit.models.matches import Match, update_ratings


class Glicko2:
    """
    Implements the Glicko 2 rating system, designed by Mark Glickman.

    Each instance carries its own config and ignores the process-wide default, so systems
    with different parameters can be used side by side.
    """

    def __init__(
        self,
        tau: float = 0.75,
        initial_rating: float = 1500.0,
        initial_deviation: float = 350.0,
        initial_volatility: float = 0.06,
        epsilon: float = 1e-6,
        max_iterations: int = 10_000,
        config: Glicko2Config = None,
    ):
        """
        Initializes the Glicko 2 rating system with the given parameters.

        Parameters:
            tau (float, optional): system constant constraining the change in volatility. Defaults to 0.75.
            initial_rating (float, optional): rating of new players. Defaults to 1500.0.
            initial_deviation (float, optional): rating deviation of new players. Defaults to 350.0.
            initial_volatility (float, optional): volatility of new players. Defaults to 0.06.
            epsilon (float, optional): convergence tolerance of the volatility solver. Defaults to 1e-6.
            max_iterations (int, optional): bound on the volatility solver loops. Defaults to 10000.
            config (Glicko2Config, optional): use this config instead of the parameters above.
        """
        if config is None:
            config = Glicko2Config(
                tau=tau,
                initial_rating=initial_rating,
                initial_deviation=initial_deviation,
                initial_volatility=initial_volatility,
                epsilon=epsilon,
                max_iterations=max_iterations,
            )
        self.config = config

    def new_rating(self) -> Rating:
        return new_rating(config=self.config)

    def calculate_rating(self, player: Rating, opponents: Sequence[OpponentRating], outcomes: Sequence[float]) -> Rating:
        return glicko2.calculate_rating(player, opponents, outcomes, config=self.config)

    def calculate_rating_did_not_compete(self, player: Rating) -> Rating:
        return glicko2.calculate_rating_did_not_compete(player)

    def update_rating(self, player: Rating, opponents: Sequence[OpponentRating], outcomes: Sequence[float]):
        glicko2.update_rating(player, opponents, outcomes, config=self.config)

    def update_rating_did_not_compete(self, player: Rating):
        glicko2.update_rating_did_not_compete(player)

    def update_ratings(self, matches: Sequence[Match]):
        update_ratings(matches, config=self.config)

    def match_quality(self, player: OpponentRating, opponents: Sequence[OpponentRating]) -> MatchQuality:
        return calculate_match_quality(player, opponents, config=self.config)
