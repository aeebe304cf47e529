"""
Matches with more than two competitors, computed as a tournament in which each player
competed against all the other players. Players sharing a rank drew against each other.
"""
import logging
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
from glicko2kit.core.config import Glicko2Config, resolve_config
from glicko2kit.core.errors import DuplicatePlayerError, PlayerNotFoundError
from glicko2kit.core.ratings import OpponentRating, Rating, copy_rating
from glicko2kit.models.glicko2 import calculate_rating
from glicko2kit.utils.constants import DRAW, LOSS, WIN

logger = logging.getLogger(__name__)


@dataclass
class Match:
    """the inputs to calculate_rating() for a single player"""

    player: Rating
    opponents: List[OpponentRating] = field(default_factory=list)
    outcomes: List[float] = field(default_factory=list)


def derive_matches(rankings: Sequence[Sequence[Rating]], filter_by: Optional[Rating] = None) -> List[Match]:
    """
    Derives the matches of a single multiplayer game from its final standings.

    Players are compared by identity, two distinct players with equal ratings are different players.

    Parameters:
        rankings: groups of players in winners to losers order, each group holds the players
                  who reached that rank, e.g. [[p1], [p2, p3], [p4]] where p2 and p3 drew.
        filter_by (Rating, optional): only derive the match of this player.

    Returns:
        list of Match: one per player (or only the filtered one), opponents in ranking order.

    Raises:
        DuplicatePlayerError: if a player appears more than once.
        PlayerNotFoundError: if filter_by is not in the rankings.
    """
    indexed_players = []  # (rank, player)
    seen_ids = set()
    for rank, players in enumerate(rankings):
        for player in players:
            if id(player) in seen_ids:
                raise DuplicatePlayerError(f'player {player!r} cannot reach multiple ranks at once')
            seen_ids.add(id(player))
            indexed_players.append((rank, player))

    if filter_by is None:
        subjects = indexed_players
    else:
        subjects = [(rank, player) for rank, player in indexed_players if player is filter_by]
        if not subjects:
            raise PlayerNotFoundError(f'there is no player matching the provided filter {filter_by!r}')

    matches = []
    for rank, player in subjects:
        match = Match(player=player)
        for opponent_rank, opponent in indexed_players:
            if opponent is player:
                continue
            match.opponents.append(opponent)
            if rank < opponent_rank:
                match.outcomes.append(WIN)
            elif rank > opponent_rank:
                match.outcomes.append(LOSS)
            else:
                match.outcomes.append(DRAW)
        matches.append(match)
    logger.debug('derived %d matches from %d players in %d ranks', len(matches), len(indexed_players), len(rankings))
    return matches


def update_ratings(matches: Sequence[Match], config: Glicko2Config = None) -> None:
    """
    Updates the ratings for each match played, in place.

    The matches are applied one after another in list order, exactly as successive calls to
    update_rating would: a player who is the subject of several matches carries each result
    into the next one, and later matches see opponents already updated by earlier ones.
    The work happens on copies keyed by player identity which are written back only once
    every match succeeded, so nobody is updated if one of the calculations fails.
    """
    config = resolve_config(config)
    working = {}  # id(player) -> (player, current rating)

    def current(rating):
        return working[id(rating)][1] if id(rating) in working else rating

    for match in matches:
        opponents = [current(opponent) for opponent in match.opponents]
        new_rating = calculate_rating(current(match.player), opponents, match.outcomes, config=config)
        working[id(match.player)] = (match.player, new_rating)
    for player, new_rating in working.values():
        copy_rating(new_rating, player)
    logger.debug('applied %d matches to %d players', len(matches), len(working))
