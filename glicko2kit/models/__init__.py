"""
Models Module
=============

The Glicko-2 computations, each built from plain functions over Rating values:

- glicko2: the volatility solver and the rating updater for a single player.
- matches: derives pairwise matches from the standings of a multiplayer game and applies them.
- match_quality: a heuristic estimate of how balanced a prospective match is.
- system: the Glicko2 class, which binds all of the above to one config.
"""
