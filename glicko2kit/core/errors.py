"""exceptions raised by glicko2kit"""


class Glicko2Error(Exception):
    """base class for every error raised by this package"""


class InvalidArgumentError(Glicko2Error, ValueError):
    """an argument is malformed, e.g. opponents and outcomes of different lengths"""


class DuplicatePlayerError(InvalidArgumentError):
    """the same player reached more than one rank in a single game"""


class PlayerNotFoundError(Glicko2Error, LookupError):
    """the player used as a filter does not appear in the rankings"""


class EmptyOpponentSetError(InvalidArgumentError):
    """match quality is undefined without opponents"""


class NonConvergenceError(Glicko2Error, ArithmeticError):
    """the volatility solver did not converge within the configured number of iterations"""
