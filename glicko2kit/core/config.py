"""
Configuration of the Glicko-2 system.

The four tunables of the system (tau and the initial rating, deviation and volatility)
live in an immutable Glicko2Config. Every operation accepts an explicit config; when none
is given the process-wide default is read once at the start of the call.

The default should be set once at startup with set_default_config() and not replaced
while other threads are computing ratings.
"""
import dataclasses
import logging
from dataclasses import dataclass
from glicko2kit.core.errors import InvalidArgumentError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Glicko2Config:
    """
    Parameters of the Glicko-2 system.

    Attributes:
        tau (float): constrains the change in volatility over time. Reasonable choices are
                     between 0.3 and 1.2, smaller values prevent large volatility changes
                     after improbable results.
        initial_rating (float): rating of an unrated player.
        initial_deviation (float): rating deviation of an unrated player, also used as the
                                   scaling constant of the match quality estimate.
        initial_volatility (float): volatility of an unrated player.
        epsilon (float): convergence tolerance of the volatility solver.
        max_iterations (int): bound on each loop of the volatility solver.
    """

    tau: float = 0.75
    initial_rating: float = 1500.0
    initial_deviation: float = 350.0
    initial_volatility: float = 0.06
    epsilon: float = 1e-6
    max_iterations: int = 10_000

    def __post_init__(self):
        for name in ('tau', 'initial_deviation', 'initial_volatility', 'epsilon'):
            value = getattr(self, name)
            if not value > 0.0:
                raise InvalidArgumentError(f'{name} must be positive, got {value}')
        if self.max_iterations < 1:
            raise InvalidArgumentError(f'max_iterations must be at least 1, got {self.max_iterations}')

    @classmethod
    def from_dict(cls, params: dict) -> 'Glicko2Config':
        """build a config from a params dict, unknown keys are rejected"""
        field_names = {field.name for field in dataclasses.fields(cls)}
        unknown = set(params) - field_names
        if unknown:
            raise InvalidArgumentError(f'Unknown config keys: {sorted(unknown)}')
        return cls(**params)


_default_config = Glicko2Config()


def get_default_config() -> Glicko2Config:
    """the process-wide default config"""
    return _default_config


def set_default_config(config: Glicko2Config = None, **overrides) -> Glicko2Config:
    """
    Replaces the process-wide default config.

    Parameters:
        config (Glicko2Config, optional): the new default. Defaults to the current default.
        **overrides: fields to change on top of config, e.g. tau=0.5.

    Returns:
        Glicko2Config: the config now in effect.
    """
    global _default_config
    new_config = config if config is not None else _default_config
    if overrides:
        new_config = dataclasses.replace(new_config, **overrides)
    logger.debug('default config set to %s', new_config)
    _default_config = new_config
    return new_config


def resolve_config(config: Glicko2Config = None) -> Glicko2Config:
    """returns config or, if it is None, a snapshot of the default"""
    if config is None:
        return _default_config
    return config
