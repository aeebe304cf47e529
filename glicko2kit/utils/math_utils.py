"""math utility functions for rating systems"""
import math
import numpy as np
from scipy.special import expit
from glicko2kit.utils.constants import THREE_OVER_PI_SQUARED


def sigmoid(x):
    """a little faster than implementing it in numpy for d < 100000"""
    return expit(x)


def sigmoid_scalar(x):
    """no need to use numpy on scalars"""
    return 1.0 / (1.0 + math.exp(-x))


def base_10_sigmoid(x):
    """some methods prefer base 10 unfortunately"""
    return 1.0 / (1.0 + (10.0**-x))


def g_scalar(phi):
    """
    Reduces the impact of a game according to the opponent's deviation.

    Parameters:
        phi (float): deviation on the Glicko-2 scale.

    Returns:
        float: 1 / sqrt(1 + 3 phi^2 / pi^2), in (0, 1].
    """
    return 1.0 / math.sqrt(1.0 + (THREE_OVER_PI_SQUARED * (phi**2.0)))


def g_vector(phi):
    """vector version"""
    return 1.0 / np.sqrt(1.0 + (THREE_OVER_PI_SQUARED * np.square(phi)))
