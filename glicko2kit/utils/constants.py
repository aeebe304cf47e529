"""mathematical constants computed once here to avoid recomputation"""
import math

# general math constants
PI2 = math.pi**2.0
THREE_OVER_PI_SQUARED = 3.0 / PI2

# glicko 2 constants
GLICKO2_SCALE = 173.7178
GLICKO2_CENTER = 1500.0

# outcome encoding
LOSS = 0.0
DRAW = 0.5
WIN = 1.0
