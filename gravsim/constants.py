from __future__ import annotations

from typing import Final

"""
This module defines the physical and numerical defaults shared by the whole package. It includes the gravitational constant G used by the force law (a scaled value, not the SI constant), the default body count, iteration count and integration step used by the command line, the distribution parameters for random initial conditions, and the fixed plotting viewport. SimConfig and GeneratorConfig source their defaults from here so every component agrees on the same values.


"""


G_DEFAULT: Final[float] = 1.01

N_BODIES_DEFAULT: Final[int] = 10
ITERATIONS_DEFAULT: Final[int] = 100
DT_DEFAULT: Final[float] = 1.0

MASS_OFFSET: Final[float] = 1.0
MASS_WEIBULL_SHAPE: Final[float] = 1.0
MASS_WEIBULL_SCALE: Final[float] = 2.0
POSITION_SIGMA: Final[float] = 10.0
VELOCITY_SIGMA: Final[float] = 0.5

PLOT_BOUNDS: Final[float] = 75.0
FRAME_DELAY: Final[float] = 0.1

# largest count accepted from text input
COUNT_MAX: Final[int] = 2**31 - 1
