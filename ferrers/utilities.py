"""
ferrers/utilities.py

Depository for the numeric snippets behind the Boltzmann samplers.
"""

from numbers import Integral

import numpy as np

from .exceptions import InvalidWeight


sqrt_zeta_2 = np.pi / np.sqrt(6)  # sqrt(zeta(2))


def as_generator(rng=None) -> np.random.Generator:
    """
    Coerces `rng` into a numpy Generator.  Accepts an existing Generator (which
    is passed through, so its state keeps advancing), a seed, or `None` for
    fresh OS entropy.
    """
    if isinstance(rng, np.random.Generator):
        return rng
    return np.random.default_rng(rng)


def check_weight(n, even=False):
    """
    Raises InvalidWeight unless `n` is a positive integer (and even, if `even`
    is toggled).
    """
    if isinstance(n, bool) or not isinstance(n, Integral) or n < 1:
        raise InvalidWeight(f"Illegal weight: {n}")
    if even and n % 2 != 0:
        raise InvalidWeight(f"Illegal even weight: {n}")


def boltzmann_parameter(n) -> float:
    """
    The parameter x = exp(-C / sqrt(n)) which tunes the expected weight of a
    Boltzmann-sampled partition to roughly `n`.
    """
    return float(np.exp(-sqrt_zeta_2 / np.sqrt(n)))


def geometric_multiplicity(u, x, size) -> int:
    """
    Converts a uniform draw `u` in (0, 1) into the number of copies of the
    part `size`, a geometric law with parameter 1 - x^size.
    """
    decay = 1 - x ** size
    return int(np.floor(-np.log(u) / decay))
