"""
ferrers/sampling.py

Boltzmann samplers for random partitions of a prescribed class, together with
the rejection layers which pin down the weight or force the parts to be
distinct.

Each candidate part size i receives an independent, geometrically distributed
number of copies with parameter 1 - x^i, where x = exp(-pi / sqrt(6 n)) is
tuned so that the expected weight is about n.  Part sizes are visited in
increasing order until the running weight reaches n, so the "at least"
samplers always return a partition of weight >= n.

NOTE: The "exactly" and "distinct" samplers are rejection loops.  They are
      unbounded unless `max_attempts` is passed (or, when it is left
      unspecified, `ferrers.defaults.max_sampling_attempts` is set), in which
      case they signal `SamplingTimeout` once the cap is spent.
"""

from typing import Callable

import ferrers.defaults
from .exceptions import InvalidWeight, SamplingTimeout
from .partition import Partition
from .utilities import as_generator, boltzmann_parameter, check_weight, \
    geometric_multiplicity


# part sizes visited by each class: (first size, stride)
GENERAL_SIZES = (1, 1)
EVEN_SIZES = (2, 2)
ODD_SIZES = (1, 2)

DEFAULT_ATTEMPTS = object()
"""
Marker for an unspecified `max_attempts`, which defers to
`ferrers.defaults.max_sampling_attempts`.  An explicit `None` always means
unbounded.
"""


def boltzmann_partition(n, sizes=GENERAL_SIZES, rng=None) -> Partition:
    """
    Draws one Boltzmann-distributed partition of weight at least `n` whose
    parts are drawn from the arithmetic progression `sizes` = (first, stride).
    """
    check_weight(n)
    rng = as_generator(rng)
    first, stride = sizes

    x = boltzmann_parameter(n)
    parts = []
    weight = 0
    size = first
    while weight < n:
        u = rng.random()
        # log 0 is undefined, so a zero draw contributes nothing
        if u > 0.0:
            count = geometric_multiplicity(u, x, size)
            parts += [size] * count
            weight += size * count
        size += stride

    return Partition(*parts)


def rejection_sample(
        draw: Callable[[], Partition],
        accept: Callable[[Partition], bool],
        max_attempts=DEFAULT_ATTEMPTS,
        chatty=False,
) -> Partition:
    """
    Calls `draw` until it yields a partition satisfying `accept`.  Each call to
    `draw` is expected to consume fresh randomness.

    Signals SamplingTimeout after `max_attempts` rejected draws.  `None` leaves
    the loop unbounded; leaving `max_attempts` unspecified defers to
    `ferrers.defaults.max_sampling_attempts`, itself unbounded by default.  If
    `chatty` is toggled, reports the number of draws used.
    """
    if max_attempts is DEFAULT_ATTEMPTS:
        max_attempts = ferrers.defaults.max_sampling_attempts

    attempts = 0
    while max_attempts is None or attempts < max_attempts:
        partition = draw()
        attempts += 1
        if accept(partition):
            if chatty:
                print(f"Accepted {partition} after {attempts} attempt(s).")
            return partition

    raise SamplingTimeout(attempts)


def _sample(n, sizes, rng, accept, max_attempts, chatty):
    rng = as_generator(rng)
    return rejection_sample(
        lambda: boltzmann_partition(n, sizes=sizes, rng=rng),
        accept,
        max_attempts=max_attempts,
        chatty=chatty,
    )


def _has_weight(n):
    return lambda partition: partition.weight() == n


def _is_distinct(partition):
    return partition.is_distinct()


def _is_distinct_with_weight(n):
    return lambda partition: partition.is_distinct() and \
        partition.weight() == n


#
# general partitions
#

def random_partition(n, rng=None) -> Partition:
    """A random partition of weight at least `n`."""
    return boltzmann_partition(n, sizes=GENERAL_SIZES, rng=rng)


def random_partition_exactly(n, rng=None,
        max_attempts=DEFAULT_ATTEMPTS, chatty=False) -> Partition:
    """A random partition of weight exactly `n`."""
    check_weight(n)
    return _sample(n, GENERAL_SIZES, rng, _has_weight(n), max_attempts, chatty)


#
# even partitions
#

def even_random(n, rng=None) -> Partition:
    """A random partition into even parts of weight at least `n`."""
    return boltzmann_partition(n, sizes=EVEN_SIZES, rng=rng)


def even_random_exactly(n, rng=None,
        max_attempts=DEFAULT_ATTEMPTS, chatty=False) -> Partition:
    """
    A random partition into even parts of weight exactly `n`.  Raises
    InvalidWeight if `n` is odd.
    """
    check_weight(n, even=True)
    return _sample(n, EVEN_SIZES, rng, _has_weight(n), max_attempts, chatty)


def distinct_even_random(n, rng=None,
        max_attempts=DEFAULT_ATTEMPTS, chatty=False) -> Partition:
    """A random partition into distinct even parts of weight at least `n`."""
    check_weight(n)
    return _sample(n, EVEN_SIZES, rng, _is_distinct, max_attempts, chatty)


def distinct_even_random_exactly(n, rng=None,
        max_attempts=DEFAULT_ATTEMPTS, chatty=False) -> Partition:
    """
    A random partition into distinct even parts of weight exactly `n`.  Raises
    InvalidWeight if `n` is odd.
    """
    check_weight(n, even=True)
    return _sample(n, EVEN_SIZES, rng, _is_distinct_with_weight(n),
                   max_attempts, chatty)


#
# odd partitions
#

def odd_random(n, rng=None) -> Partition:
    """A random partition into odd parts of weight at least `n`."""
    return boltzmann_partition(n, sizes=ODD_SIZES, rng=rng)


def odd_random_exactly(n, rng=None,
        max_attempts=DEFAULT_ATTEMPTS, chatty=False) -> Partition:
    """A random partition into odd parts of weight exactly `n`."""
    check_weight(n)
    return _sample(n, ODD_SIZES, rng, _has_weight(n), max_attempts, chatty)


def distinct_odd_random(n, rng=None,
        max_attempts=DEFAULT_ATTEMPTS, chatty=False) -> Partition:
    """A random partition into distinct odd parts of weight at least `n`."""
    check_weight(n)
    return _sample(n, ODD_SIZES, rng, _is_distinct, max_attempts, chatty)


def distinct_odd_random_exactly(n, rng=None,
        max_attempts=DEFAULT_ATTEMPTS, chatty=False) -> Partition:
    """
    A random partition into distinct odd parts of weight exactly `n`.  Raises
    InvalidWeight for n = 2, the only positive weight with no such partition.
    """
    check_weight(n)
    if n == 2:
        raise InvalidWeight("No partition of 2 has distinct odd parts.")
    return _sample(n, ODD_SIZES, rng, _is_distinct_with_weight(n),
                   max_attempts, chatty)


#
# self-conjugate partitions
#

def self_conjugate_from_distinct_odd(partition: Partition) -> Partition:
    """
    Folds a partition into distinct odd parts into the self-conjugate
    partition of the same weight, bending each part 2h + 1 into a diagonal
    hook with arm and leg of length h.

    The input is assumed to have distinct odd parts; this is not checked.
    """
    arms = Partition(*[part // 2 + 1 for part in partition])
    legs = Partition(*[part // 2 for part in partition if part > 1])

    for i in range(legs.number_of_parts()):
        for j in range(legs.part(i)):
            if j < arms.number_of_parts() - i - 1:
                part = arms.part(i + j + 1)
                arms.erase(part)
                arms.insert(part + 1)
            else:
                arms.insert(1)

    return arms


def random_self_conjugate(n, exact=False, rng=None,
        max_attempts=DEFAULT_ATTEMPTS, chatty=False) -> Partition:
    """
    A random self-conjugate partition of weight at least (or, if `exact` is
    toggled, exactly) `n`, built from a random partition into distinct odd
    parts.
    """
    if exact:
        seed = distinct_odd_random_exactly(
            n, rng=rng, max_attempts=max_attempts, chatty=chatty
        )
    else:
        seed = distinct_odd_random(
            n, rng=rng, max_attempts=max_attempts, chatty=chatty
        )
    return self_conjugate_from_distinct_odd(seed)
