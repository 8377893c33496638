"""
ferrers/bijections.py

Four classical partition bijections, each realized as a fixed composition of
elementary grid operations, and the machinery which runs them.

The compositions are geometric: they cut the Ferrers diagram into regions,
slide and stretch the regions, and read the result back off row by row.  The
engine does not check that its input lies in the domain of the chosen
bijection; on an input outside the domain the output is unspecified.
"""

from enum import Enum
from typing import Iterator, List, NamedTuple

from .exceptions import IncompleteRun
from .grid import FerrersGrid, Region
from .partition import Partition
from .sampling import DEFAULT_ATTEMPTS, even_random, even_random_exactly, \
    odd_random, odd_random_exactly, random_partition, \
    random_partition_exactly, random_self_conjugate
from .steps import Step, append, concurrently, cut, fill, move, shift, \
    shred, stretch, transpose


U, L = Region.UPPER, Region.LOWER
US, LS = Region.UPPER_SHRED, Region.LOWER_SHRED
EVEN, ODD = Region.EVEN_COLUMNS, Region.ODD_COLUMNS


def strike_slip_steps(rows: int) -> List[Step]:
    """
    Slices the diagram along the main diagonal, then slides the part strictly
    above the diagonal one column left and the rest one row down.
    """
    return [
        cut(-1, 1, 0, U, L),
        *concurrently(
            [move(U, -1, 0)],
            [move(L, 0, 1)],
        ),
    ]


def shred_stretch_steps(rows: int) -> List[Step]:
    """
    Shreds an even partition into its even and odd columns, compresses each
    family of columns into a diagram half as wide and twice as tall, and
    transposes, which doubles the conjugate of half the partition.
    """
    return [
        shred(Region.DIAGRAM, EVEN, ODD),
        move(EVEN, 1, 0),
        *concurrently(
            [stretch(EVEN, 0.5, 0.5)],
            [stretch(ODD, 0.5, 0.5)],
        ),
        transpose(),
        move(ODD, 1, 0),
    ]


def cut_stretch_steps(rows: int) -> List[Step]:
    """
    Cuts a self-conjugate partition just below the Durfee diagonal.  The arms
    (on or above the diagonal) are pushed flush left and spread onto even
    columns; the legs are folded up into rows and spread onto odd columns.
    Each diagonal hook becomes one odd row.
    """
    return [
        cut(-1, 1, 1, U, L),
        *concurrently(
            [
                move(U, 1, 1),
                shift(U, 1, -1, 0, 1),
                move(U, 0, -1),
                stretch(U, 2, 1),
            ],
            [
                move(L, 0, rows),
                shift(L, 1, 0, -1, 1),
                move(L, 0, -1),
                transpose(L, rows),
                stretch(L, 2, 1),
                move(L, 1, -rows),
            ],
        ),
    ]


def glaisher_steps(rows: int) -> List[Step]:
    """
    Cuts an odd partition along the line x = 2 y.  The part to the right of
    the line is pushed flush left, shredded into alternate columns, and each
    pair of columns is stacked into two rows.  The part to the left of the
    line is dropped below the diagram, shredded, and each of its columns is
    folded into a row.  Finally the two parts are glued together row by row.
    """
    upper = [
        move(U, 1, 1),
        shift(U, 1, -2, 0, 1),
        move(U, 0, -1),
        shred(U, U, US),
        move(U, 1, 0),
        *concurrently(
            [stretch(U, 0.5, 0.5)],
            [stretch(US, 0.5, 0.5)],
        ),
        move(US, 0, 1),
        fill(US, U),
    ]
    lower = [
        move(L, 0, rows),
        shred(L, L, LS),
        move(L, 1, 0),
        *concurrently(
            [
                stretch(L, 0.5, 1),
                shift(L, 1, 0, -1, 1),
                transpose(L, rows),
                stretch(L, 1, 0.5),
                move(L, 0, -rows),
            ],
            [
                stretch(LS, 0.5, 1),
                shift(LS, 1, 0, -1, 1),
                transpose(LS, rows + 1),
                stretch(LS, 1, 0.5),
                move(LS, 0, -rows - 1),
            ],
        ),
        fill(LS, L),
    ]
    return [
        cut(-1, 2, 0, U, L),
        *concurrently(upper, lower),
        append(U, L, rows),
    ]


class Bijection(Enum):
    """The available bijections, valued by their display names."""
    STRIKE_SLIP = "Strike-slip"
    SHRED_STRETCH = "Shred-and-stretch"
    CUT_STRETCH = "Cut-and-stretch"
    GLAISHER = "Glaisher"

    @property
    def description(self) -> str:
        return _descriptions[self]

    def steps(self, partition: Partition) -> List[Step]:
        """The step sequence this bijection performs on `partition`."""
        return _compositions[self](partition.number_of_parts())

    def in_domain(self, partition: Partition) -> bool:
        return _domains[self](partition)

    def in_range(self, partition: Partition) -> bool:
        return _ranges[self](partition)


_compositions = {
    Bijection.STRIKE_SLIP: strike_slip_steps,
    Bijection.SHRED_STRETCH: shred_stretch_steps,
    Bijection.CUT_STRETCH: cut_stretch_steps,
    Bijection.GLAISHER: glaisher_steps,
}

_descriptions = {
    Bijection.STRIKE_SLIP: "Works on most partitions.",
    Bijection.SHRED_STRETCH: "Even partition ↦ Even partition",
    Bijection.CUT_STRETCH:
        "Self-conjugate partition ↦ Partition with distinct odd parts",
    Bijection.GLAISHER: "Odd partition ↦ Partition with distinct parts",
}

_domains = {
    Bijection.STRIKE_SLIP: lambda p: not p.is_empty(),
    Bijection.SHRED_STRETCH: lambda p: p.is_even(),
    Bijection.CUT_STRETCH: lambda p: p.is_self_conjugate(),
    Bijection.GLAISHER: lambda p: p.is_odd(),
}

_ranges = {
    Bijection.STRIKE_SLIP: lambda p: True,
    Bijection.SHRED_STRETCH: lambda p: p.is_even(),
    Bijection.CUT_STRETCH: lambda p: p.is_odd() and p.is_distinct(),
    Bijection.GLAISHER: lambda p: p.is_distinct(),
}


class RunState(Enum):
    IDLE = "idle"
    GRID_BUILT = "grid built"
    DONE = "done"


class BijectionResult(NamedTuple):
    partition: Partition
    steps: List[Step]


class BijectionRun:
    """
    A single application of a `Bijection` to a `Partition`.

    Runs move through IDLE -> GRID_BUILT -> DONE.  `build_grid` lays out the
    Ferrers diagram; each call to `advance` then applies one step, and the
    run is DONE once the last step has been applied.  A run can be abandoned
    between steps, but it only yields a result once DONE, and it cannot be
    restarted: start a fresh run instead.

    The input partition is never mutated.
    """

    def __init__(self, bijection: Bijection, partition: Partition):
        self.bijection = bijection
        self.partition = partition.copy()
        self.state = RunState.IDLE
        self.grid = None
        self.steps = []
        self.applied = 0

    def build_grid(self) -> FerrersGrid:
        if self.state is not RunState.IDLE:
            raise IncompleteRun(f"Grid already built; run is "
                                f"{self.state.value}.")
        self.grid = FerrersGrid.from_partition(self.partition)
        self.steps = self.bijection.steps(self.partition)
        self.state = RunState.GRID_BUILT
        return self.grid

    def advance(self) -> Step:
        """Applies the next step and returns it."""
        if self.state is not RunState.GRID_BUILT:
            raise IncompleteRun(f"Cannot advance a run which is "
                                f"{self.state.value}.")
        step = self.steps[self.applied]
        step.apply(self.grid)
        self.applied += 1
        if self.applied == len(self.steps):
            self.state = RunState.DONE
        return step

    def __iter__(self) -> Iterator[Step]:
        """
        Builds the grid if necessary, then yields each step just after it has
        been applied.  A renderer may inspect `self.grid` between steps.
        """
        if self.state is RunState.IDLE:
            self.build_grid()
        while self.state is RunState.GRID_BUILT:
            yield self.advance()

    def run(self, chatty=False) -> BijectionResult:
        """Drives the run to completion and returns its result."""
        for step in self:
            if chatty:
                print(f"[{self.applied}/{len(self.steps)}] {step}")
        return self.result()

    def result(self) -> BijectionResult:
        if self.state is not RunState.DONE:
            raise IncompleteRun(f"No result yet; run is {self.state.value}.")
        return BijectionResult(
            partition=self.grid.to_partition(),
            steps=list(self.steps),
        )


def run_bijection(bijection: Bijection, partition: Partition,
                  chatty=False) -> BijectionResult:
    """
    Applies `bijection` to `partition`, returning the image partition together
    with the steps which produced it.

    The caller is responsible for `partition` lying in the bijection's domain.
    """
    return BijectionRun(bijection, partition).run(chatty=chatty)


_samplers = {
    Bijection.STRIKE_SLIP: (random_partition, random_partition_exactly),
    Bijection.SHRED_STRETCH: (even_random, even_random_exactly),
    Bijection.GLAISHER: (odd_random, odd_random_exactly),
}


def sample_domain(bijection: Bijection, n, exact=False, rng=None,
                  max_attempts=DEFAULT_ATTEMPTS, chatty=False) -> Partition:
    """
    Draws a random partition of weight at least (or, if `exact` is toggled,
    exactly) `n` from the domain of `bijection`.
    """
    if bijection is Bijection.CUT_STRETCH:
        return random_self_conjugate(n, exact=exact, rng=rng,
                                     max_attempts=max_attempts, chatty=chatty)

    at_least, exactly = _samplers[bijection]
    if exact:
        return exactly(n, rng=rng, max_attempts=max_attempts, chatty=chatty)
    return at_least(n, rng=rng)
