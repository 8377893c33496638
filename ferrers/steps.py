"""
ferrers/steps.py

Descriptors for the elementary grid operations, and the executor which applies
them.  A bijection is nothing more than an ordered list of `Step`s.
"""

from dataclasses import dataclass, field
from enum import Enum
from itertools import zip_longest
from typing import List, Optional, Tuple

from .grid import FerrersGrid, Region


class Operation(Enum):
    """The elementary operations a `FerrersGrid` knows how to perform."""
    CUT = "cut"
    SHRED = "shred"
    MOVE = "move"
    SHIFT = "shift"
    STRETCH = "stretch"
    TRANSPOSE = "transpose"
    FILL = "fill"
    APPEND = "append"


@dataclass(frozen=True)
class Step:
    """
    One elementary operation: `operation` applied to the cells tagged `region`
    (or to every cell, if `region` is None), with the remaining arguments of
    the corresponding `FerrersGrid` method stored in `parameters`.
    """

    operation: Operation
    region: Optional[Region] = None
    parameters: Tuple = field(default_factory=tuple)

    def apply(self, grid: FerrersGrid):
        """Performs this step on `grid`, in place."""
        method = getattr(grid, self.operation.value)
        if self.operation is Operation.CUT:
            method(*self.parameters)
        else:
            method(self.region, *self.parameters)

    def __str__(self):
        arguments = [] if self.region is None else [self.region.name]
        arguments += [p.name if isinstance(p, Region) else str(p)
                      for p in self.parameters]
        return f"{self.operation.value}({', '.join(arguments)})"

    @classmethod
    def inflate(cls, data):
        """
        Converts the `data` produced by `dataclasses.asdict` (possibly with its
        enums flattened to their names / values) to a live object.
        """
        def region(value):
            if value is None or isinstance(value, Region):
                return value
            return Region[value]

        return cls(
            operation=Operation(data["operation"]),
            region=region(data.get("region")),
            parameters=tuple(region(p) if isinstance(p, str) else p
                             for p in data.get("parameters", ())),
        )


#
# step constructors, one per grid method
#

def cut(a, b, c, upper, lower) -> Step:
    return Step(Operation.CUT, None, (a, b, c, upper, lower))


def shred(region, *strips) -> Step:
    return Step(Operation.SHRED, region, tuple(strips))


def move(region, dx, dy) -> Step:
    return Step(Operation.MOVE, region, (dx, dy))


def shift(region, a, b, c, d) -> Step:
    return Step(Operation.SHIFT, region, (a, b, c, d))


def stretch(region, k, l) -> Step:
    return Step(Operation.STRETCH, region, (k, l))


def transpose(region=None, k=0) -> Step:
    return Step(Operation.TRANSPOSE, region, (k,))


def fill(source, target) -> Step:
    return Step(Operation.FILL, source, (target,))


def append(left, right, offset) -> Step:
    return Step(Operation.APPEND, left, (right, offset))


def concurrently(*branches: List[Step]) -> List[Step]:
    """
    Interleaves several step sequences, one step from each in turn, so that
    branches acting on disjoint regions advance side by side.  The relative
    order within each branch is preserved.
    """
    return [step
            for row in zip_longest(*branches)
            for step in row
            if step is not None]


def execute(steps: List[Step], grid: FerrersGrid, chatty=False) -> FerrersGrid:
    """
    Applies `steps` to `grid` in order, each one completing before the next
    begins.  If `chatty` is toggled, reports each step as it is applied.
    """
    for index, step in enumerate(steps):
        step.apply(grid)
        if chatty:
            print(f"[{1 + index}/{len(steps)}] {step}")
    return grid
