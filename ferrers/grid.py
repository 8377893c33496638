"""
ferrers/grid.py

The Ferrers-diagram cell grid on which bijections act, and the elementary
operations which cut, shred, and move its cells.

Cells live in an arena of parallel numpy arrays rather than as individual
objects.  Every operation updates all of the cells in its region with a single
vectorized expression; no cell reads another cell's state, so each operation
is atomic from the point of view of anyone inspecting the grid between calls.
"""

from enum import IntEnum
from typing import List, Tuple

import numpy as np

from .partition import Partition


class Region(IntEnum):
    """
    Labels which classify cells during a bijection.  A renderer is free to
    draw each label in its own colour.
    """
    DIAGRAM = 0
    UPPER = 1
    LOWER = 2
    UPPER_SHRED = 3
    LOWER_SHRED = 4
    EVEN_COLUMNS = 5
    ODD_COLUMNS = 6


class FerrersGrid:
    """
    The cells of the Ferrers diagram of a partition, one per (row, column)
    with column < part(row).  Each cell carries its starting position, a
    current lattice position (x, y) = (column, row), and a `Region` tag.

    Cells are never created or destroyed after construction.
    """

    def __init__(self, origins, positions, tags):
        self.origins = np.array(origins, dtype=int).reshape(-1, 2)
        self.positions = np.array(positions, dtype=int).reshape(-1, 2)
        self.tags = np.array(tags, dtype=int).reshape(-1)

    @classmethod
    def from_partition(cls, partition: Partition, region=Region.DIAGRAM):
        """
        Lays out the English-notation Ferrers diagram of `partition`, with
        every cell tagged `region`.
        """
        cells = [(column, row)
                 for row, part in enumerate(partition)
                 for column in range(part)]
        return cls(origins=cells, positions=cells,
                   tags=[int(region)] * len(cells))

    def __len__(self):
        return len(self.tags)

    @property
    def x(self) -> np.ndarray:
        return self.positions[:, 0]

    @property
    def y(self) -> np.ndarray:
        return self.positions[:, 1]

    def mask(self, region=None) -> np.ndarray:
        """Flags the cells tagged `region` (all cells if `region` is None)."""
        if region is None:
            return np.ones(len(self.tags), dtype=bool)
        return self.tags == region

    def count(self, region=None) -> int:
        return int(np.count_nonzero(self.mask(region)))

    def cells(self, region=None) -> List[Tuple[int, int, Region]]:
        """Snapshot of (x, y, tag) for the cells of `region`."""
        selected = self.mask(region)
        return [(int(x), int(y), Region(int(tag)))
                for (x, y), tag in zip(self.positions[selected],
                                       self.tags[selected])]

    def correspondence(self) \
            -> List[Tuple[Tuple[int, int], Tuple[int, int]]]:
        """
        Pairs the starting (x, y) of each cell with its current (x, y).  Once a
        bijection has run, this matches each cell of the source diagram with
        the cell it became in the image diagram.
        """
        return [((int(ox), int(oy)), (int(x), int(y)))
                for (ox, oy), (x, y) in zip(self.origins, self.positions)]

    def row_lengths(self) -> List[int]:
        """The number of cells on each occupied row, from the top down."""
        if len(self) == 0:
            return []
        _, counts = np.unique(self.y, return_counts=True)
        return [int(c) for c in counts]

    def to_partition(self) -> Partition:
        """Reads the cell counts per row back as a partition."""
        return Partition(*self.row_lengths())

    #
    # elementary operations
    #

    def cut(self, a, b, c, upper, lower):
        """
        Tags every cell at (x, y) with `upper` if a x + b y < c, and with
        `lower` otherwise, splitting the grid along a line of integer slope.
        """
        above = a * self.x + b * self.y < c
        self.tags = np.where(above, int(upper), int(lower))

    def shred(self, region, *strips):
        """
        Splits `region` into len(`strips`) interleaved families of vertical
        strips: a cell in column x is retagged strips[x mod len(strips)].
        """
        selected = self.mask(region)
        labels = np.array([int(s) for s in strips], dtype=int)
        self.tags[selected] = labels[self.x[selected] % len(labels)]

    def move(self, region, dx, dy):
        """Translates the cells of `region` by (dx, dy)."""
        self.positions[self.mask(region)] += (dx, dy)

    def shift(self, region, a, b, c, d):
        """Sends the cells (x, y) of `region` to (a x + b y, c x + d y)."""
        selected = self.mask(region)
        x, y = self.x[selected], self.y[selected]
        self.positions[selected] = np.column_stack([a * x + b * y,
                                                    c * x + d * y])

    def stretch(self, region, k, l):
        """
        Sends the cells (x, y) of `region` to (floor(k x), floor(y / l)):
        stretches horizontally by `k` and compresses vertically by `l`.
        """
        selected = self.mask(region)
        x, y = self.x[selected], self.y[selected]
        self.positions[selected] = np.column_stack([
            np.floor(x * k), np.floor(y / l)
        ]).astype(int)

    def transpose(self, region=None, k=0):
        """
        Reflects the cells (x, y) of `region` to (y - k, x + k), i.e., across
        the diagonal and then `k` steps down and to the left.  With no region,
        transposes the whole grid.
        """
        selected = self.mask(region)
        x, y = self.x[selected], self.y[selected]
        self.positions[selected] = np.column_stack([y - k, x + k])

    def fill(self, source, target):
        """Merges `source` into `target` by retagging its cells."""
        self.tags[self.mask(source)] = int(target)

    def append(self, left, right, offset):
        """
        Concatenates rows: `right` is assumed to sit `offset` rows below
        `left`.  Each of its rows is slid right past the cells of the matching
        row of `left`, and then `right` is lifted `offset` rows up.
        """
        left_mask = self.mask(left)
        right_mask = self.mask(right)
        rows, widths = np.unique(self.y[left_mask], return_counts=True)

        dx = np.zeros(len(self), dtype=int)
        for row, width in zip(rows, widths):
            dx[right_mask & (self.y == row + offset)] = width

        self.positions[:, 0] += dx
        self.positions[right_mask, 1] -= offset
