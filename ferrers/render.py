"""
ferrers/render.py

Utilities for rendering grids and step sequences, as text or as pixel
coordinates for a drawing surface.
"""

from typing import Dict, List

import numpy as np

import ferrers.defaults
from .grid import FerrersGrid, Region
from .steps import Step


default_glyphs = {
    Region.DIAGRAM: "*",
    Region.UPPER: "o",
    Region.LOWER: "x",
    Region.UPPER_SHRED: "O",
    Region.LOWER_SHRED: "X",
    Region.EVEN_COLUMNS: "e",
    Region.ODD_COLUMNS: "d",
}

collision_glyph = "#"


def grid_to_text(grid: FerrersGrid, glyphs: Dict[Region, str] = None,
                 blank=" ") -> str:
    """
    Draws the current state of `grid`, one character per lattice point, with
    each cell shown by the glyph of its region.  Lattice points occupied by
    more than one cell are drawn with `collision_glyph`.

    The picture always includes the origin, so cells with negative
    coordinates push it right or down.
    """
    if glyphs is None:
        glyphs = default_glyphs
    if len(grid) == 0:
        return ""

    left, top = min(0, int(grid.x.min())), min(0, int(grid.y.min()))
    width = max(0, int(grid.x.max())) - left + 1
    height = max(0, int(grid.y.max())) - top + 1

    canvas = [[blank] * width for _ in range(height)]
    for x, y, tag in grid.cells():
        row, column = y - top, x - left
        if canvas[row][column] != blank:
            canvas[row][column] = collision_glyph
        else:
            canvas[row][column] = glyphs[tag]

    return "\n".join("".join(line).rstrip() for line in canvas)


def steps_to_text(steps: List[Step]) -> str:
    """Lists `steps`, one numbered line apiece."""
    return "\n".join(f"{1 + index:>3}. {step}"
                     for index, step in enumerate(steps))


def lattice_to_pixels(grid: FerrersGrid, lattice_unit=None, dot_radius=None) \
        -> np.ndarray:
    """
    Maps the lattice position of each cell of `grid` to the pixel coordinates
    of its centre, leaving a margin of one dot diameter.
    """
    if lattice_unit is None:
        lattice_unit = ferrers.defaults.lattice_unit
    if dot_radius is None:
        dot_radius = ferrers.defaults.dot_radius
    return grid.positions * lattice_unit + 2 * dot_radius
