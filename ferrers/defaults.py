"""
ferrers/defaults.py

Package-wide settings.  These are read at call time, so assigning to them
(e.g., `ferrers.defaults.max_sampling_attempts = 10_000`) takes effect
immediately.
"""

max_sampling_attempts = None
"""
Cap on the number of draws made by a rejection sampler before it gives up with
`SamplingTimeout`.  `None` leaves the loops unbounded.
"""

default_cell = "*"
"""Character used for one cell of a printed Ferrers diagram."""

dot_radius = 5
"""Radius, in pixels, of one rendered cell."""

lattice_unit = 3 * dot_radius
"""Distance, in pixels, between the centres of neighbouring cells."""
