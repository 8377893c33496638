"""
ferrers/__init__.py

Top-level imports for `ferrers`.
"""

import ferrers.defaults

from ferrers.exceptions import EmptyPartition, IncompleteRun, \
    IndexOutOfRange, InvalidPart, InvalidWeight, NullArgument, \
    PartitionError, SamplingTimeout, UndefinedForEmpty
from ferrers.partition import Partition, conjugate, partition_sum, \
    partition_union
from ferrers.sampling import distinct_even_random, \
    distinct_even_random_exactly, distinct_odd_random, \
    distinct_odd_random_exactly, even_random, even_random_exactly, \
    odd_random, odd_random_exactly, random_partition, \
    random_partition_exactly, random_self_conjugate, \
    self_conjugate_from_distinct_odd
from ferrers.grid import FerrersGrid, Region
from ferrers.steps import Operation, Step
from ferrers.bijections import Bijection, BijectionResult, BijectionRun, \
    RunState, run_bijection, sample_domain
