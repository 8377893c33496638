"""
ferrers/exceptions.py

Exception classes used throughout the project.
"""


class PartitionError(Exception):
    """Root of every error signaled by this package."""
    pass


class InvalidPart(PartitionError, ValueError):
    """Signaled when a part to be stored in a `Partition` is not positive."""
    pass


class EmptyPartition(PartitionError, ValueError):
    """Signaled when a query needs at least one part but there are none."""
    pass


class UndefinedForEmpty(EmptyPartition):
    """
    Signaled by the statistics (rank, crank, Durfee rank) which have no
    meaning on the empty partition.
    """
    pass


class IndexOutOfRange(PartitionError, IndexError):
    """Emitted when a part index falls outside [0, number_of_parts)."""
    pass


class InvalidWeight(PartitionError, ValueError):
    """
    Signaled by the samplers when no partition of the requested class can
    have the requested weight: n < 1, or an odd n for an even-exact request.
    """
    pass


class NullArgument(PartitionError, TypeError):
    """Emitted when a required partition argument is `None`."""
    pass


class SamplingTimeout(PartitionError):
    """
    Signaled when a rejection sampler exhausts its `max_attempts` without
    producing an acceptable partition.

    Probabilistically meaningless: it should be fine to re-run the call, or
    to raise the cap, after catching this error.
    """

    def __init__(self, attempts):
        super().__init__(f"No acceptable sample after {attempts} attempts.")
        self.attempts = attempts


class IncompleteRun(PartitionError):
    """
    Emitted when a `BijectionRun` is asked for a result before it has reached
    the DONE state, or is driven out of order.
    """
    pass
