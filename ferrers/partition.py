"""
ferrers/partition.py

The `Partition` data type, together with the binary operations on partitions.
"""

from numbers import Integral
from typing import Iterable, List

import ferrers.defaults
from .exceptions import EmptyPartition, IndexOutOfRange, InvalidPart, \
    NullArgument, UndefinedForEmpty


def _check_part(part, message):
    if isinstance(part, bool) or not isinstance(part, Integral) or part < 1:
        raise InvalidPart(f"{message}: {part}")
    return int(part)


class Partition:
    """
    Models a partition: a multiset of positive integers ("parts"), stored in
    non-increasing order.  The order carries no identity beyond the sort.

    The statistics rank, crank, and Durfee rank, as well as the largest and
    smallest parts, are undefined on the empty partition and signal an error
    there.

    NOTE: Partitions hash by their parts, but `insert`, `erase`, and `clear`
          mutate them in place.  Don't mutate a partition while it sits in a
          set or serves as a dictionary key.
    """

    def __init__(self, *parts):
        self._parts = []
        for index, part in enumerate(parts):
            self._parts.append(
                _check_part(part, f"Part {index} is not positive")
            )
        self._parts.sort(reverse=True)

    @classmethod
    def from_iterable(cls, parts: Iterable[int]):
        """Builds a partition from any iterable of positive integers."""
        if parts is None:
            raise NullArgument("Parts are None.")
        return cls(*parts)

    def copy(self):
        """Produces an independent partition with the same parts."""
        partition = Partition()
        partition._parts = list(self._parts)
        return partition

    def __repr__(self):
        return f"Partition({', '.join(str(p) for p in self._parts)})"

    def __str__(self):
        return str(self._parts)

    def __eq__(self, other):
        if not isinstance(other, Partition):
            return NotImplemented
        return self._parts == other._parts

    def __hash__(self):
        return hash(tuple(self._parts))

    def __iter__(self):
        return iter(self._parts)

    def __len__(self):
        return len(self._parts)

    def __contains__(self, part):
        return part in self._parts

    # mutation

    def insert(self, part):
        """
        Inserts `part`, restoring the descending order.  Raises InvalidPart if
        `part` is not a positive integer.
        """
        part = _check_part(part, "Illegal part to insert")
        self._parts.append(part)
        self._parts.sort(reverse=True)

    def erase(self, part):
        """
        Removes the first occurrence of `part`.  Leaves the partition unchanged
        if `part` does not occur.
        """
        if part in self._parts:
            self._parts.remove(part)

    def clear(self):
        self._parts.clear()

    # queries

    def contains(self, part) -> bool:
        return part in self._parts

    def is_empty(self) -> bool:
        return len(self._parts) == 0

    def number_of_parts(self) -> int:
        return len(self._parts)

    def part(self, k) -> int:
        """
        Returns the part at index `k`, counting from the largest.

        Raises IndexOutOfRange unless `k` is an integer with
        0 <= k < number_of_parts().
        """
        if isinstance(k, bool) or not isinstance(k, Integral) or \
                not 0 <= k < len(self._parts):
            raise IndexOutOfRange(f"Illegal part index: {k}")
        return self._parts[k]

    def largest_part(self) -> int:
        if self.is_empty():
            raise EmptyPartition("No such largest part exists.")
        return self._parts[0]

    def smallest_part(self) -> int:
        if self.is_empty():
            raise EmptyPartition("No such smallest part exists.")
        return self._parts[-1]

    def weight(self) -> int:
        """The sum of the parts; 0 for the empty partition."""
        return sum(self._parts)

    def multiplicity(self, part) -> int:
        return self._parts.count(part)

    def is_even(self) -> bool:
        return all(part % 2 == 0 for part in self._parts)

    def is_odd(self) -> bool:
        return all(part % 2 == 1 for part in self._parts)

    def is_distinct(self) -> bool:
        return all(left != right
                   for left, right in zip(self._parts, self._parts[1:]))

    def is_self_conjugate(self) -> bool:
        return conjugate(self) == self

    def to_list(self) -> List[int]:
        """Exports the parts, largest first."""
        return list(self._parts)

    # statistics

    def rank(self) -> int:
        """
        The rank: largest part minus number of parts.
        """
        if self.is_empty():
            raise UndefinedForEmpty("No such rank exists.")
        return self.largest_part() - self.number_of_parts()

    def crank(self) -> int:
        """
        The crank.  Let w be the multiplicity of 1.  If w = 0, the crank is the
        largest part; otherwise it is (# parts larger than w) - w.
        """
        if self.is_empty():
            raise UndefinedForEmpty("No such crank exists.")

        ones = self.multiplicity(1)
        if ones == 0:
            return self.largest_part()
        return sum(1 for part in self._parts if part > ones) - ones

    def durfee_rank(self) -> int:
        """
        The side length of the Durfee square: the largest k such that at least
        k parts are >= k.
        """
        if self.is_empty():
            raise UndefinedForEmpty("No such Durfee rank exists.")

        durfee = 0
        for k in range(1, 1 + self.largest_part()):
            if sum(1 for part in self._parts if part >= k) >= k:
                durfee = k
        return durfee

    # text export

    def ferrers_diagram(self, cell=None, english=True) -> str:
        """
        Renders the Ferrers diagram as text, one row of `cell` characters per
        part.  English notation puts the largest row first, French notation
        the smallest.
        """
        if cell is None:
            cell = ferrers.defaults.default_cell
        rows = self._parts if english else reversed(self._parts)
        return "\n".join(cell * part for part in rows)

    def print_ferrers_diagram(self, cell=None, english=True):
        if not self.is_empty():
            print(self.ferrers_diagram(cell=cell, english=english))


def conjugate(partition: Partition) -> Partition:
    """
    Returns the conjugate of `partition`, i.e., the partition whose Ferrers
    diagram is the transpose of the given one.
    """
    if partition is None:
        raise NullArgument("Partition is None.")

    if partition.is_empty():
        return Partition()
    return Partition(*[
        sum(1 for part in partition if part > column)
        for column in range(partition.largest_part())
    ])


def partition_sum(lhs: Partition, rhs: Partition) -> Partition:
    """
    Returns the part-wise sum of `lhs` and `rhs`, as in Pak's _The Nature of
    Partition Bijections II: Asymptotic Stability_.

    NOTE: Both addends are indexed up to the longer of the two, so addends
          with different numbers of parts raise IndexOutOfRange.  Callers are
          expected to guard against this.
    """
    if lhs is None:
        raise NullArgument("Left partition addend is None.")
    if rhs is None:
        raise NullArgument("Right partition addend is None.")

    length = max(lhs.number_of_parts(), rhs.number_of_parts())
    return Partition(*[lhs.part(k) + rhs.part(k) for k in range(length)])


def partition_union(lhs: Partition, rhs: Partition) -> Partition:
    """
    Returns the multiset union of the parts of `lhs` and `rhs`.
    """
    if lhs is None:
        raise NullArgument("Left partition is None.")
    if rhs is None:
        raise NullArgument("Right partition is None.")

    return Partition(*lhs, *rhs)
