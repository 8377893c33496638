"""
test/test_sampling.py

Tests for ferrers/sampling.py .
"""

import contextlib
import io
import unittest

import ddt
import numpy as np

import ferrers.defaults
from ferrers.exceptions import InvalidWeight, SamplingTimeout
from ferrers.partition import Partition, conjugate
from ferrers.sampling import *


def distinct_odd_partitions(n, largest=None):
    """Enumerates the partitions of `n` into distinct odd parts."""
    if largest is None:
        largest = n if n % 2 == 1 else n - 1
    if n == 0:
        yield []
        return
    for part in range(min(largest, n), 0, -1):
        if part % 2 == 1:
            for rest in distinct_odd_partitions(n - part, part - 2):
                yield [part] + rest


@ddt.ddt
class TestFerrersSampling(unittest.TestCase):
    """Check the Boltzmann samplers and their rejection layers."""

    def setUp(self):
        self.rng = np.random.default_rng(2718)

    @ddt.data(1, 5, 17, 40)
    def test_at_least(self, n):
        """Check that the unconditioned samplers reach the target weight."""
        for _ in range(10):
            self.assertGreaterEqual(random_partition(n, rng=self.rng).weight(),
                                    n)
            even = even_random(n, rng=self.rng)
            self.assertGreaterEqual(even.weight(), n)
            self.assertTrue(even.is_even())
            odd = odd_random(n, rng=self.rng)
            self.assertGreaterEqual(odd.weight(), n)
            self.assertTrue(odd.is_odd())

    @ddt.data(1, 2, 7, 16, 25)
    def test_random_exactly(self, n):
        for _ in range(5):
            self.assertEqual(n, random_partition_exactly(n, rng=self.rng)
                             .weight())

    @ddt.data(2, 8, 20)
    def test_even_random_exactly(self, n):
        for _ in range(5):
            partition = even_random_exactly(n, rng=self.rng)
            self.assertEqual(n, partition.weight())
            self.assertTrue(partition.is_even())

    @ddt.data(1, 6, 15)
    def test_odd_random_exactly(self, n):
        for _ in range(5):
            partition = odd_random_exactly(n, rng=self.rng)
            self.assertEqual(n, partition.weight())
            self.assertTrue(partition.is_odd())

    @ddt.data(4, 12)
    def test_distinct_even(self, n):
        partition = distinct_even_random(n, rng=self.rng)
        self.assertGreaterEqual(partition.weight(), n)
        self.assertTrue(partition.is_even() and partition.is_distinct())

        partition = distinct_even_random_exactly(n, rng=self.rng)
        self.assertEqual(n, partition.weight())
        self.assertTrue(partition.is_even() and partition.is_distinct())

    @ddt.data(1, 8, 15)
    def test_distinct_odd(self, n):
        partition = distinct_odd_random(n, rng=self.rng)
        self.assertGreaterEqual(partition.weight(), n)
        self.assertTrue(partition.is_odd() and partition.is_distinct())

        partition = distinct_odd_random_exactly(n, rng=self.rng)
        self.assertEqual(n, partition.weight())
        self.assertTrue(partition.is_odd() and partition.is_distinct())

    @ddt.data(random_partition, random_partition_exactly, even_random,
              even_random_exactly, odd_random, odd_random_exactly,
              distinct_even_random, distinct_even_random_exactly,
              distinct_odd_random, distinct_odd_random_exactly)
    def test_nonpositive_weight(self, sampler):
        for n in [0, -3]:
            with self.assertRaises(InvalidWeight):
                sampler(n, rng=self.rng)

    @ddt.data(even_random_exactly, distinct_even_random_exactly)
    def test_odd_weight_for_even_exactly(self, sampler):
        with self.assertRaises(InvalidWeight):
            sampler(7, rng=self.rng)

    def test_impossible_distinct_odd_weight(self):
        with self.assertRaises(InvalidWeight):
            distinct_odd_random_exactly(2, rng=self.rng)

    def test_invalid_weight_consumes_no_randomness(self):
        state = self.rng.bit_generator.state
        with self.assertRaises(InvalidWeight):
            even_random_exactly(9, rng=self.rng)
        with self.assertRaises(InvalidWeight):
            random_partition(0, rng=self.rng)
        self.assertEqual(state, self.rng.bit_generator.state)

    def test_seeded_samplers_are_reproducible(self):
        self.assertEqual(random_partition_exactly(20, rng=99),
                         random_partition_exactly(20, rng=99))

    def test_max_attempts(self):
        """Check that a capped rejection loop gives up."""
        with self.assertRaises(SamplingTimeout) as context:
            rejection_sample(lambda: Partition(1), lambda p: False,
                             max_attempts=3)
        self.assertEqual(3, context.exception.attempts)

    def test_default_max_attempts(self):
        """Check that the package-wide cap is honored."""
        saved = ferrers.defaults.max_sampling_attempts
        ferrers.defaults.max_sampling_attempts = 5
        try:
            with self.assertRaises(SamplingTimeout) as context:
                rejection_sample(lambda: Partition(1), lambda p: False)
            self.assertEqual(5, context.exception.attempts)
        finally:
            ferrers.defaults.max_sampling_attempts = saved

    def test_explicit_unbounded_attempts(self):
        """Check that `None` lifts the package-wide cap for one call."""
        draws = iter([Partition(1), Partition(1), Partition(2)])
        saved = ferrers.defaults.max_sampling_attempts
        ferrers.defaults.max_sampling_attempts = 2
        try:
            self.assertEqual(
                Partition(2),
                rejection_sample(lambda: next(draws),
                                 lambda p: p.weight() == 2,
                                 max_attempts=None)
            )
        finally:
            ferrers.defaults.max_sampling_attempts = saved

    def test_chatty(self):
        buffer = io.StringIO()
        with contextlib.redirect_stdout(buffer):
            rejection_sample(lambda: Partition(2, 1), lambda p: True,
                             chatty=True)
        self.assertIn("after 1 attempt", buffer.getvalue())

    @ddt.data(((7, 3, 1), (4, 3, 3, 1)),
              ((5, 3, 1), (3, 3, 3)),
              ((9,), (5, 1, 1, 1, 1)),
              ((9, 5, 1), (5, 4, 3, 2, 1)),
              ((7, 5), (4, 4, 2, 2)),
              ((1,), (1,)))
    @ddt.unpack
    def test_self_conjugate_construction(self, distinct_odd, expected):
        self.assertEqual(
            Partition(*expected),
            self_conjugate_from_distinct_odd(Partition(*distinct_odd))
        )

    def test_self_conjugate_construction_exhaustively(self):
        """
        Check that every partition into distinct odd parts folds into a
        self-conjugate partition of the same weight, and that no two fold into
        the same one.
        """
        for n in range(1, 31):
            images = set()
            for parts in distinct_odd_partitions(n):
                image = self_conjugate_from_distinct_odd(Partition(*parts))
                self.assertEqual(n, image.weight())
                self.assertEqual(image, conjugate(image))
                self.assertNotIn(image, images)
                images.add(image)

    @ddt.data((11, True), (11, False), (4, True), (20, False))
    @ddt.unpack
    def test_random_self_conjugate(self, n, exact):
        partition = random_self_conjugate(n, exact=exact, rng=self.rng)
        self.assertEqual(partition, conjugate(partition))
        if exact:
            self.assertEqual(n, partition.weight())
        else:
            self.assertGreaterEqual(partition.weight(), n)
