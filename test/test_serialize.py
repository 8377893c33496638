"""
test/test_serialize.py

Tests for ferrers/serialize.py .
"""

import json
import unittest

import ddt

from ferrers.bijections import Bijection, run_bijection
from ferrers.grid import Region
from ferrers.partition import Partition
from ferrers.serialize import *
from ferrers.steps import append, cut


@ddt.ddt
class TestFerrersSerialize(unittest.TestCase):
    """Check that step sequences and results survive a trip through JSON."""

    def test_step_to_data(self):
        self.assertEqual(
            {"operation": "cut", "region": None,
             "parameters": [-1, 2, 0, "UPPER", "LOWER"]},
            step_to_data(cut(-1, 2, 0, Region.UPPER, Region.LOWER))
        )
        self.assertEqual(
            {"operation": "append", "region": "UPPER",
             "parameters": ["LOWER", 3]},
            step_to_data(append(Region.UPPER, Region.LOWER, 3))
        )

    @ddt.data((Bijection.STRIKE_SLIP, (4, 1)),
              (Bijection.SHRED_STRETCH, (4, 2, 2)),
              (Bijection.CUT_STRETCH, (3, 2, 1)),
              (Bijection.GLAISHER, (5, 3, 3, 1)))
    @ddt.unpack
    def test_result_through_json(self, bijection, parts):
        source = Partition(*parts)
        result = run_bijection(bijection, source)
        text = json.dumps(result_to_data(bijection, source, result))

        inflated_bijection, inflated_source, inflated_result = \
            inflate_result(json.loads(text))
        self.assertIs(bijection, inflated_bijection)
        self.assertEqual(source, inflated_source)
        self.assertEqual(result.partition, inflated_result.partition)
        self.assertEqual(result.steps, inflated_result.steps)
