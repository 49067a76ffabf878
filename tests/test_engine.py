#!/usr/bin/env python3
"""
Unit tests for batch identification
"""

import unittest

from hashcrawler.core.identifier import identify_hash, identify_hashes

from conftest import BCRYPT_HASH, MD5_HASH, MYSQL41_HASH


class Unprintable:
    """Input whose string conversion fails"""

    def __str__(self):
        raise ValueError("cannot render")


class TestBatchIdentification(unittest.TestCase):

    def setUp(self):
        self.inputs = [MD5_HASH, "", "not-a-hash!!", BCRYPT_HASH, MYSQL41_HASH]

    def test_preserves_input_order(self):
        results = identify_hashes(self.inputs)
        self.assertEqual([r.hash for r in results], self.inputs)
        self.assertEqual([r.best.name for r in results],
                         ["MD5", "Unknown", "Unknown", "BCrypt", "MySQL4.1+"])

    def test_parallel_matches_sequential(self):
        batch = self.inputs * 20
        self.assertEqual(identify_hashes(batch, workers=8), identify_hashes(batch))

    def test_matches_single_identification(self):
        for value, result in zip(self.inputs, identify_hashes(self.inputs)):
            self.assertEqual(result, identify_hash(value))

    def test_empty_batch(self):
        self.assertEqual(identify_hashes([]), [])

    def test_generator_input(self):
        results = identify_hashes(h for h in [BCRYPT_HASH, MD5_HASH])
        self.assertEqual(len(results), 2)

    def test_bad_input_does_not_abort_batch(self):
        for workers in (1, 4):
            results = identify_hashes([BCRYPT_HASH, Unprintable(), MYSQL41_HASH], workers=workers)
            self.assertEqual([r.best.name for r in results], ["BCrypt", "Unknown", "MySQL4.1+"])
            self.assertEqual(results[1].hash, "")

    def test_every_result_non_empty(self):
        for result in identify_hashes(["", " ", "???", "0" * 1000, MD5_HASH]):
            self.assertGreater(len(result.matches), 0)


if __name__ == '__main__':
    unittest.main(verbosity=2)
