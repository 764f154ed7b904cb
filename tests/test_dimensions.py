import unittest
import sys
import os

import numpy as np

# Add root to sys.path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from resizer.dimensions import MAX_DIMENSION, validate
from resizer.results import ErrorKind


class TestDimensionValidator(unittest.TestCase):

    def assertInvalid(self, width, height):
        error = validate(width, height)
        self.assertIsNotNone(error, f"{width}x{height} should be rejected")
        self.assertEqual(error.kind, ErrorKind.INVALID_DIMENSION)
        return error

    def test_accepts_ordinary_sizes(self):
        self.assertIsNone(validate(1, 1))
        self.assertIsNone(validate(300, 300))
        self.assertIsNone(validate(1920, 1080))

    def test_upper_bound_is_inclusive(self):
        self.assertEqual(MAX_DIMENSION, 65500)
        self.assertIsNone(validate(65500, 65500))

    def test_zero_and_negative_rejected(self):
        for width, height in [(0, 100), (100, 0), (0, 0), (-1, 100), (100, -5)]:
            error = self.assertInvalid(width, height)
            self.assertEqual(error.message, "Target dimensions must be positive integers")

    def test_above_bound_rejected(self):
        for width, height in [(65501, 100), (100, 65501), (100000, 100000)]:
            error = self.assertInvalid(width, height)
            self.assertEqual(error.message, "Target dimensions exceed maximum JPEG size")

    def test_non_integers_rejected(self):
        self.assertInvalid(10.5, 10)
        self.assertInvalid("10", 10)
        self.assertInvalid(True, 10)

    def test_numpy_integers_accepted(self):
        self.assertIsNone(validate(np.int64(64), np.int32(48)))

    def test_custom_bound(self):
        self.assertIsNone(validate(100, 100, max_dimension=100))
        self.assertIsNotNone(validate(101, 100, max_dimension=100))


if __name__ == '__main__':
    unittest.main()
