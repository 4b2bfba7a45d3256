import diffinterp.utils.num_utils as num_utils
import diffinterp.utils.exceptions as exceptions
import numpy as np
import unittest


class TestNumUtils(unittest.TestCase):
    """
    Tests the numerical utilities module
    """

    def test_horner(self):
        coeff = [2., -1., 0.5, 3.]
        for x in [-2.5, -1, 0, 0.3, 4]:
            self.assertAlmostEqual(num_utils.horner(x, coeff), np.polyval(coeff[::-1], x), 12)

        self.assertEqual(num_utils.horner(10, [7]), 7)
        self.assertEqual(num_utils.horner(2, [1, 0, 1]), 5)

        with self.assertRaises(exceptions.InvalidArgument):
            num_utils.horner(1., [])

    def test_is_numeric(self):
        for value in [1, -2.5, np.float64(3.), np.int32(4), '1.5', ' -2e3', '7']:
            self.assertTrue(num_utils.is_numeric(value), 'is_numeric(%s) is not True' % repr(value))
        for value in [None, 'a', '', 'nan', 'inf', True, np.bool_(False), [1.], {}]:
            self.assertFalse(num_utils.is_numeric(value), 'is_numeric(%s) is not False' % repr(value))
