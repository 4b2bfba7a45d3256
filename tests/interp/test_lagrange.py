import unittest

import numpy as np
from scipy.interpolate import lagrange

import diffinterp.utils.exceptions as exceptions
from diffinterp.interp.lagrange import Lagrange


class TestLagrange(unittest.TestCase):
    """
    Tests the Lagrange interpolation
    """

    # sine of angles in degrees, Meeus Astronomical Algorithms example 3.g
    data = [[29.43, .4913598528],
            [30.97, .5145891926],
            [27.69, .4646875083],
            [28.11, .4711658342],
            [31.58, .5236885653],
            [33.05, .5453707057]]

    def test_sine(self):
        interp = Lagrange(self.data)
        self.assertAlmostEqual(interp.x(30), 0.5, 7)
        self.assertAlmostEqual(interp.x(0), np.sin(0), 2)

    def test_against_scipy(self):
        data = np.array(self.data)
        reference = lagrange(data[:, 0], data[:, 1])
        interp = Lagrange(self.data)
        for x in np.linspace(27.69, 33.05, 11):
            self.assertAlmostEqual(interp.x(x), reference(x), 7)

    def test_nodes(self):
        interp = Lagrange(self.data)
        for x_i, y_i in self.data:
            self.assertAlmostEqual(interp.x(x_i), y_i, 14)

    def test_range(self):
        interp = Lagrange(self.data, custom_settings={'extrapolate': 'off'})
        self.assertAlmostEqual(interp.x(27.69), .4646875083, 14)
        with self.assertRaises(exceptions.OutOfRange):
            interp.x(27.6)
        with self.assertRaises(exceptions.OutOfRange):
            interp.x(33.1)

        with self.assertRaises(exceptions.OutOfRange):
            Lagrange(self.data).check_range(40)

    def test_construction_errors(self):
        with self.assertRaises(exceptions.IncorrectCount):
            Lagrange([[1, 2]])
        with self.assertRaises(exceptions.InvalidArgument):
            Lagrange([[1, 2], [2]])
        with self.assertRaises(exceptions.InvalidArgument):
            Lagrange([[1, 2], ['b', 3]])
        with self.assertRaises(exceptions.NoRange):
            Lagrange([[1, 2], [3, 4], [1, 5]])
        with self.assertRaises(exceptions.NotRecognisedSetting):
            Lagrange(self.data, custom_settings={'strict': True})
