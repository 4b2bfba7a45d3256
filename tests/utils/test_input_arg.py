import os
import shutil
import tempfile
import unittest

import numpy as np

import diffinterp.utils.input_arg as input_arg
import diffinterp.utils.exceptions as exceptions
import diffinterp.utils.cout_utils as cout
from diffinterp.interp.interp3 import Interp3
from diffinterp.interp.interp5 import Interp5
from diffinterp.interp.lagrange import Lagrange


class TestInputArg(unittest.TestCase):
    """
    Tests the reading of table files
    """

    def setUp(self):
        cout.cout_quiet()
        self.route_test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.route_test_dir)

    def write_table(self, lines, file_name='table.txt'):
        file_name = os.path.join(self.route_test_dir, file_name)
        with open(file_name, 'w') as f:
            f.write('\n'.join(lines) + '\n')
        return file_name

    def test_read_interp5(self):
        file_name = self.write_table(['[Table]',
                                      'interpolator = Interp5',
                                      'x1 = 1',
                                      'xN = 5',
                                      'y = 1, 4, 9, 16, 25',
                                      '',
                                      '[Interp5]',
                                      'strict = on',
                                      'max_iterations = 64'])
        interp = input_arg.read_table(file_name)
        self.assertIsInstance(interp, Interp5)
        self.assertTrue(interp.strict)
        self.assertEqual(interp.settings['max_iterations'], 64)
        self.assertEqual(interp.x1, 1)
        self.assertEqual(interp.xN, 5)
        self.assertAlmostEqual(interp.x(3.5).y, 12.25, 12)

    def test_read_default_interpolator(self):
        file_name = self.write_table(['[Table]',
                                      'x1 = 7',
                                      'xN = 9',
                                      'y = 0.884226 0.877366 0.870531'])
        interp = input_arg.read_table(file_name)
        self.assertIsInstance(interp, Interp3)
        self.assertFalse(interp.strict)
        np.testing.assert_array_equal(interp.y, [0.884226, 0.877366, 0.870531])

    def test_read_lagrange(self):
        file_name = self.write_table(['[Table]',
                                      'interpolator = Lagrange',
                                      'x = 0, 1, 2',
                                      'y = 1, 3, 7',
                                      '',
                                      '[Lagrange]',
                                      'extrapolate = off'])
        interp = input_arg.read_table(file_name)
        self.assertIsInstance(interp, Lagrange)
        self.assertAlmostEqual(interp.x(1.5), 4.75, 12)
        with self.assertRaises(exceptions.OutOfRange):
            interp.x(3)

    def test_parse_table(self):
        file_name = self.write_table(['[Table]',
                                      'interpolator = Interp3',
                                      'x1 = 1',
                                      'xN = 3',
                                      'y = 1, 2, 3'])
        table, custom_settings, log_settings = input_arg.parse_table(file_name)
        self.assertEqual(table['x1'], 1.)
        self.assertEqual(table['xN'], 3.)
        np.testing.assert_array_equal(table['y'], [1., 2., 3.])
        self.assertEqual(custom_settings, dict())
        self.assertIsNone(log_settings)

    def test_invalid_files(self):
        with self.assertRaises(exceptions.NotValidInputFile):
            input_arg.read_table(os.path.join(self.route_test_dir, 'missing.txt'))

        file_name = self.write_table(['[Data]', 'x1 = 1'], 'no_header.txt')
        with self.assertRaises(exceptions.NotValidInputFile):
            input_arg.read_table(file_name)

        file_name = self.write_table(['[Table]',
                                      'interpolator = Lagrange',
                                      'x = 0, 1, 2',
                                      'y = 1, 3'], 'lengths.txt')
        with self.assertRaises(exceptions.NotValidInputFile):
            input_arg.read_table(file_name)

        file_name = self.write_table(['[Table]',
                                      'interpolator = Interp4',
                                      'x1 = 1',
                                      'xN = 3',
                                      'y = 1, 2, 3'], 'unknown.txt')
        with self.assertRaises(exceptions.InterpolatorNotFound):
            input_arg.read_table(file_name)

        file_name = self.write_table(['[Table]',
                                      'x1 = 1',
                                      'y = 1, 2, 3'], 'no_xN.txt')
        with self.assertRaises(exceptions.NoDefaultValueException):
            input_arg.read_table(file_name)

        file_name = self.write_table(['[Table]',
                                      'x1 = 1',
                                      'xN = 3',
                                      'y = 1, 2, 3',
                                      '',
                                      '[Interp3]',
                                      'tolerance = 1e-6'], 'setting.txt')
        with self.assertRaises(exceptions.NotRecognisedSetting):
            input_arg.read_table(file_name)
