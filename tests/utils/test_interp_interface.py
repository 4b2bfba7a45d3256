import diffinterp.interp
import diffinterp.utils.interp_interface as interp_interface
import diffinterp.utils.exceptions as exceptions
import diffinterp.utils.cout_utils as cout
from diffinterp.interp.interp3 import Interp3
from diffinterp.interp.interp5 import Interp5
from diffinterp.interp.lagrange import Lagrange
import unittest


class TestInterpInterface(unittest.TestCase):
    """
    Tests the registry of interpolators
    """

    def setUp(self):
        cout.cout_quiet()

    def test_registered_interpolators(self):
        self.assertIs(interp_interface.interpolator_from_string('Interp3'), Interp3)
        self.assertIs(interp_interface.interpolator_from_string('Interp5'), Interp5)
        self.assertIs(interp_interface.interpolator_from_string('Lagrange'), Lagrange)

        with self.assertRaises(exceptions.InterpolatorNotFound):
            interp_interface.interpolator_from_string('Interp4')

    def test_initialise_interpolator(self):
        interp = interp_interface.initialise_interpolator('Interp3', 1, 3, [1, 2, 3],
                                                          custom_settings={'strict': True})
        self.assertIsInstance(interp, Interp3)
        self.assertTrue(interp.strict)

        interp = interp_interface.initialise_interpolator('Lagrange', [[0, 0], [1, 1]], print_info=False)
        self.assertAlmostEqual(interp.x(0.5), 0.5, 14)

    def test_dictionary_of_interpolators(self):
        dictionary = interp_interface.dictionary_of_interpolators()
        self.assertEqual(dictionary['Interp5']['max_iterations'], 512)
        self.assertFalse(dictionary['Interp3']['strict'])
        self.assertTrue(dictionary['Lagrange']['extrapolate'])

    def test_interpolator_decorator(self):
        class NoId(object):
            pass

        with self.assertRaises(AttributeError):
            interp_interface.interpolator(NoId)

    def test_settings_documentation(self):
        self.assertIn('``max_iterations``', Interp5.__doc__)
        self.assertIn('``extrapolate``', Lagrange.__doc__)
