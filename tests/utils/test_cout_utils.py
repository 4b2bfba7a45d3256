import os
import shutil
import tempfile
import unittest

import diffinterp.utils.cout_utils as cout
from diffinterp.interp.interp3 import Interp3


class TestCoutUtils(unittest.TestCase):
    """
    Tests the screen, file and logging output
    """

    def setUp(self):
        self.route_test_dir = tempfile.mkdtemp()

    def tearDown(self):
        cout.finish_writer()
        cout.start_writer()
        shutil.rmtree(self.route_test_dir)

    def read_output(self, file_name):
        cout.finish_writer()
        with open(os.path.join(self.route_test_dir, file_name), 'r') as f:
            return f.read()

    def test_writer_file(self):
        cout.start_writer()
        cout.cout_wrap.initialise(False, True, self.route_test_dir, 'output.txt')
        cout.cout_wrap('First line')
        cout.cout_wrap.print_separator()

        with self.assertRaises(AttributeError):
            cout.cout_wrap('Wrong level', 5)

        output = self.read_output('output.txt')
        self.assertIn('diffinterp', output)
        self.assertIn('First line\n', output)
        self.assertIn('-' * 80 + '\n', output)

    def test_table_printer_line(self):
        table = cout.TablePrinter(3, 10, ['g', 'g', 's'])
        line = table.line_string([1, 2.5, 'best'])
        fields = line.split('|')[1:-1]
        self.assertEqual([field.strip() for field in fields], ['1', '2.5', 'best'])
        for field in fields:
            self.assertEqual(len(field), 12)

        with self.assertRaises(Exception):
            cout.TablePrinter(3, [10, 10])

    def test_search_table(self):
        cout.start_writer()
        cout.cout_wrap.initialise(False, True, self.route_test_dir, 'search.txt')
        interp = Interp3(1, 6, [-2, -1, 0, 1, 2, 3], custom_settings={'print_info': True})
        self.assertTrue(interp.zero().found)

        output = self.read_output('search.txt')
        self.assertIn('Interp3: Zero search over 4 windows', output)
        self.assertIn('best', output)
        self.assertIn('skip', output)

