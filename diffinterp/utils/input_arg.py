"""
Table input files

A table file is read by ``configobj`` and looks like::

    [Table]
    interpolator = Interp5
    x1 = 1
    xN = 7
    y = 1.2, 1.4, 1.9, 2.3, 2.2, 1.8, 1.1

    [Interp5]
    strict = on

    [Logging]
    console_level = warning

For the ``Lagrange`` interpolator the ``[Table]`` section holds ``x`` and ``y`` lists of the same length instead
of ``x1``, ``xN`` and ``y``. The section named after the interpolator is optional, and so is the ``Logging``
section, which sets up the log handlers (see :mod:`diffinterp.utils.logger_utils`).
"""
import os

import diffinterp.utils.cout_utils as cout
import diffinterp.utils.exceptions as exceptions
import diffinterp.utils.interp_interface as interp_interface
import diffinterp.utils.logger_utils as logger_utils
import diffinterp.utils.settings as settings_utils

table_types = dict()
table_default = dict()
table_options = dict()

table_types['interpolator'] = 'str'
table_default['interpolator'] = 'Interp3'
table_options['interpolator'] = ['Interp3', 'Interp5', 'Lagrange']

table_types['x1'] = 'float'
table_default['x1'] = None

table_types['xN'] = 'float'
table_default['xN'] = None

table_types['x'] = 'list(float)'
table_default['x'] = None

table_types['y'] = 'list(float)'
table_default['y'] = None


def read_table(file_name):
    """
    Reads a table file and generates the interpolator it describes.

    Args:
        file_name (str): Path to the table file

    Returns:
        The interpolator instance, with the settings given in the file
    """
    cout.cout_wrap('Reading the table file: %s' % file_name)
    table, custom_settings, log_settings = parse_table(file_name)
    if log_settings is not None:
        logger_utils.configure_logging(log_settings)

    interpolator_name = table['interpolator']

    if interpolator_name == 'Lagrange':
        if len(table['x']) != len(table['y']):
            raise exceptions.NotValidInputFile('The x and y lists of the table have different lengths.')
        args = (list(zip(table['x'], table['y'])), )
    else:
        args = (table['x1'], table['xN'], table['y'])

    return interp_interface.initialise_interpolator(interpolator_name,
                                                    *args,
                                                    custom_settings=custom_settings)


def parse_table(file_name):
    if not os.path.isfile(file_name):
        raise exceptions.NotValidInputFile('The table file %s does not exist.' % file_name)

    config = settings_utils.load_config_file(os.path.realpath(file_name))
    try:
        table = dict(config['Table'])
    except KeyError:
        raise exceptions.NotValidInputFile('The table file does not contain a Table header.')

    # registers the interpolators
    import diffinterp.interp
    interp_interface.interpolator_from_string(table.get('interpolator', table_default['interpolator']))

    if table.get('interpolator', table_default['interpolator']) == 'Lagrange':
        keys = ['interpolator', 'x', 'y']
    else:
        keys = ['interpolator', 'x1', 'xN', 'y']
    types = {k: table_types[k] for k in keys}
    default = {k: table_default[k] for k in keys}
    settings_utils.to_custom_types(table, types, default, options=table_options)

    custom_settings = settings_utils.set_value_or_default(config, table['interpolator'], dict())
    log_settings = settings_utils.set_value_or_default(config, 'Logging', None)
    if log_settings is not None:
        log_settings = dict(log_settings)
    return table, dict(custom_settings), log_settings
