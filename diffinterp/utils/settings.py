"""
Settings Generator Utilities
"""
import numpy as np
import diffinterp.utils.exceptions as exceptions
import diffinterp.utils.cout_utils as cout


def cast(k, v, pytype, default):
    try:
        val = pytype(v)
    except TypeError:
        if v is None and default is None:
            raise exceptions.NoDefaultValueException(k)
        raise exceptions.NotValidSettingType(k, v, pytype.__name__)
    except ValueError:
        raise exceptions.NotValidSettingType(k, v, pytype.__name__)
    return val


def to_custom_types(dictionary, types, default, options=dict()):
    """
    Casts the entries of ``dictionary`` to the types given in ``types``, filling the missing ones with the values
    in ``default``.

    The dictionary is modified in place.

    Args:
        dictionary (dict): Settings as given by the user (values may be strings, as read from a file).
        types (dict): Type name of each setting (``int``, ``float``, ``str``, ``bool``, ``list(float)``).
        default (dict): Default value of each setting. ``None`` means the setting is compulsory.
        options (dict): Allowable values for some settings (optional).

    Raises:
        exceptions.NoDefaultValueException: if a compulsory setting is missing.
        exceptions.NotValidSettingType: if a value cannot be cast to its type.
        exceptions.NotValidSetting: if a value is not one of its options.
        exceptions.NotRecognisedSetting: if a key has no declared type.
    """
    unrecognised_settings = []
    for k in dictionary.keys():
        if k not in list(types.keys()):
            unrecognised_settings.append(exceptions.NotRecognisedSetting(k))

    if unrecognised_settings:
        raise unrecognised_settings[0]

    for k, v in types.items():
        dictionary[k] = get_custom_type(dictionary, v, k, default)

    check_settings_in_options(dictionary, types, options)


def get_default_value(default_value, k, v, py_type=None):
    if default_value is None:
        raise exceptions.NoDefaultValueException(k)
    if v in ['float', 'int', 'bool']:
        converted_value = cast(k, default_value, py_type, default_value)
    elif v == 'str':
        converted_value = cast(k, default_value, str, default_value)
    else:
        converted_value = default_value.copy()
    notify_default_value(k, converted_value)
    return converted_value


def get_custom_type(dictionary, v, k, default):
    if v == 'int':
        try:
            dictionary[k] = cast(k, dictionary[k], int, default[k])
        except KeyError:
            dictionary[k] = get_default_value(default[k], k, v, py_type=int)

    elif v == 'float':
        try:
            dictionary[k] = cast(k, dictionary[k], float, default[k])
        except KeyError:
            dictionary[k] = get_default_value(default[k], k, v, py_type=float)

    elif v == 'str':
        try:
            dictionary[k] = cast(k, dictionary[k], str, default[k])
        except KeyError:
            dictionary[k] = get_default_value(default[k], k, v)

    elif v == 'bool':
        try:
            dictionary[k] = cast(k, dictionary[k], str2bool, default[k])
        except KeyError:
            dictionary[k] = get_default_value(default[k], k, v, py_type=str2bool)

    elif v == 'list(float)':
        try:
            dictionary[k]
        except KeyError:
            dictionary[k] = get_default_value(default[k], k, v)

        if isinstance(dictionary[k], np.ndarray):
            return dictionary[k].astype(float)
        if isinstance(dictionary[k], (list, tuple)):
            try:
                dictionary[k] = np.array([float(value) for value in dictionary[k]])
            except (TypeError, ValueError):
                raise exceptions.NotValidSettingType(k, dictionary[k], v)
            return dictionary[k]
        # single string, either comma or space separated
        try:
            if dictionary[k].find(',') < 0:
                values = dictionary[k].strip('[]').split()
            else:
                values = dictionary[k].strip('[]').split(',')
            dictionary[k] = np.array([float(value) for value in values if value.strip()])
        except (AttributeError, ValueError):
            raise exceptions.NotValidSettingType(k, dictionary[k], v)

    else:
        raise TypeError('Variable %s has an unknown type (%s) that cannot be casted' % (k, v))
    return dictionary[k]


def check_settings_in_options(settings, settings_types, settings_options):
    """
    Checks that settings given a type ``str`` or ``int`` and allowable options are indeed valid.

    Args:
        settings (dict): Dictionary of processed settings
        settings_types (dict): Dictionary of settings types
        settings_options (dict): Dictionary of options (may be empty)

    Raises:
        exception.NotValidSetting: if the setting is not allowed.
    """
    for k in settings_options:
        if settings_types[k] == 'int':
            value = settings[k]
            if value not in settings_options[k]:
                raise exceptions.NotValidSetting(k, value, settings_options[k])

        elif settings_types[k] == 'str':
            value = settings[k]
            if value not in settings_options[k] and value:
                # checks that the value is within the options and that it is not an empty string.
                raise exceptions.NotValidSetting(k, value, settings_options[k])

        else:
            pass  # no other checks implemented / required


def load_config_file(file_name: str) -> dict:
    """This function reads a table and settings input file.

    Args:
        file_name (str): contains the path and file name of the file to be read by the ``configobj``
            reader.

    Returns:
        config (dict): a ``ConfigObj`` object that behaves like a dictionary
    """
    import configobj
    dict_config = configobj.ConfigObj(file_name, file_error=True)
    return dict_config


def str2bool(string):
    false_list = ['false', 'off', '0', 'no']
    if isinstance(string, (bool, np.bool_)):
        return bool(string)

    if not string:
        return False
    elif str(string).lower() in false_list:
        return False
    else:
        return True


def notify_default_value(k, v):
    cout.cout_wrap('Variable ' + k + ' has no assigned value in the settings.')
    cout.cout_wrap('    will default to the value: ' + str(v), 1)


class SettingsTable:
    """
    Generates the documentation's setting table at runtime.

    Given that each interpolator accepts several settings, this class produces a table in reStructuredText format
    with the interpolator's settings and adds it to the class docstring.

    Examples:
        The end of the interpolator's class declaration should contain

        .. code-block:: python

            # Generate documentation table
            settings_table = settings.SettingsTable()
            __doc__ += settings_table.generate(settings_types, settings_default, settings_description)

        to generate the settings table.

    """
    def __init__(self):
        self.n_fields = 4
        self.n_settings = 0
        self.field_length = [0] * self.n_fields
        self.titles = ['Name', 'Type', 'Description', 'Default']

        self.settings_types = dict()
        self.settings_description = dict()
        self.settings_default = dict()

        self.line_format = ''

        self.table_string = ''

    def generate(self, settings_types, settings_default, settings_description, header_line=None):
        """
        Returns a rst-format table with the settings' names, types, description and default values

        Args:
            settings_types (dict): Setting types.
            settings_default (dict): Settings default value.
            settings_description (dict): Setting description.
            header_line (str): Header line description (optional)

        Returns:
            str: .rst formatted string with a table containing the settings' information.
        """
        self.settings_types = settings_types
        self.settings_default = settings_default
        self.n_settings = len(self.settings_types)

        if header_line is None:
            header_line = 'The settings that this interpolator accepts are given by a dictionary, ' \
                          'with the following key-value pairs:'
        else:
            assert type(header_line) == str, 'header_line not a string, verify order of arguments'

        self.settings_description = settings_description

        self.set_field_length()
        self.line_format = self.setting_line_format()

        table_string = '\n    ' + header_line + '\n'
        table_string += '\n    ' + self.print_divider_line()
        table_string += '    ' + self.print_header()
        table_string += '    ' + self.print_divider_line()
        for setting in self.settings_types:
            table_string += '    ' + self.print_setting(setting)
        table_string += '    ' + self.print_divider_line()

        self.table_string = table_string

        return table_string

    def set_field_length(self):

        field_lengths = [[] for i in range(self.n_fields)]
        for setting in self.settings_types:
            stype = str(self.settings_types.get(setting, ''))
            description = self.settings_description.get(setting, '')
            default = str(self.settings_default.get(setting, ''))

            field_lengths[0].append(len(setting) + 4)  # length of name
            field_lengths[1].append(len(stype) + 4)  # length of type + 4 for the rst ``X``
            field_lengths[2].append(len(description))  # length of description
            field_lengths[3].append(len(default) + 4)  # length of default + 4 for the rst ``X``

        for i_field in range(self.n_fields):
            field_lengths[i_field].append(len(self.titles[i_field]))
            self.field_length[i_field] = max(field_lengths[i_field]) + 2  # add the two spaces as column dividers

    def print_divider_line(self):
        divider = ''
        for i_field in range(self.n_fields):
            divider += '='*(self.field_length[i_field]-2) + '  '
        divider += '\n'
        return divider

    def print_setting(self, setting):
        type = '``' + str(self.settings_types.get(setting, '')) + '``'
        description = self.settings_description.get(setting, '')
        default = '``' + str(self.settings_default.get(setting, '')) + '``'
        line = self.line_format.format(['``' + str(setting) + '``', type, description, default]) + '\n'
        return line

    def print_header(self):
        header = self.line_format.format(self.titles) + '\n'
        return header

    def setting_line_format(self):
        string = ''
        for i_field in range(self.n_fields):
            string += '{0[' + str(i_field) + ']:<' + str(self.field_length[i_field]) + '}'
        return string


def set_value_or_default(dictionary, key, default_val):
    try:
        value = dictionary[key]
    except KeyError:
        value = default_val
    return value
