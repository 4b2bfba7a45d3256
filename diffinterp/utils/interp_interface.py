"""Interpolator Interface
"""
from abc import ABCMeta, abstractmethod
import os

import diffinterp.utils.cout_utils as cout
import diffinterp.utils.exceptions as exceptions

dict_of_interpolators = {}
interpolators = {}  # for internal working


# decorator
def interpolator(arg):
    global dict_of_interpolators
    try:
        arg.interpolator_id
    except AttributeError:
        raise AttributeError('Class defined as interpolator has no interpolator_id attribute')
    dict_of_interpolators[arg.interpolator_id] = arg
    return arg


def print_available_interpolators():
    cout.cout_wrap('The available interpolators on this session are:', 2)
    for name, i_interpolator in dict_of_interpolators.items():
        cout.cout_wrap('%s ' % i_interpolator.interpolator_id, 2)


class BaseInterpolator(metaclass=ABCMeta):

    settings_types = dict()
    settings_description = dict()
    settings_default = dict()

    # Interpolator id for populating dict_of_interpolators
    @property
    def interpolator_id(self):
        raise NotImplementedError

    # Interpolates the table at the abscissa x
    @abstractmethod
    def x(self, x):
        pass


def interpolator_from_string(string):
    try:
        cls_type = dict_of_interpolators[string]
    except KeyError:
        raise exceptions.InterpolatorNotFound(string)
    return cls_type


def interpolator_list_from_path(cwd):
    onlyfiles = [f for f in os.listdir(cwd) if os.path.isfile(os.path.join(cwd, f))]

    for i_file in range(len(onlyfiles)):
        if onlyfiles[i_file].split('.')[-1] == 'py':  # support autosaved files in the folder
            if onlyfiles[i_file] == "__init__.py":
                onlyfiles[i_file] = ""
                continue
            onlyfiles[i_file] = onlyfiles[i_file].replace('.py', '')
        else:
            onlyfiles[i_file] = ""

    files = [file for file in onlyfiles if not file == ""]
    return files


def initialise_interpolator(interpolator_name, *args, print_info=True, **kwargs):
    """
    Generates an instance of a registered interpolator.

    Args:
        interpolator_name (str): ``interpolator_id`` of the class, e.g. ``Interp5``
        *args: Table data passed to the constructor
        print_info (bool): Write the name of the interpolator being generated
        **kwargs: Keyword arguments passed to the constructor, e.g. ``custom_settings``

    Returns:
        The interpolator instance
    """
    if print_info:
        cout.cout_wrap('Generating an instance of %s' % interpolator_name, 2)
    cls_type = interpolator_from_string(interpolator_name)
    return cls_type(*args, **kwargs)


def dictionary_of_interpolators():
    import diffinterp.interp
    dictionary = dict()
    for name, cls_type in dict_of_interpolators.items():
        dictionary[name] = cls_type.settings_default

    return dictionary
