"""
Logging configuration

The modules of diffinterp log through ``logging.getLogger(__name__)``. Nothing is shown unless the root logger is
given handlers, which is done here from the ``[Logging]`` section of a table file::

    [Logging]
    log_name = ./search.log
    file_level = debug
    console_level = warning

"""
import logging

import diffinterp.utils.settings as settings_utils

settings_types = dict()
settings_default = dict()
settings_options = dict()

settings_types['log_name'] = 'str'
settings_default['log_name'] = './diffinterp.log'

settings_types['file_level'] = 'str'
settings_default['file_level'] = 'debug'
settings_options['file_level'] = ['debug', 'info', 'warning', 'error']

settings_types['console_level'] = 'str'
settings_default['console_level'] = 'info'
settings_options['console_level'] = ['debug', 'info', 'warning', 'error']

logger_levels = {'debug': logging.DEBUG,
                 'info': logging.INFO,
                 'warning': logging.WARNING,
                 'error': logging.ERROR}


def configure_logging(custom_settings):
    """
    Casts the logging settings and attaches the handlers to the root logger.

    Args:
        custom_settings (dict): ``log_name``, ``file_level`` and ``console_level``, possibly as strings

    Returns:
        tuple: file and console handlers
    """
    log_settings = dict(custom_settings)
    settings_utils.to_custom_types(log_settings, settings_types, settings_default, options=settings_options)
    return load_logger_settings(**log_settings)


def load_logger_settings(log_name=settings_default['log_name'],
                         file_level=settings_default['file_level'],
                         console_level=settings_default['console_level']):
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    fh = logging.FileHandler(log_name, 'w+')
    fh.setLevel(get_logger_level(file_level))
    ch = logging.StreamHandler()
    ch.setLevel(get_logger_level(console_level))

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
    for handler in (fh, ch):
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    return fh, ch


def remove_handlers(*handlers):
    root_logger = logging.getLogger()
    for handler in handlers:
        root_logger.removeHandler(handler)
        handler.close()


def get_logger_level(level):
    try:
        return logger_levels[level]
    except KeyError:
        raise NameError('Unknown mode for logging module: %s' % str(level))
