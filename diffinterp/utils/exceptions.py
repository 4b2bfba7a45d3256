"""diffinterp Exception Classes
"""
import diffinterp.utils.cout_utils as cout


class DefaultValueBaseException(Exception):
    def __init__(self, variable, value, message=''):
        super().__init__(message)

    def output_message(self, message, color_id=3):
        if cout.cout_wrap is None:
            print(message)
        else:
            cout.cout_wrap.print_separator(3)
            cout.cout_wrap(message, color_id)
            cout.cout_wrap.print_separator(3)


class NoDefaultValueException(DefaultValueBaseException):
    def __init__(self, variable, value=None, message=''):
        message = 'The variable ' + variable + ' has no default value, please indicate one'
        super().__init__(variable, value, message=message)
        self.output_message(message)


class NotValidInputFile(Exception):
    def __init__(self, message):
        super().__init__(message)


class InterpolationError(Exception):
    """
    Base class of the errors raised by the interpolators.

    The message is echoed through ``cout_wrap`` when the writer is active.
    """
    color_id = 3

    def __init__(self, message=''):
        super().__init__(message)
        if cout.cout_wrap is not None and message:
            cout.cout_wrap(message, self.color_id)


class InvalidArgument(InterpolationError, ValueError):
    """
    Raised when an argument is not numeric or a coefficient list is malformed
    """
    pass


class IncorrectCount(InterpolationError, ValueError):
    """
    Raised when the number of tabulated values does not suit the interpolation order
    """
    pass


class NoRange(InterpolationError, ValueError):
    """
    Raised when there is no range between the tabulated x values
    """
    pass


class OutOfRange(InterpolationError, ValueError):
    """
    Raised when an x value or an interpolation factor lies outside its admissible domain
    """
    pass


class NoConvergence(InterpolationError):
    """
    To be raised when the iterative search for an interpolation factor does not settle within the
    maximum number of iterations.
    """
    color_id = 4

    def __init__(self, method_name, n_iter=None, message=''):
        if not message:
            message = 'The %s iteration did not converge in %s iterations.' % (method_name, str(n_iter))
        super().__init__(message)
        self.n_iter = n_iter


class NotValidSetting(DefaultValueBaseException):
    """
    Raised when a user gives a setting an invalid value
    """

    def __init__(self, setting, variable, options, value=None, message=''):
        message = 'The setting %s with entry %s is not one of the valid options: %s' % (setting, variable, options)
        super().__init__(variable, value, message=message)
        self.output_message(message, color_id=4)


class NotValidSettingType(DefaultValueBaseException):
    """
    Raised when a user gives a setting with an invalid type
    """

    def __init__(self, setting, variable, data_types, value=None, message=''):
        message = 'The setting %s with entry %s is not one of the valid types: %s' % (setting, variable, data_types)
        super().__init__(variable, value, message=message)
        self.output_message(message, color_id=4)


class InterpolatorNotFound(Exception):
    def __init__(self, interpolator_name):
        message = 'The interpolator %s cannot be found in the list of interpolators. Ensure you have spelt the ' \
                  'interpolator name correctly.' % interpolator_name
        super().__init__(message)


class NotRecognisedSetting(DefaultValueBaseException):
    """
    Raised when a setting is not recognised
    """
    def __init__(self, setting, value=None, message=''):
        message = 'Unrecognised setting {:s}. Please check input file and/or documentation'.format(setting)
        super().__init__(variable=None, value=None, message=message)
        self.output_message(message, color_id=4)
