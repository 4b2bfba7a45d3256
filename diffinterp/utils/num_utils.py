import numbers

import numpy as np

import diffinterp.utils.exceptions as exceptions


def horner(x, coeff):
    """
    Evaluates a polynomial by means of Horner's method.

    Args:
        x (float): Value at which the polynomial is evaluated.
        coeff (list): Coefficients of the polynomial, ordered from the constant term to the highest degree.

    Returns:
        float: value of the polynomial at ``x``

    Raises:
        exceptions.InvalidArgument: if no coefficients are provided.
    """
    if len(coeff) == 0:
        raise exceptions.InvalidArgument('No coefficients were provided')

    i = len(coeff) - 1
    y = coeff[i]
    while i > 0:
        i -= 1
        y = y * x + coeff[i]

    return y


def is_numeric(value):
    """
    Checks whether ``value`` can be used as a real number.

    Numbers (excluding booleans) are accepted, as are strings holding a finite number, such as those read
    from a settings file.
    """
    if isinstance(value, (bool, np.bool_)):
        return False
    if isinstance(value, numbers.Real):
        return True
    if isinstance(value, str):
        try:
            return bool(np.isfinite(float(value)))
        except ValueError:
            return False
    return False
