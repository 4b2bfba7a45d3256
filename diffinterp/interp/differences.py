"""
Tables of differences

Successive differences of three or five tabulated values, the basis of Newton's central-difference interpolation
formula. Tables are recomputed from the window on every call.

Three tabular values::

    y0
        a
    y1      c
        b
    y2

Five tabular values::

    y0
        A
    y1      E
        B       H
    y2      F       K
        C       J
    y3      G
        D
    y4

"""
from collections import namedtuple

import diffinterp.utils.exceptions as exceptions

ThreeDifferences = namedtuple('ThreeDifferences', ['a', 'b', 'c'])
FiveDifferences = namedtuple('FiveDifferences', ['A', 'B', 'C', 'D', 'E', 'F', 'G', 'H', 'J', 'K'])


def differences3(y):
    """
    Table of differences of three tabular values

    Args:
        y: Three tabular values

    Returns:
        ThreeDifferences: first differences ``a``, ``b`` and second difference ``c``
    """
    if len(y) != 3:
        raise exceptions.IncorrectCount('A table of differences of order 3 requires exactly three y values')

    a = y[1] - y[0]
    b = y[2] - y[1]
    c = b - a
    return ThreeDifferences(a, b, c)


def differences5(y):
    """
    Table of differences of five tabular values

    Args:
        y: Five tabular values

    Returns:
        FiveDifferences: first (``A``-``D``), second (``E``-``G``), third (``H``, ``J``) and fourth (``K``) differences
    """
    if len(y) != 5:
        raise exceptions.IncorrectCount('A table of differences of order 5 requires exactly five y values')

    A = y[1] - y[0]
    B = y[2] - y[1]
    C = y[3] - y[2]
    D = y[4] - y[3]
    E = B - A
    F = C - B
    G = D - C
    H = F - E
    J = G - F
    K = J - H
    return FiveDifferences(A, B, C, D, E, F, G, H, J, K)


def difference_table(y, order):
    if order == 3:
        return differences3(y)
    elif order == 5:
        return differences5(y)
    else:
        raise exceptions.InvalidArgument('No table of differences for order %s' % str(order))
