"""
Interpolation results

The interpolators return named tuples so that results can be unpacked positionally, ``x, y, k = interp.n(0.3)``,
or read by name, ``interp.n(0.3).y``.
"""
from collections import namedtuple


Window = namedtuple('Window', ['x_first', 'x_last', 'y'])
Window.__doc__ = """
Contiguous ``order``-length subset of a table.

Attributes:
    x_first (float): Abscissa of the first value in the window
    x_last (float): Abscissa of the last value in the window
    y (np.ndarray): Tabulated values in the window
"""

FactorResult = namedtuple('FactorResult', ['x', 'y', 'last_difference'])
FactorResult.__doc__ = """
Result of the interpolation at an interpolation factor ``n``.

Attributes:
    x (float): Abscissa corresponding to ``n``
    y (float): Interpolated value
    last_difference (float): Highest order difference of the window used (``c`` or ``K``)
"""

ValueResult = namedtuple('ValueResult', ['y', 'last_difference'])
ValueResult.__doc__ = """
Result of the interpolation at an abscissa.

Attributes:
    y (float): Interpolated value
    last_difference (float): Highest order difference of the window used (``c`` or ``K``)
"""


class SearchResult(namedtuple('SearchResult', ['found', 'x', 'y', 'last_difference'])):
    """
    Result of the extremum and zero searches.

    When nothing is found ``found`` is ``False`` and the remaining fields are ``None``.

    Attributes:
        found (bool): Whether an admissible solution exists in the table
        x (float): Abscissa of the solution
        y (float): Interpolated value at the solution
        last_difference (float): Highest order difference of the window holding the solution
    """
    __slots__ = ()

    @classmethod
    def not_found(cls):
        return cls(False, None, None, None)

    def __bool__(self):
        return bool(self.found)
