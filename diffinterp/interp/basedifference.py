"""
Difference interpolation

Common machinery of the central-difference interpolators: validation of the table, windowing, evaluation at an
interpolation factor and the extremum and zero searches. The order specific formulae are given by
:class:`~diffinterp.interp.interp3.Interp3` and :class:`~diffinterp.interp.interp5.Interp5`.
"""
import logging
from abc import abstractmethod

import numpy as np

import diffinterp.utils.cout_utils as cout
import diffinterp.utils.exceptions as exceptions
import diffinterp.utils.settings as settings_utils
from diffinterp.utils.datastructures import Window, FactorResult, ValueResult, SearchResult
from diffinterp.utils.interp_interface import BaseInterpolator
from diffinterp.utils.num_utils import is_numeric
from diffinterp.interp.differences import difference_table

logger = logging.getLogger(__name__)


class BaseDifferenceInterpolator(BaseInterpolator):
    r"""
    Interpolation of an equally spaced table by Newton's central-difference formula.

    The table is given by its first and last abscissae and the tabulated values. Should ``xN < x1``, the table is
    reversed so that the abscissae increase. The interpolation factor :math:`n` locates a point relative to the
    centre of a window of ``order`` consecutive values, measured in tabular intervals. It is admissible in
    :math:`[-1, 1]`, or :math:`[-0.5, 0.5]` if the instance is ``strict``.

    Args:
        x1 (float): First x value
        xN (float): Last x value
        y (list): Tabulated y values, at least ``order`` of them
        custom_settings (dict): Interpolator settings (optional)

    Raises:
        exceptions.InvalidArgument: if ``x1``, ``xN`` or any ``y`` is not numeric.
        exceptions.IncorrectCount: if there are less than ``order`` values.
        exceptions.NoRange: if ``x1 == xN``.
    """
    order = None

    STRICT_DEFAULT = False

    settings_types = dict()
    settings_default = dict()
    settings_description = dict()

    settings_types['strict'] = 'bool'
    settings_default['strict'] = STRICT_DEFAULT
    settings_description['strict'] = 'Restrict the interpolation factor to |n| <= 0.5, otherwise |n| <= 1'

    settings_types['max_iterations'] = 'int'
    settings_default['max_iterations'] = 512
    settings_description['max_iterations'] = 'Maximum number of iterations when searching an interpolation factor'

    settings_types['print_info'] = 'bool'
    settings_default['print_info'] = False
    settings_description['print_info'] = 'Print the candidate windows of the extremum and zero searches'

    def __init__(self, x1, xN, y, custom_settings=None):
        self.check_init_values(x1, xN, y)

        x1 = float(x1)
        xN = float(xN)
        y = np.array([float(value) for value in y])

        if xN > x1:
            self._x1 = x1
            self._xN = xN
            self._y = y
        else:
            self._x1 = xN
            self._xN = x1
            self._y = y[::-1].copy()

        if custom_settings is None:
            self.settings = dict()
        else:
            self.settings = dict(custom_settings)
        settings_utils.to_custom_types(self.settings,
                                       self.settings_types,
                                       self.settings_default)

        self._strict = self.settings['strict']

    @property
    def x1(self):
        return self._x1

    @property
    def xN(self):
        return self._xN

    @property
    def y(self):
        return self._y.copy()

    @property
    def interval(self):
        """Tabular interval of the whole table"""
        return (self._xN - self._x1) / (len(self._y) - 1)

    @property
    def strict(self):
        """If ``True``, only interpolation factors with :math:`|n| \\leq 0.5` are admissible"""
        return self._strict

    @strict.setter
    def strict(self, value):
        self._strict = settings_utils.str2bool(value)

    def check_init_values(self, x1, xN, y):
        """
        Checks the table given on construction, raising the first problem found.
        """
        if isinstance(y, str):
            raise exceptions.InvalidArgument('y must be a sequence of numeric values')
        try:
            n_values = len(y)
        except TypeError:
            raise exceptions.InvalidArgument('y must be a sequence of numeric values')

        for value in y:
            if not is_numeric(value):
                raise exceptions.InvalidArgument('All values of y must be numeric')

        if not is_numeric(x1):
            raise exceptions.InvalidArgument('x1 must be numeric')

        if not is_numeric(xN):
            raise exceptions.InvalidArgument('xN must be numeric')

        if n_values < self.order:
            raise exceptions.IncorrectCount('Must have at least %d y values' % self.order)

        if float(x1) == float(xN):
            raise exceptions.NoRange('No range between x values')

    def n_range(self):
        if self.strict:
            return '[-0.5, 0.5]'
        else:
            return '[-1, 1]'

    def check_n(self, n, raise_exception=False):
        """
        Checks that an interpolation factor is admissible for this instance.

        Args:
            n (float): Interpolation factor. ``None`` is never admissible.
            raise_exception (bool): Raise if ``n`` is out of range rather than returning ``False``

        Returns:
            bool: ``True`` if ``n`` can be interpolated

        Raises:
            exceptions.OutOfRange: if ``n`` is out of range and ``raise_exception``.
        """
        if n is None:
            return False

        if np.isnan(n) or abs(n) > 1 or (abs(n) > 0.5 and self.strict):
            if raise_exception:
                raise exceptions.OutOfRange("The n value '%s' is out of the range %s" % (str(n), self.n_range()))
            return False

        return True

    def check_x(self, x):
        if x < self._x1 or x > self._xN:
            raise exceptions.OutOfRange("The x value '%s' is out of the range [%s, %s]." % (str(x),
                                                                                          str(self._x1),
                                                                                          str(self._xN)))

    def slices(self):
        """
        Divides the table into all successive windows of ``order`` values.

        For example, for ``order = 3``::

            x | y
           ---|--- 1
            0 | 2  | 2
            1 | 3  | | 3
            2 | 4  | | | 4
            3 | 5    | | |
            4 | 6      | |
            5 | 7        |

        Returns:
            list(Window): ``len(y) - order + 1`` windows
        """
        interval = self.interval
        n_slices = len(self._y) - self.order + 1

        windows = []
        for i_slice in range(n_slices):
            x_first = self._x1 + interval * i_slice
            x_last = self._x1 + interval * (i_slice + self.order - 1)
            windows.append(Window(x_first, x_last, self._y[i_slice:i_slice + self.order]))

        return windows

    def slice(self, x):
        """
        Window of ``order`` values centred as closely as possible on ``x``.

        The centre is the tabulated point closest to ``x`` (the first one on ties), moved inwards when the window
        would otherwise fall off either end of the table. A table of exactly ``order`` values is returned whole.

        Args:
            x (float): Target abscissa

        Returns:
            Window: window around ``x``

        Raises:
            exceptions.OutOfRange: if ``x`` is out of the table range.
        """
        if not is_numeric(x):
            raise exceptions.InvalidArgument('The target x value must be numeric')

        if len(self._y) == self.order:
            return Window(self._x1, self._xN, self._y.copy())

        x = float(x)
        self.check_x(x)

        interval = self.interval
        x_table = self._x1 + interval * np.arange(len(self._y))
        # argmin keeps the first index on ties
        i_centre = int(np.argmin(np.abs(x - x_table)))

        half = (self.order - 1) // 2
        if i_centre - half < 0:
            i_centre = half
        if i_centre + half > len(self._y) - 1:
            i_centre = len(self._y) - 1 - half

        x_centre = self._x1 + i_centre * interval
        return Window(x_centre - interval * half,
                      x_centre + interval * half,
                      self._y[i_centre - half:i_centre - half + self.order].copy())

    def interpolate_n(self, n, window):
        """
        Interpolates a window at the interpolation factor ``n``.

        Raises:
            exceptions.IncorrectCount: if the window does not hold exactly ``order`` values.
            exceptions.OutOfRange: if ``n`` is not admissible.
        """
        if len(window.y) != self.order:
            raise exceptions.IncorrectCount('Interpolation by n-factor is not valid with not exactly '
                                            '%d y values' % self.order)

        self.check_n(n, raise_exception=True)

        diffs = self.differences(window.y)
        y = self.evaluate(n, window.y, diffs)
        x = self.x_at_n(n, window.x_first, window.x_last)

        return FactorResult(float(x), float(y), float(self.last_difference(diffs)))

    def n(self, n, target_x=None):
        """
        Interpolates at the interpolation factor ``n``.

        Args:
            n (float): Interpolation factor
            target_x (float): Value of x around which the table is windowed. Required unless the table has exactly
                ``order`` values.

        Returns:
            FactorResult: ``(x, y, last_difference)``
        """
        if not is_numeric(n):
            raise exceptions.InvalidArgument('The n value must be numeric')

        if target_x is not None:
            window = self.slice(target_x)
        else:
            window = Window(self._x1, self._xN, self._y)

        return self.interpolate_n(float(n), window)

    def x(self, x):
        """
        Interpolates at the abscissa ``x``.

        Args:
            x (float): Value of x to interpolate, within ``[x1, xN]``

        Returns:
            ValueResult: ``(y, last_difference)``

        Raises:
            exceptions.OutOfRange: if ``x`` is out of range.
        """
        if not is_numeric(x):
            raise exceptions.InvalidArgument('The x value must be numeric')
        x = float(x)
        self.check_x(x)

        window = self.slice(x)
        n = self.n_at_x(x, window.x_first, window.x_last)
        result = self.interpolate_n(n, window)

        return ValueResult(result.y, result.last_difference)

    def extremum(self):
        """
        Searches every window of the table for the extremum of the interpolating polynomial.

        Windows without an admissible interpolation factor are skipped. Among the remaining ones, the extremum with
        the lowest y value is returned, so a minimum is preferred to a maximum.

        Returns:
            SearchResult: ``(found, x, y, last_difference)``
        """
        best = None
        y_min = np.inf

        table = self.info_table('Extremum search')
        for i_window, window in enumerate(self.slices()):
            diffs = self.differences(window.y)
            n = self.extremum_n(window.y, diffs)

            if not self.check_n(n):
                logger.debug('Extremum search: window %d skipped, n = %s', i_window, str(n))
                self.info_line(table, i_window, window, n, 'skip')
                continue

            result = self.interpolate_n(n, window)
            if result.y < y_min:
                y_min = result.y
                best = result
                self.info_line(table, i_window, window, n, 'best')
            else:
                self.info_line(table, i_window, window, n, 'valid')

        if table is not None:
            table.print_divider_line()

        if best is None:
            return SearchResult.not_found()
        return SearchResult(True, best.x, best.y, best.last_difference)

    def zero(self):
        """
        Searches every window of the table for the zero of the interpolating polynomial.

        Each window is first solved with the accurate iteration and then with the fast one. Among every admissible
        interpolation factor found, the lowest is the one interpolated.

        Returns:
            SearchResult: ``(found, x, y, last_difference)``
        """
        n_best = np.inf
        window_best = None

        table = self.info_table('Zero search')
        for method in (self.zero_n_better, self.zero_n_fast):
            for i_window, window in enumerate(self.slices()):
                n = method(window.y)

                if not self.check_n(n):
                    logger.debug('Zero search (%s): window %d skipped, n = %s', method.__name__, i_window, str(n))
                    self.info_line(table, i_window, window, n, 'skip')
                    continue

                if n < n_best:
                    n_best = n
                    window_best = window
                    self.info_line(table, i_window, window, n, 'best')
                else:
                    self.info_line(table, i_window, window, n, 'valid')

        if table is not None:
            table.print_divider_line()

        if window_best is None:
            return SearchResult.not_found()

        result = self.interpolate_n(n_best, window_best)
        return SearchResult(True, result.x, result.y, result.last_difference)

    def fixed_point(self, update, method_name, raise_exception=False):
        """
        Iterates ``n = update(n)`` from ``n = 0`` until two successive values are equal.

        Args:
            update (callable): Next value of ``n`` from the current one. Returning ``None`` stops the search.
            method_name (str): Name of the iteration, for logging
            raise_exception (bool): Raise if the iteration does not converge rather than returning ``None``

        Returns:
            float: converged interpolation factor, or ``None``

        Raises:
            exceptions.NoConvergence: if not converged within ``max_iterations`` and ``raise_exception``.
        """
        n = 0.
        for i_iter in range(self.settings['max_iterations']):
            n0 = n
            n = update(n0)

            if n is None:
                logger.debug('%s: singular iteration at n = %s', method_name, str(n0))
                return None

            if n == n0:
                logger.debug('%s: converged to n = %s in %d iterations', method_name, str(n), i_iter + 1)
                return float(n)

        logger.debug('%s: no convergence in %d iterations', method_name, self.settings['max_iterations'])
        if raise_exception:
            raise exceptions.NoConvergence(method_name, self.settings['max_iterations'],
                                           message='Unable to converge on n factor.')
        return None

    def info_table(self, title):
        if not self.settings['print_info']:
            return None
        cout.cout_wrap('%s: %s over %d windows' % (self.interpolator_id, title, len(self._y) - self.order + 1), 1)
        table = cout.TablePrinter(5, 10, ['g', 'g', 'g', 'g', 's'])
        table.print_header(['window', 'x first', 'x last', 'n', 'status'])
        return table

    @staticmethod
    def info_line(table, i_window, window, n, status):
        if table is None:
            return
        if n is None:
            n = np.nan
        table.print_line([i_window, window.x_first, window.x_last, n, status])

    def differences(self, y):
        return difference_table(y, self.order)

    @abstractmethod
    def last_difference(self, diffs):
        pass

    @abstractmethod
    def evaluate(self, n, y, diffs):
        pass

    @abstractmethod
    def x_at_n(self, n, x_first, x_last):
        pass

    @abstractmethod
    def n_at_x(self, x, x_first, x_last):
        pass

    @abstractmethod
    def extremum_n(self, y, diffs):
        pass

    @abstractmethod
    def zero_n_better(self, y):
        pass

    @abstractmethod
    def zero_n_fast(self, y):
        pass
