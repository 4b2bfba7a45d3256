import diffinterp.utils.settings as settings_utils
from diffinterp.utils.interp_interface import interpolator
from diffinterp.interp.basedifference import BaseDifferenceInterpolator
from diffinterp.interp.differences import differences3


@interpolator
class Interp3(BaseDifferenceInterpolator):
    r"""
    Interpolation from three tabular values

    Windows of three values :math:`y_1, y_2, y_3` are interpolated with the quadratic

    .. math:: y = y_2 + \frac{n}{2}\left(a + b + nc\right)

    where :math:`a, b` are the first differences and :math:`c` the second difference.

    Examples:

        >>> interp = Interp3(1, 7, [1, 2, 3, 4, 5, 6, 7])
        >>> y, c = interp.x(2.5)

    """
    interpolator_id = 'Interp3'
    order = 3

    settings_table = settings_utils.SettingsTable()
    __doc__ += settings_table.generate(BaseDifferenceInterpolator.settings_types,
                                       BaseDifferenceInterpolator.settings_default,
                                       BaseDifferenceInterpolator.settings_description)

    def last_difference(self, diffs):
        return diffs.c

    def evaluate(self, n, y, diffs):
        a, b, c = diffs
        return y[1] + n / 2 * ((a + b) + n * c)

    def x_at_n(self, n, x_first, x_last):
        interval = abs(x_last - x_first) / (self.order - 1)
        return (x_first + interval) + n * interval

    def n_at_x(self, x, x_first, x_last):
        return (2 * x - (x_first + x_last)) / (x_last - x_first)

    def extremum_n(self, y, diffs):
        a, b, c = diffs
        # straight line, no extremum
        if c == 0:
            return None
        return (a + b) / (-2 * c)

    def zero_n_better(self, y):
        a, b, c = differences3(y)

        def update(n0):
            denom = a + b + 2 * c * n0
            if denom == 0:
                return None
            return n0 - (2 * y[1] + n0 * (a + b + c * n0)) / denom

        return self.fixed_point(update, 'zero_n_better')

    def zero_n_fast(self, y):
        a, b, c = differences3(y)

        def update(n0):
            denom = a + b + c * n0
            if denom == 0:
                return None
            return -2 * y[1] / denom

        return self.fixed_point(update, 'zero_n_fast')
