import diffinterp.utils.settings as settings_utils
from diffinterp.utils.interp_interface import interpolator
from diffinterp.utils.num_utils import horner
from diffinterp.interp.basedifference import BaseDifferenceInterpolator
from diffinterp.interp.differences import differences5


@interpolator
class Interp5(BaseDifferenceInterpolator):
    r"""
    Interpolation from five tabular values

    Windows of five values :math:`y_1, \dots, y_5` are interpolated with the quartic

    .. math::

        y = y_3 + n\left(\frac{B + C}{2} - \frac{H + J}{12}\right) + n^2\left(\frac{F}{2} - \frac{K}{24}\right)
            + n^3\frac{H + J}{12} + n^4\frac{K}{24}

    evaluated by Horner's method, where :math:`A \dots D` are the first differences, :math:`E \dots G` the second,
    :math:`H, J` the third and :math:`K` the fourth.

    The extremum and zero of each window are found by fixed point iteration. Failure to converge in the
    extremum search raises :class:`~diffinterp.utils.exceptions.NoConvergence`, whereas in the zero search it
    only discards the window.

    """
    interpolator_id = 'Interp5'
    order = 5

    settings_table = settings_utils.SettingsTable()
    __doc__ += settings_table.generate(BaseDifferenceInterpolator.settings_types,
                                       BaseDifferenceInterpolator.settings_default,
                                       BaseDifferenceInterpolator.settings_description)

    def last_difference(self, diffs):
        return diffs.K

    @staticmethod
    def interpolation_coefficients(y, diffs):
        B, C, F, H, J, K = diffs.B, diffs.C, diffs.F, diffs.H, diffs.J, diffs.K
        return [y[2],
                (B + C) / 2 - (H + J) / 12,
                F / 2 - K / 24,
                (H + J) / 12,
                K / 24]

    def evaluate(self, n, y, diffs):
        return horner(n, self.interpolation_coefficients(y, diffs))

    def x_at_n(self, n, x_first, x_last):
        return 0.5 * (x_last + x_first) + 0.25 * (x_last - x_first) * n

    def n_at_x(self, x, x_first, x_last):
        return (4 * x - 2 * (x_first + x_last)) / (x_last - x_first)

    def extremum_n(self, y, diffs):
        B, C, F, H, J, K = diffs.B, diffs.C, diffs.F, diffs.H, diffs.J, diffs.K
        coeff = [6 * (B + C) - H - J,
                 0,
                 3 * (H + K),
                 2 * K]
        denom = K - 12 * F

        # division by zero, no extremum
        if denom == 0:
            return None

        return self.fixed_point(lambda n0: horner(n0, coeff) / denom, 'extremum_n', raise_exception=True)

    def zero_n_better(self, y):
        diffs = differences5(y)
        B, C, F, H, J, K = diffs.B, diffs.C, diffs.F, diffs.H, diffs.J, diffs.K

        M = K / 24
        N = (H + J) / 12
        P = F / 2 - M
        Q = (B + C) / 2 - N

        n_coeff = [y[2], Q, P, N, M]
        d_coeff = [Q, 2 * P, 3 * N, 4 * M]

        def update(n0):
            derivative = horner(n0, d_coeff)
            if derivative == 0:
                return None
            return n0 - horner(n0, n_coeff) / derivative

        return self.fixed_point(update, 'zero_n_better')

    def zero_n_fast(self, y):
        diffs = differences5(y)
        B, C, F, H, J, K = diffs.B, diffs.C, diffs.F, diffs.H, diffs.J, diffs.K

        coeff = [-24 * y[2],
                 0,
                 K - 12 * F,
                 -2 * (H + J),
                 -K]
        denom = 12 * (B + C) - 2 * (H + J)

        if denom == 0:
            return None

        return self.fixed_point(lambda n0: horner(n0, coeff) / denom, 'zero_n_fast')
