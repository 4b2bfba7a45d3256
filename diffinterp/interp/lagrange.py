import numpy as np

import diffinterp.utils.exceptions as exceptions
import diffinterp.utils.settings as settings_utils
from diffinterp.utils.interp_interface import interpolator, BaseInterpolator
from diffinterp.utils.num_utils import is_numeric


@interpolator
class Lagrange(BaseInterpolator):
    r"""
    Lagrange interpolation of an arbitrarily spaced table

    .. math:: y(x) = \sum_i y_i \prod_{j \neq i} \frac{x - x_j}{x_i - x_j}

    Args:
        data (list): ``(x, y)`` pairs, with distinct ``x``
        custom_settings (dict): Interpolator settings (optional)

    Raises:
        exceptions.InvalidArgument: if a pair is malformed or not numeric.
        exceptions.IncorrectCount: if less than two pairs are given.
        exceptions.NoRange: if an abscissa is repeated.

    Examples:

        >>> data = [[29.43, .4913598528], [30.97, .5145891926], [27.69, .4646875083]]
        >>> y = Lagrange(data).x(30)

    """
    interpolator_id = 'Lagrange'

    settings_types = dict()
    settings_default = dict()
    settings_description = dict()

    settings_types['extrapolate'] = 'bool'
    settings_default['extrapolate'] = True
    settings_description['extrapolate'] = 'Allow interpolation outside the range of the tabulated x values'

    settings_table = settings_utils.SettingsTable()
    __doc__ += settings_table.generate(settings_types, settings_default, settings_description)

    def __init__(self, data, custom_settings=None):
        self.data = self.check_data(data)

        if custom_settings is None:
            self.settings = dict()
        else:
            self.settings = dict(custom_settings)
        settings_utils.to_custom_types(self.settings,
                                       self.settings_types,
                                       self.settings_default)

    @staticmethod
    def check_data(data):
        pairs = []
        for pair in data:
            try:
                x_i, y_i = pair
            except (TypeError, ValueError):
                raise exceptions.InvalidArgument('Lagrange data must be given as (x, y) pairs')
            if not (is_numeric(x_i) and is_numeric(y_i)):
                raise exceptions.InvalidArgument('All x and y values must be numeric')
            pairs.append([float(x_i), float(y_i)])

        if len(pairs) < 2:
            raise exceptions.IncorrectCount('Must have at least two (x, y) pairs')

        data = np.array(pairs)
        if len(np.unique(data[:, 0])) != len(data):
            raise exceptions.NoRange('The x values must be distinct')

        return data

    def check_range(self, x):
        x_min = np.min(self.data[:, 0])
        x_max = np.max(self.data[:, 0])
        if x < x_min or x > x_max:
            raise exceptions.OutOfRange("The x value '%s' is out of the range [%s, %s]." % (str(x),
                                                                                          str(x_min),
                                                                                          str(x_max)))

    def x(self, x):
        """
        Interpolates the value of y at ``x``.

        Raises:
            exceptions.OutOfRange: if ``x`` is outside the tabulated range and ``extrapolate`` is off.
        """
        if not is_numeric(x):
            raise exceptions.InvalidArgument('The x value must be numeric')
        x = float(x)
        if not self.settings['extrapolate']:
            self.check_range(x)

        total = 0.
        for i_point in range(len(self.data)):
            x_i = self.data[i_point, 0]
            prod = 1.
            for j_point in range(len(self.data)):
                if i_point != j_point:
                    x_j = self.data[j_point, 0]
                    prod *= (x - x_j) / (x_i - x_j)

            total += self.data[i_point, 1] * prod

        return float(total)
