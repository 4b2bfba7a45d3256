"""Interpolators

Central-difference interpolators of equally spaced tables (:class:`~diffinterp.interp.interp3.Interp3`,
:class:`~diffinterp.interp.interp5.Interp5`) and the Lagrange interpolator of arbitrarily spaced tables
(:class:`~diffinterp.interp.lagrange.Lagrange`). Importing this package registers all of them in
``diffinterp.utils.interp_interface.dict_of_interpolators``.
"""
import importlib
import os

import diffinterp.utils.interp_interface as interp_interface

files = interp_interface.interpolator_list_from_path(os.path.dirname(__file__))

for file in sorted(files):
    interp_interface.interpolators[file] = importlib.import_module(__name__ + "." + file)
