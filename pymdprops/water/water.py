#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyMDProps - Property correlations for membrane distillation of brines
              Copyright (C) 2022, pyMDProps contributors

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.
"""

import numpy as np
import numpy.typing as npt

from pymdprops.constants import H2O_TC, H2O_PC
from pymdprops.shared_fns import convert_to_numpy, process_output, poly_sum

# Reynolds (1979), Thermodynamic Properties in SI
PSAT_A = 0.01
PSAT_TP = 338.15  # K
PSAT_COEFFS = [-7.4192420, 2.97221E-1, -1.155286E-1, 8.68563E-3,
               1.094098E-3, -4.39993E-3, 2.520658E-3, -5.218684E-4]

def psat_h2o(degk: npt.ArrayLike) -> np.ndarray:
    """ Returns saturation pressure of water vapor (Pa)
        Equation from Reynolds, Thermodynamic Properties in SI (1979)
        degk: Temperature (deg K). Takes a single float, list or array.
              No range check is made. Meaningful between the triple and critical points (273.16 - 647.286 K)
    """
    degk, is_list = convert_to_numpy(degk)
    x = PSAT_A * (degk - PSAT_TP)
    psat = H2O_PC * np.exp(poly_sum(PSAT_COEFFS, x) * (H2O_TC / degk - 1.0))
    return process_output(psat, is_list)

def latent_heat(degk: npt.ArrayLike) -> np.ndarray:
    """ Returns latent heat of water evaporation/condensation at 1 atm (J/kg)
        Drioli & Romano, IECR 40(5): 1277-1300
        degk: Temperature (deg K)
    """
    degk, is_list = convert_to_numpy(degk)
    return process_output(1.e3 * (1.7535 * degk + 2024.3), is_list)
