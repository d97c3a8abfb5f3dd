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

# Effective thermal conductivity of porous membranes.
# Maxwell-type model from Garcia-Payo & Izquierdo-Gil, J Phys D 37(21): 3008-3016 (2004),
# reviewed by Hitsov et al., Sep Purif Tech 142: 48-64 (2015).
# Intended for membranes with porosity above 60%.

from typing import Optional

import numpy as np
import numpy.typing as npt

from pymdprops.classes import membrane_material, phase
from pymdprops.diagnostics import EvalContext, InvalidSelectorError, check_range
from pymdprops.shared_fns import convert_to_numpy, process_output
from pymdprops.validate import validate_methods

# Solid polymer conductivity k = A*1e-4*T + B*1e-2, indexed by membrane_material value
SOLID_A = [5.769, 5.769, 12.5, 4.167]
SOLID_B = [0.9144, 8.914, -23.51, 1.452]

POROSITY_MIN = 0.6

def tc_gas(degk: npt.ArrayLike) -> np.ndarray:
    """ Returns thermal conductivity of the air/steam trapped in the membrane pores (W/m.K)
        Correlation of Bahmanyar
        degk: Temperature (deg K)
    """
    degk, is_list = convert_to_numpy(degk)
    return process_output(2.72e-3 + 7.77e-5 * degk, is_list)

def tc_solid(degk: npt.ArrayLike, material: membrane_material) -> np.ndarray:
    """ Returns thermal conductivity of the solid membrane polymer (W/m.K)
        degk: Temperature (deg K)
        material: membrane_material member, its name ('PVDF', 'PTFE', 'PP', 'PES') or integer code 0-3
    """
    material = validate_methods(["material"], [material])
    degk, is_list = convert_to_numpy(degk)
    i = material.value
    return process_output(SOLID_A[i] * 1.e-4 * degk + SOLID_B[i] * 1.e-2, is_list)

def tc_phase(degk: npt.ArrayLike, phase_sel: phase, material: Optional[membrane_material] = None) -> np.ndarray:
    """ Returns thermal conductivity of a single membrane phase (W/m.K)
        phase_sel: phase.GAS or phase.SOLID (or name/code)
        material: Required for the solid phase
    """
    phase_sel = validate_methods(["phase"], [phase_sel])
    if phase_sel is phase.GAS:
        return tc_gas(degk)
    if material is None:
        raise InvalidSelectorError("Solid phase conductivity requires a membrane material")
    return tc_solid(degk, material)

def tc_maxwell(degk: npt.ArrayLike, porosity: npt.ArrayLike, material: membrane_material,
               ctx: Optional[EvalContext] = None) -> np.ndarray:
    """ Returns effective thermal conductivity of a porous membrane (W/m.K)
        by Maxwell mixing of gas and solid phase conductivities
        degk: Temperature (deg K)
        porosity: Void fraction (0-1). Validated for 0.6 - 1
        material: Membrane polymer (see tc_solid)
    """
    material = validate_methods(["material"], [material])
    degk, t_list = convert_to_numpy(degk)
    porosity, p_list = convert_to_numpy(porosity)
    check_range(ctx, "tc_maxwell", "porosity", porosity, POROSITY_MIN, 1.0)

    k_gas = np.asarray(tc_gas(degk))
    k_solid = np.asarray(tc_solid(degk, material))
    beta = (k_solid - k_gas) / (k_solid + 2. * k_gas)
    solid_frac = 1. - porosity
    k_eff = k_gas * (1. + 2. * beta * solid_frac) / (1. - beta * solid_frac)
    return process_output(k_eff, t_list or p_list)
