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

from typing import Optional, Sequence

import numpy as np
import numpy.typing as npt

from pymdprops.constants import MW_NACL
from pymdprops.diagnostics import EvalContext, CompositionError, DomainError, check_range
from pymdprops.shared_fns import convert_to_numpy, process_output

def w2m(w: npt.ArrayLike, ctx: Optional[EvalContext] = None) -> np.ndarray:
    """ Returns NaCl molality (mol/kg water) from NaCl mass fraction
        m = (mole of solute, mol) / (mass of solvent, kg)
        w: NaCl mass fraction, 0 <= w < 1. Takes a single float, list or array
        Molality diverges as w -> 1; w >= 1 raises DomainError
    """
    w, is_list = convert_to_numpy(w)
    if np.any(w >= 1):
        raise DomainError(f"Mass fraction {np.max(w):g} gives infinite or negative molality. Must be < 1")
    check_range(ctx, "w2m", "mass fraction", w, 0.0, None)
    m = w / (1.0 - w) / MW_NACL * 1000.0
    return process_output(m, is_list)

def m2w(m: npt.ArrayLike, ctx: Optional[EvalContext] = None) -> np.ndarray:
    """ Returns NaCl mass fraction from molality (mol/kg water)
        w = m * M / (1000 + m * M)
    """
    m, is_list = convert_to_numpy(m)
    check_range(ctx, "m2w", "molality", m, 0.0, None, "mol/kg")
    w = m * MW_NACL / (1000.0 + m * MW_NACL)
    return process_output(w, is_list)

def convert_x(imat: int, mw: Sequence[float], wi: npt.ArrayLike) -> np.ndarray:
    """ Returns the molar fraction of component imat from the mass fractions of all components
        imat: Index of the target component
        mw: Molecular weights of each component (g/mol)
        wi: Mass fractions of each component, first axis the same length as mw. Sum-to-one is the caller's responsibility.
            Extra axes hold independent compositions, e.g. shape (N, ncells), and give an array result
    """
    mw = np.asarray(mw, dtype=float)
    wi = np.asarray(wi, dtype=float)
    if mw.ndim != 1 or mw.size == 0:
        raise CompositionError("Composition must contain at least one component")
    if wi.shape[:1] != mw.shape:
        n = wi.shape[0] if wi.ndim else 0
        raise CompositionError(f"Got {n} mass fractions for {mw.size} molecular weights")
    if not isinstance(imat, (int, np.integer)) or not 0 <= imat < mw.size:
        raise CompositionError(f"Component index {imat} out of range for {mw.size} components")

    moles = wi / mw.reshape((-1,) + (1,) * (wi.ndim - 1))
    total = moles.sum(axis=0)
    if np.any(total == 0):
        raise CompositionError("Total moles of the composition is zero")
    x = moles[imat] / total
    return float(x) if wi.ndim == 1 else x
