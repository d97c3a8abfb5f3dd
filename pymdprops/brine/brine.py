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

from typing import Optional

import numpy as np
import numpy.typing as npt
import pandas as pd
from tabulate import tabulate

from pymdprops.constants import MW_H2O, MW_NACL, degC2K
from pymdprops.diagnostics import EvalContext, check_range
from pymdprops.shared_fns import convert_to_numpy, process_output, poly_sum
from pymdprops.units import w2m, convert_x
from pymdprops.water import psat_h2o, latent_heat

# Sparrow, Desalination 159(2): 161-170 (2003), Eq.(5)
SOLUBILITY_COEFFS = [0.2628, 62.75e-6, 1.084e-6]

# Sparrow (2003), Eq.(7). Row i multiplies t**i (deg C), column j multiplies w**j
DENSITY_A = np.array([
    [1.001, 0.7666, -0.0149, 0.2663, 0.8845],
    [-0.0214, -3.496, 10.02, -6.56, -31.37],
    [-5.263, 39.87, 176.2, 363.5, -7.784],
    [15.42, -167.0, 980.7, -2573.0, 876.6],
    [-0.0276, 0.2978, -2.017, 6.345, -3.914],
])
DENSITY_C = [1.e3, 1.e0, 1.e-3, 1.e-6, 1.e-6]

# Ramires et al., JCED 39(1): 186-190 (1994), Eq.(7). Row i multiplies m**i, column j multiplies t**j (deg C)
TC_A = np.array([
    [0.5621, 0.00199, -8.6e-6],
    [-0.01394, 0.000294, -2.3e-6],
    [0.00177, -6.3e-5, 4.5e-7],
])

def _broadcast(degk, w):
    degk, t_list = convert_to_numpy(degk)
    w, w_list = convert_to_numpy(w)
    degk, w = np.broadcast_arrays(degk, w)
    return degk, w, t_list or w_list

def sat_conc(degk: npt.ArrayLike, ctx: Optional[EvalContext] = None) -> np.ndarray:
    """ Returns solubility of NaCl in water as saturated mass fraction
        Sparrow, Desalination 2003, 159(2): 161-170, Eq.(5)
        degk: Temperature (deg K). Validated for 0 - 450 deg C; out of range is always reported
    """
    degk, is_list = convert_to_numpy(degk)
    degc = degk - degC2K
    check_range(ctx, "sat_conc", "temperature", degc, 0., 450., "deg C", gated=False)
    return process_output(poly_sum(SOLUBILITY_COEFFS, degc), is_list)

def brine_den(degk: npt.ArrayLike, w: npt.ArrayLike, ctx: Optional[EvalContext] = None) -> np.ndarray:
    """ Returns density of aqueous NaCl solution (kg/m3)
        Sparrow, Desalination 2003, 159(2): 161-170, Eq.(7)
        degk: Temperature (deg K). Validated for 0 - 300 deg C
        w: NaCl mass fraction
    """
    degk, w, is_list = _broadcast(degk, w)
    degc = degk - degC2K
    check_range(ctx, "brine_den", "temperature", degc, 0., 300., "deg C")
    rho = np.zeros_like(degc)
    for i in range(len(DENSITY_C)):
        rho += poly_sum(DENSITY_A[i], w) * DENSITY_C[i] * degc ** i
    return process_output(rho, is_list)

def brine_visc(degk: npt.ArrayLike, w: npt.ArrayLike, ctx: Optional[EvalContext] = None) -> np.ndarray:
    """ Returns viscosity of aqueous NaCl solution (Pa.s)
        Empirical fit of literature data for 0 - 80 deg C and NaCl mass fraction 0 - 0.25. Fit is in units of 0.1 mPa.s
        degk: Temperature (deg K)
        w: NaCl mass fraction. Validated for 0 - 0.25
    """
    degk, w, is_list = _broadcast(degk, w)
    t = degk - degC2K
    # Temperature range of the fit is not checked
    check_range(ctx, "brine_visc", "mass fraction", w, 0., 0.25)
    mu = (17.02821 - 0.39206 * t + 0.188912 * w - 0.00466 * t * w + 0.003025 * t * t + 0.011738 * w * w) * 1.e-4
    return process_output(mu, is_list)

def brine_tc(degk: npt.ArrayLike, w: npt.ArrayLike, ctx: Optional[EvalContext] = None) -> np.ndarray:
    """ Returns thermal conductivity of aqueous NaCl solution (W/m.K)
        Ramires et al. JCED 1994, Eq.(7), evaluated in molality
        degk: Temperature (deg K). Validated for 295 - 365 K
        w: NaCl mass fraction. Validated up to 6 mol/kg once converted to molality
    """
    degk, w, is_list = _broadcast(degk, w)
    m = np.asarray(w2m(w, ctx=ctx))
    check_range(ctx, "brine_tc", "temperature", degk, 295., 365., "K")
    check_range(ctx, "brine_tc", "molality", m, None, 6.0, "mol/kg")
    degc = degk - degC2K
    lam = np.zeros_like(degc)
    for i in range(TC_A.shape[0]):
        lam += poly_sum(TC_A[i], degc) * m ** i
    return process_output(lam, is_list)

def activity_coeff_h2o(x_nv: npt.ArrayLike) -> np.ndarray:
    """ Returns the activity coefficient of water in aqueous NaCl (dimensionless)
        Lawson & Lloyd correlation
        x_nv: Molar fraction of nonvolatile solute
    """
    x_nv, is_list = convert_to_numpy(x_nv)
    return process_output(1. - 0.5 * x_nv - 10. * x_nv ** 2, is_list)

def nonvolatile_x(w_h2o: npt.ArrayLike) -> np.ndarray:
    """ Returns molar fraction of NaCl in a binary water/NaCl solution from the water mass fraction
        w_h2o: Mass fraction of water. Takes a single float, list or array
    """
    w_h2o, is_list = convert_to_numpy(w_h2o)
    x_h2o = convert_x(0, [MW_H2O, MW_NACL], np.stack([w_h2o, 1. - w_h2o]))
    return process_output(1. - x_h2o, is_list)

def brine_vp(degk: npt.ArrayLike, w_h2o: npt.ArrayLike, ctx: Optional[EvalContext] = None) -> np.ndarray:
    """ Returns water vapor pressure over aqueous NaCl (Pa)
        1. Converts water mass fraction to NaCl molar fraction, x_nv
        2. Activity coefficient of water from Lawson & Lloyd
        3. Scales the pure water saturation pressure: p = (1 - x_nv) * activity * psat
        degk: Temperature (deg K)
        w_h2o: Mass fraction of water (0-1)
    """
    degk, w_h2o, is_list = _broadcast(degk, w_h2o)
    check_range(ctx, "brine_vp", "water mass fraction", w_h2o, 0., 1.)
    x_nv = np.asarray(nonvolatile_x(w_h2o))
    alpha = np.asarray(activity_coeff_h2o(x_nv))
    vp = (1. - x_nv) * alpha * np.asarray(psat_h2o(degk))
    return process_output(vp, is_list)

def brine_table(
    degk: npt.ArrayLike,
    w: float = 0,
    export: bool = False,
    filename: str = "BRINE.TXT",
    ctx: Optional[EvalContext] = None,
) -> pd.DataFrame:
    """ Returns a DataFrame of water and brine properties over a range of temperatures at a fixed NaCl mass fraction
        degk: Temperatures (deg K). List or array
        w: NaCl mass fraction. Default 0 (pure water)
        export: Boolean value that controls whether a tabulated text file is written. Default: False
        filename: Name of the exported file. Default: BRINE.TXT
    """
    degk, _ = convert_to_numpy(degk)
    w_arr = np.full_like(degk, w)

    prop_df = pd.DataFrame()
    prop_df["Temp (K)"] = degk
    prop_df["Psat (Pa)"] = psat_h2o(degk)
    prop_df["Latent Heat (J/kg)"] = latent_heat(degk)
    prop_df["Solubility (w)"] = sat_conc(degk, ctx=ctx)
    prop_df["Density (kg/m3)"] = brine_den(degk, w_arr, ctx=ctx)
    prop_df["Viscosity (Pa.s)"] = brine_visc(degk, w_arr, ctx=ctx)
    prop_df["Thermal Cond (W/m.K)"] = brine_tc(degk, w_arr, ctx=ctx)
    prop_df["Vapor Pressure (Pa)"] = brine_vp(degk, 1. - w_arr, ctx=ctx)
    if export:
        df = prop_df.set_index("Temp (K)")
        headings = ["-- Temp (K)"] + list(df.columns)
        fileout = f"-- NaCl mass fraction {w:g}\n" + tabulate(df, headings) + "\n"
        with open(filename, "w") as text_file:
            text_file.write(fileout)
    return prop_df
