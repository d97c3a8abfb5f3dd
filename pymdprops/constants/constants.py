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


# Molar masses (g/mol)
MW_H2O = 18.01534  # Water
MW_NACL = 58.4428  # Sodium chloride

# Critical point of water used by the Reynolds saturation pressure equation
H2O_TC = 647.286  # K
H2O_PC = 22.089e6  # Pa

degC2K = 273.15  # Offset to convert degrees C to Kelvin

# Verbosity threshold at and above which gated range warnings are silenced
VERBOSITY_SILENT = 2
