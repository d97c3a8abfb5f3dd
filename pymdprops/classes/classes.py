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

from enum import Enum

class membrane_material(Enum):  # Polymer membrane material for solid-phase conductivity
    PVDF = 0
    PTFE = 1
    PP = 2
    PES = 3

class phase(Enum):  # Phase selector for membrane thermal conductivity
    GAS = 0
    SOLID = 1

class_dic = {
    "material": membrane_material,
    "phase": phase,
}
