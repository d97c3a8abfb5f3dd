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

def convert_to_numpy(input_data):
    """ Returns (float array of at least one dimension, is_list flag) """
    if isinstance(input_data, np.ndarray):
        return np.atleast_1d(input_data.astype(float)), input_data.ndim > 0
    if isinstance(input_data, (list, tuple)):
        return np.asarray(input_data, dtype=float), True
    return np.atleast_1d(np.asarray(input_data, dtype=float)), False

def process_output(output_data, is_list: bool):
    # Scalar in, float out. List or array in, array out
    output_data = np.asarray(output_data, dtype=float)
    if is_list:
        return output_data
    return float(output_data.reshape(-1)[0])

def poly_sum(coeffs, x):
    """ Returns sum(coeffs[i] * x**i), evaluated elementwise over x """
    return np.polynomial.polynomial.polyval(x, coeffs)
