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

from numbers import Integral

from pymdprops.classes import class_dic
from pymdprops.diagnostics import InvalidSelectorError

def validate_methods(names, variables):
    """ Coerces each selector to its Enum member. Accepts the member itself, its name (any case) or its integer code.
        names: class_dic keys, e.g. ['material', 'phase']
        variables: matching selector values
        Raises InvalidSelectorError for anything that does not map to exactly one member
    """
    variables = list(variables)
    for m, method in enumerate(names):
        enum_cls = class_dic[method]
        val = variables[m]
        if isinstance(val, enum_cls):
            continue
        try:
            if isinstance(val, str):
                variables[m] = enum_cls[val.upper()]
            elif isinstance(val, Integral) and not isinstance(val, bool):
                variables[m] = enum_cls(int(val))
            else:
                raise TypeError
        except (KeyError, ValueError, TypeError):
            choices = ", ".join(f"{e.name} ({e.value})" for e in enum_cls)
            raise InvalidSelectorError(f"Unrecognized {method} selector {val!r}. Choose from {choices}") from None
    if len(variables) == 1:
        return variables[0]
    else:
        return variables
