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

import logging
import sys
import warnings
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from pymdprops.constants import VERBOSITY_SILENT

logger = logging.getLogger("pymdprops")


class InvalidInputError(ValueError):
    """ Structurally invalid input. Always raised, never downgraded to a warning """


class InvalidSelectorError(InvalidInputError):
    """ Material or phase selector that does not map to a coefficient row """


class CompositionError(InvalidInputError):
    """ Empty or mismatched composition vectors, or a bad target index """


class DomainError(InvalidInputError):
    """ Argument outside the mathematical domain of a correlation """


@dataclass(frozen=True)
class RangeViolation:
    """ Structured record of an input lying outside a correlation's validated range
        correlation: Name of the correlation function
        quantity: Name of the offending input quantity
        value: Offending value (worst element when an array was passed)
        lower, upper: Validated bounds. None means unbounded on that side
        units: Units of value and bounds
    """
    correlation: str
    quantity: str
    value: float
    lower: Optional[float]
    upper: Optional[float]
    units: str = ""

    def message(self) -> str:
        lo = "-inf" if self.lower is None else f"{self.lower:g}"
        hi = "inf" if self.upper is None else f"{self.upper:g}"
        unit = f" {self.units}" if self.units else ""
        return f"{self.correlation}: {self.quantity} = {self.value:g}{unit} is outside the validated range [{lo}, {hi}]{unit}"


class RangeWarning(UserWarning):
    def __init__(self, violation: RangeViolation):
        super().__init__(violation.message())
        self.violation = violation


class OutOfRangeError(ValueError):
    def __init__(self, violation: RangeViolation):
        super().__init__(violation.message())
        self.violation = violation


def _caller_stacklevel() -> int:
    # warnings.warn stacklevel of the first frame outside pymdprops, counted from the frame that calls this
    frame = sys._getframe(1)
    level = 1
    while frame is not None and frame.f_globals.get("__name__", "").startswith("pymdprops."):
        frame = frame.f_back
        level += 1
    return level


def warn_reporter(violation: RangeViolation) -> None:
    warnings.warn(RangeWarning(violation), stacklevel=_caller_stacklevel())


def log_reporter(violation: RangeViolation) -> None:
    logger.warning(violation.message())


class CollectingReporter:
    """ Reporter that keeps every RangeViolation it receives, in call order """
    def __init__(self):
        self.events: List[RangeViolation] = []

    def __call__(self, violation: RangeViolation) -> None:
        self.events.append(violation)

    def __len__(self):
        return len(self.events)

    def clear(self) -> None:
        self.events.clear()


@dataclass(frozen=True)
class EvalContext:
    """ Read-only evaluation settings shared by every correlation call
        verbosity: 0 is most verbose. Gated range checks are silent at VERBOSITY_SILENT (2) and above
        reporter: Callable receiving each RangeViolation. Defaults to the warnings module
        strict: Raise OutOfRangeError on any range violation instead of reporting it
    """
    verbosity: int = 0
    reporter: Callable[[RangeViolation], None] = field(default=warn_reporter, compare=False)
    strict: bool = False


_default_context = EvalContext()


def get_default_context() -> EvalContext:
    return _default_context


def set_default_context(ctx: EvalContext) -> EvalContext:
    """ Replaces the process-wide default context. Call once before evaluation starts.
        Returns the previous context so it can be restored
    """
    global _default_context
    if not isinstance(ctx, EvalContext):
        raise TypeError(f"Expected EvalContext, got {type(ctx).__name__}")
    previous = _default_context
    _default_context = ctx
    return previous


def resolve_context(ctx: Optional[EvalContext]) -> EvalContext:
    return _default_context if ctx is None else ctx


def check_range(
    ctx: Optional[EvalContext],
    correlation: str,
    quantity: str,
    value,
    lower: Optional[float],
    upper: Optional[float],
    units: str = "",
    gated: bool = True,
) -> bool:
    """ Checks value (float or array) against [lower, upper] and reports a RangeViolation if any element lies outside.
        Returns True when every element is in range.
        Ungated checks are reported regardless of verbosity
    """
    ctx = resolve_context(ctx)
    arr = np.asarray(value, dtype=float)
    below = np.zeros(arr.shape, dtype=bool) if lower is None else arr < lower
    above = np.zeros(arr.shape, dtype=bool) if upper is None else arr > upper
    if not (np.any(below) or np.any(above)):
        return True

    # Report the element furthest outside the range
    excess = np.zeros(arr.shape)
    if lower is not None:
        excess = np.where(below, lower - arr, excess)
    if upper is not None:
        excess = np.where(above, arr - upper, excess)
    worst = float(arr.flat[int(np.argmax(excess))])

    violation = RangeViolation(correlation, quantity, worst, lower, upper, units)
    if ctx.strict:
        raise OutOfRangeError(violation)
    if gated and ctx.verbosity >= VERBOSITY_SILENT:
        return False
    ctx.reporter(violation)
    return False
