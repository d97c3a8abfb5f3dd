#!/usr/bin/env python3
"""
Validation tests for range diagnostics, verbosity and evaluation contexts.
Run with: python3 -m pytest pymdprops/tests/ -v
Or standalone: python3 pymdprops/tests/test_diagnostics.py
"""

import sys
import os
import logging
import warnings
import numpy as np
import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pymdprops
import pymdprops.brine as brine
import pymdprops.diagnostics as diagnostics
from pymdprops.diagnostics import (EvalContext, CollectingReporter, RangeViolation, RangeWarning,
                                   OutOfRangeError, InvalidInputError, InvalidSelectorError,
                                   CompositionError, DomainError)

def collecting_ctx(verbosity=0, strict=False):
    events = CollectingReporter()
    return EvalContext(verbosity=verbosity, reporter=events, strict=strict), events

# =============================================================================
# Range checks
# =============================================================================

def test_check_range_in_range():
    ctx, events = collecting_ctx()
    assert diagnostics.check_range(ctx, "f", "x", [0.1, 0.5], 0.0, 1.0)
    assert len(events) == 0

def test_check_range_reports_worst_element():
    ctx, events = collecting_ctx()
    ok = diagnostics.check_range(ctx, "f", "x", np.array([1.5, 0.5, -3.0, 2.0]), 0.0, 1.0, "K")
    assert not ok
    assert len(events) == 1
    v = events.events[0]
    assert v == RangeViolation("f", "x", -3.0, 0.0, 1.0, "K")

def test_check_range_open_bound():
    ctx, events = collecting_ctx()
    assert diagnostics.check_range(ctx, "f", "m", 1e6, 0.0, None)
    assert not diagnostics.check_range(ctx, "f", "m", 7.0, None, 6.0)
    assert events.events[0].lower is None

def test_violation_message():
    msg = RangeViolation("brine_den", "temperature", 350.0, 0.0, 300.0, "deg C").message()
    assert msg == "brine_den: temperature = 350 deg C is outside the validated range [0, 300] deg C"
    msg = RangeViolation("brine_tc", "molality", 7.5, None, 6.0).message()
    assert msg == "brine_tc: molality = 7.5 is outside the validated range [-inf, 6]"

# =============================================================================
# Verbosity gating
# =============================================================================

def test_density_temperature_warning_gated():
    ctx, events = collecting_ctx(verbosity=0)
    brine.brine_den(700.0, 0.0, ctx=ctx)
    assert len(events) == 1
    assert events.events[0].correlation == "brine_den"
    assert events.events[0].upper == 300.0
    ctx, events = collecting_ctx(verbosity=2)
    brine.brine_den(700.0, 0.0, ctx=ctx)
    assert len(events) == 0

def test_verbosity_one_still_reports():
    ctx, events = collecting_ctx(verbosity=1)
    brine.brine_visc(293.15, 0.3, ctx=ctx)
    assert len(events) == 1

def test_solubility_warning_not_gated():
    """Solubility reports out-of-range temperatures at every verbosity"""
    for verbosity in [0, 2, 10]:
        ctx, events = collecting_ctx(verbosity=verbosity)
        brine.sat_conc(800.0, ctx=ctx)
        assert len(events) == 1, f"verbosity {verbosity}"
        assert events.events[0].units == "deg C"

def test_solubility_celsius_range():
    """273.15 K is 0 deg C, inside the 0 - 450 deg C range"""
    ctx, events = collecting_ctx()
    brine.sat_conc([273.15, 500.0, 720.0], ctx=ctx)
    assert len(events) == 0
    brine.sat_conc(260.0, ctx=ctx)
    assert len(events) == 1

def test_viscosity_temperature_not_checked():
    ctx, events = collecting_ctx()
    brine.brine_visc(400.0, 0.1, ctx=ctx)
    assert len(events) == 0

def test_thermal_conductivity_ranges():
    ctx, events = collecting_ctx()
    brine.brine_tc(300.0, 0.05, ctx=ctx)
    assert len(events) == 0, "In-range molality must not be reported"
    brine.brine_tc(300.0, 0.3, ctx=ctx)
    assert [e.quantity for e in events.events] == ["molality"]
    events.clear()
    brine.brine_tc(280.0, 0.05, ctx=ctx)
    assert [e.quantity for e in events.events] == ["temperature"]
    events.clear()
    brine.brine_tc(280.0, 0.3, ctx=collecting_ctx(verbosity=2)[0])
    assert len(events) == 0

# =============================================================================
# Reporters and strict mode
# =============================================================================

def test_default_reporter_warns():
    with pytest.warns(RangeWarning, match="mass fraction"):
        brine.brine_visc(293.15, 0.3, ctx=EvalContext())

def test_warning_carries_violation():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        brine.brine_den(650.0, 0.0, ctx=EvalContext())
    assert len(caught) == 1
    assert isinstance(caught[0].message, RangeWarning)
    assert caught[0].message.violation.correlation == "brine_den"

def test_warning_points_at_caller():
    """Warnings from nested correlation calls are attributed to the calling line, not library code"""
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        brine.brine_visc(293.15, 0.3, ctx=EvalContext())
        brine.brine_tc(300.0, -0.01, ctx=EvalContext())
        brine.brine_table([280.0, 300.0], w=0.3, ctx=EvalContext())
    range_warnings = [w for w in caught if issubclass(w.category, RangeWarning)]
    assert len(range_warnings) >= 4
    for w in range_warnings:
        assert os.path.basename(w.filename) == "test_diagnostics.py", f"{w.filename}: {w.message}"

def test_log_reporter():
    records = []

    class ListHandler(logging.Handler):
        def emit(self, record):
            records.append(record)

    handler = ListHandler()
    logger = logging.getLogger("pymdprops")
    logger.addHandler(handler)
    try:
        brine.brine_visc(293.15, 0.4, ctx=EvalContext(reporter=diagnostics.log_reporter))
    finally:
        logger.removeHandler(handler)
    assert len(records) == 1
    assert records[0].levelno == logging.WARNING
    assert "brine_visc" in records[0].getMessage()

def test_strict_raises():
    ctx, events = collecting_ctx(strict=True)
    with pytest.raises(OutOfRangeError) as exc:
        brine.brine_den(700.0, 0.0, ctx=ctx)
    assert exc.value.violation.quantity == "temperature"
    assert len(events) == 0

def test_strict_ignores_verbosity():
    ctx, _ = collecting_ctx(verbosity=5, strict=True)
    with pytest.raises(OutOfRangeError):
        brine.brine_visc(293.15, 0.3, ctx=ctx)

def test_strict_in_range_returns_value():
    ctx, _ = collecting_ctx(strict=True)
    assert brine.brine_den(298.15, 0.0, ctx=ctx) == brine.brine_den(298.15, 0.0)

# =============================================================================
# Default context
# =============================================================================

def test_default_context_roundtrip():
    ctx, events = collecting_ctx()
    previous = diagnostics.set_default_context(ctx)
    try:
        assert diagnostics.get_default_context() is ctx
        brine.brine_visc(293.15, 0.3)
        assert len(events) == 1
    finally:
        diagnostics.set_default_context(previous)
    assert diagnostics.get_default_context() is previous

def test_default_context_type_checked():
    with pytest.raises(TypeError):
        diagnostics.set_default_context(2)

def test_context_is_immutable():
    ctx = EvalContext()
    with pytest.raises(AttributeError):
        ctx.verbosity = 3

def test_error_hierarchy():
    for err in [InvalidSelectorError, CompositionError, DomainError]:
        assert issubclass(err, InvalidInputError)
    assert issubclass(InvalidInputError, ValueError)
    assert not issubclass(OutOfRangeError, InvalidInputError)

def test_lazy_submodules():
    assert 'brine' in dir(pymdprops)
    assert pymdprops.water.psat_h2o(373.15) > 1e5
    with pytest.raises(AttributeError):
        pymdprops.not_a_module


if __name__ == '__main__':
    print("=" * 70)
    print("DIAGNOSTICS MODULE VALIDATION TESTS")
    print("=" * 70)

    tests = [v for k, v in globals().items() if k.startswith('test_')]
    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
            print(f"  PASS: {test.__name__}")
        except Exception as e:
            failed += 1
            print(f"  FAIL: {test.__name__}: {e}")

    print(f"\n{'=' * 70}")
    print(f"Results: {passed} passed, {failed} failed out of {passed + failed}")
    print("=" * 70)
    sys.exit(1 if failed > 0 else 0)
