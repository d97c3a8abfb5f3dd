"""
pymdprops
===================================

---------------------------------------------------------------
Property correlations for membrane distillation of NaCl brines
---------------------------------------------------------------

Closed-form thermophysical property correlations for water, water vapor and aqueous sodium chloride,
written to be called per cell and per time step by a CFD or process simulation driver.
Each sub-module must be imported separately, e.g. import pymdprops.brine as brine

Includes functions to calculate;

- Saturation pressure and latent heat of water
- Solubility, density, viscosity and thermal conductivity of NaCl brine
- Activity coefficient of water and vapor pressure over brine
- Effective thermal conductivity of porous PVDF, PTFE, PP and PES membranes
- Conversions between NaCl mass fraction, molality and molar fraction
- Range diagnostics with configurable verbosity, reporting and strict mode


"""

submodules = [
    'brine',
    'classes',
    'constants',
    'diagnostics',
    'membrane',
    'shared_fns',
    'units',
    'validate',
    'water'
]

__all__ = submodules 

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pymdprops.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pymdprops' has no attribute '{name}'"
            )
