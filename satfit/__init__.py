"""satfit: hyperbolic and exponential saturation curve fitting."""

from . import models
from . import fitting
from .data import DataSet, ParameterVector, select_window, validate_data
from .exceptions import SatfitError, InvalidInput
from .fitting import (
    CurveFitter,
    FitResult,
    FitStatus,
    SolverConfig,
    fit_exp,
    fit_exponential,
    fit_hyper,
    fit_hyperbolic,
)

__version__ = '0.1.0'

__all__ = [
    'models',
    'fitting',
    'DataSet',
    'ParameterVector',
    'select_window',
    'validate_data',
    'SatfitError',
    'InvalidInput',
    'CurveFitter',
    'FitResult',
    'FitStatus',
    'SolverConfig',
    'fit_hyper',
    'fit_exp',
    'fit_hyperbolic',
    'fit_exponential',
]
