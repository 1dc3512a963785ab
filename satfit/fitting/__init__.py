"""Fitting engine for the hyperbolic and exponential models."""

from .config import SolverConfig
from .result import FitResult, FitStatus
from .fitter import CurveFitter
from .drivers import fit_hyper, fit_exp, fit_hyperbolic, fit_exponential
from .initializers import init_hyperbolic, init_exponential
from .statistics import summarize_fit, format_summary

__all__ = [
    'SolverConfig',
    'FitResult',
    'FitStatus',
    'CurveFitter',
    'fit_hyper',
    'fit_exp',
    'fit_hyperbolic',
    'fit_exponential',
    'init_hyperbolic',
    'init_exponential',
    'summarize_fit',
    'format_summary',
]
