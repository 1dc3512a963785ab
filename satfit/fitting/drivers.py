"""
Fit drivers for the hyperbolic and exponential saturation models.

``fit_hyper`` and ``fit_exp`` take an explicit parameter count, a caller-owned
parameter vector and a point count, and overwrite the vector with the best
fit. ``fit_hyperbolic`` and ``fit_exponential`` work from the data alone and
derive their own starting point.
"""

import numpy as np

from ..exceptions import InvalidInput
from ..models import model_arity
from ..utils.logger import log_debug, log_error
from .fitter import CurveFitter
from .initializers import EXPONENTIAL_INIT_POINTS, init_exponential, init_hyperbolic


def _reject(message):
    error = InvalidInput(message)
    log_error("Invalid fit input", error)
    raise error


def _check_inputs(model_name, n, par, m, t, y):
    arity = model_arity(model_name)
    if n != arity:
        _reject(f"Model '{model_name}' has {arity} parameters, got n={n}")
    if len(par) != n:
        _reject(f"Parameter vector has length {len(par)}, expected n={n}")
    if not hasattr(par, '__setitem__'):
        _reject("Parameter vector must be mutable to receive the fitted values")
    if isinstance(par, np.ndarray) and par.dtype.kind != 'f':
        _reject(f"Parameter array must have a floating dtype to hold the fitted values, got {par.dtype}")
    if m < n:
        _reject(f"Need at least n={n} data points, got m={m}")
    if len(t) != m or len(y) != m:
        _reject(f"t and y must both have m={m} values, got {len(t)} and {len(y)}")


def _fit_in_place(model_name, n, par, m, t, y, config):
    _check_inputs(model_name, n, par, m, t, y)

    fitter = CurveFitter(t, y)
    result = fitter.fit(model_name, [float(p) for p in par], config)

    par[:] = list(result.params)
    return result


def fit_hyper(n, par, m, t, y, config=None):
    """
    Fit the hyperbolic model, updating ``par`` in place.

    Parameters
    ----------
    n : int
        Number of parameters, must be 2
    par : mutable sequence of float
        Initial guess [p0, p1]; overwritten with the fitted values
    m : int
        Number of data points, at least n
    t, y : array_like
        Data arrays of length m
    config : SolverConfig, optional
        Solver settings

    Returns
    -------
    FitResult

    Raises
    ------
    InvalidInput
        On any length mismatch or an unusable initial guess
    """
    return _fit_in_place('hyperbolic', n, par, m, t, y, config)


def fit_exp(n, par, m, t, y, config=None):
    """
    Fit the exponential saturation model, updating ``par`` in place.

    Same contract as :func:`fit_hyper` with n = 3 and par = [p0, p1, p2].
    """
    return _fit_in_place('exponential', n, par, m, t, y, config)


def fit_hyperbolic(t, y, config=None):
    """
    Fit the hyperbolic model starting from a regression estimate.

    Parameters
    ----------
    t, y : array_like
        Data arrays of equal length
    config : SolverConfig, optional
        Solver settings

    Returns
    -------
    FitResult
    """
    par = init_hyperbolic(t, y)
    log_debug(f"hyperbolic initial guess: {par}")
    return CurveFitter(t, y).fit('hyperbolic', par, config)


def fit_exponential(t, y, config=None):
    """
    Fit the exponential saturation model.

    The starting point comes from a hyperbolic fit over the first few points,
    with p1 and p2 scaled so the initial slope matches.

    Parameters
    ----------
    t, y : array_like
        Data arrays of equal length
    config : SolverConfig, optional
        Solver settings

    Returns
    -------
    FitResult
    """
    t = np.asarray(t, dtype=float)
    y = np.asarray(y, dtype=float)
    lead = min(EXPONENTIAL_INIT_POINTS, len(t))

    seed = fit_hyperbolic(t[:lead], y[:lead], config)
    par = init_exponential(seed.params)
    log_debug(f"exponential initial guess: {par}")
    return CurveFitter(t, y).fit('exponential', par, config)
