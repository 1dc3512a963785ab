"""
Initial parameter estimates for the fit drivers.

The hyperbolic model is linear in t once the data are inverted, so a
straight-line regression of 1/y on t gives a starting point close to the
optimum. The exponential saturation model starts from a hyperbolic fit of
its leading points.
"""

import numpy as np
from scipy.stats import linregress

from ..exceptions import InvalidInput

# Leading points used by each estimate
HYPERBOLIC_INIT_POINTS = 10
EXPONENTIAL_INIT_POINTS = 6

# The exponential start is seeded with p1 scaled by this factor and p2 set to
# the same value, i.e. p1 / p2 keeps the hyperbolic slope.
EXPONENTIAL_SCALE = 100.0


def init_hyperbolic(t, y, n_points=HYPERBOLIC_INIT_POINTS):
    """
    Initial hyperbolic parameters from a linear regression of 1/y on t.

    Parameters
    ----------
    t : array_like
        Independent variable samples
    y : array_like
        Observed samples
    n_points : int, optional
        Number of leading points used for the regression, default 10

    Returns
    -------
    list of float
        [p0, p1] = [intercept, slope] of 1/y versus t

    Raises
    ------
    InvalidInput
        If fewer than two usable points are available
    """
    t = np.asarray(t, dtype=float)[:n_points]
    y = np.asarray(y, dtype=float)[:n_points]

    # Points with y == 0 have no finite reciprocal
    mask = np.isfinite(t) & np.isfinite(y) & (y != 0)
    t = t[mask]
    inv_y = 1.0 / y[mask]

    if len(t) < 2 or np.ptp(t) == 0:
        raise InvalidInput(
            f"Need at least 2 distinct t values with non-zero y for the initial guess, got {len(t)}"
        )

    fit = linregress(t, inv_y)
    return [float(fit.intercept), float(fit.slope)]


def init_exponential(hyper_params, scale=EXPONENTIAL_SCALE):
    """
    Initial exponential parameters from fitted hyperbolic ones.

    Parameters
    ----------
    hyper_params : sequence of float
        [p0, p1] of a hyperbolic fit to the leading points
    scale : float, optional
        Initial saturation scale p2, default 100

    Returns
    -------
    list of float
        [p0, p1 * scale, scale]
    """
    p0, p1 = hyper_params
    return [float(p0), float(p1) * scale, float(scale)]
