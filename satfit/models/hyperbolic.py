"""
Hyperbolic model function.
"""

import numpy as np


def hyperbolic(t, p0, p1):
    """
    Hyperbolic decay model.

    Parameters
    ----------
    t : array_like
        Independent variable
    p0 : float
        Offset of the reciprocal (value of 1/y at t = 0)
    p1 : float
        Slope of the reciprocal in t

    Returns
    -------
    array_like
        Model values at t

    Notes
    -----
    Mathematical form: f(t) = 1 / (p0 + p1 * t)

    The reciprocal of the model is linear in t, which is what the
    regression-based initial guess relies on. When p0 + p1 * t == 0 the
    result is inf (or NaN), following numpy division rules.
    """
    return 1.0 / (p0 + p1 * np.asarray(t, dtype=float))
