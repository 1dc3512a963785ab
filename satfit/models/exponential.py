"""
Exponential saturation model function.
"""

import numpy as np


def exponential(t, p0, p1, p2):
    """
    Exponential saturation model.

    Parameters
    ----------
    t : array_like
        Independent variable
    p0 : float
        Reciprocal value at t = 0
    p1 : float
        Saturation amplitude of the reciprocal
    p2 : float
        Characteristic scale of the saturation (same unit as t)

    Returns
    -------
    array_like
        Model values at t

    Notes
    -----
    Mathematical form: f(t) = 1 / (p0 + p1 * (1 - exp(-t / p2)))

    For t much smaller than p2 this behaves like the hyperbolic model with
    slope p1 / p2; for large t it levels off at 1 / (p0 + p1).
    Undefined for p2 == 0 and infinite where the denominator vanishes.
    """
    t = np.asarray(t, dtype=float)
    return 1.0 / (p0 + p1 * (1.0 - np.exp(-t / p2)))
