"""
Validated containers for fit data and parameter vectors.
"""

import numpy as np

from .exceptions import InvalidInput


def validate_data(t, y, min_points=1):
    """
    Validate observed data.

    Parameters
    ----------
    t : array_like
        Independent variable samples
    y : array_like
        Observed dependent variable samples
    min_points : int, optional
        Minimum number of points required, default 1

    Returns
    -------
    bool
        True if data is valid

    Raises
    ------
    InvalidInput
        If data validation fails
    """
    t = np.asarray(t, dtype=float)
    y = np.asarray(y, dtype=float)

    if t.ndim != 1 or y.ndim != 1:
        raise InvalidInput("t and y must be one-dimensional")

    if len(t) != len(y):
        raise InvalidInput(f"t and y must have same length: {len(t)} vs {len(y)}")

    if len(t) < max(min_points, 1):
        raise InvalidInput(f"Need at least {max(min_points, 1)} data points, got {len(t)}")

    if not np.all(np.isfinite(t)):
        raise InvalidInput("t data contains NaN or Inf")

    if not np.all(np.isfinite(y)):
        raise InvalidInput("y data contains NaN or Inf")

    return True


class DataSet:
    """
    Immutable set of (t, y) data points.

    Attributes
    ----------
    t : ndarray
        Independent variable samples (read-only)
    y : ndarray
        Observed samples (read-only)
    """

    def __init__(self, t, y):
        validate_data(t, y)
        self.t = np.array(t, dtype=float)
        self.y = np.array(y, dtype=float)
        self.t.flags.writeable = False
        self.y.flags.writeable = False

    def __len__(self):
        return len(self.t)

    @property
    def m(self):
        """Number of data points."""
        return len(self.t)

    def __repr__(self):
        return f"DataSet(m={self.m})"


class ParameterVector:
    """
    Fixed-length vector of model parameters.

    The length is set at construction and every later assignment must keep
    it, so a vector built for a two-parameter model can never be handed to
    a three-parameter one by accident.
    """

    def __init__(self, values, n_params=None):
        values = np.array(values, dtype=float).ravel()
        if n_params is not None and values.size != n_params:
            raise InvalidInput(
                f"Invalid parameter count: expected {n_params}, got {values.size}"
            )
        if values.size == 0:
            raise InvalidInput("Parameter vector must not be empty")
        if not np.all(np.isfinite(values)):
            raise InvalidInput("Parameter vector contains NaN or Inf")
        self._values = values

    def __len__(self):
        return self._values.size

    def __getitem__(self, index):
        return self._values[index]

    def __setitem__(self, index, value):
        if isinstance(index, slice):
            value = np.asarray(value, dtype=float).ravel()
            if len(range(*index.indices(len(self)))) != value.size:
                raise InvalidInput("Assignment would change the parameter count")
        self._values[index] = value

    def __iter__(self):
        return iter(self._values.tolist())

    def __array__(self, dtype=None, copy=None):
        if dtype is None:
            return self._values.copy()
        return self._values.astype(dtype)

    def __repr__(self):
        return f"ParameterVector({self._values.tolist()})"

    def tolist(self):
        return self._values.tolist()


def select_window(t, y, start=None, end=None):
    """
    Select the data points inside a fit window.

    Parameters
    ----------
    t : array_like
        Independent variable samples
    y : array_like
        Observed samples
    start : float or None, optional
        Lower bound on t (inclusive)
    end : float or None, optional
        Upper bound on t (exclusive)

    Returns
    -------
    t_win : ndarray
        t values inside the window
    y_win : ndarray
        y values inside the window
    """
    t = np.asarray(t, dtype=float)
    y = np.asarray(y, dtype=float)
    if len(t) != len(y):
        raise InvalidInput(f"t and y must have same length: {len(t)} vs {len(y)}")

    mask = np.ones(len(t), dtype=bool)

    if start is not None:
        mask &= (t >= start)

    if end is not None:
        mask &= (t < end)

    return t[mask], y[mask]
