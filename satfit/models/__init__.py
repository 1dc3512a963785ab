"""
Model functions for curve fitting.

This module provides the closed-form models (hyperbolic, exponential
saturation) and utilities for looking them up by name.
"""

import inspect

import numpy as np

from ..exceptions import InvalidInput
from .hyperbolic import hyperbolic
from .exponential import exponential


# Model registry - maps model names to functions
MODEL_REGISTRY = {
    'hyperbolic': hyperbolic,
    'exponential': exponential,
}

# Short names used by the fit drivers
MODEL_ALIASES = {
    'hyper': 'hyperbolic',
    'exp': 'exponential',
}


def _resolve(name):
    return MODEL_ALIASES.get(name, name)


def get_model(name):
    """
    Get model function by name.

    Parameters
    ----------
    name : str
        Model name (e.g., 'hyperbolic', 'exponential', or the short
        forms 'hyper', 'exp')

    Returns
    -------
    callable
        Model function with signature func(t, p0, p1, ...)

    Raises
    ------
    KeyError
        If model name not found in registry
    """
    key = _resolve(name)
    if key not in MODEL_REGISTRY:
        raise KeyError(f"Model '{name}' not found. Available: {list_models()}")
    return MODEL_REGISTRY[key]


def list_models():
    """
    List all available model names.

    Returns
    -------
    list
        List of available model names
    """
    return list(MODEL_REGISTRY.keys())


def register_model(name, func):
    """
    Register a custom model function.

    Parameters
    ----------
    name : str
        Model name
    func : callable
        Model function with signature func(t, *params). The first
        argument is the independent variable; every following argument
        is a fit parameter.
    """
    if len(parameter_names(func)) == 0:
        raise ValueError(f"Model '{name}' must take at least one parameter after t")
    MODEL_REGISTRY[name] = func


def parameter_names(func):
    """Names of the fit parameters of a model function, in order."""
    names = list(inspect.signature(func).parameters)
    return names[1:]


def model_arity(name):
    """Number of parameters of the named model."""
    return len(parameter_names(get_model(name)))


def evaluate_model(name, t, par):
    """
    Evaluate a model from a parameter vector.

    Parameters
    ----------
    name : str
        Model name
    t : float or array_like
        Independent variable
    par : sequence of float
        Parameter vector, length must equal the model arity

    Returns
    -------
    float or ndarray
        Model prediction at t

    Raises
    ------
    InvalidInput
        If the parameter vector length does not match the model arity
    """
    n = model_arity(name)
    par = np.asarray(par, dtype=float).ravel()
    if par.size != n:
        raise InvalidInput(
            f"Invalid parameter count for model '{_resolve(name)}': "
            f"expected {n}, got {par.size}"
        )
    return get_model(name)(t, *par)


__all__ = [
    'hyperbolic',
    'exponential',
    'get_model',
    'list_models',
    'register_model',
    'parameter_names',
    'model_arity',
    'evaluate_model',
    'MODEL_REGISTRY',
]
