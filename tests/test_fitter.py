"""Tests for CurveFitter status reporting, statistics and logging."""

from __future__ import annotations

import logging

import numpy as np
import pytest

from satfit import CurveFitter, FitStatus, InvalidInput, SolverConfig
from satfit.models import MODEL_REGISTRY, hyperbolic


@pytest.fixture
def hyper_data():
    t = np.arange(10, dtype=float)
    return t, hyperbolic(t, 2.0, 0.5)


def test_fit_accepts_short_model_name(hyper_data):
    fitter = CurveFitter(*hyper_data)
    result = fitter.fit('hyper', [1.0, 1.0])

    assert result.model == 'hyperbolic'
    assert result.success


def test_numerical_failure_is_reported(monkeypatch):
    """A model that turns NaN during the iteration ends the fit without raising."""

    def capped_linear(t, a):
        return np.where(a > 1.5, np.nan, a * t)

    monkeypatch.setitem(MODEL_REGISTRY, 'capped_linear', capped_linear)

    t = np.arange(1.0, 6.0)
    fitter = CurveFitter(t, 3.0 * t)
    result = fitter.fit('capped_linear', [1.0])

    assert result.status is FitStatus.NUMERICAL_FAILURE
    assert result.params == (1.0,)
    assert result.lmfit_result is None
    assert fitter.get_statistics()['status'] == 'numerical_failure'
    assert 'numerical_failure' in fitter.get_fit_report()


def test_evaluate_requires_fit(hyper_data):
    fitter = CurveFitter(*hyper_data)
    with pytest.raises(ValueError, match="Run fit"):
        fitter.evaluate()


def test_evaluate_after_fit(hyper_data):
    t, y = hyper_data
    fitter = CurveFitter(t, y)
    fitter.fit('hyperbolic', [1.0, 1.0])

    np.testing.assert_allclose(fitter.evaluate(), y, rtol=1e-8)
    assert fitter.evaluate([20.0])[0] == pytest.approx(1.0 / 12.0, rel=1e-6)


def test_statistics(hyper_data):
    fitter = CurveFitter(*hyper_data)
    fitter.fit('hyperbolic', [1.0, 1.0])
    stats = fitter.get_statistics()

    assert stats['status'] == 'converged'
    assert stats['n_data'] == 10
    assert stats['n_params'] == 2
    assert stats['dof'] == 8
    assert stats['residual_norm'] < 1e-8
    assert stats['nfev'] > 0
    assert 'r_squared' not in stats


def test_fit_report(hyper_data):
    fitter = CurveFitter(*hyper_data)
    fitter.fit('hyperbolic', [1.0, 1.0])
    report = fitter.get_fit_report()

    assert "hyperbolic" in report
    assert "=== Fit Summary ===" in report
    assert "p0" in report and "p1" in report


def test_rejected_input_is_logged(hyper_data, caplog):
    fitter = CurveFitter(*hyper_data)
    with caplog.at_level(logging.ERROR, logger='satfit'):
        with pytest.raises(InvalidInput):
            fitter.fit('hyperbolic', [1.0, 1.0, 1.0])
    assert "Rejected hyperbolic fit" in caplog.text


def test_quiet_by_default(hyper_data, caplog):
    fitter = CurveFitter(*hyper_data)
    with caplog.at_level(logging.INFO, logger='satfit'):
        fitter.fit('hyperbolic', [1.0, 1.0])
    assert "iter" not in caplog.text
    assert "converged" not in caplog.text


def test_verbose_fit_logs_iterations(hyper_data, caplog):
    fitter = CurveFitter(*hyper_data)
    with caplog.at_level(logging.INFO, logger='satfit'):
        fitter.fit('hyperbolic', [1.0, 1.0], SolverConfig(verbose=2))
    assert "Fitting hyperbolic model to 10 points" in caplog.text
    assert "iter" in caplog.text
    assert "converged after" in caplog.text


def test_non_convergence_is_logged_as_warning(caplog):
    t = np.linspace(0.0, 10.0, 20)
    y = 1.0 / (1.0 + 2.0 * (1.0 - np.exp(-t / 3.0)))
    fitter = CurveFitter(t, y)
    with caplog.at_level(logging.WARNING, logger='satfit'):
        result = fitter.fit('exponential', [0.5, 1.0, 1.0], SolverConfig(max_nfev=2))
    assert result.status is FitStatus.MAX_ITERATIONS_REACHED
    assert "did not converge" in caplog.text


@pytest.mark.parametrize("kwargs", [
    {'ftol': -1.0},
    {'max_nfev': 0},
    {'factor': 0.0},
    {'verbose': 7},
])
def test_solver_config_validation(kwargs):
    with pytest.raises(ValueError):
        SolverConfig(**kwargs)


def test_solver_config_fit_kws():
    config = SolverConfig(ftol=1e-8, epsfcn=1e-12)
    kws = config.fit_kws()
    assert kws['ftol'] == 1e-8
    assert kws['epsfcn'] == 1e-12
    assert 'epsfcn' not in SolverConfig().fit_kws()


def test_solver_config_defaults_are_tighter_than_leastsq():
    kws = SolverConfig().fit_kws()
    assert kws['ftol'] == kws['xtol'] == kws['gtol'] == 1e-10
    assert kws['ftol'] < 1.5e-8
    assert kws['factor'] == 100.0


def test_nfev_counts_jacobian_evaluations(hyper_data):
    result = CurveFitter(*hyper_data).fit('hyperbolic', [1.0, 1.0])

    assert result.nfev == result.lmfit_result.nfev
    # one residual plus one finite-difference column per parameter
    assert result.nfev >= 1 + 2
