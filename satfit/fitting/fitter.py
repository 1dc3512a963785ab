"""
Curve fitter class using lmfit.
"""

import numpy as np
from lmfit import Model

from ..data import DataSet
from ..exceptions import InvalidInput
from ..models import get_model, parameter_names, MODEL_ALIASES
from ..utils.logger import log_debug, log_error, log_info, log_warning
from .config import SolverConfig, SUMMARY, ITERATIONS
from .result import FitResult, FitStatus, classify_result
from .statistics import format_summary, summarize_fit


class CurveFitter:
    """
    Least-squares fitter for one data point set.

    Attributes
    ----------
    data : DataSet
        Validated (t, y) data
    result : FitResult or None
        Outcome of the last fit
    """

    def __init__(self, t_data, y_data):
        """
        Initialize CurveFitter.

        Parameters
        ----------
        t_data : array_like
            Independent variable samples
        y_data : array_like
            Observed samples, same length as t_data
        """
        self.data = DataSet(t_data, y_data)
        self.result = None

    @property
    def t(self):
        return self.data.t

    @property
    def y(self):
        return self.data.y

    def _build_model(self, model_name, initial):
        """Build the lmfit model and its starting parameters."""
        func = get_model(model_name)
        names = parameter_names(func)
        initial = np.asarray(initial, dtype=float).ravel()

        if initial.size != len(names):
            raise InvalidInput(
                f"Invalid parameter count for model '{model_name}': "
                f"expected {len(names)}, got {initial.size}"
            )
        if not np.all(np.isfinite(initial)):
            raise InvalidInput("Initial parameters contain NaN or Inf")
        if self.data.m < len(names):
            raise InvalidInput(
                f"Need at least as many data points as parameters: "
                f"{self.data.m} points for {len(names)} parameters"
            )

        with np.errstate(divide='ignore', invalid='ignore', over='ignore'):
            y_init = np.asarray(func(self.t, *initial), dtype=float)
        bad = ~np.isfinite(y_init)
        if np.any(bad):
            raise InvalidInput(
                f"Model '{model_name}' is not finite at the initial guess "
                f"for t = {self.t[bad].tolist()}"
            )

        model = Model(func, independent_vars=['t'], nan_policy='raise')
        params = model.make_params(**dict(zip(names, initial.tolist())))
        return model, params

    def fit(self, model_name, initial, config=None):
        """
        Fit a model to the data.

        Parameters
        ----------
        model_name : str
            Registered model name ('hyperbolic', 'exponential', ...)
        initial : sequence of float
            Initial parameter guess, one value per model parameter
        config : SolverConfig, optional
            Solver settings. A fresh default configuration is used if None.

        Returns
        -------
        FitResult
            Fitted parameters and termination status

        Raises
        ------
        InvalidInput
            If the inputs are inconsistent or the model cannot be evaluated
            at the initial guess
        """
        if config is None:
            config = SolverConfig()
        model_name = MODEL_ALIASES.get(model_name, model_name)

        try:
            model, params = self._build_model(model_name, initial)
        except InvalidInput as e:
            log_error(f"Rejected {model_name} fit", e)
            raise

        initial = tuple(float(params[name].value) for name in model.param_names)
        if config.verbose >= SUMMARY:
            log_info(f"Fitting {model_name} model to {self.data.m} points from {list(initial)}")

        iter_cb = None
        if config.verbose >= ITERATIONS:
            def iter_cb(params, iter, resid, *args, **kws):
                values = [params[name].value for name in model.param_names]
                log_info(f"  iter {iter}: chisqr={np.sum(resid**2):.6e} params={values}")

        try:
            lm_result = model.fit(
                self.y, params, t=self.t,
                method='leastsq',
                max_nfev=config.max_nfev,
                iter_cb=iter_cb,
                fit_kws=config.fit_kws(),
            )
        except ValueError as e:
            # lmfit aborts with ValueError when the model turns NaN/inf
            log_warning(f"{model_name} fit aborted: {e}")
            self.result = FitResult(
                model=model_name,
                status=FitStatus.NUMERICAL_FAILURE,
                params=initial,
                initial=initial,
                message=str(e),
            )
            return self.result

        status = classify_result(lm_result)
        self.result = FitResult(
            model=model_name,
            status=status,
            params=tuple(float(lm_result.params[name].value) for name in model.param_names),
            initial=initial,
            message=lm_result.message,
            nfev=lm_result.nfev,
            chisqr=float(getattr(lm_result, 'chisqr', np.nan)),
            lmfit_result=lm_result,
        )

        if status is not FitStatus.CONVERGED:
            log_warning(f"{model_name} fit did not converge ({status.value}): {lm_result.message}")
        elif config.verbose >= SUMMARY:
            log_info(
                f"{model_name} fit converged after {lm_result.nfev} evaluations: "
                f"params={list(self.result.params)}, |r|={self.result.residual_norm:.6e}"
            )
        log_debug(f"{model_name} fit message: {lm_result.message}")

        return self.result

    def evaluate(self, t=None):
        """
        Evaluate the fitted model.

        Parameters
        ----------
        t : array_like, optional
            Values to evaluate at. If None, use the data t values.

        Returns
        -------
        ndarray
            Model prediction
        """
        if self.result is None:
            raise ValueError("No fit result available. Run fit() first.")

        if t is None:
            t = self.t
        return get_model(self.result.model)(np.asarray(t, dtype=float), *self.result.params)

    def get_statistics(self):
        """
        Summary of the last fit.

        Returns
        -------
        summary : dict
            Status, evaluation count, residual norm and the solver's own
            goodness-of-fit figures (see summarize_fit)
        """
        if self.result is None:
            raise ValueError("No fit result available. Run fit() first.")

        return summarize_fit(self.result)

    def get_fit_report(self):
        """
        Get detailed fit report.

        Returns
        -------
        str
            Fit report string
        """
        if self.result is None:
            raise ValueError("No fit result available. Run fit() first.")

        report = format_summary(self.get_statistics())
        report += "\n"

        if self.result.lmfit_result is None:
            report += "Initial parameters:\n"
            for i, value in enumerate(self.result.initial):
                report += f"  - p{i}: {value:.6g}\n"
            return report

        report += "\n"
        report += self.result.lmfit_result.fit_report()
        return report
