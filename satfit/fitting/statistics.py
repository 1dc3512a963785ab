"""
Fit summaries built from what the solver returns.
"""

import math


# Figures lmfit computes from the final residual; copied as-is
_SOLVER_FIGURES = ('redchi', 'aic', 'bic', 'nfree', 'ndata', 'nvarys')


def summarize_fit(result):
    """
    Summarize a fit outcome.

    Parameters
    ----------
    result : FitResult
        Outcome of CurveFitter.fit or one of the drivers

    Returns
    -------
    summary : dict
        Termination status and message, evaluation count, final residual
        norm and, when the solver ran to the end, lmfit's reduced chi-square,
        information criteria and degrees of freedom. Nothing is re-derived
        from the data.
    """
    summary = {
        'model': result.model,
        'status': result.status.value,
        'message': result.message,
        'nfev': result.nfev,
        'chi_squared': result.chisqr,
        'residual_norm': result.residual_norm,
        'n_params': len(result.params),
    }

    lm_result = result.lmfit_result
    if lm_result is None:
        return summary

    figures = {name: getattr(lm_result, name, None) for name in _SOLVER_FIGURES}
    summary['reduced_chi_squared'] = figures['redchi']
    summary['aic'] = figures['aic']
    summary['bic'] = figures['bic']
    summary['n_data'] = figures['ndata']
    summary['dof'] = figures['nfree']
    if figures['nvarys'] is not None:
        summary['n_params'] = figures['nvarys']

    # MINPACK lmdif termination text, only present for leastsq
    lmdif_message = getattr(lm_result, 'lmdif_message', None)
    if lmdif_message:
        summary['solver_message'] = lmdif_message.strip()

    return summary


def _fmt(value, spec):
    if value is None:
        return 'n/a'
    if isinstance(value, float) and math.isnan(value):
        return 'nan'
    return format(value, spec)


def format_summary(summary):
    """
    Format a fit summary for display.

    Parameters
    ----------
    summary : dict
        Output of summarize_fit

    Returns
    -------
    str
        Multi-line summary
    """
    lines = ["=== Fit Summary ==="]
    lines.append(f"Model: {summary['model']}")
    lines.append(f"Status: {summary['status']}")
    lines.append(f"Message: {summary['message']}")
    if 'solver_message' in summary:
        lines.append(f"Solver: {summary['solver_message']}")
    lines.append(f"Function evaluations = {summary['nfev']}")
    lines.append(f"|r| = {_fmt(summary['residual_norm'], '.6e')}")
    lines.append(f"χ² = {_fmt(summary['chi_squared'], '.6e')}")
    if 'reduced_chi_squared' in summary:
        lines.append(f"Reduced χ² = {_fmt(summary['reduced_chi_squared'], '.6e')}")
        lines.append(f"AIC = {_fmt(summary['aic'], '.2f')}")
        lines.append(f"BIC = {_fmt(summary['bic'], '.2f')}")
        lines.append(f"N data = {summary['n_data']}")
        lines.append(f"Degrees of freedom = {summary['dof']}")
    lines.append(f"N parameters = {summary['n_params']}")

    return '\n'.join(lines)
