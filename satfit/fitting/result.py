"""Fit outcome types."""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Optional, Tuple


class FitStatus(Enum):
    """How a fit ended."""

    CONVERGED = 'converged'
    MAX_ITERATIONS_REACHED = 'max_iterations_reached'
    NUMERICAL_FAILURE = 'numerical_failure'
    INVALID_INPUT = 'invalid_input'


# MINPACK lmdif info code for "number of calls has reached maxfev"
_IER_MAXFEV = 5


@dataclass
class FitResult:
    """
    Result of one model fit.

    ``nfev`` counts model evaluations, finite-difference Jacobian columns
    included. MINPACK ``lmdif`` does not report an iteration count, so
    ``nfev`` is the closest measure of solver effort.
    """

    model: str
    status: FitStatus
    params: Tuple[float, ...]
    initial: Tuple[float, ...]
    message: str = ''
    nfev: int = 0
    chisqr: float = math.nan
    lmfit_result: Optional[Any] = field(default=None, repr=False)

    @property
    def success(self) -> bool:
        return self.status is FitStatus.CONVERGED

    @property
    def residual_norm(self) -> float:
        """Euclidean norm of the final residual vector."""
        return math.sqrt(self.chisqr) if self.chisqr >= 0 else math.nan


def classify_result(result) -> FitStatus:
    """Map an lmfit result onto a FitStatus."""
    ier = getattr(result, 'ier', None)
    if getattr(result, 'aborted', False) or ier == _IER_MAXFEV:
        return FitStatus.MAX_ITERATIONS_REACHED
    if result.success and all(math.isfinite(p.value) for p in result.params.values()):
        return FitStatus.CONVERGED
    return FitStatus.NUMERICAL_FAILURE
