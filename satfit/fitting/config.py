"""Solver configuration for Levenberg-Marquardt fits."""

from dataclasses import dataclass, field
from typing import Optional


# Verbosity levels
QUIET = 0
SUMMARY = 1
ITERATIONS = 2


@dataclass
class SolverConfig:
    """Configuration for one least-squares fit.

    Tolerances are passed straight through to MINPACK ``lmdif`` via lmfit's
    ``leastsq`` method. The ``ftol`` and ``xtol`` defaults are tighter than
    the 1.5e-8 lmfit uses for ``leastsq`` so noise-free data is recovered to
    about 1e-6. ``gtol`` is raised from MINPACK's 0. ``max_nfev`` of None keeps
    lmfit's own limit of ``2000 * (n + 1)`` model evaluations.
    """

    ftol: float = 1e-10
    xtol: float = 1e-10
    gtol: float = 1e-10
    max_nfev: Optional[int] = None
    epsfcn: Optional[float] = None
    factor: float = 100.0
    verbose: int = QUIET

    extra_kws: dict = field(default_factory=dict)

    def __post_init__(self):
        for name in ('ftol', 'xtol', 'gtol'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        if self.max_nfev is not None and self.max_nfev < 1:
            raise ValueError("max_nfev must be a positive integer")
        if self.factor <= 0:
            raise ValueError("factor must be positive")
        if self.verbose not in (QUIET, SUMMARY, ITERATIONS):
            raise ValueError(f"verbose must be one of {QUIET}, {SUMMARY}, {ITERATIONS}")

    def fit_kws(self) -> dict:
        """Keyword arguments for scipy's leastsq."""
        kws = {
            'ftol': self.ftol,
            'xtol': self.xtol,
            'gtol': self.gtol,
            'factor': self.factor,
        }
        if self.epsfcn is not None:
            kws['epsfcn'] = self.epsfcn
        kws.update(self.extra_kws)
        return kws
