# simulation/analysis.py
"""
Post-Processing Analysis: Planck's Constant from the Millikan Plot

Einstein's equation, rewritten in terms of the measured stopping potential:

    V_s = (h/e)·ν − φ/e

A straight-line fit of V_s against ν therefore has slope h/e and
intercept −φ/e. With energies expressed in eV the elementary charge is
one unit, so the slope in V/Hz is numerically h in eV·s.

Usage:
    from simulation.analysis import fit_planck_constant

    result = fit_planck_constant(session.frequency_data)
    if result.is_available:
        print(result.planck_constant_eVs, result.accuracy_percent)
"""

import numpy as np
from dataclasses import dataclass
from typing import Iterable, Optional, Tuple

from scipy import stats

from utils.constants import H_EV_S, Q

STATUS_OK = 'ok'
STATUS_INSUFFICIENT = 'insufficient_data'
STATUS_NON_COMPUTABLE = 'non_computable'

# Shown wherever a non-available result would be displayed
PLACEHOLDER = '--'


@dataclass(frozen=True)
class RegressionResult:
    """
    Outcome of a Planck-constant fit.

    Numeric fields are None unless status == 'ok'.
    """

    status: str
    n_points: int
    slope_V_per_Hz: Optional[float] = None
    intercept_V: Optional[float] = None
    planck_constant_eVs: Optional[float] = None
    planck_constant_Js: Optional[float] = None
    accuracy_percent: Optional[float] = None
    work_function_eV: Optional[float] = None
    r_squared: Optional[float] = None
    slope_stderr: Optional[float] = None

    @property
    def is_available(self) -> bool:
        return self.status == STATUS_OK

    def describe(self) -> str:
        """One-line summary for logs and the CLI."""
        if self.status == STATUS_INSUFFICIENT:
            return f"h = {PLACEHOLDER} (need at least 2 points, have {self.n_points})"
        if self.status == STATUS_NON_COMPUTABLE:
            return f"h = {PLACEHOLDER} (all {self.n_points} points share one frequency)"
        return (f"h = {self.planck_constant_eVs:.3e} eV·s "
                f"({self.accuracy_percent:.1f}% of reference, "
                f"φ ≈ {self.work_function_eV:.3f} eV, n={self.n_points})")


def _as_xy(points: Iterable) -> Tuple[np.ndarray, np.ndarray]:
    """Accept FrequencyDataPoints or (frequency_Hz, stopping_potential_V) pairs."""
    xs, ys = [], []
    for p in points:
        if hasattr(p, 'frequency_Hz'):
            xs.append(p.frequency_Hz)
            ys.append(p.stopping_potential_V)
        else:
            f, v = p
            xs.append(f)
            ys.append(v)
    return np.asarray(xs, dtype=float), np.asarray(ys, dtype=float)


def fit_planck_constant(points: Iterable,
                        reference_h_eVs: float = H_EV_S) -> RegressionResult:
    """
    Least-squares fit of stopping potential against frequency.

    slope = (N·Σxy − Σx·Σy) / (N·Σx² − (Σx)²)

    evaluated in the equivalent mean-centred form Σ(x−x̄)(y−ȳ) / Σ(x−x̄)²,
    which avoids cancellation between terms of order 10²⁹.

    Args:
        points: FrequencyDataPoints or (ν [Hz], V_s [V]) pairs
        reference_h_eVs: Value the accuracy percentage is relative to

    Returns:
        RegressionResult; status 'insufficient_data' for fewer than two
        points, 'non_computable' when every frequency is identical
    """
    x, y = _as_xy(points)
    n = x.size

    if n < 2:
        return RegressionResult(status=STATUS_INSUFFICIENT, n_points=n)

    if np.ptp(x) == 0:
        return RegressionResult(status=STATUS_NON_COMPUTABLE, n_points=n)

    dx = x - x.mean()
    sxx = np.sum(dx * dx)
    if not np.isfinite(sxx) or sxx <= 0:
        return RegressionResult(status=STATUS_NON_COMPUTABLE, n_points=n)

    slope = float(np.sum(dx * (y - y.mean())) / sxx)

    # Intercept, r and slope uncertainty
    fit = stats.linregress(x, y)

    h_eVs = slope                   # slope [V/Hz] × 1 e
    h_Js = slope * Q

    return RegressionResult(
        status=STATUS_OK,
        n_points=n,
        slope_V_per_Hz=slope,
        intercept_V=float(fit.intercept),
        planck_constant_eVs=h_eVs,
        planck_constant_Js=h_Js,
        accuracy_percent=h_eVs / reference_h_eVs * 100.0,
        work_function_eV=-float(fit.intercept),
        r_squared=float(fit.rvalue ** 2),
        slope_stderr=float(fit.stderr),
    )


def stopping_potential_line(frequencies_Hz, result: RegressionResult) -> np.ndarray:
    """Fitted V_s(ν) for plotting the regression line."""
    if not result.is_available:
        raise ValueError(f"No fitted line: regression status is '{result.status}'")
    f = np.asarray(frequencies_Hz, dtype=float)
    return result.slope_V_per_Hz * f + result.intercept_V
