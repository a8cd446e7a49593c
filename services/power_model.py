"""Closed-form power and energy math for the exponential-decay load model.

The model describes instantaneous power draw as ``P(t) = k * t * exp(-a * t)``
with ``t`` in hours and ``P`` in watts. Energy over a cycle comes from the
analytic antiderivative, so no quadrature happens here.

The functions stay free of Streamlit/UI dependencies and never raise on odd
parameters: arithmetic runs in float64 with numpy warnings silenced, so
``a == 0`` or non-finite inputs surface as ``inf``/``nan`` for the caller to
display. Use :func:`describe_domain_issues` or
:func:`validate_model_parameters` when inputs must be checked up front.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple, Union

import numpy as np

ArrayOrFloat = Union[float, np.ndarray]


class ModelDomainError(ValueError):
    """Raised when model parameters fall outside the physically meaningful domain."""


@dataclass(frozen=True)
class PeakResult:
    """Time (h) and power (W) at the maximum of ``P(t)``.

    Both fields are arrays when :func:`find_peak` receives array parameters.
    """

    time: ArrayOrFloat
    power: ArrayOrFloat


def _to_output(value: np.ndarray) -> ArrayOrFloat:
    if np.ndim(value) == 0:
        return float(value)
    return value


def power(t: ArrayOrFloat, k: ArrayOrFloat, a: ArrayOrFloat) -> ArrayOrFloat:
    """Return ``k * t * exp(-a * t)`` in watts."""

    t_arr = np.asarray(t, dtype=float)
    with np.errstate(all="ignore"):
        value = np.asarray(k, dtype=float) * t_arr * np.exp(-np.asarray(a, dtype=float) * t_arr)
    return _to_output(value)


def energy_antiderivative(t: ArrayOrFloat, k: ArrayOrFloat, a: ArrayOrFloat) -> ArrayOrFloat:
    """Return the antiderivative ``E(t) = (-k/a) * exp(-a*t) * (t + 1/a)``.

    Only differences of this value carry meaning; see :func:`interval_energy`.
    """

    t_arr = np.asarray(t, dtype=float)
    k64 = np.asarray(k, dtype=float)
    a64 = np.asarray(a, dtype=float)
    with np.errstate(all="ignore"):
        value = (-k64 / a64) * np.exp(-a64 * t_arr) * (t_arr + 1.0 / a64)
    return _to_output(value)


def interval_energy(cycle_time: ArrayOrFloat, k: ArrayOrFloat, a: ArrayOrFloat) -> ArrayOrFloat:
    """Return the energy (Wh) delivered over ``[0, cycle_time]``.

    Evaluates the antiderivative at both bounds, which is the exact value of
    ``∫ k·t·exp(-a·t) dt`` from 0 to ``cycle_time``.
    """

    upper = np.asarray(energy_antiderivative(cycle_time, k, a), dtype=float)
    lower = np.asarray(energy_antiderivative(0.0, k, a), dtype=float)
    with np.errstate(all="ignore"):
        value = upper - lower
    return _to_output(value)


def find_peak(k: ArrayOrFloat, a: ArrayOrFloat) -> PeakResult:
    """Return the stationary point of ``P(t)``, located at ``t = 1/a``.

    It is the maximum over ``t >= 0`` only when ``a > 0``. For ``a < 0`` the
    returned point lies at negative time and is not a physical peak.
    """

    with np.errstate(all="ignore"):
        time = 1.0 / np.asarray(a, dtype=float)
    return PeakResult(time=_to_output(time), power=power(time, k, a))


def sample_power_curve(cycle_time: float, k: float, a: float, steps: int = 50) -> Tuple[np.ndarray, np.ndarray]:
    """Sample ``P(t)`` on ``steps + 1`` evenly spaced points over ``[0, cycle_time]``."""

    if int(steps) != steps or steps < 1:
        raise ValueError("steps must be a positive integer")
    times = np.linspace(0.0, float(cycle_time), int(steps) + 1)
    return times, np.asarray(power(times, k, a), dtype=float)


def describe_domain_issues(k: float, a: float) -> List[str]:
    """List reasons why ``(k, a)`` would give non-physical or non-finite results."""

    issues: List[str] = []
    if not math.isfinite(k):
        issues.append("k must be a finite number")
    if not math.isfinite(a):
        issues.append("a must be a finite number")
    elif a == 0:
        issues.append("a must be non-zero (energy and peak divide by a)")
    elif a < 0:
        issues.append("a must be positive; power grows without bound and no peak exists for a < 0")
    if math.isfinite(k) and k < 0:
        issues.append("k must be non-negative; negative k models negative power draw")
    return issues


def validate_model_parameters(k: float, a: float) -> None:
    """Raise :class:`ModelDomainError` when ``(k, a)`` is outside the model domain."""

    issues = describe_domain_issues(k, a)
    if issues:
        raise ModelDomainError(issues[0])


__all__ = [
    "ModelDomainError",
    "PeakResult",
    "describe_domain_issues",
    "energy_antiderivative",
    "find_peak",
    "interval_energy",
    "power",
    "sample_power_curve",
    "validate_model_parameters",
]
