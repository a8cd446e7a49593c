"""Energy, cost and winner selection for a two-model cycle comparison.

This module stays free of Streamlit/UI dependencies so it can be reused
from the API, notebooks or tests. Every call recomputes the full result from
the current inputs; nothing is cached.
"""
from __future__ import annotations

import logging
import math
from dataclasses import dataclass

import pandas as pd

from services.power_model import (
    PeakResult,
    describe_domain_issues,
    find_peak,
    interval_energy,
    sample_power_curve,
)

WINNER_A = "A"
WINNER_B = "B"


@dataclass(frozen=True)
class CycleConfiguration:
    """Global inputs shared by both models.

    ``cycle_time_h`` is the cycle length in hours. ``cost_per_kwh`` is the
    energy price in currency per kWh (CLP by default).
    """

    cycle_time_h: float = 4.0
    cost_per_kwh: float = 160.55


@dataclass(frozen=True)
class ModelParameters:
    """Amplitude ``k`` (W/h) and decay rate ``a`` (1/h) for one load model."""

    k: float
    a: float
    label: str = ""


DEFAULT_MODEL_A = ModelParameters(k=200.0, a=1.0, label="Model A (standard server)")
DEFAULT_MODEL_B = ModelParameters(k=80.0, a=0.5, label="Model B (eco server)")


@dataclass(frozen=True)
class ComparisonResult:
    energy_a_wh: float
    energy_b_wh: float
    cost_a: float
    cost_b: float
    peak_a: PeakResult
    peak_b: PeakResult
    winner: str
    savings_pct: float


def energy_cost(energy_wh: float, cost_per_kwh: float) -> float:
    """Convert Wh to kWh and price it."""

    return (energy_wh / 1000.0) * cost_per_kwh


def select_winner(cost_a: float, cost_b: float) -> str:
    """Return the cheaper model; ties and NaN comparisons fall to B."""

    return WINNER_A if cost_a < cost_b else WINNER_B


def savings_percent(cost_a: float, cost_b: float, winner: str) -> float:
    """Percent saved by the winner relative to the loser's cost."""

    if not (math.isfinite(cost_a) and math.isfinite(cost_b)):
        return float("nan")
    winner_cost, loser_cost = (cost_a, cost_b) if winner == WINNER_A else (cost_b, cost_a)
    if loser_cost == 0:
        return float("nan")
    return (loser_cost - winner_cost) / loser_cost * 100.0


def _log_domain_issues(model: ModelParameters, name: str) -> None:
    for issue in describe_domain_issues(model.k, model.a):
        logging.getLogger(__name__).warning("Model %s outside physical domain: %s", name, issue)


def compare_models(
    config: CycleConfiguration,
    model_a: ModelParameters,
    model_b: ModelParameters,
) -> ComparisonResult:
    """Compute energy, cost and peak for both models and pick the cheaper one."""

    _log_domain_issues(model_a, WINNER_A)
    _log_domain_issues(model_b, WINNER_B)

    energy_a = float(interval_energy(config.cycle_time_h, model_a.k, model_a.a))
    energy_b = float(interval_energy(config.cycle_time_h, model_b.k, model_b.a))
    cost_a = energy_cost(energy_a, config.cost_per_kwh)
    cost_b = energy_cost(energy_b, config.cost_per_kwh)
    winner = select_winner(cost_a, cost_b)

    return ComparisonResult(
        energy_a_wh=energy_a,
        energy_b_wh=energy_b,
        cost_a=cost_a,
        cost_b=cost_b,
        peak_a=find_peak(model_a.k, model_a.a),
        peak_b=find_peak(model_b.k, model_b.a),
        winner=winner,
        savings_pct=savings_percent(cost_a, cost_b, winner),
    )


def build_sample_points(
    config: CycleConfiguration,
    model_a: ModelParameters,
    model_b: ModelParameters,
    steps: int = 50,
) -> pd.DataFrame:
    """Return the plotted curve rows (time, power A, power B) over ``[0, T]``."""

    times, power_a = sample_power_curve(config.cycle_time_h, model_a.k, model_a.a, steps)
    _, power_b = sample_power_curve(config.cycle_time_h, model_b.k, model_b.a, steps)
    return pd.DataFrame({"time_h": times, "power_a_w": power_a, "power_b_w": power_b})


__all__ = [
    "ComparisonResult",
    "CycleConfiguration",
    "DEFAULT_MODEL_A",
    "DEFAULT_MODEL_B",
    "ModelParameters",
    "WINNER_A",
    "WINNER_B",
    "build_sample_points",
    "compare_models",
    "energy_cost",
    "savings_percent",
    "select_winner",
]
