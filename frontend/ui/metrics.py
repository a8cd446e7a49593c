"""Summary cards and verdict banner for the model comparison."""

import math
from typing import List

import streamlit as st

from frontend.ui.rendering import MetricSpec, render_metrics
from services.comparison import WINNER_A, WINNER_B, ComparisonResult, ModelParameters

MISSING = "—"


def _is_finite(value: float) -> bool:
    return value is not None and math.isfinite(value)


def _fmt_energy(value_wh: float) -> str:
    if not _is_finite(value_wh):
        return MISSING
    return f"{value_wh:,.2f} Wh"


def _fmt_currency(value: float) -> str:
    if not _is_finite(value):
        return MISSING
    return f"${value:,.2f}"


def _fmt_percent(value: float) -> str:
    if not _is_finite(value):
        return MISSING
    return f"{value:,.1f}%"


def _fmt_peak(power_w: float, time_h: float) -> str:
    if not (_is_finite(power_w) and _is_finite(time_h)):
        return MISSING
    return f"{power_w:,.1f} W @ {time_h:,.2f} h"


def build_model_metric_specs(result: ComparisonResult, model: ModelParameters, which: str) -> List[MetricSpec]:
    """Return energy, cost and peak cards for one side of the comparison."""

    if which == WINNER_A:
        energy, cost, peak = result.energy_a_wh, result.cost_a, result.peak_a
    else:
        energy, cost, peak = result.energy_b_wh, result.cost_b, result.peak_b
    name = model.label or f"Model {which}"
    return [
        MetricSpec(
            f"{name}: cycle energy",
            _fmt_energy(energy),
            help="Exact integral of P(t) over the cycle.",
            caption=f"k = {model.k:g}, a = {model.a:g}",
        ),
        MetricSpec(
            f"{name}: cycle cost",
            _fmt_currency(cost),
            help="Cycle energy in kWh multiplied by the energy price.",
        ),
        MetricSpec(
            f"{name}: peak power",
            _fmt_peak(peak.power, peak.time),
            help="Maximum of P(t), reached at t = 1/a.",
        ),
    ]


def verdict_text(result: ComparisonResult, model_a: ModelParameters, model_b: ModelParameters) -> str:
    winner_model = model_a if result.winner == WINNER_A else model_b
    name = winner_model.label or f"Model {result.winner}"
    return f"Recommended option: {name}. Saves {_fmt_percent(result.savings_pct)} in operating cost per cycle."


def render_verdict(result: ComparisonResult, model_a: ModelParameters, model_b: ModelParameters) -> None:
    """Show the winner banner; fall back to a warning when costs are not comparable."""

    if not (_is_finite(result.cost_a) and _is_finite(result.cost_b)):
        st.warning("Costs are not finite for the current parameters; no recommendation is available.")
        return
    st.success(verdict_text(result, model_a, model_b), icon="🏆")


def render_comparison_metrics(
    result: ComparisonResult,
    model_a: ModelParameters,
    model_b: ModelParameters,
) -> None:
    """Render one row of cards per model."""

    for which, model in ((WINNER_A, model_a), (WINNER_B, model_b)):
        specs = build_model_metric_specs(result, model, which)
        render_metrics(st.columns(len(specs)), specs)
