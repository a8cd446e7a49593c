"""Chart and data prep helpers for Streamlit visualizations."""

import math
from typing import Dict, Optional

import altair as alt
import numpy as np
import pandas as pd

from services.comparison import ModelParameters
from services.power_model import PeakResult

MODEL_COLORS: Dict[str, str] = {"A": "#2563eb", "B": "#059669"}


def _series_name(model: Optional[ModelParameters], which: str) -> str:
    return model.label if model is not None and model.label else f"Model {which}"


def prepare_power_curve_long(
    samples: pd.DataFrame,
    model_a: Optional[ModelParameters] = None,
    model_b: Optional[ModelParameters] = None,
) -> pd.DataFrame:
    """Melt the sampled curve into ``time_h, Model, power_w`` rows for Altair."""

    names = {"power_a_w": _series_name(model_a, "A"), "power_b_w": _series_name(model_b, "B")}
    long_df = samples.melt(
        id_vars=["time_h"],
        value_vars=["power_a_w", "power_b_w"],
        var_name="Model",
        value_name="power_w",
    )
    long_df["Model"] = long_df["Model"].replace(names)
    # Altair drops the whole layer when it meets inf values.
    long_df["power_w"] = long_df["power_w"].where(np.isfinite(long_df["power_w"]))
    return long_df


def prepare_peak_markers(
    cycle_time_h: float,
    peaks: Dict[str, PeakResult],
    models: Optional[Dict[str, ModelParameters]] = None,
) -> pd.DataFrame:
    """Return finite peaks that fall inside ``[0, cycle_time_h]``."""

    models = models or {}
    rows = []
    for which, peak in peaks.items():
        if not (math.isfinite(peak.time) and math.isfinite(peak.power)):
            continue
        if peak.time < 0 or peak.time > cycle_time_h:
            continue
        rows.append(
            {
                "Model": _series_name(models.get(which), which),
                "time_h": peak.time,
                "power_w": peak.power,
            }
        )
    return pd.DataFrame(rows, columns=["Model", "time_h", "power_w"])


def build_power_curve_chart(
    samples: pd.DataFrame,
    peak_markers: pd.DataFrame,
    model_a: Optional[ModelParameters] = None,
    model_b: Optional[ModelParameters] = None,
) -> alt.LayerChart:
    """Return the layered area chart of both power curves plus peak markers."""

    long_df = prepare_power_curve_long(samples, model_a, model_b)
    color = alt.Color(
        "Model:N",
        scale=alt.Scale(
            domain=[_series_name(model_a, "A"), _series_name(model_b, "B")],
            range=[MODEL_COLORS["A"], MODEL_COLORS["B"]],
        ),
    )
    x_time = alt.X("time_h:Q", title="Time (h)")

    areas = (
        alt.Chart(long_df)
        .mark_area(opacity=0.25, line=True)
        .encode(
            x=x_time,
            y=alt.Y("power_w:Q", title="Power (W)", stack=None),
            color=color,
            tooltip=[
                alt.Tooltip("Model:N"),
                alt.Tooltip("time_h:Q", title="Time (h)", format=".2f"),
                alt.Tooltip("power_w:Q", title="Power (W)", format=".2f"),
            ],
        )
    )
    peaks = (
        alt.Chart(peak_markers)
        .mark_point(filled=True, size=90, shape="diamond")
        .encode(
            x=x_time,
            y="power_w:Q",
            color=color,
            tooltip=[
                alt.Tooltip("Model:N"),
                alt.Tooltip("time_h:Q", title="Peak time (h)", format=".2f"),
                alt.Tooltip("power_w:Q", title="Peak power (W)", format=".2f"),
            ],
        )
    )
    return alt.layer(areas, peaks).properties(height=380)


def build_cycle_sweep_chart(
    sweep_df: pd.DataFrame,
    model_a: Optional[ModelParameters] = None,
    model_b: Optional[ModelParameters] = None,
) -> alt.Chart:
    """Return a line chart of cycle cost against cycle time for both models."""

    names = {"cost_a": _series_name(model_a, "A"), "cost_b": _series_name(model_b, "B")}
    long_df = sweep_df.melt(
        id_vars=["cycle_time_h"],
        value_vars=["cost_a", "cost_b"],
        var_name="Model",
        value_name="cost",
    )
    long_df["Model"] = long_df["Model"].replace(names)
    long_df["cost"] = long_df["cost"].where(np.isfinite(long_df["cost"]))

    return (
        alt.Chart(long_df)
        .mark_line(point=True)
        .encode(
            x=alt.X("cycle_time_h:Q", title="Cycle time (h)"),
            y=alt.Y("cost:Q", title="Cost per cycle"),
            color=alt.Color(
                "Model:N",
                scale=alt.Scale(domain=list(names.values()), range=[MODEL_COLORS["A"], MODEL_COLORS["B"]]),
            ),
            tooltip=[
                alt.Tooltip("Model:N"),
                alt.Tooltip("cycle_time_h:Q", title="Cycle time (h)", format=".1f"),
                alt.Tooltip("cost:Q", title="Cost", format=",.2f"),
            ],
        )
        .properties(height=300)
    )
