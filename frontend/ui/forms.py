"""Streamlit sidebar controls for the comparison inputs.

Centralizing the form setup keeps `app.run_app` focused on orchestration. The
widgets are read into frozen records on every rerun, so the rest of the app
works from an immutable snapshot instead of mutable session globals.
"""

from dataclasses import dataclass, field
from typing import List

import streamlit as st

from services.comparison import (
    DEFAULT_MODEL_A,
    DEFAULT_MODEL_B,
    CycleConfiguration,
    ModelParameters,
)
from services.power_model import describe_domain_issues


@dataclass(frozen=True)
class SliderBounds:
    """Widget ranges. These are UI conveniences; the core accepts any float."""

    cycle_time_min_h: float = 1.0
    cycle_time_max_h: float = 10.0
    cycle_time_step_h: float = 0.5
    k_min: float = 10.0
    k_max: float = 500.0
    k_step: float = 10.0
    a_min: float = 0.1
    a_max: float = 5.0
    a_step: float = 0.1


DEFAULT_BOUNDS = SliderBounds()
# Intervals for the plotted curve over [0, T].
DEFAULT_SAMPLE_STEPS = 50


@dataclass(frozen=True)
class ComparisonFormResult:
    config: CycleConfiguration
    model_a: ModelParameters
    model_b: ModelParameters
    sample_steps: int = DEFAULT_SAMPLE_STEPS
    validation_warnings: List[str] = field(default_factory=list)


def _clamp(value: float, low: float, high: float) -> float:
    return min(max(value, low), high)


def render_model_controls(
    defaults: ModelParameters,
    key_prefix: str,
    bounds: SliderBounds = DEFAULT_BOUNDS,
) -> ModelParameters:
    """Render k/a sliders for one model and return its parameters."""

    st.markdown(f"**{defaults.label}**")
    k = st.slider(
        "Constant k (amplitude)",
        min_value=bounds.k_min,
        max_value=bounds.k_max,
        value=_clamp(defaults.k, bounds.k_min, bounds.k_max),
        step=bounds.k_step,
        key=f"{key_prefix}_k",
        help="Linear scale factor on power draw.",
    )
    a = st.slider(
        "Constant a (decay)",
        min_value=bounds.a_min,
        max_value=bounds.a_max,
        value=_clamp(defaults.a, bounds.a_min, bounds.a_max),
        step=bounds.a_step,
        key=f"{key_prefix}_a",
        help="Decay rate in 1/h; the peak occurs at t = 1/a.",
    )
    return ModelParameters(k=float(k), a=float(a), label=defaults.label)


def render_comparison_form(
    bounds: SliderBounds = DEFAULT_BOUNDS,
    sample_steps: int = DEFAULT_SAMPLE_STEPS,
) -> ComparisonFormResult:
    """Render the sidebar and return an immutable snapshot of the inputs."""

    defaults = CycleConfiguration()
    with st.sidebar:
        st.header("Global settings")
        cycle_time = st.slider(
            "Cycle time (hours)",
            min_value=bounds.cycle_time_min_h,
            max_value=bounds.cycle_time_max_h,
            value=_clamp(defaults.cycle_time_h, bounds.cycle_time_min_h, bounds.cycle_time_max_h),
            step=bounds.cycle_time_step_h,
            key="cycle_time_h",
        )
        cost_per_kwh = st.number_input(
            "Energy cost ($/kWh)",
            min_value=0.01,
            value=defaults.cost_per_kwh,
            step=1.0,
            key="cost_per_kwh",
            help="Price per kWh used to turn cycle energy into cost.",
        )

        st.divider()
        st.header("Model parameters")
        model_a = render_model_controls(DEFAULT_MODEL_A, "model_a", bounds)
        model_b = render_model_controls(DEFAULT_MODEL_B, "model_b", bounds)

    warnings: List[str] = []
    for name, model in (("A", model_a), ("B", model_b)):
        warnings.extend(f"Model {name}: {issue}" for issue in describe_domain_issues(model.k, model.a))

    return ComparisonFormResult(
        config=CycleConfiguration(cycle_time_h=float(cycle_time), cost_per_kwh=float(cost_per_kwh)),
        model_a=model_a,
        model_b=model_b,
        sample_steps=sample_steps,
        validation_warnings=warnings,
    )
