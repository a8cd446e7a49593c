# app.py: DecayLab, two-model exponential-decay power comparison
# - Power curves P(t) = k·t·e^(-a·t) for models A and B over one cycle
# - Closed-form cycle energy, cost, peak and winner verdict
# - Cycle-time sweep, CSV/JSON/PDF downloads

import logging

import streamlit as st

from frontend.ui.charts import build_cycle_sweep_chart, build_power_curve_chart, prepare_peak_markers
from frontend.ui.forms import DEFAULT_BOUNDS, render_comparison_form
from frontend.ui.metrics import render_comparison_metrics, render_verdict
from frontend.ui.pdf import build_pdf_summary
from frontend.ui.rendering import render_formatted_dataframe
from services.comparison import WINNER_A, WINNER_B, build_sample_points, compare_models
from services.cycle_sweeps import find_winner_changes, generate_values, sweep_cycle_times
from utils import comparison_to_json, dataframe_to_csv_bytes
from utils.ui_layout import init_page_layout


def run_app():
    render_layout = init_page_layout(
        page_title="DecayLab",
        main_title="DecayLab: power model comparison",
        description="Compare two exponential-decay power models over one cycle: energy, cost and peak.",
    )
    render_layout()

    with st.expander("Help & Guide (click to open)", expanded=False):
        st.markdown("""
    ### How it works
    - Each model draws power **P(t) = k·t·e^(−a·t)** (W, with t in hours).
    - Cycle energy is the exact integral of P(t) over **[0, T]**, in Wh.
    - Cost = energy (kWh) × price per kWh. The cheaper model is recommended.
    - Peak power occurs at **t = 1/a**; peaks after the cycle ends are not drawn.

    ### Tips
    - Raise **a** to make a model peak earlier and decay faster.
    - Use the cycle-time sweep below to see where the recommendation flips.
    """)

    form = render_comparison_form()
    for message in form.validation_warnings:
        st.warning(message)

    config, model_a, model_b = form.config, form.model_a, form.model_b
    result = compare_models(config, model_a, model_b)
    samples = build_sample_points(config, model_a, model_b, steps=form.sample_steps)

    render_verdict(result, model_a, model_b)

    st.subheader("Power curves")
    peaks = prepare_peak_markers(
        config.cycle_time_h,
        {WINNER_A: result.peak_a, WINNER_B: result.peak_b},
        {WINNER_A: model_a, WINNER_B: model_b},
    )
    st.altair_chart(build_power_curve_chart(samples, peaks, model_a, model_b), use_container_width=True)
    st.caption("Shaded areas: instantaneous power per model. Diamonds: peak power inside the cycle.")

    st.subheader("Cycle summary")
    render_comparison_metrics(result, model_a, model_b)

    st.markdown("---")
    with st.expander("Cycle-time sweep", expanded=False):
        sweep_steps = st.slider("Sweep points", min_value=2, max_value=37, value=19, step=1)
        sweep_df = sweep_cycle_times(
            config,
            model_a,
            model_b,
            generate_values(DEFAULT_BOUNDS.cycle_time_min_h, DEFAULT_BOUNDS.cycle_time_max_h, sweep_steps),
        )
        st.altair_chart(build_cycle_sweep_chart(sweep_df, model_a, model_b), use_container_width=True)
        changes = find_winner_changes(sweep_df)
        if changes:
            st.info("Recommendation flips at cycle time(s): " + ", ".join(f"{t:g} h" for t in changes))
        else:
            st.caption("The recommended model is the same across the swept cycle times.")
        render_formatted_dataframe(
            sweep_df,
            {
                "cycle_time_h": "{:.2f}",
                "energy_a_wh": "{:,.2f}",
                "energy_b_wh": "{:,.2f}",
                "cost_a": "{:,.2f}",
                "cost_b": "{:,.2f}",
                "savings_pct": "{:.1f}%",
            },
        )
        st.download_button(
            "Download cycle-time sweep (CSV)",
            dataframe_to_csv_bytes(sweep_df),
            file_name="decaylab_cycle_sweep.csv",
            mime="text/csv",
        )

    # ---------- Downloads ----------
    st.subheader("Downloads")
    st.download_button(
        "Download comparison (JSON)",
        comparison_to_json(config, model_a, model_b, result).encode("utf-8"),
        file_name="decaylab_comparison.json",
        mime="application/json",
    )
    st.download_button(
        "Download sampled power curves (CSV)",
        dataframe_to_csv_bytes(samples),
        file_name="decaylab_power_curves.csv",
        mime="text/csv",
    )

    pdf_bytes = None
    try:
        pdf_bytes = build_pdf_summary(config, model_a, model_b, result, samples)
    except Exception as exc:  # noqa: BLE001
        logging.getLogger(__name__).warning("PDF snapshot failed: %s", exc)
        st.warning(f"PDF snapshot unavailable: {exc}")

    if pdf_bytes:
        st.download_button(
            "Download brief PDF snapshot",
            pdf_bytes,
            file_name="decaylab_snapshot.pdf",
            mime="application/pdf",
        )


if __name__ == "__main__":
    run_app()
