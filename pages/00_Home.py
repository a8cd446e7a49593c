import streamlit as st

from utils.ui_layout import init_page_layout

render_layout = init_page_layout(
    page_title="Home",
    main_title="DecayLab guide and tips",
    description="What the comparison computes and how to read the results.",
)
render_layout()

st.markdown(
    """
## Welcome to DecayLab
DecayLab compares two server power profiles that ramp up and then decay, and tells you which one is cheaper to run for one cycle.

### The model
- Instantaneous power: `P(t) = k · t · e^(−a·t)` in W, with `t` in hours.
- `k` scales the whole curve; `a` sets how fast it decays. The peak sits at `t = 1/a` with power `k / (a·e)`.
- Cycle energy is the exact integral over `[0, T]`: `E(T) − E(0)` with `E(t) = (−k/a) · e^(−a·t) · (t + 1/a)`.
- Cost per cycle = energy (kWh) × energy price.

### Run the workflow
1) Set the cycle time and the energy price in the sidebar.
2) Tune `k` and `a` for Model A and Model B.
3) Read the verdict banner, the power curves and the summary cards.
4) Open the cycle-time sweep to see whether the recommendation flips for shorter or longer cycles.
5) Download the comparison (JSON), the sampled curves (CSV) or a PDF snapshot.

### Troubleshooting and tips
- Values shown as "—" are not finite for the chosen parameters.
- The sliders keep `a` positive; the API rejects `a ≤ 0` because no physical peak exists there.
- A peak after the end of the cycle is not drawn on the chart, but it is still reported on the cards.
    """
)
