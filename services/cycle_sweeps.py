"""Cycle-time what-if sweeps for the two-model comparison.

The sweep reuses :func:`services.comparison.compare_models` for every cycle
length so the table always agrees with the headline cards.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Any, List, Sequence

import numpy as np
import pandas as pd

from services.comparison import CycleConfiguration, ModelParameters, compare_models

SWEEP_COLUMNS = (
    "cycle_time_h",
    "energy_a_wh",
    "energy_b_wh",
    "cost_a",
    "cost_b",
    "winner",
    "savings_pct",
)


def generate_values(shortest_h: float, longest_h: float, points: int) -> List[float]:
    """Return ``points`` cycle times spread evenly over ``[shortest_h, longest_h]``.

    A single point sits at the middle of the range. An empty or inverted range
    collapses to ``shortest_h`` so the sweep still has one row.
    """

    if points <= 1:
        return [float((shortest_h + longest_h) / 2.0)]
    if longest_h <= shortest_h:
        return [float(shortest_h)]
    return [float(t) for t in np.linspace(shortest_h, longest_h, int(points))]


def sweep_cycle_times(
    base_config: CycleConfiguration,
    model_a: ModelParameters,
    model_b: ModelParameters,
    cycle_times: Sequence[float],
) -> pd.DataFrame:
    """Compare both models at each cycle time and return a tidy summary table."""

    rows: List[dict[str, Any]] = []
    for cycle_time in cycle_times:
        config = replace(base_config, cycle_time_h=float(cycle_time))
        result = compare_models(config, model_a, model_b)
        rows.append(
            {
                "cycle_time_h": float(cycle_time),
                "energy_a_wh": result.energy_a_wh,
                "energy_b_wh": result.energy_b_wh,
                "cost_a": result.cost_a,
                "cost_b": result.cost_b,
                "winner": result.winner,
                "savings_pct": result.savings_pct,
            }
        )

    return pd.DataFrame(rows, columns=list(SWEEP_COLUMNS))


def find_winner_changes(sweep_df: pd.DataFrame) -> List[float]:
    """Return the cycle times where the winner differs from the previous row."""

    if sweep_df.empty:
        return []
    ordered = sweep_df.sort_values("cycle_time_h").reset_index(drop=True)
    switched = ordered["winner"].ne(ordered["winner"].shift())
    switched.iloc[0] = False
    return [float(t) for t in ordered.loc[switched, "cycle_time_h"]]


__all__ = [
    "SWEEP_COLUMNS",
    "find_winner_changes",
    "generate_values",
    "sweep_cycle_times",
]
