"""Export helpers for sampled curves, sweeps and comparison snapshots."""

from __future__ import annotations

import json
import math
from dataclasses import asdict
from typing import Any, Dict

import pandas as pd

from services.comparison import ComparisonResult, CycleConfiguration, ModelParameters


def _finite_or_none(value: Any) -> Any:
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {key: _finite_or_none(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_finite_or_none(item) for item in value]
    return value


def dataframe_to_csv_bytes(df: pd.DataFrame) -> bytes:
    """Encode a dataframe as UTF-8 CSV for ``st.download_button``."""

    return df.to_csv(index=False).encode("utf-8")


def comparison_to_dict(
    config: CycleConfiguration,
    model_a: ModelParameters,
    model_b: ModelParameters,
    result: ComparisonResult,
) -> Dict[str, Any]:
    """Return inputs and results as a JSON-safe dict (non-finite floats become None)."""

    payload = {
        "config": asdict(config),
        "model_a": asdict(model_a),
        "model_b": asdict(model_b),
        "result": asdict(result),
    }
    return _finite_or_none(payload)


def comparison_to_json(
    config: CycleConfiguration,
    model_a: ModelParameters,
    model_b: ModelParameters,
    result: ComparisonResult,
) -> str:
    return json.dumps(comparison_to_dict(config, model_a, model_b, result), indent=2)
