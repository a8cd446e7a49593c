from __future__ import annotations

import logging
import math
import os
from typing import Any, Dict, List, Optional

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, model_validator

from services.comparison import (
    DEFAULT_MODEL_A,
    DEFAULT_MODEL_B,
    CycleConfiguration,
    ModelParameters,
    build_sample_points,
    compare_models,
)
from services.power_model import (
    ModelDomainError,
    find_peak,
    interval_energy,
    sample_power_curve,
    validate_model_parameters,
)
from utils.io import comparison_to_dict

_DEFAULT_CFG = CycleConfiguration()
_MAX_STEPS = 10_000

logger = logging.getLogger(__name__)


class ModelPayload(BaseModel):
    """Pydantic mirror of :class:`ModelParameters` for FastAPI requests."""

    k: float
    a: float
    label: Optional[str] = None

    def build(self) -> ModelParameters:
        """Return validated :class:`ModelParameters`; domain errors become HTTP 400."""

        try:
            validate_model_parameters(self.k, self.a)
        except ModelDomainError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return ModelParameters(k=self.k, a=self.a, label=self.label or "")


class CycleConfigPayload(BaseModel):
    cycle_time_h: float = Field(_DEFAULT_CFG.cycle_time_h, gt=0, allow_inf_nan=False)
    cost_per_kwh: float = Field(_DEFAULT_CFG.cost_per_kwh, gt=0, allow_inf_nan=False)

    def build(self) -> CycleConfiguration:
        return CycleConfiguration(cycle_time_h=self.cycle_time_h, cost_per_kwh=self.cost_per_kwh)


def _default_model_a() -> ModelPayload:
    return ModelPayload(k=DEFAULT_MODEL_A.k, a=DEFAULT_MODEL_A.a, label=DEFAULT_MODEL_A.label)


def _default_model_b() -> ModelPayload:
    return ModelPayload(k=DEFAULT_MODEL_B.k, a=DEFAULT_MODEL_B.a, label=DEFAULT_MODEL_B.label)


class PowerRequest(BaseModel):
    model: ModelPayload = Field(default_factory=_default_model_a)
    cycle_time_h: float = Field(_DEFAULT_CFG.cycle_time_h, gt=0, allow_inf_nan=False)
    steps: int = Field(50, ge=1, le=_MAX_STEPS)


class EnergyRequest(BaseModel):
    model: ModelPayload = Field(default_factory=_default_model_a)
    cycle_time_h: float = Field(_DEFAULT_CFG.cycle_time_h, ge=0, allow_inf_nan=False)


class PeakRequest(BaseModel):
    model: ModelPayload = Field(default_factory=_default_model_a)


class CompareRequest(BaseModel):
    config: CycleConfigPayload = Field(default_factory=CycleConfigPayload)
    model_a: ModelPayload = Field(default_factory=_default_model_a)
    model_b: ModelPayload = Field(default_factory=_default_model_b)
    steps: int = Field(50, ge=1, le=_MAX_STEPS)
    include_samples: bool = True

    @model_validator(mode="after")
    def _fill_labels(self) -> "CompareRequest":
        if not self.model_a.label:
            self.model_a.label = "Model A"
        if not self.model_b.label:
            self.model_b.label = "Model B"
        return self


def _finite_list(values: Any) -> List[Optional[float]]:
    return [float(v) if math.isfinite(v) else None for v in values]


def _peak_warnings(config: CycleConfiguration, models: Dict[str, ModelParameters]) -> List[str]:
    warnings: List[str] = []
    for name, model in models.items():
        peak_time = find_peak(model.k, model.a).time
        if peak_time > config.cycle_time_h:
            warnings.append(
                f"Model {name} peaks at {peak_time:g} h, after the {config.cycle_time_h:g} h cycle ends."
            )
    return warnings


app = FastAPI(
    title="DecayLab API",
    description="Lightweight REST API for the closed-form power model outside Streamlit.",
    version="0.1.0",
)


_default_cors_origins = [
    "http://localhost:5173",
    "http://127.0.0.1:5173",
    "http://localhost:8501",
    "http://127.0.0.1:8501",
]
_allowed_origins_env = os.getenv("DECAYLAB_CORS_ORIGINS", "")
_allowed_origins = [
    origin.strip()
    for origin in _allowed_origins_env.split(",")
    if origin.strip()
] or _default_cors_origins

app.add_middleware(
    CORSMiddleware,
    allow_origins=_allowed_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> Dict[str, str]:
    """Simple liveness probe for container orchestrators."""
    return {"status": "ok"}


@app.post("/power")
def power_curve(request: PowerRequest) -> Dict[str, Any]:
    """Sample P(t) for one model over ``[0, cycle_time_h]``."""

    model = request.model.build()
    times, powers = sample_power_curve(request.cycle_time_h, model.k, model.a, request.steps)
    return {"time_h": _finite_list(times), "power_w": _finite_list(powers)}


@app.post("/energy")
def energy(request: EnergyRequest) -> Dict[str, Any]:
    """Return the closed-form cycle energy (Wh) for one model."""

    model = request.model.build()
    return {"energy_wh": _finite_list([interval_energy(request.cycle_time_h, model.k, model.a)])[0]}


@app.post("/peak")
def peak(request: PeakRequest) -> Dict[str, Any]:
    """Return the peak time (h) and power (W) for one model."""

    model = request.model.build()
    result = find_peak(model.k, model.a)
    time_h, power_w = _finite_list([result.time, result.power])
    return {"time_h": time_h, "power_w": power_w}


@app.post("/compare")
def compare(request: CompareRequest) -> Dict[str, Any]:
    """Compare both models over one cycle and return costs, peaks and the winner."""

    config = request.config.build()
    model_a = request.model_a.build()
    model_b = request.model_b.build()
    result = compare_models(config, model_a, model_b)
    logger.debug("Compared %s vs %s: winner %s", model_a.label, model_b.label, result.winner)

    response = comparison_to_dict(config, model_a, model_b, result)
    response["warnings"] = _peak_warnings(config, {"A": model_a, "B": model_b})
    if request.include_samples:
        samples = build_sample_points(config, model_a, model_b, steps=request.steps)
        response["samples"] = {column: _finite_list(samples[column]) for column in samples.columns}
    return response


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.server:app", host="0.0.0.0", port=8000, reload=False)
