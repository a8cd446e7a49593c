from __future__ import annotations

import math

import pytest
from fastapi import HTTPException
from pydantic import ValidationError

from api.server import (
    CompareRequest,
    CycleConfigPayload,
    EnergyRequest,
    ModelPayload,
    PeakRequest,
    PowerRequest,
    compare,
    energy,
    health,
    peak,
    power_curve,
)


def test_health() -> None:
    assert health() == {"status": "ok"}


def test_compare_with_defaults() -> None:
    response = compare(CompareRequest())

    assert response["result"]["winner"] == "A"
    assert response["result"]["energy_a_wh"] == pytest.approx(200.0 - 1000.0 * math.exp(-4.0))
    assert response["result"]["peak_b"] == {"time": 2.0, "power": pytest.approx(80.0 / (0.5 * math.e))}
    assert response["config"]["cost_per_kwh"] == 160.55
    assert response["warnings"] == []
    assert len(response["samples"]["time_h"]) == 51


def test_compare_warns_when_peak_falls_after_cycle() -> None:
    request = CompareRequest(config=CycleConfigPayload(cycle_time_h=1.5), include_samples=False)
    response = compare(request)

    assert "samples" not in response
    assert len(response["warnings"]) == 1
    assert response["warnings"][0].startswith("Model B peaks at 2 h")


def test_compare_fills_missing_labels() -> None:
    request = CompareRequest(model_a=ModelPayload(k=100.0, a=2.0), model_b=ModelPayload(k=90.0, a=1.0))
    response = compare(request)

    assert response["model_a"]["label"] == "Model A"
    assert response["model_b"]["label"] == "Model B"


def test_power_energy_and_peak_endpoints() -> None:
    model = ModelPayload(k=80.0, a=0.5)

    curve = power_curve(PowerRequest(model=model, cycle_time_h=4.0, steps=4))
    assert curve["time_h"] == [0.0, 1.0, 2.0, 3.0, 4.0]
    assert curve["power_w"][0] == 0.0

    energy_response = energy(EnergyRequest(model=model, cycle_time_h=4.0))
    assert energy_response["energy_wh"] == pytest.approx(320.0 - 960.0 * math.exp(-2.0))

    peak_response = peak(PeakRequest(model=model))
    assert peak_response["time_h"] == 2.0
    assert peak_response["power_w"] == pytest.approx(160.0 / math.e)


@pytest.mark.parametrize("a", [0.0, -0.5, float("inf")])
def test_domain_errors_map_to_http_400(a: float) -> None:
    with pytest.raises(HTTPException) as excinfo:
        energy(EnergyRequest(model=ModelPayload(k=100.0, a=a)))
    assert excinfo.value.status_code == 400


def test_request_field_constraints() -> None:
    with pytest.raises(ValidationError):
        CycleConfigPayload(cycle_time_h=0.0)
    with pytest.raises(ValidationError):
        CycleConfigPayload(cost_per_kwh=-1.0)
    with pytest.raises(ValidationError):
        PowerRequest(steps=0)
