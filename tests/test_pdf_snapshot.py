from frontend.ui.pdf import build_pdf_summary
from services.comparison import (
    DEFAULT_MODEL_A,
    DEFAULT_MODEL_B,
    CycleConfiguration,
    ModelParameters,
    build_sample_points,
    compare_models,
)


def test_build_pdf_summary_returns_bytes():
    config = CycleConfiguration()
    result = compare_models(config, DEFAULT_MODEL_A, DEFAULT_MODEL_B)
    samples = build_sample_points(config, DEFAULT_MODEL_A, DEFAULT_MODEL_B)

    pdf_bytes = build_pdf_summary(config, DEFAULT_MODEL_A, DEFAULT_MODEL_B, result, samples)

    assert isinstance(pdf_bytes, bytes)
    assert pdf_bytes.startswith(b"%PDF")
    assert len(pdf_bytes) > 1000


def test_build_pdf_summary_tolerates_non_finite_results():
    config = CycleConfiguration(cycle_time_h=2.0)
    broken = ModelParameters(k=100.0, a=0.0)
    result = compare_models(config, broken, DEFAULT_MODEL_B)
    samples = build_sample_points(config, broken, DEFAULT_MODEL_B, steps=8)

    pdf_bytes = build_pdf_summary(config, broken, DEFAULT_MODEL_B, result, samples)

    assert pdf_bytes.startswith(b"%PDF")
