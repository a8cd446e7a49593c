"""PDF rendering helpers for the DecayLab comparison page.

These utilities keep the one-page snapshot layout in one place so the
download handler does not duplicate card or chart drawing.
"""

import math
from typing import List, Tuple

import pandas as pd
from fpdf import FPDF

from services.comparison import WINNER_A, WINNER_B, ComparisonResult, CycleConfiguration, ModelParameters

COLOR_A = (37, 99, 235)
COLOR_B = (5, 150, 105)


def _draw_metric_card(
    pdf: FPDF,
    x: float,
    y: float,
    w: float,
    h: float,
    title: str,
    value: str,
    subtitle: str,
    fill_rgb: Tuple[int, int, int],
) -> None:
    pdf.set_fill_color(*fill_rgb)
    pdf.set_draw_color(230, 232, 235)
    pdf.rect(x, y, w, h, style="DF")
    pdf.set_xy(x + 2, y + 2)
    pdf.set_text_color(50, 50, 50)
    pdf.set_font("Helvetica", "B", 10)
    pdf.cell(w - 4, 5, title, ln=1)

    pdf.set_xy(x + 2, y + 9)
    pdf.set_font("Helvetica", "", 13)
    pdf.set_text_color(15, 15, 15)
    pdf.cell(w - 4, 7, value, ln=1)

    pdf.set_xy(x + 2, y + h - 6)
    pdf.set_font("Helvetica", "", 8)
    pdf.set_text_color(80, 80, 80)
    pdf.cell(w - 4, 4, subtitle)
    pdf.set_text_color(0, 0, 0)


def _draw_sparkline(
    pdf: FPDF,
    x: float,
    y: float,
    w: float,
    h: float,
    series: List[Tuple[str, List[float], Tuple[int, int, int]]],
    y_label: str,
) -> None:
    pdf.set_draw_color(230, 232, 235)
    pdf.rect(x, y, w, h)
    pdf.set_font("Helvetica", "", 8)
    pdf.set_xy(x, y - 5)
    pdf.cell(w, 4, y_label)

    finite_values = [v for _, vals, _ in series for v in vals if math.isfinite(v)]
    if not finite_values:
        return

    min_v = min(finite_values)
    max_v = max(finite_values)
    span = max(1e-9, max_v - min_v)

    for label, vals, color in series:
        if len(vals) < 2:
            continue
        pdf.set_draw_color(*color)
        step_x = w / max(1, len(vals) - 1)
        points = [
            (x + idx * step_x, y + h - ((val - min_v) / span * h))
            for idx, val in enumerate(vals)
            if math.isfinite(val)
        ]
        for i in range(len(points) - 1):
            pdf.line(points[i][0], points[i][1], points[i + 1][0], points[i + 1][1])
        if points:
            pdf.set_xy(points[-1][0] - 8, points[-1][1] - 3)
            pdf.cell(16, 4, label, align="C")
    pdf.set_draw_color(0, 0, 0)


def _draw_section_header(pdf: FPDF, title: str, margin: float, usable_width: float) -> None:
    pdf.set_font("Helvetica", "B", 12)
    pdf.set_text_color(20, 20, 20)
    pdf.cell(0, 7, title, ln=1)
    pdf.set_draw_color(220, 223, 228)
    pdf.line(margin, pdf.get_y(), margin + usable_width, pdf.get_y())
    pdf.ln(2)


def _fmt(val: float, fmt: str = ",.2f", suffix: str = "") -> str:
    return f"{val:{fmt}}{suffix}" if math.isfinite(val) else "n/a"


def _model_name(model: ModelParameters, which: str) -> str:
    return model.label or f"Model {which}"


def build_pdf_summary(
    config: CycleConfiguration,
    model_a: ModelParameters,
    model_b: ModelParameters,
    result: ComparisonResult,
    samples: pd.DataFrame,
) -> bytes:
    """Return a one-page PDF with inputs, per-model cards and the power curves."""

    pdf = FPDF(orientation="P", unit="mm", format="A4")
    pdf.set_auto_page_break(auto=True, margin=12)
    pdf.add_page()
    margin = 12.0
    usable_width = pdf.w - 2 * margin
    pdf.set_left_margin(margin)
    pdf.set_right_margin(margin)

    pdf.set_font("Helvetica", "B", 16)
    pdf.cell(0, 10, "DecayLab - model comparison snapshot", ln=1)
    pdf.set_font("Helvetica", "", 9)
    pdf.set_text_color(80, 80, 80)
    pdf.cell(
        0,
        5,
        f"Cycle time {config.cycle_time_h:g} h | energy cost {config.cost_per_kwh:,.2f} per kWh | P(t) = k*t*exp(-a*t)",
        ln=1,
    )
    pdf.set_text_color(0, 0, 0)
    pdf.ln(3)

    _draw_section_header(pdf, "Per-model results", margin, usable_width)
    card_w = (usable_width - 4) / 3
    card_h = 22.0
    rows = (
        (WINNER_A, model_a, result.energy_a_wh, result.cost_a, result.peak_a, (232, 240, 254)),
        (WINNER_B, model_b, result.energy_b_wh, result.cost_b, result.peak_b, (230, 246, 240)),
    )
    for which, model, energy, cost, peak, fill in rows:
        y = pdf.get_y()
        subtitle = f"{_model_name(model, which)} (k={model.k:g}, a={model.a:g})"
        _draw_metric_card(pdf, margin, y, card_w, card_h, "Cycle energy", _fmt(energy, suffix=" Wh"), subtitle, fill)
        _draw_metric_card(pdf, margin + card_w + 2, y, card_w, card_h, "Cycle cost", _fmt(cost), subtitle, fill)
        _draw_metric_card(
            pdf,
            margin + 2 * (card_w + 2),
            y,
            card_w,
            card_h,
            "Peak power",
            f"{_fmt(peak.power, ',.1f', ' W')} @ {_fmt(peak.time, ',.2f', ' h')}",
            subtitle,
            fill,
        )
        pdf.set_xy(margin, y + card_h + 3)

    pdf.ln(2)
    _draw_section_header(pdf, "Verdict", margin, usable_width)
    pdf.set_font("Helvetica", "", 10)
    if math.isfinite(result.cost_a) and math.isfinite(result.cost_b):
        winner_model = model_a if result.winner == WINNER_A else model_b
        verdict = (
            f"Recommended: {_model_name(winner_model, result.winner)}, "
            f"saving {_fmt(result.savings_pct, ',.1f', '%')} of the cycle cost."
        )
    else:
        verdict = "No recommendation: costs are not finite for these parameters."
    pdf.multi_cell(0, 5, verdict)
    pdf.ln(8)

    _draw_section_header(pdf, "Power curves", margin, usable_width)
    chart_y = pdf.get_y() + 6
    _draw_sparkline(
        pdf,
        margin,
        chart_y,
        usable_width,
        60,
        [
            ("A", samples["power_a_w"].astype(float).tolist(), COLOR_A),
            ("B", samples["power_b_w"].astype(float).tolist(), COLOR_B),
        ],
        f"Power (W) over 0-{config.cycle_time_h:g} h",
    )

    pdf_bytes = pdf.output(dest="S")
    return pdf_bytes.encode("latin-1") if isinstance(pdf_bytes, str) else bytes(pdf_bytes)
