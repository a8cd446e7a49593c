import logging
import math
import unittest

from services.comparison import (
    DEFAULT_MODEL_A,
    DEFAULT_MODEL_B,
    CycleConfiguration,
    ModelParameters,
    build_sample_points,
    compare_models,
    energy_cost,
    savings_percent,
    select_winner,
)
from services.power_model import interval_energy


class ComparisonTests(unittest.TestCase):
    def test_energy_cost_known_case(self) -> None:
        self.assertAlmostEqual(energy_cost(189.99, 160.55), 30.50, places=2)
        self.assertEqual(energy_cost(0.0, 160.55), 0.0)

    def test_default_comparison_prefers_model_a(self) -> None:
        config = CycleConfiguration()
        result = compare_models(config, DEFAULT_MODEL_A, DEFAULT_MODEL_B)

        energy_a = 200.0 - 1000.0 * math.exp(-4.0)
        energy_b = 320.0 - 960.0 * math.exp(-2.0)
        self.assertAlmostEqual(result.energy_a_wh, energy_a, places=9)
        self.assertAlmostEqual(result.energy_b_wh, energy_b, places=9)
        self.assertAlmostEqual(result.cost_a, energy_a / 1000.0 * 160.55, places=9)
        self.assertAlmostEqual(result.cost_b, energy_b / 1000.0 * 160.55, places=9)
        self.assertEqual(result.winner, "A")
        self.assertAlmostEqual(result.savings_pct, (energy_b - energy_a) / energy_b * 100.0, places=9)
        self.assertEqual(result.peak_a.time, 1.0)
        self.assertEqual(result.peak_b.time, 2.0)

    def test_short_cycle_flips_winner_to_b(self) -> None:
        config = CycleConfiguration(cycle_time_h=1.0, cost_per_kwh=100.0)
        result = compare_models(config, DEFAULT_MODEL_A, DEFAULT_MODEL_B)
        # Model A ramps faster, so it costs more in a short cycle.
        self.assertEqual(result.winner, "B")
        self.assertGreater(result.savings_pct, 0.0)

    def test_tie_goes_to_model_b(self) -> None:
        self.assertEqual(select_winner(10.0, 10.0), "B")
        self.assertEqual(select_winner(float("nan"), 10.0), "B")
        self.assertEqual(select_winner(9.0, 10.0), "A")
        self.assertEqual(savings_percent(10.0, 10.0, "B"), 0.0)

    def test_savings_relative_to_loser(self) -> None:
        self.assertAlmostEqual(savings_percent(75.0, 100.0, "A"), 25.0)
        self.assertAlmostEqual(savings_percent(100.0, 80.0, "B"), 20.0)

    def test_savings_nan_for_zero_or_non_finite_loser(self) -> None:
        self.assertTrue(math.isnan(savings_percent(0.0, 0.0, "B")))
        self.assertTrue(math.isnan(savings_percent(float("inf"), 10.0, "B")))
        self.assertTrue(math.isnan(savings_percent(float("nan"), 10.0, "B")))

    def test_degenerate_model_logs_warning_without_raising(self) -> None:
        broken = ModelParameters(k=100.0, a=0.0, label="broken")
        with self.assertLogs("services.comparison", level=logging.WARNING) as captured:
            result = compare_models(CycleConfiguration(), broken, DEFAULT_MODEL_B)

        self.assertTrue(any("non-zero" in line for line in captured.output))
        self.assertFalse(math.isfinite(result.energy_a_wh))
        self.assertFalse(math.isfinite(result.cost_a))
        self.assertEqual(result.winner, "B")
        self.assertTrue(math.isnan(result.savings_pct))

    def test_sample_points_cover_cycle(self) -> None:
        config = CycleConfiguration(cycle_time_h=6.0)
        df = build_sample_points(config, DEFAULT_MODEL_A, DEFAULT_MODEL_B, steps=12)

        self.assertEqual(list(df.columns), ["time_h", "power_a_w", "power_b_w"])
        self.assertEqual(len(df), 13)
        self.assertEqual(df["time_h"].iloc[0], 0.0)
        self.assertEqual(df["time_h"].iloc[-1], 6.0)
        self.assertEqual(df["power_a_w"].iloc[0], 0.0)
        self.assertAlmostEqual(df["power_b_w"].iloc[4], 80.0 * 2.0 * math.exp(-1.0))

    def test_comparison_matches_core_energy(self) -> None:
        model = ModelParameters(k=320.0, a=2.2)
        result = compare_models(CycleConfiguration(cycle_time_h=7.5), model, model)
        self.assertEqual(result.energy_a_wh, interval_energy(7.5, 320.0, 2.2))
        self.assertEqual(result.energy_a_wh, result.energy_b_wh)
        self.assertEqual(result.winner, "B")


if __name__ == "__main__":
    unittest.main()
