import unittest
from unittest import mock

from frontend.ui import forms
from frontend.ui.forms import DEFAULT_SAMPLE_STEPS, SliderBounds, render_comparison_form
from services.comparison import CycleConfiguration


def _echo_default(label, **kwargs):
    return kwargs["value"]


class ComparisonFormTests(unittest.TestCase):
    def _patched_streamlit(self, slider_overrides=None):
        overrides = slider_overrides or {}
        st_mock = mock.MagicMock()
        st_mock.slider.side_effect = lambda label, **kwargs: overrides.get(kwargs["key"], kwargs["value"])
        st_mock.number_input.side_effect = _echo_default
        return mock.patch.object(forms, "st", st_mock), st_mock

    def test_defaults_produce_frozen_snapshot(self) -> None:
        patcher, st_mock = self._patched_streamlit()
        with patcher:
            result = render_comparison_form()

        self.assertEqual(result.config, CycleConfiguration())
        self.assertEqual((result.model_a.k, result.model_a.a), (200.0, 1.0))
        self.assertEqual((result.model_b.k, result.model_b.a), (80.0, 0.5))
        self.assertEqual(result.sample_steps, DEFAULT_SAMPLE_STEPS)
        self.assertEqual(result.validation_warnings, [])
        self.assertEqual(st_mock.slider.call_count, 5)

    def test_slider_ranges_follow_bounds(self) -> None:
        patcher, st_mock = self._patched_streamlit()
        with patcher:
            render_comparison_form()

        ranges = {
            call.kwargs["key"]: (call.kwargs["min_value"], call.kwargs["max_value"], call.kwargs["step"])
            for call in st_mock.slider.call_args_list
        }
        self.assertEqual(ranges["cycle_time_h"], (1.0, 10.0, 0.5))
        self.assertEqual(ranges["model_a_k"], (10.0, 500.0, 10.0))
        self.assertEqual(ranges["model_b_a"], (0.1, 5.0, 0.1))

    def test_defaults_clamped_into_custom_bounds(self) -> None:
        patcher, _ = self._patched_streamlit()
        bounds = SliderBounds(k_min=10.0, k_max=100.0, a_min=2.0, a_max=3.0)
        with patcher:
            result = render_comparison_form(bounds)

        self.assertEqual(result.model_a.k, 100.0)
        self.assertEqual(result.model_b.a, 2.0)

    def test_sample_steps_passed_through_separately_from_bounds(self) -> None:
        patcher, _ = self._patched_streamlit()
        with patcher:
            result = render_comparison_form(SliderBounds(), sample_steps=120)

        self.assertEqual(result.sample_steps, 120)
        self.assertFalse(hasattr(SliderBounds(), "sample_steps"))

    def test_domain_warnings_collected(self) -> None:
        patcher, _ = self._patched_streamlit({"model_b_a": 0.0})
        with patcher:
            result = render_comparison_form()

        self.assertEqual(len(result.validation_warnings), 1)
        self.assertTrue(result.validation_warnings[0].startswith("Model B:"))


if __name__ == "__main__":
    unittest.main()
