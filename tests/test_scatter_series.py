from __future__ import annotations

from decimal import Decimal
import re
import unittest

import numpy as np

from luvatrix_scatter import InvalidSeries, RandomColorSource, Series, render
from luvatrix_scatter.series import random_hex_color, validate_series, validate_series_list

try:
    import pandas as pd
except Exception:  # pragma: no cover - optional dependency
    pd = None  # type: ignore[assignment]

try:
    import torch
except Exception:  # pragma: no cover - optional dependency
    torch = None  # type: ignore[assignment]


HEX_COLOR = re.compile(r"^#[0-9a-f]{6}$")


class _FixedColors:
    def __init__(self, *colors: str) -> None:
        self._colors = list(colors)
        self.calls = 0

    def next_color(self) -> str:
        color = self._colors[self.calls % len(self._colors)]
        self.calls += 1
        return color


class ScatterSeriesTests(unittest.TestCase):
    def test_valid_series_is_normalized(self) -> None:
        s = validate_series({"x": [0, 1, 2], "y": [1.5, Decimal("2.5"), np.float32(3)], "color": "red"})
        self.assertEqual(s.x.dtype, np.float64)
        self.assertEqual(s.y.tolist(), [1.5, 2.5, 3.0])
        self.assertEqual(s.color, "red")
        self.assertFalse(s.fill)
        self.assertIsNone(s.point_size)
        self.assertEqual(len(s), 3)

    def test_numpy_inputs_are_accepted(self) -> None:
        s = validate_series({"x": np.arange(4), "y": np.linspace(0.0, 1.0, 4), "color": "#000000"})
        self.assertEqual(s.x.tolist(), [0.0, 1.0, 2.0, 3.0])

    def test_length_mismatch_raises(self) -> None:
        for x, y in (([1, 2, 3], [1, 2]), ([], [1]), (np.zeros(2), np.zeros(5))):
            with self.subTest(x=x, y=y):
                with self.assertRaises(InvalidSeries):
                    validate_series({"x": x, "y": y, "color": "blue"})

    def test_missing_or_malformed_values_raise(self) -> None:
        bad = [
            {"y": [1, 2]},
            {"x": [1, 2]},
            {"x": None, "y": [1]},
            {"x": "12", "y": "34"},
            {"x": 3, "y": 4},
            {"x": [1, "2"], "y": [1, 2]},
            {"x": [1, None], "y": [1, 2]},
            {"x": [True, False], "y": [1, 2]},
            {"x": [[1, 2], [3, 4]], "y": [1, 2]},
            {"x": np.zeros((2, 2)), "y": np.zeros(2)},
            {"x": [1, float("nan")], "y": [1, 2]},
            {"x": [1, 2], "y": [1, float("inf")]},
            [1, 2],
        ]
        for raw in bad:
            with self.subTest(raw=raw):
                with self.assertRaises(InvalidSeries):
                    validate_series(raw)

    def test_fill_is_true_only_for_boolean_true(self) -> None:
        self.assertTrue(validate_series({"x": [1], "y": [1], "color": "red", "fill": True}).fill)
        for fill in (None, 1, "yes", False):
            with self.subTest(fill=fill):
                self.assertFalse(validate_series({"x": [1], "y": [1], "color": "red", "fill": fill}).fill)

    def test_point_size_override(self) -> None:
        self.assertEqual(validate_series({"x": [1], "y": [1], "color": "red", "pointSize": 5}).point_size, 5.0)
        self.assertIsNone(validate_series({"x": [1], "y": [1], "color": "red", "pointSize": 0}).point_size)
        with self.assertRaises(InvalidSeries):
            validate_series({"x": [1], "y": [1], "color": "red", "pointSize": "big"})
        with self.assertRaises(InvalidSeries):
            validate_series({"x": [1], "y": [1], "color": "red", "pointSize": -2})

    def test_missing_color_is_random_hex_and_stable(self) -> None:
        s = validate_series({"x": [1, 2], "y": [3, 4]})
        self.assertRegex(s.color, HEX_COLOR)
        first = s.color
        self.assertEqual(s.color, first)
        self.assertEqual(s.color, first)

    def test_color_source_called_once_per_series_without_color(self) -> None:
        source = _FixedColors("#111111", "#222222")
        out = validate_series_list(
            [{"x": [1], "y": [1]}, {"x": [2], "y": [2], "color": "green"}, {"x": [3], "y": [3], "color": ""}],
            color_source=source,
        )
        self.assertEqual([s.color for s in out], ["#111111", "green", "#222222"])
        self.assertEqual(source.calls, 2)

    def test_seeded_random_source_is_reproducible(self) -> None:
        a = RandomColorSource(seed=7)
        b = RandomColorSource(seed=7)
        colors = [a.next_color() for _ in range(20)]
        self.assertEqual(colors, [b.next_color() for _ in range(20)])
        for color in colors:
            self.assertRegex(color, HEX_COLOR)
        self.assertRegex(random_hex_color(), HEX_COLOR)

    def test_series_list_preserves_order_and_names_bad_index(self) -> None:
        out = validate_series_list([{"x": [1], "y": [1], "color": "a"}, {"x": [2], "y": [2], "color": "b"}])
        self.assertEqual([s.color for s in out], ["a", "b"])
        with self.assertRaisesRegex(InvalidSeries, "series 1"):
            validate_series_list([{"x": [1], "y": [1]}, {"x": [1, 2], "y": [1]}])
        with self.assertRaises(InvalidSeries):
            validate_series_list({"x": [1], "y": [1]})

    def test_series_instance_is_checked_and_keeps_color(self) -> None:
        s = Series(x=np.asarray([1.0]), y=np.asarray([2.0]), color="red", fill=True, point_size=3.0)
        checked = validate_series(s)
        self.assertEqual(checked.color, "red")
        self.assertTrue(checked.fill)
        self.assertEqual(checked.point_size, 3.0)
        self.assertEqual(checked.y.tolist(), [2.0])

    def test_series_instance_with_length_mismatch_raises(self) -> None:
        mismatched = Series(x=np.asarray([0.0, 10.0]), y=np.asarray([0.0, 10.0, 5.0]), color="red")
        with self.assertRaises(InvalidSeries):
            validate_series(mismatched)
        with self.assertRaises(InvalidSeries):
            render(None, [mismatched])

    def test_series_instance_with_plain_lists_is_coerced(self) -> None:
        s = validate_series(Series(x=[0, 1], y=[2, 3], color="red"))  # type: ignore[arg-type]
        self.assertEqual(s.x.dtype, np.float64)
        with self.assertRaises(InvalidSeries):
            validate_series(Series(x=[0, "a"], y=[2, 3], color="red"))  # type: ignore[arg-type]

    def test_non_finite_point_size_raises(self) -> None:
        for size in (float("nan"), float("inf")):
            with self.subTest(size=size):
                with self.assertRaises(InvalidSeries):
                    validate_series({"x": [1], "y": [1], "color": "red", "pointSize": size})

    def test_array_valued_options_raise_series_error(self) -> None:
        with self.assertRaises(InvalidSeries):
            validate_series({"x": [1], "y": [1], "color": "red", "pointSize": np.asarray([1, 2])})
        s = validate_series({"x": [1], "y": [1], "color": np.asarray(["a", "b"])}, color_source=_FixedColors("#abcdef"))
        self.assertEqual(s.color, "#abcdef")


@unittest.skipUnless(torch is not None, "torch not installed")
class ScatterSeriesTorchTests(unittest.TestCase):
    def test_1d_tensor_is_accepted(self) -> None:
        s = validate_series({"x": torch.tensor([0.0, 1.0, 2.0]), "y": torch.tensor([3, 4, 5]), "color": "red"})
        self.assertEqual(s.x.dtype, np.float64)
        self.assertEqual(s.y.tolist(), [3.0, 4.0, 5.0])

    def test_2d_tensor_raises(self) -> None:
        with self.assertRaises(InvalidSeries):
            validate_series({"x": torch.zeros((2, 2)), "y": torch.zeros(2), "color": "red"})

    def test_float64_tensor_is_copied(self) -> None:
        x = torch.tensor([1.0, 2.0], dtype=torch.float64)
        s = validate_series({"x": x, "y": [1, 2], "color": "red"})
        x[0] = 99.0
        self.assertEqual(s.x.tolist(), [1.0, 2.0])

    def test_non_finite_tensor_raises(self) -> None:
        with self.assertRaises(InvalidSeries):
            validate_series({"x": torch.tensor([1.0, float("nan")]), "y": [1, 2], "color": "red"})


@unittest.skipUnless(pd is not None, "pandas not installed")
class ScatterSeriesPandasTests(unittest.TestCase):
    def test_pandas_series_is_accepted(self) -> None:
        s = validate_series({"x": pd.Series([1, 2, 3]), "y": pd.Series([0.5, 1.5, 2.5]), "color": "red"})
        self.assertEqual(s.x.tolist(), [1.0, 2.0, 3.0])
        self.assertEqual(s.y.tolist(), [0.5, 1.5, 2.5])

    def test_pandas_series_with_text_raises(self) -> None:
        with self.assertRaises(InvalidSeries):
            validate_series({"x": pd.Series(["a", "b"]), "y": [1, 2], "color": "red"})


if __name__ == "__main__":
    unittest.main()
