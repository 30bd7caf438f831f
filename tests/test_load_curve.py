"""Tests for load vs. deflection curve sampling."""
import math
from dataclasses import replace

import pytest

from wood_beam_calculator.beam_analysis import analyse_board, calc_deflection
from wood_beam_calculator.config import AnalysisSettings
from wood_beam_calculator.load_curve import CurveSample, curve_to_rows, sample_curve
from wood_beam_calculator.loads import CalculationInputs, LoadType
from wood_beam_calculator.material_data import SAMANEA_SAMAN
from wood_beam_calculator.utils import InvalidInputError


def create_curve(load_type=LoadType.CENTER, sample_count=11, **geometry):
    dims = dict(length=120.0, width=60.0, thickness=3.0, load=80.0)
    dims.update(geometry)
    inputs = CalculationInputs(load_type=load_type, **dims)
    result = analyse_board(inputs, SAMANEA_SAMAN)
    return inputs, result, sample_curve(inputs, SAMANEA_SAMAN, result, sample_count)


class TestCurveShape:

    @pytest.mark.parametrize("load_type", list(LoadType))
    def test_starts_at_zero_and_ascends(self, load_type):
        """Algorithm: first sample is (0, 0), loads strictly increase."""
        _, _, samples = create_curve(load_type)
        assert samples[0].load == 0
        assert samples[0].deflection == 0.0
        loads = [s.load for s in samples]
        assert all(b > a for a, b in zip(loads, loads[1:]))

    def test_default_count(self):
        _, _, samples = create_curve()
        assert len(samples) == 11

    @pytest.mark.parametrize("count", [2, 5, 50])
    def test_custom_count(self, count):
        _, _, samples = create_curve(sample_count=count)
        assert len(samples) == count

    def test_upper_bound_is_one_and_a_half_times_safe_limit(self):
        """Algorithm: last load = round(1.5 * max_load_recommended)."""
        _, result, samples = create_curve()
        assert samples[-1].load == round(result.max_load_recommended * 1.5)

    def test_safe_limit_on_every_sample(self):
        _, result, samples = create_curve()
        assert all(s.safe_limit == result.max_load_recommended for s in samples)

    def test_deflection_increases(self):
        _, _, samples = create_curve()
        deflections = [s.deflection for s in samples]
        assert all(b > a for a, b in zip(deflections, deflections[1:]))
        assert all(math.isfinite(d) for d in deflections)


class TestCurveValues:

    @pytest.mark.parametrize("load_type", list(LoadType))
    def test_deflection_recomputed_per_sample(self, load_type):
        """Algorithm: each sample matches the forward formula at its unrounded load."""
        _, result, samples = create_curve(load_type)
        step = result.max_load_recommended * 1.5 / 10
        I = 0.6 * 0.03 ** 3 / 12
        for i, s in enumerate(samples):
            expected = calc_deflection(i * step * 9.81, 1.2, 8500e6, I, load_type) * 1000
            assert s.deflection == pytest.approx(expected)

    def test_matches_analysis_at_same_load(self):
        """Algorithm: curve deflection at a sampled load equals a full analysis at that load."""
        # 3 samples: 0, 0.75*limit, 1.5*limit
        inputs, result, samples = create_curve(sample_count=3)
        at_limit = analyse_board(replace(inputs, load=result.max_load_recommended * 0.75),
                                 SAMANEA_SAMAN)
        assert samples[1].deflection == pytest.approx(at_limit.deflection)

    def test_repeatable(self):
        """Algorithm: calling twice with identical arguments gives identical output."""
        inputs, result, first = create_curve()
        second = sample_curve(inputs, SAMANEA_SAMAN, result, 11)
        assert first == second

    def test_samples_are_immutable(self):
        _, _, samples = create_curve()
        assert isinstance(samples, tuple)
        with pytest.raises(AttributeError):
            samples[0].load = 5

    def test_small_board_keeps_loads_distinct(self):
        """Algorithm: a limit below 1 kg would round every load to 0; finer rounding keeps them apart."""
        _, result, samples = create_curve(length=500.0, width=1.0, thickness=0.1)
        assert result.max_load_recommended < 1.0
        loads = [s.load for s in samples]
        assert loads[0] == 0
        assert all(b > a for a, b in zip(loads, loads[1:]))

    def test_plot_multiplier_from_settings(self):
        inputs, result, _ = create_curve()
        settings = AnalysisSettings(plot_load_multiplier=1.0, sample_count=5)
        samples = sample_curve(inputs, SAMANEA_SAMAN, result, settings=settings)
        assert len(samples) == 5
        assert samples[-1].load == round(result.max_load_recommended)

    def test_rows(self):
        _, _, samples = create_curve(sample_count=3)
        rows = curve_to_rows(samples)
        assert len(rows) == 3
        assert set(rows[0]) == {"load", "deflection", "safe_limit"}
        assert rows[0]["load"] == 0


class TestCurveErrors:

    @pytest.mark.parametrize("limit", [math.inf, math.nan, 0.0, -5.0])
    def test_bad_safe_limit_raises(self, limit):
        inputs, result, _ = create_curve()
        bad = replace(result, max_load_recommended=limit)
        with pytest.raises(InvalidInputError, match="max_load_recommended"):
            sample_curve(inputs, SAMANEA_SAMAN, bad)

    @pytest.mark.parametrize("count", [0, 1, -3, 2.5, True])
    def test_bad_sample_count_raises(self, count):
        inputs, result, _ = create_curve()
        with pytest.raises(InvalidInputError, match="sample_count"):
            sample_curve(inputs, SAMANEA_SAMAN, result, count)

    def test_invalid_inputs_raise(self):
        inputs, result, _ = create_curve()
        with pytest.raises(InvalidInputError, match="thickness must be positive"):
            sample_curve(replace(inputs, thickness=0.0), SAMANEA_SAMAN, result)

    def test_sample_type(self):
        _, _, samples = create_curve(sample_count=2)
        assert all(isinstance(s, CurveSample) for s in samples)
