"""Unit tests for step detection."""

import math

import pytest

from pedometer.detector import (
    StepDetector,
    detect_steps,
    is_duplicate_peak,
    rates_of_change,
    threshold_model,
)


def signal_from_rates(rates):
    """Build a filtered signal whose first differences are ``rates``."""
    signal = [0.0]
    for r in rates:
        signal.append(signal[-1] + r)
    return signal


class TestRates:
    """Test first differences."""

    def test_rates(self):
        assert rates_of_change([0.0, 1.0, 3.0, 2.0]).tolist() == [1.0, 2.0, -1.0]

    def test_too_short(self):
        assert rates_of_change([]).tolist() == []
        assert rates_of_change([1.0]).tolist() == []


class TestThresholdModel:
    """Test threshold derivation."""

    def test_mean_and_population_std(self):
        model = threshold_model([1.0, 2.0, 3.0, 4.0])
        assert model.mean == 2.5
        assert model.std_dev == pytest.approx(math.sqrt(1.25))
        assert model.threshold == pytest.approx(0.75)

    def test_negative_threshold(self):
        model = threshold_model([-1.0, -3.0])
        assert model.threshold == pytest.approx(-0.6)

    def test_empty_rates(self):
        model = threshold_model([])
        assert (model.mean, model.std_dev, model.threshold) == (0.0, 0.0, 0.0)

    def test_std_does_not_move_threshold(self):
        narrow = threshold_model([1.0, 1.0, 1.0, 1.0])
        wide = threshold_model([-2.0, 4.0, -2.0, 4.0])
        assert narrow.threshold == wide.threshold
        assert narrow.std_dev != wide.std_dev


class TestDuplicatePeak:
    """Test duplicate suppression."""

    def test_no_previous_peak(self):
        assert is_duplicate_peak(2, -2, [0.0, 1.0, 1.0]) is False

    def test_close_and_similar(self):
        assert is_duplicate_peak(3, 1, [0.0, 2.0, 0.0, 2.5]) is True

    def test_close_but_different(self):
        assert is_duplicate_peak(3, 1, [0.0, 2.0, 0.0, 3.5]) is False

    def test_similar_but_far(self):
        assert is_duplicate_peak(4, 1, [0.0, 2.0, 0.0, 0.0, 2.5]) is False


class TestStepDetector:
    """Test the peak scan and distance."""

    def test_empty_signal(self):
        result = detect_steps([], stride=74.0)
        assert result.steps == 0
        assert result.distance == 0.0
        assert result.rates == []

    def test_single_value(self):
        assert detect_steps([5.0], stride=74.0).steps == 0

    def test_two_values(self):
        result = detect_steps([0.0, 0.0], stride=74.0)
        assert result.steps == 0
        assert result.rates == [0.0]

    def test_boundary_rule_only_on_short_signal(self):
        result = detect_steps([0.0, 0.0, 1.0], stride=70.0)
        assert result.steps == 1
        assert result.peaks == []
        assert result.boundary_step is True
        assert result.distance == 70.0

    def test_flat_short_signal(self):
        result = detect_steps([0.0, 0.0, 0.0], stride=70.0)
        assert result.steps == 0
        assert result.boundary_step is False

    def test_two_separated_peaks(self):
        rates = [0, 5, 1, 0, 0, 0, 5, 1, 0, 0]
        result = detect_steps(signal_from_rates(rates), stride=74.0)
        assert result.rates == rates
        assert result.threshold.threshold == pytest.approx(0.36)
        assert result.peaks == [1, 6]
        assert result.boundary_step is False
        assert result.steps == 2
        assert result.distance == 148.0

    def test_spacing_suppresses_adjacent_descents(self):
        rates = [0, 5, 4, 3, 2, 1, 0, 0]
        result = detect_steps(signal_from_rates(rates), stride=1.0)
        # descending run 1..5 is only sampled every third index
        assert result.peaks == [1, 4]

    def test_boundary_step_after_scan(self):
        rates = [0, 5, 1, 0, 0, 2]
        result = detect_steps(signal_from_rates(rates), stride=1.0)
        assert result.peaks == [1]
        assert result.boundary_step is True
        assert result.steps == 2

    def test_boundary_step_blocked_by_spacing(self):
        rates = [0, 0, 5, 1, 2]
        result = detect_steps(signal_from_rates(rates), stride=1.0)
        assert result.peaks == [2]
        assert result.boundary_step is False
        assert result.steps == 1

    def test_last_two_rates_not_scanned(self):
        rates = [0, 0, 0, 0, 3, 1]
        result = detect_steps(signal_from_rates(rates), stride=1.0)
        assert result.peaks == []
        assert result.boundary_step is True
        assert result.steps == 1

    def test_negative_threshold(self):
        rates = [-1, -0.5, -2, -3, -4]
        result = detect_steps(signal_from_rates(rates), stride=1.0)
        assert result.threshold.threshold < 0
        assert result.peaks == [1]
        assert result.steps == 1

    def test_rising_signal_without_descent(self):
        rates = [1, 2, 3, 4, 5, 6]
        result = detect_steps(signal_from_rates(rates), stride=1.0)
        assert result.peaks == []
        assert result.steps == 1

    def test_deterministic(self, walk):
        from pedometer.decomposer import decompose
        from pedometer.projector import project

        filtered = project(decompose(walk))
        first = StepDetector(74.0).detect(filtered)
        second = StepDetector(74.0).detect(filtered)
        assert first == second

    @pytest.mark.parametrize("stride", [0.5, 70.0, 74.52, 123.456])
    def test_distance_is_steps_times_stride(self, stride):
        rates = [0, 5, 1, 0, 0, 0, 5, 1, 0, 0, 4]
        result = detect_steps(signal_from_rates(rates), stride=stride)
        assert result.distance == result.steps * stride
