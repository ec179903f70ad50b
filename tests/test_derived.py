import pytest

from revenue_story.curves.derived import (
    HistogramModel,
    MonthlyModel,
    build_histogram,
    build_monthly,
    build_value_path,
    histogram_counts,
    max_histogram_bins,
    monthly_values,
    value_path_step,
)
from revenue_story.curves.errors import ConfigurationError


class TestMonthly:
    def test_compounding_with_decaying_rate(self):
        values = monthly_values(3)
        assert values[0] == 100.0
        assert values[1] == pytest.approx(115.0)
        assert values[2] == pytest.approx(115.0 * (1 + 0.15 * 0.92))

    def test_cumulative_share(self):
        monthly = build_monthly(12)
        shares = [m.cumulative_share_pct for m in monthly]
        assert [m.period_index for m in monthly] == list(range(1, 13))
        assert shares[0] > 0
        assert all(b > a for a, b in zip(shares, shares[1:]))
        assert shares[-1] == 100.0

    def test_single_period(self):
        assert build_monthly(1)[0].cumulative_share_pct == 100.0

    def test_flat_growth_is_linear(self):
        monthly = build_monthly(4, MonthlyModel(growth_rate=0.0))
        assert [m.cumulative_share_pct for m in monthly] == pytest.approx([25, 50, 75, 100])


class TestHistogram:
    def test_default_counts(self):
        assert histogram_counts(12) == [180, 130, 94, 68, 49, 35, 25, 18, 13, 9, 6, 4]

    def test_labels_grow_geometrically(self):
        bins = build_histogram(12)
        labels = [b.bucket_label for b in bins]
        assert labels[:3] == ["50", "80", "128"]
        assert labels[7] == "1.3K"
        assert len(set(labels)) == 12

    def test_strictly_decreasing_and_positive(self):
        counts = [b.count for b in build_histogram(12)]
        assert all(c >= 1 for c in counts)
        assert all(b < a for a, b in zip(counts, counts[1:]))

    def test_rounding_stall_steps_down(self):
        model = HistogramModel(start_count=3, count_decay=0.9)
        assert histogram_counts(3, model) == [3, 2, 1]
        assert max_histogram_bins(model) == 3

    def test_too_many_bins(self):
        model = HistogramModel(start_count=3, count_decay=0.9)
        with pytest.raises(ConfigurationError, match="at most 3 bin"):
            histogram_counts(4, model)

    def test_default_headroom(self):
        assert max_histogram_bins() == 15


class TestValuePath:
    def test_step(self):
        assert value_path_step(520) == 40
        assert value_path_step(20) == 4

    def test_samples_curve_by_coverage(self):
        population = [25.0, 50.0, 75.0, 100.0]
        share = [10.0, 20.0, 40.0, 100.0]
        path = build_value_path(population, share, 8)
        assert [p.step_index for p in path] == [1, 2]
        assert [p.population_share_pct for p in path] == [50.0, 100.0]
        assert [p.cumulative_magnitude_share_pct for p in path] == [20.0, 100.0]

    def test_too_few_customers(self):
        assert build_value_path([100.0], [100.0], 3) == ()
