import json

import pytest

from revenue_story.utils.output_utils import format_number_short, format_pct, write_result_json


class TestFormatNumberShort:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (50, "50"),
            (204.8, "205"),
            (1342, "1.3K"),
            (2_000, "2K"),
            (999_949, "999.9K"),
            (2_500_000, "2.5M"),
            (-1_500, "-1.5K"),
        ],
    )
    def test_labels(self, value, expected):
        assert format_number_short(value) == expected

    @pytest.mark.parametrize(
        "value, expected",
        [
            (999.6, "1K"),
            (999_960, "1M"),
            (999_960_000, "1B"),
        ],
    )
    def test_rounding_rolls_over_to_next_scale(self, value, expected):
        assert format_number_short(value) == expected

    def test_format_pct(self):
        assert format_pct(39.6) == "40%"


def test_write_result_json(tmp_path, scenario_result):
    out = write_result_json(scenario_result, tmp_path / "nested" / "result.json", indent=0)
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert payload["anchorSummary"]["magnitudeSharePct"] == pytest.approx(40.0)
