"""Shared fixtures for the concentration engine tests."""

import textwrap

import pytest

from revenue_story.engine.runners.story_runner import generate

SCENARIO = {
    "seed": 9,
    "count": 520,
    "anchor_population_share_pct": 60,
    "target_magnitude_share_pct": 40,
    "months": 12,
    "histogram_bins": 12,
}


@pytest.fixture(autouse=True)
def plain_logs(monkeypatch):
    """No ANSI colors in captured log lines."""
    monkeypatch.setattr("revenue_story.utils.logging_utils.ENABLE_COLORS", False)


@pytest.fixture
def scenario():
    return dict(SCENARIO)


@pytest.fixture
def scenario_result(scenario):
    return generate(scenario)


@pytest.fixture
def write_config(tmp_path):
    def _write(content: str, filename: str = "config.yaml"):
        path = tmp_path / filename
        path.write_text(textwrap.dedent(content), encoding="utf-8")
        return path

    return _write
