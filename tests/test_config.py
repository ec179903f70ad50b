import json

import pytest

from revenue_story.curves.errors import ConfigurationError
from revenue_story.curves.sampler import SamplerParams
from revenue_story.engine.config.config import StoryConfig, build_config
from revenue_story.engine.config.config_loader import load_config, load_story_config, load_story_settings


# ── StoryConfig record ─────────────────────────────────────────────────


class TestBuildConfig:
    def test_defaults(self):
        cfg = build_config()
        assert cfg == StoryConfig()
        assert cfg.seed == 9
        assert cfg.count == 520
        assert cfg.anchor.population_share_pct == 60.0
        assert cfg.anchor.target_magnitude_share_pct == 40.0
        assert cfg.strategy == "piecewise"

    def test_camel_case_aliases(self):
        cfg = build_config({"anchorPopulationSharePct": 70, "targetMagnitudeSharePct": 25, "histogramBins": 5})
        assert cfg.anchor_population_share_pct == 70.0
        assert cfg.target_magnitude_share_pct == 25.0
        assert cfg.histogram_bins == 5

    def test_integral_float_accepted(self):
        assert build_config({"count": 520.0}).count == 520

    def test_nested_group(self):
        cfg = build_config({"sampler": {"jump_probability": 0.2}})
        assert cfg.sampler == SamplerParams(jump_probability=0.2)

    def test_with_overrides_ignores_none(self):
        cfg = StoryConfig().with_overrides(seed=None, count=100, strategy="parametric")
        assert cfg.seed == 9
        assert cfg.count == 100
        assert cfg.strategy == "parametric"

    def test_round_trips_through_dict(self):
        cfg = build_config({"seed": 3, "monthly_model": {"growth_rate": 0.1}})
        assert build_config(cfg.to_dict()) == cfg
        json.dumps(cfg.to_dict())

    @pytest.mark.parametrize(
        "raw, match",
        [
            ({"target_magnitude_share_pct": 120}, "target_magnitude_share_pct"),
            ({"target_magnitude_share_pct": 0}, "target_magnitude_share_pct"),
            ({"anchor_population_share_pct": 100}, "anchor_population_share_pct"),
            ({"count": 0}, "count"),
            ({"months": -1}, "months"),
            ({"histogram_bins": 0}, "histogram_bins"),
            ({"histogram_bins": 16}, "histogram_bins"),
            ({"seed": -1}, "seed"),
            ({"seed": 2**32}, "seed"),
            ({"seed": True}, "boolean"),
            ({"count": 520.5}, "integer"),
            ({"count": "many"}, "integer"),
            ({"target_magnitude_share_pct": float("nan")}, "finite"),
            ({"strategy": "spline"}, "strategy"),
            ({"colour": "blue"}, "Unknown config key"),
            ({"sampler": {"sigma": 1}}, "Unknown key"),
            ({"sampler": [1, 2]}, "mapping"),
            ({"count": 10, "Count": 1}, "Unknown config key"),
            ({"histogram_model": {"count_decay": 1.2}}, "count_decay"),
            ({"parametric": {"beta_min": 5, "beta_max": 1}}, "beta_min"),
        ],
    )
    def test_invalid_values_fail_fast(self, raw, match):
        with pytest.raises(ConfigurationError, match=match):
            build_config(raw)

    def test_alias_and_name_together(self):
        with pytest.raises(ConfigurationError, match="given twice"):
            build_config({"histogram_bins": 4, "histogramBins": 5})

    def test_not_a_mapping(self):
        with pytest.raises(ConfigurationError):
            build_config([("seed", 1)])


# ── Config files ──────────────────────────────────────────────────────


class TestConfigLoader:
    def test_loads_yaml_story_section(self, write_config):
        path = write_config("""\
            story:
              seed: 11
              count: 300
              strategy: parametric
              parametric:
                sample_points: 50
            other:
              keep: me
        """)
        cfg = load_config(path)
        story = cfg["story"]
        assert isinstance(story, StoryConfig)
        assert story.seed == 11
        assert story.count == 300
        assert story.parametric.sample_points == 50
        assert cfg["other"] == {"keep": "me"}

    def test_loads_json(self, write_config):
        path = write_config(json.dumps({"story": {"months": 6}}), "config.json")
        assert load_story_config(path).months == 6

    def test_missing_section_uses_defaults(self, write_config):
        path = write_config("other: 1\n")
        assert load_story_config(path) == StoryConfig()

    def test_no_extension_falls_back(self, write_config):
        path = write_config("story:\n  seed: 5\n", "storyconfig")
        assert load_story_config(path).seed == 5

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path / "nope.yaml")

    def test_section_must_be_mapping(self, write_config):
        path = write_config("story: [1, 2]\n")
        with pytest.raises(KeyError):
            load_config(path)

    def test_top_level_must_be_mapping(self, write_config):
        path = write_config("- 1\n- 2\n")
        with pytest.raises(ValueError):
            load_config(path)

    def test_invalid_story_value(self, write_config):
        path = write_config("story:\n  target_magnitude_share_pct: 120\n")
        with pytest.raises(ConfigurationError):
            load_config(path)

    def test_repo_config_matches_defaults(self):
        from pathlib import Path

        repo_cfg = Path(__file__).resolve().parents[1] / "config.yaml"
        assert load_story_config(repo_cfg) == StoryConfig()

    @pytest.mark.parametrize(
        "content, filename",
        [
            ("story:\n  seed: 4\n  count: 80\n", "config.yaml"),
            ('{"story": {"seed": 4, "count": 80}}', "config.json"),
            ("story:\n  seed: 4\n  count: 80\n", "storyconfig"),
        ],
    )
    def test_story_settings_any_format(self, write_config, content, filename):
        settings = load_story_settings(write_config(content, filename))
        assert settings["seed"] == 4
        assert settings["count"] == 80
        assert settings["sampler"] == StoryConfig().to_dict()["sampler"]
        assert build_config(settings) == StoryConfig(seed=4, count=80)

    def test_story_settings_default_when_absent(self, tmp_path):
        assert load_story_settings(tmp_path / "config.yaml") == StoryConfig().to_dict()

    def test_story_settings_validates(self, write_config):
        with pytest.raises(ConfigurationError):
            load_story_settings(write_config("story:\n  count: 0\n"))
