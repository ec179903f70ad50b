"""Streamlit-free helpers behind the story page."""

from revenue_story.engine.config.config import StoryConfig, build_config
from ui.presets import PRESETS, _stable_seed, apply_preset, build_presets_by_group
from ui.pulse import PulseState, get_pulse
from ui.validators import validate


class TestPulse:
    def test_tick_toggles(self):
        pulse = PulseState()
        assert pulse.opacity == pulse.low_opacity
        assert pulse.tick() is True
        assert pulse.opacity == pulse.high_opacity
        assert pulse.tick() is False
        assert pulse.ticks == 2

    def test_stop_drops_schedule(self):
        pulse = PulseState(period_seconds=1.5)
        assert pulse.run_every == 1.5
        pulse.tick()
        pulse.stop()
        assert pulse.run_every is None
        assert pulse.on is False
        assert pulse.tick() is False
        assert pulse.ticks == 1

        pulse.start()
        assert pulse.run_every == 1.5

    def test_owned_by_session(self):
        session = {}
        pulse = get_pulse(session)
        assert session["pulse"] is pulse
        assert get_pulse(session) is pulse
        assert get_pulse({}) is not pulse


class TestValidators:
    def test_defaults_are_clean(self):
        assert validate(StoryConfig().to_dict()) == ([], [])

    def test_errors_do_not_raise(self):
        errors, warnings = validate({"target_magnitude_share_pct": 120})
        assert len(errors) == 1
        assert "target_magnitude_share_pct" in errors[0]
        assert warnings == []

    def test_unreachable_parametric_target(self):
        errors, warnings = validate({"strategy": "parametric", "target_magnitude_share_pct": 70})
        assert errors == []
        assert any("closest shape" in w for w in warnings)

    def test_small_sample(self):
        _, warnings = validate({"count": 10})
        assert any("stepped" in w for w in warnings)

    def test_full_histogram(self):
        _, warnings = validate({"histogram_bins": 15})
        assert any("single customer" in w for w in warnings)


class TestPresets:
    def test_every_preset_builds(self):
        for name in PRESETS:
            cfg = {"seed": 1}
            apply_preset(cfg, lambda: {"months": 12}, name)
            story = build_config(cfg)
            assert "group" not in cfg
            assert story.months == 12

    def test_derived_seed_is_stable(self):
        name = "Fresh sample | 60% -> 40%"
        a, b = {}, {}
        apply_preset(a, dict, name)
        apply_preset(b, dict, name)
        assert a["seed"] == b["seed"] == _stable_seed(name)
        assert 0 <= a["seed"] <= 0xFFFFFFFF

    def test_grouping(self):
        groups = build_presets_by_group()
        assert set(groups) == {"Sampled", "Parametric"}
        assert sum(len(v) for v in groups.values()) == len(PRESETS)
