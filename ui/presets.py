import hashlib
from collections import defaultdict


def _stable_seed(key: str) -> int:
    """
    Deterministic uint32 seed from a preset name, so "fresh sample" presets
    still render the same curve every time.
    """
    h = hashlib.sha256(key.encode("utf-8")).hexdigest()
    return int(h[:8], 16)


# ------------------------------------------------------------------
# Presets are explicit and authoritative: every key listed here is
# applied on top of the base story config. A seed of None means
# "derive it from the preset name".
# ------------------------------------------------------------------

PRESETS = {
    # --------------------------------------------------------------
    # Empirical sample (piecewise rescale)
    # --------------------------------------------------------------
    "Brief | 60% of customers -> 40% of revenue": {
        "group": "Sampled",
        "seed": 9,
        "count": 520,
        "anchor_population_share_pct": 60,
        "target_magnitude_share_pct": 40,
        "strategy": "piecewise",
    },
    "Fresh sample | 60% -> 40%": {
        "group": "Sampled",
        "seed": None,
        "count": 520,
        "anchor_population_share_pct": 60,
        "target_magnitude_share_pct": 40,
        "strategy": "piecewise",
    },
    "Pareto | 80% -> 20%": {
        "group": "Sampled",
        "seed": 9,
        "count": 1_000,
        "anchor_population_share_pct": 80,
        "target_magnitude_share_pct": 20,
        "strategy": "piecewise",
    },

    # --------------------------------------------------------------
    # Closed-form curve (parametric fit)
    # --------------------------------------------------------------
    "Smooth | 60% -> 40%": {
        "group": "Parametric",
        "anchor_population_share_pct": 60,
        "target_magnitude_share_pct": 40,
        "strategy": "parametric",
    },
    "Smooth | 50% -> 15%": {
        "group": "Parametric",
        "anchor_population_share_pct": 50,
        "target_magnitude_share_pct": 15,
        "strategy": "parametric",
    },
}


def apply_preset(cfg, base_loader, preset_name: str):
    preset = PRESETS[preset_name]

    cfg.clear()
    cfg.update(base_loader())

    for key, value in preset.items():
        if key == "group":
            continue
        if key == "seed" and value is None:
            value = _stable_seed(preset_name)
        cfg[key] = value


def build_presets_by_group():
    grouped = defaultdict(dict)
    for preset_name, preset in PRESETS.items():
        grouped[preset.get("group", "Other")][preset_name] = preset_name
    return dict(grouped)
