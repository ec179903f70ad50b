from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import yaml

from revenue_story.engine.config.config import StoryConfig, build_config

# Top-level section holding the generation settings.
STORY_SECTION = "story"


# ------------------------------------------------------------
# Public API
# ------------------------------------------------------------

def load_config(path: str | Path = "config.yaml") -> dict:
    """
    Load a config file (YAML/JSON) and normalize the story section.

    The returned dict keeps any other top-level sections as-is; cfg["story"]
    is replaced by a validated StoryConfig.
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")

    cfg = _load_any(path)
    return normalize_sections(cfg)


def load_story_config(path: str | Path = "config.yaml") -> StoryConfig:
    return load_config(path)[STORY_SECTION]


def load_story_settings(path: str | Path = "config.yaml") -> Dict[str, Any]:
    """Validated story settings as a plain dict; built-in defaults if the file is absent."""
    path = Path(path)
    if not path.exists():
        return StoryConfig().to_dict()
    return load_story_config(path).to_dict()


def normalize_sections(cfg: Dict[str, Any]) -> Dict[str, Any]:
    cfg = dict(cfg)
    section = cfg.get(STORY_SECTION)
    if section is None:
        section = {}
    if not isinstance(section, dict):
        raise KeyError(f"Invalid '{STORY_SECTION}' section in config (expected mapping)")

    cfg[STORY_SECTION] = build_config(section)
    return cfg


# ------------------------------------------------------------
# Loaders
# ------------------------------------------------------------

def _load_any(path: Path) -> dict:
    ext = path.suffix.lower()

    if ext in (".yaml", ".yml"):
        with path.open("r", encoding="utf-8") as f:
            cfg = yaml.safe_load(f) or {}
        if not isinstance(cfg, dict):
            raise ValueError("Top-level YAML config must be a mapping/object")
        return cfg

    if ext == ".json":
        with path.open("r", encoding="utf-8") as f:
            cfg = json.load(f) or {}
        if not isinstance(cfg, dict):
            raise ValueError("Top-level JSON config must be an object")
        return cfg

    # No known extension: attempt YAML then JSON
    with path.open("r", encoding="utf-8") as f:
        raw = f.read()

    try:
        cfg = yaml.safe_load(raw) or {}
        if isinstance(cfg, dict):
            return cfg
    except yaml.YAMLError:
        pass

    try:
        cfg = json.loads(raw) or {}
        if isinstance(cfg, dict):
            return cfg
    except json.JSONDecodeError as e:
        raise ValueError(f"Unable to parse config file as YAML or JSON: {path}") from e

    raise ValueError(f"Unsupported or invalid config format: {path}")
