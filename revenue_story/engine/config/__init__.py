from .config import StoryConfig, build_config, validate_config
from .config_loader import STORY_SECTION, load_config, load_story_config, load_story_settings

__all__ = [
    "StoryConfig",
    "build_config",
    "validate_config",
    "STORY_SECTION",
    "load_config",
    "load_story_config",
    "load_story_settings",
]
