from .runners.story_runner import generate

__all__ = ["generate"]
