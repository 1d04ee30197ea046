"""Regex dialect translation and the shared pattern cache."""
from .cache import RegexCache, get_regex_cache
from .translate import PATTERN_FLAGS, convert_regex, translate

__all__ = [
    "RegexCache",
    "get_regex_cache",
    "PATTERN_FLAGS",
    "convert_regex",
    "translate",
]
