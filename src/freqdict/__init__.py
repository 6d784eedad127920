"""
freqdict package exports convenience helpers for library consumers.
"""

from __future__ import annotations

from .config import LoaderConfig, config_from_dict, config_from_yaml, load_config
from .errors import (
    DictionaryError,
    MalformedLineError,
    PathResolutionError,
    ResourceOpenError,
    StreamReadError,
)
from .grammar import DICT_LINE_PATTERN, LineGrammar, parse_line
from .loader import DictLoader, load_dictionary
from .models import LoadResult, ParseStats, Token
from .paths import resolve_dictionary_path
from .streaming import StreamingParser, iter_entries

__all__ = [
    "DICT_LINE_PATTERN",
    "DictLoader",
    "DictionaryError",
    "LineGrammar",
    "LoadResult",
    "LoaderConfig",
    "MalformedLineError",
    "ParseStats",
    "PathResolutionError",
    "ResourceOpenError",
    "StreamReadError",
    "StreamingParser",
    "Token",
    "config_from_dict",
    "config_from_yaml",
    "iter_entries",
    "load_config",
    "load_dictionary",
    "parse_line",
    "resolve_dictionary_path",
]

__version__ = "0.1.0"
