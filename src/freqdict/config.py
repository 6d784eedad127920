from __future__ import annotations

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any, Mapping, MutableMapping

import yaml

from .grammar import DICT_LINE_PATTERN, LineGrammar
from .streaming import DEFAULT_MAX_LINE_LENGTH


@dataclass(slots=True)
class LoaderConfig:
    """Configuration options for loading dictionary files."""

    encoding: str = "utf-8"
    buffer_size: int = 1
    max_line_length: int = DEFAULT_MAX_LINE_LENGTH
    line_pattern: str = DICT_LINE_PATTERN

    def __post_init__(self) -> None:
        if self.buffer_size < 0:
            raise ValueError("buffer_size must be >= 0 (0 means unbounded).")
        if self.max_line_length < 0:
            raise ValueError("max_line_length must be >= 0 (0 disables the limit).")

    def build_grammar(self) -> LineGrammar:
        """Compile the configured line pattern into a grammar."""
        return LineGrammar(self.line_pattern)

    def to_dict(self) -> dict[str, Any]:
        """Return a mutable dictionary representation of the configuration."""
        return dict(asdict(self))


def config_from_dict(data: Mapping[str, Any] | None) -> LoaderConfig:
    """Build a LoaderConfig from a dictionary-like input, ignoring unknown keys."""
    if data is None:
        return LoaderConfig()
    allowed = {field.name for field in fields(LoaderConfig)}
    return LoaderConfig(**{key: data[key] for key in data if key in allowed})


def config_from_yaml(path: str | Path) -> LoaderConfig:
    """Load configuration from a YAML file."""
    contents = Path(path).read_text(encoding="utf-8")
    parsed = yaml.safe_load(contents) or {}
    if not isinstance(parsed, MutableMapping):
        raise ValueError("Configuration YAML must define a mapping.")
    return config_from_dict(parsed)


def load_config(path: str | Path | None = None) -> LoaderConfig:
    """Load configuration from YAML when provided, otherwise return defaults."""
    if path is None:
        return LoaderConfig()
    return config_from_yaml(path)
