from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Dict, TypedDict

import typer
import yaml

from .config import LoaderConfig, load_config
from .consumers import FrequencyTable, TokenCollector
from .errors import (
    DictionaryError,
    PathResolutionError,
    ResourceOpenError,
)
from .loader import DictLoader, load_dictionary
from .models import LoadResult

app = typer.Typer(help="Word-frequency dictionary loader CLI.", no_args_is_help=True)


class InspectSummary(TypedDict):
    path: str
    lines_read: int
    tokens: int
    skipped: int
    unique_terms: int
    total_frequency: float
    pos_tags: Dict[str, int]


@app.callback()
def configure(
    log_level: str = typer.Option(
        "WARNING", "--log-level", help="Logging level (DEBUG, INFO, WARNING, ...)."
    ),
) -> None:
    """Configure logging before any command runs."""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@app.command()
def inspect(
    dictionary_path: str = typer.Option(
        ..., "--dictionary-path", "-d", help="Dictionary file (absolute or relative)."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
) -> None:
    """Load a dictionary and emit a JSON summary of its entries."""
    cfg = load_config(config)
    table = FrequencyTable()
    result = _run_load(table, dictionary_path, cfg)
    summary: InspectSummary = {
        "path": str(result.path),
        "lines_read": result.stats.lines_read,
        "tokens": result.stats.tokens,
        "skipped": result.stats.skipped,
        "unique_terms": len(table),
        "total_frequency": table.total,
        "pos_tags": table.pos_counts(),
    }
    typer.echo(json.dumps(summary, indent=2, ensure_ascii=False))


@app.command()
def dump(
    dictionary_path: str = typer.Option(
        ..., "--dictionary-path", "-d", help="Dictionary file (absolute or relative)."
    ),
    config: Path | None = typer.Option(None, "--config", "-c"),
    limit: int | None = typer.Option(
        None, "--limit", "-n", min=0, help="Print at most this many tokens."
    ),
) -> None:
    """Print parsed tokens as tab-separated text, frequency and tag."""
    cfg = load_config(config)
    collector = TokenCollector()
    _run_load(collector, dictionary_path, cfg)
    tokens = collector.tokens if limit is None else collector.tokens[:limit]
    for token in tokens:
        typer.echo(f"{token.text}\t{_format_frequency(token.frequency)}\t{token.pos}")


@app.command("print-config")
def print_config() -> None:
    """Print the default configuration as YAML."""
    typer.echo(yaml.safe_dump(LoaderConfig().to_dict(), sort_keys=False))


def main() -> None:
    app()


def _run_load(loader: DictLoader, dictionary_path: str, cfg: LoaderConfig) -> LoadResult:
    """Load the dictionary, translating failures into CLI errors."""
    try:
        return load_dictionary(loader, dictionary_path, cfg)
    except (PathResolutionError, ResourceOpenError) as exc:
        raise typer.BadParameter(str(exc), param_hint="--dictionary-path") from exc
    except DictionaryError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


def _format_frequency(value: float) -> str:
    if value.is_integer():
        return str(int(value))
    return repr(value)


if __name__ == "__main__":
    main()
