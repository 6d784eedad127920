from __future__ import annotations

import os
from pathlib import Path

import pytest
from pytest import MonkeyPatch

from freqdict.errors import PathResolutionError
from freqdict.paths import resolve_dictionary_path


def test_absolute_name_is_used_verbatim(tmp_path: Path):
    name = str(tmp_path / "dicts" / ".." / "dict.txt")
    assert resolve_dictionary_path(name) == Path(name)


def test_relative_name_is_joined_to_cwd_and_normalized(
    monkeypatch: MonkeyPatch, tmp_path: Path
):
    monkeypatch.chdir(tmp_path)
    cwd = Path(os.getcwd())

    assert resolve_dictionary_path("dict.txt") == cwd / "dict.txt"
    assert resolve_dictionary_path("./data//dicts/../dict.txt") == cwd / "data" / "dict.txt"
    assert resolve_dictionary_path(Path("data") / "dict.txt") == cwd / "data" / "dict.txt"


def test_cwd_failure_raises_path_resolution_error(monkeypatch: MonkeyPatch):
    def _missing_cwd() -> str:
        raise FileNotFoundError("working directory was removed")

    monkeypatch.setattr("freqdict.paths.os.getcwd", _missing_cwd)
    with pytest.raises(PathResolutionError) as excinfo:
        resolve_dictionary_path("dict.txt")
    assert excinfo.value.name == "dict.txt"
    assert isinstance(excinfo.value.cause, FileNotFoundError)
