from __future__ import annotations

import importlib.util
import math
from pathlib import Path
from types import ModuleType

from pytest import CaptureFixture

from tests.utils import write_dictionary

EXAMPLE_PATH = Path(__file__).resolve().parents[1] / "examples" / "build_prefix_dictionary.py"


def _load_example() -> ModuleType:
    spec = importlib.util.spec_from_file_location("build_prefix_dictionary", EXAMPLE_PATH)
    assert spec is not None and spec.loader is not None
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def test_prefix_example_skips_zero_frequency_prefixes(
    tmp_path: Path, capsys: CaptureFixture[str]
):
    """Small dictionaries only rank real terms, never the 0.0 prefix placeholders."""
    example = _load_example()
    dict_path = write_dictionary(tmp_path / "dict.txt", ["ab 5", "cd 3"])

    example.main([str(dict_path)])

    lines = capsys.readouterr().out.splitlines()
    assert lines[-2] == f"ab\t{math.log(5 / 8):.4f}"
    assert lines[-1] == f"cd\t{math.log(3 / 8):.4f}"


def test_prefix_example_total_replaces_repeated_terms():
    example = _load_example()
    prefix_dict = example.PrefixDictionary()
    prefix_dict.load(
        [example.Token("ab", 5.0), example.Token("cd", 3.0), example.Token("ab", 2.0)]
    )

    assert prefix_dict.total == 5.0
    assert prefix_dict.freq == {"a": 0.0, "ab": 2.0, "c": 0.0, "cd": 3.0}
    assert [word for word, _ in prefix_dict.top_log_probabilities()] == ["cd", "ab"]
