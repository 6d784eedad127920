"""
Tiny helper script showing a custom DictLoader that builds a prefix dictionary,
the structure a dictionary-based segmenter walks when building its DAG.
Pass the path of a dictionary file as the only argument.
"""

from __future__ import annotations

import math
import sys
from typing import Dict, List, Tuple

from freqdict import DictLoader, Token, load_dictionary


class PrefixDictionary(DictLoader):
    def __init__(self) -> None:
        self.freq: Dict[str, float] = {}
        self.total = 0.0

    def add_token(self, token: Token) -> None:
        # A repeated term replaces its earlier frequency in the total.
        self.total += token.frequency - self.freq.get(token.text, 0.0)
        self.freq[token.text] = token.frequency
        for end in range(1, len(token.text)):
            self.freq.setdefault(token.text[:end], 0.0)

    def top_log_probabilities(self, limit: int = 5) -> List[Tuple[str, float]]:
        """Return the most frequent terms with their log probabilities."""
        if not self.total:
            return []
        ranked = sorted(
            ((word, freq) for word, freq in self.freq.items() if freq > 0),
            key=lambda item: item[1],
            reverse=True,
        )
        return [(word, math.log(freq / self.total)) for word, freq in ranked[:limit]]


def main(argv: List[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    prefix_dict = PrefixDictionary()
    result = load_dictionary(prefix_dict, args[0])
    print(f"Loaded {result.stats.tokens} entries from {result.path}")
    print(f"Prefix dictionary size: {len(prefix_dict.freq)}")
    for word, log_prob in prefix_dict.top_log_probabilities():
        print(f"{word}\t{log_prob:.4f}")


if __name__ == "__main__":
    main()
