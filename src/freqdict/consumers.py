from __future__ import annotations

from typing import Dict, Iterable, List

from .loader import DictLoader
from .models import Token


class TokenCollector(DictLoader):
    """Keeps every token in arrival order."""

    def __init__(self) -> None:
        self.tokens: List[Token] = []

    def add_token(self, token: Token) -> None:
        self.tokens.append(token)

    def load(self, tokens: Iterable[Token]) -> None:
        self.tokens.extend(tokens)


class FrequencyTable(DictLoader):
    """
    Map each term to its latest token and keep a running frequency total.

    A term seen twice keeps the later entry; the total is adjusted so it always
    equals the sum of the stored frequencies.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, Token] = {}
        self.total = 0.0

    def add_token(self, token: Token) -> None:
        previous = self._entries.get(token.text)
        if previous is not None:
            self.total -= previous.frequency
        self._entries[token.text] = token
        self.total += token.frequency

    def get(self, text: str) -> Token | None:
        return self._entries.get(text)

    def frequency(self, text: str) -> float:
        token = self._entries.get(text)
        return token.frequency if token is not None else 0.0

    def pos_counts(self) -> Dict[str, int]:
        """Count stored entries per part-of-speech tag, skipping untagged ones."""
        counts: Dict[str, int] = {}
        for token in self._entries.values():
            if token.pos:
                counts[token.pos] = counts.get(token.pos, 0) + 1
        return dict(sorted(counts.items()))

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, text: object) -> bool:
        return text in self._entries
