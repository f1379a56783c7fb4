from __future__ import annotations

from collections import Counter
from typing import Iterable


class FrequencyTable:
    """
    Item -> purchase count.

    Built once from a token stream, then only read. Every stored count is >= 1;
    items never seen are simply absent.
    """

    def __init__(self, counts: Counter[str] | None = None) -> None:
        self._counts: Counter[str] = Counter()
        if counts:
            # Drop zero / negative entries so the ">= 1" rule always holds
            self._counts.update({k: v for k, v in counts.items() if v > 0})

    @classmethod
    def from_tokens(cls, tokens: Iterable[str]) -> "FrequencyTable":
        return cls(Counter(tokens))

    def frequency_of(self, item: str) -> int:
        # .get so a lookup never inserts the key
        return self._counts.get(item, 0)

    def all_entries(self) -> list[tuple[str, int]]:
        """Alphabetical (item, count) pairs."""
        return sorted(self._counts.items())

    def total(self) -> int:
        return sum(self._counts.values())

    def __len__(self) -> int:
        return len(self._counts)

    def __contains__(self, item: object) -> bool:
        return item in self._counts
