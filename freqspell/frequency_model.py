from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Iterable, Iterator, List, Mapping, Tuple

from .tokenize import iter_words, words

# Every word that enters the table starts here before its first occurrence
# is counted (add-one smoothing).
BASE_COUNT = 1


@dataclass(frozen=True)
class FrequencyModel:
    """
    Read-only word -> count table built by `train`.

    Queries never insert keys: `count` of an unseen word is 0 and the word
    stays absent, so one model can be shared between correctors and threads.
    """

    _counts: Counter = field(default_factory=Counter, repr=False)

    def contains(self, word: str) -> bool:
        return word in self._counts

    def count(self, word: str) -> int:
        return self._counts.get(word, 0)

    @property
    def counts(self) -> Mapping[str, int]:
        return MappingProxyType(self._counts)

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def items(self) -> Iterable[Tuple[str, int]]:
        return self._counts.items()

    def most_common(self, n: int | None = None) -> List[Tuple[str, int]]:
        return self._counts.most_common(n)

    def __contains__(self, word: object) -> bool:
        return word in self._counts

    def __len__(self) -> int:
        return len(self._counts)

    def __iter__(self) -> Iterator[str]:
        return iter(self._counts)

    def __repr__(self) -> str:
        return f"FrequencyModel(vocab={len(self)}, total={self.total})"


def train(tokens: Iterable[str]) -> FrequencyModel:
    counts: Counter = Counter()
    for tok in tokens:
        if tok not in counts:
            counts[tok] = BASE_COUNT
        counts[tok] += 1
    return FrequencyModel(counts)


def train_from_text(text_stream: str | Iterable[str]) -> FrequencyModel:
    """
    Build a model from raw text: one string, or an iterable of chunks such
    as an open file or `load_data.iter_corpus_texts(...)`.
    """
    if isinstance(text_stream, str):
        return train(words(text_stream))
    return train(iter_words(text_stream))
