from __future__ import annotations

from dataclasses import dataclass
from functools import partial
from typing import Iterable, List, Optional, overload

import regex as re

from .edits import ALPHABET, EditFunction, ordered_edits1
from .frequency_model import FrequencyModel

TEXT_WORD_RE = re.compile(r"[A-Za-z]+")


@dataclass(frozen=True)
class CorrectorConfig:
    alphabet: str = ALPHABET
    # words longer than this skip the edit-2 search; None searches everything
    max_edits2_len: Optional[int] = 20
    # return a known word as-is instead of ranking it against its neighbours
    prefer_known: bool = False

    def __post_init__(self) -> None:
        if not self.alphabet:
            raise ValueError("alphabet must not be empty")
        if self.max_edits2_len is not None and self.max_edits2_len < 1:
            raise ValueError("max_edits2_len must be >= 1 or None")


@overload
def known(model: FrequencyModel, candidates: str) -> Optional[str]: ...


@overload
def known(model: FrequencyModel, candidates: Iterable[str]) -> Optional[List[str]]: ...


def known(model, candidates):
    """
    Keep the candidates present in `model`, in order and without repeats.
    Returns None (not []) when nothing survives so lookups can be chained
    with `or`. A single string gives back the string itself or None.
    """
    if isinstance(candidates, str):
        return candidates if model.contains(candidates) else None
    result = [w for w in dict.fromkeys(candidates) if model.contains(w)]
    return result or None


def known_edits2(
    model: FrequencyModel,
    word: str,
    edits: EditFunction = ordered_edits1,
) -> Optional[List[str]]:
    return known(model, (e2 for e1 in edits(word) for e2 in edits(e1)))


class Corrector:
    """
    Picks the most frequent known word within two edits of the input.

    Candidates come from the first non-empty tier of
      known edit-1 words -> known edit-2 words -> [word]
    and the highest count wins. Ties go to the candidate generated first
    (see `edits.ordered_edits1` for the order).

    The input word is not preferred on its own: a known word competes with
    its known neighbours unless `CorrectorConfig.prefer_known` is set.
    """

    def __init__(
        self,
        model: FrequencyModel,
        config: CorrectorConfig | None = None,
        edits: EditFunction | None = None,
    ):
        self.model = model
        self.config = config or CorrectorConfig()
        self.edits: EditFunction = edits or partial(ordered_edits1, alphabet=self.config.alphabet)

    def candidates(self, word: str) -> List[str]:
        found = known(self.model, self.edits(word))
        if found is None and self._edits2_allowed(word):
            found = known_edits2(self.model, word, self.edits)
        return found or [word]

    def correct(self, word: str) -> str:
        if self.config.prefer_known and known(self.model, word) is not None:
            return word
        # max() keeps the first of equal keys
        return max(self.candidates(word), key=self.model.count)

    def correct_text(self, text: str) -> str:
        """Correct each letter run in `text`, keeping everything around it."""

        def _fix(m) -> str:
            tok = m.group(0)
            best = self.correct(tok.lower())
            if len(tok) > 1 and tok.isupper():
                return best.upper()
            if tok[0].isupper():
                return best.capitalize()
            return best

        return TEXT_WORD_RE.sub(_fix, text)

    def _edits2_allowed(self, word: str) -> bool:
        limit = self.config.max_edits2_len
        return limit is None or len(word) <= limit


def correct(model: FrequencyModel, word: str) -> str:
    return Corrector(model).correct(word)
