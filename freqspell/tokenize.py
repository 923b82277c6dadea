# freqspell/tokenize.py
from __future__ import annotations

import regex as re
from typing import Iterable, Iterator, List

# Word pattern: maximal runs of ASCII letters. Matched after lowercasing,
# so uppercase input is folded first and everything else is dropped.
WORD_RE = re.compile(r"[a-z]+")


def words(text: str) -> List[str]:
    return WORD_RE.findall(text.lower())


def iter_words(texts: Iterable[str]) -> Iterator[str]:
    """
    Stream tokens chunk by chunk (lines of a file, CSV cells, ...).
    A word split across two chunks comes out as two tokens.
    """
    for t in texts:
        for tok in WORD_RE.finditer(t.lower()):
            yield tok.group(0)
