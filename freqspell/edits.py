from __future__ import annotations

from typing import Callable, Iterator, List, Set, Tuple

ALPHABET = "abcdefghijklmnopqrstuvwxyz"

# Anything that maps a word to its neighbours, in a stable order.
EditFunction = Callable[[str], List[str]]


def splits(word: str) -> List[Tuple[str, str]]:
    return [(word[:i], word[i:]) for i in range(len(word) + 1)]


def ordered_edits1(word: str, alphabet: str = ALPHABET) -> List[str]:
    """
    All strings one edit away from `word`, deduplicated, in generation order:
      deletes, transposes, replaces, inserts
    Replaces and inserts are letter-major (every position for 'a', then 'b', ...).
    Replacing a letter with itself is kept, so `word` is always in the result
    when it is non-empty.
    """
    s = splits(word)
    deletes = [a + b[1:] for a, b in s if b]
    transposes = [a + b[1] + b[0] + b[2:] for a, b in s if len(b) > 1]
    replaces = [a + c + b[1:] for c in alphabet for a, b in s if b]
    inserts = [a + c + b for c in alphabet for a, b in s]
    # dict keeps first occurrence order; drop "" from deleting a 1-letter word
    return [e for e in dict.fromkeys(deletes + transposes + replaces + inserts) if e]


def edits1(word: str, alphabet: str = ALPHABET) -> Set[str]:
    return set(ordered_edits1(word, alphabet))


def edits2(word: str, alphabet: str = ALPHABET) -> Iterator[str]:
    # second generation only; repeats are left for the caller to collapse
    for e1 in ordered_edits1(word, alphabet):
        for e2 in ordered_edits1(e1, alphabet):
            yield e2


def max_edits1_size(length: int, alphabet_size: int = len(ALPHABET)) -> int:
    """Upper bound on len(edits1(w)) for a word of `length` letters."""
    return length + max(length - 1, 0) + alphabet_size * length + alphabet_size * (length + 1)
