# freqspell/load_data.py
from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pandas as pd


def _require(path: str | Path) -> Path:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Corpus not found: {path}")
    return path


def read_text_corpus(path: str | Path) -> Iterator[str]:
    """Yield a plain-text corpus (e.g. big.txt) line by line."""
    path = _require(path)
    with path.open("r", encoding="utf-8", errors="replace") as f:
        yield from f


def load_corpus_csv(path: str | Path, text_column: str = "text") -> pd.DataFrame:
    path = _require(path)
    df = pd.read_csv(path)
    if text_column not in df.columns:
        raise ValueError(f"'{text_column}' column not found. Columns: {df.columns.tolist()}")
    df[text_column] = df[text_column].fillna("").astype(str)
    return df


def iter_corpus_texts(path: str | Path, text_column: str = "text") -> Iterator[str]:
    # .csv -> one chunk per row of `text_column`, anything else -> lines
    if Path(path).suffix.lower() == ".csv":
        yield from load_corpus_csv(path, text_column=text_column)[text_column].tolist()
    else:
        yield from read_text_corpus(path)
