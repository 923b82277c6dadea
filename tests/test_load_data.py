from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest

from freqspell.frequency_model import train_from_text
from freqspell.load_data import iter_corpus_texts, load_corpus_csv, read_text_corpus


def test_read_text_corpus_yields_lines(tmp_path: Path):
    p = tmp_path / "big.txt"
    p.write_text("The cat sat\non the mat.\n", encoding="utf-8")
    assert list(read_text_corpus(p)) == ["The cat sat\n", "on the mat.\n"]

    model = train_from_text(iter_corpus_texts(p))
    assert model.count("the") == 3


def test_csv_corpus_reads_text_column(tmp_path: Path):
    p = tmp_path / "corpus.csv"
    pd.DataFrame({"id": [1, 2, 3], "text": ["the cat", None, "the mat"]}).to_csv(p, index=False)

    df = load_corpus_csv(p)
    assert df["text"].tolist() == ["the cat", "", "the mat"]

    model = train_from_text(iter_corpus_texts(p))
    assert model.count("the") == 3
    assert model.count("nan") == 0


def test_csv_missing_column(tmp_path: Path):
    p = tmp_path / "corpus.csv"
    pd.DataFrame({"body": ["the cat"]}).to_csv(p, index=False)
    with pytest.raises(ValueError, match="'text' column not found"):
        load_corpus_csv(p)
    assert list(iter_corpus_texts(p, text_column="body")) == ["the cat"]


def test_missing_corpus(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        list(read_text_corpus(tmp_path / "nope.txt"))
    with pytest.raises(FileNotFoundError):
        load_corpus_csv(tmp_path / "nope.csv")
