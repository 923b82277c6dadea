import unittest
from pathlib import Path

import pytest

from freqspell.spellcheck import main


@pytest.fixture
def corpus(tmp_path: Path) -> Path:
    p = tmp_path / "big.txt"
    p.write_text("the cat sat on the mat\nthe end\n", encoding="utf-8")
    return p


def test_cli_corrects_words(corpus: Path, capsys):
    main(["--corpus_path", str(corpus), "--word", "teh", "Thw", "zzzzz"])
    out = capsys.readouterr().out.splitlines()
    assert out == ["teh -> the", "Thw -> the", "zzzzz -> zzzzz"]


def test_cli_corrects_text(corpus: Path, capsys):
    main(["--corpus_path", str(corpus), "--text", "Teh cat sta."])
    assert capsys.readouterr().out.strip() == "The cat sat."


def test_cli_missing_corpus(tmp_path: Path):
    with pytest.raises(SystemExit, match="Corpus not found"):
        main(["--corpus_path", str(tmp_path / "missing.txt"), "--word", "teh"])


class TestCliArgs(unittest.TestCase):
    def test_word_or_text_required(self):
        with self.assertRaises(SystemExit):
            main(["--corpus_path", "big.txt"])

    def test_bad_cap_rejected(self):
        with self.assertRaises(SystemExit):
            main(["--corpus_path", "big.txt", "--max_edits2_len", "0", "--word", "teh"])


if __name__ == "__main__":
    unittest.main()
