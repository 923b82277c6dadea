from __future__ import annotations

import argparse

from .corrector import Corrector, CorrectorConfig
from .frequency_model import train_from_text
from .load_data import iter_corpus_texts


def main(argv=None):
    ap = argparse.ArgumentParser(description="Frequency-based spelling corrector over a text corpus.")
    ap.add_argument("--corpus_path", type=str, default="data/big.txt", help="Text file, or CSV with 'text' column.")
    ap.add_argument("--text_column", type=str, default="text", help="Column to read when the corpus is a CSV.")
    ap.add_argument("--max_edits2_len", type=int, default=20, help="Skip the edit-2 search for longer words.")
    ap.add_argument("--prefer_known", action="store_true", help="Return known words unchanged.")

    target = ap.add_mutually_exclusive_group(required=True)
    target.add_argument("--word", type=str, nargs="+", help="Word(s) to correct.")
    target.add_argument("--text", type=str, help="Sentence to correct in place.")
    args = ap.parse_args(argv)

    try:
        config = CorrectorConfig(max_edits2_len=args.max_edits2_len, prefer_known=args.prefer_known)
        model = train_from_text(iter_corpus_texts(args.corpus_path, text_column=args.text_column))
    except (FileNotFoundError, ValueError) as e:
        raise SystemExit(str(e))

    corrector = Corrector(model, config)

    if args.text is not None:
        print(corrector.correct_text(args.text))
        return

    for w in args.word:
        print(f"{w} -> {corrector.correct(w.lower())}")


if __name__ == "__main__":
    main()
