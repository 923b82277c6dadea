from __future__ import annotations

import argparse
import json
import time
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Iterable, List, Tuple

import pandas as pd
from tqdm import tqdm

from .corrector import Corrector, CorrectorConfig
from .frequency_model import train_from_text
from .load_data import iter_corpus_texts


@dataclass
class EvalSummary:
    total: int
    correct: int
    unknown: int  # failures whose target word is not in the model
    accuracy: float
    seconds: float

    def to_dict(self) -> dict:
        return asdict(self)


def spelltest(
    corrector: Corrector,
    pairs: Iterable[Tuple[str, str]],
    verbose: bool = False,
    progress: bool = False,
) -> EvalSummary:
    """
    pairs: (misspelled, target) tuples.
    Counts how often `corrector.correct(misspelled) == target`.
    """
    start = time.perf_counter()
    model = corrector.model
    total = 0
    hits = 0
    unknown = 0

    for wrong, target in tqdm(pairs, desc="Correcting", disable=not progress):
        total += 1
        got = corrector.correct(wrong)
        if got == target:
            hits += 1
            continue
        if not model.contains(target):
            unknown += 1
        if verbose:
            print(
                f"correct({wrong!r}) => {got!r} ({model.count(got)}); "
                f"expected {target!r} ({model.count(target)})"
            )

    return EvalSummary(
        total=total,
        correct=hits,
        unknown=unknown,
        accuracy=hits / total if total else 0.0,
        seconds=time.perf_counter() - start,
    )


def load_pairs(csv_path: str) -> List[Tuple[str, str]]:
    df = pd.read_csv(csv_path, keep_default_na=False)
    for col in ("misspelled", "correct"):
        if col not in df.columns:
            raise ValueError(f"Missing column '{col}' in {csv_path}. Columns: {df.columns.tolist()}")
    return list(zip(df["misspelled"].astype(str), df["correct"].astype(str)))


def main():
    ap = argparse.ArgumentParser(description="Evaluate the corrector on misspelled/correct pairs.")
    ap.add_argument("--test_csv", type=str, default="data/processed/spell_test.csv")
    ap.add_argument("--corpus_path", type=str, default="data/big.txt")
    ap.add_argument("--out_summary", type=str, default="outputs/spellcheck/spell_eval.json")
    ap.add_argument("--max_edits2_len", type=int, default=20)
    ap.add_argument("--prefer_known", action="store_true", help="Return known words unchanged.")
    ap.add_argument("--verbose", action="store_true", help="Print every wrong correction.")
    args = ap.parse_args()

    model = train_from_text(iter_corpus_texts(args.corpus_path))
    corrector = Corrector(
        model,
        CorrectorConfig(max_edits2_len=args.max_edits2_len, prefer_known=args.prefer_known),
    )
    summary = spelltest(corrector, load_pairs(args.test_csv), verbose=args.verbose, progress=True)

    payload = summary.to_dict()
    payload.update(
        {
            "vocab_size": len(model),
            "test_csv": args.test_csv,
            "corpus_path": args.corpus_path,
            "max_edits2_len": args.max_edits2_len,
            "prefer_known": args.prefer_known,
        }
    )
    out_path = Path(args.out_summary)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(payload, ensure_ascii=False, indent=2), encoding="utf-8")

    print(f"Accuracy={summary.accuracy:.3f} (n={summary.total}, unknown={summary.unknown}, {summary.seconds:.1f}s)")
    print(f"Saved summary to {out_path}")


if __name__ == "__main__":
    main()
