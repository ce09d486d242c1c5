"""
Command line interface.

    sentilex TRAINING [STOP_WORDS] TESTING GROUND_TRUTH RESULTS ACCURACY

STOP_WORDS may be omitted, in which case the built-in list (or the one
chosen with --stop-words) is used.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from .classifier import ClassifierConfig, SentimentClassifier


USAGE_PATHS = "TRAINING [STOP_WORDS] TESTING GROUND_TRUTH RESULTS ACCURACY"


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="sentilex",
        usage=f"%(prog)s [options] {USAGE_PATHS}",
        description="Train a word polarity lexicon, label test records and measure accuracy.",
    )
    p.add_argument("paths", nargs="+", help=USAGE_PATHS)
    p.add_argument("--no-header", dest="header_present", action="store_false",
                   help="input CSV files have no header row")
    p.add_argument("--stop-words", default="builtin",
                   help="'builtin', 'nltk' or a word list file (when not given positionally)")
    p.add_argument("--filter-stage", choices=ClassifierConfig.FILTER_STAGES, default="tokenize")
    p.add_argument("--percent", dest="accuracy_scale", action="store_const",
                   const="percent", default="fraction",
                   help="write accuracy as a percentage instead of a fraction")
    p.add_argument("--short-mismatches", dest="include_predicted", action="store_false",
                   help="omit the predicted label from mismatch lines")
    p.add_argument("--jobs", type=int, default=1, help="worker processes for training")
    p.add_argument("--progress", action="store_true", help="show progress bars")
    p.add_argument("--quiet", action="store_true", help="only print errors")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.paths) == 6:
        training, stop_words, testing, ground_truth, results, accuracy = args.paths
    elif len(args.paths) == 5:
        training, testing, ground_truth, results, accuracy = args.paths
        stop_words = args.stop_words
    else:
        parser.error(f"expected 5 or 6 paths, got {len(args.paths)}")

    for path in (training, testing, ground_truth):
        if not Path(path).is_file():
            print(f"Error opening input file: {path}", file=sys.stderr)
            return 1

    try:
        config = ClassifierConfig(
            header_present=args.header_present,
            stop_words_source=stop_words,
            filter_stage=args.filter_stage,
            accuracy_scale=args.accuracy_scale,
            include_predicted=args.include_predicted,
            n_jobs=args.jobs,
            show_progress=args.progress,
            verbose=not args.quiet,
        )
        classifier = SentimentClassifier(config)
        classifier.load_stop_words()
        classifier.run(training, testing, ground_truth, results, accuracy)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
