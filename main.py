#!/usr/bin/env python3
"""
Compare two text files from the command line.

Usage:
    python main.py essay_a.txt essay_b.txt
    python main.py essay_a.txt essay_b.txt --threshold 80 --top 10
    python main.py essay_a.txt essay_b.txt --json
"""

import argparse
import json
import sys
from typing import List, Optional

from plagiarism_detector.core.config import load_settings
from plagiarism_detector.core.cosine_similarity import WordFrequencySimilarityCalculator
from plagiarism_detector.core.document_loader import DocumentLoader
from plagiarism_detector.core.logging_config import setup_logging
from plagiarism_detector.core.validation import InputUnreadableError, ValidationError


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Check two text files for plagiarism using word-frequency cosine similarity."
    )
    parser.add_argument("files", nargs="*", metavar="FILE", help="the two files to compare")
    parser.add_argument("--threshold", type=float, default=None,
                        help="similarity percentage at which a pair is flagged (default: 70.0)")
    parser.add_argument("--top", type=int, default=0, metavar="N",
                        help="also list the N shared words contributing most to the score")
    parser.add_argument("--json", action="store_true", help="print the result as JSON")
    parser.add_argument("--log-level", default=None, help="logging level (default: LOG_LEVEL or INFO)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if len(args.files) != 2:
        print("Please select both files to compare.", file=sys.stderr)
        return 2

    try:
        settings = load_settings()
        setup_logging(
            log_level=args.log_level or settings.log_level,
            log_dir=settings.log_dir,
            structured_logging=settings.structured_logging,
            enable_console=True,
            enable_file=settings.log_to_file
        )
        threshold = settings.threshold if args.threshold is None else args.threshold
        calculator = WordFrequencySimilarityCalculator(
            threshold=threshold,
            loader=DocumentLoader(max_file_size_mb=settings.max_file_size_mb)
        )
    except (ValidationError, ValueError) as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2
    except OSError as e:
        print(f"Cannot set up logging: {e}", file=sys.stderr)
        return 2

    try:
        result = calculator.compare(args.files[0], args.files[1])
    except InputUnreadableError as e:
        print(f"Error reading files: {e.message}", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result.to_dict()))
        return 0

    print(result.summary())
    print(result.verdict())

    if args.top > 0 and result.shared_words:
        print("\nTop shared words:")
        for word, count_a, count_b in result.shared_words[:args.top]:
            print(f"  {word}: {count_a} / {count_b}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
