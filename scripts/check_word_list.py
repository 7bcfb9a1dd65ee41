"""
Report problems in a word list before it is used as a dictionary or answer pool.

Usage:
    python scripts/check_word_list.py wordguess/data/words.txt
    python scripts/check_word_list.py answers.txt --dictionary wordguess/data/words.txt

Exits with status 1 when duplicates, non a-z entries, entries of the wrong
length, or (with --dictionary) unknown words are found.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from wordguess.word_bank import audit_word_list


def _read_lines(path: Path) -> list[str]:
    with path.open("r", encoding="utf-8") as handle:
        return handle.readlines()


def _joined(words) -> str:
    return ", ".join(words) or "none"


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[1])
    parser.add_argument("word_list", type=Path)
    parser.add_argument("--dictionary", type=Path)
    args = parser.parse_args(argv)

    try:
        lines = _read_lines(args.word_list)
        dictionary = _read_lines(args.dictionary) if args.dictionary else None
    except FileNotFoundError as exc:
        print(f"[error] File not found: {exc.filename}", file=sys.stderr)
        return 2

    report = audit_word_list(lines, dictionary)

    print("=" * 50)
    print(f"WORD LIST REPORT: {args.word_list}")
    print("=" * 50)
    print(f"Duplicates ({len(report.duplicates)}):", _joined(report.duplicates))
    print("Special characters:", _joined(report.special_characters))
    print("Length != 5:", _joined(report.wrong_length))
    if dictionary is not None:
        print("Not in dictionary:", _joined(report.missing_from_dictionary))
    print("=" * 50)
    print(f"Entries read: {report.total}")
    print(f"Valid entries: {len(report.valid)}")
    return 0 if report.ok else 1


if __name__ == "__main__":
    raise SystemExit(main())
