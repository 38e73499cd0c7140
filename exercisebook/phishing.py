"""Score text for words common in phishing messages."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass

KEYWORDS: dict[str, int] = {
    "locked": 3,
    "immediate": 3,
    "final": 2,
    "won": 3,
    "gift": 3,
    "free": 1,
    "verify": 2,
    "customer": 1,
    "confirm": 1,
    "account": 1,
    "urgent": 3,
    "important": 3,
    "suspended": 3,
    "invoice": 3,
    "security": 3,
    "alert": 2,
    "netflix": 2,
    "hello": 1,
    "login": 1,
    "paypal": 2,
    "walmart": 2,
    "ups": 2,
    "instagram": 2,
    "x": 2,
    "apple": 2,
    "fedex": 2,
    "microsoft": 3,
    "google": 3,
    "linkedin": 3,
}


@dataclass(frozen=True)
class ScanResult:
    """Keyword counts, ordered by keyword, and the total score."""

    occurrences: dict[str, int]
    score: int


def normalize_word(word: str) -> str:
    """Lower-case a word and drop everything but ASCII letters and digits."""
    return "".join(c for c in word if c.isascii() and c.isalnum()).lower()


def scan(text: str) -> ScanResult:
    """Count keyword occurrences in ``text`` and total their points."""
    occurrences = dict.fromkeys(sorted(KEYWORDS), 0)
    score = 0
    for raw in text.split():
        word = normalize_word(raw)
        if word in KEYWORDS:
            occurrences[word] += 1
            score += KEYWORDS[word]
    return ScanResult(occurrences, score)


def format_report(result: ScanResult) -> str:
    """Describe found keywords and the final score."""
    lines = [
        f"Keyword {word} was found {count} times in the message."
        for word, count in result.occurrences.items()
        if count
    ]
    lines.append(f"Final Score: {result.score}")
    return "\n".join(lines)


def main(argv=None) -> int:
    """Scan a file (``sus.txt`` by default) and print the report."""
    parser = argparse.ArgumentParser(description="Score a message for phishing terms.")
    parser.add_argument("path", nargs="?", default="sus.txt")
    args = parser.parse_args(argv)
    try:
        with open(args.path, encoding="utf-8", errors="replace") as handle:
            text = handle.read()
    except OSError:
        print("File could not be opened", file=sys.stderr)
        return 1
    print(format_report(scan(text)))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())