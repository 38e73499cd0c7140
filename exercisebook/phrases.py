"""Random sentences built from short word lists."""

from __future__ import annotations

import random

ARTICLES = ("the", "a", "one", "some", "any")
NOUNS = ("boy", "girl", "dog", "town", "car")
VERBS = ("drove", "jumped", "ran", "walked", "skipped")
PREPOSITIONS = ("to", "from", "over", "under", "on")


def _pick(words: tuple[str, ...], rng: random.Random) -> str:
    return words[int(rng.random() * len(words))]


def random_sentence(rng: random.Random | None = None) -> str:
    """Return article, noun, verb, preposition, article, noun as a sentence."""
    rng = rng or random.Random()
    words = [
        _pick(ARTICLES, rng),
        _pick(NOUNS, rng),
        _pick(VERBS, rng),
        _pick(PREPOSITIONS, rng),
        _pick(ARTICLES, rng),
        _pick(NOUNS, rng),
    ]
    words[0] = words[0][0].upper() + words[0][1:]
    return " ".join(words) + "."


def random_sentences(count: int = 20, rng: random.Random | None = None) -> list[str]:
    """Return ``count`` random sentences."""
    rng = rng or random.Random()
    return [random_sentence(rng) for _ in range(count)]


def main(argv=None) -> int:
    """Print twenty numbered random sentences."""
    print("20 Random Sentences: ")
    for number, sentence in enumerate(random_sentences(20), start=1):
        print(f"{number}. {sentence}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())