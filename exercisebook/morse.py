"""Convert English text to Morse code."""

from __future__ import annotations

_LETTERS = (
    ".- -... -.-. -.. . ..-. --. .... .. .--- -.- .-.. -- "
    "-. --- .--. --.- .-. ... - ..- ...- .-- -..- -.-- --.."
).split()
_DIGITS = ".---- ..--- ...-- ....- ..... -.... --... ---.. ----. -----".split()

MORSE: dict[str, str] = {
    **dict(zip("ABCDEFGHIJKLMNOPQRSTUVWXYZ", _LETTERS)),
    **dict(zip("1234567890", _DIGITS)),
}


def encode_word(word: str) -> str:
    """Encode one word; every character is followed by a space.

    Characters without a code leave only the space.
    """
    return "".join(MORSE.get(char.upper(), "") + " " for char in word)


def to_morse(text: str) -> str:
    """Encode text word by word, ending each word with a slash."""
    return "".join(encode_word(word) + "/" for word in text.split(" "))


def main(argv=None) -> int:
    """Read a line of text and print it in Morse code."""
    try:
        text = input("Enter Text: ")
    except EOFError:
        text = ""
    print()
    print(f"Output: {to_morse(text)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())