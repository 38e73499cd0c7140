"""Huffman coding of text files into strings of bits."""

from __future__ import annotations

import sys
from collections import Counter
from dataclasses import dataclass
from pathlib import Path


@dataclass
class Node:
    """A node of a Huffman tree; leaves carry a character."""

    frequency: int
    character: str | None = None
    left: Node | None = None
    right: Node | None = None

    def is_leaf(self) -> bool:
        return self.left is None and self.right is None


def build_tree(text: str) -> Node:
    """Build the Huffman tree for the characters of ``text``."""
    if not text:
        raise ValueError("cannot build a code for empty text")
    counts = Counter(text)
    nodes = [Node(counts[char], char) for char in sorted(counts)]
    while len(nodes) > 1:
        nodes.sort(key=lambda node: node.frequency)
        first, second, *nodes = nodes
        nodes.append(Node(first.frequency + second.frequency, None, first, second))
    return nodes[0]


def code_words(root: Node) -> dict[str, str]:
    """Return the code word of every leaf, ordered by character."""
    codes: dict[str, str] = {}

    def walk(node: Node, prefix: str) -> None:
        if node.is_leaf():
            codes.setdefault(node.character, prefix)
        if node.left is not None:
            walk(node.left, prefix + "0")
        if node.right is not None:
            walk(node.right, prefix + "1")

    walk(root, "")
    return dict(sorted(codes.items()))


def encode(text: str) -> tuple[str, dict[str, str]]:
    """Encode ``text``; return the bit string and the code words used."""
    codes = code_words(build_tree(text))
    return "".join(codes[char] for char in text), codes


def decode(bits: str, codes: dict[str, str]) -> str:
    """Decode a bit string with a character-to-code mapping."""
    lookup = {code: char for char, code in codes.items()}
    decoded = []
    current = ""
    for bit in bits:
        current += bit
        if current in lookup:
            decoded.append(lookup[current])
            current = ""
    return "".join(decoded)


def format_dictionary(codes: dict[str, str]) -> str:
    """Render code words as lines of character code and bits."""
    return "".join(f"{ord(char)} {code}\n" for char, code in sorted(codes.items()))


def parse_dictionary(text: str) -> dict[str, str]:
    """Read code words written by :func:`format_dictionary`."""
    tokens = text.split()
    codes: dict[str, str] = {}
    for number, code in zip(tokens[::2], tokens[1::2]):
        try:
            codes[chr(int(number))] = code
        except ValueError:
            break
    return codes


def encode_file(path) -> tuple[Path, Path]:
    """Encode a file; return the paths of the encoded data and the dictionary."""
    source = Path(path)
    text = source.read_text(encoding="utf-8", newline="")
    bits, codes = encode(text)
    encoded_path = Path(f"{source}_encoded.txt")
    dictionary_path = Path(f"{source}_decoding_dictionary.txt")
    encoded_path.write_text(bits, encoding="utf-8")
    dictionary_path.write_text(format_dictionary(codes), encoding="utf-8")
    return encoded_path, dictionary_path


def decode_file(path, dictionary_path) -> str:
    """Decode an encoded file with its dictionary file."""
    bits = Path(path).read_text(encoding="utf-8")
    codes = parse_dictionary(Path(dictionary_path).read_text(encoding="utf-8"))
    return decode(bits, codes)


def main(argv=None) -> int:
    """Run the interactive encode/decode menu."""
    while True:
        print("\nEnter your choice\n1 - Encode\n2 - Decode\n3 - Exit")
        try:
            choice = input().strip()
            if choice == "3":
                return 0
            if choice == "1":
                path = input("Enter full path of text file to be encoded: ").strip()
                try:
                    encoded, dictionary = encode_file(path)
                except OSError:
                    print("Cannot find file with given path.", file=sys.stderr)
                except ValueError as error:
                    print(error, file=sys.stderr)
                else:
                    print(
                        f"File succesfully encoded!\nEncoded data stored in {encoded}.\n"
                        f"Decoding dictionary stored in {dictionary}"
                    )
            elif choice == "2":
                path = input("Enter full path of text file to be decoded: ").strip()
                dictionary = input(
                    "Enter full path of text file with decoding dictionary: "
                ).strip()
                try:
                    print(f"Decoded Data: {decode_file(path, dictionary)}")
                except OSError:
                    print("Cannot find file to decode with given path.", file=sys.stderr)
            else:
                print("Invalid choice, please enter a valid choice (1,2, or 3).")
        except EOFError:
            return 0
        print()


if __name__ == "__main__":
    raise SystemExit(main())