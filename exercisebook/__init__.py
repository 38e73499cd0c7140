"""Small worked programs and classes: a bank, Huffman coding, a phishing
scanner, a Simpletron machine, cards, dates, statistics, record files and more."""

__version__ = "0.1.0"