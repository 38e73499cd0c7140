"""Telephone numbers written as (area) exchange-line."""

from __future__ import annotations

import re
from dataclasses import dataclass

_PATTERN = re.compile(r"\s*\((\d{1,3})\)\s*(\d{1,3})-(\d{1,4})\s*")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


@dataclass(frozen=True)
class PhoneNumber:
    """A telephone number split into area code, exchange and line."""

    area_code: str
    exchange: str
    line: str

    @staticmethod
    def parse(text: str) -> PhoneNumber:
        """Parse a number written as ``(area) exchange-line``."""
        match = _PATTERN.fullmatch(text)
        if match is None:
            raise ValueError(f"not a phone number: {text!r}")
        return PhoneNumber(*match.groups())

    def __str__(self) -> str:
        return f"Area code: {self.area_code}\nExchange: {self.exchange}\nLine: {self.line}\n"


def split_phone_number(text: str) -> tuple[int, int]:
    """Return the area code and the digits after the dash as integers."""
    area_part, _, rest = text[1:].partition(")")
    _, sep, line_part = rest.lstrip("-").partition("-")
    if not sep:
        raise ValueError("Invalid phone number, missing last 4 digits")
    return _leading_int(area_part), _leading_int(line_part)


def main(argv=None) -> int:
    """Read a telephone number and print its parts."""
    print("Input a phone number in the form (xxx) xxx-xxxx")
    try:
        text = input()
    except EOFError:
        return 1
    try:
        area_code, number = split_phone_number(text)
    except ValueError as error:
        print(error)
        return 0
    print(f"Area Code: {area_code}")
    print(f"Phone Number: {number}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())