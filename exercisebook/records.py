"""Fixed-size client and person records kept in a random-access file."""

from __future__ import annotations

import struct
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, ClassVar

FIRST_NAME_SIZE = 10
CLIENT_LAST_NAME_SIZE = 15
PERSON_LAST_NAME_SIZE = 15

# Laid out as the fields of a C record: names are NUL-terminated byte arrays
# and numbers are aligned to their own size.
_CLIENT_LAYOUT = struct.Struct("<i10s15s3xd")
_PERSON_LAYOUT = struct.Struct("<15s10s3xii")


def _fit(text: str, size: int) -> str:
    """Cut ``text`` so that it fits, with its terminator, in ``size`` bytes."""
    return text.encode("utf-8")[: size - 1].decode("utf-8", "ignore")


def _field(text: str, size: int) -> bytes:
    return _fit(text, size).encode("utf-8")


def _text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", "ignore")


def _unpack(layout: struct.Struct, data: bytes) -> tuple:
    try:
        return layout.unpack(data)
    except struct.error as error:
        raise ValueError(f"record must be {layout.size} bytes, got {len(data)}") from error


@dataclass
class ClientData:
    """A credit account; account number 0 marks an unused record."""

    SIZE: ClassVar[int] = _CLIENT_LAYOUT.size

    account_number: int = 0
    first_name: str = ""
    last_name: str = ""
    balance: float = 0.0

    def __post_init__(self) -> None:
        self.first_name = _fit(self.first_name, FIRST_NAME_SIZE)
        self.last_name = _fit(self.last_name, CLIENT_LAST_NAME_SIZE)

    @property
    def empty(self) -> bool:
        return self.account_number == 0

    def pack(self) -> bytes:
        """Return the record as fixed-size bytes."""
        return _CLIENT_LAYOUT.pack(
            self.account_number,
            _field(self.first_name, FIRST_NAME_SIZE),
            _field(self.last_name, CLIENT_LAST_NAME_SIZE),
            self.balance,
        )

    @staticmethod
    def unpack(data: bytes) -> ClientData:
        """Read a record written by :meth:`pack`."""
        account, first, last, balance = _unpack(_CLIENT_LAYOUT, data)
        return ClientData(account, _text(first), _text(last), balance)


@dataclass
class Person:
    """A person's name and age; id -1 marks an unused record."""

    SIZE: ClassVar[int] = _PERSON_LAYOUT.size

    last_name: str = "unassigned"
    first_name: str = ""
    age: int = 0
    person_id: int = -1

    def __post_init__(self) -> None:
        self.first_name = _fit(self.first_name, FIRST_NAME_SIZE)
        self.last_name = _fit(self.last_name, PERSON_LAST_NAME_SIZE)

    @property
    def empty(self) -> bool:
        return self.person_id == -1

    def pack(self) -> bytes:
        """Return the record as fixed-size bytes."""
        return _PERSON_LAYOUT.pack(
            _field(self.last_name, PERSON_LAST_NAME_SIZE),
            _field(self.first_name, FIRST_NAME_SIZE),
            self.age,
            self.person_id,
        )

    @staticmethod
    def unpack(data: bytes) -> Person:
        """Read a record written by :meth:`pack`."""
        last, first, age, person_id = _unpack(_PERSON_LAYOUT, data)
        return Person(_text(last), _text(first), age, person_id)


class RecordFile:
    """A file of equally sized records addressed by slot number from 0.

    A new or empty file is filled with ``count`` blank records.
    """

    def __init__(self, path, record_type=ClientData, count: int = 100) -> None:
        self.path = Path(path)
        self.record_type = record_type
        mode = "r+b" if self.path.exists() else "w+b"
        self._handle: BinaryIO | None = open(self.path, mode)
        self._handle.seek(0, 2)
        if self._handle.tell() == 0:
            blank = record_type().pack()
            self._handle.write(blank * count)
            self._handle.flush()
        self.count = self._handle.tell() // record_type.SIZE

    def __enter__(self) -> RecordFile:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _file(self) -> BinaryIO:
        if self._handle is None:
            raise ValueError("record file is closed")
        return self._handle

    def _seek(self, index: int) -> BinaryIO:
        if not 0 <= index < self.count:
            raise IndexError(f"record {index} is outside 0-{self.count - 1}")
        handle = self._file()
        handle.seek(index * self.record_type.SIZE)
        return handle

    def read(self, index: int):
        """Return the record in slot ``index``."""
        return self.record_type.unpack(self._seek(index).read(self.record_type.SIZE))

    def write(self, index: int, record) -> None:
        """Store ``record`` in slot ``index``."""
        handle = self._seek(index)
        handle.write(record.pack())
        handle.flush()

    def clear(self, index: int) -> None:
        """Replace a used record with a blank one."""
        if self.read(index).empty:
            raise LookupError(f"Record #{index} is empty.")
        self.write(index, self.record_type())

    def records(self) -> Iterator:
        """Yield every record in slot order, blank ones included."""
        for index in range(self.count):
            yield self.read(index)

    def close(self) -> None:
        if self._handle is not None:
            self._handle.close()
            self._handle = None


def format_client_report(records: Iterable[ClientData]) -> str:
    """A printable table of the clients that are in use."""
    lines = [f"{'Account':<10}{'Last Name':<16}{'First Name':<11}{'Balance':>10}"]
    lines.extend(
        f"{client.account_number:<10}{client.last_name:<16}"
        f"{client.first_name:<11}{client.balance:>10.2f}"
        for client in records
        if not client.empty
    )
    return "\n".join(lines) + "\n"


def format_people(records: Iterable[Person]) -> str:
    """A printable table of people with id, names and age."""
    lines = [f"{'Id':<4}{'Last Name':<15}{'First Name':<10}{' Age':>5}"]
    lines.extend(
        f"{person.person_id:<4}{person.last_name:<15}{person.first_name:<10}{person.age}"
        for person in records
    )
    return "\n".join(lines) + "\n"