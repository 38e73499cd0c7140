import pytest

from exercisebook.records import (
    ClientData,
    Person,
    RecordFile,
    format_client_report,
    format_people,
)


def test_client_pack_has_fixed_size():
    assert len(ClientData(7, "Ann", "Lee", 3.5).pack()) == ClientData.SIZE
    assert len(ClientData().pack()) == ClientData.SIZE


def test_person_pack_has_fixed_size():
    assert len(Person("Lee", "Ann", 30, 2).pack()) == Person.SIZE


def test_client_round_trip():
    client = ClientData(12, "Ann", "Lee", -4.25)
    assert ClientData.unpack(client.pack()) == client


def test_person_round_trip():
    person = Person("Smith", "Bob", 41, 3)
    assert Person.unpack(person.pack()) == person


def test_client_names_are_truncated():
    client = ClientData(1, "Bartholomew", "Wolfeschlegelsteinhausen", 0.0)
    assert client.first_name == "Bartholome"[:9]
    assert len(client.first_name) == 9
    assert client.last_name == "Wolfeschlegelsteinhausen"[:14]


def test_person_names_are_truncated():
    person = Person("Wolfeschlegelsteinhausen", "Bartholomew", 1, 1)
    assert person.last_name == "Wolfeschlegelsteinhausen"[:14]
    assert person.first_name == "Bartholomew"[:9]


def test_defaults_mark_blank_records():
    assert ClientData().empty
    assert Person().empty
    assert Person().last_name == "unassigned"
    assert not ClientData(5).empty
    assert not Person(person_id=0).empty


def test_unpack_rejects_wrong_length():
    with pytest.raises(ValueError):
        ClientData.unpack(b"\0" * (ClientData.SIZE - 1))
    with pytest.raises(ValueError):
        Person.unpack(b"")


def test_new_file_is_filled_with_blank_records(tmp_path):
    path = tmp_path / "credit.dat"
    with RecordFile(path, ClientData, 100) as records:
        assert records.count == 100
        assert all(record.empty for record in records.records())
    assert path.stat().st_size == 100 * ClientData.SIZE


def test_write_and_read_back(tmp_path):
    path = tmp_path / "people.dat"
    with RecordFile(path, Person, 50) as records:
        records.write(4, Person("Lee", "Ann", 30, 4))
        assert records.read(4) == Person("Lee", "Ann", 30, 4)
        assert records.read(3).empty


def test_records_persist_after_reopen(tmp_path):
    path = tmp_path / "credit.dat"
    with RecordFile(path, ClientData, 10) as records:
        records.write(0, ClientData(1, "Ann", "Lee", 9.5))
    with RecordFile(path, ClientData, 99) as records:
        assert records.count == 10
        assert records.read(0) == ClientData(1, "Ann", "Lee", 9.5)


def test_clear_blanks_a_used_record(tmp_path):
    with RecordFile(tmp_path / "p.dat", Person, 50) as records:
        records.write(5, Person("Lee", "Ann", 30, 5))
        records.clear(5)
        assert records.read(5) == Person()


def test_clear_of_empty_record_raises(tmp_path):
    with RecordFile(tmp_path / "p.dat", Person, 50) as records:
        with pytest.raises(LookupError):
            records.clear(30)


def test_index_out_of_range(tmp_path):
    with RecordFile(tmp_path / "c.dat", ClientData, 10) as records:
        with pytest.raises(IndexError):
            records.read(10)
        with pytest.raises(IndexError):
            records.write(-1, ClientData(1))


def test_closed_file_cannot_be_read(tmp_path):
    records = RecordFile(tmp_path / "c.dat", ClientData, 3)
    records.close()
    records.close()
    with pytest.raises(ValueError):
        records.read(0)


def test_client_report_skips_blank_records():
    report = format_client_report(
        [ClientData(), ClientData(3, "Ann", "Lee", 12.5), ClientData()]
    )
    lines = report.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("Account")
    assert lines[1].startswith("3")
    assert lines[1].endswith("12.50")
    assert "Lee" in lines[1] and "Ann" in lines[1]