import pytest

from infrastructure.records import Record, RecordRepository, parse_record_id
from infrastructure.records.setup import seed_usuarios


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("3", 3),
        ("3abc", 3),
        ("  12 ", 12),
        ("-1", -1),
        ("+7", 7),
        ("007", 7),
        ("0x1A", 26),
        ("0X10", 16),
        ("-0x3", -3),
        (4, 4),
    ],
)
def test_parse_record_id_reads_leading_integer(raw, expected):
    assert parse_record_id(raw) == expected


@pytest.mark.parametrize("raw", ["abc", "", "x3", None, "e", "0x", "0xZ", "\u0663", "9" * 5000])
def test_parse_record_id_unparseable_is_none(raw):
    assert parse_record_id(raw) is None


def test_find_by_id_returns_matching_record():
    repository = RecordRepository(seed_usuarios())

    record = repository.find_by_id(2)

    assert record == Record(id=2, nombre="Karen")
    assert repository.find_by_id(99) is None
    assert repository.find_by_id(None) is None


def test_repository_copies_seed_records():
    seed = seed_usuarios()
    repository = RecordRepository(seed)

    repository.update_nombre(1, nombre="Juana")

    assert seed[0].nombre == "Juan"
    assert repository.find_by_id(1).nombre == "Juana"


def test_create_appends_with_next_id():
    repository = RecordRepository(seed_usuarios())

    record = repository.create(nombre="Ana")

    assert record == Record(id=5, nombre="Ana")
    assert repository.list_all()[-1] == record
    assert len(repository) == 5


def test_ids_are_not_reissued_after_delete():
    repository = RecordRepository(seed_usuarios())

    repository.delete(4)
    record = repository.create(nombre="Ana")

    assert record.id == 5
    assert [r.id for r in repository.list_all()] == [1, 2, 3, 5]


def test_delete_removes_record_and_shifts_remaining():
    repository = RecordRepository(seed_usuarios())

    removed = repository.delete(2)

    assert removed == Record(id=2, nombre="Karen")
    assert [r.id for r in repository.list_all()] == [1, 3, 4]
    assert repository.delete(2) is None


def test_empty_repository_starts_at_one():
    repository = RecordRepository()

    assert repository.list_all() == []
    assert repository.create(nombre="Primero").id == 1


def test_list_all_returns_a_snapshot():
    repository = RecordRepository(seed_usuarios())

    snapshot = repository.list_all()
    snapshot.clear()

    assert len(repository) == 4
