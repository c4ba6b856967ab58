from __future__ import annotations

import pytest

from pdfxref.core.model import XRefEntry, XRefSubsection, XRefTable


def _table() -> XRefTable:
    return XRefTable.from_subsections(
        [
            XRefSubsection.from_entries(
                [
                    XRefEntry.create(0, 65535, False),
                    XRefEntry.create(15, 0, True),
                    XRefEntry.create(98, 1, True),
                ],
                first_object_number=0,
            ),
            XRefSubsection.from_entries(
                [XRefEntry.create(400, 0, True), XRefEntry.create(0, 2, False)],
                first_object_number=10,
            ),
        ]
    )


def test_entry_renders_twenty_byte_record() -> None:
    entry = XRefEntry.create(1234, 7, True)

    assert entry.to_string() == "0000001234 00007 n \n"
    assert len(entry.to_string()) == 20
    assert XRefEntry.create(0, 65535, False).flag == "f"


@pytest.mark.parametrize(
    ("offset", "generation"),
    [(-1, 0), (10_000_000_000, 0), (0, -1), (0, 100_000)],
)
def test_entry_rejects_out_of_range_fields(offset: int, generation: int) -> None:
    with pytest.raises(ValueError):
        XRefEntry(offset=offset, generation_number=generation, in_use=True)


def test_subsection_rejects_negative_first_object_number() -> None:
    with pytest.raises(ValueError):
        XRefSubsection.from_entries([], first_object_number=-1)


def test_subsection_object_numbers_follow_first_object_number() -> None:
    subsection = _table().subsections[1]

    assert list(subsection.object_numbers()) == [10, 11]
    assert len(subsection) == 2
    assert subsection.to_string() == "10 2\n0000000400 00000 n \n0000000000 00002 f \n"


def test_table_iterates_entries_with_object_numbers() -> None:
    table = _table()

    numbers = [number for number, _ in table.iter_entries()]

    assert numbers == [0, 1, 2, 10, 11]
    assert table.entry_count == 5


def test_table_object_offsets_skip_free_entries() -> None:
    assert _table().object_offsets() == {(1, 0): 15, (2, 1): 98, (10, 0): 400}


def test_table_object_offsets_keep_first_duplicate() -> None:
    table = XRefTable.from_subsections(
        [
            XRefSubsection.from_entries([XRefEntry.create(50, 0, True)], first_object_number=3),
            XRefSubsection.from_entries([XRefEntry.create(90, 0, True)], first_object_number=3),
        ]
    )

    assert table.object_offsets() == {(3, 0): 50}


def test_table_serialization() -> None:
    table = _table()

    text = table.to_string()

    assert text.startswith("xref\n0 3\n0000000000 65535 f \n")
    assert "10 2\n" in text
    assert table.to_bytes() == text.encode("latin-1")
    assert table.bytes_size() == len("xref\n") + len("0 3\n") + len("10 2\n") + 5 * 20
