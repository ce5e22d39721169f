import pytest

from varcoords.models import CigarOp, CigarUnit, Position, Range, Read, Variant
from varcoords.ranges import (
    make_interval_str,
    make_position,
    make_range,
    parse_interval_str,
    position_from_variant,
    position_interval_str,
    range_contains,
    range_from_read,
    range_from_variant,
    range_interval_str,
    range_overlaps,
)


def test_make_position_defaults_to_forward_strand() -> None:
    pos = make_position("chr1", 10)
    assert pos == Position("chr1", 10, False)
    assert make_position("chr1", 10, reverse_strand=True).reverse_strand


def test_position_from_variant() -> None:
    v = Variant(reference_name="chr3", start=42, end=45, reference_bases="ACG")
    assert position_from_variant(v) == Position("chr3", 42, False)


def test_range_from_variant_uses_end_when_present() -> None:
    assert range_from_variant(Variant("chr1", 10, end=13)) == Range("chr1", 10, 13)
    assert range_from_variant(Variant("chr1", 10)) == Range("chr1", 10, 11)


def test_range_from_read_is_end_exclusive() -> None:
    read = Read(
        alignment_contig_name="chr1",
        alignment_start=100,
        cigar=(CigarUnit(CigarOp.ALIGNMENT_MATCH, 5), CigarUnit(CigarOp.DELETE, 3)),
    )
    assert range_from_read(read) == Range("chr1", 100, 108)


def test_range_contains() -> None:
    r = make_range("c", 0, 10)
    assert range_contains(r, r)
    assert range_contains(r, make_range("c", 2, 5))
    assert not range_contains(r, make_range("c", 5, 11))
    assert not range_contains(r, make_range("d", 2, 5))


def test_range_overlaps_is_not_containment() -> None:
    a = make_range("c", 0, 10)
    assert range_overlaps(a, make_range("c", 5, 11))
    assert not range_overlaps(a, make_range("c", 10, 20))
    assert not range_overlaps(a, make_range("d", 0, 10))


def test_make_interval_str() -> None:
    assert make_interval_str("chr1", 0, 10) == "chr1:0-10"
    assert make_interval_str("chr1", 0, 10, base_zero=True) == "chr1:0-10"
    assert make_interval_str("chr1", 0, 10, base_zero=False) == "chr1:1-11"


def test_interval_str_from_position_and_range() -> None:
    assert position_interval_str(make_position("chr2", 7)) == "chr2:7-7"
    assert range_interval_str(make_range("chr2", 7, 9)) == "chr2:7-9"


def test_parse_interval_str() -> None:
    assert parse_interval_str("chr1:0-10") == Range("chr1", 0, 10)
    assert parse_interval_str("chr1:1-11", base_zero=False) == Range("chr1", 0, 10)
    assert parse_interval_str("chrX:1,000-2,000") == Range("chrX", 1000, 2000)


@pytest.mark.parametrize("text", ["chr1", "chr1:10", "chr1:a-b", ":1-2"])
def test_parse_interval_str_rejects_malformed(text: str) -> None:
    with pytest.raises(ValueError):
        parse_interval_str(text)
