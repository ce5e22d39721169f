import pytest

from varcoords.models import CigarOp, CigarUnit
from varcoords.utils import ends_with, format_cigar, parse_cigar, unquote


@pytest.mark.parametrize(
    "text, expected",
    [
        ('"foo"', "foo"),
        ("'foo'", "foo"),
        ("foo", "foo"),
        ("\"foo'", "\"foo'"),
        ('"', '"'),
        ('""', ""),
    ],
)
def test_unquote(text: str, expected: str) -> None:
    assert unquote(text) == expected


def test_ends_with() -> None:
    assert ends_with("sample.vcf.gz", ".gz")
    assert not ends_with("sample.vcf", ".gz")


def test_parse_cigar() -> None:
    assert parse_cigar("5M2I3D4S") == (
        CigarUnit(CigarOp.ALIGNMENT_MATCH, 5),
        CigarUnit(CigarOp.INSERT, 2),
        CigarUnit(CigarOp.DELETE, 3),
        CigarUnit(CigarOp.CLIP_SOFT, 4),
    )
    assert parse_cigar("*") == ()
    assert format_cigar(parse_cigar("3H5=1X2N4P")) == "3H5=1X2N4P"
    assert format_cigar(()) == "*"


@pytest.mark.parametrize("text", ["5", "M5", "5M3", "5Q", "5M 3I"])
def test_parse_cigar_rejects_malformed(text: str) -> None:
    with pytest.raises(ValueError):
        parse_cigar(text)


def test_cigar_op_codes_match_sam() -> None:
    assert [op.letter for op in CigarOp] == list("MIDNSHP=X")
    assert CigarOp.from_letter("=") is CigarOp.SEQUENCE_MATCH
    consuming = {op.letter for op in CigarOp if op.consumes_reference}
    assert consuming == {"M", "D", "N", "=", "X"}
