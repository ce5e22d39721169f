from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple


@dataclass(frozen=True)
class Position:
    """A single 0-based coordinate on a contig."""

    reference_name: str
    position: int
    reverse_strand: bool = False


@dataclass(frozen=True)
class Range:
    """A half-open interval [start, end) on a contig.

    ``start <= end`` is expected but not enforced.
    """

    reference_name: str
    start: int
    end: int


class CigarOp(enum.IntEnum):
    """CIGAR operation codes, numbered as in SAM / pysam ``cigartuples``."""

    ALIGNMENT_MATCH = 0
    INSERT = 1
    DELETE = 2
    SKIP = 3
    CLIP_SOFT = 4
    CLIP_HARD = 5
    PAD = 6
    SEQUENCE_MATCH = 7
    SEQUENCE_MISMATCH = 8

    @property
    def letter(self) -> str:
        return "MIDNSHP=X"[self.value]

    @property
    def consumes_reference(self) -> bool:
        return self in _REFERENCE_CONSUMING

    @classmethod
    def from_letter(cls, letter: str) -> "CigarOp":
        idx = "MIDNSHP=X".find(letter)
        if idx < 0:
            raise ValueError(f"Unknown CIGAR operation: {letter!r}")
        return cls(idx)


_REFERENCE_CONSUMING = frozenset(
    {
        CigarOp.ALIGNMENT_MATCH,
        CigarOp.DELETE,
        CigarOp.SKIP,
        CigarOp.SEQUENCE_MATCH,
        CigarOp.SEQUENCE_MISMATCH,
    }
)


@dataclass(frozen=True)
class CigarUnit:
    operation: CigarOp
    operation_length: int


@dataclass(frozen=True)
class Read:
    """An aligned (or unaligned) read as supplied by a parser.

    Attributes
    ----------
    alignment_contig_name:
        Contig the read is aligned to; empty string if unaligned.
    alignment_start:
        0-based reference coordinate of the first aligned base.
    cigar:
        Alignment operations in read order.
    mate_contig_name:
        Contig of the mate; empty string if the mate is unmapped or absent.
    """

    fragment_name: str = ""
    alignment_contig_name: str = ""
    alignment_start: int = 0
    cigar: Tuple[CigarUnit, ...] = ()
    mapping_quality: int = 0
    mate_contig_name: str = ""
    duplicate_fragment: bool = False
    failed_vendor_quality_checks: bool = False
    secondary_alignment: bool = False
    supplementary_alignment: bool = False


@dataclass(frozen=True)
class Value:
    """Tagged union of a number or a string; exactly one is set."""

    number_value: Optional[float] = None
    string_value: Optional[str] = None

    def __post_init__(self) -> None:
        if (self.number_value is None) == (self.string_value is None):
            raise ValueError("Value must hold exactly one of number_value or string_value")

    @property
    def is_number(self) -> bool:
        return self.number_value is not None


@dataclass
class ListValue:
    values: List[Value] = field(default_factory=list)


@dataclass
class Variant:
    """A variant record. ``info`` is owned by the record and mutated in place."""

    reference_name: str
    start: int
    end: Optional[int] = None
    reference_bases: str = ""
    alternate_bases: Tuple[str, ...] = ()
    info: Dict[str, ListValue] = field(default_factory=dict)


@dataclass
class VariantCall:
    call_set_name: str = ""
    genotype: List[int] = field(default_factory=list)
    info: Dict[str, ListValue] = field(default_factory=dict)


@dataclass(frozen=True)
class ContigInfo:
    """A reference contig and its 0-based rank in the FASTA."""

    name: str
    pos_in_fasta: int
    n_bases: int = 0


@dataclass(frozen=True)
class ReadRequirements:
    """Read filter settings applied by ``read_satisfies_requirements``."""

    min_mapping_quality: int = 10
    keep_duplicates: bool = False
    keep_failed_vendor_quality_checks: bool = False
    keep_secondary_alignments: bool = False
    keep_supplementary_alignments: bool = True
    keep_unaligned: bool = False
    require_properly_placed: bool = False
