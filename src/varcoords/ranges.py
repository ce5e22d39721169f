from __future__ import annotations

import re

from .models import Position, Range, Read, Variant
from .reads import read_end, read_start

_INTERVAL_RE = re.compile(r"^(?P<chrom>[^:\s]+):(?P<start>[\d,]+)-(?P<end>[\d,]+)$")


def make_position(reference_name: str, position: int, reverse_strand: bool = False) -> Position:
    return Position(reference_name=reference_name, position=int(position), reverse_strand=reverse_strand)


def position_from_variant(variant: Variant) -> Position:
    return make_position(variant.reference_name, variant.start)


def make_range(reference_name: str, start: int, end: int) -> Range:
    return Range(reference_name=reference_name, start=int(start), end=int(end))


def range_from_variant(variant: Variant) -> Range:
    """[start, end) of the variant; a single base when it carries no end."""
    end = variant.end if variant.end is not None else variant.start + 1
    return make_range(variant.reference_name, variant.start, end)


def range_from_read(read: Read) -> Range:
    """Reference span of the read's alignment, end exclusive."""
    return make_range(read.alignment_contig_name, read_start(read), read_end(read) + 1)


def range_contains(haystack: Range, needle: Range) -> bool:
    """True iff ``needle`` lies wholly within ``haystack``."""
    return (
        haystack.reference_name == needle.reference_name
        and haystack.start <= needle.start
        and needle.end <= haystack.end
    )


def range_overlaps(a: Range, b: Range) -> bool:
    return a.reference_name == b.reference_name and a.start < b.end and b.start < a.end


def make_interval_str(reference_name: str, start: int, end: int, base_zero: bool = True) -> str:
    """Format ``chr:start-end``; with base_zero=False both bounds are shifted by +1."""
    offset = 0 if base_zero else 1
    return f"{reference_name}:{start + offset}-{end + offset}"


def position_interval_str(position: Position) -> str:
    return make_interval_str(position.reference_name, position.position, position.position)


def range_interval_str(interval: Range) -> str:
    return make_interval_str(interval.reference_name, interval.start, interval.end)


def parse_interval_str(text: str, base_zero: bool = True) -> Range:
    """Inverse of ``make_interval_str``. Accepts thousands separators (chr1:1,000-2,000)."""
    m = _INTERVAL_RE.match(text.strip())
    if m is None:
        raise ValueError(f"Malformed interval string: {text!r} (expected chr:start-end)")
    offset = 0 if base_zero else 1
    start = int(m.group("start").replace(",", "")) - offset
    end = int(m.group("end").replace(",", "")) - offset
    return make_range(m.group("chrom"), start, end)
