"""Genome-aware ordering of positions and variants.

Two orderings live here:

- ``compare_positions`` is purely lexicographic on the contig name, then the
  coordinate. "chr10" sorts before "chr2". Use it only when no reference is known.
- ``compare_variants`` orders by each contig's rank in the reference FASTA, using
  a lookup built once by ``map_contig_name_to_pos_in_fasta``.

Variants on contigs missing from the lookup raise ``UnknownContigError``.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, List, Mapping, Tuple

from .models import ContigInfo, Position, Variant
from .ranges import position_from_variant

logger = logging.getLogger(__name__)

VariantSortKey = Tuple[int, int, int, str, Tuple[str, ...]]


class UnknownContigError(KeyError):
    """Raised when a variant's contig is absent from the contig lookup."""

    def __init__(self, contig: str) -> None:
        super().__init__(contig)
        self.contig = contig

    def __str__(self) -> str:
        return f"Contig '{self.contig}' is not present in the reference contig ordering"


def map_contig_name_to_pos_in_fasta(contigs: Iterable[ContigInfo]) -> Mapping[str, int]:
    """Build a read-only contig name -> FASTA rank lookup.

    Build it once per reference and share it. Raises ValueError on duplicate names
    or on two contigs sharing a pos_in_fasta.
    """
    lookup = {}
    names_by_rank = {}
    for contig in contigs:
        if contig.name in lookup:
            raise ValueError(f"Duplicate contig name in reference: {contig.name}")
        rank = int(contig.pos_in_fasta)
        if rank in names_by_rank:
            raise ValueError(
                f"Duplicate pos_in_fasta {rank} for contigs {names_by_rank[rank]} and {contig.name}"
            )
        names_by_rank[rank] = contig.name
        lookup[contig.name] = rank
    logger.debug("Built contig order lookup for %d contigs", len(lookup))
    return MappingProxyType(lookup)


def _cmp(a, b) -> int:
    return (a > b) - (a < b)


def compare_positions(pos1: Position, pos2: Position) -> int:
    """Compare by reference_name (as text), then position. Returns -1, 0 or 1."""
    by_name = _cmp(pos1.reference_name, pos2.reference_name)
    if by_name != 0:
        return by_name
    return _cmp(pos1.position, pos2.position)


def compare_variant_positions(variant1: Variant, variant2: Variant) -> int:
    """``compare_positions`` on the variants' reference_name and start only."""
    return compare_positions(position_from_variant(variant1), position_from_variant(variant2))


def variant_sort_key(variant: Variant, contig_name_to_pos_in_fasta: Mapping[str, int]) -> VariantSortKey:
    """Total-order key: contig rank, start, end, reference bases, alternate bases."""
    try:
        rank = contig_name_to_pos_in_fasta[variant.reference_name]
    except KeyError:
        raise UnknownContigError(variant.reference_name) from None
    end = variant.end if variant.end is not None else variant.start + 1
    return (rank, variant.start, end, variant.reference_bases, tuple(variant.alternate_bases))


def compare_variants(a: Variant, b: Variant, contig_name_to_pos_in_fasta: Mapping[str, int]) -> bool:
    """True if ``a`` sorts strictly before ``b`` in reference order."""
    return variant_sort_key(a, contig_name_to_pos_in_fasta) < variant_sort_key(b, contig_name_to_pos_in_fasta)


def sort_variants(variants: Iterable[Variant], contig_name_to_pos_in_fasta: Mapping[str, int]) -> List[Variant]:
    return sorted(variants, key=lambda v: variant_sort_key(v, contig_name_to_pos_in_fasta))
