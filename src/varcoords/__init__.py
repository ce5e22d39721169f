"""varcoords: genomic coordinate primitives for variant-calling tooling.

Positions and ranges, read reference spans from CIGARs, canonical-base checks,
reference-order variant sorting, and typed INFO-field access. Records are plain
dataclasses; pysam objects can be converted with ``varcoords.adapters``.
"""

from __future__ import annotations

__all__ = [
    "__version__",
    "CanonicalBases",
    "BaseCheck",
    "is_canonical_base",
    "are_canonical_bases",
    "make_position",
    "position_from_variant",
    "make_range",
    "range_from_variant",
    "range_from_read",
    "range_contains",
    "make_interval_str",
    "aligned_contig",
    "read_start",
    "read_end",
    "is_read_properly_placed",
    "read_satisfies_requirements",
    "map_contig_name_to_pos_in_fasta",
    "compare_positions",
    "compare_variants",
    "sort_variants",
    "UnknownContigError",
    "set_info_field",
    "list_values",
    "list_string_values",
]

__version__ = "0.1.0"

from .bases import BaseCheck, CanonicalBases, are_canonical_bases, is_canonical_base
from .info import list_string_values, list_values, set_info_field
from .ordering import (
    UnknownContigError,
    compare_positions,
    compare_variants,
    map_contig_name_to_pos_in_fasta,
    sort_variants,
)
from .ranges import (
    make_interval_str,
    make_position,
    make_range,
    position_from_variant,
    range_contains,
    range_from_read,
    range_from_variant,
)
from .reads import (
    aligned_contig,
    is_read_properly_placed,
    read_end,
    read_satisfies_requirements,
    read_start,
)
