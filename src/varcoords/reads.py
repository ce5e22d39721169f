from __future__ import annotations

from .models import Read, ReadRequirements


def aligned_contig(read: Read) -> str:
    """Contig the read is aligned to, or "" if unaligned."""
    return read.alignment_contig_name


def read_start(read: Read) -> int:
    """First reference base covered by the read. O(1), taken straight from the record."""
    return read.alignment_start


def read_end(read: Read) -> int:
    """Last reference base covered by the read's CIGAR (INCLUSIVE).

    Walks the full CIGAR, summing operations that consume the reference
    (M, D, N, =, X); I, S, H and P are skipped. Same as htsjdk's
    ``getReferenceLength`` minus one, added to the start. Callers needing this
    repeatedly for one read should cache it.
    """
    ref_len = 0
    for unit in read.cigar:
        if unit.operation.consumes_reference:
            ref_len += unit.operation_length
    return read.alignment_start + ref_len - 1


def is_read_properly_placed(read: Read) -> bool:
    """True if read and mate are on the same contig, when both are mapped.

    Less strict than the SAM proper-pair flag: orientation and insert size are ignored.
    """
    if not read.alignment_contig_name or not read.mate_contig_name:
        return True
    return read.alignment_contig_name == read.mate_contig_name


def read_satisfies_requirements(read: Read, requirements: ReadRequirements) -> bool:
    """Return False at the first requirement the read fails."""
    if read.duplicate_fragment and not requirements.keep_duplicates:
        return False
    if read.failed_vendor_quality_checks and not requirements.keep_failed_vendor_quality_checks:
        return False
    if read.secondary_alignment and not requirements.keep_secondary_alignments:
        return False
    if read.supplementary_alignment and not requirements.keep_supplementary_alignments:
        return False
    if not read.alignment_contig_name:
        # mapping quality is meaningless for unaligned reads
        return requirements.keep_unaligned
    if read.mapping_quality < requirements.min_mapping_quality:
        return False
    if requirements.require_properly_placed and not is_read_properly_placed(read):
        return False
    return True
