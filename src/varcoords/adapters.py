"""Conversion from pysam objects to plain ``varcoords`` records.

File parsing is pysam's job; these helpers only copy already-parsed fields.
"""

from __future__ import annotations

import logging
import math
from typing import List, Union

import pysam

from .info import set_info_field
from .models import CigarOp, CigarUnit, ContigInfo, Read, Variant

logger = logging.getLogger(__name__)

_NUMERIC_INFO_TYPES = {"Integer", "Float"}


def read_from_pysam(segment: pysam.AlignedSegment) -> Read:
    """Copy the alignment fields of a pysam segment into a ``Read``."""
    contig = ""
    if not segment.is_unmapped and segment.reference_name is not None:
        contig = segment.reference_name

    mate_contig = ""
    if segment.is_paired and not segment.mate_is_unmapped and segment.next_reference_name is not None:
        mate_contig = segment.next_reference_name

    cigar = tuple(CigarUnit(CigarOp(op), int(length)) for op, length in (segment.cigartuples or []))

    return Read(
        fragment_name=str(segment.query_name or ""),
        alignment_contig_name=contig,
        alignment_start=int(segment.reference_start),
        cigar=cigar,
        mapping_quality=int(segment.mapping_quality),
        mate_contig_name=mate_contig,
        duplicate_fragment=bool(segment.is_duplicate),
        failed_vendor_quality_checks=bool(segment.is_qcfail),
        secondary_alignment=bool(segment.is_secondary),
        supplementary_alignment=bool(segment.is_supplementary),
    )


def variant_from_pysam(record: pysam.VariantRecord) -> Variant:
    """Copy a pysam VCF record into a ``Variant`` (0-based start, exclusive end)."""
    variant = Variant(
        reference_name=str(record.contig),
        start=int(record.start),
        end=int(record.stop),
        reference_bases=str(record.ref),
        alternate_bases=tuple(record.alts or ()),
    )
    for key, value in record.info.items():
        values = list(value) if isinstance(value, tuple) else [value]
        if all(v is None for v in values):
            continue
        # "." elements: NaN for numeric fields, "." otherwise
        numeric = key in record.header.info and record.header.info[key].type in _NUMERIC_INFO_TYPES
        missing = math.nan if numeric else "."
        set_info_field(key, [missing if v is None else v for v in values], variant)
    return variant


def contigs_from_header(header: Union[pysam.AlignmentHeader, pysam.VariantHeader]) -> List[ContigInfo]:
    """Reference contigs in header order, ranked 0..n-1."""
    if isinstance(header, pysam.VariantHeader):
        contigs = [
            ContigInfo(name=str(name), pos_in_fasta=i, n_bases=int(c.length or 0))
            for i, (name, c) in enumerate(header.contigs.items())
        ]
    else:
        contigs = [
            ContigInfo(name=str(name), pos_in_fasta=i, n_bases=int(length))
            for i, (name, length) in enumerate(zip(header.references, header.lengths))
        ]
    logger.debug("Read %d contigs from header", len(contigs))
    return contigs
