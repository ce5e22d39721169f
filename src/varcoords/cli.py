from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

import pysam
from tqdm import tqdm

from . import __version__
from .adapters import contigs_from_header, read_from_pysam
from .bases import CanonicalBases, are_canonical_bases
from .models import Read, ReadRequirements
from .ordering import map_contig_name_to_pos_in_fasta
from .ranges import make_interval_str, range_from_read, range_interval_str
from .reads import read_end, read_satisfies_requirements
from .utils import parse_cigar

logger = logging.getLogger("varcoords")


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    log_fmt = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
    logging.basicConfig(level=level, format=log_fmt, stream=sys.stderr)


def _path_exists(p: str) -> str:
    if not Path(p).exists():
        raise argparse.ArgumentTypeError(f"Path does not exist: {p}")
    return p


def _handle_error(err: Exception) -> int:
    sys.stderr.write(f"{err.__class__.__name__}: {err}\n")
    return 2


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="varcoords",
        description=(
            "varcoords: genomic coordinate helpers (intervals, read spans, canonical bases, "
            "reference contig order)."
        ),
    )
    p.add_argument("--version", action="version", version=f"varcoords {__version__}")
    p.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (-v/-vv).")

    sub = p.add_subparsers(dest="cmd", required=True)

    i = sub.add_parser("interval", help="Format an interval string chr:start-end.")
    i.add_argument("chrom", help="Contig name.")
    i.add_argument("start", type=int, help="0-based start.")
    i.add_argument("end", type=int, help="0-based end.")
    i.add_argument("--one-based", action="store_true", help="Render with 1-based coordinates.")

    b = sub.add_parser("check-bases", help="Check that a sequence only contains canonical bases.")
    b.add_argument("bases", help="Sequence to check (uppercase).")
    b.add_argument("--allow-n", action="store_true", help="Also accept N.")

    s = sub.add_parser("span", help="Reference span of an alignment from its start and CIGAR.")
    s.add_argument("--start", required=True, type=int, help="0-based alignment start.")
    s.add_argument("--cigar", required=True, help="CIGAR string, e.g. 5M2I3D4S.")
    s.add_argument("--contig", default="*", help="Contig name used for the interval output.")

    r = sub.add_parser("read-spans", help="Print the reference interval of each read in a BAM.")
    r.add_argument("--bam", required=True, type=_path_exists, help="Input BAM/SAM/CRAM.")
    r.add_argument("--min-mapq", type=int, default=10, help="Minimum mapping quality.")
    r.add_argument("--include-duplicates", action="store_true", help="Keep duplicate reads.")
    r.add_argument("--include-secondary", action="store_true", help="Keep secondary alignments.")
    r.add_argument(
        "--properly-placed",
        action="store_true",
        help="Require read and mate on the same contig.",
    )
    r.add_argument("--progress", action="store_true", help="Show a progress bar.")

    c = sub.add_parser("contig-order", help="Print contig name and FASTA rank from a header.")
    group = c.add_mutually_exclusive_group(required=True)
    group.add_argument("--bam", type=_path_exists, help="BAM/SAM/CRAM whose header to read.")
    group.add_argument("--vcf", type=_path_exists, help="VCF/BCF whose header to read.")

    return p


# -----------------
# Command handlers
# -----------------

def cmd_interval(args: argparse.Namespace) -> int:
    print(make_interval_str(args.chrom, args.start, args.end, base_zero=not args.one_based))
    return 0


def cmd_check_bases(args: argparse.Namespace) -> int:
    canon = CanonicalBases.ACGTN if args.allow_n else CanonicalBases.ACGT
    check = are_canonical_bases(args.bases, canon)
    if check:
        print("OK")
        return 0
    print(f"Non-canonical base {args.bases[check.bad_position]!r} at index {check.bad_position}")
    return 1


def cmd_span(args: argparse.Namespace) -> int:
    read = Read(alignment_contig_name=args.contig, alignment_start=args.start, cigar=parse_cigar(args.cigar))
    print(f"start\t{read.alignment_start}")
    print(f"end\t{read_end(read)}")
    print(f"interval\t{range_interval_str(range_from_read(read))}")
    return 0


def cmd_read_spans(args: argparse.Namespace) -> int:
    requirements = ReadRequirements(
        min_mapping_quality=int(args.min_mapq),
        keep_duplicates=bool(args.include_duplicates),
        keep_secondary_alignments=bool(args.include_secondary),
        require_properly_placed=bool(args.properly_placed),
    )
    kept = 0
    total = 0
    with pysam.AlignmentFile(args.bam) as bam:
        it: Iterable[pysam.AlignedSegment] = bam.fetch(until_eof=True)
        if args.progress:
            it = tqdm(it, unit="read", desc="Reading alignments")
        for segment in it:
            total += 1
            read = read_from_pysam(segment)
            if not read_satisfies_requirements(read, requirements):
                continue
            kept += 1
            print(f"{read.fragment_name}\t{range_interval_str(range_from_read(read))}")
    logger.info("Kept %d of %d reads", kept, total)
    return 0


def cmd_contig_order(args: argparse.Namespace) -> int:
    if args.bam is not None:
        with pysam.AlignmentFile(args.bam) as bam:
            contigs = contigs_from_header(bam.header)
    else:
        with pysam.VariantFile(args.vcf) as vcf:
            contigs = contigs_from_header(vcf.header)
    lookup = map_contig_name_to_pos_in_fasta(contigs)
    for name, rank in lookup.items():
        print(f"{name}\t{rank}")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _setup_logging(int(args.verbose))

    handlers = {
        "interval": cmd_interval,
        "check-bases": cmd_check_bases,
        "span": cmd_span,
        "read-spans": cmd_read_spans,
        "contig-order": cmd_contig_order,
    }
    handler = handlers.get(args.cmd)
    if handler is None:
        parser.error(f"Unknown command: {args.cmd}")
        return 2
    try:
        return handler(args)
    except Exception as e:
        return _handle_error(e)


if __name__ == "__main__":
    raise SystemExit(main())
