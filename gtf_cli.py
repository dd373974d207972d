#!/usr/bin/env python3

"""
Command-line interface for the GTF reader.

Loads a GTF file, keeps the records matching every given filter and writes
them back out in GTF format (or just counts them).
"""

import argparse
import sys
import logging
import re
from typing import Callable, List, Optional, Tuple

from gtf_reader.core.config import load_config
from gtf_reader.core.data_structures import GTFRecord
from gtf_reader.core.exceptions import GTFError
from gtf_reader.core.parsers import GTFFile
from gtf_reader.core.writer import format_record, write_gtf

_REGION_RE = re.compile(r"^(\S+):(\d+)-(\d+)$")


def setup_logging(log_level: str = "INFO") -> None:
    """Set up logging configuration."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format='%(asctime)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )


def parse_region(value: str) -> Tuple[str, int, int]:
    """Parse a SEQ:START-END region argument."""
    match = _REGION_RE.match(value)
    if not match:
        raise argparse.ArgumentTypeError(f"invalid region '{value}', expected SEQ:START-END")
    seqname, start, end = match.groups()
    return seqname, int(start), int(end)


def create_argument_parser() -> argparse.ArgumentParser:
    """Create command line argument parser."""
    parser = argparse.ArgumentParser(
        description="Read, filter and rewrite GTF annotation files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Count valid records
  gtf-reader annotation.gtf --count

  # Exons of one gene inside a region
  gtf-reader annotation.gtf --feature exon --attribute gene_id=ENSG00000223972 --region chr1:11000-15000

  # Write all minus-strand transcripts to a new file
  gtf-reader annotation.gtf --feature transcript --strand - --output minus.gtf
        """
    )

    parser.add_argument('input', help='Input GTF file')

    # Filters
    parser.add_argument('--feature', help='Keep records with this feature type')
    parser.add_argument('--seqname', help='Keep records on this sequence')
    parser.add_argument('--strand', choices=['+', '-', '.'], help='Keep records on this strand')
    parser.add_argument(
        '--attribute',
        action='append',
        default=[],
        metavar='KEY[=VALUE]',
        help='Keep records having this attribute (optionally with this value); repeatable'
    )
    parser.add_argument(
        '--region',
        type=parse_region,
        metavar='SEQ:START-END',
        help='Keep records overlapping this region (1-based, inclusive)'
    )

    # Output
    parser.add_argument('--output', help='Output GTF file (default: stdout)')
    parser.add_argument('--count', action='store_true', help='Print the number of matching records only')

    parser.add_argument('--config', help='Configuration file (JSON or YAML)')
    parser.add_argument(
        '--log-level',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        default='WARNING',
        help='Logging level (default: WARNING)'
    )

    return parser


def build_predicates(args) -> List[Callable[[GTFRecord], bool]]:
    """Turn the filter arguments into record predicates."""
    predicates = []

    if args.feature:
        predicates.append(lambda r: r.feature == args.feature)
    if args.seqname:
        predicates.append(lambda r: r.seqname == args.seqname)
    if args.strand:
        predicates.append(lambda r: r.strand == args.strand)

    for spec in args.attribute:
        key, sep, value = spec.partition('=')
        if sep:
            predicates.append(lambda r, k=key, v=value: r.get_attribute(k) == v)
        else:
            predicates.append(lambda r, k=key: r.has_attribute(k))

    return predicates


def select_records(gtf: GTFFile, args) -> List[GTFRecord]:
    """Apply the region query and predicates to a loaded file."""
    if args.region:
        records = gtf.overlapping(*args.region)
    else:
        records = gtf.records

    predicates = build_predicates(args)
    return [r for r in records if all(p(r) for p in predicates)]


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level)
    logger = logging.getLogger(__name__)

    try:
        config = load_config(config_path=args.config, use_env=True)
        if config.debug_mode:
            logging.getLogger().setLevel(logging.DEBUG)

        gtf = GTFFile(args.input, config)
        gtf.load()
        selected = select_records(gtf, args)
        logger.info(f"Selected {len(selected)} of {gtf.count()} records")

        if args.count:
            print(len(selected))
        elif args.output:
            write_gtf(selected, args.output, encoding=config.encoding,
                      errors=config.encoding_errors)
        else:
            for record in selected:
                sys.stdout.write(format_record(record) + '\n')

        if config.debug_mode:
            gtf.monitor.log_report()

        return 0

    except GTFError as e:
        logger.error(f"{e}")
        return 1
    except OSError as e:
        logger.error(f"File error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
