#!/usr/bin/env python
"""fastaseq - FASTA parsing and nucleotide sequence toolkit CLI."""

import argparse
import logging
import sys

from fastaseq import __version__


def main(argv=None):
    """Main entry point for the fastaseq CLI."""
    parser = argparse.ArgumentParser(
        prog="fastaseq",
        description="Parse FASTA files and transform or translate nucleotide sequences",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  fastaseq summary --in genes.fa --out genes.csv
  fastaseq transform --in genes.fa --out genes.rc.fa --op reverse-complement
  fastaseq translate --in genes.fa --out proteins.fa --cds --params params.txt
  fastaseq extract --in genes.fa --out picked.fa --id geneA --id geneB

For more information on a specific command:
  fastaseq <command> --help
""",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="Log more detail (-v info, -vv debug)",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available subcommands",
        metavar="<command>",
    )

    # Import and register subcommands
    from fastaseq.commands import (
        summary,
        transform,
        translate,
        extract,
    )

    summary.register(subparsers)
    transform.register(subparsers)
    translate.register(subparsers)
    extract.register(subparsers)

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(1)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    # Execute the subcommand
    args.func(args)


if __name__ == "__main__":
    main()
