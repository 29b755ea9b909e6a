"""Translate nucleotide records into protein."""

import time
from dataclasses import replace

from fastaseq.codons import from_ncbi, translate
from fastaseq.io import parse_file, write_fasta
from fastaseq.utils import parse_params, get_translation_params, get_output_params


def register(subparsers):
    """Register the translate subcommand."""
    parser = subparsers.add_parser(
        "translate",
        help="Translate nucleotide sequences into protein",
        description="""
Translate every record of a nucleotide FASTA file with an NCBI genetic
code. Settings come from the parameters file (TABLE_ID, STOP_SIGN,
TO_STOP, CDS, GAP, LINE_WIDTH); command-line flags override them.
""",
    )
    parser.add_argument("--in", dest="fasta", required=True, help="Input nucleotide FASTA")
    parser.add_argument("--out", dest="output", required=True, help="Output protein FASTA")
    parser.add_argument("--params", dest="param_file", default="", help="Parameters file")
    parser.add_argument("--table", dest="table_id", type=int, default=None, help="NCBI translation table id")
    parser.add_argument("--stop-sign", default=None, help="Symbol for stop codons")
    parser.add_argument("--to-stop", action="store_true", default=None, help="Stop at the first stop codon")
    parser.add_argument("--cds", action="store_true", default=None, help="Require complete coding sequences")
    parser.add_argument("--gap", default=None, help="Gap character")
    parser.set_defaults(func=run)


def run(args):
    """Run the translate command."""
    params = parse_params(args.param_file) if args.param_file else {}
    settings = get_translation_params(params)
    for key in settings:
        value = getattr(args, key)
        if value is not None:
            settings[key] = value
    width = get_output_params(params)["line_width"]

    table = from_ncbi(settings.pop("table_id"))
    print(f"Translating {args.fasta} with table {table.id} ({table.name})...")
    start_time = time.time()

    records = [
        replace(rec, seq=translate(rec.seq, table, **settings))
        for rec in parse_file(args.fasta)
    ]
    n = write_fasta(records, args.output, width=width)

    runtime = time.time() - start_time
    print(f"Wrote {n} proteins to {args.output} ({runtime:.1f} sec)")
