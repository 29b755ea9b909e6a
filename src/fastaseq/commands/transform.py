"""Apply a nucleotide transformation to every record of a FASTA file."""

import time
from dataclasses import replace

from fastaseq.io import parse_file, write_fasta
from fastaseq.utils import parse_params, get_output_params

OPERATIONS = {
    "complement": lambda seq, args: seq.complement(),
    "reverse-complement": lambda seq, args: seq.reverse_complement(),
    "transcribe": lambda seq, args: seq.transcribe(),
    "ungap": lambda seq, args: seq.ungap(args.gap),
}


def register(subparsers):
    """Register the transform subcommand."""
    parser = subparsers.add_parser(
        "transform",
        help="Complement, reverse-complement, transcribe or ungap sequences",
        description="""
Apply one sequence transformation to every record of a FASTA file and
write the results, keeping ids and descriptions. Complementing accepts
only upper-case A, C, G and T.
""",
    )
    parser.add_argument("--in", dest="fasta", required=True, help="Input FASTA")
    parser.add_argument("--out", dest="output", required=True, help="Output FASTA")
    parser.add_argument("--op", required=True, choices=sorted(OPERATIONS), help="Transformation to apply")
    parser.add_argument("--gap", default="-", help="Gap string removed by 'ungap' (default: -)")
    parser.add_argument("--params", dest="param_file", default="", help="Parameters file")
    parser.set_defaults(func=run)


def run(args):
    """Run the transform command."""
    params = parse_params(args.param_file) if args.param_file else {}
    width = get_output_params(params)["line_width"]

    print(f"Applying {args.op} to {args.fasta}...")
    start_time = time.time()

    op = OPERATIONS[args.op]
    records = [replace(rec, seq=op(rec.seq, args)) for rec in parse_file(args.fasta)]
    n = write_fasta(records, args.output, width=width)

    runtime = time.time() - start_time
    print(f"Wrote {n} records to {args.output} ({runtime:.1f} sec)")
