"""Extract records by id from a FASTA file."""

from fastaseq.io import RecordStore, write_fasta
from fastaseq.utils import parse_params, get_output_params


def register(subparsers):
    """Register the extract subcommand."""
    parser = subparsers.add_parser(
        "extract",
        help="Extract records by id",
        description="""
Index a FASTA file by record id and write the requested records, in the
order given, to a new FASTA file. Record ids must be unique.
""",
    )
    parser.add_argument("--in", dest="fasta", required=True, help="Input FASTA")
    parser.add_argument("--out", dest="output", required=True, help="Output FASTA")
    parser.add_argument("--id", dest="ids", action="append", required=True, help="Record id (repeatable)")
    parser.add_argument("--params", dest="param_file", default="", help="Parameters file")
    parser.set_defaults(func=run)


def run(args):
    """Run the extract command."""
    params = parse_params(args.param_file) if args.param_file else {}
    width = get_output_params(params)["line_width"]

    store = RecordStore.from_file(args.fasta)

    selected = []
    for rid in args.ids:
        record = store.lookup(rid)
        if record is None:
            raise KeyError(f"Record {rid} not found in {args.fasta}")
        selected.append(record)

    n = write_fasta(selected, args.output, width=width)
    print(f"Wrote {n} records to {args.output}")
