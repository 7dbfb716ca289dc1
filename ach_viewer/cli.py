# ach_viewer/cli.py
from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from ach_viewer.controllers import DataSession, write_csv
from ach_viewer.utilities import configure_logging

log = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        description="Decode a NACHA/ACH file into annotated HTML or a per-field CSV."
    )
    ap.add_argument("input", type=Path, help="Path to input ACH file")
    ap.add_argument("output", type=Path, help="Path to output file (.html or .csv)")
    ap.add_argument("--emit", choices=["html", "csv"], default=None,
                    help="Output format (default: from the output suffix, else html)")
    ap.add_argument("--encoding", default="utf-8",
                    help="Text encoding of the input (default: utf-8)")
    return ap


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)

    if not args.input.exists():
        raise SystemExit(f"Input ACH file not found: {args.input}")
    if not args.input.is_file():
        raise SystemExit(f"Input path is not a file: {args.input}")
    args.output.parent.mkdir(parents=True, exist_ok=True)

    configure_logging()
    emit = args.emit or ("csv" if args.output.suffix.lower() == ".csv" else "html")

    session = DataSession()
    doc = session.load(args.input, encoding=args.encoding)

    if emit == "csv":
        rows = write_csv(doc, args.output)
        log.info("Wrote %d rows to %s", rows, args.output)
    else:
        page = session.parser.render_page(doc, title=args.input.name)
        args.output.write_text(page, encoding="utf-8")
        log.info("Wrote %d lines to %s", len(doc), args.output)


if __name__ == "__main__":
    main()
