from __future__ import annotations

import argparse
import logging
import sys

from typing import List, Optional

from .api import RunOptions, run_file
from .errors import BFError


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="bfrun", description="Run a Brainfuck program.")
    ap.add_argument("filename", nargs="?", help="path to the program source")
    ap.add_argument("--encoding", default="utf-8", help="source file encoding (default: utf-8)")
    ap.add_argument("--no-flush", action="store_true", help="do not flush stdout after every output byte")
    ap.add_argument("-v", "--verbose", action="store_true", help="log pipeline progress to stderr")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.filename is None:
        print("error: no filename provided", file=sys.stderr)
        return 1

    options = RunOptions(encoding=args.encoding, flush_output=not args.no_flush)
    try:
        run_file(args.filename, options=options)
    except BFError as e:
        if sys.stdout is not None:
            sys.stdout.flush()
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
