from __future__ import annotations

import argparse
import logging
import sys

from typing import List, Optional

from .engine import Interpreter
from .errors import TkxError

logger = logging.getLogger("tkx")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tkx", description="Run a tape machine (> < + - . , [ ]) program.")
    ap.add_argument("program", nargs="?", help="path to the program source")
    ap.add_argument("-v", "--verbose", action="store_true", help="log load and run timings to stderr")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    if args.program is None:
        print("Usage : tkx <bf-program>")
        return 1

    logging.basicConfig(
        level=logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )
    if args.verbose:
        logger.setLevel(logging.DEBUG)

    interpreter = Interpreter()
    try:
        interpreter.load_file(args.program)
        interpreter.run()
    except TkxError as e:
        sys.stdout.flush()
        logger.error(str(e))
        return 1
    except KeyboardInterrupt:
        logger.error("interrupted at instruction %d", interpreter.state.pc)
        return 130
    return 0
