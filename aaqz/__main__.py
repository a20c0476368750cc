from __future__ import annotations

import logging
import sys
from argparse import ArgumentParser

from aaqz import config
from aaqz.interpreter import Interpreter
from aaqz.reader.reader import read
from aaqz.types.errors import AAQZError

logger = logging.getLogger("aaqz")


def main(argv: list[str] | None = None) -> int:
    parser = ArgumentParser(prog="aaqz", description="Run AAQZ programs.")
    parser.add_argument("file", type=str, nargs="?", default=None,
                        help="program file; '-' or omitted reads standard input")
    parser.add_argument("-e", "--expr", type=str, default=None,
                        help="evaluate this program text instead of a file")
    parser.add_argument("--log-level", type=str, default=None,
                        help="logging level name (default from AAQZ_LOG_LEVEL)")
    args = parser.parse_args(argv)

    level = config.get_log_level()
    if args.log_level is not None:
        named = logging.getLevelName(args.log_level.upper())
        level = named if isinstance(named, int) else level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    if args.expr is not None:
        source = args.expr
    elif args.file is None or args.file == "-":
        source = sys.stdin.read()
    else:
        with open(args.file, encoding="utf-8") as f:
            source = f.read()

    sys.setrecursionlimit(max(sys.getrecursionlimit(), config.get_recursion_limit()))

    interp = Interpreter()
    try:
        for form in read(source):
            print(interp.top_interp(form))
    except AAQZError as e:
        logger.debug("evaluation failed", exc_info=True)
        print(e, file=sys.stderr)
        return 1
    except RecursionError:
        logger.debug("evaluation exceeded the recursion limit")
        print("AAQZ recursion limit exceeded", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
