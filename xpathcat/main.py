"""Command-line entry point: ``xpathcat [-v] EXPRESSION [FILE ...]``."""

from __future__ import annotations

import argparse
import sys
from typing import BinaryIO, Optional, TextIO

from xpathcat import __version__
from xpathcat.config import STDIN_LABEL, settings
from xpathcat.dependencies import get_batch_controller
from xpathcat.utils.logging import get_logger, setup_logging


class _ArgumentParser(argparse.ArgumentParser):
    # Usage errors exit with status 1, not argparse's default 2.
    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog="xpathcat",
        description="Evaluate an XPath expression against XML documents.",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log progress to stderr"
    )
    parser.add_argument("expression", help="XPath 1.0 expression")
    parser.add_argument(
        "inputs",
        nargs="*",
        metavar="FILE",
        help=f"XML documents to query. '{STDIN_LABEL}' or none reads standard input",
    )
    return parser


def main(
    argv: list[str] | None = None,
    stdout: Optional[TextIO] = None,
    stdin: Optional[BinaryIO] = None,
) -> int:
    """Run one batch.  Per-input failures do not affect the exit status."""
    args = build_parser().parse_args(argv)

    config = settings.model_copy(update={"verbose": settings.verbose or args.verbose})
    setup_logging(debug=config.verbose)
    logger = get_logger("startup")
    logger.debug("xpathcat_start", version=__version__, expression=args.expression)

    controller = get_batch_controller(config, sink=stdout, stdin=stdin)
    controller.run(args.expression, args.inputs)
    return 0


def run() -> None:
    raise SystemExit(main())


if __name__ == "__main__":
    run()
