import argparse
import logging
import math
import os
import sys

from pagesvg import __version__
from pagesvg.conversion import ConversionError, ConversionService, PageRequest
from pagesvg.conversion.adapters import PyMuPdfRenderer

logger = logging.getLogger(__name__)

PROG = "pagesvg"

LOG_LEVEL = os.getenv("PAGESVG_LOG_LEVEL", "WARNING").upper()


def _positive_float(value: str) -> float:
    try:
        f = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid zoom factor: {value!r}")
    if not math.isfinite(f) or f <= 0:
        raise argparse.ArgumentTypeError(f"zoom factor must be a positive finite number: {value!r}")
    return f


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Convert one page of a PDF document to SVG and write it to standard output.",
    )
    parser.add_argument("file", metavar="FILE", help="path to the PDF document")
    parser.add_argument(
        "-p", "--page", type=int, default=1, metavar="PAGE",
        help="1-based page number to convert (default: 1)",
    )
    parser.add_argument(
        "-z", "--zoom", type=_positive_float, default=1.0, metavar="FACTOR",
        help="scale factor applied to the page (default: 1.0)",
    )
    parser.add_argument(
        "-v", "--verbose", action="count", default=0,
        help="log progress to stderr; repeat for debug output",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _configure_logging(verbose: int) -> None:
    level = logging.getLevelName(LOG_LEVEL)
    if not isinstance(level, int):
        level = logging.WARNING
    if verbose:
        level = min(level, logging.INFO if verbose == 1 else logging.DEBUG)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(level)


def main(argv: list[str] | None = None) -> int:
    """Run the converter and return the process exit status."""
    args = build_parser().parse_args(argv)
    _configure_logging(args.verbose)

    service = ConversionService(PyMuPdfRenderer())
    request = PageRequest(path=args.file, page=args.page, zoom=args.zoom)
    try:
        svg = service.convert(request)
    except ConversionError as e:
        logger.debug("conversion failed", exc_info=True)
        print(f"{PROG}: error: {e.message}", file=sys.stderr)
        return e.exit_code

    out = sys.stdout.buffer
    out.write(svg)
    out.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
