import argparse
import logging
import sys

from .encoding import encoding_classes, get_encoding
from .encoding.helpers import runs
from .errors import BarcodeError

logger = logging.getLogger(__name__)


parser = argparse.ArgumentParser(
    prog="linebars",
    description="Print module sequence of a linear barcode",
)
parser.add_argument(
    "--barcode-type",
    type=str,
    default="msi",
    choices=sorted(encoding_classes),
    help="Type of barcode used."
)
parser.add_argument(
    "--format",
    type=str,
    default="bits",
    choices=["bits", "runs", "list"],
    help="Output format. 'bits' prints a string of 0 and 1, "\
         "'runs' prints bit and width of every bar and space, "\
         "'list' prints a python list."
)
parser.add_argument(
    "--check-digit",
    action="store_true",
    help="Print computed check digit to stderr."
)
parser.add_argument(
    "--verbose",
    action="store_true",
    help="Enable debug logging."
)
parser.add_argument(
    "content",
    type=str,
    help="Content of barcode."
)


def format_modules(modules, output_format):
    if output_format == "bits":
        return "".join(str(bit) for bit in modules)
    if output_format == "runs":
        return "\n".join(
            "{} {}".format(bit, width) for bit, width in runs(modules)
        )
    if output_format == "list":
        return repr(modules)
    raise ValueError("Unknown output format {!r}".format(output_format))


def main(cmd_args=None):
    if cmd_args is None:
        args = parser.parse_args()
    else:
        args = parser.parse_args(cmd_args)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )

    try:
        encoding = get_encoding(args.barcode_type)
        barcode = encoding(args.content)
    except BarcodeError as e:
        logger.debug("Rejected content %r", args.content)
        print("error: {}".format(e), file=sys.stderr)
        return 2

    modules = barcode.encode()
    if args.check_digit:
        print("check digit: {}".format(barcode.check_digit()), file=sys.stderr)
    print(format_modules(modules, args.format))
    return 0


if __name__ == "__main__":
    sys.exit(main())
