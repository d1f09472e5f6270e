"""Command-line interface for checking individual codes."""

import argparse
import logging

from .models import CodeType
from .resolve import resolve_code

logger = logging.getLogger(__name__)


def describe(record: dict) -> str:
    """One-line summary of a resolved code."""
    keys = ", ".join(record["lookup_keys"]) or "-"
    return f"{record['input']!r}: {record['code_type'].value} {record['display']} (lookup: {keys})"


def main() -> int:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s - %(message)s")

    parser = argparse.ArgumentParser(description="Classify and convert ISBN/UPC/EAN/LCCN codes")
    parser.add_argument("codes", nargs="+", metavar="CODE", help="Codes to check (quote codes containing spaces)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable verbose/debug logging")
    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    unknown = 0
    for code in args.codes:
        record = resolve_code(code)
        if record["code_type"] is CodeType.UNKNOWN:
            unknown += 1
        print(describe(record))

    if unknown:
        logger.warning(f"{unknown} of {len(args.codes)} code(s) not recognized")
        return 1
    return 0


if __name__ == "__main__":
    exit(main())
