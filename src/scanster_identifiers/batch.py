"""Command-line interface for resolving a CSV of scanned codes."""

import argparse
import logging
from pathlib import Path
from typing import Optional

import pandas as pd
from tqdm import tqdm

from . import config
from .config import DEFAULT_CODE_COLUMN, DEFAULT_OUTPUT_DIR, DEFAULT_OUTPUT_FILE
from .exporters import export_csv, export_summary_json
from .metrics import get_metrics, reset_metrics
from .models import serialize_identifier
from .resolve import resolve_code
from .stats import print_stats

logger = logging.getLogger(__name__)


def load_codes(input_file: Path, column: str = DEFAULT_CODE_COLUMN) -> Optional[pd.Series]:
    """
    Load the code column from a CSV file.

    Codes are read as strings so leading zeros (UPC, ISBN-10) survive.

    Returns:
        Series of raw codes, or None if the file is missing or empty, or lacks the column
    """
    if not input_file.exists():
        logger.error(f"Input file not found: {input_file}")
        return None

    try:
        df = pd.read_csv(input_file, dtype=str, keep_default_na=False)
    except pd.errors.EmptyDataError:
        logger.error(f"Input file is empty: {input_file}")
        return None

    if column not in df.columns:
        logger.error(f"Column '{column}' not found in {input_file} (available: {', '.join(df.columns)})")
        return None

    logger.info(f"Loaded {len(df):,} codes from: {input_file}")
    return df[column]


def resolve_codes(codes: pd.Series, track_metrics: bool = True) -> pd.DataFrame:
    """
    Resolve every code in a Series.

    Args:
        codes: Raw codes
        track_metrics: If True, record each result in the global metrics

    Returns:
        DataFrame with one serialized IdentifierDict per code
    """
    records = [serialize_identifier(resolve_code(code, track_metrics=track_metrics)) for code in tqdm(codes, desc="Resolving codes")]
    return pd.DataFrame(records)


def main() -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    parser = argparse.ArgumentParser(
        description="Resolve a CSV of ISBN/UPC/EAN/LCCN codes",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s --input-file scans.csv                     # Resolve the 'code' column
  %(prog)s --input-file books.csv --column isbn       # Custom column name
  %(prog)s --input-file legacy.csv --skip-checksum    # Accept ISBNs with bad check digits
        """,
    )
    parser.add_argument(
        "--input-file",
        type=Path,
        required=True,
        help="CSV file containing the codes to resolve",
    )
    parser.add_argument(
        "--column",
        type=str,
        default=DEFAULT_CODE_COLUMN,
        help=f"Column holding the codes (default: {DEFAULT_CODE_COLUMN})",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=DEFAULT_OUTPUT_DIR,
        help=f"Output directory (default: {DEFAULT_OUTPUT_DIR})",
    )
    parser.add_argument(
        "--output-file",
        type=str,
        default=DEFAULT_OUTPUT_FILE,
        help=f"Output filename (default: {DEFAULT_OUTPUT_FILE})",
    )
    parser.add_argument(
        "--skip-checksum",
        action="store_true",
        help="Accept ISBN-10/ISBN-13 shaped codes with an invalid check digit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose/debug logging",
    )

    args = parser.parse_args()

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.skip_checksum:
        config.SKIP_CHECKSUM_VALIDATION = True
        logger.info("ISBN checksum validation disabled")

    reset_metrics()

    logger.info("Book Identifier Resolver")
    logger.info("=" * 60)
    logger.info(f"Input file: {args.input_file}")
    logger.info(f"Output directory: {args.output_dir}")

    codes = load_codes(args.input_file, args.column)
    if codes is None:
        return 1

    df = resolve_codes(codes)

    stats = print_stats(df, output_path=args.output_dir / "summary.txt")

    export_csv(df, args.output_dir / args.output_file)
    export_summary_json(stats, args.output_dir / "summary.json", quality=get_metrics().report())

    get_metrics().print_report()

    logger.info("=" * 60)
    logger.info("Resolution Complete!")
    logger.info("=" * 60)

    return 0


if __name__ == "__main__":
    exit(main())
