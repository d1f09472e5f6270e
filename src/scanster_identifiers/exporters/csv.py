"""CSV exporter for resolved codes."""

import csv
import logging
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)


def export_csv(
    df: pd.DataFrame,
    output_path: Path,
    quoting: int = csv.QUOTE_NONNUMERIC,
) -> Path:
    """
    Export resolved codes to CSV.

    Args:
        df: DataFrame of serialized IdentifierDict rows
        output_path: Path to output CSV file
        quoting: CSV quoting style (default: QUOTE_NONNUMERIC)

    Returns:
        Path to the created CSV file
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)

    # Put the raw input first and group rows by code type (stable within a type)
    if "input" in df.columns:
        cols = ["input"] + [c for c in df.columns if c != "input"]
        df = df[cols]
    if "code_type" in df.columns:
        df = df.sort_values("code_type", kind="stable")

    df.to_csv(output_path, index=False, quoting=quoting)
    logger.info(f"Resolved codes saved to: {output_path}")

    return output_path
