"""Statistics and reporting for resolved codes."""

import logging
from pathlib import Path
from typing import Optional

import pandas as pd

from .models import CodeType

logger = logging.getLogger(__name__)


def print_stats(df: pd.DataFrame, output_path: Optional[Path] = None) -> dict:
    """
    Print and return statistics about resolved codes.

    Args:
        df: DataFrame of serialized IdentifierDict rows
        output_path: Optional path to save statistics as text file

    Returns:
        Dictionary of computed statistics
    """
    total = len(df)
    lines: list[str] = []  # Collect output for file

    def output(msg: str = "") -> None:
        """Log message and collect for file output."""
        logger.info(msg)
        lines.append(msg)

    def count_notna(col: str) -> int:
        if col in df.columns:
            return int(df[col].notna().sum())
        return 0

    stats = {
        "total": total,
        "with_isbn13": count_notna("isbn13"),
        "with_isbn10": count_notna("isbn10"),
        "with_upc": count_notna("upc"),
        "with_lccn": count_notna("lccn"),
        "converted_from_upc": int(df["converted_from_upc"].astype(bool).sum()) if "converted_from_upc" in df.columns else 0,
    }

    output("=" * 60)
    output("Statistics")
    output("=" * 60)

    output(f"Total codes: {stats['total']:,}")

    if total == 0:
        logger.warning("No codes found - statistics unavailable")
        stats["code_types"] = {}
        return stats

    def log_stat(label: str, key: str) -> None:
        val = stats[key]
        output(f"  {label}: {val:,} ({val / total * 100:.1f}%)")

    output("")
    output("Identifiers:")
    log_stat("With ISBN-13", "with_isbn13")
    log_stat("With ISBN-10", "with_isbn10")
    log_stat("With UPC", "with_upc")
    log_stat("With LCCN", "with_lccn")
    log_stat("ISBN-13 from UPC", "converted_from_upc")

    # Code type distribution, in enum order
    output("")
    output("Code types:")
    type_counts = df["code_type"].value_counts() if "code_type" in df.columns else pd.Series(dtype=int)
    stats["code_types"] = {}
    for code_type in CodeType:
        count = int(type_counts.get(code_type.value, 0))
        stats["code_types"][code_type.value] = count
        if count:
            output(f"  {code_type.value}: {count:,} ({count / total * 100:.1f}%)")

    if output_path:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with open(output_path, "w") as f:
            f.write("\n".join(lines))
        logger.info(f"Statistics saved to: {output_path}")

    return stats
