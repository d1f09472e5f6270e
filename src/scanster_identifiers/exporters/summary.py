"""Summary exporter for code resolution statistics."""

import json
import logging
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


def export_summary_json(stats: dict, output_path: Path, quality: Optional[dict] = None) -> Path:
    """
    Export statistics summary as JSON.

    Args:
        stats: Dictionary of statistics from print_stats()
        output_path: Path to output JSON file
        quality: Optional QualityMetrics.report(), stored under "quality"

    Returns:
        Path to the created JSON file
    """
    output_path.parent.mkdir(parents=True, exist_ok=True)

    summary = dict(stats)
    if quality is not None:
        summary["quality"] = quality

    with open(output_path, "w") as f:
        json.dump(summary, f, indent=2)

    logger.info(f"Summary saved to: {output_path}")
    return output_path
