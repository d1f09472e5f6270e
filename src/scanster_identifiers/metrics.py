"""Code resolution metrics collected during batch processing."""

import logging
from collections import Counter
from dataclasses import dataclass, field
from typing import Optional

from .models import CodeType

logger = logging.getLogger(__name__)

# Max samples to keep for each failure type
_MAX_SAMPLES = 10


@dataclass
class QualityMetrics:
    """Collects identifier quality metrics during processing."""

    codes_total: int = 0
    codes_empty: int = 0

    # Resolved code types
    code_types: Counter = field(default_factory=Counter)

    # Conversions
    upc_converted_to_isbn: int = 0
    ean_converted_to_upc: int = 0
    checksum_skipped: int = 0  # ISBN shapes accepted with SKIP_CHECKSUM_VALIDATION

    # Sample of unrecognized codes for debugging
    unknown_samples: list = field(default_factory=list)

    def record_code(
        self,
        code_type: CodeType,
        code: str | None = None,
        upc_converted: bool = False,
        ean_converted: bool = False,
        checksum_skipped: bool = False,
    ) -> None:
        """Record one resolved code."""
        self.codes_total += 1
        if not code:
            self.codes_empty += 1
        self.code_types[code_type.value] += 1
        if upc_converted:
            self.upc_converted_to_isbn += 1
        if ean_converted:
            self.ean_converted_to_upc += 1
        if checksum_skipped:
            self.checksum_skipped += 1
        if code_type is CodeType.UNKNOWN and code and len(self.unknown_samples) < _MAX_SAMPLES:
            self.unknown_samples.append(code)

    def report(self) -> dict:
        """Generate quality metrics report."""
        known = self.codes_total - self.code_types[CodeType.UNKNOWN.value]
        report = {
            "codes": {
                "total": self.codes_total,
                "empty": self.codes_empty,
                "recognized": known,
                "recognition_rate": (f"{known / self.codes_total * 100:.1f}%" if self.codes_total > 0 else "N/A"),
            },
            "code_types": dict(self.code_types),
            "conversions": {
                "upc_to_isbn13": self.upc_converted_to_isbn,
                "ean13_to_upc": self.ean_converted_to_upc,
                "checksum_skipped": self.checksum_skipped,
            },
        }
        return report

    def print_report(self) -> None:
        """Print quality metrics to logger."""
        logger.info("=" * 60)
        logger.info("Identifier Quality Metrics")
        logger.info("=" * 60)

        logger.info("")
        logger.info("Codes:")
        logger.info(f"  Total processed: {self.codes_total:,}")
        if self.codes_total > 0:
            for code_type, count in self.code_types.most_common():
                logger.info(f"  {code_type}: {count:,} ({count / self.codes_total * 100:.1f}%)")
            if self.codes_empty > 0:
                logger.info(f"  Empty: {self.codes_empty:,}")
            if self.unknown_samples:
                logger.info(f"    Unknown samples: {', '.join(self.unknown_samples)}")

        if self.upc_converted_to_isbn or self.ean_converted_to_upc or self.checksum_skipped:
            logger.info("")
            logger.info("Conversions:")
            logger.info(f"  UPC -> ISBN-13: {self.upc_converted_to_isbn:,}")
            logger.info(f"  EAN-13 -> UPC: {self.ean_converted_to_upc:,}")
            logger.info(f"  Checksum skipped: {self.checksum_skipped:,}")

    def reset(self) -> None:
        """Reset all metrics."""
        self.codes_total = 0
        self.codes_empty = 0
        self.code_types.clear()
        self.upc_converted_to_isbn = 0
        self.ean_converted_to_upc = 0
        self.checksum_skipped = 0
        self.unknown_samples.clear()


# Global metrics instance
_metrics: Optional[QualityMetrics] = None


def get_metrics() -> QualityMetrics:
    """Get the global metrics instance, creating if needed."""
    global _metrics
    if _metrics is None:
        _metrics = QualityMetrics()
    return _metrics


def reset_metrics() -> None:
    """Reset global metrics."""
    global _metrics
    if _metrics is not None:
        _metrics.reset()
