"""Configuration constants for book identifier tools."""

from pathlib import Path

# Default directories
DEFAULT_OUTPUT_DIR = Path("data/identifiers")

# Batch input
DEFAULT_CODE_COLUMN = "code"  # CSV column holding the scanned/typed codes
DEFAULT_OUTPUT_FILE = "resolved_codes.csv"

# Runtime flags
# Accept ISBN-10/ISBN-13 shapes with a bad check digit as ISBNs when resolving
# (useful for legacy catalog imports with transcription errors)
SKIP_CHECKSUM_VALIDATION = False
