"""
Exporters for resolved codes.

Each exporter handles a specific output format (CSV, JSON).
"""

from .csv import export_csv
from .summary import export_summary_json

__all__ = [
    "export_csv",
    "export_summary_json",
]
