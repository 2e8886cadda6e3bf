"""
Reporting module for parcelstore.

Output formats:
    - Console: Rich table with coloured status and per-status counts
    - JSON: Structured output for programmatic consumption

Example:
    from parcelstore.report import generate_json_report, render_parcels

    parcels = db.store.get_by_client(1000)
    render_parcels(parcels, title="Client 1000")
    print(generate_json_report(parcels))
"""

from parcelstore.report.console import render_parcels
from parcelstore.report.json import build_parcels_dict, generate_json_report

__all__ = [
    "render_parcels",
    "generate_json_report",
    "build_parcels_dict",
]
