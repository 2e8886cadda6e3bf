"""
JSON report generator for parcelstore.

Produces structured output for a list of parcels, for programmatic
consumption.
"""

import json
from collections.abc import Sequence
from datetime import UTC, datetime
from typing import Any

from parcelstore.schema import Parcel

REPORT_VERSION = "1.0"


def generate_json_report(parcels: Sequence[Parcel], indent: int | None = 2) -> str:
    """
    Generate a JSON report for a list of parcels.

    Args:
        parcels: Parcels to include, in the order given
        indent: JSON indentation level (default: 2)

    Returns:
        JSON string with the report
    """
    return json.dumps(build_parcels_dict(parcels), indent=indent)


def build_parcels_dict(parcels: Sequence[Parcel]) -> dict[str, Any]:
    """
    Build a report dictionary for a list of parcels.

    Returns:
        Dictionary with report metadata, a count and the parcels
    """
    return {
        "report_version": REPORT_VERSION,
        "generated_at": datetime.now(UTC).isoformat(),
        "count": len(parcels),
        "parcels": [parcel.model_dump() for parcel in parcels],
    }
