"""
Console report generator for parcelstore.

Renders a list of parcels as a Rich table with a status column coloured
by lifecycle state, followed by a per-status count.
"""

from collections import Counter
from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from parcelstore.schema import Parcel, ParcelStatus


# Status styles; unknown status codes are shown unstyled
STATUS_STYLES = {
    ParcelStatus.REGISTERED.value: "yellow",
    ParcelStatus.SENT.value: "cyan",
    ParcelStatus.DELIVERED.value: "green",
}


def render_parcels(
    parcels: Sequence[Parcel],
    console: Console | None = None,
    title: str | None = None,
) -> None:
    """
    Print a table of parcels.

    Args:
        parcels: Parcels to show, in the order given
        console: Rich Console instance (creates one if not provided)
        title: Optional table title, e.g. "Client 1000"
    """
    if console is None:
        console = Console()

    if not parcels:
        console.print("[dim]No parcels[/dim]")
        return

    table = Table(title=title, show_header=True, header_style="bold", expand=True)
    table.add_column("Number", style="dim", justify="right")
    table.add_column("Client", justify="right")
    table.add_column("Status", width=10)
    table.add_column("Address", overflow="fold")
    table.add_column("Created", style="dim")

    for parcel in parcels:
        table.add_row(
            str(parcel.number),
            str(parcel.client),
            _format_status(parcel.status),
            escape(_truncate(parcel.address, 60)),
            parcel.created_at,
        )

    console.print(table)
    console.print()
    _print_summary(console, parcels)


def _format_status(status: str) -> str:
    style = STATUS_STYLES.get(status)
    if style is None:
        return escape(status)
    return f"[{style}]{status}[/{style}]"


def _truncate(s: str, max_len: int) -> str:
    """Truncate string with ellipsis."""
    if len(s) <= max_len:
        return s
    return s[: max_len - 3] + "..."


def _print_summary(console: Console, parcels: Sequence[Parcel]) -> None:
    """Print parcel counts per status."""
    counts = Counter(parcel.status for parcel in parcels)

    stats_table = Table(show_header=False, box=None, padding=(0, 2))
    stats_table.add_column("Metric", style="dim")
    stats_table.add_column("Value")

    stats_table.add_row("Total", str(len(parcels)))
    for status, count in sorted(counts.items()):
        stats_table.add_row(_format_status(status), str(count))

    console.print(stats_table)
