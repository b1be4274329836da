"""Rich renderers for the journal views."""

import math
from typing import Iterable, Optional

from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tradejournal.models import Insight, JournalEntry, PositionSummary, Sentiment

BAR_WIDTH = 16
BAR_CHAR = "█"
NO_POSITION = "no position"

SENTIMENT_COLORS = {
    Sentiment.POSITIVE: "green",
    Sentiment.NEGATIVE: "red",
    Sentiment.NEUTRAL: "yellow",
}


def bar(value: float, scale: float, color: str, width: int = BAR_WIDTH) -> Text:
    """Horizontal bar proportional to |value| / scale."""
    if not (math.isfinite(value) and math.isfinite(scale)) or scale <= 0 or value == 0:
        return Text("")
    length = max(1, round(abs(value) / scale * width))
    return Text(BAR_CHAR * min(length, width), style=color)


def position_chart(summaries: Iterable[PositionSummary]) -> Table:
    """Bar chart of net quantity and average cost per symbol."""
    summaries = list(summaries)
    qty_scale = max((abs(s.quantity) for s in summaries), default=0)
    cost_scale = max(
        (
            abs(s.average_cost)
            for s in summaries
            if s.average_cost is not None and math.isfinite(s.average_cost)
        ),
        default=0,
    )

    table = Table(title="Performance Analytics", show_header=True, header_style="bold")
    table.add_column("Symbol", style="bold")
    table.add_column("Quantity", justify="right")
    table.add_column("", no_wrap=True)
    table.add_column("Avg Cost", justify="right")
    table.add_column("", no_wrap=True)

    for s in summaries:
        qty_color = "#FF6D6D" if s.quantity >= 0 else "red"
        if s.average_cost is None:
            cost_str = f"[dim]{NO_POSITION}[/dim]"
            cost_bar = Text("")
        else:
            cost_str = f"${s.average_cost:,.2f}"
            cost_bar = bar(s.average_cost, cost_scale, "#82ca9d")
        table.add_row(
            escape(s.symbol),
            str(s.quantity),
            bar(s.quantity, qty_scale, qty_color),
            cost_str,
            cost_bar,
        )

    return table


def positions_table(summaries: Iterable[PositionSummary]) -> Table:
    """Tabular breakdown of the position summaries."""
    table = Table(title="Positions", show_header=True, header_style="bold cyan")
    table.add_column("Symbol", style="bold")
    table.add_column("Bought", justify="right")
    table.add_column("Sold", justify="right")
    table.add_column("Net Qty", justify="right")
    table.add_column("Cost Basis", justify="right")
    table.add_column("Avg Cost", justify="right")

    for s in summaries:
        avg = f"${s.average_cost:,.2f}" if s.average_cost is not None else f"[dim]{NO_POSITION}[/dim]"
        table.add_row(
            escape(s.symbol),
            str(s.buys),
            str(s.sells),
            str(s.quantity),
            f"${s.total_cost:,.2f}",
            avg,
        )
    return table


def insight_panel(insight: Optional[Insight]) -> Panel:
    if insight is None:
        return Panel(
            "[dim]No insights yet. Submit a journal entry first.[/dim]",
            title="[bold]AI Insights[/bold]",
            border_style="dim",
        )
    color = SENTIMENT_COLORS[insight.sentiment]
    return Panel(
        Text(insight.text),
        title=f"[bold]AI Insights[/bold] [{color}]({insight.sentiment.value})[/{color}]",
        border_style=color,
    )


def entry_panel(entry: JournalEntry) -> Panel:
    side_color = "green" if entry.action.value == "buy" else "red"
    lines = [
        f"[bold]Action:[/bold] [{side_color}]{entry.action.value}[/{side_color}]",
        f"[bold]Price:[/bold] ${entry.price:.2f}",
        f"[bold]Quantity:[/bold] {entry.quantity}",
        f"[bold]Notes:[/bold] {escape(entry.notes)}",
    ]
    if entry.voice_input:
        lines.append(f"[bold]Voice Input:[/bold] {escape(entry.voice_input)}")
    return Panel(
        "\n".join(lines),
        title=f"[bold]{entry.date.isoformat()} - {escape(entry.symbol)}[/bold]",
        title_align="left",
        border_style="cyan",
    )


def history_view(entries: Iterable[JournalEntry]):
    entries = list(entries)
    if not entries:
        return Panel(
            "[dim]No journal entries yet[/dim]",
            title="[bold]Journal History[/bold]",
            border_style="dim",
        )
    return Group(*(entry_panel(entry) for entry in entries))
