"""Per-symbol position aggregation."""

from typing import Iterable

from tradejournal.models import JournalEntry, PositionSummary, TradeAction


def aggregate(entries: Iterable[JournalEntry]) -> dict[str, PositionSummary]:
    """Fold journal entries into per-symbol position summaries.

    Buys add to the bought quantity, the net quantity and the cost basis.
    Sells add to the sold quantity and subtract from the net quantity and
    the cost basis. The average cost is the cost basis divided by the net
    quantity, or None when buys and sells cancel out.

    Args:
        entries: Journal entries in any order.

    Returns:
        Summaries keyed by symbol, in order of first appearance.
    """
    totals: dict[str, dict] = {}

    for entry in entries:
        acc = totals.setdefault(
            entry.symbol, {"buys": 0, "sells": 0, "quantity": 0, "total_cost": 0.0}
        )
        value = entry.quantity * entry.price
        if entry.action == TradeAction.BUY:
            acc["buys"] += entry.quantity
            acc["quantity"] += entry.quantity
            acc["total_cost"] += value
        else:
            acc["sells"] += entry.quantity
            acc["quantity"] -= entry.quantity
            acc["total_cost"] -= value

    summaries = {}
    for symbol, acc in totals.items():
        net = acc["buys"] - acc["sells"]
        summaries[symbol] = PositionSummary(
            symbol=symbol,
            buys=acc["buys"],
            sells=acc["sells"],
            quantity=acc["quantity"],
            total_cost=acc["total_cost"],
            average_cost=(acc["total_cost"] / net) if net != 0 else None,
        )
    return summaries


class PositionAggregator:
    """Summarizes journal entries for the performance chart."""

    def aggregate(self, entries: Iterable[JournalEntry]) -> dict[str, PositionSummary]:
        return aggregate(entries)

    def summarize(self, entries: Iterable[JournalEntry]) -> list[PositionSummary]:
        """Return the summaries as a list in chart order."""
        return list(aggregate(entries).values())
