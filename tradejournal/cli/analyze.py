"""Analysis commands for TradeJournal CLI.

One-shot sentiment classification and position aggregation.
"""

from datetime import date

import click
from pydantic import ValidationError
from rich.console import Console
from rich.panel import Panel

from tradejournal.models import JournalEntry

console = Console()


def parse_entry_option(raw: str, entry_id: int, trade_date: date) -> JournalEntry:
    """Parse a SYMBOL:ACTION:PRICE:QTY value into a journal entry.

    Raises:
        click.BadParameter: If the value is malformed or fails validation.
    """
    parts = raw.split(":")
    if len(parts) != 4:
        raise click.BadParameter(
            f"'{raw}' is not in SYMBOL:ACTION:PRICE:QTY form", param_hint="--entry"
        )
    symbol, action, price, quantity = (part.strip() for part in parts)
    try:
        return JournalEntry(
            id=entry_id,
            date=trade_date,
            symbol=symbol,
            action=action.lower(),
            price=price,
            quantity=quantity,
        )
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors())
        raise click.BadParameter(f"'{raw}' has invalid {fields}", param_hint="--entry") from e


@click.command()
@click.argument("text", nargs=-1, required=True)
@click.pass_context
def sentiment(ctx: click.Context, text: tuple[str, ...]) -> None:
    """Classify the sentiment of a note.

    \b
    Examples:
      tradejournal sentiment "Great profit today, feeling confident"
      tradejournal sentiment Bad loss, worried about this bearish trend
    """
    from tradejournal.analysis.sentiment import format_key_words, key_words
    from tradejournal.cli.main import load_scorer
    from tradejournal.cli.render import SENTIMENT_COLORS

    scorer = load_scorer(ctx)
    settings = ctx.obj["settings"]
    note = " ".join(text)

    label = scorer.classify(note)
    score = scorer.score(note)
    words = key_words(note, limit=settings.sentiment.key_word_limit)
    color = SENTIMENT_COLORS[label]

    console.print(Panel(
        f"Sentiment:  [{color}]{label.value}[/{color}]\n"
        f"Score:      {score:+d}\n"
        f"Key words:  {format_key_words(words) or '-'}",
        title="[bold]Sentiment Analysis[/bold]",
        border_style=color,
    ))


@click.command()
@click.option(
    "-e",
    "--entry",
    "entries",
    multiple=True,
    required=True,
    help="Trade as SYMBOL:ACTION:PRICE:QTY (repeatable).",
)
@click.option(
    "--date",
    "trade_date",
    type=click.DateTime(formats=["%Y-%m-%d"]),
    default=None,
    help="Trade date for all entries (YYYY-MM-DD, default today).",
)
@click.option("--chart/--no-chart", default=True, help="Draw the position bar chart.")
def positions(entries: tuple[str, ...], trade_date, chart: bool) -> None:
    """Aggregate trades into net quantity and average cost per symbol.

    \b
    Examples:
      tradejournal positions -e ABC:buy:10:5
      tradejournal positions -e ABC:buy:10:5 -e ABC:sell:12:5 --no-chart
    """
    from tradejournal.analysis.positions import PositionAggregator
    from tradejournal.cli.render import position_chart, positions_table

    day = trade_date.date() if trade_date else date.today()
    parsed = [parse_entry_option(raw, i, day) for i, raw in enumerate(entries, start=1)]
    summaries = PositionAggregator().summarize(parsed)

    console.print(positions_table(summaries))
    if chart:
        console.print()
        console.print(position_chart(summaries))
