"""Interactive journal session for TradeJournal CLI.

Entries live in memory for the lifetime of the session only.
"""

from datetime import date

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from tradejournal.journal import JournalController, Tab

console = Console()

MENU = {
    "1": Tab.JOURNAL,
    "2": Tab.INSIGHTS,
    "3": Tab.PERFORMANCE,
    "4": Tab.HISTORY,
}

FIELD_LABELS = {
    "date": "Date (YYYY-MM-DD)",
    "symbol": "Stock Symbol",
    "action": "Action",
    "price": "Price",
    "quantity": "Quantity",
}


def _show_validation_error(error: ValidationError) -> None:
    lines = []
    for err in error.errors():
        field = str(err["loc"][0]) if err["loc"] else "entry"
        lines.append(f"• {field}: {err['msg']}")
    console.print(Panel(
        "[red]Entry not recorded.[/red]\n\n" + "\n".join(lines),
        title="[bold red]Invalid Entry[/bold red]",
        border_style="red",
    ))


def _prompt_draft(controller: JournalController) -> None:
    """Fill the draft from prompts, keeping previous values as defaults."""
    draft = controller.state.draft
    defaults = {
        "date": draft.date or date.today().isoformat(),
        "symbol": draft.symbol or None,
        "action": draft.action or None,
        "price": draft.price or None,
        "quantity": draft.quantity or None,
    }
    for name, label in FIELD_LABELS.items():
        if name == "action":
            value = click.prompt(label, type=click.Choice(["buy", "sell"]), default=defaults[name])
        else:
            value = click.prompt(label, default=defaults[name], type=str)
        controller.set_field(name, value)

    notes = click.prompt("Notes", default=draft.notes, show_default=False, type=str)
    controller.set_field("notes", notes)


def _capture_voice(controller: JournalController) -> None:
    if not click.confirm("Add voice input?", default=False):
        return

    if controller.start_recording():
        console.print("[cyan]Recording... dictate your thoughts, blank line to stop.[/cyan]")
        controller.capture.listen()
        transcript = controller.stop_recording()
        console.print(f"[dim]Voice input:[/dim] {escape(transcript) or '-'}")
        return

    text = click.prompt("Voice input (type it instead)", default="", show_default=False, type=str)
    controller.set_voice_input(text)


def _journal_tab(controller: JournalController) -> None:
    console.print("[bold cyan]New Journal Entry[/bold cyan]\n")
    _prompt_draft(controller)
    _capture_voice(controller)

    try:
        entry = controller.submit()
    except ValidationError as e:
        _show_validation_error(e)
        return

    console.print(f"[green]Recorded entry #{entry.id}: {entry.action.value} "
                  f"{entry.quantity} {escape(entry.symbol)} @ ${entry.price:.2f}[/green]\n")


def _render_tab(controller: JournalController, tab: Tab) -> None:
    from tradejournal.cli.render import history_view, insight_panel, position_chart

    if tab == Tab.INSIGHTS:
        console.print(insight_panel(controller.state.insight))
    elif tab == Tab.PERFORMANCE:
        summaries = controller.performance()
        if not summaries:
            console.print("[dim]No positions yet.[/dim]")
        else:
            console.print(position_chart(summaries))
    elif tab == Tab.HISTORY:
        console.print(history_view(controller.history()))


@click.command()
@click.pass_context
def session(ctx: click.Context) -> None:
    """Open the interactive trading journal.

    Log trades, dictate notes, and review insights, performance and
    history. Nothing is saved when the session ends.

    \b
    Examples:
      tradejournal session
    """
    from tradejournal.capture import CaptureSession, ConsoleDictationBackend
    from tradejournal.cli.main import load_scorer

    settings = ctx.obj["settings"]
    scorer = load_scorer(ctx)
    backend = ConsoleDictationBackend(enabled=settings.capture.enabled)
    controller = JournalController(
        scorer=scorer,
        capture=CaptureSession(backend),
        key_word_limit=settings.sentiment.key_word_limit,
    )

    console.print("[bold #FF6D6D]Trading Journal[/bold #FF6D6D]")

    while True:
        console.print(
            "\n[bold]1[/bold] Journal Entry  [bold]2[/bold] AI Insights  "
            "[bold]3[/bold] Performance  [bold]4[/bold] History  [bold]q[/bold] Quit"
        )
        choice = click.prompt("Select", type=click.Choice(list(MENU) + ["q"]), show_choices=False)
        if choice == "q":
            break

        tab = MENU[choice]
        controller.select_tab(tab)
        if tab == Tab.JOURNAL:
            _journal_tab(controller)
        else:
            _render_tab(controller, tab)

    console.print(f"[dim]Session closed with {len(controller.history())} entries.[/dim]")
