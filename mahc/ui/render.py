"""Result rendering using Rich."""

from rich.console import Console
from rich.table import Table

from mahc.core.errors import MahcError
from mahc.rules.scoring import HandScore, Payments, format_payments
from mahc.ui.i18n import t, translate_error, translate_yaku


def render_payments(console: Console, payments: Payments):
    """Print the dealer / non-dealer payment lines."""
    console.print(format_payments(payments), highlight=False)


def render_fu_breakdown(console: Console, result: HandScore):
    table = Table(title=t("label.fu_breakdown"), show_header=False,
                  border_style="dim")
    table.add_column("item")
    table.add_column("fu", justify="right")
    for item in result.fu_breakdown:
        table.add_row(item.key, str(item.points))
    console.print(table)


def render_hand_score(console: Console, result: HandScore,
                      show_breakdown: bool = False):
    """Render yaku, han/fu and payments for a scored hand."""
    table = Table(title=t("label.yaku"), show_header=True, border_style="cyan")
    table.add_column(t("label.yaku"), style="bold")
    table.add_column(t("label.han"), justify="right")

    for yaku_name, han in result.yaku:
        table.add_row(translate_yaku(yaku_name), str(han))
    if result.dora:
        table.add_row(t("label.dora"), str(result.dora))

    console.print(table)

    summary = t("label.total", han=result.han, fu=result.fu)
    if result.limit is not None:
        summary += f"  [bold red]{t(f'limit.{result.limit.name}')}[/bold red]"
    console.print(f"  {summary}")

    if show_breakdown:
        render_fu_breakdown(console, result)

    render_payments(console, result.payments)


def render_error(console: Console, error: MahcError):
    console.print(f"[red]{t('label.error', message=translate_error(error))}[/red]")
