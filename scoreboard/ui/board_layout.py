"""Scoreboard layout rendering using Rich."""

from typing import Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from scoreboard.core.match_state import HistoryEntry, MatchState
from scoreboard.core.seat import Seat
from scoreboard.engine.history import format_diff, format_points
from scoreboard.engine.standings import FinalSettlement, compute_ranks
from scoreboard.engine.undo import SettlementMeta
from scoreboard.rules.score_table import rank_name
from scoreboard.rules.settlement import SettlementPreview
from scoreboard.ui.i18n import t


def _diff_style(value: int) -> str:
    return "green" if value > 0 else "red" if value < 0 else "dim"


def render_header(console: Console, state: MatchState, label: str,
                  elapsed: int, total_points: int):
    """Round, dealer, pool and session info."""
    header = Text()
    header.append(f"  {label}", style="bold")
    header.append(f"  {t('label.dealer', name=state.dealer_name)}")
    header.append(f"\n  {t('label.pool', points=format_points(state.pool * 1000), sticks=state.pool)}")
    header.append(f"  {t('label.elapsed', minutes=elapsed)}")
    total = state.total_with_pool
    total_style = "" if total == total_points else "bold red"
    header.append(f"\n  {t('label.total')} ")
    header.append(f"{format_points(total)} / {format_points(total_points)}", style=total_style)

    console.print(Panel(header, title=f"[bold]{t('label.title')}[/bold]", border_style="cyan"))


def render_scores(console: Console, state: MatchState):
    """Points table in seat order, with ranks and the dealer marked."""
    ranks = compute_ranks(state.points)
    best, worst = min(ranks), max(ranks)

    table = Table(title=t('label.scores'), border_style="cyan")
    table.add_column(t('col.seat'), justify="center")
    table.add_column(t('col.player'), style="bold")
    table.add_column(t('col.points'), justify="right")
    table.add_column(t('col.rank'), justify="center")

    for seat in Seat:
        name = state.name_of(seat)
        if seat == state.dealer:
            name = f"{name} {t('label.dealer_mark')}"
        rank = ranks[seat]
        style = "bold green" if rank == best else "red" if rank == worst else ""
        table.add_row(
            str(seat.value + 1),
            name,
            format_points(state.points[seat]),
            t('label.rank', rank=rank),
            style=style,
        )

    console.print(table)


def render_diff_matrix(console: Console, names, matrix):
    """How far each row player is ahead of each column player."""
    table = Table(title=t('label.diff_matrix'), border_style="cyan")
    table.add_column("")
    for name in names:
        table.add_column(name, justify="right")

    for seat, row in enumerate(matrix):
        cells = []
        for other, diff in enumerate(row):
            if seat == other:
                cells.append(Text("·", style="dim"))
                continue
            cells.append(Text(format_diff(diff), style=_diff_style(diff)))
        table.add_row(Text(names[seat], style="bold"), *cells)

    console.print(table)


def render_preview(console: Console, state: MatchState,
                   preview: Optional[SettlementPreview]):
    """Show what a settlement would do before it is confirmed."""
    if preview is None:
        console.print(f"  [dim]{t('preview.unavailable')}[/dim]")
        return

    table = Table(title=t('preview.title'), border_style="yellow")
    table.add_column(t('col.player'), style="bold")
    table.add_column(t('col.points'), justify="right")
    table.add_column(t('col.delta'), justify="right")
    table.add_column(t('col.after'), justify="right")
    for seat in Seat:
        delta = preview.deltas[seat]
        table.add_row(
            state.name_of(seat),
            format_points(state.points[seat]),
            Text(format_diff(delta), style=_diff_style(delta)),
            format_points(state.points[seat] + delta),
        )
    console.print(table)

    if preview.winner is not None:
        console.print(
            f"  {t('preview.winner', name=state.name_of(preview.winner), rank=rank_name(preview.han, preview.fu))}"
            f"  {t('preview.income', pool=format_points(preview.pool_income), riichi=format_points(preview.riichi_income))}"
        )
    console.print(
        f"  {t('preview.pool', before=format_points(preview.pool_before * 1000), after=format_points(preview.pool_after * 1000))}"
    )


def render_history(console: Console, history, names=None):
    """Settled hands, newest first, using each hand's own name snapshot."""
    if not history:
        console.print(f"  [dim]{t('history.empty')}[/dim]")
        return

    table = Table(title=t('history.title'), border_style="cyan", show_lines=True)
    table.add_column(t('col.time'), style="dim")
    table.add_column(t('col.round'))
    table.add_column(t('col.kind'), justify="center")
    table.add_column(t('col.riichi'), justify="center")
    table.add_column(t('col.deltas'))
    table.add_column(t('col.description'))

    for entry in history:
        table.add_row(
            entry.timestamp,
            f"{entry.round_label}\n{t('label.dealer', name=entry.dealer_name)}",
            entry.kind.display_name,
            str(entry.riichi_count),
            _entry_deltas(entry, names),
            entry.description,
        )

    console.print(table)


def _entry_deltas(entry: HistoryEntry, names=None) -> Text:
    text = Text()
    if not entry.deltas:
        return text
    labels = entry.player_names or names or [seat.default_name for seat in Seat]
    for i, (name, delta) in enumerate(zip(labels, entry.deltas)):
        if i > 0:
            text.append("\n")
        text.append(f"{name} ")
        text.append(format_diff(delta), style=_diff_style(delta))
    return text


def render_undo_status(console: Console, meta: Optional[SettlementMeta],
                       can_undo: bool, can_redo: bool):
    if meta is None:
        console.print(f"  [dim]{t('undo.none')}[/dim]")
        return
    state_key = 'undo.can_undo' if can_undo else 'undo.can_redo' if can_redo else 'undo.none'
    console.print(
        f"  {t('undo.last', kind=meta.kind.display_name, summary=meta.summary, time=meta.timestamp)}"
        f"  [dim]{t(state_key)}[/dim]"
    )


def render_final_settlement(console: Console, final: FinalSettlement,
                            names, history=()):
    """Final ranking with uma, session length and every hand's deltas."""
    console.print()
    console.print(Panel(f"[bold]{t('final.title')}[/bold]", border_style="gold1"))

    table = Table(title=t('final.ranking'), border_style="gold1")
    table.add_column(t('col.rank'), justify="center")
    table.add_column(t('col.player'), style="bold")
    table.add_column(t('col.points'), justify="right")
    table.add_column(t('col.uma'), justify="right")

    for standing in final.standings:
        style = "bold green" if standing.rank == 1 else "red" if standing.rank == 4 else ""
        table.add_row(
            str(standing.rank),
            standing.name,
            format_points(standing.points),
            f"{standing.uma:+.1f}",
            style=style,
        )

    console.print(table)
    console.print(f"  {t('label.elapsed', minutes=final.elapsed_minutes)}")
    render_diff_matrix(console, names, final.diff_matrix)
    render_history(console, history)
    console.print()
