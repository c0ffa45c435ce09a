"""CLI UI components (Rich).

- Keeps command logic apart from visual details.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import DailyPayload


def print_banner(console: Console) -> None:
    """Print the welcome banner (skipped in JSON mode)."""

    title = Text("DAILY OBJECT", style="bold cyan")
    subtitle = Text("One object • Five clues • Every day", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_clues_table(payload: DailyPayload) -> Table:
    table = Table(title=f"Clues for {payload.date}")
    table.add_column("#", style="cyan", no_wrap=True)
    table.add_column("Clue", style="white")
    for index, clue in enumerate(payload.clues, start=1):
        table.add_row(str(index), clue)
    return table


def build_answer_panel(payload: DailyPayload, *, reveal: bool) -> Panel:
    answer = payload.word if reveal else "•" * len(payload.word)
    body = Text(answer, style="bold yellow" if reveal else "dim")
    return Panel(Align.center(body), title="Answer", border_style="yellow")
