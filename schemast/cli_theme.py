"""Terminal theme for the schemast CLI.

Same coral & greige palette for light and dark terminals:
  - Section headers with a greige rule
  - Borderless tables with dim headers
  - One-line status markers (info, ok, warn, err)
"""

from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

# ── Brand ─────────────────────────────────────────────────────────

BRAND = "S C H E M A S T"
TAGLINE = "Schema field declarations, synthesized and edited as syntax"

# ── Palette ───────────────────────────────────────────────────────

CORAL = "#E87461"
GREIGE = "#B5A89A"
MUTED = "dim"


def print_version(version: str, console: Console) -> None:
    """Print a compact branded version line."""
    t = Text()
    t.append(BRAND, style=f"bold {CORAL}")
    t.append(f"  v{version}", style=MUTED)
    console.print(t)


# ── Section headers ──────────────────────────────────────────────


def section(title: str, console: Console, uppercase: bool = True) -> None:
    """Print a section header followed by a rule."""
    console.print()
    t = Text("  ")
    t.append(title.upper() if uppercase else title, style="bold")
    console.print(t)
    rule = "─" * len(TAGLINE)
    console.print(f"  {rule}", style=GREIGE)


# ── Tables ───────────────────────────────────────────────────────


def make_kv_table() -> Table:
    """Create a headerless two-column key–value table."""
    t = Table(
        box=box.ROUNDED,
        border_style=GREIGE,
        show_header=False,
        padding=(0, 1),
    )
    t.add_column("Key", style=f"bold {CORAL}", no_wrap=True)
    t.add_column("Value")
    return t


def make_clean_table(**kwargs: object) -> Table:
    """Create a borderless table with dim headers and clean spacing."""
    return Table(
        box=None,
        show_edge=False,
        pad_edge=False,
        header_style=MUTED,
        padding=(0, 2),
        **kwargs,
    )


# ── Status lines ─────────────────────────────────────────────────


def info(msg: str) -> str:
    """Info-level status line (coral arrow, dim text)."""
    return f"  [{CORAL}]›[/{CORAL}] [{MUTED}]{msg}[/{MUTED}]"


def ok(msg: str) -> str:
    """Success status line (green check)."""
    return f"  [bold green]✓[/bold green] {msg}"


def warn(msg: str) -> str:
    """Warning status line (yellow bang)."""
    return f"  [bold yellow]![/bold yellow] [yellow]{msg}[/yellow]"


def err(msg: str) -> str:
    """Error status line (red cross)."""
    return f"  [bold red]✗[/bold red] {msg}"
