"""Central UI handler for dtoguard.

Single source of truth for Rich console styling. Import this instead of
instantiating Console() in every command file.

Usage:
    from dtoguard.pipeline.ui import console, print_error

    console.print("[success]OK[/success]")
    print_error("cannot read common/dto")
"""

import sys

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

DTOGUARD_THEME = Theme({
    "info": "bold cyan",
    "warning": "bold yellow",
    "error": "bold red",
    "success": "bold green",
    "path": "bold cyan",
    "dim": "dim white",
})

# Lines are never wrapped: one violation per line, whatever the width
console = Console(
    theme=DTOGUARD_THEME,
    force_terminal=sys.stdout.isatty(),
    soft_wrap=True,
    emoji=False,
    highlight=False,
)

# Fatal errors only
err_console = Console(
    theme=DTOGUARD_THEME,
    stderr=True,
    force_terminal=sys.stderr.isatty(),
    soft_wrap=True,
    emoji=False,
    highlight=False,
)


def print_header(title: str) -> None:
    """Print a plain banner line."""
    console.print(f"[info]{escape(title)}[/info]")


def print_error(msg: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[error]ERROR:[/error] {escape(msg)}")


def print_success(msg: str) -> None:
    """Print a success message in green."""
    console.print(f"[success]OK:[/success] {escape(msg)}")
