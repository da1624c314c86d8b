"""Render a RunReport to the console and derive the exit status."""

from rich.markup import escape

from .structures import RunReport
from .ui import console, print_error, print_success


def render_report(report: RunReport) -> int:
    """Print the outcome of a run.

    A fatal error is the only thing printed (to stderr) when present.
    Otherwise every violation gets one line, followed by a count summary.

    Returns:
        Exit status for the process
    """
    if report.fatal_error is not None:
        print_error(str(report.fatal_error))
        return report.exit_code

    marker = report.marker

    if report.violations:
        console.print()
        console.print("[warning]Found validation issues:[/warning]")
        console.print()
        for violation in report.violations:
            console.print(f"[error]FAIL[/error] {escape(violation.describe(marker))}")
        console.print()
        console.print(
            f"[error]Failed:[/error] {len(report.violations)} string fields missing "
            f"{escape(repr(marker))} tag"
        )
        return report.exit_code

    print_success(f"All DTO string fields have {marker!r} validation tags!")
    return report.exit_code
