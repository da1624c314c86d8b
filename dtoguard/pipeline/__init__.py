"""Pipeline execution infrastructure."""
from .renderer import render_report
from .structures import RunReport, ViolationCollector
from .ui import console, err_console, print_error, print_header, print_success

__all__ = [
    "RunReport", "ViolationCollector", "render_report",
    "console", "err_console", "print_header", "print_error", "print_success",
]
