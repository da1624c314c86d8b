"""Show how struct names are classified, without reading any files."""

import click
from rich.markup import escape

from dtoguard.config_runtime import build_rule_config, load_runtime_config
from dtoguard.pipeline.ui import console
from dtoguard.rules.base import Classification
from dtoguard.rules.go.sanitize_analyze import classify_record

_DESCRIPTIONS = {
    Classification.OUTPUT_ONLY: "skipped (output-only suffix)",
    Classification.EXCLUDED: "skipped (exclusion list)",
    Classification.INPUT: "checked (input DTO)",
    Classification.NOT_A_DTO: "skipped (not a DTO)",
}


@click.command("classify")
@click.argument("names", nargs=-1, required=True)
@click.option("--project-path", default=".", help="Project root (holds .dtoguard/config.json)")
@click.help_option("-h", "--help")
def classify(names, project_path):
    """Print whether each struct NAME would be checked.

    \b
    Example:
      dtoguard classify UserCreateDto UserResponseDto Login Helper
    """
    rule_config = build_rule_config(load_runtime_config(project_path))

    for name in names:
        decision = classify_record(name, rule_config)
        style = "success" if decision.in_scope else "dim"
        console.print(f"{escape(name)}: [{style}]{_DESCRIPTIONS[decision]}[/{style}]")
