"""Check that input DTO string fields carry the sanitization tag."""

from pathlib import Path

import click

from dtoguard.config_runtime import build_rule_config, load_runtime_config
from dtoguard.pipeline.renderer import render_report
from dtoguard.pipeline.ui import console, print_header
from dtoguard.pipelines import run_sanitize_check
from dtoguard.utils.helpers import save_json_file


@click.command("check")
@click.option("--project-path", default=".", help="Project root (holds .dtoguard/config.json)")
@click.option("--root", default=None, help="DTO directory to scan (default: paths.dto_dir from config)")
@click.option("--output-json", default=None, help="Also write the report as JSON to this path")
@click.option(
    "--include-aliases/--no-include-aliases",
    default=None,
    help="Also check fields typed with a string alias declared in the same file",
)
@click.help_option("-h", "--help")
def check(project_path, root, output_json, include_aliases):
    """Verify every input DTO string field has a sanitize validation tag.

    Walks the DTO directory, parses each Go file, and checks the string
    fields of every struct that carries request input. Response structs
    and the configured exclusions are skipped.

    \b
    Examples:
      dtoguard check                          # Scan common/dto
      dtoguard check --root internal/dto      # Scan another directory
      dtoguard check --output-json report.json

    \b
    Exit Codes:
      0 = Every checked string field has the marker
      1 = Violations found, or a directory/file could not be read or parsed
    """
    cfg = load_runtime_config(project_path)
    rule_config = build_rule_config(cfg, include_string_aliases=include_aliases)

    scan_root = Path(root) if root else Path(project_path) / cfg["paths"]["dto_dir"]

    print_header(f"Checking {rule_config.marker} validation tags in DTOs...")

    report = run_sanitize_check(scan_root, rule_config)
    exit_code = render_report(report)

    if output_json:
        save_json_file(report.to_dict(), output_json)
        console.print(f"Report written to [path]{output_json}[/path]")

    raise SystemExit(exit_code)
