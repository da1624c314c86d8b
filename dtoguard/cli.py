"""dtoguard CLI - Main entry point and command registration hub."""
# ruff: noqa: E402 - commands imported after cli group definition

import click

from dtoguard import __version__


@click.group()
@click.version_option(version=__version__, prog_name="dtoguard")
@click.help_option("-h", "--help")
def cli():
    """dtoguard - sanitization tag enforcement for Go DTOs

    \b
    QUICK START:
      dtoguard check                  # Scan common/dto
      dtoguard classify LoginDto      # Is this struct checked?

    \b
    For detailed options: dtoguard <command> --help"""
    pass


from dtoguard.commands.check import check
from dtoguard.commands.classify import classify

cli.add_command(check)
cli.add_command(classify)


def main():
    """Main entry point for console script."""
    cli()


if __name__ == "__main__":
    main()
