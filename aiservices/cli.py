"""
Command-line interface for AI services.

Provides the bootstrap commands that validate a host before the AI
services infrastructure is set up.
"""

import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from . import __version__
from .bootstrap import ValidationReport, ValidationRunner
from .config import ConfigLoader
from .errors import BootstrapError, ValidationFailedError
from .logger import create_logger

console = Console()


# ============================================================
# Main CLI Group
# ============================================================

@click.group()
@click.version_option(version=__version__, prog_name="ai-services")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, dir_okay=False),
    envvar="AISERVICES_CONFIG",
    help="YAML file overriding host prerequisites (or set AISERVICES_CONFIG)",
)
@click.pass_context
def cli(ctx, config: str):
    """
    AI Services

    Set up and manage AI services infrastructure on IBM Power systems.
    """
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config


# ============================================================
# BOOTSTRAP Group
# ============================================================

@cli.group(
    epilog="""\b
Examples:
  # Validate the environment
  ai-services bootstrap validate

  # Configure the infrastructure
  ai-services bootstrap configure

  # Get help on a specific subcommand
  ai-services bootstrap validate --help""",
)
def bootstrap():
    """
    Bootstraps AI services infrastructure.

    Bootstrap and configure the AI services infrastructure.

    The bootstrap command helps you set up and validate the environment
    required to run AI services on Power11 systems.

    \b
    Available subcommands:
      validate   - Validate system prerequisites and configuration
      configure  - Configure and initialize the AI services infrastructure
    """
    pass


@bootstrap.command(
    epilog="""\b
Examples:
  # Run all validation checks
  ai-services bootstrap validate

  # Validate with verbose output
  ai-services bootstrap validate -v""",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug output")
@click.pass_context
def validate(ctx, verbose: bool):
    """
    Validates the environment.

    Validate that all prerequisites and configurations are correct for
    bootstrapping.

    \b
    System Checks:
      - Root privileges verification
      - RHEL distribution verification
      - RHEL version validation (9.6 or higher)
      - Power 11 architecture validation
      - RHN registration status
      - LTC yum repository availability
      - service-report package availability

    \b
    Container Runtime:
      - Podman installation and configuration
      - Podman version compatibility

    \b
    License:
      - RHAIIS license

    All checks must pass for successful bootstrap configuration.
    """
    logger = create_logger(verbose)

    try:
        settings = ConfigLoader(ctx.obj.get("config_path")).load()
        report = ValidationRunner(settings, logger).run()
    except ValidationFailedError as e:
        _print_report(e.report)
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)
    except BootstrapError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        sys.exit(1)

    _print_report(report)
    console.print("[green]✓ All validations passed[/green]")


def _print_report(report: ValidationReport) -> None:
    """Render check results as a table."""
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Check")
    table.add_column("Status")
    table.add_column("Details")

    for check in report.checks:
        if not check.passed:
            status = "[red]FAIL[/red]"
        elif not check.implemented:
            status = "[dim]PASS (stub)[/dim]"
        else:
            status = "[green]PASS[/green]"
        table.add_row(check.name, status, escape(check.message))

    console.print(table)
    console.print(f"\n{report.summary()}\n", markup=False)


def main():
    """Console script entry point."""
    cli(obj={})


# ============================================================
# Entry Point
# ============================================================

if __name__ == "__main__":
    main()
