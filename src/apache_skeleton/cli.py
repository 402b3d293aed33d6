"""
Click-based CLI for apache-skeleton.

This module only ORCHESTRATES:
- Collects operator input
- Invokes scanners and actions
- Formats output
"""

import logging
import sys
from dataclasses import asdict
from pathlib import Path

import click
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from apache_skeleton import __version__
from apache_skeleton.actions.materialize import MaterializeAction
from apache_skeleton.actions.runtime import RuntimeAction
from apache_skeleton.config import ConfigManager
from apache_skeleton.connector.local import LocalConnector
from apache_skeleton.console import bold, info
from apache_skeleton.errors import InputError, SkeletonError
from apache_skeleton.model.project import ProjectSpec, ProjectType
from apache_skeleton.render import render_next_steps
from apache_skeleton.scanner.php import PHPRuntimeScanner
from apache_skeleton.scanner.versions import VersionScanner

console = Console()

MENU = """\
  1) small-app     (public/ + includes/ + app/ + config/ + storage/ + database/)
  2) saas-api      (MVC-ish: public/ + app/{Controllers,Models,Views} + config/ + storage/ + database/)
  3) large-app     (Laravel-like layout placeholder)
  4) marketing     (public-only static site)"""


def _ask_yes(message: str) -> bool:
    """Prompt that only accepts a literal 'yes'; anything else is no."""
    answer = click.prompt(f"{message} (yes/no)", default="no")
    return answer == "yes"


@click.group()
@click.version_option(version=__version__, prog_name="apache-skeleton")
@click.option("--config", "-c", type=click.Path(), help="Path to config directory")
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def main(ctx: click.Context, config: str | None, verbose: bool) -> None:
    """apache-skeleton: scaffold Apache2 + PHP + Bootstrap projects.

    DocumentRoot always points at the project's public/ directory.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    config_dir = Path(config) if config else None
    ctx.obj["config_mgr"] = ConfigManager(config_dir)


@main.command()
@click.option("--domain", "-d", help="Server domain (example.com)")
@click.option("--base-dir", "-b", help="Base directory (default from config)")
@click.option("--type", "-t", "type_choice", help="Project type: 1-4 or its name")
@click.option("--yes", is_flag=True, help="Continue without asking if the project exists")
@click.pass_context
def create(
    ctx: click.Context,
    domain: str | None,
    base_dir: str | None,
    type_choice: str | None,
    yes: bool,
) -> None:
    """Create a new project skeleton interactively.

    The VirtualHost template is written to config/ but never enabled.
    """
    settings = ctx.obj["config_mgr"].load()

    try:
        bold(console, "Apache2 Project Skeleton Generator")
        console.print()

        if domain is None:
            domain = click.prompt("Enter server domain (example.com)", default="", show_default=False)
        if not (domain or "").strip():
            raise InputError("Domain cannot be empty.")

        if base_dir is None:
            base_dir = click.prompt("Base directory", default=settings.base_dir)

        if type_choice is None:
            console.print()
            bold(console, "Select project type:")
            console.print(escape(MENU), highlight=False)
            console.print()
            type_choice = click.prompt("Enter choice (1-4)", default="1")

        project_type = ProjectType.from_choice(type_choice)
        spec = ProjectSpec.build(domain, base_dir, project_type)

        connector = LocalConnector()
        scanner = PHPRuntimeScanner(connector)
        mode = scanner.probe()
        mode = RuntimeAction(
            connector, scanner, console, _ask_yes, fpm_package=settings.fpm_package
        ).ensure(mode, project_type)

        console.print()
        info(console, f"Domain:        {spec.domain}")
        info(console, f"Base dir:      {spec.base_dir}")
        info(console, f"Project root:  {spec.root}")
        info(console, f"Project type:  {project_type.value}")
        info(console, f"PHP mode:      {mode}")
        if mode.is_fpm:
            info(console, f"PHP-FPM sock:  {mode.socket_path}")
        console.print()

        record = VersionScanner(connector).scan(spec.domain, mode)
        confirm = (lambda _message: True) if yes else _ask_yes
        root = MaterializeAction(console, confirm).materialize(spec, mode, record, settings)

    except SkeletonError as e:
        console.print(f"[bold red]Error:[/] {escape(str(e))}")
        sys.exit(1)

    console.print("[bold green]Done[/]")
    console.print()
    info(console, f"Project created at:             {root}")
    info(console, f"Apache vhost template saved at: {spec.vhost_path}")
    info(console, f"versions saved at:              {spec.versions_path}")
    console.print()
    console.print(escape(render_next_steps(spec, mode)), highlight=False)


@main.command()
def probe() -> None:
    """Show the detected PHP runtime and tool versions.

    Read-only; nothing is installed or written.
    """
    connector = LocalConnector()
    mode = PHPRuntimeScanner(connector).probe()
    record = VersionScanner(connector).scan("-", mode)

    table = Table(title="Host Environment", show_header=False)
    table.add_column("Item", style="bold")
    table.add_column("Value")
    table.add_row("PHP Mode", escape(str(mode)))
    table.add_row("OS", escape(record.os))
    table.add_row("Apache", escape(record.apache))
    table.add_row("PHP", escape(record.php))
    table.add_row("MariaDB/MySQL", escape(record.database))
    console.print(table)


@main.group()
def config() -> None:
    """Manage default settings."""
    pass


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Print the effective settings."""
    config_mgr = ctx.obj["config_mgr"]
    settings = config_mgr.load()
    console.print(f"[dim]# {escape(str(config_mgr.config_file))}[/]")
    console.print(escape(yaml.safe_dump(asdict(settings), sort_keys=False)), highlight=False)


@config.command("set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def config_set(ctx: click.Context, key: str, value: str) -> None:
    """Set a default (base_dir, bootstrap_version, fpm_package)."""
    config_mgr = ctx.obj["config_mgr"]
    try:
        config_mgr.set_value(key, value)
    except KeyError as e:
        console.print(f"[bold red]Error:[/] {escape(e.args[0])}")
        sys.exit(1)
    console.print(f"[bold green]✓ Saved:[/] {escape(key)} = {escape(value)}")


if __name__ == "__main__":
    main()
