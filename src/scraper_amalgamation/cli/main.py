"""CLI entry point for scraper-amalgamation.

Invoked as::

    amalgam-prefs [OPTIONS] COMMAND [ARGS]...

or during development::

    python -m scraper_amalgamation.cli.main

Commands
--------
- init            Write default preferences for every scraper group
- show            Display the saved orderings
- validate        Check that the preferences document loads
- set-order       Set the overall or per-field ordering of a group
- clear-override  Remove a per-field override
- sources         List the source identifiers that can be resolved
- version         Show version information
"""
from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from scraper_amalgamation.config import AmalgamationConfig, ConfigLoader
from scraper_amalgamation.convenience import AmalgamationSettings
from scraper_amalgamation.errors import (
    CorruptDocumentError,
    UnknownFieldError,
    UnresolvableIdentifierError,
)
from scraper_amalgamation.model.groups import ScraperGroupName
from scraper_amalgamation.preferences.ordering import OrderingPreference

console = Console()
err_console = Console(stderr=True)

_DEFAULT_CONFIG = Path("amalgamation.yaml")

# Prefix marking an identifier as disabled in ``set-order``.
_DISABLED_PREFIX = "!"


def _settings(ctx: click.Context) -> AmalgamationSettings:
    return AmalgamationSettings(config=ctx.obj["config"])


def _parse_group(value: str) -> ScraperGroupName:
    try:
        return ScraperGroupName.parse(value.upper())
    except ValueError as exc:
        raise click.BadParameter(str(exc), param_hint="GROUP") from exc


def _load_or_exit(settings: AmalgamationSettings) -> bool:
    try:
        return settings.load()
    except CorruptDocumentError as exc:
        err_console.print(f"[red]Corrupt preferences document:[/red] {escape(str(exc))}")
        sys.exit(1)


def _format_ordering(ordering: OrderingPreference) -> str:
    parts = []
    for source in ordering:
        if source.disabled:
            parts.append(f"[dim strike]{source.type_identifier}[/dim strike]")
        else:
            parts.append(source.type_identifier)
    return "\n".join(parts) if parts else "[dim](empty)[/dim]"


# ---------------------------------------------------------------------------
# Root command group
# ---------------------------------------------------------------------------


@click.group()
@click.version_option(package_name="scraper-amalgamation")
@click.option(
    "--config",
    "-c",
    "config_path",
    default=str(_DEFAULT_CONFIG),
    show_default=True,
    type=click.Path(),
    help="Path to amalgamation.yaml (optional).",
)
@click.option(
    "--settings-dir",
    "-d",
    type=click.Path(file_okay=False),
    default=None,
    help="Directory holding AmalgamationSettings.json; overrides the config file.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: str, settings_dir: str | None) -> None:
    """Scraper amalgamation CLI — inspect and edit source precedence preferences."""
    loader = ConfigLoader()
    cfg_path = Path(config_path)
    config: AmalgamationConfig = loader.load(cfg_path) if cfg_path.exists() else loader.defaults()
    if settings_dir is not None:
        config = config.model_copy(update={"settings_dir": Path(settings_dir)})

    logging.basicConfig(
        level=config.logging_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.ensure_object(dict)
    ctx.obj["config"] = config


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command(name="version")
def version_command() -> None:
    """Show detailed version information."""
    from scraper_amalgamation import __version__

    console.print(
        Panel(
            f"[bold]scraper-amalgamation[/bold]  v[cyan]{__version__}[/cyan]\n"
            "Source precedence preferences for metadata amalgamation.",
            title="Version",
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# init
# ---------------------------------------------------------------------------


@cli.command(name="init")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing preferences file.")
@click.pass_context
def init_command(ctx: click.Context, force: bool) -> None:
    """Write the default ordering for every scraper group."""
    settings = _settings(ctx)
    if settings.path.exists() and not force:
        err_console.print(
            f"[yellow]Refusing to overwrite[/yellow] {settings.path} (use --force)."
        )
        sys.exit(1)

    for group in ScraperGroupName:
        settings.preferences.get_or_create(group)
    settings.save()

    console.print(f"[green]Initialised[/green] amalgamation preferences: [bold]{settings.path}[/bold]")
    console.print(f"  Groups: [cyan]{len(settings.preferences)}[/cyan]")


# ---------------------------------------------------------------------------
# show
# ---------------------------------------------------------------------------


@cli.command(name="show")
@click.option("--group", "-g", "group_name", default=None, help="Only show this scraper group.")
@click.pass_context
def show_command(ctx: click.Context, group_name: str | None) -> None:
    """Display saved orderings (highest precedence first)."""
    only = _parse_group(group_name) if group_name else None
    settings = _settings(ctx)
    if not _load_or_exit(settings):
        console.print("[yellow]No amalgamation preferences saved.[/yellow]")
        return

    table = Table(title="Amalgamation Preferences", box=box.SIMPLE)
    table.add_column("Group", style="cyan", no_wrap=True)
    table.add_column("Field", style="magenta")
    table.add_column("Order")

    for group, preference in settings.preferences.items():
        if only is not None and group is not only:
            continue
        table.add_row(group.value, "(overall)", _format_ordering(preference.overall))
        for field_name, ordering in sorted(preference.custom_orderings.items()):
            table.add_row("", field_name, _format_ordering(ordering))

    console.print(table)


# ---------------------------------------------------------------------------
# validate
# ---------------------------------------------------------------------------


@cli.command(name="validate")
@click.pass_context
def validate_command(ctx: click.Context) -> None:
    """Check that the preferences document loads cleanly."""
    settings = _settings(ctx)
    try:
        found = settings.load()
    except CorruptDocumentError as exc:
        cause = exc.__cause__
        console.print(Panel(f"[red]INVALID[/red]\n{escape(str(exc))}", title="Validation", border_style="red"))
        if isinstance(cause, UnresolvableIdentifierError):
            console.print(f"  Unresolvable source: [bold red]{escape(cause.identifier)}[/bold red]")
        sys.exit(1)

    if not found:
        console.print(f"[yellow]No preferences document at[/yellow] {settings.path}")
        return
    console.print(
        Panel(
            f"[green]VALID[/green]  {len(settings.preferences)} group(s)",
            title="Validation",
            border_style="green",
        )
    )


# ---------------------------------------------------------------------------
# set-order
# ---------------------------------------------------------------------------


@cli.command(name="set-order")
@click.argument("group_name", metavar="GROUP")
@click.argument("identifiers", nargs=-1, required=True)
@click.option("--field", "-f", "field_name", default=None, help="Override only this field.")
@click.pass_context
def set_order_command(
    ctx: click.Context,
    group_name: str,
    identifiers: tuple[str, ...],
    field_name: str | None,
) -> None:
    """Set the ordering of GROUP to IDENTIFIERS (prefix with '!' to disable)."""
    group = _parse_group(group_name)
    settings = _settings(ctx)
    _load_or_exit(settings)

    sources = []
    for raw in identifiers:
        disabled = raw.startswith(_DISABLED_PREFIX)
        identifier = raw[len(_DISABLED_PREFIX):] if disabled else raw
        try:
            source = settings.sources.resolve(identifier)
        except UnresolvableIdentifierError as exc:
            err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
            sys.exit(1)
        source.set_disabled(disabled)
        sources.append(source)
    ordering = OrderingPreference(sources)

    preference = settings.preferences.get_or_create(group)
    if field_name is None:
        preference.set_overall(ordering)
    else:
        try:
            preference.set_override(field_name, ordering)
        except UnknownFieldError as exc:
            err_console.print(f"[red]Error:[/red] {escape(str(exc))}")
            sys.exit(1)
    settings.save()

    target = field_name or "(overall)"
    console.print(f"[green]Updated[/green] {group.value} {target}: {len(ordering)} source(s)")


# ---------------------------------------------------------------------------
# clear-override
# ---------------------------------------------------------------------------


@cli.command(name="clear-override")
@click.argument("group_name", metavar="GROUP")
@click.argument("field_name", metavar="FIELD")
@click.pass_context
def clear_override_command(ctx: click.Context, group_name: str, field_name: str) -> None:
    """Remove the FIELD override of GROUP so it follows the overall order."""
    group = _parse_group(group_name)
    settings = _settings(ctx)
    _load_or_exit(settings)

    preference = settings.preferences.get(group)
    if preference is None or preference.get_override(field_name) is None:
        console.print(f"[yellow]No override for[/yellow] {field_name} in {group.value}")
        return
    preference.remove_override(field_name)
    settings.save()
    console.print(f"[green]Removed[/green] override for {field_name} in {group.value}")


# ---------------------------------------------------------------------------
# sources
# ---------------------------------------------------------------------------


@cli.command(name="sources")
@click.pass_context
def sources_command(ctx: click.Context) -> None:
    """List every source identifier that can be resolved."""
    settings = _settings(ctx)
    table = Table(title="Registered Sources", box=box.SIMPLE)
    table.add_column("Identifier", style="cyan")
    table.add_column("Name")
    for identifier in settings.sources.list_plugins():
        table.add_row(identifier, settings.sources.get(identifier).display_name)
    console.print(table)


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    cli()
