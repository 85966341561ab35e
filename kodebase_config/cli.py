"""Click-based CLI for kodebase-config - Kodebase configuration tooling."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Callable, NoReturn, Optional

import click

from kodebase_config import __version__
from kodebase_config.loader import (
    DEFAULT_CONFIG_PATH,
    ConfigLoadError,
    get_config_path,
    init_config,
    load_config,
    read_config_document,
    save_config,
)
from kodebase_config.migration import SUPPORTED_VERSIONS, MigrationError, migrate_config
from kodebase_config.output.console import create_console
from kodebase_config.presets import PRESET_DESCRIPTIONS, list_presets
from kodebase_config.validation import ConfigValidationError

console = create_console()


def project_options(func: Callable) -> Callable:
    """Add the shared --project-root and --config options to a command."""
    func = click.option(
        "--config",
        "-c",
        "config_path",
        default=DEFAULT_CONFIG_PATH,
        show_default=True,
        help="Settings file path, relative to the project root",
    )(func)
    func = click.option(
        "--project-root",
        "-C",
        type=click.Path(file_okay=False, path_type=Path),
        default=Path("."),
        help="Project root directory (default: current directory)",
    )(func)
    return func


def _fail(message: str) -> NoReturn:
    console.print_error(message)
    raise SystemExit(1)


@click.group()
@click.version_option(version=__version__, prog_name="kodebase-config")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.option("--no-color", is_flag=True, help="Disable colored output")
def cli(verbose: bool, no_color: bool) -> None:
    """kodebase-config - Kodebase git-automation configuration.

    Create, validate, inspect and migrate the project settings file.

    \b
    Settings: <project>/.kodebase/config/settings.yml
    """
    global console
    console = create_console(verbose=verbose, colored=not no_color)


@cli.command()
@project_options
@click.option(
    "--preset",
    "-p",
    type=click.Choice(list_presets()),
    default="default",
    show_default=True,
    help="Preset to start from",
)
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing settings file")
def init(project_root: Path, config_path: str, preset: str, force: bool) -> None:
    """Write a preset as the project settings file."""
    try:
        path = init_config(project_root, preset, config_path=config_path, force=force)
    except FileExistsError as e:
        _fail(str(e))

    console.print_config_summary(str(path), preset)
    console.print_success(f"Created {path}")


@cli.command()
@project_options
def validate(project_root: Path, config_path: str) -> None:
    """Validate the project settings file.

    Reports every invalid field at once. Exits with status 1 on failure.
    """
    path = get_config_path(project_root, config_path)

    if not path.exists():
        console.print_info(f"No settings file at {path}; built-in defaults apply")
        return

    try:
        load_config(project_root, config_path)
    except ConfigLoadError as e:
        if isinstance(e.cause, ConfigValidationError):
            console.print_issues(e.cause.issues)
            _fail(f"Configuration validation failed for {path}")
        _fail(str(e))

    console.print_success(f"{path} is valid")


@cli.command()
@project_options
@click.option("--json", "as_json", is_flag=True, help="Print as JSON instead of a tree")
def show(project_root: Path, config_path: str, as_json: bool) -> None:
    """Show the resolved configuration with all defaults applied."""
    try:
        config = load_config(project_root, config_path)
    except ConfigLoadError as e:
        _fail(str(e))

    if as_json:
        click.echo(json.dumps(config.to_dict(), indent=2))
    else:
        console.print_config(config, title=str(get_config_path(project_root, config_path)))


@cli.command("presets")
def presets_cmd() -> None:
    """List the available presets."""
    console.print_presets(PRESET_DESCRIPTIONS)


@cli.command()
@project_options
@click.option("--from", "from_version", default=None, help="Source version (default: detected)")
@click.option("--to", "to_version", default=None, help=f"Target version (default: {SUPPORTED_VERSIONS[-1]})")
@click.option("--write", "-w", is_flag=True, help="Write the migrated configuration back")
def migrate(
    project_root: Path,
    config_path: str,
    from_version: Optional[str],
    to_version: Optional[str],
    write: bool,
) -> None:
    """Migrate the settings file to a newer configuration version."""
    path = get_config_path(project_root, config_path)

    if not path.is_file():
        _fail(f"Configuration file not found: {path}")

    try:
        data = read_config_document(path)
        result = migrate_config(data, from_version=from_version, to_version=to_version)
    except (ConfigLoadError, MigrationError, OSError, UnicodeDecodeError) as e:
        _fail(str(e))

    console.print_deprecations(result.warnings)

    if write:
        try:
            save_config(result.config, project_root, config_path)
        except ConfigValidationError as e:
            console.print_issues(e.issues)
            _fail("Migrated configuration is invalid; nothing was written")
        console.print_success(f"Wrote migrated configuration to {path}")
    else:
        console.print_success(f"Configuration is compatible with version {to_version or SUPPORTED_VERSIONS[-1]}")


if __name__ == "__main__":
    cli()
