"""Click-based CLI for ghopac."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

import click

from ghopac import __version__
from ghopac.config import (
    ConfigError,
    ConfigNotFoundError,
    GhopacConfig,
    generate_sample_config,
    get_config_path,
    load_config,
    validate_config_file,
    write_sample_config,
)
from ghopac.git import DryRunGit
from ghopac.output import create_console
from ghopac.sync import SyncEngine
from ghopac.utils.paths import HomeDirectoryError


def _resolve_config_path(config_path: Optional[Path]) -> Path:
    if config_path is not None:
        return config_path
    try:
        return get_config_path()
    except HomeDirectoryError as e:
        click.echo(str(e), err=True)
        sys.exit(1)


def _load_or_exit(config_path: Optional[Path]) -> GhopacConfig:
    """Load configuration, or print guidance and exit 1."""
    path = _resolve_config_path(config_path)
    try:
        return load_config(path)
    except ConfigNotFoundError:
        click.echo(f"No config file! Here's a sample you can put into {path}:\n", err=True)
        click.echo(generate_sample_config(), err=True)
        sys.exit(1)
    except ConfigError as e:
        click.echo(e.message, err=True)
        sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="ghopac")
def cli() -> None:
    """ghopac - GitHub org pull-and-clone.

    Keeps a local mirror of GitHub organizations and standalone
    repositories up to date with parallel git clone/pull.
    """
    pass


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Configuration file (default: $XDG_CONFIG_HOME/ghopac/config.yaml)",
)
@click.option("--concurrency", "-j", type=int, default=None, help="Number of parallel git operations")
@click.option("--verbose", "-v", is_flag=True, help="Also log successful operations")
@click.option("--dry-run", "-n", is_flag=True, help="Show what would be cloned or pulled without running git")
@click.option("--no-color", is_flag=True, help="Disable colored output")
def sync(
    config_path: Optional[Path],
    concurrency: Optional[int],
    verbose: bool,
    dry_run: bool,
    no_color: bool,
) -> None:
    """Clone missing repositories and pull existing ones.

    Exits 0 only if every org listing, syncpoint and git operation
    succeeded.
    """
    config = _load_or_exit(config_path)

    if concurrency is not None:
        config.concurrency = concurrency

    console = create_console(verbose=verbose or config.verbose, colored=config.colored and not no_color)
    engine = SyncEngine(config, console, git=DryRunGit() if dry_run else None)
    result = engine.run()

    if console.verbose or not result.success:
        console.print_summary(result)

    sys.exit(result.exit_code)


@cli.group()
def config() -> None:
    """Configuration file commands."""
    pass


@config.command("path")
def config_path_cmd() -> None:
    """Print where the configuration file is read from."""
    click.echo(str(_resolve_config_path(None)))


@config.command("sample")
def config_sample() -> None:
    """Print a sample configuration."""
    click.echo(generate_sample_config(), nl=False)


@config.command("init")
@click.option("--path", "target", type=click.Path(dir_okay=False, path_type=Path), help="Where to write the file")
def config_init(target: Optional[Path]) -> None:
    """Write the sample configuration if none exists yet."""
    path, created = write_sample_config(_resolve_config_path(target))
    if created:
        click.echo(f"Created {path}. Edit it before running 'ghopac sync'.")
    else:
        click.echo(f"Config already exists: {path}")


@config.command("validate")
@click.argument("file", required=False, type=click.Path(dir_okay=False, path_type=Path))
def config_validate(file: Optional[Path]) -> None:
    """Validate a configuration file."""
    path = _resolve_config_path(file)
    valid, errors = validate_config_file(path)
    if valid:
        click.echo(f"{path}: OK")
        return

    click.echo(f"{path}: invalid", err=True)
    for error in errors:
        click.echo(f"  - {error}", err=True)
    sys.exit(1)


def main() -> None:
    """Entry point that runs `sync` when no subcommand is given."""
    args = sys.argv[1:]
    if not args or (args[0].startswith("-") and args[0] not in ("--help", "--version")):
        args = ["sync", *args]
    cli.main(args=args, prog_name="ghopac")


if __name__ == "__main__":
    main()
