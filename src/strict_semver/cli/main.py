# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click

from ..exceptions import SemverError
from .config import CLIConfig, ConfigError, find_project_root, load_config

logger = logging.getLogger(__name__)


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
            logger.debug("Loaded configuration from %s", self.config.project_dir)
        return self.config

    def find_config(self) -> Optional[CLIConfig]:
        """Load configuration if a project is selected or found, else None.

        Unlike load_config, running outside any project is not an error.
        """
        if self.project_dir is None:
            try:
                self.project_dir = find_project_root()
            except ConfigError:
                logger.debug("No project found; using default configuration")
                return None
        return self.load_config()


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_success(message: str) -> None:
    """Print a success message."""
    click.secho(message, fg="green")


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


class ClickEchoHandler(logging.Handler):
    """Logging handler writing through click to the current stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(verbose: bool) -> None:
    """Configure the package logger for command-line use.

    Safe to call repeatedly; only the level changes after the first call.
    """
    package_logger = logging.getLogger("strict_semver")
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    if any(isinstance(handler, ClickEchoHandler) for handler in package_logger.handlers):
        return

    handler = ClickEchoHandler()
    handler.setFormatter(logging.Formatter("[%(levelname).4s] %(name)s: %(message)s"))
    package_logger.addHandler(handler)
    package_logger.propagate = False


@click.group()
@click.version_option(package_name="strict-semver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Project directory holding pyproject.toml.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic Versioning 2.0.0 tool.

    Validate, compare, sort and bump semantic versions.

    \b
    Examples:
        semver validate 1.0.0-alpha.1
        semver compare 1.0.0-rc.1 1.0.0
        semver sort 1.0.0 1.0.0-beta 0.9.12
        semver bump minor 1.4.2
        semver bump patch --tag
        semver show --json 2.0.0-rc.1+build.5
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    configure_logging(verbose)


# Import and register commands
from .commands import bump, compare, show, validate

cli.add_command(validate.validate)
cli.add_command(compare.compare)
cli.add_command(compare.sort)
cli.add_command(bump.bump)
cli.add_command(show.show)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except (ConfigError, SemverError) as e:
        echo_error(str(e))
        sys.exit(1)
    except FileNotFoundError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
