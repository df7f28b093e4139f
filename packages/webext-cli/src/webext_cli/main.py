# SPDX-License-Identifier: MIT
"""CLI entry point for webext command."""

from __future__ import annotations

import logging
import sys
from typing import Optional

import click

from webext_manifest import ManifestError

from .config import ConfigError, LinterConfig

__version__ = "0.1.0"


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[LinterConfig] = None
        self.verbose: bool = False

    def load_config(self) -> LinterConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = LinterConfig.from_env()
        return self.config


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


def echo_warning(message: str) -> None:
    """Print a warning message."""
    click.secho(f"Warning: {message}", fg="yellow", err=True)


@click.group()
@click.version_option(version=__version__, prog_name="webext")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Enable verbose output.",
)
@pass_context
def cli(ctx: Context, verbose: bool) -> None:
    """WebExtension manifest and API checker.

    Validate manifest.json files and check browser API availability
    per manifest version.

    \b
    Examples:
        webext validate manifest.json
        webext validate --mv3 manifest.json
        webext validate --kind theme manifest.json
        webext api browser.tabs.executeScript --manifest-version 3
    """
    ctx.verbose = verbose
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# Import and register commands
from .commands import api, validate

cli.add_command(validate.validate)
cli.add_command(api.api)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)
    except ManifestError as e:
        echo_error(str(e))
        sys.exit(1)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
