# SPDX-License-Identifier: MIT
"""CLI entry point for the loose-semver command."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from . import __version__
from .compare import compare_versions, upgrade_kind, version_key
from .config import ConfigError, ParserConfig, load_config
from .semver import ParseMode, Version, VersionError, parse_version

logger = logging.getLogger(__name__)


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[ParserConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None
        self.mode_override: Optional[ParseMode] = None

    def load_config(self) -> ParserConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            try:
                self.config = load_config(self.project_dir)
            except ConfigError as e:
                fail(str(e))
            if self.mode_override is not None:
                self.config.mode = self.mode_override
            logger.debug("Using %s parse mode", self.config.mode.value)
        return self.config

    def parse(self, text: str) -> Version:
        """Parse text with the configured mode, exiting on failure."""
        mode = self.load_config().mode
        try:
            version = parse_version(text, mode)
        except VersionError as e:
            fail(e.message)
        logger.debug("Parsed %r as %r", text, version)
        return version


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def fail(message: str) -> NoReturn:
    """Print an error message and exit with status 1."""
    echo_error(message)
    sys.exit(1)


class ClickLogHandler(logging.Handler):
    """Logging handler writing records to the current click stderr."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            click.echo(self.format(record), err=True)
        except Exception:
            self.handleError(record)


def configure_logging(level: int) -> None:
    """Send loose_semver log records at or above level to stderr."""
    package_logger = logging.getLogger("loose_semver")
    package_logger.setLevel(level)
    if not any(isinstance(h, ClickLogHandler) for h in package_logger.handlers):
        handler = ClickLogHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        package_logger.addHandler(handler)


@click.group()
@click.version_option(__version__, prog_name="loose-semver")
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
    help="Directory containing pyproject.toml with [tool.loose-semver] settings.",
)
@click.option(
    "--mode",
    type=click.Choice([m.value for m in ParseMode]),
    default=None,
    help="Parse mode; strict requires integer major, minor and patch (overrides configuration).",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path], mode: Optional[str]) -> None:
    """Parse, compare and classify loose semantic versions.

    \b
    Examples:
        loose-semver parse v1.2.3
        loose-semver compare v1.1.1 v1.2.0
        loose-semver upgrade v1.1.1 v1.2.0
        loose-semver sort v1.10 v1.2 v1.9
        loose-semver --mode strict check v1.2.3 vA1.2.3
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    if mode is not None:
        ctx.mode_override = ParseMode(mode)

    configure_logging(logging.DEBUG if verbose else logging.WARNING)


@cli.command()
@click.argument("text")
@click.option("--json", "as_json", is_flag=True, help="Print the version as JSON.")
@pass_context
def parse(ctx: Context, text: str, as_json: bool) -> None:
    """Parse TEXT and print its canonical form."""
    version = ctx.parse(text)
    if as_json:
        echo_info(version.to_json().decode("utf-8"))
    else:
        echo_info(str(version))


@cli.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 is older than, equal to or newer than VERSION2."""
    v1 = ctx.parse(version1)
    v2 = ctx.parse(version2)
    try:
        result = compare_versions(v1, v2)
    except VersionError as e:
        fail(e.message)
    echo_info(str(result))


@cli.command()
@click.argument("from_version", metavar="FROM")
@click.argument("to_version", metavar="TO")
@click.option("--json", "as_json", is_flag=True, help="Print all four boundary flags as JSON.")
@pass_context
def upgrade(ctx: Context, from_version: str, to_version: str, as_json: bool) -> None:
    """Print which boundary is crossed upgrading FROM to TO.

    Prints major, minor, patch, suffix, or none when TO is not an upgrade.
    """
    v1 = ctx.parse(from_version)
    v2 = ctx.parse(to_version)
    try:
        kind = upgrade_kind(v1, v2)
    except VersionError as e:
        fail(e.message)

    if as_json:
        echo_info(json.dumps(kind.to_dict()))
    else:
        echo_info(kind.level or "none")


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("-r", "--reverse", is_flag=True, help="Print the newest version first.")
@pass_context
def sort_versions(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in ascending order, one per line."""
    parsed = [ctx.parse(text) for text in versions]
    try:
        ordered = sorted(parsed, key=version_key, reverse=reverse)
    except VersionError as e:
        fail(e.message)

    for version in ordered:
        echo_info(str(version))


@cli.command()
@click.argument("versions", nargs=-1, required=True)
@pass_context
def check(ctx: Context, versions: tuple[str, ...]) -> None:
    """Check that every one of VERSIONS parses."""
    mode = ctx.load_config().mode
    errors = 0
    for text in versions:
        try:
            parse_version(text, mode)
        except VersionError as e:
            echo_error(e.message)
            errors += 1

    if errors:
        fail(f"{errors} of {len(versions)} version(s) invalid")
    click.secho(f"All {len(versions)} version(s) valid", fg="green")


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
