# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command."""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import click

from .coding import CodingContext, CodingStrategy, DecodingError, decode_version, encode_version
from .compare import compare_versions, version_key
from .config import ConfigError, SemverConfig, load_config
from .semver import InvalidVersionError, Version, parse, parse_version

logger = logging.getLogger(__name__)

STRATEGY_CHOICES = [member.value for member in CodingStrategy]


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[SemverConfig] = None
        self.verbose: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> SemverConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def coding_context(
        self, encoding: Optional[str] = None, decoding: Optional[str] = None
    ) -> CodingContext:
        """Return the project's CodingContext with command line overrides applied."""
        base = self.load_config().coding_context()
        return CodingContext(
            encoding_strategy=CodingStrategy(encoding) if encoding else base.encoding_strategy,
            decoding_strategy=CodingStrategy(decoding) if decoding else base.decoding_strategy,
        )


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def _coding_context(ctx: Context, **overrides: Optional[str]) -> CodingContext:
    try:
        coding = ctx.coding_context(**overrides)
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)

    logger.debug(
        "Coding with encoding=%s decoding=%s",
        coding.encoding_strategy.value,
        coding.decoding_strategy.value,
    )
    return coding


def _parse_argument(value: str) -> Version:
    try:
        return parse_version(value)
    except InvalidVersionError as e:
        raise click.BadParameter(e.message) from e


@click.group()
@click.version_option(package_name="semver-codec")
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
    help="Read [tool.semver-codec] settings from this project directory.",
)
@pass_context
def cli(ctx: Context, verbose: bool, directory: Optional[Path]) -> None:
    """Semantic Versioning 2.0 toolkit.

    Validate, compare, sort and encode semantic versions.

    \b
    Examples:
        semver check 1.2.3 v2.0.0-rc.1
        semver compare 1.0.0-alpha 1.0.0
        semver sort 1.0.0 1.0.0-rc.1 0.9.0
        semver encode 1.2.3-beta+exp.sha.5114f85 --strategy memberForm
    """
    ctx.verbose = verbose
    ctx.project_dir = directory
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)


@cli.command()
@click.argument("versions", nargs=-1, required=True)
def check(versions: tuple[str, ...]) -> None:
    """Check that every VERSION is a valid semantic version.

    Valid versions are printed in canonical form. Exits with status 1 if any
    version is invalid.
    """
    failed = False
    for text in versions:
        version = parse(text)
        if version is None:
            echo_error(f"'{text}' is not a valid semantic version")
            failed = True
        else:
            click.echo(str(version))

    if failed:
        sys.exit(1)


@cli.command()
@click.argument("first")
@click.argument("second")
def compare(first: str, second: str) -> None:
    """Print -1, 0 or 1 as FIRST is lower, equal or higher than SECOND."""
    result = compare_versions(_parse_argument(first), _parse_argument(second))
    click.echo(str(result))


@cli.command(name="sort")
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Print the highest version first.")
def sort_versions(versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in precedence order."""
    parsed = [_parse_argument(text) for text in versions]
    for version in sorted(parsed, key=version_key, reverse=reverse):
        click.echo(str(version))


@cli.command()
@click.argument("version")
@click.option(
    "--strategy",
    "-s",
    type=click.Choice(STRATEGY_CHOICES),
    help="Structured form to write (defaults to the project setting).",
)
@pass_context
def encode(ctx: Context, version: str, strategy: Optional[str]) -> None:
    """Encode VERSION into its structured JSON form."""
    coding = _coding_context(ctx, encoding=strategy)
    click.echo(json.dumps(encode_version(_parse_argument(version), coding)))


@cli.command()
@click.argument("document")
@click.option(
    "--strategy",
    "-s",
    type=click.Choice(STRATEGY_CHOICES),
    help="Structured form to read (defaults to the project setting).",
)
@pass_context
def decode(ctx: Context, document: str, strategy: Optional[str]) -> None:
    """Decode a JSON DOCUMENT and print the canonical version string."""
    coding = _coding_context(ctx, decoding=strategy)
    try:
        data = json.loads(document)
    except json.JSONDecodeError as e:
        echo_error(f"Invalid JSON: {e}")
        sys.exit(1)

    try:
        version = decode_version(data, coding)
    except DecodingError as e:
        echo_error(str(e))
        sys.exit(1)

    click.echo(str(version))


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli()
    except ConfigError as e:
        echo_error(str(e))
        sys.exit(1)


if __name__ == "__main__":
    main()
