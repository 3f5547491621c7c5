# SPDX-License-Identifier: MIT
"""Compare and sort versions by precedence."""

from __future__ import annotations

import click

from ...compare import sort_versions
from ...exceptions import InvalidVersionError
from ...semver import Version
from ..main import echo_error, echo_info, pass_context, Context


@click.command()
@click.argument("version1")
@click.argument("version2")
@pass_context
def compare(ctx: Context, version1: str, version2: str) -> None:
    """Print -1, 0 or 1 as VERSION1 is lower, equal or higher than VERSION2.

    Build metadata is ignored.

    \b
    Examples:
        semver compare 1.0.0-alpha 1.0.0      # -1
        semver compare 1.0.0+a 1.0.0+b        # 0
    """
    try:
        left = Version.from_string(version1)
        right = Version.from_string(version2)
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(1)

    echo_info(str(left.compare(right)))


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option("--reverse", "-r", is_flag=True, help="Highest precedence first.")
@pass_context
def sort(ctx: Context, versions: tuple[str, ...], reverse: bool) -> None:
    """Print VERSIONS in precedence order, one per line.

    \b
    Examples:
        semver sort 1.0.0 1.0.0-rc.1 1.0.0-alpha
        semver sort --reverse 2.0.0 10.0.0 1.9.9
    """
    try:
        ordered = sort_versions(versions, reverse=reverse)
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(1)

    for version in ordered:
        echo_info(str(version))
