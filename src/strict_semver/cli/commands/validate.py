# SPDX-License-Identifier: MIT
"""Validate version strings against the SemVer grammar."""

from __future__ import annotations

import click

from ...exceptions import InvalidVersionError
from ...semver import Version
from ..main import echo_error, echo_success, pass_context, Context


@click.command()
@click.argument("versions", nargs=-1, required=True)
@click.option("--quiet", "-q", is_flag=True, help="Only set the exit status.")
@pass_context
def validate(ctx: Context, versions: tuple[str, ...], quiet: bool) -> None:
    """Check that each VERSION is a valid semantic version.

    Exits with status 1 if any version is invalid.

    \b
    Examples:
        semver validate 1.0.0
        semver validate 1.0.0-alpha.1 2.0.0+build.7
    """
    failures = 0
    for raw in versions:
        try:
            version = Version.from_string(raw)
        except InvalidVersionError as e:
            failures += 1
            if not quiet:
                echo_error(e.message)
            continue
        if not quiet:
            echo_success(f"{version} is valid")

    if failures:
        raise SystemExit(1)
