# SPDX-License-Identifier: MIT
"""Bump a version to the next major, minor or patch release."""

from __future__ import annotations

from typing import Optional

import click

from ...exceptions import SemverError
from ...semver import Version
from ..config import DEFAULT_TAG_PREFIX, ConfigError
from ..main import echo_error, echo_info, pass_context, Context


@click.command()
@click.argument("part", type=click.Choice(["major", "minor", "patch"]))
@click.argument("version", required=False)
@click.option("--pre-release", "pre_release", help="Pre-release to attach, e.g. rc.1.")
@click.option("--build", "build_metadata", help="Build metadata to attach, e.g. sha.5114f85.")
@click.option("--tag", is_flag=True, help="Print the result with the configured tag prefix.")
@pass_context
def bump(
    ctx: Context,
    part: str,
    version: Optional[str],
    pre_release: Optional[str],
    build_metadata: Optional[str],
    tag: bool,
) -> None:
    """Print the next PART release of VERSION.

    Lower fields reset to 0 and pre-release and build metadata are dropped
    unless given again. Without VERSION, the current version is read from
    pyproject.toml. --tag uses the tag prefix configured for the project
    selected with -C or found above the working directory.

    \b
    Examples:
        semver bump minor 1.4.2               # 1.5.0
        semver bump major 1.4.2-rc.1          # 2.0.0
        semver bump patch --pre-release rc.1  # from pyproject.toml
        semver bump patch --tag               # v1.4.3
    """
    tag_prefix = DEFAULT_TAG_PREFIX
    try:
        if version is None:
            current = ctx.load_config().require_version()
        else:
            current = Version.from_string(version)

        if tag:
            cli_config = ctx.find_config()
            if cli_config is not None:
                tag_prefix = cli_config.tag_prefix

        if part == "major":
            bumped = current.bump_major()
        elif part == "minor":
            bumped = current.bump_minor()
        else:
            bumped = current.bump_patch()

        if pre_release:
            bumped = bumped.with_pre_release(pre_release)
        if build_metadata:
            bumped = bumped.with_build_metadata(build_metadata)
    except (ConfigError, FileNotFoundError, SemverError) as e:
        echo_error(str(e))
        raise SystemExit(1)

    if tag:
        echo_info(f"{tag_prefix}{bumped}")
    else:
        echo_info(str(bumped))
