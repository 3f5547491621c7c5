# SPDX-License-Identifier: MIT
"""Show the fields of a version."""

from __future__ import annotations

import json

import click

from ...exceptions import InvalidVersionError
from ...semver import Version
from ..main import echo_error, echo_info, pass_context, Context


def _version_fields(version: Version) -> dict[str, str]:
    return {
        "major": str(version.major),
        "minor": str(version.minor),
        "patch": str(version.patch),
        "pre_release": str(version.pre_release),
        "build_metadata": str(version.build_metadata),
    }


@click.command()
@click.argument("version")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON.")
@pass_context
def show(ctx: Context, version: str, as_json: bool) -> None:
    """Print the major, minor, patch, pre-release and build fields of VERSION.

    Numeric fields are printed as text so that values of any size are exact.
    """
    try:
        parsed = Version.from_string(version)
    except InvalidVersionError as e:
        echo_error(e.message)
        raise SystemExit(1)

    fields = _version_fields(parsed)
    if as_json:
        echo_info(json.dumps(fields, indent=2))
        return

    for name, value in fields.items():
        echo_info(f"{name}: {value}")
