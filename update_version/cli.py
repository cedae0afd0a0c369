"""CLI entry point for update-version."""

from __future__ import annotations

from pathlib import Path

import click

from update_version.errors import UpdateVersionError
from update_version.models import DEFAULT_PREFIX, UpdateConfig
from update_version.pipeline import run_update
from update_version.versions import validate_version
from update_version.workspace import find_project_root


class _Command(click.Command):
    """Command that reports usage errors with exit code 1 instead of 2."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as exc:
            exc.exit_code = 1
            raise


@click.command(
    cls=_Command,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.version_option(package_name="update-version")
@click.argument("target_version", metavar="VERSION", required=False)
@click.option(
    "--prefix",
    default=DEFAULT_PREFIX,
    show_default=True,
    envvar="UPDATE_VERSION_PREFIX",
    help="Name prefix of internal packages whose ranges are rewritten.",
)
@click.option(
    "--root",
    "search_from",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=None,
    envvar="UPDATE_VERSION_ROOT",
    help=(
        "Directory to start the upward search for the project root from "
        "(the directory holding package.json and packages/). "
        "Used instead of the installed tool's own location. "
        "[default: current directory]"
    ),
)
@click.pass_context
def cli(
    ctx: click.Context,
    target_version: str | None,
    prefix: str,
    search_from: Path | None,
) -> None:
    """Update the version of every package in the monorepo.

    \b
    It takes a version as an argument and:
    1. Updates the version field in package.json, packages/*/package.json
       and bundle/package.json
    2. Updates all internal dependencies (see --prefix) to ~VERSION
    3. Creates a git commit for the version update
    4. Creates git tag "vVERSION"

    The working tree must be clean and the tag must not exist yet.
    """
    if not target_version:
        click.echo("Error: No version provided", err=True)
        click.echo(ctx.get_help(), err=True)
        ctx.exit(1)

    try:
        validate_version(target_version)
        root = find_project_root(search_from or Path.cwd())
        run_update(UpdateConfig(root=root, version=target_version, prefix=prefix))
    except UpdateVersionError as exc:
        raise click.ClickException(str(exc)) from exc
