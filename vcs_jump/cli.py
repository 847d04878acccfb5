"""CLI entry point for vcs-jump."""

import sys
from typing import Optional

import typer
from dotenv import load_dotenv

from vcs_jump import __version__
from vcs_jump.config import load_config
from vcs_jump.editor import dispatch, find_editor
from vcs_jump.exceptions import VcsJumpError
from vcs_jump.scan import JumpMode, LocationRecord, run_scan
from vcs_jump.vcs.locator import detect


USAGE = """\
usage: vcs-jump [--stdout] <mode> [<args>]

Jump to interesting elements in an editor.
The <mode> parameter is one of:

diff: elements are diff hunks. Arguments are given to diff.

merge: elements are merge conflicts. Arguments are ignored.

grep: elements are grep hits. Arguments are given to git grep (git only).

ws: elements are whitespace errors. Arguments are given to diff --check (git only).

When stdout is not a terminal (or with --stdout) the locations are
printed instead of opening an editor."""


app = typer.Typer(
    name="vcs-jump",
    help="Jump to diff hunks, merge conflicts or grep hits in your editor",
    add_completion=False,
)


def _stdout_is_terminal() -> bool:
    return sys.stdout.isatty()


def _print_records(records: list[LocationRecord]) -> None:
    for record in records:
        typer.echo(record.format())


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"vcs-jump {__version__}")
        raise typer.Exit()


@app.command(
    context_settings={"allow_extra_args": True, "ignore_unknown_options": True},
)
def jump(
    ctx: typer.Context,
    mode: Optional[str] = typer.Argument(
        None,
        help="One of: diff, merge, grep, ws",
        show_default=False,
    ),
    to_stdout: bool = typer.Option(
        False,
        "--stdout",
        help="Print locations instead of opening an editor",
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Show the detected backend and editor command",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit",
    ),
) -> None:
    """Collect locations from the VCS and open them as an editor jump list."""
    try:
        jump_mode = JumpMode(mode) if mode else None
    except ValueError:
        jump_mode = None
    if jump_mode is None:
        typer.echo(USAGE)
        raise typer.Exit(1)

    load_dotenv()
    args = list(ctx.args)

    try:
        config = load_config()
        vcs = detect()
        if debug:
            typer.echo(f"[debug] backend: {vcs.kind.value} root: {vcs.root}", err=True)
            typer.echo(f"[debug] {jump_mode.value} args: {args}", err=True)

        records = run_scan(jump_mode, vcs, args)

        if to_stdout or not _stdout_is_terminal():
            _print_records(records)
            return

        if not records:
            typer.echo(f"No {jump_mode.value} locations found.", err=True)
            return

        if debug:
            typer.echo(f"[debug] editor: {' '.join(find_editor(vcs, config))}", err=True)
        status = dispatch(vcs, records, config)

    except VcsJumpError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if status != 0:
        raise typer.Exit(status)


def main() -> None:
    """Console script entry point."""
    app()


if __name__ == "__main__":
    main()
