"""Editor hand-off.

Contains:
- write_staging_file: Write records to a temporary jump-list file
- get_vcs_editor: The editor configured in git/hg
- find_editor: Resolve the editor command
- build_editor_command: Full argv for opening a jump list
- dispatch: Stage records, launch the editor and clean up
"""

import os
import shlex
import shutil
import subprocess
import tempfile
from pathlib import Path
from typing import Optional, Sequence

from vcs_jump.config import JumpConfig
from vcs_jump.exceptions import EditorNotFound, VcsCommandError
from vcs_jump.scan.models import LocationRecord
from vcs_jump.vcs.locator import VcsInfo, VcsKind
from vcs_jump.vcs.runner import run_vcs_command


# Queries for the editor configured in the VCS itself
EDITOR_QUERIES = {
    VcsKind.GIT: ["var", "GIT_EDITOR"],
    VcsKind.HG: ["config", "ui.editor"],
}

# Environment variables consulted after the VCS, in order
EDITOR_ENV_VARS = ["VISUAL", "EDITOR"]


def write_staging_file(records: Sequence[LocationRecord]) -> Path:
    """Write records to a temporary file, one "path:line: text" per line.

    The file is flushed and closed on return. The caller owns it.

    Args:
        records: The locations to stage.

    Returns:
        Path to the staging file.
    """
    with tempfile.NamedTemporaryFile(
        mode="w",
        prefix="vcs-jump.",
        suffix=".jump",
        delete=False,
        encoding="utf-8",
    ) as f:
        path = Path(f.name)
        try:
            for record in records:
                f.write(record.format() + "\n")
            f.flush()
        except BaseException:
            f.close()
            path.unlink(missing_ok=True)
            raise
        return path


def get_vcs_editor(vcs: VcsInfo) -> Optional[str]:
    """Get the editor configured in the VCS.

    Returns:
        The editor string, or None if unset or the query fails.
    """
    try:
        editor = run_vcs_command(vcs, EDITOR_QUERIES[vcs.kind]).strip()
    except VcsCommandError:
        return None
    return editor or None


def find_editor(vcs: VcsInfo, config: JumpConfig) -> list[str]:
    """Find the editor to open the jump list with.

    Preference order:
    1. editor from the user config file
    2. the VCS-configured editor (git var GIT_EDITOR / hg config ui.editor)
    3. $VISUAL, then $EDITOR
    4. the default editor, if it is on PATH

    Args:
        vcs: The detected backend.
        config: User configuration.

    Returns:
        List of command parts to run the editor.

    Raises:
        EditorNotFound: If none of the above yields an editor.
    """
    lookups = [lambda: config.editor, lambda: get_vcs_editor(vcs)]
    lookups += [lambda name=name: os.environ.get(name) for name in EDITOR_ENV_VARS]

    for lookup in lookups:
        candidate = lookup()
        if candidate and candidate.strip():
            return shlex.split(candidate)

    # noinspection PyArgumentList
    default = shutil.which(config.default_editor)
    if default:
        return [default]

    raise EditorNotFound(
        f"No editor found. Set core.editor, $EDITOR or install {config.default_editor}."
    )


def build_editor_command(
    editor_cmd: Sequence[str],
    staging_file: Path,
    config: JumpConfig,
    extra_args: Sequence[str] = (),
) -> list[str]:
    """Build the argv that opens a jump-list file in the editor.

    Args:
        editor_cmd: Editor command parts from find_editor().
        staging_file: The jump-list file.
        config: User configuration.
        extra_args: Additional arguments appended last.

    Returns:
        Full command list.
    """
    argv = list(editor_cmd) + [config.quickfix_flag, str(staging_file)]

    # Only the default editor is known to understand the list-opening argument
    if config.open_list_arg and os.path.basename(editor_cmd[0]) == config.default_editor:
        argv.append(config.open_list_arg)

    return argv + list(extra_args)


def dispatch(
    vcs: VcsInfo,
    records: Sequence[LocationRecord],
    config: JumpConfig,
    extra_args: Sequence[str] = (),
) -> int:
    """Open the records in an editor as a jump list.

    The staging file is removed once the editor exits or if launching fails.

    Args:
        vcs: The detected backend.
        records: Locations to jump through.
        config: User configuration.
        extra_args: Additional editor arguments.

    Returns:
        The editor's exit status.

    Raises:
        EditorNotFound: If no editor can be resolved or started.
    """
    staging_file = write_staging_file(records)
    try:
        editor_cmd = find_editor(vcs, config)
        argv = build_editor_command(editor_cmd, staging_file, config, extra_args)
        try:
            result = subprocess.run(argv, check=False)
        except FileNotFoundError:
            raise EditorNotFound(f"Editor not found: {editor_cmd[0]}")
        return result.returncode
    finally:
        if not config.keep_staging_file:
            staging_file.unlink(missing_ok=True)
