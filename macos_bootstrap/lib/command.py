from __future__ import annotations

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Mapping, Sequence

from ..errors import CommandError

logger = logging.getLogger(__name__)

# Shell convention for "command not found".
NOT_FOUND_RC = 127


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str


def _fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    input_text: str | None = None,
    capture: bool = True,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - capture=True collects stdout/stderr (logged at DEBUG); capture=False
      lets the tool write to the terminal directly, which installers need
      for progress output and sudo prompts.
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    logger.info("CMD %s%s", _fmt_argv(argv_list), " (dry-run)" if dry_run else "")

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    try:
        p = subprocess.run(
            argv_list,
            input=input_text,
            text=True,
            stdout=subprocess.PIPE if capture else None,
            stderr=subprocess.PIPE if capture else None,
            cwd=cwd,
            env=dict(os.environ, **(env or {})),
        )
    except FileNotFoundError as e:
        logger.debug("Executable not found: %s", argv_list[0])
        if check:
            raise CommandError(argv_list, NOT_FOUND_RC, str(e)) from e
        return CmdResult(argv=argv_list, returncode=NOT_FOUND_RC, stdout="", stderr=str(e))

    stdout = p.stdout or ""
    stderr = p.stderr or ""
    if stdout:
        logger.debug("STDOUT %s", stdout.strip())
    if stderr:
        logger.debug("STDERR %s", stderr.strip())

    if check and p.returncode != 0:
        raise CommandError(argv_list, p.returncode, stderr)

    return CmdResult(argv=argv_list, returncode=p.returncode, stdout=stdout, stderr=stderr)


def run_shell(script: str, *, check: bool = True, dry_run: bool = False) -> CmdResult:
    """Run a bash snippet with pipefail, streaming its output."""

    return run_cmd(
        ["/bin/bash", "-c", f"set -o pipefail; {script}"],
        check=check,
        capture=False,
        dry_run=dry_run,
    )
