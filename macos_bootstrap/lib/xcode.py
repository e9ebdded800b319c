from __future__ import annotations

import logging

from .command import run_cmd

logger = logging.getLogger(__name__)


def xcode_clt_installed() -> bool:
    r = run_cmd(["xcode-select", "-p"], check=False)
    return r.returncode == 0


def install_xcode_clt(*, dry_run: bool = False) -> None:
    """Trigger the Command Line Tools installer.

    xcode-select opens a system dialog and returns immediately; the actual
    download finishes outside this process.
    """
    run_cmd(["xcode-select", "--install"], capture=False, dry_run=dry_run)
