from __future__ import annotations

import logging
import os
import shlex
from pathlib import Path

from .command import run_shell

logger = logging.getLogger(__name__)


def nvm_dir() -> Path:
    return Path(os.environ.get("NVM_DIR") or Path.home() / ".nvm")


def nvm_installed() -> bool:
    return (nvm_dir() / "nvm.sh").is_file()


def install_nvm(install_url: str, *, dry_run: bool = False) -> None:
    # The installer script is trusted as published; no checksum is verified.
    run_shell(f"curl -fsSL {shlex.quote(install_url)} | bash", dry_run=dry_run)
