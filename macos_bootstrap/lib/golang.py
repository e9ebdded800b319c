from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Optional

from .command import run_cmd

logger = logging.getLogger(__name__)


def _module_path(module: str) -> str:
    return module.split("@", 1)[0].rstrip("/")


def binary_name(module: str) -> str:
    """github.com/brancz/gojsontoyaml@v0.1.0 -> gojsontoyaml"""
    return _module_path(module).rsplit("/", 1)[-1]


def go_bin_dir() -> Optional[Path]:
    gobin = os.environ.get("GOBIN")
    if gobin:
        return Path(gobin)
    r = run_cmd(["go", "env", "GOPATH"], check=False)
    if r.returncode != 0 or not r.stdout.strip():
        return None
    # GOPATH may list several entries; go install uses the first.
    first = r.stdout.strip().split(os.pathsep)[0]
    return Path(first) / "bin"


def go_tool_installed(module: str) -> bool:
    name = binary_name(module)
    bin_dir = go_bin_dir()
    if bin_dir is not None and (bin_dir / name).exists():
        return True
    return shutil.which(name) is not None


def go_install(module: str, *, dry_run: bool = False) -> None:
    target = module if "@" in module else f"{module}@latest"
    run_cmd(["go", "install", target], capture=False, dry_run=dry_run)
