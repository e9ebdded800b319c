from __future__ import annotations

import logging
from typing import List, Set

from .command import run_cmd

logger = logging.getLogger(__name__)


def installed_gems() -> Set[str]:
    # Lines look like: "bundler (2.4.10, default: 2.3.26)"
    r = run_cmd(["gem", "list"], check=False)
    if r.returncode != 0:
        return set()
    return {ln.split()[0].lower() for ln in r.stdout.splitlines() if ln.strip() and not ln.startswith("*")}


def gem_installed(name: str) -> bool:
    return name.lower() in installed_gems()


def gem_install(name: str, *, sudo: bool = True, dry_run: bool = False) -> None:
    argv: List[str] = ["gem", "install", name]
    if sudo:
        argv = ["sudo", *argv]
    run_cmd(argv, capture=False, dry_run=dry_run)
