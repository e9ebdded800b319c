from __future__ import annotations

import logging
import re
from typing import List, Set

from .command import run_cmd

logger = logging.getLogger(__name__)


def canonical_name(name: str) -> str:
    """PEP 503 normalisation (Foo_Bar.baz -> foo-bar-baz)."""
    return re.sub(r"[-_.]+", "-", name).lower()


def _requirement_name(line: str) -> str:
    # "virtualenv==20.0.1", "pkg @ file:///..." and "-e git+..." lines
    return re.split(r"[=<>!~@\s\[;]", line, maxsplit=1)[0]


def installed_python_packages() -> Set[str]:
    r = run_cmd(["pip3", "freeze"], check=False)
    if r.returncode != 0:
        return set()
    names: Set[str] = set()
    for line in r.stdout.splitlines():
        line = line.strip()
        if not line or line.startswith(("#", "-")):
            continue
        names.add(canonical_name(_requirement_name(line)))
    return names


def python_package_installed(name: str) -> bool:
    return canonical_name(_requirement_name(name)) in installed_python_packages()


def pip_install(name: str, *, sudo: bool = True, dry_run: bool = False) -> None:
    argv: List[str] = ["pip3", "install", name]
    if sudo:
        argv = ["sudo", *argv]
    run_cmd(argv, capture=False, dry_run=dry_run)
