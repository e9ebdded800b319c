from __future__ import annotations

import logging
import os
import shlex
import shutil
from dataclasses import dataclass
from typing import List, Optional

from .command import run_cmd, run_shell

logger = logging.getLogger(__name__)

# Default install locations on Apple Silicon and Intel machines.
BREW_CANDIDATES = ("/opt/homebrew/bin/brew", "/usr/local/bin/brew")


def find_brew() -> Optional[str]:
    """Return the brew executable, or None if Homebrew is not installed."""

    found = shutil.which("brew")
    if found:
        return found
    for candidate in BREW_CANDIDATES:
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
    return None


def install_homebrew(install_url: str, *, dry_run: bool = False) -> None:
    run_shell(f'/bin/bash -c "$(curl -fsSL {shlex.quote(install_url)})"', dry_run=dry_run)


def _lines(text: str) -> List[str]:
    return [ln.strip() for ln in text.splitlines() if ln.strip()]


@dataclass(frozen=True)
class Homebrew:
    """Thin wrapper around one brew executable.

    cask_appdir is handed to every cask install through the child
    environment (HOMEBREW_CASK_OPTS) instead of being exported globally.
    """

    executable: str = "brew"
    cask_appdir: str = "/Applications"
    dry_run: bool = False

    def _brew(self, *args: str, mutate: bool = True, check: bool = True, env=None):
        return run_cmd(
            [self.executable, *args],
            check=check,
            env=env,
            capture=not mutate,
            dry_run=self.dry_run and mutate,
        )

    def _listing(self, *args: str) -> List[str]:
        r = self._brew(*args, mutate=False, check=False)
        if r.returncode != 0:
            logger.debug("brew %s failed (%s); treating listing as empty", " ".join(args), r.returncode)
            return []
        return _lines(r.stdout)

    # Maintenance

    def update(self) -> None:
        self._brew("update")

    def upgrade(self) -> None:
        self._brew("upgrade")

    def doctor(self) -> bool:
        # Diagnostic only: warnings are reported, never fatal.
        r = self._brew("doctor", check=False)
        if r.returncode != 0:
            logger.warning("brew doctor reported problems (exit %s)", r.returncode)
        return r.returncode == 0

    def cleanup(self) -> None:
        self._brew("cleanup")

    # Taps

    def taps(self) -> List[str]:
        return [t.lower() for t in self._listing("tap")]

    def tap_applied(self, name: str) -> bool:
        return name.strip().lower() in self.taps()

    def tap(self, name: str) -> None:
        self._brew("tap", name)

    # Formulas and casks are probed by the exit status of `brew list <name>`,
    # which resolves aliases (golang -> go) and tap-qualified names.

    def _listed(self, kind: str, name: str) -> bool:
        return self._brew("list", kind, name, mutate=False, check=False).returncode == 0

    def formula_installed(self, name: str) -> bool:
        return self._listed("--formula", name)

    def install_formula(self, name: str) -> None:
        self._brew("install", name)

    def cask_installed(self, name: str) -> bool:
        return self._listed("--cask", name)

    def install_cask(self, name: str) -> None:
        self._brew(
            "install",
            "--cask",
            name,
            env={"HOMEBREW_CASK_OPTS": f"--appdir={self.cask_appdir}"},
        )
