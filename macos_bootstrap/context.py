from __future__ import annotations

import logging
from dataclasses import dataclass

from .config import BootstrapConfig
from .errors import CommandError
from .lib.brew import Homebrew, find_brew

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BootstrapCtx:
    cfg: BootstrapConfig
    dry_run: bool = False

    def homebrew(self) -> Homebrew:
        """Resolve brew lazily: it may only exist after the Homebrew step."""

        executable = find_brew()
        if executable is None:
            if not self.dry_run:
                raise CommandError(["brew"], 127, "Homebrew is not installed")
            executable = "brew"
        return Homebrew(executable=executable, cask_appdir=self.cfg.cask_appdir, dry_run=self.dry_run)
