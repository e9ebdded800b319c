from __future__ import annotations

import logging
from typing import List

from ..batch import BatchResult, install_missing
from ..context import BootstrapCtx
from ..lib.gem import gem_install, gem_installed

logger = logging.getLogger(__name__)


class RubyGemsStep:
    step_id = "85_ruby_gems"

    def run(self, ctx: BootstrapCtx) -> List[BatchResult]:
        sudo = ctx.cfg.ruby_sudo
        logger.info("Installing Ruby gems%s...", " (requires admin password)" if sudo else "")
        result = install_missing(
            "ruby_gems",
            ctx.cfg.ruby_gems,
            is_installed=gem_installed,
            install=lambda name: gem_install(name, sudo=sudo, dry_run=ctx.dry_run),
            label="Ruby gem",
        )
        return [result]
