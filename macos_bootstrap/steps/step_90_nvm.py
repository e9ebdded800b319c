from __future__ import annotations

import logging
from typing import List

from ..batch import BatchResult
from ..context import BootstrapCtx
from ..lib.nvm import install_nvm, nvm_installed

logger = logging.getLogger(__name__)


class NvmStep:
    step_id = "90_nvm"

    def run(self, ctx: BootstrapCtx) -> List[BatchResult]:
        result = BatchResult(category="nvm")
        if nvm_installed():
            logger.info("nvm already installed")
            result.skipped.append("nvm")
        else:
            logger.info("Installing nvm %s...", ctx.cfg.nvm_version)
            install_nvm(ctx.cfg.nvm_install_url, dry_run=ctx.dry_run)
            result.installed.append("nvm")
        return [result]
