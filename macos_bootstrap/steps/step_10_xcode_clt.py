from __future__ import annotations

import logging
from typing import List

from ..batch import BatchResult
from ..context import BootstrapCtx
from ..lib.xcode import install_xcode_clt, xcode_clt_installed

logger = logging.getLogger(__name__)


class XcodeCLTStep:
    step_id = "10_xcode_clt"

    def run(self, ctx: BootstrapCtx) -> List[BatchResult]:
        result = BatchResult(category="xcode_clt")
        if xcode_clt_installed():
            logger.info("XCode Command Line Tools already installed")
            result.skipped.append("xcode-clt")
        else:
            logger.info("Installing XCode Command Line Tools...")
            install_xcode_clt(dry_run=ctx.dry_run)
            result.installed.append("xcode-clt")
        return [result]
