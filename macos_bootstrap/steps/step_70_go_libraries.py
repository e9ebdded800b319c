from __future__ import annotations

import logging
from typing import List

from ..batch import BatchResult, install_missing
from ..context import BootstrapCtx
from ..lib.golang import go_install, go_tool_installed

logger = logging.getLogger(__name__)


class GoLibrariesStep:
    step_id = "70_go_libraries"

    def run(self, ctx: BootstrapCtx) -> List[BatchResult]:
        logger.info("Installing Go libraries...")
        result = install_missing(
            "go_libraries",
            ctx.cfg.go_libraries,
            is_installed=go_tool_installed,
            install=lambda module: go_install(module, dry_run=ctx.dry_run),
            label="Go library",
        )
        return [result]
