from __future__ import annotations

import logging
from typing import List

from ..batch import BatchResult
from ..context import BootstrapCtx
from .casks import install_cask_category

logger = logging.getLogger(__name__)


class AppsStep:
    step_id = "60_apps"

    def run(self, ctx: BootstrapCtx) -> List[BatchResult]:
        logger.info("Installing macOS apps...")
        return install_cask_category(ctx, "apps", ctx.cfg.apps, tap=ctx.cfg.apps_tap)
