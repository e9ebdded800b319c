from __future__ import annotations

import logging
from typing import List

from ..batch import BatchResult
from ..context import BootstrapCtx
from .casks import install_cask_category

logger = logging.getLogger(__name__)


class QuickLookPluginsStep:
    step_id = "50_quicklook_plugins"

    def run(self, ctx: BootstrapCtx) -> List[BatchResult]:
        logger.info("Installing QuickLook Plugins...")
        return install_cask_category(ctx, "quicklook_plugins", ctx.cfg.quicklook_plugins)
