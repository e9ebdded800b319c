from __future__ import annotations

import logging
from typing import List

from ..batch import BatchResult
from ..context import BootstrapCtx
from .casks import install_cask_category

logger = logging.getLogger(__name__)


class FontsStep:
    step_id = "40_fonts"

    def run(self, ctx: BootstrapCtx) -> List[BatchResult]:
        logger.info("Installing fonts...")
        return install_cask_category(ctx, "fonts", ctx.cfg.fonts, tap=ctx.cfg.fonts_tap)
