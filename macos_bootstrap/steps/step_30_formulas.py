from __future__ import annotations

import logging
from typing import List

from ..batch import BatchResult, install_missing
from ..context import BootstrapCtx

logger = logging.getLogger(__name__)


class FormulasStep:
    step_id = "30_formulas"

    def run(self, ctx: BootstrapCtx) -> List[BatchResult]:
        logger.info("Installing macOS and Linux packages...")
        brew = ctx.homebrew()
        result = install_missing(
            "formulas",
            ctx.cfg.formulas,
            is_installed=brew.formula_installed,
            install=brew.install_formula,
            label="Formula",
        )
        logger.info("Cleaning up brew packages...")
        brew.cleanup()
        return [result]
