from __future__ import annotations

import logging
from typing import List

from ..batch import BatchResult, install_missing
from ..context import BootstrapCtx
from ..lib.brew import find_brew, install_homebrew

logger = logging.getLogger(__name__)


class HomebrewStep:
    """Install or refresh Homebrew, then apply the configured taps."""

    step_id = "20_homebrew"

    def run(self, ctx: BootstrapCtx) -> List[BatchResult]:
        result = BatchResult(category="homebrew")

        if find_brew() is not None:
            brew = ctx.homebrew()
            result.skipped.append("homebrew")
            if ctx.cfg.homebrew_upgrade:
                logger.info("Homebrew already installed. Getting updates and package upgrades...")
                brew.update()
                brew.upgrade()
                brew.doctor()
            else:
                logger.info("Homebrew already installed")
        else:
            logger.info("Installing homebrew...")
            install_homebrew(ctx.cfg.homebrew_install_url, dry_run=ctx.dry_run)
            brew = ctx.homebrew()
            brew.update()
            result.installed.append("homebrew")

        taps = install_missing(
            "taps",
            ctx.cfg.taps,
            is_installed=brew.tap_applied,
            install=brew.tap,
            label="Tap",
        )
        return [result, taps]
