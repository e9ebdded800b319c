from __future__ import annotations

import logging
from typing import List, Optional

from ..batch import BatchResult, install_missing
from ..context import BootstrapCtx

logger = logging.getLogger(__name__)


def install_cask_category(
    ctx: BootstrapCtx,
    category: str,
    casks: List[str],
    *,
    tap: Optional[str] = None,
) -> List[BatchResult]:
    """Shared body of the font, QuickLook and app steps."""

    brew = ctx.homebrew()
    results: List[BatchResult] = []
    if tap:
        results.append(
            install_missing(
                f"{category}_tap",
                [tap],
                is_installed=brew.tap_applied,
                install=brew.tap,
                label="Tap",
            )
        )
    results.append(
        install_missing(
            category,
            casks,
            is_installed=brew.cask_installed,
            install=brew.install_cask,
            label="Cask",
        )
    )
    return results
