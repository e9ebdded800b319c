from __future__ import annotations

import logging
from typing import List

from ..batch import BatchResult, install_missing
from ..context import BootstrapCtx
from ..lib.pip import pip_install, python_package_installed

logger = logging.getLogger(__name__)


class PythonPackagesStep:
    step_id = "80_python_packages"

    def run(self, ctx: BootstrapCtx) -> List[BatchResult]:
        sudo = ctx.cfg.python_sudo
        logger.info("Installing Python packages%s...", " (requires admin password)" if sudo else "")
        result = install_missing(
            "python_packages",
            ctx.cfg.python_packages,
            is_installed=python_package_installed,
            install=lambda name: pip_install(name, sudo=sudo, dry_run=ctx.dry_run),
            label="Python package",
        )
        return [result]
