from __future__ import annotations

import argparse
import logging
from typing import Optional

from .config import load_config
from .context import BootstrapCtx
from .errors import BootstrapError
from .logging_utils import DEFAULT_LOG_PATH, configure_logging
from .pipeline import PipelineResult, run_pipeline
from .report import build_report, save_report
from .steps import (
    AppsStep,
    FontsStep,
    FormulasStep,
    GoLibrariesStep,
    HomebrewStep,
    NvmStep,
    PythonPackagesStep,
    QuickLookPluginsStep,
    RubyGemsStep,
    XcodeCLTStep,
)

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INTERRUPTED = 130

INTERRUPTED_MESSAGE = "Installation interrupted by user, exiting gracefully"


def build_steps():
    return [
        XcodeCLTStep(),
        HomebrewStep(),
        FormulasStep(),
        FontsStep(),
        QuickLookPluginsStep(),
        AppsStep(),
        GoLibrariesStep(),
        PythonPackagesStep(),
        RubyGemsStep(),
        NvmStep(),
    ]


def run(
    *,
    config_path: Optional[str] = None,
    dry_run: bool = False,
    report_path: Optional[str] = None,
    log_path: Optional[str] = None,
) -> int:
    """Run every install step in order. Returns the process exit status."""

    cfg = load_config(config_path)
    ctx = BootstrapCtx(cfg=cfg, dry_run=dry_run)
    result = PipelineResult()
    error: Optional[str] = None

    logger.info("Installing essential packages, fonts, programming language dependencies and macOS applications...")
    try:
        run_pipeline(ctx=ctx, steps=build_steps(), result=result)
        logger.info("Installation successful")
        return EXIT_OK
    except KeyboardInterrupt:
        error = "interrupted"
        logger.warning(INTERRUPTED_MESSAGE)
        return EXIT_INTERRUPTED
    except BootstrapError as e:
        error = str(e)
        logger.error("Step %s failed: %s", result.current_step, e)
        return EXIT_FAILED
    finally:
        if report_path:
            save_report(report_path, build_report(result, dry_run=dry_run, error=error, log_path=log_path))


def main(argv: Optional[list[str]] = None) -> int:
    p = argparse.ArgumentParser(
        prog="macos-bootstrap",
        description="Install essential packages, fonts, language dependencies and macOS applications.",
    )
    p.add_argument("--config", default=None, help="Path to a YAML manifest (default: bundled manifest)")
    p.add_argument("--log", default=DEFAULT_LOG_PATH, help="Path to the bootstrap log")
    p.add_argument("--dry-run", action="store_true", help="Probe for real but do not install anything")
    p.add_argument("--report", default=None, help="Write a run summary (json|yaml)")
    p.add_argument("-v", "--verbose", action="store_true", help="Show captured command output on the console")

    args = p.parse_args(argv)

    log_path = configure_logging(log_path=args.log, verbose=bool(args.verbose))

    try:
        return run(
            config_path=args.config,
            dry_run=bool(args.dry_run),
            report_path=args.report,
            log_path=log_path,
        )
    except BootstrapError as e:
        # Configuration problems surface before any step runs.
        logger.error("%s", e)
        return EXIT_FAILED


if __name__ == "__main__":
    raise SystemExit(main())
