from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .pipeline import PipelineResult

logger = logging.getLogger(__name__)


def _detect_format(path: Path) -> str:
    ext = path.suffix.lower().lstrip(".")
    if ext in {"yaml", "yml"}:
        return "yaml"
    # Default to JSON for unknown extensions.
    return "json"


def build_report(
    result: PipelineResult,
    *,
    dry_run: bool,
    error: Optional[str] = None,
    log_path: Optional[str] = None,
) -> Dict[str, Any]:
    """Summarise a run: which steps ran and what each category did."""

    return {
        "dry_run": dry_run,
        "log_path": log_path,
        "ran_steps": list(result.ran_steps),
        "failed_step": result.current_step,
        "categories": {
            r.category: {"installed": list(r.installed), "skipped": list(r.skipped)}
            for r in result.results
        },
        "error": error,
    }


def save_report(path: str, report: Dict[str, Any]) -> None:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    if _detect_format(p) == "yaml":
        p.write_text(yaml.safe_dump(report, sort_keys=False), encoding="utf-8")
    else:
        p.write_text(json.dumps(report, indent=2, sort_keys=True) + "\n", encoding="utf-8")
    logger.info("Run report written to %s", p)
