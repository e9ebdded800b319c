from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, List

logger = logging.getLogger(__name__)


@dataclass
class BatchResult:
    category: str
    installed: List[str] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)


def _validate_items(category: str, items: Iterable[object]) -> list[str]:
    names: list[str] = []
    for item in items:
        if not isinstance(item, str) or not item.strip():
            raise ValueError(f"{category}: item identifiers must be non-empty strings, got {item!r}")
        names.append(item)
    return names


def install_missing(
    category: str,
    items: Iterable[str],
    *,
    is_installed: Callable[[str], bool],
    install: Callable[[str], object],
    label: str = "Item",
) -> BatchResult:
    """Install every item that the probe does not report as present.

    Items are handled strictly in order. The probe runs immediately before
    acting on each item, so an item installed earlier in the same batch (or
    by a previous run) is skipped. Any exception from the probe or the
    install propagates at once and no later item is touched.
    """

    names = _validate_items(category, items)
    result = BatchResult(category=category)

    if not names:
        logger.info("No %s configured", category)
        return result

    for name in names:
        if is_installed(name):
            logger.info("%s %s is already installed", label, name)
            result.skipped.append(name)
            continue

        logger.info("Installing %s %s...", label.lower(), name)
        install(name)
        result.installed.append(name)

    logger.info(
        "%s: %d installed, %d already present",
        category,
        len(result.installed),
        len(result.skipped),
    )
    return result
