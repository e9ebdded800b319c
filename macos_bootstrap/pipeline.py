from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Protocol, Sequence

from .batch import BatchResult
from .context import BootstrapCtx

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single category install pass."""

    step_id: str

    def run(self, ctx: BootstrapCtx) -> List[BatchResult]:
        ...


@dataclass
class PipelineResult:
    ran_steps: List[str] = field(default_factory=list)
    results: List[BatchResult] = field(default_factory=list)
    current_step: str | None = None


def run_pipeline(
    *,
    ctx: BootstrapCtx,
    steps: Sequence[Step],
    result: PipelineResult | None = None,
) -> PipelineResult:
    """Run every step in order. The first exception aborts the run.

    Pass ``result`` to keep partial progress visible to the caller when a
    step raises.
    """

    result = result if result is not None else PipelineResult()

    for step in steps:
        result.current_step = step.step_id
        logger.info("Running step %s", step.step_id)
        result.results.extend(step.run(ctx) or [])
        result.ran_steps.append(step.step_id)

    result.current_step = None
    return result
