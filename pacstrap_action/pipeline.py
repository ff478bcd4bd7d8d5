from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional, Protocol, Sequence

from .context import ActionCtx
from .errors import PacstrapActionError

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single step of the action."""

    step_id: str

    def run(self, ctx: ActionCtx) -> None:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str] = field(default_factory=list)
    failed_step: Optional[str] = None
    error: Optional[PacstrapActionError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def run_pipeline(*, ctx: ActionCtx, steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order, stopping at the first one that fails.

    Only action errors are turned into a failed result; anything else is a bug
    and propagates as-is.
    """

    ran: List[str] = []

    for step in steps:
        logger.info("Running step %s", step.step_id)
        try:
            step.run(ctx)
        except PacstrapActionError as e:
            logger.error("Step %s failed: %s", step.step_id, e)
            return PipelineResult(ran_steps=ran, failed_step=step.step_id, error=e)
        ran.append(step.step_id)

    return PipelineResult(ran_steps=ran)
