from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Protocol, Sequence

from .install_config import InstallConfig

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single idempotent step.

    A step may also define ``should_run(cfg) -> bool``; it is asked right
    before the step and sees current host state.
    """

    step_id: str

    def run(self, cfg: InstallConfig) -> None:
        ...


@dataclass(frozen=True)
class PipelineResult:
    ran_steps: List[str]
    skipped_steps: List[str]


def run_pipeline(*, cfg: InstallConfig, steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order. The first exception stops the run."""

    ran: List[str] = []
    skipped: List[str] = []

    for step in steps:
        should_run = getattr(step, "should_run", None)
        if should_run is not None and not should_run(cfg):
            logger.info("Skipping step %s", step.step_id)
            skipped.append(step.step_id)
            continue

        logger.debug("Running step %s", step.step_id)
        step.run(cfg)
        ran.append(step.step_id)

    return PipelineResult(ran_steps=ran, skipped_steps=skipped)
