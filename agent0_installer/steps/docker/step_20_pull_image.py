from __future__ import annotations

import logging

from ...install_config import InstallConfig
from ...lib.command import require_cmd
from ...lib.docker import pull_image

logger = logging.getLogger(__name__)


class PullImageStep:
    step_id = "20_pull_image"

    def run(self, cfg: InstallConfig) -> None:
        require_cmd("docker", dry_run=cfg.dry_run)
        logger.info("Pulling official Agent Zero image: %s", cfg.image)
        pull_image(cfg.image, dry_run=cfg.dry_run)
