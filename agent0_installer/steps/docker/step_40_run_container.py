from __future__ import annotations

import logging

from ...install_config import InstallConfig
from ...lib.docker import run_container
from ...lib.env import FIXED

logger = logging.getLogger(__name__)


class RunContainerStep:
    step_id = "40_run_container"

    def run(self, cfg: InstallConfig) -> None:
        if cfg.dry_run:
            logger.info("Would create %s", cfg.data_dir)
        else:
            cfg.data_dir.mkdir(parents=True, exist_ok=True)

        logger.info(
            "Running container '%s' on port %s (host) -> %s (container)",
            cfg.container_name,
            cfg.port,
            FIXED.container_port,
        )
        logger.info("Persisting data: %s -> %s", cfg.data_dir, FIXED.container_data_path)
        run_container(
            name=cfg.container_name,
            image=cfg.image,
            host_port=cfg.port,
            data_dir=cfg.data_dir,
            dry_run=cfg.dry_run,
        )
