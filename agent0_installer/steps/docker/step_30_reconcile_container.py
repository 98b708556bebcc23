from __future__ import annotations

import logging

from ...install_config import InstallConfig
from ...lib.docker import container_exists, remove_container, stop_container

logger = logging.getLogger(__name__)


class ReconcileContainerStep:
    step_id = "30_reconcile_container"

    def should_run(self, cfg: InstallConfig) -> bool:
        return container_exists(cfg.container_name, dry_run=cfg.dry_run)

    def run(self, cfg: InstallConfig) -> None:
        name = cfg.container_name
        logger.info("Existing container '%s' found. Recreating...", name)
        # "already stopped" and "already removed" are not failures; results discarded.
        stop_container(name, dry_run=cfg.dry_run)
        remove_container(name, dry_run=cfg.dry_run)
