from __future__ import annotations

import logging

from ...install_config import InstallConfig
from ...lib.git import clone, is_clone, pull_ff_only

logger = logging.getLogger(__name__)


class SyncRepoStep:
    step_id = "30_sync_repo"

    def run(self, cfg: InstallConfig) -> None:
        if not is_clone(cfg.install_dir):
            logger.info("Cloning repo to: %s", cfg.install_dir)
            clone(cfg.repo_url, cfg.install_dir, dry_run=cfg.dry_run)
        else:
            logger.info("Repo already present. Pulling latest in: %s", cfg.install_dir)
            pull_ff_only(cfg.install_dir, dry_run=cfg.dry_run)
