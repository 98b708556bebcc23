from __future__ import annotations

import logging

from ...install_config import InstallConfig
from ...lib.pyenv import create_venv, upgrade_installer, venv_exists

logger = logging.getLogger(__name__)


class CreateVenvStep:
    step_id = "40_create_venv"

    def run(self, cfg: InstallConfig) -> None:
        if venv_exists(cfg.venv_dir):
            logger.info("Using existing venv: %s", cfg.venv_dir)
        else:
            logger.info("Creating venv: %s", cfg.venv_dir)
            create_venv(cfg.python_bin, cfg.venv_dir, dry_run=cfg.dry_run)
        upgrade_installer(cfg.venv_dir, dry_run=cfg.dry_run)
