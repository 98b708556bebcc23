from __future__ import annotations

import logging

from ...install_config import InstallConfig
from ...lib.pyenv import pip_install_requirements

logger = logging.getLogger(__name__)


class InstallPythonDepsStep:
    step_id = "50_install_python_deps"

    def run(self, cfg: InstallConfig) -> None:
        requirements = cfg.requirements_path
        if not requirements.is_file():
            if not cfg.dry_run:
                raise RuntimeError(f"Requirements manifest not found: {requirements}")
            logger.warning("Requirements manifest not found: %s (ignored in dry-run)", requirements)

        logger.info("Installing Python requirements (venv)")
        pip_install_requirements(cfg.venv_dir, requirements, dry_run=cfg.dry_run)
