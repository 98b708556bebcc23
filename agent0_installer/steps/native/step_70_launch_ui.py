from __future__ import annotations

import logging

from ...install_config import InstallConfig
from ...lib.command import spawn_detached
from ...lib.env import FIXED

logger = logging.getLogger(__name__)


class LaunchUIStep:
    step_id = "70_launch_ui"

    def run(self, cfg: InstallConfig) -> None:
        logger.info("Starting Agent Zero UI on http://%s:%s", cfg.host, cfg.port)
        # Fire-and-forget: the installer does not wait for the port to bind.
        spawn_detached(
            [
                str(cfg.venv_python),
                FIXED.ui_script,
                f"--host={cfg.host}",
                f"--port={cfg.port}",
            ],
            cwd=str(cfg.install_dir),
            log_path=cfg.ui_log_path,
            dry_run=cfg.dry_run,
        )
