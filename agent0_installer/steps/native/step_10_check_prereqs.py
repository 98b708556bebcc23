from __future__ import annotations

import logging

from ...install_config import InstallConfig
from ...lib.command import require_cmd
from ...lib.env import FIXED

logger = logging.getLogger(__name__)


class CheckPrereqsStep:
    step_id = "10_check_prereqs"

    def run(self, cfg: InstallConfig) -> None:
        for name in (FIXED.sudo, "apt-get", cfg.python_bin):
            require_cmd(name, dry_run=cfg.dry_run)
