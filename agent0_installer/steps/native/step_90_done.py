from __future__ import annotations

import logging

from ...install_config import InstallConfig
from ...lib.net import primary_ip

logger = logging.getLogger(__name__)


class NativeDoneStep:
    step_id = "90_done"

    def run(self, cfg: InstallConfig) -> None:
        logger.info("Done. Logs: %s", cfg.ui_log_path)
        logger.info("Open: http://%s:%s", primary_ip(cfg.host), cfg.port)
