from __future__ import annotations

import logging

from ...install_config import InstallConfig

logger = logging.getLogger(__name__)


class DockerDoneStep:
    step_id = "90_done"

    def run(self, cfg: InstallConfig) -> None:
        logger.info("Done.")
        logger.info("Open: http://localhost:%s", cfg.port)
        logger.info("Logs: sudo docker logs -f %s", cfg.container_name)
        logger.info("Stop: sudo docker stop %s", cfg.container_name)
