from __future__ import annotations

import logging

from ...install_config import InstallConfig
from ...lib.manifests import package_list
from ...lib.pkg import apt_install, apt_update

logger = logging.getLogger(__name__)


class InstallHostDepsStep:
    step_id = "20_install_host_deps"

    def run(self, cfg: InstallConfig) -> None:
        packages = package_list("native_host_deps")
        logger.info("Installing %d host packages", len(packages))
        apt_update(dry_run=cfg.dry_run)
        apt_install(packages, dry_run=cfg.dry_run)
