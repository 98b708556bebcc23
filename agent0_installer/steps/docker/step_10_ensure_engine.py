from __future__ import annotations

import logging

from ...install_config import InstallConfig
from ...lib.command import command_exists, require_cmd
from ...lib.docker import enable_service, user_can_access_daemon
from ...lib.env import FIXED
from ...lib.manifests import load_packages_manifest, package_list
from ...lib.pkg import apt_install, apt_update, first_available

logger = logging.getLogger(__name__)


class EnsureEngineStep:
    step_id = "10_ensure_engine"

    def should_run(self, cfg: InstallConfig) -> bool:
        if command_exists("docker"):
            logger.info("Docker found")
            return False
        return True

    def run(self, cfg: InstallConfig) -> None:
        dry_run = cfg.dry_run
        manifest = load_packages_manifest()

        logger.info("Docker not found. Installing docker.io from APT...")
        require_cmd(FIXED.sudo, dry_run=dry_run)
        require_cmd("apt-get", dry_run=dry_run)
        apt_update(dry_run=dry_run)
        apt_install(package_list("docker_engine", manifest), dry_run=dry_run)

        # Compose is not needed for `docker run`; install it only if APT has one.
        logger.info("Checking for compose packages...")
        compose = first_available(package_list("compose_candidates", manifest), dry_run=dry_run)
        if compose:
            logger.info("Installing %s", compose)
            apt_install([compose], dry_run=dry_run)
        else:
            logger.info("No compose package available in APT. Continuing without Docker Compose (not required).")

        logger.info("Enabling and starting Docker service")
        enable_service(dry_run=dry_run)

        if not user_can_access_daemon(dry_run=dry_run):
            logger.info("Docker daemon started, but current user may not have permission.")
            logger.info("You can either run docker with sudo, or add your user to docker group:")
            logger.info("  sudo usermod -aG docker %s", cfg.user)
            logger.info("  (then log out/in)")
