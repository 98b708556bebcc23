from __future__ import annotations

import logging

from ...install_config import InstallConfig
from ...lib.env import FIXED
from ...lib.pyenv import playwright_install

logger = logging.getLogger(__name__)


class InstallBrowserStep:
    step_id = "60_install_browser"

    def run(self, cfg: InstallConfig) -> None:
        logger.info("Installing Playwright %s browser", FIXED.browser.capitalize())
        playwright_install(cfg.venv_dir, FIXED.browser, dry_run=cfg.dry_run)
