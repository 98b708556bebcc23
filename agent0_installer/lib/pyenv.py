from __future__ import annotations

import logging
from pathlib import Path

from .command import run_cmd

logger = logging.getLogger(__name__)


def venv_python(venv_dir: Path) -> Path:
    return venv_dir / "bin" / "python"


def venv_exists(venv_dir: Path) -> bool:
    return venv_python(venv_dir).exists()


def create_venv(python_bin: str, venv_dir: Path, *, dry_run: bool = False) -> None:
    # Without --clear, venv leaves already installed packages alone.
    run_cmd([python_bin, "-m", "venv", str(venv_dir)], dry_run=dry_run)


def upgrade_installer(venv_dir: Path, *, dry_run: bool = False) -> None:
    run_cmd(
        [str(venv_python(venv_dir)), "-m", "pip", "install", "--upgrade", "pip", "setuptools", "wheel"],
        stream=True,
        dry_run=dry_run,
    )


def pip_install_requirements(venv_dir: Path, requirements: Path, *, dry_run: bool = False) -> None:
    run_cmd(
        [str(venv_python(venv_dir)), "-m", "pip", "install", "-r", str(requirements)],
        cwd=str(requirements.parent),
        stream=True,
        dry_run=dry_run,
    )


def playwright_install(venv_dir: Path, browser: str, *, dry_run: bool = False) -> None:
    run_cmd(
        [str(venv_python(venv_dir)), "-m", "playwright", "install", browser],
        stream=True,
        dry_run=dry_run,
    )
