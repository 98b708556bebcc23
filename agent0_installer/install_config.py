from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from .lib.env import DEFAULTS, FIXED
from .lib.pyenv import venv_python

MODES = ("docker", "native")


@dataclass(frozen=True)
class InstallConfig:
    """Resolved installer options. Built once at startup, never mutated."""

    mode: str
    install_dir: Path
    data_dir: Path
    port: int
    host: str
    container_name: str
    user: str
    python_bin: str = DEFAULTS.python_bin
    repo_url: str = DEFAULTS.repo_url
    image: str = DEFAULTS.image
    dry_run: bool = False

    def __post_init__(self) -> None:
        if self.mode not in MODES:
            raise ValueError(f"Invalid --mode '{self.mode}' (must be docker or native)")
        if not 1 <= int(self.port) <= 65535:
            raise ValueError(f"Invalid --port {self.port} (must be 1-65535)")
        if not self.container_name:
            raise ValueError("--name must not be empty")

    @property
    def venv_dir(self) -> Path:
        return self.install_dir / FIXED.venv_subdir

    @property
    def venv_python(self) -> Path:
        return venv_python(self.venv_dir)

    @property
    def requirements_path(self) -> Path:
        return self.install_dir / FIXED.requirements_file

    @property
    def ui_log_path(self) -> Path:
        return self.install_dir / FIXED.ui_log_file


def _absolute(path) -> Path:
    # Steps run tools with cwd=install_dir and hand data_dir to docker -v.
    return Path(path).expanduser().resolve()


def build_config(
    *,
    environ: Mapping[str, str],
    mode: Optional[str] = None,
    install_dir: Optional[str] = None,
    data_dir: Optional[str] = None,
    port: Optional[int] = None,
    host: Optional[str] = None,
    container_name: Optional[str] = None,
    dry_run: bool = False,
) -> InstallConfig:
    """Apply option overrides on top of defaults resolved from `environ`."""

    home = _absolute(environ.get("HOME") or Path.home())
    user = environ.get("USER") or environ.get("LOGNAME") or "$USER"

    return InstallConfig(
        mode=mode if mode is not None else DEFAULTS.mode,
        install_dir=_absolute(install_dir) if install_dir else home / DEFAULTS.install_dir_name,
        data_dir=_absolute(data_dir) if data_dir else home / DEFAULTS.data_dir_name,
        port=port if port is not None else DEFAULTS.port,
        host=host if host is not None else DEFAULTS.host,
        container_name=container_name if container_name is not None else DEFAULTS.container_name,
        user=user,
        dry_run=dry_run,
    )
