from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Defaults:
    mode: str = "docker"
    install_dir_name: str = "agent-zero"
    data_dir_name: str = "agent0_data"
    port: int = 50001
    host: str = "0.0.0.0"
    container_name: str = "agent-zero"
    python_bin: str = "python3"
    repo_url: str = "https://github.com/agent0ai/agent-zero.git"
    image: str = "agent0ai/agent-zero:latest"


@dataclass(frozen=True)
class Fixed:
    sudo: str = "sudo"
    container_port: int = 80
    container_data_path: str = "/a0/usr"
    venv_subdir: str = ".venv"
    requirements_file: str = "requirements.txt"
    ui_script: str = "run_ui.py"
    ui_log_file: str = "agent0-ui.log"
    browser: str = "chromium"


DEFAULTS = Defaults()
FIXED = Fixed()
