from __future__ import annotations

import logging
from pathlib import Path

from .command import CmdResult, run_cmd
from .env import FIXED

logger = logging.getLogger(__name__)


def _docker(*args: str) -> list[str]:
    return [FIXED.sudo, "docker", *args]


def enable_service(*, dry_run: bool = False) -> bool:
    """Enable and start the docker service. Best-effort."""
    r = run_cmd([FIXED.sudo, "systemctl", "enable", "--now", "docker"], check=False, dry_run=dry_run)
    if not r.ok:
        logger.warning("Could not enable docker service (exit %s); continuing", r.returncode)
    return r.ok


def user_can_access_daemon(*, dry_run: bool = False) -> bool:
    """Probe the daemon without sudo."""
    return run_cmd(["docker", "ps"], check=False, dry_run=dry_run).ok


def pull_image(image: str, *, dry_run: bool = False) -> None:
    run_cmd(_docker("pull", image), stream=True, dry_run=dry_run)


def container_exists(name: str, *, dry_run: bool = False) -> bool:
    """True if a running or stopped container has exactly this name.

    A failed listing counts as "no container"; the run step reports the real error.
    """
    r = run_cmd(_docker("ps", "-a", "--format", "{{.Names}}"), check=False, dry_run=dry_run)
    if not r.ok:
        return False
    return name in [line.strip() for line in r.stdout.splitlines()]


def stop_container(name: str, *, dry_run: bool = False) -> CmdResult:
    return run_cmd(_docker("stop", name), check=False, dry_run=dry_run)


def remove_container(name: str, *, dry_run: bool = False) -> CmdResult:
    return run_cmd(_docker("rm", name), check=False, dry_run=dry_run)


def run_container(
    *,
    name: str,
    image: str,
    host_port: int,
    data_dir: Path,
    dry_run: bool = False,
) -> None:
    run_cmd(
        _docker(
            "run",
            "-d",
            "--name",
            name,
            "-p",
            f"{host_port}:{FIXED.container_port}",
            "-v",
            f"{data_dir}:{FIXED.container_data_path}",
            image,
        ),
        stream=True,
        dry_run=dry_run,
    )
