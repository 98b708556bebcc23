from __future__ import annotations

import logging
from typing import Sequence

from .command import run_cmd
from .env import FIXED

logger = logging.getLogger(__name__)


def apt_update(*, dry_run: bool = False) -> None:
    run_cmd([FIXED.sudo, "apt-get", "update", "-y"], stream=True, dry_run=dry_run)


def apt_install(
    packages: Sequence[str],
    *,
    with_recommends: bool = False,
    dry_run: bool = False,
) -> None:
    if not packages:
        return
    argv = [
        FIXED.sudo,
        "apt-get",
        "install",
        "-y",
    ]
    if not with_recommends:
        argv.append("--no-install-recommends")
    run_cmd([*argv, *packages], stream=True, dry_run=dry_run)


def apt_has_package(package: str, *, dry_run: bool = False) -> bool:
    """Return True if apt knows about a package name.

    This is useful for optional packages that may only exist in some repos.
    """
    if dry_run:
        # Be permissive in dry-run so planning doesn't fail.
        return True
    r = run_cmd(["apt-cache", "show", package], check=False)
    return r.ok


def first_available(candidates: Sequence[str], *, dry_run: bool = False) -> str | None:
    """Return the first candidate apt can install, or None."""
    for name in candidates:
        if apt_has_package(name, dry_run=dry_run):
            return name
        logger.info("%s not available in APT", name)
    return None
