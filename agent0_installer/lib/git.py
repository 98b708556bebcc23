from __future__ import annotations

import logging
from pathlib import Path

from .command import run_cmd

logger = logging.getLogger(__name__)


def is_clone(path: Path) -> bool:
    return (path / ".git").exists()


def clone(url: str, dest: Path, *, dry_run: bool = False) -> None:
    run_cmd(["git", "clone", url, str(dest)], stream=True, dry_run=dry_run)


def pull_ff_only(repo: Path, *, dry_run: bool = False) -> None:
    """Fast-forward the clone; git refuses (non-zero) if histories diverged."""
    run_cmd(["git", "-C", str(repo), "pull", "--ff-only"], stream=True, dry_run=dry_run)
