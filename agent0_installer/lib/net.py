from __future__ import annotations

import logging

from .command import run_cmd

logger = logging.getLogger(__name__)


def primary_ip(fallback: str) -> str:
    """Best-effort first host address from `hostname -I`."""

    try:
        r = run_cmd(["hostname", "-I"], check=False)
    except OSError:
        return fallback
    parts = r.stdout.split() if r.ok else []
    return parts[0] if parts else fallback
