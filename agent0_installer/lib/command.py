from __future__ import annotations

import logging
import os
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CmdResult:
    argv: list[str]
    returncode: int
    stdout: str
    stderr: str

    @property
    def ok(self) -> bool:
        return self.returncode == 0


class CommandError(RuntimeError):
    """An external command exited non-zero."""

    def __init__(self, result: CmdResult) -> None:
        self.result = result
        msg = f"Command failed ({result.returncode}): {fmt_argv(result.argv)}"
        if result.stderr:
            msg += f"\n{result.stderr.rstrip()}"
        super().__init__(msg)


def fmt_argv(argv: Sequence[str]) -> str:
    return " ".join(shlex.quote(a) for a in argv)


def command_exists(name: str) -> bool:
    """Return True if `name` resolves to an executable on PATH. Never raises."""
    try:
        return shutil.which(name) is not None
    except Exception:
        return False


def require_cmd(name: str, *, dry_run: bool = False) -> None:
    if command_exists(name):
        return
    if dry_run:
        logger.warning("Missing required command: %s (ignored in dry-run)", name)
        return
    raise RuntimeError(f"Missing required command: {name}")


def run_cmd(
    argv: Sequence[str],
    *,
    check: bool = True,
    env: Mapping[str, str] | None = None,
    cwd: str | None = None,
    input_text: str | None = None,
    stream: bool = False,
    dry_run: bool = False,
) -> CmdResult:
    """Run a command with consistent logging.

    - Always logs the command.
    - Captures stdout/stderr unless `stream` is set, in which case the tool
      writes straight to the terminal and the result carries empty output.
    - dry_run logs but does not execute.
    """

    argv_list = list(argv)
    logger.info("CMD %s", fmt_argv(argv_list))

    if dry_run:
        return CmdResult(argv=argv_list, returncode=0, stdout="", stderr="")

    pipe = None if stream else subprocess.PIPE
    p = subprocess.run(
        argv_list,
        input=input_text,
        text=True,
        stdout=pipe,
        stderr=pipe,
        cwd=cwd,
        env=dict(os.environ, **(env or {})),
    )

    stdout = p.stdout or ""
    stderr = p.stderr or ""
    if stdout:
        logger.debug("STDOUT %s", stdout.strip())
    if stderr:
        logger.debug("STDERR %s", stderr.strip())

    result = CmdResult(argv=argv_list, returncode=p.returncode, stdout=stdout, stderr=stderr)
    if check and not result.ok:
        raise CommandError(result)
    return result


def spawn_detached(
    argv: Sequence[str],
    *,
    log_path: Path,
    cwd: str | None = None,
    dry_run: bool = False,
) -> int | None:
    """Start a process in its own session with stdout+stderr sent to log_path.

    The caller does not wait on or own the child. Returns the pid.
    """

    argv_list = list(argv)
    logger.info("SPAWN %s > %s", fmt_argv(argv_list), log_path)

    if dry_run:
        return None

    log_path.parent.mkdir(parents=True, exist_ok=True)
    with open(log_path, "w", encoding="utf-8") as log_file:
        p = subprocess.Popen(
            argv_list,
            cwd=cwd,
            stdin=subprocess.DEVNULL,
            stdout=log_file,
            stderr=subprocess.STDOUT,
            start_new_session=True,
            close_fds=True,
        )
    logger.debug("Spawned pid %s", p.pid)
    return p.pid
