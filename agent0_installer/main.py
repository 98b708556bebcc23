from __future__ import annotations

import argparse
import logging
import os
from typing import Mapping, Optional

from .install_config import MODES, InstallConfig, build_config
from .lib.env import DEFAULTS
from .logging_utils import configure_logging
from .pipeline import PipelineResult, run_pipeline
from .steps import build_steps

logger = logging.getLogger(__name__)


def _port(value: str) -> int:
    try:
        port = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid port: {value!r}") from None
    if not 1 <= port <= 65535:
        raise argparse.ArgumentTypeError(f"port out of range (1-65535): {port}")
    return port


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="agent0-install",
        description="Install Agent Zero as a Docker container or natively into a Python venv.",
        allow_abbrev=False,
    )
    p.add_argument("--mode", default=DEFAULTS.mode, choices=MODES, help="docker (default) or native")
    p.add_argument(
        "--dir",
        dest="install_dir",
        default=None,
        metavar="PATH",
        help=f"install directory for native mode (default: $HOME/{DEFAULTS.install_dir_name})",
    )
    p.add_argument(
        "--data-dir",
        default=None,
        metavar="PATH",
        help=f"data directory for docker volume mapping (default: $HOME/{DEFAULTS.data_dir_name})",
    )
    p.add_argument(
        "--port",
        type=_port,
        default=DEFAULTS.port,
        metavar="N",
        help=f"host port; docker maps it to container:80, native runs the UI on it (default: {DEFAULTS.port})",
    )
    p.add_argument("--host", default=DEFAULTS.host, metavar="IP", help=f"bind host for native mode (default: {DEFAULTS.host})")
    p.add_argument(
        "--name",
        dest="container_name",
        default=DEFAULTS.container_name,
        metavar="NAME",
        help=f"docker container name (default: {DEFAULTS.container_name})",
    )
    p.add_argument("--dry-run", action="store_true", help="Log commands without running them")
    p.add_argument("--log", default=None, metavar="PATH", help="Also write a timestamped log to PATH")
    p.add_argument("-v", "--verbose", action="store_true", help="Show command output")
    return p


def config_from_args(args: argparse.Namespace, environ: Mapping[str, str]) -> InstallConfig:
    return build_config(
        environ=environ,
        mode=args.mode,
        install_dir=args.install_dir,
        data_dir=args.data_dir,
        port=args.port,
        host=args.host,
        container_name=args.container_name,
        dry_run=bool(args.dry_run),
    )


def run(cfg: InstallConfig) -> PipelineResult:
    """Run the procedure selected by cfg.mode."""

    steps = build_steps(cfg.mode)
    logger.info("%s install selected", cfg.mode.capitalize())
    return run_pipeline(cfg=cfg, steps=steps)


def main(argv: Optional[list[str]] = None, environ: Optional[Mapping[str, str]] = None) -> int:
    args = build_parser().parse_args(argv)

    configure_logging(log_path=args.log, level=logging.DEBUG if args.verbose else logging.INFO)

    try:
        cfg = config_from_args(args, os.environ if environ is None else environ)
        run(cfg)
    except (RuntimeError, ValueError, OSError) as e:
        logger.error("%s", e)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
