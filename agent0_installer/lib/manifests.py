from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, List


def _manifests_dir() -> Path:
    # agent0_installer/lib/manifests.py -> agent0_installer/manifests
    return Path(__file__).resolve().parents[1] / "manifests"


def load_yaml_rel(rel_path: str) -> Dict[str, Any]:
    """Load a YAML file relative to the bundled manifests directory."""
    try:
        import yaml  # type: ignore
    except Exception as e:  # pragma: no cover
        raise RuntimeError("PyYAML required to load manifests") from e

    p = _manifests_dir() / rel_path.lstrip("/")
    data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise RuntimeError(f"Manifest must be a mapping/dict: {p}")
    return data


def load_packages_manifest() -> Dict[str, Any]:
    return load_yaml_rel("packages.yaml")


def package_list(key: str, manifest: Dict[str, Any] | None = None) -> List[str]:
    data = load_packages_manifest() if manifest is None else manifest
    pkgs = data.get(key) or []
    if not isinstance(pkgs, list):
        raise RuntimeError(f"manifests/packages.yaml: {key} must be a list")
    return [str(p).strip() for p in pkgs if str(p).strip()]
