"""Shared fixtures: a fake host that stands in for subprocess and PATH lookups."""

import subprocess
from pathlib import Path
from unittest.mock import patch

import pytest

from agent0_installer.install_config import build_config


class FakeProcess:
    def __init__(self, pid):
        self.pid = pid


class FakeHost:
    """Records commands and simulates just enough of apt, docker, git and venv."""

    def __init__(self):
        self.binaries = {"sudo", "apt-get", "apt-cache", "python3", "docker", "git", "hostname", "systemctl"}
        self.calls = []
        self.responses = []
        self.containers = set()
        self.diverged = False
        self.spawned = []
        self.unrunnable = set()

    def respond(self, prefix, returncode=0, stdout="", stderr=""):
        self.responses.insert(0, (tuple(prefix), returncode, stdout, stderr))

    def which(self, name):
        return f"/usr/bin/{name}" if name in self.binaries else None

    def commands(self, *prefix):
        return [c for c in self.calls if tuple(c[: len(prefix)]) == prefix]

    def _done(self, argv, returncode=0, stdout="", stderr=""):
        return subprocess.CompletedProcess(argv, returncode, stdout, stderr)

    def run(self, argv, **kwargs):
        argv = list(argv)
        self.calls.append(argv)
        if argv[0] in self.unrunnable:
            raise FileNotFoundError(2, "No such file or directory", argv[0])

        for prefix, rc, out, err in self.responses:
            if tuple(argv[: len(prefix)]) == prefix:
                return self._done(argv, rc, out, err)

        if argv[:3] == ["sudo", "apt-get", "install"] and "docker.io" in argv:
            self.binaries.add("docker")
        elif argv[:4] == ["sudo", "docker", "ps", "-a"]:
            return self._done(argv, stdout="".join(f"{n}\n" for n in sorted(self.containers)))
        elif argv[:3] == ["sudo", "docker", "rm"]:
            if argv[3] not in self.containers:
                return self._done(argv, 1, stderr=f"Error: No such container: {argv[3]}")
            self.containers.discard(argv[3])
        elif argv[:3] == ["sudo", "docker", "stop"]:
            if argv[3] not in self.containers:
                return self._done(argv, 1, stderr=f"Error: No such container: {argv[3]}")
        elif argv[:3] == ["sudo", "docker", "run"]:
            name = argv[argv.index("--name") + 1]
            if name in self.containers:
                return self._done(argv, 125, stderr=f'Conflict. The container name "/{name}" is already in use')
            self.containers.add(name)
        elif argv[:2] == ["git", "clone"]:
            dest = Path(argv[3])
            (dest / ".git").mkdir(parents=True)
            (dest / "requirements.txt").write_text("flask\n", encoding="utf-8")
        elif argv[:2] == ["git", "-C"] and "pull" in argv and self.diverged:
            return self._done(argv, 128, stderr="fatal: Not possible to fast-forward, aborting.")
        elif argv[1:3] == ["-m", "venv"]:
            py = Path(argv[3]) / "bin" / "python"
            py.parent.mkdir(parents=True, exist_ok=True)
            py.write_text("", encoding="utf-8")
        elif argv == ["hostname", "-I"]:
            return self._done(argv, stdout="192.168.1.50 172.17.0.1 \n")

        return self._done(argv)

    def popen(self, argv, **kwargs):
        self.spawned.append((list(argv), kwargs))
        return FakeProcess(4242)


@pytest.fixture
def host():
    fake = FakeHost()
    with patch("agent0_installer.lib.command.subprocess.run", side_effect=fake.run), patch(
        "agent0_installer.lib.command.subprocess.Popen", side_effect=fake.popen
    ), patch("agent0_installer.lib.command.shutil.which", side_effect=fake.which):
        yield fake


@pytest.fixture
def environ(tmp_path):
    return {"HOME": str(tmp_path), "USER": "tester"}


@pytest.fixture
def make_config(environ):
    def _make(**overrides):
        return build_config(environ=environ, **overrides)

    return _make
