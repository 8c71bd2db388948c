import subprocess
import sys
from pathlib import Path

import pytest

ROOT_DIR = Path(__file__).resolve().parents[2]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))


class FakeHost:
    """Stands in for PATH lookups and subprocess execution."""

    def __init__(self):
        self.available = set()
        self.missing_executables = set()
        self.exit_codes = {}
        self.cc_banner = "cc (GCC) 13.2.0\nCopyright (C) 2023 Free Software Foundation, Inc.\n"
        self.probes = []
        self.calls = []
        self.envs = []

    def which(self, name, mode=None, path=None):
        self.probes.append(name)
        if name in self.available:
            return f"/usr/bin/{name}"
        return None

    def run(self, cmd, **kwargs):
        cmd = [str(c) for c in cmd]
        self.calls.append(cmd)
        self.envs.append(kwargs.get("env"))
        if cmd[0] in self.missing_executables:
            raise FileNotFoundError(2, "No such file or directory", cmd[0])
        if cmd[0] == "cc":
            return subprocess.CompletedProcess(cmd, 0, self.cc_banner, "")
        code = self.exit_codes.get(tuple(cmd), 0)
        if code and kwargs.get("check"):
            raise subprocess.CalledProcessError(code, cmd)
        return subprocess.CompletedProcess(cmd, code, "", "")

    def install_calls(self):
        return [c for c in self.calls if c[0] != "cc"]


@pytest.fixture()
def fake_host(monkeypatch):
    host = FakeHost()
    monkeypatch.setattr("shutil.which", host.which)
    monkeypatch.setattr("subprocess.run", host.run)
    monkeypatch.setenv("EUID", "1000")
    monkeypatch.delenv("HOSTPREP_CONFIG_DIR", raising=False)
    monkeypatch.delenv("HOSTPREP_PROJECT_DIR", raising=False)
    return host
