"""
Pytest configuration and shared fixtures.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

import pytest

from macos_bootstrap.errors import CommandError
from macos_bootstrap.lib.command import CmdResult


class StubPackageManager:
    """In-memory package manager: probe and install share one namespace."""

    def __init__(self, installed=(), fail_on=()):
        self.installed = set(installed)
        self.fail_on = set(fail_on)
        self.probes: List[str] = []
        self.installs: List[str] = []

    def is_installed(self, item: str) -> bool:
        self.probes.append(item)
        return item in self.installed

    def install(self, item: str) -> None:
        self.installs.append(item)
        if item in self.fail_on:
            raise CommandError(["stub", "install", item], 1, f"cannot install {item}")
        self.installed.add(item)


@dataclass
class Call:
    argv: List[str]
    env: Optional[Dict[str, str]] = None
    capture: bool = True
    check: bool = True
    dry_run: bool = False


@dataclass
class FakeRunner:
    """Stands in for run_cmd: records calls, replies from a canned table."""

    outputs: Dict[Tuple[str, ...], Tuple[int, str]] = field(default_factory=dict)
    calls: List[Call] = field(default_factory=list)

    def __call__(self, argv, *, check=True, env=None, cwd=None, input_text=None, capture=True, dry_run=False):
        argv = list(argv)
        self.calls.append(Call(argv=argv, env=env, capture=capture, check=check, dry_run=dry_run))
        if dry_run:
            return CmdResult(argv=argv, returncode=0, stdout="", stderr="")
        rc, stdout = self.outputs.get(tuple(argv), (0, ""))
        if check and rc != 0:
            raise CommandError(argv, rc)
        return CmdResult(argv=argv, returncode=rc, stdout=stdout, stderr="")

    @property
    def argvs(self) -> List[List[str]]:
        return [c.argv for c in self.calls]


@pytest.fixture
def stub_pm():
    return StubPackageManager


@pytest.fixture
def fake_run(monkeypatch):
    """Patch ``run_cmd`` in the given module with a FakeRunner."""

    def _install(module, outputs=None):
        runner = FakeRunner(outputs=dict(outputs or {}))
        monkeypatch.setattr(module, "run_cmd", runner)
        return runner

    return _install


@pytest.fixture
def manifest(tmp_path):
    """Write a YAML manifest and return its path."""

    def _write(text: str, name: str = "manifest.yaml"):
        p = tmp_path / name
        p.write_text(text, encoding="utf-8")
        return str(p)

    return _write
