"""
Tests for the command runner.
"""

import sys

import pytest

from macos_bootstrap.errors import CommandError
from macos_bootstrap.lib.command import NOT_FOUND_RC, run_cmd


def test_captures_stdout():
    r = run_cmd([sys.executable, "-c", "print('hello')"])

    assert r.returncode == 0
    assert r.stdout.strip() == "hello"


def test_nonzero_exit_raises_with_returncode_and_stderr():
    with pytest.raises(CommandError) as exc:
        run_cmd([sys.executable, "-c", "import sys; sys.stderr.write('boom'); sys.exit(3)"])

    assert exc.value.returncode == 3
    assert "boom" in exc.value.stderr
    assert "boom" in str(exc.value)


def test_check_false_returns_result():
    r = run_cmd([sys.executable, "-c", "import sys; sys.exit(4)"], check=False)

    assert r.returncode == 4


def test_env_is_overlaid_on_environment():
    r = run_cmd(
        [sys.executable, "-c", "import os; print(os.environ['HOMEBREW_CASK_OPTS'], bool(os.environ.get('PATH')))"],
        env={"HOMEBREW_CASK_OPTS": "--appdir=/Applications"},
    )

    assert r.stdout.split() == ["--appdir=/Applications", "True"]


def test_missing_executable_maps_to_127():
    r = run_cmd(["definitely-not-a-real-command-xyz"], check=False)
    assert r.returncode == NOT_FOUND_RC

    with pytest.raises(CommandError) as exc:
        run_cmd(["definitely-not-a-real-command-xyz"])
    assert exc.value.returncode == NOT_FOUND_RC


def test_dry_run_does_not_execute(tmp_path):
    marker = tmp_path / "ran"

    r = run_cmd([sys.executable, "-c", f"open({str(marker)!r}, 'w').close()"], dry_run=True)

    assert r.returncode == 0
    assert not marker.exists()


def test_uncaptured_run_still_checks_status():
    with pytest.raises(CommandError) as exc:
        run_cmd([sys.executable, "-c", "import sys; sys.exit(2)"], capture=False)

    assert exc.value.returncode == 2
    assert exc.value.stderr == ""
