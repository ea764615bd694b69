"""Tests for GitConfigIdentityProvider."""

import subprocess
from pathlib import Path

import pytest

from tuck.core.types import Identity
from tuck.gateway.identity.real import GitConfigIdentityProvider


def _fake_run(values: dict[str, str]):
    def run(args: list[str], **kwargs: object) -> subprocess.CompletedProcess[str]:
        key = args[-1]
        if key in values:
            return subprocess.CompletedProcess(args, 0, stdout=values[key] + "\n", stderr="")
        return subprocess.CompletedProcess(args, 1, stdout="", stderr="")

    return run


def test_identity_from_git_config(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(
        subprocess, "run", _fake_run({"user.name": "Ada", "user.email": "ada@example.com"})
    )

    assert GitConfigIdentityProvider().current_identity(tmp_path) == Identity(
        name="Ada", email="ada@example.com"
    )


def test_missing_email_means_no_identity(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setattr(subprocess, "run", _fake_run({"user.name": "Ada"}))

    assert GitConfigIdentityProvider().current_identity(tmp_path) is None


def test_git_not_installed(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    def missing(*args: object, **kwargs: object) -> None:
        raise FileNotFoundError("git")

    monkeypatch.setattr(subprocess, "run", missing)

    assert GitConfigIdentityProvider().current_identity(tmp_path) is None
