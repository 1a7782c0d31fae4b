"""Tests for cloning template repositories through git."""

from __future__ import annotations

from pathlib import Path
import subprocess
from unittest.mock import MagicMock, patch

import pytest

from create_builtby_app.cli._clone import GIT_HOST_ENV, clone_template, repo_url
from create_builtby_app.core.errors import CloneError, TemplateAccessError


def _completed(returncode: int = 0, stderr: str = "") -> subprocess.CompletedProcess[str]:
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout="", stderr=stderr)


class TestRepoUrl:
    def test_github_default(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(GIT_HOST_ENV, raising=False)

        assert repo_url("builtby-win/web") == ("https://github.com/builtby-win/web.git", None)

    def test_ref_suffix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(GIT_HOST_ENV, raising=False)

        url, ref = repo_url("builtby-win/web#v2")
        assert url == "https://github.com/builtby-win/web.git"
        assert ref == "v2"

    def test_host_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(GIT_HOST_ENV, "https://git.example.com/")

        assert repo_url("a/b")[0] == "https://git.example.com/a/b.git"


class TestCloneTemplate:
    @patch("create_builtby_app.cli._clone.subprocess.run")
    def test_success_strips_history(self, mock_run: MagicMock, tmp_path: Path, reporter) -> None:
        dest = tmp_path / "proj"

        def fake_clone(cmd: list[str], **kwargs) -> subprocess.CompletedProcess[str]:
            (dest / ".git").mkdir(parents=True)
            (dest / "package.json").write_text("{}")
            return _completed()

        mock_run.side_effect = fake_clone

        clone_template("builtby-win/web", dest, reporter)

        assert (dest / "package.json").exists()
        assert not (dest / ".git").exists()
        cmd = mock_run.call_args.args[0]
        assert cmd[:4] == ["git", "clone", "--depth", "1"]
        assert cmd[-1] == str(dest)
        assert mock_run.call_args.kwargs["env"]["GIT_TERMINAL_PROMPT"] == "0"
        assert reporter.of("info")

    @patch("create_builtby_app.cli._clone.subprocess.run", return_value=_completed())
    def test_ref_selects_branch(self, mock_run: MagicMock, tmp_path: Path) -> None:
        clone_template("builtby-win/web#beta", tmp_path / "proj")

        cmd = mock_run.call_args.args[0]
        assert cmd[cmd.index("--branch") + 1] == "beta"

    @pytest.mark.parametrize(
        "stderr",
        [
            "remote: Repository not found.\nfatal: repository 'https://github.com/x/y.git/' not found",
            "fatal: could not read Username for 'https://github.com': terminal prompts disabled",
            "fatal: Authentication failed for 'https://github.com/x/y.git/'",
            "warning: Could not find remote branch nope to clone.\n"
            "fatal: Remote branch nope not found in upstream origin",
        ],
    )
    def test_access_errors(self, tmp_path: Path, stderr: str) -> None:
        with patch(
            "create_builtby_app.cli._clone.subprocess.run",
            return_value=_completed(128, stderr),
        ):
            with pytest.raises(TemplateAccessError) as exc_info:
                clone_template("builtby-win/web", tmp_path / "proj")

        assert exc_info.value.repo == "builtby-win/web"

    @patch(
        "create_builtby_app.cli._clone.subprocess.run",
        return_value=_completed(128, "fatal: unable to access: Could not resolve host: github.com"),
    )
    def test_other_failures_are_clone_errors(self, mock_run: MagicMock, tmp_path: Path) -> None:
        with pytest.raises(CloneError, match="Could not resolve host") as exc_info:
            clone_template("builtby-win/web", tmp_path / "proj")

        assert not isinstance(exc_info.value, TemplateAccessError)

    @patch("create_builtby_app.cli._clone.subprocess.run", side_effect=FileNotFoundError)
    def test_missing_git(self, mock_run: MagicMock, tmp_path: Path) -> None:
        with pytest.raises(CloneError, match="git is not installed"):
            clone_template("builtby-win/web", tmp_path / "proj")
