"""Tests for provider subprocess execution and result mapping."""

import subprocess
from unittest.mock import patch

from gga.core.result_types import ExecutionOutput, SubprocessFailure
from gga.subprocess_utils import describe_command, run_provider_command


def test_describe_command_redacts_prompt() -> None:
    prompt = "secret source code"

    described = describe_command(["codex", "exec", prompt], prompt=prompt)

    assert described == "codex exec <prompt: 18 chars>"
    assert "secret" not in described


def test_timeout_maps_to_exit_124() -> None:
    with patch("gga.subprocess_utils.subprocess.run") as mock_run:
        mock_run.side_effect = subprocess.TimeoutExpired(cmd=["claude"], timeout=5)
        result = run_provider_command(
            ["claude", "--print"], prompt="p", stdin_text="p", timeout_seconds=5
        )

    assert result == SubprocessFailure(exit_code=124, message="claude timed out after 5 seconds")


def test_passes_stdin_and_never_uses_shell() -> None:
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="ok", stderr="")
    with patch("gga.subprocess_utils.subprocess.run", return_value=completed) as mock_run:
        result = run_provider_command(
            ["gemini"], prompt="Review", stdin_text="Review", timeout_seconds=7.5
        )

    assert result == ExecutionOutput(text="ok")
    kwargs = mock_run.call_args.kwargs
    assert mock_run.call_args.args[0] == ["gemini"]
    assert kwargs["input"] == "Review"
    assert kwargs["stdin"] is None
    assert kwargs["timeout"] == 7.5
    assert kwargs.get("shell", False) is False


def test_devnull_stdin_when_no_stdin_text() -> None:
    completed = subprocess.CompletedProcess(args=[], returncode=0, stdout="", stderr="")
    with patch("gga.subprocess_utils.subprocess.run", return_value=completed) as mock_run:
        run_provider_command(
            ["ollama", "run", "m", "p"], prompt="p", stdin_text=None, timeout_seconds=1
        )

    assert mock_run.call_args.kwargs["stdin"] == subprocess.DEVNULL
    assert mock_run.call_args.kwargs["input"] is None


def test_stderr_is_ansi_stripped_in_failure_message() -> None:
    completed = subprocess.CompletedProcess(
        args=[], returncode=2, stdout="partial", stderr="\x1b[31mrate limited\x1b[0m\n"
    )
    with patch("gga.subprocess_utils.subprocess.run", return_value=completed):
        result = run_provider_command(
            ["codex", "exec", "p"], prompt="p", stdin_text=None, timeout_seconds=1
        )

    assert result == SubprocessFailure(exit_code=2, message="rate limited")
