"""Tests for hosted assistant executors against fake CLIs on PATH."""

import pytest

from gga.core.provider_spec import ProviderKind
from gga.core.result_types import ExecutionOutput, SubprocessFailure
from gga.gateway.assistant.real import (
    RealClaudeAssistant,
    RealCodexAssistant,
    RealGeminiAssistant,
    build_claude_args,
    build_codex_exec_args,
    build_gemini_args,
    create_real_assistants,
)
from tests.unit.gateway.conftest import InstallFakeCli

PROMPT = "Review $HOME `id` 'single' \"double\" \\ 🚀\nline two"


def test_build_args() -> None:
    assert build_claude_args() == ["claude", "--print"]
    assert build_gemini_args() == ["gemini"]
    assert build_codex_exec_args(prompt=PROMPT) == ["codex", "exec", "--", PROMPT]


def test_create_real_assistants_covers_hosted_kinds() -> None:
    assistants = create_real_assistants()

    assert set(assistants) == {ProviderKind.CLAUDE, ProviderKind.GEMINI, ProviderKind.CODEX}
    assert all(kind is executor.kind for kind, executor in assistants.items())


def test_claude_reads_prompt_from_stdin(install_fake_cli: InstallFakeCli) -> None:
    fake = install_fake_cli("claude", stdout="STATUS: PASSED\\n")

    result = RealClaudeAssistant().execute(PROMPT, timeout_seconds=10)

    assert result == ExecutionOutput(text="STATUS: PASSED\n")
    assert fake.args == ["--print"]
    assert fake.stdin == PROMPT


def test_gemini_reads_prompt_from_stdin(install_fake_cli: InstallFakeCli) -> None:
    fake = install_fake_cli("gemini", stdout="ok")

    result = RealGeminiAssistant().execute(PROMPT, timeout_seconds=10)

    assert result == ExecutionOutput(text="ok")
    assert fake.args == []
    assert fake.stdin == PROMPT


def test_codex_receives_prompt_as_one_argument(install_fake_cli: InstallFakeCli) -> None:
    fake = install_fake_cli("codex", stdout="ok")

    RealCodexAssistant().execute(PROMPT, timeout_seconds=10)

    assert fake.args == ["exec", "--", PROMPT]
    assert fake.stdin == ""


def test_codex_prompt_starting_with_dashes_stays_positional(
    install_fake_cli: InstallFakeCli,
) -> None:
    fake = install_fake_cli("codex", stdout="ok")
    diff = "--- a/app.py\n+++ b/app.py\n@@ -1 +1 @@\n-x = 1\n+x = 2\n"

    RealCodexAssistant().execute(diff, timeout_seconds=10)

    assert fake.args == ["exec", "--", diff]


def test_assistant_output_is_ansi_stripped(install_fake_cli: InstallFakeCli) -> None:
    install_fake_cli("claude", stdout="\\0033[1;32mSTATUS: PASSED\\0033[0m")

    result = RealClaudeAssistant().execute("p", timeout_seconds=10)

    assert result == ExecutionOutput(text="STATUS: PASSED")


def test_assistant_exit_code_propagates(install_fake_cli: InstallFakeCli) -> None:
    install_fake_cli("gemini", stderr="quota exceeded", exit_code=7)

    result = RealGeminiAssistant().execute("p", timeout_seconds=10)

    assert result == SubprocessFailure(exit_code=7, message="quota exceeded")


@pytest.mark.parametrize(
    "executor", [RealClaudeAssistant(), RealGeminiAssistant(), RealCodexAssistant()]
)
def test_unavailable_without_binary(empty_path: None, executor) -> None:
    assert executor.is_available() is False
    result = executor.execute("p", timeout_seconds=10)
    assert isinstance(result, SubprocessFailure)
    assert result.exit_code == 127
