"""Real hosted assistant executors using subprocess."""

import shutil
from abc import abstractmethod

from gga.core.provider_spec import ProviderKind
from gga.core.result_types import ExecutionResult
from gga.gateway.assistant.abc import AssistantExecutor
from gga.subprocess_utils import run_provider_command


def build_claude_args() -> list[str]:
    """Build CLI arguments for Claude in non-interactive print mode.

    The prompt is sent on stdin, which keeps large diffs out of argv.
    """
    return ["claude", "--print"]


def build_gemini_args() -> list[str]:
    """Build CLI arguments for Gemini; the prompt is sent on stdin."""
    return ["gemini"]


def build_codex_exec_args(*, prompt: str) -> list[str]:
    """Build CLI arguments for ``codex exec``.

    Codex reads the prompt as a positional argument, passed as a single
    argv element after "--" so it is never parsed as an option.
    """
    return ["codex", "exec", "--", prompt]


class _StdinAssistantExecutor(AssistantExecutor):
    """Shared implementation for CLIs that read the prompt from stdin."""

    def execute(self, prompt: str, *, timeout_seconds: float) -> ExecutionResult:
        return run_provider_command(
            self._build_args(),
            prompt=prompt,
            stdin_text=prompt,
            timeout_seconds=timeout_seconds,
        )

    @abstractmethod
    def _build_args(self) -> list[str]: ...

    def is_available(self) -> bool:
        return shutil.which(self.binary) is not None


class RealClaudeAssistant(_StdinAssistantExecutor):
    """Production implementation using the Claude Code CLI."""

    @property
    def kind(self) -> ProviderKind:
        return ProviderKind.CLAUDE

    @property
    def binary(self) -> str:
        return "claude"

    @property
    def install_hint(self) -> str:
        return "Install from: https://claude.com/download"

    def _build_args(self) -> list[str]:
        return build_claude_args()


class RealGeminiAssistant(_StdinAssistantExecutor):
    """Production implementation using the Gemini CLI."""

    @property
    def kind(self) -> ProviderKind:
        return ProviderKind.GEMINI

    @property
    def binary(self) -> str:
        return "gemini"

    @property
    def install_hint(self) -> str:
        return "Install from: https://github.com/google-gemini/gemini-cli"

    def _build_args(self) -> list[str]:
        return build_gemini_args()


class RealCodexAssistant(AssistantExecutor):
    """Production implementation using the OpenAI Codex CLI."""

    @property
    def kind(self) -> ProviderKind:
        return ProviderKind.CODEX

    @property
    def binary(self) -> str:
        return "codex"

    @property
    def install_hint(self) -> str:
        return "Install from: https://github.com/openai/codex"

    def execute(self, prompt: str, *, timeout_seconds: float) -> ExecutionResult:
        """Run ``codex exec`` with stdin closed so it never prompts."""
        return run_provider_command(
            build_codex_exec_args(prompt=prompt),
            prompt=prompt,
            stdin_text=None,
            timeout_seconds=timeout_seconds,
        )

    def is_available(self) -> bool:
        """Check if Codex CLI is in PATH using shutil.which."""
        return shutil.which(self.binary) is not None


def create_real_assistants() -> dict[ProviderKind, AssistantExecutor]:
    """Build the production executor for every hosted provider kind."""
    executors: list[AssistantExecutor] = [
        RealClaudeAssistant(),
        RealGeminiAssistant(),
        RealCodexAssistant(),
    ]
    return {executor.kind: executor for executor in executors}
