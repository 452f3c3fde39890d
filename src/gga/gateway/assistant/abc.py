"""Abstract base class for hosted assistant CLIs.

Claude, Gemini and Codex are each reached through their own CLI. The router
treats them uniformly: one prompt in, normalized text or a classified error
out. Each implementation owns its CLI invocation pattern:
- Claude: ``claude --print`` with the prompt on stdin
- Gemini: ``gemini`` with the prompt on stdin
- Codex: ``codex exec -- <prompt>``
"""

from abc import ABC, abstractmethod

from gga.core.provider_spec import ProviderKind
from gga.core.result_types import ExecutionResult


class AssistantExecutor(ABC):
    """Abstract interface for executing a prompt through a hosted assistant CLI."""

    @property
    @abstractmethod
    def kind(self) -> ProviderKind:
        """Provider kind this executor serves."""
        ...

    @property
    @abstractmethod
    def binary(self) -> str:
        """Name of the CLI binary looked up on PATH."""
        ...

    @property
    @abstractmethod
    def install_hint(self) -> str:
        """Where to get the CLI, shown when it is missing."""
        ...

    @abstractmethod
    def execute(self, prompt: str, *, timeout_seconds: float) -> ExecutionResult:
        """Execute a single prompt and return the classified result.

        Args:
            prompt: The review prompt text
            timeout_seconds: Per-call timeout

        Returns:
            ExecutionOutput with ANSI-stripped output, or SubprocessFailure
        """
        ...

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the assistant CLI is installed and available in PATH."""
        ...
