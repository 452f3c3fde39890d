"""Fake implementation of AssistantExecutor for testing."""

from dataclasses import dataclass

from gga.core.provider_spec import ProviderKind
from gga.core.result_types import ExecutionOutput, ExecutionResult
from gga.gateway.assistant.abc import AssistantExecutor


@dataclass(frozen=True)
class AssistantCall:
    """Record of an assistant execution call."""

    prompt: str
    timeout_seconds: float


class FakeAssistantExecutor(AssistantExecutor):
    """In-memory fake implementation of AssistantExecutor for testing.

    Constructor injection pattern: all behavior is configured via constructor
    parameters. No magic, no post-construction setup methods.

    Example:
        >>> executor = FakeAssistantExecutor(kind=ProviderKind.CLAUDE)
        >>> executor.execute("Review this", timeout_seconds=30)
        ExecutionOutput(text='')
        >>> executor.calls[0].prompt
        'Review this'
    """

    def __init__(
        self,
        *,
        kind: ProviderKind,
        result: ExecutionResult | None = None,
        is_available: bool = True,
    ) -> None:
        """Create FakeAssistantExecutor with pre-configured behavior.

        Args:
            kind: Provider kind reported by this executor
            result: Result returned from execute (default: empty success)
            is_available: Whether is_available() returns True (default: True)
        """
        self._kind = kind
        self._result = result if result is not None else ExecutionOutput(text="")
        self._is_available = is_available
        self._calls: list[AssistantCall] = []

    @property
    def calls(self) -> list[AssistantCall]:
        """Read-only access to recorded calls."""
        return list(self._calls)

    @property
    def kind(self) -> ProviderKind:
        return self._kind

    @property
    def binary(self) -> str:
        return self._kind.value

    @property
    def install_hint(self) -> str:
        return f"Install the {self._kind.value} CLI"

    def execute(self, prompt: str, *, timeout_seconds: float) -> ExecutionResult:
        """Record the call and return the configured result."""
        self._calls.append(AssistantCall(prompt=prompt, timeout_seconds=timeout_seconds))
        return self._result

    def is_available(self) -> bool:
        """Return pre-configured availability."""
        return self._is_available


def create_fake_assistants(
    *, is_available: bool = True
) -> dict[ProviderKind, FakeAssistantExecutor]:
    """Build a fake executor for every hosted provider kind."""
    kinds = (ProviderKind.CLAUDE, ProviderKind.GEMINI, ProviderKind.CODEX)
    return {kind: FakeAssistantExecutor(kind=kind, is_available=is_available) for kind in kinds}
