"""Fake Ollama executors for testing.

Both fakes return a configured result and record every call, enabling
routing tests to assert which transport received a prompt.
"""

from dataclasses import dataclass

from gga.core.result_types import ExecutionOutput, ExecutionResult
from gga.gateway.ollama.abc import OllamaApiExecutor, OllamaCliExecutor


@dataclass(frozen=True)
class ApiCall:
    """Record of a call_api invocation."""

    model: str
    prompt: str
    endpoint: str
    timeout_seconds: float


@dataclass(frozen=True)
class CliCall:
    """Record of a call_cli invocation."""

    model: str
    prompt: str
    timeout_seconds: float


class FakeOllamaApiExecutor(OllamaApiExecutor):
    """In-memory fake of the HTTP transport.

    Constructor injection pattern: all behavior is configured via constructor
    parameters. No magic, no post-construction setup methods.

    Example:
        >>> executor = FakeOllamaApiExecutor(result=ExecutionOutput(text="STATUS: PASSED"))
        >>> executor.call_api(model="llama3", prompt="p", endpoint="http://x", timeout_seconds=1)
        ExecutionOutput(text='STATUS: PASSED')
        >>> executor.calls[0].endpoint
        'http://x'
    """

    def __init__(self, *, result: ExecutionResult | None = None) -> None:
        """Create FakeOllamaApiExecutor.

        Args:
            result: Result returned from every call (default: empty success)
        """
        self._result = result if result is not None else ExecutionOutput(text="")
        self._calls: list[ApiCall] = []

    @property
    def calls(self) -> list[ApiCall]:
        """Read-only access to recorded calls."""
        return list(self._calls)

    def call_api(
        self,
        *,
        model: str,
        prompt: str,
        endpoint: str,
        timeout_seconds: float,
    ) -> ExecutionResult:
        self._calls.append(
            ApiCall(model=model, prompt=prompt, endpoint=endpoint, timeout_seconds=timeout_seconds)
        )
        return self._result


class FakeOllamaCliExecutor(OllamaCliExecutor):
    """In-memory fake of the subprocess transport.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(
        self,
        *,
        result: ExecutionResult | None = None,
        is_available: bool = True,
    ) -> None:
        """Create FakeOllamaCliExecutor.

        Args:
            result: Result returned from every call (default: empty success)
            is_available: Whether is_available() returns True
        """
        self._result = result if result is not None else ExecutionOutput(text="")
        self._is_available = is_available
        self._calls: list[CliCall] = []

    @property
    def calls(self) -> list[CliCall]:
        """Read-only access to recorded calls."""
        return list(self._calls)

    def call_cli(
        self,
        *,
        model: str,
        prompt: str,
        timeout_seconds: float,
    ) -> ExecutionResult:
        self._calls.append(CliCall(model=model, prompt=prompt, timeout_seconds=timeout_seconds))
        return self._result

    def is_available(self) -> bool:
        """Return pre-configured availability."""
        return self._is_available
