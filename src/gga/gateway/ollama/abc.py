"""Abstract executors for the local Ollama model server.

Two interchangeable transports reach the same backend: the REST API
(``POST {endpoint}/api/generate``) and the ``ollama run`` CLI. The router
chooses between them per call based on runtime capabilities.
"""

from abc import ABC, abstractmethod

from gga.core.result_types import ExecutionResult

DEFAULT_TIMEOUT_SECONDS = 300.0


class OllamaApiExecutor(ABC):
    """Abstract HTTP transport to the Ollama generate endpoint."""

    @abstractmethod
    def call_api(
        self,
        *,
        model: str,
        prompt: str,
        endpoint: str,
        timeout_seconds: float,
    ) -> ExecutionResult:
        """Send a non-streaming generate request.

        Args:
            model: Model name, may contain a tag (e.g. "codellama:7b")
            prompt: Prompt text, sent as a JSON string value
            endpoint: Validated server address (scheme://host[:port][/])
            timeout_seconds: Per-call timeout for connect and read

        Returns:
            ExecutionOutput with the response text, or a classified error:
            InvalidHost, ConnectionFailure, MalformedResponse or BackendError
        """
        ...


class OllamaCliExecutor(ABC):
    """Abstract subprocess transport using the ``ollama`` binary."""

    @abstractmethod
    def call_cli(
        self,
        *,
        model: str,
        prompt: str,
        timeout_seconds: float,
    ) -> ExecutionResult:
        """Run ``ollama run -- <model> <prompt>`` and return normalized output.

        Args:
            model: Model name, passed as its own argument
            prompt: Prompt text, passed as its own argument
            timeout_seconds: Per-call timeout

        Returns:
            ExecutionOutput with ANSI-stripped stdout, or SubprocessFailure
        """
        ...

    @abstractmethod
    def is_available(self) -> bool:
        """Check if the ollama binary is installed and available in PATH."""
        ...
