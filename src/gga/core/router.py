"""Provider routing: one prompt in, normalized text or a classified error out.

ProviderRouter is the caller-facing contract of the provider layer. It
validates the configured Ollama endpoint, parses the provider spec, picks a
transport and returns whatever the transport produced. It never retries and
never raises for classified failures.
"""

import logging
import os
from collections.abc import Mapping

from gga.core.config import GgaConfig, load_effective_config
from gga.core.host_validation import validate_host
from gga.core.output_normalizer import strip_ansi
from gga.core.provider_spec import (
    HOSTED_KINDS,
    SUPPORTED_PROVIDERS,
    ProviderKind,
    ProviderSpec,
    parse_provider_spec,
    resolve_provider_info,
)
from gga.core.result_types import (
    ExecutionOutput,
    ExecutionResult,
    InvalidHost,
    ProviderInvalid,
    ProviderValid,
    UnknownProvider,
    ValidationResult,
)
from gga.gateway.assistant.abc import AssistantExecutor
from gga.gateway.assistant.real import create_real_assistants
from gga.gateway.capabilities.abc import Capabilities
from gga.gateway.capabilities.real import RealCapabilities
from gga.gateway.ollama.abc import OllamaApiExecutor, OllamaCliExecutor
from gga.gateway.ollama.real import RealOllamaApiExecutor, RealOllamaCliExecutor

logger = logging.getLogger(__name__)


def invalid_host_message(endpoint: str) -> str:
    return f"Invalid OLLAMA_HOST: {endpoint!r} (expected http(s)://host[:port])"


class ProviderRouter:
    """Routes prompts to the executor that serves a provider spec.

    All collaborators are injected; see create_router() for the production
    wiring.

    Example:
        >>> router = create_router(config)
        >>> result = router.execute("ollama:llama3.2", "Review this diff...")
        >>> match result:
        ...     case ExecutionOutput(text=text):
        ...         print(text)
        ...     case _:
        ...         print(f"{result.error_type}: {result.message}")
    """

    def __init__(
        self,
        *,
        endpoint: str,
        timeout_seconds: float,
        capabilities: Capabilities,
        ollama_api: OllamaApiExecutor,
        ollama_cli: OllamaCliExecutor,
        assistants: Mapping[ProviderKind, AssistantExecutor],
    ) -> None:
        self._endpoint = endpoint
        self._timeout_seconds = timeout_seconds
        self._capabilities = capabilities
        self._ollama_api = ollama_api
        self._ollama_cli = ollama_cli
        self._assistants = dict(assistants)

    @property
    def endpoint(self) -> str:
        """The configured Ollama endpoint (not necessarily valid)."""
        return self._endpoint

    def api_path_usable(self) -> bool:
        """Probe capabilities for the HTTP path. Evaluated fresh on every call."""
        return self._capabilities.has_http_client() and self._capabilities.has_json_codec()

    def execute(self, provider_spec: str, prompt: str) -> ExecutionResult:
        """Execute a prompt against the provider named by provider_spec.

        Args:
            provider_spec: "claude", "gemini", "codex" or "ollama:<model>"
            prompt: Prompt text, treated as opaque data

        Returns:
            ExecutionOutput with ANSI-free text, or a ClassifiedError
        """
        if not validate_host(self._endpoint):
            logger.debug("Rejected endpoint %r", self._endpoint)
            return InvalidHost(message=invalid_host_message(self._endpoint))

        spec = parse_provider_spec(provider_spec)

        if spec.kind is ProviderKind.OLLAMA:
            result = self._execute_ollama(spec, prompt)
        elif spec.kind in HOSTED_KINDS:
            result = self._execute_hosted(spec, prompt)
        else:
            return UnknownProvider(message=f"Unknown provider: {provider_spec!r}")

        if isinstance(result, ExecutionOutput):
            return ExecutionOutput(text=strip_ansi(result.text))
        return result

    def _execute_ollama(self, spec: ProviderSpec, prompt: str) -> ExecutionResult:
        model = spec.model if spec.model is not None else ""
        if self.api_path_usable():
            logger.debug("Routing %s to the Ollama API at %s", spec.raw, self._endpoint)
            return self._ollama_api.call_api(
                model=model,
                prompt=prompt,
                endpoint=self._endpoint,
                timeout_seconds=self._timeout_seconds,
            )
        logger.debug("HTTP client or JSON codec unavailable; routing %s to Ollama CLI", spec.raw)
        return self._ollama_cli.call_cli(
            model=model,
            prompt=prompt,
            timeout_seconds=self._timeout_seconds,
        )

    def _execute_hosted(self, spec: ProviderSpec, prompt: str) -> ExecutionResult:
        executor = self._assistants.get(spec.kind)
        if executor is None:
            return UnknownProvider(message=f"No executor registered for provider: {spec.base}")
        if spec.model is not None:
            logger.debug("Model qualifier %r ignored for %s", spec.model, spec.base)
        logger.debug("Routing %s to the %s CLI", spec.raw, executor.binary)
        return executor.execute(prompt, timeout_seconds=self._timeout_seconds)

    def validate(self, provider_spec: str) -> ValidationResult:
        """Check that a provider spec can be executed in this environment.

        Does not contact any backend. Checks, in order: the provider is
        supported, hosted CLIs are on PATH, Ollama specs name a usable model, the
        Ollama endpoint is valid, and the Ollama CLI is present when the API
        path is not usable.
        """
        spec = parse_provider_spec(provider_spec)
        supported_hint = "Supported providers: " + ", ".join(SUPPORTED_PROVIDERS)

        if spec.kind is ProviderKind.UNKNOWN:
            return ProviderInvalid(
                message=f"Unknown provider: {provider_spec!r}", hint=supported_hint
            )

        info = resolve_provider_info(spec)
        display_name = info.display_name if info is not None else spec.base

        if spec.kind in HOSTED_KINDS:
            executor = self._assistants.get(spec.kind)
            if executor is None or not executor.is_available():
                hint = executor.install_hint if executor is not None else None
                return ProviderInvalid(message=f"{display_name} CLI not found in PATH", hint=hint)
            return ProviderValid(spec=spec)

        if spec.model is None:
            return ProviderInvalid(
                message="Ollama requires a model",
                hint="Usage: ollama:<model> (e.g. ollama:llama3.2, ollama:codellama:7b)",
            )
        if spec.model.startswith("-"):
            return ProviderInvalid(
                message=f"Invalid Ollama model name: {spec.model!r}",
                hint="Model names cannot start with '-'",
            )
        if not validate_host(self._endpoint):
            return ProviderInvalid(message=invalid_host_message(self._endpoint), hint=None)
        if not self.api_path_usable() and not self._ollama_cli.is_available():
            return ProviderInvalid(
                message="Ollama CLI not found in PATH",
                hint="Install from: https://ollama.com/download",
            )
        return ProviderValid(spec=spec)


def create_router(config: GgaConfig) -> ProviderRouter:
    """Wire a ProviderRouter with production executors."""
    return ProviderRouter(
        endpoint=config.ollama_host,
        timeout_seconds=config.timeout_seconds,
        capabilities=RealCapabilities(),
        ollama_api=RealOllamaApiExecutor(),
        ollama_cli=RealOllamaCliExecutor(),
        assistants=create_real_assistants(),
    )


def execute(
    provider_spec: str,
    prompt: str,
    *,
    environ: Mapping[str, str] | None = None,
) -> ExecutionResult:
    """Execute a prompt with production wiring and process configuration.

    Args:
        provider_spec: Provider spec string
        prompt: Prompt text
        environ: Environment mapping; defaults to os.environ
    """
    env = environ if environ is not None else os.environ
    return create_router(load_effective_config(env)).execute(provider_spec, prompt)


def validate_provider(
    provider_spec: str,
    *,
    environ: Mapping[str, str] | None = None,
) -> ValidationResult:
    """Validate a provider spec with production wiring and process configuration."""
    env = environ if environ is not None else os.environ
    return create_router(load_effective_config(env)).validate(provider_spec)
