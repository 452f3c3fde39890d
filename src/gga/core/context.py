"""Application context with dependency injection."""

import os
from collections.abc import Mapping
from dataclasses import dataclass, field

import click

from gga.core.config import ConfigError, GgaConfig, load_effective_config
from gga.core.host_validation import DEFAULT_OLLAMA_HOST
from gga.core.provider_spec import ProviderKind
from gga.core.router import ProviderRouter
from gga.gateway.assistant.abc import AssistantExecutor
from gga.gateway.assistant.real import create_real_assistants
from gga.gateway.capabilities.abc import Capabilities
from gga.gateway.capabilities.real import RealCapabilities
from gga.gateway.ollama.abc import DEFAULT_TIMEOUT_SECONDS, OllamaApiExecutor, OllamaCliExecutor
from gga.gateway.ollama.real import RealOllamaApiExecutor, RealOllamaCliExecutor


@dataclass(frozen=True)
class GgaContext:
    """Immutable context holding all dependencies for gga commands.

    Created at CLI entry point and threaded through the commands via
    click's context object. Tests build one with GgaContext.for_test().
    """

    config: GgaConfig
    capabilities: Capabilities
    ollama_api: OllamaApiExecutor
    ollama_cli: OllamaCliExecutor
    assistants: Mapping[ProviderKind, AssistantExecutor] = field(default_factory=dict)

    @property
    def router(self) -> ProviderRouter:
        """Router wired from this context's config and gateways."""
        return ProviderRouter(
            endpoint=self.config.ollama_host,
            timeout_seconds=self.config.timeout_seconds,
            capabilities=self.capabilities,
            ollama_api=self.ollama_api,
            ollama_cli=self.ollama_cli,
            assistants=self.assistants,
        )

    @staticmethod
    def for_test(
        *,
        config: GgaConfig | None = None,
        capabilities: Capabilities | None = None,
        ollama_api: OllamaApiExecutor | None = None,
        ollama_cli: OllamaCliExecutor | None = None,
        assistants: Mapping[ProviderKind, AssistantExecutor] | None = None,
    ) -> "GgaContext":
        """Create test context with fakes for any unspecified dependency.

        Args:
            config: Optional GgaConfig. If None, uses the default host and timeout.
            capabilities: Optional probe. If None, both capabilities are present.
            ollama_api: Optional API executor. If None, creates FakeOllamaApiExecutor.
            ollama_cli: Optional CLI executor. If None, creates FakeOllamaCliExecutor.
            assistants: Optional hosted executors. If None, a fake for each kind.

        Example:
            >>> api = FakeOllamaApiExecutor(result=ExecutionOutput(text="STATUS: PASSED"))
            >>> ctx = GgaContext.for_test(ollama_api=api)
            >>> runner.invoke(cli, ["run", "ollama:llama3", "--prompt", "x"], obj=ctx)
        """
        from gga.gateway.assistant.fake import create_fake_assistants
        from gga.gateway.capabilities.fake import FakeCapabilities
        from gga.gateway.ollama.fake import FakeOllamaApiExecutor, FakeOllamaCliExecutor

        return GgaContext(
            config=config
            if config is not None
            else GgaConfig(
                default_provider=None,
                ollama_host=DEFAULT_OLLAMA_HOST,
                host_source="default",
                timeout_seconds=DEFAULT_TIMEOUT_SECONDS,
            ),
            capabilities=capabilities if capabilities is not None else FakeCapabilities(),
            ollama_api=ollama_api if ollama_api is not None else FakeOllamaApiExecutor(),
            ollama_cli=ollama_cli if ollama_cli is not None else FakeOllamaCliExecutor(),
            assistants=assistants if assistants is not None else create_fake_assistants(),
        )


def create_context(environ: Mapping[str, str] | None = None) -> GgaContext:
    """Create production context with real implementations.

    Args:
        environ: Environment mapping; defaults to os.environ

    Raises:
        SystemExit: If configuration cannot be loaded (exit code 1)
    """
    env = environ if environ is not None else os.environ
    try:
        config = load_effective_config(env)
    except ConfigError as e:
        click.echo(click.style("Error: ", fg="red") + str(e), err=True)
        raise SystemExit(1) from e

    return GgaContext(
        config=config,
        capabilities=RealCapabilities(),
        ollama_api=RealOllamaApiExecutor(),
        ollama_cli=RealOllamaCliExecutor(),
        assistants=create_real_assistants(),
    )
