"""Tests for the fake gateways used throughout the suite."""

from gga.core.provider_spec import ProviderKind
from gga.core.result_types import ConnectionFailure, ExecutionOutput
from gga.gateway.assistant.fake import FakeAssistantExecutor, create_fake_assistants
from gga.gateway.capabilities.fake import FakeCapabilities
from gga.gateway.capabilities.real import RealCapabilities
from gga.gateway.ollama.fake import FakeOllamaApiExecutor, FakeOllamaCliExecutor


def test_fake_api_executor_returns_configured_result() -> None:
    failure = ConnectionFailure(message="Failed to connect to Ollama at http://x: refused")
    executor = FakeOllamaApiExecutor(result=failure)

    result = executor.call_api(model="m", prompt="p", endpoint="http://x", timeout_seconds=1)

    assert result == failure


def test_fake_api_executor_records_calls() -> None:
    executor = FakeOllamaApiExecutor()

    executor.call_api(model="a", prompt="first", endpoint="http://x", timeout_seconds=1)
    executor.call_api(model="b", prompt="second", endpoint="http://y", timeout_seconds=2)

    assert [call.prompt for call in executor.calls] == ["first", "second"]
    assert executor.calls[1].endpoint == "http://y"


def test_fake_calls_are_read_only_copies() -> None:
    executor = FakeOllamaCliExecutor()
    executor.call_cli(model="m", prompt="p", timeout_seconds=1)

    executor.calls.clear()

    assert len(executor.calls) == 1


def test_fake_cli_executor_availability() -> None:
    assert FakeOllamaCliExecutor().is_available() is True
    assert FakeOllamaCliExecutor(is_available=False).is_available() is False


def test_fake_assistant_defaults() -> None:
    executor = FakeAssistantExecutor(kind=ProviderKind.CODEX)

    assert executor.execute("p", timeout_seconds=1) == ExecutionOutput(text="")
    assert executor.binary == "codex"
    assert executor.is_available() is True


def test_create_fake_assistants_availability() -> None:
    assistants = create_fake_assistants(is_available=False)

    assert set(assistants) == {ProviderKind.CLAUDE, ProviderKind.GEMINI, ProviderKind.CODEX}
    assert not any(executor.is_available() for executor in assistants.values())


def test_fake_capabilities_counts_probes() -> None:
    capabilities = FakeCapabilities(http_client=False)

    assert capabilities.has_http_client() is False
    assert capabilities.has_json_codec() is True
    assert capabilities.probe_count == 1


def test_real_capabilities_on_a_standard_interpreter() -> None:
    capabilities = RealCapabilities()

    assert capabilities.has_http_client() is True
    assert capabilities.has_json_codec() is True
