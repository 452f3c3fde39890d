"""Tests for gga providers and top-level CLI wiring."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from gga.cli.cli import cli
from gga.core.config import GgaConfig
from gga.core.context import GgaContext, create_context
from gga.gateway.assistant.fake import create_fake_assistants
from gga.gateway.capabilities.fake import FakeCapabilities


def test_providers_lists_all_hosted_and_local() -> None:
    result = CliRunner().invoke(cli, ["providers"], obj=GgaContext.for_test())

    assert result.exit_code == 0, result.output
    for name in ("Claude", "Gemini", "Codex", "Ollama", "Anthropic", "Google", "OpenAI"):
        assert name in result.output
    assert "ollama:<model>" in result.output
    assert "HTTP API" in result.output
    assert "Ollama host: http://localhost:11434 (default)" in result.output


def test_providers_reports_unavailable_clis() -> None:
    ctx = GgaContext.for_test(
        capabilities=FakeCapabilities(http_client=False),
        assistants=create_fake_assistants(is_available=False),
    )

    result = CliRunner().invoke(cli, ["providers"], obj=ctx)

    assert result.exit_code == 0, result.output
    assert "no" in result.output
    assert "HTTP API" not in result.output


def test_providers_shows_host_source_and_default() -> None:
    config = GgaConfig(
        default_provider="ollama:llama3.2",
        ollama_host="http://gpu-box:11434",
        host_source="config",
        timeout_seconds=300.0,
    )

    result = CliRunner().invoke(cli, ["providers"], obj=GgaContext.for_test(config=config))

    assert "Ollama host: http://gpu-box:11434 (config.toml)" in result.output
    assert "Default provider: ollama:llama3.2" in result.output


def test_help_flag_short_form() -> None:
    result = CliRunner().invoke(cli, ["-h"], obj=GgaContext.for_test())

    assert result.exit_code == 0
    for command in ("run", "validate", "info", "check-host", "providers"):
        assert command in result.output


def test_create_context_reads_environment(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text('[ollama]\nhost = "http://box:1"\n', encoding="utf-8")

    ctx = create_context({"GGA_CONFIG_DIR": str(tmp_path), "GGA_TIMEOUT": "5"})

    assert ctx.config.ollama_host == "http://box:1"
    assert ctx.config.host_source == "config"
    assert ctx.config.timeout_seconds == 5.0
    assert ctx.router.endpoint == "http://box:1"


def test_create_context_exits_on_bad_config(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("[ollama\n", encoding="utf-8")

    with pytest.raises(SystemExit) as exc_info:
        create_context({"GGA_CONFIG_DIR": str(tmp_path)})

    assert exc_info.value.code == 1


def test_info_works_with_malformed_config(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("[ollama\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["info", "claude"], env={"GGA_CONFIG_DIR": str(tmp_path)})

    assert result.exit_code == 0, result.output
    assert result.output == "Claude\n"


def test_config_commands_fail_on_malformed_config(tmp_path: Path) -> None:
    (tmp_path / "config.toml").write_text("[ollama\n", encoding="utf-8")

    result = CliRunner().invoke(cli, ["providers"], env={"GGA_CONFIG_DIR": str(tmp_path)})

    assert result.exit_code == 1
    assert "Invalid TOML" in result.output
