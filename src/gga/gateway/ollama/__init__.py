"""Ollama local model server transports (HTTP API and CLI)."""

from gga.gateway.ollama.abc import OllamaApiExecutor as OllamaApiExecutor
from gga.gateway.ollama.abc import OllamaCliExecutor as OllamaCliExecutor
from gga.gateway.ollama.fake import FakeOllamaApiExecutor as FakeOllamaApiExecutor
from gga.gateway.ollama.fake import FakeOllamaCliExecutor as FakeOllamaCliExecutor
from gga.gateway.ollama.real import RealOllamaApiExecutor as RealOllamaApiExecutor
from gga.gateway.ollama.real import RealOllamaCliExecutor as RealOllamaCliExecutor
