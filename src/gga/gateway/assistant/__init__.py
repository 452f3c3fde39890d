"""Hosted assistant CLI executors (Claude, Gemini, Codex)."""

from gga.gateway.assistant.abc import AssistantExecutor as AssistantExecutor
from gga.gateway.assistant.fake import FakeAssistantExecutor as FakeAssistantExecutor
from gga.gateway.assistant.real import create_real_assistants as create_real_assistants
