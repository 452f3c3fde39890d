"""Real Ollama executors using urllib and subprocess.

The API executor speaks the documented REST contract:
request ``{"model", "prompt", "stream": false}``, response
``{"response": str}`` on success or ``{"error": str}`` on failure.
"""

import http.client
import json
import logging
import shutil
import urllib.error
import urllib.request

from gga.core.host_validation import validate_host
from gga.core.output_normalizer import strip_ansi
from gga.core.result_types import (
    BackendError,
    ConnectionFailure,
    ExecutionOutput,
    ExecutionResult,
    InvalidHost,
    MalformedResponse,
)
from gga.gateway.ollama.abc import OllamaApiExecutor, OllamaCliExecutor
from gga.subprocess_utils import run_provider_command

GENERATE_PATH = "/api/generate"
EMPTY_ERROR_MESSAGE = "Ollama reported an error without a message"

logger = logging.getLogger(__name__)


def build_generate_url(endpoint: str) -> str:
    """Join a validated endpoint and the generate path."""
    return endpoint.rstrip("/") + GENERATE_PATH


def build_generate_body(*, model: str, prompt: str) -> bytes:
    """Serialize the generate request body.

    Unicode is passed through as UTF-8 rather than escaped; quotes,
    backslashes and control characters are escaped by the JSON encoder.
    """
    payload = {"model": model, "prompt": prompt, "stream": False}
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def build_ollama_run_args(*, model: str, prompt: str) -> list[str]:
    """Build CLI arguments for ``ollama run``.

    Extracted as a module-level function for testability. Model and prompt
    are discrete argv elements after "--", so a prompt such as "--verbose"
    or a diff starting with "---" is never parsed as an option.
    """
    return ["ollama", "run", "--", model, prompt]


def parse_generate_response(body: str) -> ExecutionResult:
    """Classify a generate endpoint response body.

    Args:
        body: Raw response text

    Returns:
        ExecutionOutput with the ``response`` field, BackendError when the
        body carries an ``error`` field, MalformedResponse otherwise
    """
    # JSON parsing requires exception handling
    try:
        data = json.loads(body)
    except json.JSONDecodeError as e:
        return MalformedResponse(message=f"Invalid JSON response from Ollama: {e}")

    if not isinstance(data, dict):
        return MalformedResponse(message="Invalid JSON response from Ollama: expected an object")

    error = data.get("error")
    if error is not None:
        return BackendError(message=str(error) or EMPTY_ERROR_MESSAGE)

    response = data.get("response")
    if not isinstance(response, str):
        return MalformedResponse(
            message="Invalid JSON response from Ollama: missing 'response' field"
        )

    return ExecutionOutput(text=strip_ansi(response))


class RealOllamaApiExecutor(OllamaApiExecutor):
    """Production implementation using urllib.request."""

    def call_api(
        self,
        *,
        model: str,
        prompt: str,
        endpoint: str,
        timeout_seconds: float,
    ) -> ExecutionResult:
        """Send a generate request to the Ollama server.

        Implementation details:
        - Re-validates the endpoint; no request is built for a rejected host
        - HTTP error statuses still carry a JSON body with an ``error`` field,
          so their body is classified like a success body
        """
        if not validate_host(endpoint):
            return InvalidHost(message=f"Invalid OLLAMA_HOST: {endpoint!r}")

        url = build_generate_url(endpoint)
        request = urllib.request.Request(
            url,
            data=build_generate_body(model=model, prompt=prompt),
            headers={
                "Content-Type": "application/json",
                "Accept": "application/json",
            },
            method="POST",
        )
        logger.debug("POST %s model=%s prompt=<%d chars>", url, model, len(prompt))

        try:
            with urllib.request.urlopen(request, timeout=timeout_seconds) as response:
                body = response.read().decode("utf-8", errors="replace")
        except urllib.error.HTTPError as e:
            error_body = e.read().decode("utf-8", errors="replace") if e.fp else ""
            logger.debug("Ollama returned HTTP %d", e.code)
            parsed = parse_generate_response(error_body)
            if isinstance(parsed, BackendError):
                return parsed
            return BackendError(message=f"Ollama returned HTTP {e.code}: {e.reason}")
        except urllib.error.URLError as e:
            return ConnectionFailure(
                message=f"Failed to connect to Ollama at {endpoint}: {e.reason}"
            )
        except (OSError, http.client.HTTPException, ValueError) as e:
            # ValueError covers UnicodeError from IDNA encoding during name resolution
            return ConnectionFailure(message=f"Failed to connect to Ollama at {endpoint}: {e}")

        return parse_generate_response(body)


class RealOllamaCliExecutor(OllamaCliExecutor):
    """Production implementation using subprocess and the ollama CLI."""

    def call_cli(
        self,
        *,
        model: str,
        prompt: str,
        timeout_seconds: float,
    ) -> ExecutionResult:
        """Run the model through ``ollama run``.

        Implementation details:
        - stdin is /dev/null so the CLI never waits for interactive input
        - stdout is ANSI-stripped; the CLI colorizes and draws spinners
        - Non-zero exit codes are propagated in SubprocessFailure
        """
        return run_provider_command(
            build_ollama_run_args(model=model, prompt=prompt),
            prompt=prompt,
            stdin_text=None,
            timeout_seconds=timeout_seconds,
        )

    def is_available(self) -> bool:
        """Check if the ollama CLI is in PATH using shutil.which."""
        return shutil.which("ollama") is not None
