"""Subprocess execution for provider CLIs.

All provider binaries are invoked through run_provider_command so that
argument vectors are never joined into a shell string and every result is
mapped onto the same classified outcomes.
"""

import logging
import subprocess

from gga.core.output_normalizer import strip_ansi
from gga.core.result_types import ExecutionOutput, ExecutionResult, SubprocessFailure

logger = logging.getLogger(__name__)

# Shell conventions for "command not found" and "timed out" (coreutils timeout)
EXIT_CODE_NOT_FOUND = 127
EXIT_CODE_TIMEOUT = 124


def describe_command(cmd: list[str], *, prompt: str) -> str:
    """Render a command for logs with the prompt replaced by its length.

    Prompts can be large and may contain source code under review, so they
    never appear in log output.
    """
    parts = [f"<prompt: {len(prompt)} chars>" if arg == prompt else arg for arg in cmd]
    return " ".join(parts)


def run_provider_command(
    cmd: list[str],
    *,
    prompt: str,
    stdin_text: str | None,
    timeout_seconds: float,
) -> ExecutionResult:
    """Run a provider CLI and classify the outcome.

    Args:
        cmd: Argument vector; element 0 is the binary looked up on PATH
        prompt: The prompt, used only to redact log output
        stdin_text: Text fed to stdin, or None to attach /dev/null
        timeout_seconds: Per-call timeout

    Returns:
        ExecutionOutput with ANSI-stripped stdout on exit 0, otherwise
        SubprocessFailure carrying the exit code
    """
    logger.debug("Running %s", describe_command(cmd, prompt=prompt))

    stdin = subprocess.DEVNULL if stdin_text is None else None
    try:
        result = subprocess.run(
            cmd,
            input=stdin_text,
            stdin=stdin,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            timeout=timeout_seconds,
            check=False,
        )
    except FileNotFoundError:
        return SubprocessFailure(
            exit_code=EXIT_CODE_NOT_FOUND,
            message=f"{cmd[0]} not found in PATH",
        )
    except subprocess.TimeoutExpired:
        return SubprocessFailure(
            exit_code=EXIT_CODE_TIMEOUT,
            message=f"{cmd[0]} timed out after {timeout_seconds:g} seconds",
        )

    logger.debug("%s exited with %d", cmd[0], result.returncode)

    if result.returncode != 0:
        stderr = strip_ansi(result.stderr).strip() if result.stderr else ""
        return SubprocessFailure(
            exit_code=result.returncode,
            message=stderr if stderr else f"Exit code {result.returncode}",
        )

    return ExecutionOutput(text=strip_ansi(result.stdout))
