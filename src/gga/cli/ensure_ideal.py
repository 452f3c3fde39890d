"""CLI error handling for classified execution results.

EnsureIdeal narrows ExecutionResult to ExecutionOutput, exiting with a
user-friendly error and an exit code that identifies the failure class.
"""

import click

from gga.core.result_types import (
    ClassifiedError,
    ExecutionOutput,
    ExecutionResult,
    ProviderInvalid,
    SubprocessFailure,
)

EXIT_CODES: dict[str, int] = {
    "invalid_host": 2,
    "unknown_provider": 3,
    "connection_failure": 4,
    "malformed_response": 5,
    "backend_error": 6,
}


def exit_code_for(error: ClassifiedError) -> int:
    """Map a classified error to a process exit code.

    Subprocess failures propagate the provider's own exit code; a zero code
    (which would read as success) is mapped to 1.
    """
    if isinstance(error, SubprocessFailure):
        return error.exit_code if error.exit_code != 0 else 1
    return EXIT_CODES[error.error_type]


def user_error(message: str) -> None:
    click.echo(click.style("Error: ", fg="red") + message, err=True)


class EnsureIdeal:
    """Helper class for narrowing provider result unions."""

    @staticmethod
    def output(result: ExecutionResult) -> ExecutionOutput:
        """Ensure execution succeeded, otherwise exit with the mapped code.

        Args:
            result: Result of ProviderRouter.execute()

        Returns:
            The ExecutionOutput unchanged

        Raises:
            SystemExit: If result is a classified error
        """
        if isinstance(result, ExecutionOutput):
            return result
        user_error(result.message)
        raise SystemExit(exit_code_for(result))

    @staticmethod
    def valid(result: ProviderInvalid) -> None:
        """Report an invalid provider and exit with code 1."""
        user_error(result.message)
        if result.hint:
            click.echo(click.style(f"  {result.hint}", dim=True), err=True)
        raise SystemExit(1)
