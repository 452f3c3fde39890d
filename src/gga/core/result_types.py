"""Discriminated union types for provider execution.

ExecutionOutput | ClassifiedError follows the NonIdealState pattern: every
failure is a frozen dataclass carrying a user-facing message and an
``error_type`` naming its classification. Failures are returned, never raised.
"""

from dataclasses import dataclass
from typing import TypeGuard

from gga.core.provider_spec import ProviderSpec


@dataclass(frozen=True)
class ExecutionOutput:
    """Success result: normalized text produced by a backend."""

    text: str


@dataclass(frozen=True)
class InvalidHost:
    """Error: the endpoint failed host validation. Implements NonIdealState."""

    message: str

    @property
    def error_type(self) -> str:
        return "invalid_host"


@dataclass(frozen=True)
class UnknownProvider:
    """Error: the provider base is not supported. Implements NonIdealState."""

    message: str

    @property
    def error_type(self) -> str:
        return "unknown_provider"


@dataclass(frozen=True)
class ConnectionFailure:
    """Error: transport-level failure (DNS, connect, timeout). Implements NonIdealState."""

    message: str

    @property
    def error_type(self) -> str:
        return "connection_failure"


@dataclass(frozen=True)
class MalformedResponse:
    """Error: backend payload could not be parsed. Implements NonIdealState."""

    message: str

    @property
    def error_type(self) -> str:
        return "malformed_response"


@dataclass(frozen=True)
class BackendError:
    """Error: backend answered but reported a semantic problem. Implements NonIdealState."""

    message: str

    @property
    def error_type(self) -> str:
        return "backend_error"


@dataclass(frozen=True)
class SubprocessFailure:
    """Error: a provider CLI exited non-zero. Implements NonIdealState.

    Attributes:
        exit_code: Exit status of the process, propagated verbatim
        message: Stderr text when present, otherwise a generic description
    """

    exit_code: int
    message: str

    @property
    def error_type(self) -> str:
        return "subprocess_failure"


ClassifiedError = (
    InvalidHost
    | UnknownProvider
    | ConnectionFailure
    | MalformedResponse
    | BackendError
    | SubprocessFailure
)

ExecutionResult = ExecutionOutput | ClassifiedError

CLASSIFIED_ERROR_TYPES = (
    InvalidHost,
    UnknownProvider,
    ConnectionFailure,
    MalformedResponse,
    BackendError,
    SubprocessFailure,
)


def is_classified_error(result: ExecutionResult) -> TypeGuard[ClassifiedError]:
    """Return True if the result is any of the classified failure types."""
    return isinstance(result, CLASSIFIED_ERROR_TYPES)


@dataclass(frozen=True)
class ProviderValid:
    """Success result from validating a provider spec."""

    spec: ProviderSpec


@dataclass(frozen=True)
class ProviderInvalid:
    """Error result from validating a provider spec. Implements NonIdealState.

    Attributes:
        message: What is wrong (e.g., "Claude CLI not found")
        hint: Optional follow-up for the user (install URL, usage example)
    """

    message: str
    hint: str | None

    @property
    def error_type(self) -> str:
        return "invalid_provider"


ValidationResult = ProviderValid | ProviderInvalid
