"""Runtime capability probing for transport selection.

The router prefers the HTTP API path to the local model server and falls
back to the model CLI when the interpreter cannot provide both an HTTP client
and a JSON codec. Probing is injectable so tests can simulate any combination
without touching the process environment.
"""

from abc import ABC, abstractmethod


class Capabilities(ABC):
    """Abstract capability probe for dependency injection.

    Implementations must probe on every call; callers rely on the answer
    reflecting the current environment.
    """

    @abstractmethod
    def has_http_client(self) -> bool:
        """Check if an HTTP client is available for the API path.

        Returns:
            True if HTTP requests can be issued, False otherwise
        """
        ...

    @abstractmethod
    def has_json_codec(self) -> bool:
        """Check if JSON encoding/decoding is available for the API path.

        Returns:
            True if request bodies can be built and responses parsed
        """
        ...
