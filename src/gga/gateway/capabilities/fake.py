"""Fake capability probe for testing.

FakeCapabilities returns constructor-configured answers and counts probes so
tests can assert that routing re-probes on every call.
"""

from gga.gateway.capabilities.abc import Capabilities


class FakeCapabilities(Capabilities):
    """In-memory fake implementation.

    This class has NO public setup methods. All state is provided via constructor.
    """

    def __init__(self, *, http_client: bool = True, json_codec: bool = True) -> None:
        """Create FakeCapabilities with configured answers.

        Args:
            http_client: Value returned by has_http_client()
            json_codec: Value returned by has_json_codec()
        """
        self._http_client = http_client
        self._json_codec = json_codec
        self._probe_count = 0

    @property
    def probe_count(self) -> int:
        """Number of has_http_client() calls, for test assertions."""
        return self._probe_count

    def has_http_client(self) -> bool:
        self._probe_count += 1
        return self._http_client

    def has_json_codec(self) -> bool:
        return self._json_codec
