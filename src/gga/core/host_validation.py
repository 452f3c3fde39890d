"""Endpoint validation for the local model server.

The Ollama host is the only network address the core ever interpolates into
a request. It must be exactly ``scheme://host[:port][/]``; anything else,
including values that merely start with a valid endpoint, is rejected rather
than repaired.
"""

import re

DEFAULT_OLLAMA_HOST = "http://localhost:11434"
OLLAMA_HOST_ENV_VAR = "OLLAMA_HOST"

MAX_PORT = 65535
MAX_HOSTNAME_LENGTH = 253

# DNS name or IPv4 literal: dot-separated labels of 1-63 characters, no
# leading/trailing punctuation within a label
_LABEL = r"[A-Za-z0-9](?:[A-Za-z0-9_-]{0,61}[A-Za-z0-9])?"
_HOSTNAME = rf"{_LABEL}(?:\.{_LABEL})*"
_IPV6_LITERAL = r"\[[0-9A-Fa-f:.]{2,45}\]"

_ENDPOINT_PATTERN = re.compile(
    rf"(?P<scheme>https?)://(?P<host>{_HOSTNAME}|{_IPV6_LITERAL})(?::(?P<port>[0-9]{{1,5}}))?/?",
    re.ASCII,
)


def validate_host(url: str) -> bool:
    """Check that a URL is a bare http(s) endpoint.

    Matches the whole string (no trailing-newline leniency), so paths,
    queries, fragments, userinfo, whitespace, control characters and shell
    metacharacters all fail.

    Args:
        url: Candidate endpoint, typically from OLLAMA_HOST

    Returns:
        True if the URL may be used as an endpoint, False otherwise

    Example:
        >>> validate_host("http://localhost:11434")
        True
        >>> validate_host("http://localhost:11434/api?x=1")
        False
    """
    match = _ENDPOINT_PATTERN.fullmatch(url)
    if match is None:
        return False
    host = match.group("host")
    if not host.startswith("[") and len(host) > MAX_HOSTNAME_LENGTH:
        return False
    port = match.group("port")
    if port is not None and not 1 <= int(port) <= MAX_PORT:
        return False
    return True
