"""Real capability probe using importlib module lookup."""

import importlib.util

from gga.gateway.capabilities.abc import Capabilities

HTTP_CLIENT_MODULES = ("http.client", "urllib.request")
JSON_CODEC_MODULES = ("json",)


def _module_available(name: str) -> bool:
    # find_spec imports the parent package of a dotted name
    try:
        return importlib.util.find_spec(name) is not None
    except ModuleNotFoundError:
        return False


def _modules_available(names: tuple[str, ...]) -> bool:
    return all(_module_available(name) for name in names)


class RealCapabilities(Capabilities):
    """Production implementation probing the running interpreter.

    Trimmed or embedded Python distributions can ship without parts of the
    standard library; the probe looks the modules up fresh on each call.
    """

    def has_http_client(self) -> bool:
        """Check that the HTTP client modules can be imported."""
        return _modules_available(HTTP_CLIENT_MODULES)

    def has_json_codec(self) -> bool:
        """Check that the json module can be imported."""
        return _modules_available(JSON_CODEC_MODULES)
