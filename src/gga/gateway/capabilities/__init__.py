"""Transport capability probing."""

from gga.gateway.capabilities.abc import Capabilities as Capabilities
from gga.gateway.capabilities.fake import FakeCapabilities as FakeCapabilities
from gga.gateway.capabilities.real import RealCapabilities as RealCapabilities
