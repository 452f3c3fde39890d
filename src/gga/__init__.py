"""gga: route code-review prompts to interchangeable AI providers.

The provider layer is consumed through four functions:

- execute(provider_spec, prompt) -> ExecutionOutput | ClassifiedError
- validate_provider(provider_spec) -> ProviderValid | ProviderInvalid
- validate_host(url) -> bool
- describe_provider(provider_spec) -> str

See `gga --help` for the command-line interface.
"""

from gga.core.host_validation import validate_host as validate_host
from gga.core.provider_spec import describe_provider as describe_provider
from gga.core.router import execute as execute
from gga.core.router import validate_provider as validate_provider
