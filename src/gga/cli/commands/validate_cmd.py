import click

from gga.cli.ensure_ideal import EnsureIdeal
from gga.core.context import GgaContext
from gga.core.provider_spec import describe_provider
from gga.core.result_types import ProviderInvalid


@click.command("validate")
@click.argument("provider")
@click.pass_obj
def validate_cmd(ctx: GgaContext, provider: str) -> None:
    """Check that PROVIDER can run here without contacting it.

    Verifies the provider is supported, its CLI is on PATH and, for Ollama,
    that a model is named and OLLAMA_HOST is valid.
    """
    result = ctx.router.validate(provider)
    if isinstance(result, ProviderInvalid):
        click.echo(click.style("❌", fg="red") + f" {provider}", err=True)
        EnsureIdeal.valid(result)

    click.echo(click.style("✅", fg="green") + f" {describe_provider(provider)} is ready")
