import click

from gga.core.provider_spec import describe_provider


@click.command("info")
@click.argument("provider")
def info_cmd(provider: str) -> None:
    """Print the display name of PROVIDER."""
    click.echo(describe_provider(provider))
