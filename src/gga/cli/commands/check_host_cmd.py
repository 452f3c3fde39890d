import click

from gga.cli.ensure_ideal import user_error
from gga.core.context import GgaContext
from gga.core.host_validation import validate_host
from gga.core.router import invalid_host_message


@click.command("check-host")
@click.argument("url", required=False)
@click.pass_obj
def check_host_cmd(ctx: GgaContext, url: str | None) -> None:
    """Validate an Ollama endpoint URL.

    Checks URL, or the effective OLLAMA_HOST when omitted. Exits 1 when the
    URL is not of the form http(s)://host[:port].
    """
    target = url if url is not None else ctx.config.ollama_host
    if not validate_host(target):
        user_error(invalid_host_message(target))
        raise SystemExit(1)
    click.echo(click.style("✅", fg="green") + f" {target}")
