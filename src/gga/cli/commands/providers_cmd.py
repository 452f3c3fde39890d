"""List supported providers and their local availability."""

import click
from rich.console import Console
from rich.table import Table

from gga.core.context import GgaContext
from gga.core.provider_spec import (
    HOSTED_KINDS,
    ProviderKind,
    parse_provider_spec,
    resolve_provider_info,
)

_HOST_SOURCE_LABELS = {
    "env": "OLLAMA_HOST",
    "config": "config.toml",
    "default": "default",
}


def _availability(ctx: GgaContext, kind: ProviderKind) -> str:
    if kind in HOSTED_KINDS:
        executor = ctx.assistants.get(kind)
        available = executor is not None and executor.is_available()
    else:
        available = ctx.router.api_path_usable() or ctx.ollama_cli.is_available()
    return "[green]yes[/green]" if available else "[red]no[/red]"


def _binary(ctx: GgaContext, kind: ProviderKind) -> str:
    if kind in HOSTED_KINDS:
        executor = ctx.assistants.get(kind)
        return executor.binary if executor is not None else "-"
    if ctx.router.api_path_usable():
        return "HTTP API"
    return "ollama"


@click.command("providers")
@click.pass_obj
def providers_cmd(ctx: GgaContext) -> None:
    """Show supported providers, how each is reached, and whether it is available."""
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("Provider", no_wrap=True)
    table.add_column("Name", no_wrap=True)
    table.add_column("Vendor", no_wrap=True)
    table.add_column("Transport", no_wrap=True)
    table.add_column("Available", no_wrap=True)

    for kind in ProviderKind:
        spec = parse_provider_spec(kind.value)
        info = resolve_provider_info(spec)
        if info is None:
            continue
        label = "ollama:<model>" if kind is ProviderKind.OLLAMA else kind.value
        table.add_row(
            label,
            info.display_name,
            info.vendor,
            _binary(ctx, kind),
            _availability(ctx, kind),
        )

    console = Console()
    console.print(table)

    source = _HOST_SOURCE_LABELS[ctx.config.host_source]
    click.echo("")
    click.echo(f"Ollama host: {ctx.config.ollama_host} " + click.style(f"({source})", dim=True))
    if ctx.config.default_provider is not None:
        click.echo(f"Default provider: {ctx.config.default_provider}")
