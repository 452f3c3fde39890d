import logging

import click

from gga.cli.commands.check_host_cmd import check_host_cmd
from gga.cli.commands.info_cmd import info_cmd
from gga.cli.commands.providers_cmd import providers_cmd
from gga.cli.commands.run_cmd import run_cmd
from gga.cli.commands.validate_cmd import validate_cmd
from gga.core.context import create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])  # terse help flags

# Commands that never read config.toml or touch a backend
CONFIG_FREE_COMMANDS = frozenset({"info"})


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gga")
@click.option("--debug", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, debug: bool) -> None:
    """Send code-review prompts to Claude, Gemini, Codex or a local Ollama model."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s - %(levelname)s - %(message)s")

    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None and ctx.invoked_subcommand not in CONFIG_FREE_COMMANDS:
        ctx.obj = create_context()


cli.add_command(run_cmd)
cli.add_command(validate_cmd)
cli.add_command(info_cmd)
cli.add_command(check_host_cmd)
cli.add_command(providers_cmd)


def main() -> None:
    """CLI entry point used by the `gga` console script."""
    cli()
