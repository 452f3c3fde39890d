"""Run command: send one prompt to a provider and print the response."""

from pathlib import Path

import click

from gga.cli.ensure_ideal import EnsureIdeal, user_error
from gga.core.context import GgaContext


def _read_prompt(prompt: str | None, prompt_file: Path | None) -> str:
    if prompt is not None and prompt_file is not None:
        user_error("--prompt and --prompt-file are mutually exclusive")
        raise SystemExit(1)
    if prompt is not None:
        return prompt
    if prompt_file is not None:
        try:
            return prompt_file.read_text(encoding="utf-8")
        except (UnicodeDecodeError, OSError) as e:
            user_error(f"Cannot read prompt file {prompt_file}: {e}")
            raise SystemExit(1) from e
    return click.get_text_stream("stdin").read()


@click.command("run")
@click.argument("provider", required=False)
@click.option("--prompt", "prompt", default=None, help="Prompt text")
@click.option(
    "--prompt-file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Read the prompt from a file",
)
@click.pass_obj
def run_cmd(
    ctx: GgaContext,
    provider: str | None,
    prompt: str | None,
    prompt_file: Path | None,
) -> None:
    """Send a prompt to PROVIDER and print the normalized response.

    PROVIDER defaults to [provider].default from config.toml. The prompt is
    read from --prompt, --prompt-file or stdin, in that order.

    Exit codes: 2 invalid host, 3 unknown provider, 4 connection failure,
    5 malformed response, 6 backend error. A failing provider CLI
    propagates its own exit code.

    Examples:

    \b
      # Review a diff with a local model
      git diff | gga run ollama:llama3.2

    \b
      # Use the configured default provider
      gga run --prompt-file review.md
    """
    provider_spec = provider if provider is not None else ctx.config.default_provider
    if provider_spec is None:
        user_error("No provider given and no [provider].default in config.toml")
        raise SystemExit(1)

    text = _read_prompt(prompt, prompt_file)
    output = EnsureIdeal.output(ctx.router.execute(provider_spec, text))

    click.echo(output.text, nl=not output.text.endswith("\n"))
