"""Command-line entry point for tldr."""

from __future__ import annotations

import logging
import sys

import click

from .commands import summarize as summarize_cmd
from .core.config import ConfigManager, DEFAULT_CONFIG_PATH
from .core.errors import TldrError
from .core.stop_words import StopWordSet

# Setup logging early so submodules inherit sane defaults
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)


@click.group()
@click.option(
    "--config",
    default=str(DEFAULT_CONFIG_PATH),
    show_default=True,
    help="Path to config file (defaults to data_dir/config/config.yaml)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, config: str, verbose: bool) -> None:
    """tldr - extractive summaries of web articles."""
    if verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config


@cli.command("summarize")
@click.argument("urls", nargs=-1)
@click.option(
    "--file",
    "url_file",
    type=click.Path(exists=True, dir_okay=False),
    help="Read additional URLs from a file, one per line",
)
@click.option("--percent", type=click.FloatRange(0.0, 1.0), help="Fraction of sentences to keep (overrides config)")
@click.option(
    "--format",
    "fmt",
    type=click.Choice(summarize_cmd.OUTPUT_FORMATS),
    default="text",
    show_default=True,
    help="Output format",
)
@click.option("--output", "-o", type=str, help="Write summaries to this file instead of stdout")
@click.pass_context
def summarize(
    ctx: click.Context,
    urls: tuple[str, ...],
    url_file: str | None,
    percent: float | None,
    fmt: str,
    output: str | None,
) -> None:
    """Summarize one or more article URLs, in the order given."""
    all_urls = summarize_cmd.collect_urls(urls, url_file)
    if not all_urls:
        click.echo("Error: provide at least one URL or --file", err=True)
        sys.exit(1)

    try:
        queue = summarize_cmd.run(ctx.obj["config_path"], all_urls, percent_to_keep=percent)
        content = summarize_cmd.render(queue, fmt)
        written = summarize_cmd.write_output(content, output)
        if written:
            click.echo(f"✅ {len(queue)} summaries written to {written}")
        else:
            click.echo(content)
    except (TldrError, ValueError, OSError) as exc:
        click.echo(f"❌ Summarize command failed: {exc}", err=True)
        sys.exit(1)


@cli.command("status")
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show configuration and stop-word status."""
    try:
        config_manager = ConfigManager(ctx.obj["config_path"])
        click.echo(f"📄 Config file: {config_manager.config_path}")

        if config_manager.validate_config():
            click.echo("✅ Configuration is valid")
        else:
            click.echo("❌ Configuration validation failed")
            return

        click.echo(f"✂️  Sentences kept: {config_manager.get_percent_to_keep():.0%}")

        stop_words = StopWordSet(config_manager.get_stop_words_path())
        stop_words.load()
        click.echo(f"🛑 Stop words: {len(stop_words)} loaded from {stop_words.path}")

    except Exception as exc:  # pragma: no cover - click echoes the message
        click.echo(f"❌ Error checking status: {exc}", err=True)


if __name__ == "__main__":  # pragma: no cover - script entry
    cli()
