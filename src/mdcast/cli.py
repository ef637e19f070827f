"""CLI entry point for mdcast."""

import logging
import sys
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from mdcast.config.logging import LOGGER_NAME, setup_logging
from mdcast.config.manager import ConfigManager
from mdcast.config.schema import BuildSettings
from mdcast.pipeline import BuildResult, PipelineOrchestrator
from mdcast.utils.errors import ConfigError, DescriptorError, MdcastError

app = typer.Typer(
    name="mdcast",
    help="Build podcast RSS feeds from markdown episode directories",
    no_args_is_help=True,
)
console = Console()


@app.callback()
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose (DEBUG) logging"
    ),
    log_file: Path | None = typer.Option(
        None, "--log-file", help="Write logs to file"
    ),
) -> None:
    """mdcast - build podcast feeds from markdown."""
    # Initialize logging before any command runs
    setup_logging(verbose=verbose, log_file=log_file)
    ctx.obj = {"verbose": verbose}


@app.command("version")
def show_version() -> None:
    """Show version information."""
    from mdcast import __version__

    console.print(f"[bold cyan]mdcast[/bold cyan] v{__version__}")


def _load_settings(ctx: typer.Context, root: Path, config: Path | None, **overrides) -> BuildSettings:
    settings = ConfigManager(root, config_file=config).load_settings(**overrides)

    if not (ctx.obj or {}).get("verbose"):
        logging.getLogger(LOGGER_NAME).setLevel(settings.log_level)
    return settings


@app.command("build")
def build_feed(
    ctx: typer.Context,
    root: Path = typer.Argument(
        Path("."), help="Directory containing podcast.md", file_okay=False
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Config file (default: <root>/mdcast.yaml)"
    ),
    output: str | None = typer.Option(
        None, "--output", "-o", help="Feed file name inside the episodes directory"
    ),
    sort: bool | None = typer.Option(
        None,
        "--sort/--no-sort",
        help="Sort episodes by directory name (--no-sort keeps listing order)",
    ),
    strict_audio: bool = typer.Option(
        False, "--strict-audio", help="Skip episodes without a readable audio file"
    ),
    missing_audio_date: str | None = typer.Option(
        None,
        "--missing-audio-date",
        help="Publication date when audio is missing: descriptor, now or skip",
    ),
) -> None:
    """Build the feed and write it into the episodes directory.

    Examples:
        mdcast build

        mdcast build ./my-show --no-sort --missing-audio-date now
    """
    try:
        settings = _load_settings(
            ctx,
            root,
            config,
            feed_file=output,
            sort_episodes=sort,
            treat_missing_audio_as_empty=False if strict_audio else None,
            missing_audio_date=missing_audio_date,
        )

        result = PipelineOrchestrator(settings).run(root)

        console.print(
            f"[green]✓[/green] Feed generated with "
            f"[bold]{result.episode_count}[/bold] episode(s)"
        )
        console.print(f"[dim]  {escape(str(result.feed_path))}[/dim]", soft_wrap=True)
        _print_skipped(result)

    except (ConfigError, DescriptorError) as e:
        console.print(f"[red]✗[/red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)
    except MdcastError as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}", soft_wrap=True)
        sys.exit(1)


@app.command("episodes")
def list_episodes(
    ctx: typer.Context,
    root: Path = typer.Argument(
        Path("."), help="Directory containing podcast.md", file_okay=False
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Config file (default: <root>/mdcast.yaml)"
    ),
) -> None:
    """List the episodes that would go into the feed.

    Nothing is written.
    """
    try:
        settings = _load_settings(ctx, root, config)
        result = PipelineOrchestrator(settings).preview(root)

        if not result.document.items:
            console.print("[yellow]No episodes found.[/yellow]")
        else:
            table = Table(title=f"[bold]{escape(result.show.title)}[/bold]")
            table.add_column("Directory", style="cyan", no_wrap=True)
            table.add_column("Title", style="white")
            table.add_column("Author", style="green")
            table.add_column("Published", style="magenta")
            table.add_column("GUID", style="dim")

            for item in result.document.items:
                table.add_row(
                    item.directory,
                    escape(item.title),
                    escape(item.author) or "—",
                    item.published.strftime("%Y-%m-%d %H:%M"),
                    item.content_id,
                )

            console.print(table)
            console.print(f"\n[dim]Total: {result.episode_count} episode(s)[/dim]")

        _print_skipped(result)

    except MdcastError as e:
        console.print(f"[red]✗[/red] Error: {escape(str(e))}", soft_wrap=True)
        sys.exit(1)


@app.command("config")
def show_config(
    root: Path = typer.Argument(
        Path("."), help="Directory containing mdcast.yaml", file_okay=False
    ),
    config: Path | None = typer.Option(
        None, "--config", "-c", help="Config file (default: <root>/mdcast.yaml)"
    ),
    write: bool = typer.Option(
        False, "--write", "-w", help="Write the effective settings to the config file"
    ),
) -> None:
    """Display the effective build settings.

    Examples:
        mdcast config

        mdcast config ./my-show --write  # Create mdcast.yaml with every setting
    """
    try:
        manager = ConfigManager(root, config_file=config)
        settings = manager.load_settings()

        if write:
            manager.save_settings(settings)
            console.print(
                f"[green]✓[/green] Settings written to {escape(str(manager.config_file))}",
                soft_wrap=True,
            )

        console.print("\n[bold]mdcast settings[/bold]\n")

        table = Table(show_header=False, box=None)
        table.add_column("Key", style="cyan")
        table.add_column("Value", style="white")

        source = str(manager.config_file) if manager.config_file.exists() else "(defaults)"
        table.add_row("Config file", source)
        table.add_row("", "")
        for key, value in settings.model_dump().items():
            table.add_row(key, str(value))

        console.print(table)

    except ConfigError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)


def _print_skipped(result: BuildResult) -> None:
    if not result.skipped:
        return

    console.print(f"\n[yellow]Skipped {len(result.skipped)} episode(s):[/yellow]")
    for skip in result.skipped:
        console.print(f"  • [bold]{skip.directory}[/bold]: {escape(skip.reason)}", soft_wrap=True)


if __name__ == "__main__":
    app()
