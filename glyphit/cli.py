#!/usr/bin/env python3
from contextlib import contextmanager
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.markup import escape

from . import __version__
from .config import DEFAULT_CONFIG_FILENAME, Config
from .core import GitWorkflow
from .errors import ConfigurationError, GlyphitError
from .observers import ConsoleLogObserver, FileLogObserver
from .repository import resolve_repository

console = Console()


@contextmanager
def reporting_errors():
    """Print glyphit errors and turn them into a non-zero exit status."""
    try:
        yield
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        raise click.Abort()
    except GlyphitError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise click.Abort()


def open_workflow(ctx: click.Context) -> GitWorkflow:
    """Resolve the repository once per invocation and wire up observers."""
    state = ctx.obj
    if "workflow" in state:
        return state["workflow"]

    repo = resolve_repository(path=state["path"])
    root = Path(repo.working_tree_dir) if repo.working_tree_dir else None
    config = Config.load(root) if root else Config()

    workflow = GitWorkflow(repo, console=console, catalog=config.catalog(root))
    workflow.add_observer(ConsoleLogObserver(console))

    log_file_path = state["log_file"] or config.get_log_file()
    if log_file_path:
        workflow.add_observer(FileLogObserver(str(log_file_path)))

    state["workflow"] = workflow
    return workflow


@click.group()
@click.version_option(__version__, prog_name="glyphit")
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path inside the git repository (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
@click.option(
    "-l",
    "--log-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Optional file to log git operations (overrides config setting)",
)
@click.pass_context
def main(ctx: click.Context, path: Path, log_file: Optional[Path]):
    """
    Emoji-powered git CLI.

    Stage files, write emoji-tagged commits interactively and push the
    current branch to origin.

    Configuration can be set in .glyphit.toml in the repository root.
    """
    ctx.ensure_object(dict)
    ctx.obj["path"] = path.absolute()
    ctx.obj["log_file"] = log_file


@main.command()
@click.argument("files", nargs=-1, required=True)
@click.pass_context
def add(ctx: click.Context, files):
    """Add one or more files to the staging area."""
    with reporting_errors():
        open_workflow(ctx).add(files)


@main.command()
@click.option(
    "--non-interactive",
    is_flag=True,
    help="Skip the prompts and commit with a placeholder message",
)
@click.pass_context
def commit(ctx: click.Context, non_interactive: bool):
    """Create a commit with an emoji-tagged message."""
    with reporting_errors():
        open_workflow(ctx).commit(interactive=not non_interactive)


@main.command("config")
@click.option(
    "--init",
    is_flag=True,
    help="Create .glyphit.toml with default values if it does not exist",
)
@click.pass_context
def config_command(ctx: click.Context, init: bool):
    """Display the configuration settings for the repository."""
    with reporting_errors():
        repo = resolve_repository(path=ctx.obj["path"])
        if repo.working_tree_dir is None:
            raise ConfigurationError("Bare repository has no working tree to hold .glyphit.toml")
        root = Path(repo.working_tree_dir)
        config_path = root / DEFAULT_CONFIG_FILENAME

        if init and not config_path.exists():
            try:
                Config().save(root)
            except OSError as e:
                raise ConfigurationError(f"Cannot write {config_path}: {e}") from e
            console.print("[yellow]Created new config file with default values[/yellow]")

        config = Config.load(root)
        source = "config" if config_path.exists() else "default"

        console.print("\n[bold]Current Configuration Settings:[/bold]")
        if config_path.exists():
            console.print(f"[dim]Config file: {escape(config_path.as_posix())}[/dim]")
        else:
            console.print("[dim]Using default values (no config file found)[/dim]")

        console.print(f"\n{'Setting':<15} {'Value':<25} {'Source':<10}")
        console.print("-" * 50)
        settings = [
            ("always_log", config.always_log),
            ("log_file", config.log_file or "None"),
            ("catalog_file", config.catalog_file or "None"),
            ("emoji_catalog", f"{len(config.catalog(root))} labels"),
        ]
        for name, value in settings:
            console.print(f"{name:<15} {escape(str(value)):<25} {source:<10}")


@main.command()
@click.pass_context
def push(ctx: click.Context):
    """Push the current branch to the origin remote."""
    with reporting_errors():
        open_workflow(ctx).push()


if __name__ == "__main__":
    main()
