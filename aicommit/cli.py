#!/usr/bin/env python3
import asyncio
from pathlib import Path
from typing import Optional

import click
import pyperclip
from rich.console import Console

from . import __version__
from .commit_message import validate_commit_message
from .config import Config, default_config_path
from .models import CommitOptions, CommitStyle
from .setup_wizard import run_setup
from .workflow import CommitWorkflow

console = Console()


def run_async(coro):
    """Run an async coroutine from a synchronous click command."""
    return asyncio.run(coro)


class AliasedGroup(click.Group):
    """Group that also accepts short aliases for its commands."""

    aliases = {"c": "commit"}

    def get_command(self, ctx, cmd_name):
        return super().get_command(ctx, self.aliases.get(cmd_name, cmd_name))

    def resolve_command(self, ctx, args):
        _, cmd, args = super().resolve_command(ctx, args)
        return cmd.name if cmd else None, cmd, args


@click.group(cls=AliasedGroup, invoke_without_command=True)
@click.version_option(__version__, prog_name="ai-commit")
@click.pass_context
def main(ctx: click.Context):
    """
    Generate commit messages for staged changes with an AI model.

    Running without a command is the same as `ai-commit commit`.
    Settings live in ~/.ai-commit.json; run `ai-commit setup` to create them.
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(commit)


@main.command()
@click.option("-m", "--message", help="Use this commit message instead of generating one")
@click.option("--no-confirm", is_flag=True, help="Commit without asking for confirmation")
@click.option("--no-verify", is_flag=True, help="Skip pre-commit hooks when creating commits")
@click.option(
    "-p",
    "--path",
    default=".",
    help="Path to git repository (defaults to current directory)",
    type=click.Path(exists=True, file_okay=False, dir_okay=True, path_type=Path),
)
def commit(message: Optional[str], no_confirm: bool, no_verify: bool, path: Path):
    """Generate a message for the staged changes and commit them."""
    try:
        config = Config.load()
        if config is None:
            console.print("[yellow]No configuration found. Let's set things up first.[/yellow]")
            config = run_setup(console)

        options = CommitOptions(message=message, confirm=not no_confirm, no_verify=no_verify)
        workflow = CommitWorkflow(path.absolute(), console)
        result = run_async(workflow.execute(options, config))
    except KeyboardInterrupt:
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        return
    except Exception as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        raise click.Abort()

    if result.error:
        console.print(f"[red]Error: {result.error}[/red]")
        raise click.Abort()


@main.command()
def setup():
    """Configure AI commit settings."""
    try:
        run_setup(console)
        console.print("[green]Configuration saved successfully![/green]")
    except (KeyboardInterrupt, click.Abort):
        console.print("\n[yellow]Setup cancelled[/yellow]")
    except Exception as e:
        console.print(f"[red]Error in setup: {str(e)}[/red]")
        raise click.Abort()


@main.command(name="config")
@click.option("--list", "list_settings", is_flag=True, help="Display current configuration settings")
@click.option("--path", "show_path", is_flag=True, help="Display the config file location and copy it to clipboard")
def config_command(list_settings: bool, show_path: bool):
    """Show the configuration file or its location."""
    config_path = default_config_path()

    if show_path:
        config_path_str = str(config_path)
        console.print(f"[green]Config file location:[/green] {config_path_str}")
        try:
            pyperclip.copy(config_path_str)
            console.print("[green]Path copied to clipboard![/green]")
        except pyperclip.PyperclipException:
            console.print("[yellow]Could not copy path to clipboard[/yellow]")
        if not list_settings:
            return

    try:
        config = Config.load()
    except Exception as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        raise click.Abort()

    console.print("\n[bold]Current Configuration Settings:[/bold]")
    if config is None:
        console.print("[dim]Using default values (no config file found)[/dim]")
        config = Config()
    else:
        console.print(f"[dim]Config file: {config_path}[/dim]")

    console.print(f"\n{'Setting':<20} {'Value':<30}")
    console.print("-" * 50)

    def print_setting(name: str, value):
        console.print(f"{name:<20} {str(value):<30}", markup=False)

    print_setting("commitStyle", config.commit_style)
    print_setting("aiProvider", config.ai_provider)
    print_setting("model", config.model)
    print_setting("apiKey", _mask_secret(config.api_key))
    print_setting("apiUrl", config.api_url or "None")
    print_setting("maxTokens", config.max_tokens)
    print_setting("includeContext", config.include_context)
    print_setting("autoCommit", config.auto_commit)
    print_setting("logFile", config.log_file or "None")

    console.print("\nTo modify these settings, run `ai-commit setup` or edit the config file")


def _mask_secret(value: Optional[str]) -> str:
    if not value:
        return "None"
    if len(value) <= 8:
        return "*" * len(value)
    return f"{value[:4]}...{value[-4:]}"


def _read_message_file(path: Path) -> str:
    """Read a commit message file, dropping git's comment lines."""
    lines = path.read_text(encoding="utf-8").splitlines()
    return "\n".join(line for line in lines if not line.startswith("#")).strip()


@main.command()
@click.argument("message", required=False)
@click.option(
    "-f",
    "--file",
    "message_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="Read the message from a file (e.g. .git/COMMIT_EDITMSG)",
)
@click.option(
    "-s",
    "--style",
    type=click.Choice([style.value for style in CommitStyle], case_sensitive=False),
    help="Commit style to check against (overrides config setting)",
)
@click.pass_context
def check(ctx: click.Context, message: Optional[str], message_file: Optional[Path], style: Optional[str]):
    """Validate an existing commit message."""
    try:
        if message_file is not None:
            message = _read_message_file(message_file)
        if message is None:
            raise click.UsageError("Provide a MESSAGE or --file")

        if style is None:
            config = Config.load() or Config()
            style = config.commit_style

        result = validate_commit_message(message, style.lower())
    except click.UsageError:
        raise
    except Exception as e:
        console.print(f"[red]Error: {str(e)}[/red]")
        raise click.Abort()

    if result.valid:
        console.print("[green]Commit message is valid[/green]")
        return

    console.print("[red]Commit message validation failed:[/red]")
    for error in result.errors:
        console.print(f"[red]  • {error}[/red]")
    ctx.exit(1)


if __name__ == "__main__":
    main()
