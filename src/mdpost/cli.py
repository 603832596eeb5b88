"""CLI interface for mdpost."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape

from mdpost.config import (
    BlogConfig,
    apply_env_vars,
    default_config_path,
    load_config,
    save_config,
)
from mdpost.errors import MdpostError
from mdpost.git import deploy_post
from mdpost.logging_setup import configure_logging
from mdpost.models import Post
from mdpost.publisher import MarkdownPublisher
from mdpost.scanner import scan_file
from mdpost.text import slugify, to_title

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="mdpost",
    help="Turn a markdown draft into a blog post with generated front matter.",
    add_completion=False,
)

console = Console()


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        from mdpost import __version__

        console.print(f"mdpost {__version__}")
        raise typer.Exit()


def run_setup(config_path: Path) -> BlogConfig:
    """Ask for author and repository details and persist them.

    Env var overrides apply to the returned config but are not saved.
    """
    console.print(f"[yellow]No config file found at {config_path}, starting setup.[/yellow]")
    author = typer.prompt("Enter your name")
    email = typer.prompt("Enter your email")
    project_path = typer.prompt("Path to git repo for blog")
    post_subdir = typer.prompt(
        f"Subdirectory containing blog posts (inside {project_path})", default="."
    )

    config = BlogConfig(
        author=author,
        email=email,
        project_path=project_path,
        post_subdir=post_subdir,
    )
    save_config(config, config_path)
    console.print(f"[green]Saved config to {config_path}[/green]")
    return apply_env_vars(config)


def prompt_post_fields() -> tuple[str, str]:
    """Ask for the title and slug.

    Returns:
        The title-cased title and the slug. The default slug is derived
        from the raw title; only an answer of exactly ``n`` asks for one.
    """
    raw_title = typer.prompt("Enter title", default="", show_default=False)
    answer = typer.prompt("Use default slug (Y/n)", default="Y", show_default=False)
    if answer != "n":
        slug = slugify(raw_title)
    else:
        slug = typer.prompt("Enter slug").strip()
    return to_title(raw_title), slug


def _generate(source: Path, push: bool, config_path: Path) -> None:
    config = load_config(config_path)
    if config is None:
        config = run_setup(config_path)

    scan = scan_file(source)
    title, slug = prompt_post_fields()

    post = Post(
        title=title,
        author=config.author,
        slug=slug,
        timestamp=datetime.now(),
        word_count=scan.word_count,
        lines=scan.lines,
    )

    path = MarkdownPublisher().write(post, config)
    console.print(f"[green]Wrote {path}[/green] ({post.word_count} words)")

    if push:
        commit = deploy_post(post, config)
        console.print(f"[bold green]Pushed to {config.remote}:[/bold green] {commit}")


@app.command()
def main(
    file: Annotated[
        Path,
        typer.Option(
            "-f",
            "--file",
            help="Path to markdown file.",
            dir_okay=False,
        ),
    ],
    push: Annotated[
        bool,
        typer.Option(
            "-push",
            "--push",
            help="Commit the new post and push it to the configured remote.",
        ),
    ] = False,
    config_path: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            help="Config file. Defaults to $MDPOST_CONFIG or ~/.blog/.config.json.",
            dir_okay=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Enable debug logging."),
    ] = False,
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """Generate a blog post from a markdown draft.

    Counts the prose words in FILE, asks for a title and slug, writes the
    post with front matter into the blog repository and, with -push,
    commits and pushes it.
    """
    configure_logging(verbose)
    try:
        _generate(file, push, config_path or default_config_path())
    except MdpostError as exc:
        console.print(f"[red]Error:[/red] {escape(str(exc))}")
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
