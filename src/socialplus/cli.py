"""
SocialPlus CLI - inspect the client surface and poke a live service.

Commands:
- init: Write a socialplus.toml configuration file
- operations: List the operation catalog
- models: List model types and their required fields
- validate: Check a JSON document against a model
- build-info: Show the service build information
- topics: Show recent topics
"""

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .client import SocialPlusClient
from .config import (
    DEFAULT_API_VERSION,
    DEFAULT_BASE_URL,
    SocialPlusConfig,
    create_default_config,
    load_config,
)
from .errors import MapperError, ValidationError
from .models import MODELS, Model, get_serializer
from .operations import CATALOG
from .utils.logging import setup_logging

app = typer.Typer(
    name="socialplus",
    help="Client for the SocialPlus social graph service",
    no_args_is_help=True,
    add_completion=False,
)

console = Console()


def _load(config_path: Path) -> SocialPlusConfig:
    """Load config_path if it exists, defaults otherwise."""
    if config_path.exists():
        return load_config(config_path)
    return SocialPlusConfig()


def _configure(config_path: Path, log_level: Optional[str]) -> SocialPlusConfig:
    """Load the config and set up logging from its [logging] section."""
    config = _load(config_path)
    setup_logging(level=log_level or config.logging.level, log_file=config.logging.log_file)
    return config


def _make_client(config: SocialPlusConfig) -> SocialPlusClient:
    return SocialPlusClient.from_config(config)


def _find_model(name: str) -> type[Model]:
    """Look a model up by class name or wire name."""
    if name in MODELS:
        return MODELS[name]
    for cls in MODELS.values():
        if cls.mapper().serialized_name == name:
            return cls
    raise MapperError(f"Unknown model type: {name}")


@app.command()
def init(
    path: Path = typer.Option(Path.cwd(), "--path", "-p", help="Directory to write socialplus.toml to"),
    base_url: str = typer.Option(DEFAULT_BASE_URL, "--base-url", help="Service base URL"),
    api_version: str = typer.Option(DEFAULT_API_VERSION, "--api-version", help="API version prefix"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """
    Write a socialplus.toml configuration file.

    Example:
        socialplus init
        socialplus init --base-url http://localhost:5000 --api-version v0.7
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
        config_path = path / "socialplus.toml"

        if config_path.exists() and not force:
            console.print(
                f"[yellow]Warning:[/yellow] {config_path} already exists. Use --force to overwrite."
            )
            raise typer.Exit(1)

        create_default_config(config_path, base_url, api_version)
        # Reject a bad --base-url / --api-version now
        load_config(config_path)

        console.print(Panel.fit(
            f"[green]✓[/green] Wrote {config_path}\n\n"
            "[dim]Next steps:[/dim]\n"
            "1. Export SOCIALPLUS_APPKEY with your app key\n"
            "2. Export SOCIALPLUS_TOKEN with a session token for signed-in calls\n"
            "3. Check connectivity: socialplus build-info",
            title="Configuration Written",
            border_style="green",
        ))

    except typer.Exit:
        raise
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def operations(
    group: Optional[str] = typer.Option(None, "--group", "-g", help="Only show this operation group"),
) -> None:
    """
    List the operation catalog.

    Example:
        socialplus operations
        socialplus operations --group Topics
    """
    ops = sorted(CATALOG.values(), key=lambda op: (op.group, op.name))
    if group:
        ops = [op for op in ops if op.group.lower() == group.lower()]
        if not ops:
            console.print(f"[red]Error:[/red] Unknown operation group: {group}")
            raise typer.Exit(1)

    table = Table(title=f"Operations ({len(ops)})")
    table.add_column("Operation", style="cyan")
    table.add_column("Verb")
    table.add_column("Path")
    table.add_column("Auth")
    table.add_column("Summary", style="dim")

    for op in ops:
        table.add_row(op.qualified_name, op.method, op.path, op.auth, op.summary)

    console.print(table)


@app.command()
def models() -> None:
    """List model types and their required fields."""
    table = Table(title=f"Models ({len(MODELS)})")
    table.add_column("Model", style="cyan")
    table.add_column("Wire name")
    table.add_column("Required fields")

    for name in sorted(MODELS):
        mapper = MODELS[name].mapper()
        required = ", ".join(f.serialized_name for f in mapper.required_fields) or "-"
        table.add_row(name, mapper.serialized_name, required)

    console.print(table)


@app.command()
def validate(
    model_name: str = typer.Argument(..., help="Model class name or wire name"),
    file: Path = typer.Argument(..., help="JSON document to check"),
) -> None:
    """
    Check a JSON document against a model.

    Reports the first field that does not match, with its full path.

    Example:
        socialplus validate ActivityView activity.json
        socialplus validate "FeedResponse[TopicView]" page.json
    """
    try:
        cls = _find_model(model_name)
        data = json.loads(file.read_text(encoding="utf-8"))
        get_serializer().deserialize(data, cls)
    except ValidationError as e:
        console.print(f"[red]Invalid:[/red] {e}")
        raise typer.Exit(1)
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    console.print(f"[green]✓[/green] {file} is a valid {cls.__name__}")


@app.command("build-info")
def build_info(
    config: Path = typer.Option(Path("socialplus.toml"), "--config", "-c", help="Config file path"),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="Log level (default: [logging] level of the config)"
    ),
) -> None:
    """
    Show the build information of the service.

    Example:
        socialplus build-info
    """
    try:
        asyncio.run(_show_build_info(_configure(config, log_level)))
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


async def _show_build_info(config: SocialPlusConfig) -> None:
    async with _make_client(config) as client:
        build = await client.builds.get_builds_current()

    lines = [
        f"Service: {config.api_root}",
        f"Built: {build.date_and_time or '-'}",
        f"API version: {build.service_api_version or '-'}",
        f"Commit: {build.commit_hash or '-'}",
        f"Branch: {build.branch_name or '-'}",
        f"Hostname: {build.hostname or '-'}",
    ]
    if build.dirty_files:
        lines.append(f"Dirty files: {', '.join(build.dirty_files)}")

    console.print(Panel.fit("\n".join(lines), title="Build Info", border_style="blue"))


@app.command()
def topics(
    limit: int = typer.Option(10, "--limit", "-n", help="Number of topics to show"),
    config: Path = typer.Option(Path("socialplus.toml"), "--config", "-c", help="Config file path"),
    log_level: Optional[str] = typer.Option(
        None, "--log-level", "-l", help="Log level (default: [logging] level of the config)"
    ),
) -> None:
    """
    Show the most recent topics.

    Example:
        socialplus topics
        socialplus topics -n 25
    """
    try:
        asyncio.run(_show_topics(_configure(config, log_level), limit))
    except Exception as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


async def _show_topics(config: SocialPlusConfig, limit: int) -> None:
    async with _make_client(config) as client:
        feed = await client.topics.get_topics(limit=limit)

    if not feed.data:
        console.print("[yellow]No topics.[/yellow]")
        return

    table = Table(title="Recent Topics")
    table.add_column("Handle", style="cyan")
    table.add_column("Created")
    table.add_column("By")
    table.add_column("Likes", justify="right")
    table.add_column("Comments", justify="right")
    table.add_column("Text")

    for topic in feed.data:
        author = topic.user.user_handle if topic.user else topic.publisher_type.value
        text = topic.title or topic.text
        if len(text) > 60:
            text = text[:57] + "..."
        table.add_row(
            topic.topic_handle,
            topic.created_time.strftime("%Y-%m-%d %H:%M"),
            author,
            str(topic.total_likes),
            str(topic.total_comments),
            text,
        )

    console.print(table)


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
