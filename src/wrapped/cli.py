from __future__ import annotations

import dataclasses
from pathlib import Path

import typer

from .aggregate import aggregate
from .config import WrappedConfig
from .decoder import decode_file
from .event_log import close_event_log, init_event_log
from .records import RouteRef, encode_json
from .reference import TOPICS, Route, all_routes, route_by_flag, topics_for_episode
from .service import RefreshNotConfiguredError, WrappedService

app = typer.Typer(add_completion=False)


def _load_config(data_dir: Path | None) -> WrappedConfig:
    config = WrappedConfig.from_env()
    if data_dir is None:
        return config
    return dataclasses.replace(config, data_dir=data_dir)


@app.command("decode")
def cmd_decode(
    save_path: Path = typer.Argument(..., help="save file to decode"),
) -> None:
    """Print the decoded record for one save file as JSON."""

    if not save_path.is_file():
        typer.echo(f"save file not found: {save_path}", err=True)
        raise typer.Exit(code=1)
    record = decode_file(save_path)
    typer.echo(encode_json(record).decode("utf-8"))
    if not record.is_valid:
        raise typer.Exit(code=2)


@app.command("aggregate")
def cmd_aggregate(
    save_paths: list[Path] = typer.Argument(..., help="save files to aggregate"),
) -> None:
    """Decode several save files and print the corpus statistics as JSON."""

    missing = [path for path in save_paths if not path.is_file()]
    if missing:
        for path in missing:
            typer.echo(f"save file not found: {path}", err=True)
        raise typer.Exit(code=1)
    records = [decode_file(path) for path in save_paths]
    invalid = sum(1 for record in records if not record.is_valid)
    if invalid:
        typer.echo(f"skipped {invalid} invalid save(s)", err=True)
    typer.echo(encode_json(aggregate(records)).decode("utf-8"))


def _format_route(route: Route) -> str:
    ref = RouteRef.from_route(route)
    characters = ",".join(ref.characters) or "-"
    side_characters = ",".join(ref.side_characters) or "-"
    return f"{ref.flag:5d} {ref.objective} {ref.name} characters={characters} side_characters={side_characters}"


@app.command("routes")
def cmd_routes(
    flag: int | None = typer.Option(None, "--flag", help="show only the route set by this flag"),
) -> None:
    """Print the route table in selection order."""
    if flag is None:
        routes = all_routes()
    else:
        route = route_by_flag(flag)
        if route is None:
            typer.echo(f"no route for flag {flag}", err=True)
            raise typer.Exit(code=1)
        routes = [route]
    typer.echo(f"Routes ({len(routes)} entries)")
    for route in routes:
        typer.echo(_format_route(route))


@app.command("topics")
def cmd_topics(
    episode: int | None = typer.Option(None, "--episode", min=1, max=5, help="only topics from this episode (1..5)"),
) -> None:
    """Print the topic table in flag order."""
    topics = list(TOPICS) if episode is None else topics_for_episode(episode)
    typer.echo(f"Topics ({len(topics)} entries)")
    for topic in topics:
        typer.echo(f"{topic.flag:5d} ep{topic.episode} {topic.topic_type.name.title()} {topic.name}")


@app.command("serve")
def cmd_serve(
    host: str = typer.Option("127.0.0.1", "--host", help="bind address"),
    port: int = typer.Option(8000, "--port", min=1, max=65535, help="bind port"),
    data_dir: Path | None = typer.Option(None, "--data-dir", help="data directory (default: per-user data dir)"),
) -> None:
    """Serve the upload and statistics endpoints over HTTP."""

    import uvicorn

    from .web import create_app

    config = _load_config(data_dir)
    if config.log_path is not None:
        init_event_log(config.log_path, host=host, port=port)
    try:
        service = WrappedService.from_config(config)
        uvicorn.run(create_app(service, config), host=host, port=port)
    finally:
        close_event_log()


@app.command("rebuild")
def cmd_rebuild(
    data_dir: Path | None = typer.Option(None, "--data-dir", help="data directory (default: per-user data dir)"),
) -> None:
    """Re-decode every backed-up save and recompute the statistics."""

    config = _load_config(data_dir)
    service = WrappedService.from_config(config)
    try:
        rebuilt = service.rebuild()
    except RefreshNotConfiguredError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"rebuilt {rebuilt} records")


def main() -> None:
    app()


__all__ = ["app", "main"]
