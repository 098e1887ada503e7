"""Command line interface."""

import structlog
import typer

from pathtext.application.services.classification import root
from pathtext.application.services.composition import compose_file_path, join_path
from pathtext.application.services.decomposition import shorten_path
from pathtext.application.services.suffixes import has_extension, rename_file, set_suffix
from pathtext.application.use_cases.describe_path import run as describe_path
from pathtext.application.use_cases.relativize_paths import run as relativize_paths
from pathtext.infrastructure.config.settings import Settings
from pathtext.infrastructure.observability.logging import configure_logging

logger = structlog.get_logger()

app = typer.Typer(add_completion=False, help="Decompose and recompose path strings.")


@app.callback()
def configure() -> None:
    """Path string toolkit. Never touches the filesystem."""
    configure_logging(Settings())


@app.command()
def describe(paths: list[str] = typer.Argument(..., help="Paths to describe")):
    """Print a JSON description of each path, one per line."""
    for path in paths:
        typer.echo(describe_path(path).model_dump_json(by_alias=True))


@app.command()
def join(fragments: list[str] = typer.Argument(..., help="Path fragments, joined left to right")):
    """Join path fragments without duplicating separators."""
    result = fragments[0]
    for fragment in fragments[1:]:
        result = join_path(result, fragment)
    typer.echo(result)


@app.command()
def relative(
    root_folder: str = typer.Argument(..., help="Root folder"),
    paths: list[str] = typer.Argument(..., help="Paths inside the root folder"),
):
    """Print each path relative to the root folder."""
    result = relativize_paths(root_folder, paths)
    for path in paths:
        if path in result.relative:
            typer.echo(result.relative[path])

    if result.outside:
        typer.echo(f"not inside {root_folder}: {', '.join(result.outside)}", err=True)
        raise typer.Exit(code=1)


@app.command()
def shorten(paths: list[str] = typer.Argument(..., help="Paths to shorten")):
    """Replace intermediate folders with '..'."""
    for path in paths:
        typer.echo(shorten_path(path))


@app.command("set-suffix")
def set_suffix_cmd(
    path: str = typer.Argument(..., help="File name or path"),
    suffix: str = typer.Argument(..., help="New suffix"),
):
    """Set or replace the file suffix."""
    typer.echo(set_suffix(path, suffix))


@app.command()
def rename(
    path: str = typer.Argument(..., help="File name or path"),
    new_name: str = typer.Argument(..., help="New stem"),
):
    """Rename a file, keeping its folder and extension."""
    typer.echo(rename_file(path, new_name))


@app.command()
def compose(
    parent: str = typer.Argument(..., help="Parent folder, may be empty"),
    base: str = typer.Argument(..., help="Base name"),
    ext: str = typer.Argument("", help="Extension"),
):
    """Build parent/base.ext."""
    typer.echo(compose_file_path(parent, base, ext))


@app.command("has-ext")
def has_ext(
    path: str = typer.Argument(..., help="File name or path"),
    extensions: list[str] = typer.Argument(..., help="Candidate extensions"),
):
    """Exit 0 if the path has any of the extensions, 1 otherwise."""
    matched = has_extension(path, extensions)
    typer.echo("true" if matched else "false")
    if not matched:
        raise typer.Exit(code=1)


@app.command("root")
def root_cmd(path: str = typer.Argument(..., help="Path")):
    """Print the root of an absolute path."""
    path_root = root(path)
    if not path_root:
        logger.info("path_is_relative", path=path)
        typer.echo(f"relative path has no root: {path}", err=True)
        raise typer.Exit(code=1)
    typer.echo(path_root)


def main() -> None:
    """Entrypoint."""
    app()


if __name__ == "__main__":
    main()
