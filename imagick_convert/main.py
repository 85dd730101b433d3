"""
imagick-convert command line.

Applies a chain of operations to one image:

    imagick-convert in.jpg out.jpg --op resize:200,100 --op grayscale
"""

from pathlib import Path
from typing import Any, List, Optional

import typer

from .core import ExternalToolFailure, ResourceUnavailable
from .processing import SUPPORTED_OPERATIONS, CommandExecutor, ImagickConvert, OperationPipeline
from .services import Settings

app = typer.Typer(add_completion=False, help="Build and run ImageMagick convert commands")


def _parse_scalar(text: str) -> Any:
    for cast in (int, float):
        try:
            return cast(text)
        except ValueError:
            continue
    return text


def parse_operation(spec: str) -> tuple:
    """Split 'name:arg1,arg2' into the method name and keyword arguments."""
    name, _, raw_args = spec.partition(":")
    name = name.strip().replace("-", "_")
    if name not in SUPPORTED_OPERATIONS:
        raise typer.BadParameter(f"Unknown operation '{name}'")

    values = [_parse_scalar(v.strip()) for v in raw_args.split(",")] if raw_args else []
    names = SUPPORTED_OPERATIONS[name]
    if len(values) > len(names):
        raise typer.BadParameter(f"{name} takes at most {len(names)} argument(s)")
    return name, dict(zip(names, values))


def build_pipeline(operations: List[str]) -> OperationPipeline:
    pipeline = OperationPipeline()
    for spec in operations:
        name, arguments = parse_operation(spec)
        pipeline.add(name, **arguments)
    return pipeline


@app.command()
def convert(
    source: str = typer.Argument(..., help="Local path or URL of the source image"),
    destination: Path = typer.Argument(..., help="Output file"),
    op: List[str] = typer.Option([], "--op", help="Operation as name:arg,arg (repeatable)"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the command without running anything"),
    check: bool = typer.Option(False, "--check", help="Fail when convert exits non-zero"),
    settings_file: Optional[Path] = typer.Option(None, "--settings", help="settings.ini to use"),
) -> None:
    """Apply the given operations to SOURCE and write DESTINATION."""
    pipeline = build_pipeline(op)
    settings = Settings(settings_file)
    executor = CommandExecutor(settings.get_program(), dry_run=dry_run)

    with ImagickConvert(settings, executor) as image:
        try:
            image.load(source)
            pipeline.apply(image)
            if dry_run:
                typer.echo(image.command_line(str(destination)))
                return
            image.save(destination, check=check)
        except (ResourceUnavailable, ExternalToolFailure) as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

        typer.echo(f"Saved {destination}")


def main():
    app()


if __name__ == "__main__":
    main()
