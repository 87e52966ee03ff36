"""Main CLI entry point for stdprobe."""

import sys
from pathlib import Path

import click
from pydantic import ValidationError
from rich.markup import escape

from stdprobe.clangd.writer import render_clangd_config, write_clangd_config
from stdprobe.cli.display import (
    console,
    show_detection_result,
    show_error,
    show_success,
    show_written_config,
)
from stdprobe.core.config.settings import Settings, get_settings
from stdprobe.core.exceptions.errors import ClangdConfigError, ConfigurationError
from stdprobe.core.logger.logger import setup_logging
from stdprobe.detector.detector import StandardDetector
from stdprobe.detector.locate import find_project_root
from stdprobe.models.standard import CxxStandard


def _load_settings(config_path: str | None) -> Settings:
    """Load settings from an explicit YAML file or the default locations."""
    if config_path:
        return Settings.from_yaml(Path(config_path))
    return get_settings()


@click.group(invoke_without_command=True)
@click.option("--version", "-V", is_flag=True, help="Show version")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    help="YAML settings file",
)
@click.pass_context
def main(ctx: click.Context, version: bool, verbose: bool, config_path: str | None) -> None:
    """stdprobe - detect the C++ standard a project builds with.

    Looks at compile_commands.json first, then CMakeLists.txt, and falls
    back to a default standard.
    """
    if version:
        from stdprobe import __version__

        click.echo(f"stdprobe version {__version__}")
        ctx.exit()

    try:
        settings = _load_settings(config_path)
    except (ConfigurationError, ValidationError) as e:
        show_error("Configuration Error", str(e))
        sys.exit(1)

    if verbose:
        settings = settings.model_copy(
            update={"logging": settings.logging.model_copy(update={"level": "DEBUG"})}
        )
    setup_logging(settings.logging)
    ctx.obj = settings

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.argument("path", default=".", type=click.Path(exists=True))
@click.option(
    "--format", "-f", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option("--flag", "flag_only", is_flag=True, help="Print only the -std= compiler flag")
@click.pass_obj
def detect(settings: Settings, path: str, output_format: str, flag_only: bool) -> None:
    """Detect the C++ standard for PATH.

    Examples:
        stdprobe detect
        stdprobe detect src/ --format json
        stdprobe detect --flag
    """
    result = StandardDetector(settings.detector).detect_with_evidence(Path(path))

    if flag_only:
        click.echo(result.flag)
    elif output_format == "json":
        click.echo(result.model_dump_json(indent=2))
    else:
        show_detection_result(result)


@main.command()
@click.argument("path", default=".", type=click.Path(exists=True, file_okay=False))
@click.option("--force", is_flag=True, help="Overwrite an existing file")
@click.option("--at-root", is_flag=True, help="Write at the project root instead of PATH")
@click.option(
    "--std", "std_token",
    type=click.Choice([s.value for s in CxxStandard]),
    help="Use this standard instead of detecting one",
)
@click.pass_obj
def clangd(
    settings: Settings,
    path: str,
    force: bool,
    at_root: bool,
    std_token: str | None,
) -> None:
    """Create a .clangd configuration for PATH.

    Examples:
        stdprobe clangd
        stdprobe clangd --at-root --force
        stdprobe clangd --std 17
    """
    directory = Path(path)
    if at_root:
        directory = find_project_root(directory) or directory

    standard = CxxStandard(std_token) if std_token else None

    try:
        target = write_clangd_config(directory, standard, force=force, settings=settings)
    except ClangdConfigError as e:
        show_error("clangd Configuration", str(e))
        sys.exit(1)

    show_written_config(target, target.read_text(encoding="utf-8"))
    show_success("Success", f"Created {target}")


@main.command()
@click.argument("path", default=".", type=click.Path(exists=True))
def root(path: str) -> None:
    """Print the project root above PATH."""
    project_root = find_project_root(Path(path))
    if project_root is None:
        console.print(f"[yellow]No project root found above {escape(path)}[/]")
        sys.exit(1)

    click.echo(str(project_root))


@main.command()
@click.argument("std_token", metavar="STD", type=click.Choice([s.value for s in CxxStandard]))
@click.pass_obj
def preview(settings: Settings, std_token: str) -> None:
    """Print the .clangd configuration for standard STD without writing it."""
    click.echo(render_clangd_config(CxxStandard(std_token), settings.clangd), nl=False)


if __name__ == "__main__":
    main()
