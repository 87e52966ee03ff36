"""clangd configuration file generation."""

from pathlib import Path
from typing import Any

import yaml

from stdprobe.core.config.settings import ClangdSettings, Settings, get_settings
from stdprobe.core.exceptions.errors import ClangdConfigError
from stdprobe.core.logger.logger import get_logger
from stdprobe.detector.detector import detect
from stdprobe.models.standard import CxxStandard

logger = get_logger(__name__)


def build_clangd_config(
    standard: CxxStandard,
    settings: ClangdSettings | None = None,
) -> dict[str, Any]:
    """Build the clangd configuration mapping for a standard.

    Args:
        standard: C++ standard passed to clangd via ``-std=``.
        settings: clangd settings. Uses global settings if not provided.

    Returns:
        Configuration mapping in clangd's key layout.
    """
    settings = settings or get_settings().clangd
    return {
        "CompileFlags": {
            "Add": [standard.compiler_flag, *settings.extra_flags],
            "CompilationDatabase": settings.compilation_database,
        },
        "Diagnostics": {
            "UnusedIncludes": settings.unused_includes,
            "MissingIncludes": settings.missing_includes,
        },
    }


def render_clangd_config(
    standard: CxxStandard,
    settings: ClangdSettings | None = None,
) -> str:
    """Render the clangd configuration as YAML text."""
    return yaml.safe_dump(
        build_clangd_config(standard, settings),
        sort_keys=False,
        default_flow_style=False,
    )


def write_clangd_config(
    directory: Path | str,
    standard: CxxStandard | None = None,
    *,
    force: bool = False,
    settings: Settings | None = None,
) -> Path:
    """Write a clangd configuration file into a directory.

    Args:
        directory: Directory that receives the file.
        standard: Standard to configure. Detected from ``directory`` if omitted.
        force: Overwrite an existing file.
        settings: Application settings. Uses global settings if not provided.

    Returns:
        Path of the written file.

    Raises:
        ClangdConfigError: If the file exists and ``force`` is false, or
            the file cannot be written.
    """
    settings = settings or get_settings()
    directory = Path(directory)
    target = directory / settings.clangd.file_name

    if target.exists() and not force:
        raise ClangdConfigError(
            f"{target} already exists (use force to overwrite)",
            path=str(target),
        )

    if standard is None:
        standard = detect(directory, settings.detector)

    content = render_clangd_config(standard, settings.clangd)
    try:
        target.write_text(content, encoding="utf-8")
    except OSError as e:
        raise ClangdConfigError(
            f"Failed to write {target}",
            path=str(target),
            details={"error": str(e)},
        ) from e

    logger.info(f"Created {target} with {standard.dialect}")
    return target
