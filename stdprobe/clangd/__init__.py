"""clangd configuration generation."""

from stdprobe.clangd.writer import (
    build_clangd_config,
    render_clangd_config,
    write_clangd_config,
)

__all__ = [
    "build_clangd_config",
    "render_clangd_config",
    "write_clangd_config",
]
