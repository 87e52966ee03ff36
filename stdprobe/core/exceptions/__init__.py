"""Exception definitions module."""

from stdprobe.core.exceptions.errors import (
    ClangdConfigError,
    ConfigurationError,
    StdProbeError,
)

__all__ = ["StdProbeError", "ConfigurationError", "ClangdConfigError"]
