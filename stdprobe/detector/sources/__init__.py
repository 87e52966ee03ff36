"""Evidence sources package."""

from stdprobe.detector.sources.cmake import CMakeSource
from stdprobe.detector.sources.compile_commands import CompileCommandsSource

__all__ = [
    "CMakeSource",
    "CompileCommandsSource",
]
