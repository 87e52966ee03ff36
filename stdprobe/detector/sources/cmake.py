"""CMakeLists.txt evidence source."""

import re
from pathlib import Path

from stdprobe.detector.base import BaseEvidenceSource, StandardMatch
from stdprobe.models.standard import EvidenceSource

# Tried in order; the variable assignment takes precedence over compile features
STANDARD_PATTERNS: list[re.Pattern[str]] = [
    re.compile(r"CMAKE_CXX_STANDARD\s+(\d+)"),
    re.compile(r"c\+\+_std_(\d+)"),
    re.compile(r"cxx_std_(\d+)"),
]

# Scanned left to right so a '#' inside a quoted argument or a line comment
# does not start another comment
COMMENT_OR_STRING = re.compile(
    r'(?P<string>"(?:\\.|[^"\\])*")'
    r"|(?P<bracket>#\[(?P<eq>=*)\[.*?\](?P=eq)\])"
    r"|(?P<line>#[^\n]*)",
    re.DOTALL,
)


class CMakeSource(BaseEvidenceSource):
    """Reads the standard from a CMake project file."""

    source = EvidenceSource.CMAKE
    default_file_name = "CMakeLists.txt"

    def extract(self, file_path: Path) -> StandardMatch | None:
        """Extract the standard from CMake variables or compile features.

        Args:
            file_path: Path to CMakeLists.txt.

        Returns:
            Detected standard and matched text, or None.
        """
        content = self._safe_read_file(file_path)
        if not content:
            return None

        return self._match_first(STANDARD_PATTERNS, self._remove_comments(content))

    def _remove_comments(self, content: str) -> str:
        """Remove bracket and line comments from CMake content.

        Quoted arguments are kept as they are.

        Args:
            content: File content.

        Returns:
            Content with comments removed.
        """
        return COMMENT_OR_STRING.sub(lambda m: m.group("string") or "", content)
