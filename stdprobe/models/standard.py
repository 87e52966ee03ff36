"""C++ standard and detection result models."""

from enum import Enum

from pydantic import BaseModel, Field

# Pre-release spellings accepted by GCC and Clang
DRAFT_ALIASES: dict[str, str] = {
    "0x": "11",
    "1y": "14",
    "1z": "17",
    "2a": "20",
    "2b": "23",
    "2c": "26",
}


class CxxStandard(str, Enum):
    """Supported C++ language standard versions."""

    CXX98 = "98"
    CXX03 = "03"
    CXX11 = "11"
    CXX14 = "14"
    CXX17 = "17"
    CXX20 = "20"
    CXX23 = "23"
    CXX26 = "26"

    @property
    def dialect(self) -> str:
        """Dialect spelling, e.g. ``c++20``."""
        return f"c++{self.value}"

    @property
    def compiler_flag(self) -> str:
        """Compiler flag, e.g. ``-std=c++20``."""
        return f"-std={self.dialect}"

    @classmethod
    def parse(cls, token: str | None) -> "CxxStandard | None":
        """Normalize a version token captured from a build file.

        Accepts plain version digits ("17"), dialect spellings ("c++17")
        and draft aliases ("1z").

        Args:
            token: Raw token.

        Returns:
            Matching standard, or None if the token is not a known version.
        """
        if token is None:
            return None

        value = str(token).strip().lower()
        for prefix in ("gnu++", "c++"):
            if value.startswith(prefix):
                value = value[len(prefix):]
                break

        value = DRAFT_ALIASES.get(value, value)
        try:
            return cls(value)
        except ValueError:
            return None


class EvidenceSource(str, Enum):
    """Where a detection result came from."""

    COMPILE_COMMANDS = "compile_commands"
    CMAKE = "cmake"
    DEFAULT = "default"


class DetectionResult(BaseModel):
    """Outcome of a standard detection run."""

    standard: CxxStandard = Field(..., description="Detected standard version")
    source: EvidenceSource = Field(..., description="Evidence source that decided the result")
    working_directory: str = Field(..., description="Directory the search started from")
    evidence_file: str | None = Field(default=None, description="File the standard was read from")
    matched_text: str | None = Field(default=None, description="Text that matched a detection pattern")

    @property
    def flag(self) -> str:
        """Compiler flag for the detected standard."""
        return self.standard.compiler_flag

    @property
    def is_default(self) -> bool:
        """Whether no evidence was found."""
        return self.source == EvidenceSource.DEFAULT


# Fallback when a project carries no build evidence
DEFAULT_STANDARD = CxxStandard.CXX20
