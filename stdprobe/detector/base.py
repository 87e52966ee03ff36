"""Base class for build standard evidence sources."""

import re
from abc import ABC, abstractmethod
from collections.abc import Sequence
from pathlib import Path

from stdprobe.core.logger.logger import get_logger
from stdprobe.detector.locate import find_nearest
from stdprobe.models.standard import CxxStandard, DetectionResult, EvidenceSource

# A standard read from a file, with the text that matched
StandardMatch = tuple[CxxStandard, str]


class BaseEvidenceSource(ABC):
    """Base class for all evidence sources.

    Subclasses name the file they read and implement ``extract`` to pull
    a standard out of it. Locating the file and packaging the result are
    shared here.
    """

    # Source reported in detection results
    source: EvidenceSource = EvidenceSource.DEFAULT
    # File this source reads by default
    default_file_name: str = ""

    def __init__(self, file_name: str | None = None) -> None:
        """Initialize the evidence source.

        Args:
            file_name: Override for the evidence file name.
        """
        self.file_name = file_name or self.default_file_name
        self.logger = get_logger(f"detector.{self.__class__.__name__}")

    def locate(self, start: Path) -> Path | None:
        """Find the nearest evidence file at or above ``start``."""
        return find_nearest(self.file_name, start)

    @abstractmethod
    def extract(self, file_path: Path) -> StandardMatch | None:
        """Read a standard from an evidence file.

        Args:
            file_path: Path to the evidence file.

        Returns:
            Detected standard and the matched text, or None if the file
            carries no usable evidence.
        """
        pass

    def probe(self, start: Path) -> DetectionResult | None:
        """Locate the evidence file and extract a standard from it.

        Args:
            start: Directory the search starts from.

        Returns:
            DetectionResult, or None if this source has no evidence.
        """
        file_path = self.locate(start)
        if file_path is None:
            self.logger.debug(f"No {self.file_name} found above {start}")
            return None

        self.logger.debug(f"Found {file_path}")
        match = self.extract(file_path)
        if match is None:
            self.logger.debug(f"No standard found in {file_path}")
            return None

        standard, matched_text = match
        self.logger.debug(f"{file_path}: '{matched_text}' -> {standard.dialect}")
        return DetectionResult(
            standard=standard,
            source=self.source,
            working_directory=str(start),
            evidence_file=str(file_path),
            matched_text=matched_text,
        )

    def _safe_read_file(self, file_path: Path) -> str | None:
        """Safely read file contents.

        Args:
            file_path: Path to the file.

        Returns:
            File contents or None on error.
        """
        try:
            return file_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            self.logger.warning(f"Failed to read {file_path}: {e}")
            return None

    def _match_first(self, patterns: Sequence[re.Pattern[str]], content: str) -> StandardMatch | None:
        """Try patterns in order and return the first known standard.

        Each pattern's first group captures the version token. A token that
        is not a known standard does not count as a match.
        """
        for pattern in patterns:
            found = pattern.search(content)
            if not found:
                continue

            standard = CxxStandard.parse(found.group(1))
            if standard is None:
                self.logger.debug(
                    f"Ignoring unknown standard '{found.group(1)}' in '{found.group(0)}'"
                )
                continue

            return standard, found.group(0)

        return None
