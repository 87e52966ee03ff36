"""Build standard detector."""

from pathlib import Path

from pydantic import ValidationError

from stdprobe.core.config.settings import DetectorSettings, get_settings
from stdprobe.core.exceptions.errors import ConfigurationError
from stdprobe.core.logger.logger import get_logger
from stdprobe.detector.base import BaseEvidenceSource
from stdprobe.detector.sources.cmake import CMakeSource
from stdprobe.detector.sources.compile_commands import CompileCommandsSource
from stdprobe.models.standard import (
    CxxStandard,
    DetectionResult,
    EvidenceSource,
)

logger = get_logger(__name__)


def _load_detector_settings() -> DetectorSettings:
    """Load global detector settings, falling back to built-in defaults.

    A broken settings file or environment value must not stop detection,
    so defaults are built without reading either.
    """
    try:
        return get_settings().detector
    except (ConfigurationError, ValidationError) as e:
        logger.warning(f"Ignoring invalid settings, using defaults: {e}")
        return DetectorSettings.model_construct()


class StandardDetector:
    """Infers the C++ standard of a project from its build artifacts.

    Evidence sources are consulted in priority order and the first one
    that yields a standard decides the result:

    1. compile_commands.json (first record's ``-std=`` flag)
    2. CMakeLists.txt (``CMAKE_CXX_STANDARD`` or ``cxx_std_NN``)
    3. the configured default standard

    Detection never raises. A source that cannot be read or parsed
    counts as having no evidence.
    """

    def __init__(self, settings: DetectorSettings | None = None) -> None:
        """Initialize the detector with its evidence sources.

        Args:
            settings: Detector settings. Uses global settings if not provided.
        """
        self.settings = settings or _load_detector_settings()
        self.logger = logger

        # Priority order
        self.sources: list[BaseEvidenceSource] = [
            CompileCommandsSource(self.settings.compile_commands_name),
            CMakeSource(self.settings.build_description_name),
        ]

    @property
    def default_standard(self) -> CxxStandard:
        """Standard returned when no evidence is found."""
        return self.settings.default_standard

    def detect(self, working_directory: Path | str = ".") -> CxxStandard:
        """Detect the C++ standard for a working directory.

        Args:
            working_directory: Directory to search upward from.

        Returns:
            Detected standard, or the default standard.
        """
        return self.detect_with_evidence(working_directory).standard

    def detect_with_evidence(self, working_directory: Path | str = ".") -> DetectionResult:
        """Detect the C++ standard and report the evidence behind it.

        Args:
            working_directory: Directory to search upward from.

        Returns:
            DetectionResult naming the standard and where it came from.
        """
        start = Path(working_directory)

        for source in self.sources:
            try:
                result = source.probe(start)
            except Exception as e:
                self.logger.warning(f"{source.__class__.__name__} failed on {start}: {e}")
                continue

            if result is not None:
                self.logger.info(
                    f"Detected {result.standard.dialect} from {result.evidence_file}"
                )
                return result

        self.logger.info(
            f"No build evidence found above {start}, using {self.default_standard.dialect}"
        )
        return DetectionResult(
            standard=self.default_standard,
            source=EvidenceSource.DEFAULT,
            working_directory=str(start),
        )

    def get_evidence_files(self) -> list[str]:
        """Get evidence file names in priority order.

        Returns:
            List of file names searched for.
        """
        return [source.file_name for source in self.sources]


def detect(working_directory: Path | str = ".", settings: DetectorSettings | None = None) -> CxxStandard:
    """Detect the C++ standard for a working directory.

    Args:
        working_directory: Directory to search upward from.
        settings: Detector settings. Uses global settings if not provided.

    Returns:
        Detected standard, or the default standard.
    """
    return StandardDetector(settings).detect(working_directory)


def detect_with_evidence(
    working_directory: Path | str = ".", settings: DetectorSettings | None = None
) -> DetectionResult:
    """Detect the C++ standard and report the evidence behind it.

    Args:
        working_directory: Directory to search upward from.
        settings: Detector settings. Uses global settings if not provided.

    Returns:
        DetectionResult naming the standard and where it came from.
    """
    return StandardDetector(settings).detect_with_evidence(working_directory)
