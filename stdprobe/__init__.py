"""stdprobe - C++ language standard detection from build artifacts."""

__version__ = "0.1.0"

from stdprobe.detector import StandardDetector, detect, detect_with_evidence
from stdprobe.models import CxxStandard, DetectionResult, EvidenceSource

__all__ = [
    "__version__",
    "CxxStandard",
    "DetectionResult",
    "EvidenceSource",
    "StandardDetector",
    "detect",
    "detect_with_evidence",
]
