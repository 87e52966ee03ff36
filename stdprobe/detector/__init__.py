"""C++ build standard detection module."""

from stdprobe.detector.base import BaseEvidenceSource
from stdprobe.detector.detector import StandardDetector, detect, detect_with_evidence
from stdprobe.detector.locate import ROOT_MARKERS, find_nearest, find_project_root
from stdprobe.detector.sources import CMakeSource, CompileCommandsSource
from stdprobe.models.standard import DEFAULT_STANDARD

__all__ = [
    # Main detector
    "StandardDetector",
    "detect",
    "detect_with_evidence",
    "DEFAULT_STANDARD",
    # Evidence sources
    "BaseEvidenceSource",
    "CMakeSource",
    "CompileCommandsSource",
    # File search
    "ROOT_MARKERS",
    "find_nearest",
    "find_project_root",
]
