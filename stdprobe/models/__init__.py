"""Data models module."""

from stdprobe.models.standard import (
    DEFAULT_STANDARD,
    DRAFT_ALIASES,
    CxxStandard,
    DetectionResult,
    EvidenceSource,
)

__all__ = [
    "CxxStandard",
    "DEFAULT_STANDARD",
    "DetectionResult",
    "DRAFT_ALIASES",
    "EvidenceSource",
]
